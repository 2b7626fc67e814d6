import json
import os
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from flashcards.data.models import Deck
from flashcards.data.repos import create_deck_with_cards
from studysuite.models import User


class Command(BaseCommand):
    help = "Replace all users and decks with the demo data set (ledger rows are kept)"

    def add_arguments(self, parser):
        parser.add_argument(
            "--file", default="demo_data.json", help="JSON file name to load data from"
        )

    def handle(self, *args, **options):
        file_name = options.get("file", "demo_data.json")
        json_file_path = os.path.join(os.path.dirname(__file__), file_name)

        try:
            with open(json_file_path, encoding="utf-8") as json_file:
                data = json.load(json_file)
        except (OSError, json.JSONDecodeError) as e:
            raise CommandError(f"Error loading data from {file_name}: {e}")

        with transaction.atomic():
            for model in (Deck, User):
                model.objects.all().delete()
            self.stdout.write(self.style.SUCCESS("All existing users and decks have been deleted"))

            User.objects.create_superuser(
                "testuser", email="testuser@example.com", password="testpassword"
            )
            for entry in data.get("users", []):
                user = User.objects.create_user(
                    entry["username"],
                    email=f"{entry['username']}@example.com",
                    password="testpassword",
                    college_id=entry.get("college_id"),
                )
                for deck in entry.get("decks", []):
                    create_deck_with_cards(
                        user.id, deck["name"], deck.get("cards", []),
                        description=deck.get("description"),
                    )

        self.stdout.write(
            self.style.SUCCESS(f"Demo data loaded successfully from {file_name}")
        )
