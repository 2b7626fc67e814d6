# Django discovers models through this module
from .data.models import Card, Deck  # noqa: F401
