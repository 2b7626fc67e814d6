"""Lenient comparison of a typed answer against the reference answer."""
import re
from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein

from ..config import (
    FUZZY_MIN_WORD_LENGTH,
    KEYWORD_COVERAGE_THRESHOLD,
    TEXT_SIMILARITY_THRESHOLD,
    WORD_SIMILARITY_THRESHOLD,
)

STOP_WORDS = frozenset({
    "a", "an", "the", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could",
    "should", "may", "might", "must", "shall", "can", "need", "dare",
    "ought", "used", "to", "of", "in", "for", "on", "with", "at", "by",
    "from", "as", "into", "through", "during", "before", "after",
    "above", "below", "between", "under", "again", "further", "then",
    "once", "here", "there", "when", "where", "why", "how", "all",
    "each", "few", "more", "most", "other", "some", "such", "no", "nor",
    "not", "only", "own", "same", "so", "than", "too", "very", "just",
    "and", "but", "if", "or", "because", "until", "while", "although",
    "it", "its", "this", "that", "these", "those", "which", "who", "whom",
})

_PUNCTUATION = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class MatchResult:
    is_correct: bool
    similarity: float


def normalize(text: str) -> str:
    text = _PUNCTUATION.sub("", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def keywords(normalized: str) -> list[str]:
    return [w for w in normalized.split() if len(w) > 1 and w not in STOP_WORDS]


def similarity(a: str, b: str) -> float:
    # 1 - distance / max(len); two empty strings are identical
    return Levenshtein.normalized_similarity(a, b)


def _word_matches(answer_word: str, reference_word: str) -> bool:
    if answer_word == reference_word:
        return True
    if len(answer_word) >= FUZZY_MIN_WORD_LENGTH and len(reference_word) >= FUZZY_MIN_WORD_LENGTH:
        return similarity(answer_word, reference_word) >= WORD_SIMILARITY_THRESHOLD
    return False


def match_answer(answer: str, reference: str) -> MatchResult:
    answer_norm = normalize(answer or "")
    reference_norm = normalize(reference or "")

    if answer_norm == reference_norm:
        return MatchResult(True, 1.0)

    text_similarity = similarity(answer_norm, reference_norm)
    reference_words = keywords(reference_norm)
    if not reference_words:
        return MatchResult(text_similarity >= TEXT_SIMILARITY_THRESHOLD, text_similarity)

    answer_words = keywords(answer_norm)
    matched = sum(
        1 for ref in reference_words
        if any(_word_matches(word, ref) for word in answer_words)
    )
    coverage = matched / len(reference_words)

    return MatchResult(
        is_correct=coverage >= KEYWORD_COVERAGE_THRESHOLD
        or text_similarity >= TEXT_SIMILARITY_THRESHOLD,
        similarity=max(coverage, text_similarity),
    )
