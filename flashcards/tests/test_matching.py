import pytest

from flashcards.domain.matching import keywords, match_answer, normalize, similarity


def test_normalize():
    assert normalize("  The  Mitochondria!!  ") == "the mitochondria"
    assert normalize("Paris, France.") == "paris france"


def test_keywords_drop_stop_words_and_single_letters():
    assert keywords("the powerhouse of a cell x") == ["powerhouse", "cell"]


@pytest.mark.parametrize("reference", ["Paris", "The mitochondria", "H2O", "a", "E = mc^2"])
def test_exact_answer_matches_fully(reference):
    result = match_answer(reference, reference)
    assert result.is_correct is True
    assert result.similarity == 1.0


def test_case_and_punctuation_are_ignored():
    result = match_answer("paris!", "PARIS")
    assert result.is_correct is True
    assert result.similarity == 1.0


def test_extra_words_still_cover_reference():
    result = match_answer("Paris, France", "Paris")
    assert result.is_correct is True
    assert result.similarity == 1.0


def test_wrong_answer_is_rejected():
    result = match_answer("Berlin", "Paris")
    assert result.is_correct is False
    assert 0.0 <= result.similarity < 0.7


def test_single_typo_is_tolerated():
    assert match_answer("mitochondira", "The mitochondria").is_correct is True


def test_reordered_answer_is_accepted():
    assert match_answer("synthesis of protein", "protein synthesis").is_correct is True


def test_missing_most_keywords_is_rejected():
    reference = "photosynthesis converts light energy into chemical energy stored in glucose"
    result = match_answer("light", reference)
    assert result.is_correct is False
    assert result.similarity < 0.5


def test_stop_word_only_reference_uses_whole_string():
    close = match_answer("to be or not to bee", "to be or not to be")
    assert close.is_correct is True
    far = match_answer("whatever", "to be or not to be")
    assert far.is_correct is False


@pytest.mark.parametrize("answer,reference", [("", ""), ("", "Paris"), ("Paris", ""), ("!!!", "?")])
def test_degenerate_input_never_fails(answer, reference):
    result = match_answer(answer, reference)
    assert isinstance(result.is_correct, bool)
    assert 0.0 <= result.similarity <= 1.0


def test_empty_reference_against_text_is_wrong():
    result = match_answer("Paris", "")
    assert result.is_correct is False
    assert result.similarity == 0.0


def test_similarity_bounds():
    assert similarity("", "") == 1.0
    assert similarity("abc", "abc") == 1.0
    assert similarity("abc", "xyz") == 0.0
