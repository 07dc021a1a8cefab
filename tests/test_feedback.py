import itertools

import pytest

from wordle_feedback.feedback import GuessResult, LetterState, evaluate_guess, evaluate_letter


C = LetterState.CORRECT
P = LetterState.PRESENT
A = LetterState.ABSENT


@pytest.mark.parametrize("guess,answer,expected", [
    ("AABBC", "BBAAC", (P, P, P, P, C)),
    ("RARE", "SOAP", (A, P, A, A)),
    ("belle", "level", (A, C, P, P, P)),
    ("eerie", "crane", (A, A, P, A, C)),
    ("queue", "eerie", (A, A, P, A, C)),
    ("kayak", "kayak", (C, C, C, C, C)),
])
def test_evaluate_guess_golden(guess, answer, expected):
    assert evaluate_guess(guess, answer).states == expected


# Repeated guess letters are not rationed against the answer's letter count.
@pytest.mark.parametrize("guess,answer,expected", [
    ("llama", "total", (P, P, P, A, P)),
    ("mummy", "madam", (C, A, P, P, A)),
])
def test_repeated_letters_are_not_counted(guess, answer, expected):
    assert evaluate_guess(guess, answer).states == expected


def test_correct_letter_elsewhere_does_not_make_present():
    # the only 'e' in the answer is already matched by the guess
    assert evaluate_letter("eerie", "crane", 0) is A
    assert evaluate_letter("eerie", "crane", 4) is C


def test_comparison_is_case_sensitive():
    assert evaluate_guess("Crane", "crane").states == (A, C, C, C, C)


def test_result_keeps_guess():
    result = evaluate_guess("raise", "crane")
    assert result.guess == "raise"
    assert len(result.states) == 5


def test_empty_words():
    assert evaluate_guess("", "").states == ()


@pytest.mark.parametrize("guess,answer", [
    ("crane", "cran"),
    ("cra", "crane"),
    ("", "a"),
])
def test_length_mismatch_raises(guess, answer):
    with pytest.raises(ValueError, match="same length"):
        evaluate_guess(guess, answer)


def test_guess_result_rejects_wrong_state_count():
    with pytest.raises(ValueError):
        GuessResult("crane", (C, C))


def test_guess_result_is_immutable():
    result = evaluate_guess("crane", "crane")
    with pytest.raises(AttributeError):
        result.guess = "slate"


def test_render():
    result = evaluate_guess("RARE", "SOAP")
    assert result.render() == "\U0001F7E5\U0001F7E8\U0001F7E5\U0001F7E5"
    assert str(result) == result.render()


def test_every_state_has_a_distinct_glyph():
    glyphs = {state.glyph for state in LetterState}
    assert len(glyphs) == 3


def test_letter_states_have_no_ordering():
    with pytest.raises(TypeError):
        C < P


def test_self_match(library):
    for word in library.guesses:
        assert all(state is C for state in evaluate_guess(word, word).states)


def test_state_properties_over_library(library):
    for guess, answer in itertools.product(library.guesses, library.answers):
        result = evaluate_guess(guess, answer)
        assert len(result.states) == len(guess)
        for i, state in enumerate(result.states):
            assert (state is C) == (guess[i] == answer[i])
            if state is A:
                assert guess[i] != answer[i]
