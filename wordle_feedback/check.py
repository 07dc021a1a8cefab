"""
check.py

Exhaustive consistency sweep: evaluates every guess against every answer of
a library and checks each letter state against the scoring rule.
"""

from tqdm import tqdm

from wordle_feedback.feedback import LetterState, evaluate_guess


class ConsistencyError(AssertionError):
    """A letter state disagrees with its guess and answer."""


def _fail(result, answer, i, reason):
    raise ConsistencyError(
        f"{result.guess!r} vs {answer!r}, position {i} "
        f"({result.guess[i]!r}) is {result.states[i].name}: {reason}"
    )


def check_result(result, answer):
    """Raise ConsistencyError if result is not valid feedback for answer."""
    guess = result.guess
    if len(result.states) != len(guess):
        raise ConsistencyError(
            f"{guess!r} vs {answer!r}: {len(result.states)} states "
            f"for {len(guess)} letters"
        )

    for i, state in enumerate(result.states):
        g = guess[i]
        a = answer[i]
        # another answer position holds g and is not itself matched
        elsewhere = any(
            answer[j] == g and result.states[j] is not LetterState.CORRECT
            for j in range(len(answer))
            if j != i
        )

        if state is LetterState.CORRECT:
            if g != a:
                _fail(result, answer, i, f"answer has {a!r} there")
        elif state is LetterState.PRESENT:
            if g == a:
                _fail(result, answer, i, "letters match")
            if not elsewhere:
                _fail(result, answer, i, "no unmatched occurrence elsewhere")
        elif state is LetterState.ABSENT:
            if g == a:
                _fail(result, answer, i, "letters match")
            if elsewhere:
                _fail(result, answer, i, "an unmatched occurrence exists elsewhere")
        else:
            raise ValueError(f"unhandled letter state: {state!r}")


def check_library(library, progress=True) -> int:
    """
    Evaluate and check every (guess, answer) pair in library.

    Returns the number of pairs checked. Stops at the first inconsistency.
    """
    checked = 0
    for answer in tqdm(library.answers, desc="Answers", disable=not progress):
        for guess in library.guesses:
            check_result(evaluate_guess(guess, answer), answer)
            checked += 1
    return checked
