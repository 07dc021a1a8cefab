"""
feedback.py

Scores a guess against an answer, one letter state per position.

Duplicate letters follow a local rule rather than the usual remaining-count
rule. A guess letter that misses its own position is PRESENT when the answer
holds that letter at some other position j whose guess letter is not itself
correct at j. Nothing is "used up", so a letter repeated in the guess can be
marked PRESENT several times against a single occurrence in the answer:

    AABBC vs BBAAC  ->  PRESENT PRESENT PRESENT PRESENT CORRECT
"""

from dataclasses import dataclass
from enum import Enum


class LetterState(Enum):
    """Feedback for a single guessed letter."""

    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"

    @property
    def glyph(self) -> str:
        if self is LetterState.CORRECT:
            return "\U0001F7E9"
        if self is LetterState.PRESENT:
            return "\U0001F7E8"
        if self is LetterState.ABSENT:
            return "\U0001F7E5"
        raise ValueError(f"unhandled letter state: {self!r}")


@dataclass(frozen=True)
class GuessResult:
    guess: str
    states: tuple

    def __post_init__(self):
        if len(self.states) != len(self.guess):
            raise ValueError(
                f"expected {len(self.guess)} states for guess {self.guess!r}, "
                f"got {len(self.states)}"
            )

    def render(self) -> str:
        """Glyph line for console output, one square per letter."""
        return "".join(state.glyph for state in self.states)

    def __str__(self):
        return self.render()


def evaluate_letter(guess: str, answer: str, i: int) -> LetterState:
    """State of guess[i] against an answer of the same length."""
    g = guess[i]
    if g == answer[i]:
        return LetterState.CORRECT

    for j, a in enumerate(answer):
        if j != i and a == g and guess[j] != a:
            return LetterState.PRESENT

    return LetterState.ABSENT


def evaluate_guess(guess: str, answer: str) -> GuessResult:
    """
    Evaluate every position of guess against answer.

    Both words must have the same length; anything else is a caller error and
    raises ValueError. Comparison is case-sensitive.
    """
    if len(guess) != len(answer):
        raise ValueError(
            f"guess and answer must be the same length: "
            f"{len(guess)} != {len(answer)}"
        )

    states = tuple(evaluate_letter(guess, answer, i) for i in range(len(guess)))
    return GuessResult(guess, states)
