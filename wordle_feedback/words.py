"""
words.py

Handles loading and validating the Wordle word lists.
No numpy here, just clean text handling.
"""

from dataclasses import dataclass
from pathlib import Path


DATA_DIR = Path(__file__).resolve().parent.parent / "data"
GUESSES_PATH = DATA_DIR / "allowed.txt"
ANSWERS_PATH = DATA_DIR / "answers.txt"


class WordListError(ValueError):
    """A word list could not be read or is not of uniform width."""


@dataclass(frozen=True)
class Library:
    """
    Guess words and answer words sharing one fixed word length.

    Built once with load_library() and passed to whatever needs it.
    """

    guesses: tuple
    answers: tuple
    word_length: int


def _split_lines(text):
    # "\n" only, with an optional "\r" before it; no extra word after a final newline
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_word_list(path):
    """
    Load a newline-separated word list.

    Returns:
        words: list of words in file order
        word_length: length of the first word, 0 for an empty file

    Every word must have the same length as the first one. Lines are not
    stripped beyond their line ending, so a blank line in the middle of the
    file counts as a zero-length word.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="") as f:
            words = _split_lines(f.read())
    except (OSError, UnicodeError) as exc:
        raise WordListError(f"could not read word list {path}: {exc}") from exc

    word_length = len(words[0]) if words else 0

    for lineno, word in enumerate(words, start=1):
        if len(word) != word_length:
            raise WordListError(
                f"not all words have the same length in {path}: "
                f"line {lineno} {word!r} has {len(word)}, expected {word_length}"
            )

    return words, word_length


def load_library(guesses_path, answers_path) -> Library:
    """Load both word lists and check that they agree on word length."""
    guesses, guesses_length = load_word_list(guesses_path)
    answers, answers_length = load_word_list(answers_path)

    if guesses_length != answers_length:
        raise WordListError(
            f"guesses and answers must have the same word length: "
            f"{guesses_length} != {answers_length}"
        )

    return Library(tuple(guesses), tuple(answers), guesses_length)


def load_words(data_dir=DATA_DIR) -> Library:
    """
    Build a Library from the word lists shipped in data_dir.

    allowed.txt becomes Library.guesses: it is the wider list and already
    contains every answer, so any answer can also be typed as a guess.
    answers.txt becomes Library.answers.
    """
    data_dir = Path(data_dir)
    return load_library(data_dir / "allowed.txt", data_dir / "answers.txt")
