from pathlib import Path

import pytest

from wordle_feedback.words import load_library


DATA_DIR = Path(__file__).resolve().parent / "data"


@pytest.fixture(scope="session")
def library():
    # the same list serves as both guesses and answers
    allowed = DATA_DIR / "allowed.txt"
    return load_library(allowed, allowed)
