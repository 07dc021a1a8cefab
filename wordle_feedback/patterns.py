"""
patterns.py

Encodes guess feedback as integers and builds the feedback pattern matrix.

Matrix shape:
    (n_guesses, n_answers)

Each cell holds the feedback for one (guess, answer) pair encoded in base-3,
first letter most significant:

    0 = absent
    1 = present
    2 = correct

For 5-letter words that is 0..242 and fits in a uint8. Longer words get a
wider dtype, see pattern_dtype().
"""

import multiprocessing as mp

import numpy as np
from tqdm import tqdm

from wordle_feedback.feedback import LetterState, evaluate_guess


# Widest word whose codes still fit in a uint64 (3**40 - 1 < 2**64).
MAX_WORD_LENGTH = 40

_DTYPE_LIMITS = (
    (5, np.uint8),
    (10, np.uint16),
    (20, np.uint32),
    (MAX_WORD_LENGTH, np.uint64),
)


def state_digit(state: LetterState) -> int:
    if state is LetterState.ABSENT:
        return 0
    if state is LetterState.PRESENT:
        return 1
    if state is LetterState.CORRECT:
        return 2
    raise ValueError(f"unhandled letter state: {state!r}")


_DIGIT_STATES = (LetterState.ABSENT, LetterState.PRESENT, LetterState.CORRECT)


def encode_states(states) -> int:
    """Convert a sequence of letter states to a single base-3 code."""
    code = 0
    for state in states:
        code = code * 3 + state_digit(state)
    return code


def encode_pattern(guess: str, answer: str) -> int:
    """Encode the feedback for a (guess, answer) pair as a base-3 integer."""
    return encode_states(evaluate_guess(guess, answer).states)


def decode_pattern(code: int, word_length: int) -> tuple:
    """Inverse of encode_states() for a known word length."""
    if not 0 <= code < 3**word_length:
        raise ValueError(
            f"pattern code {code} out of range for word length {word_length}"
        )

    digits = []
    for _ in range(word_length):
        code, digit = divmod(code, 3)
        digits.append(_DIGIT_STATES[digit])
    return tuple(reversed(digits))


def pattern_dtype(word_length: int):
    """Smallest unsigned dtype that can hold every code for word_length."""
    for limit, dtype in _DTYPE_LIMITS:
        if word_length <= limit:
            return dtype
    raise ValueError(
        f"word length {word_length} is too long for a pattern matrix "
        f"(max {MAX_WORD_LENGTH})"
    )


_ROW_WORKER_STATE = {}


def _init_row_worker(answers):
    _ROW_WORKER_STATE["answers"] = answers


def _encode_row(guess, answers):
    return [encode_pattern(guess, answer) for answer in answers]


def _worker_row(guess):
    return _encode_row(guess, _ROW_WORKER_STATE["answers"])


def build_matrix(library, workers=None, progress=True) -> np.ndarray:
    """
    Compute the full pattern matrix for a library.

    Every guess is evaluated against every answer. Rows are independent, so
    with workers > 1 they are spread over a process pool; the result is the
    same as a serial build.
    """
    guesses = library.guesses
    answers = library.answers
    dtype = pattern_dtype(library.word_length)

    matrix = np.zeros((len(guesses), len(answers)), dtype=dtype)
    if matrix.size == 0:
        return matrix

    bar_kwargs = {"total": len(guesses), "desc": "Guesses", "disable": not progress}

    if workers is not None and workers > 1:
        start_methods = mp.get_all_start_methods()
        start_method = "fork" if "fork" in start_methods else "spawn"
        ctx = mp.get_context(start_method)
        chunk_size = max(1, len(guesses) // (workers * 8))

        with ctx.Pool(
            processes=workers,
            initializer=_init_row_worker,
            initargs=(answers,),
        ) as pool:
            # imap keeps row order, so row i is always guesses[i]
            rows = pool.imap(_worker_row, guesses, chunksize=chunk_size)
            for i, row in enumerate(tqdm(rows, **bar_kwargs)):
                matrix[i] = row
    else:
        for i, guess in enumerate(tqdm(guesses, **bar_kwargs)):
            matrix[i] = _encode_row(guess, answers)

    return matrix
