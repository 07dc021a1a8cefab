"""
main.py

Command-line driver for Wordle guess feedback.

Modes:
GUESS: score one guess against -answer WORD, or a random answer
-matrix: evaluate every guess against every answer into a pattern matrix
-check: evaluate every pair and verify each letter state
"""

import argparse
import random

import numpy as np

from wordle_feedback.check import ConsistencyError, check_library
from wordle_feedback.feedback import evaluate_guess
from wordle_feedback.patterns import build_matrix
from wordle_feedback.words import ANSWERS_PATH, GUESSES_PATH, WordListError, load_library


def run_single_guess(library, guess, answer, rng):
    if len(guess) != library.word_length:
        raise ValueError(
            f"guess must be {library.word_length} letters long: {guess}"
        )
    if guess not in library.guesses:
        raise ValueError(f"word not found in guess list: {guess}")

    if answer is None:
        if not library.answers:
            raise ValueError("answer list is empty")
        answer = rng.choice(library.answers)
    elif answer not in library.answers:
        raise ValueError(f"word not found in answer list: {answer}")

    result = evaluate_guess(guess, answer)
    print(f"{result.guess}  {result.render()}")
    return result


def run_matrix(library, workers):
    print(
        f"Building pattern matrix for {len(library.guesses):,} guesses x "
        f"{len(library.answers):,} answers..."
    )
    matrix = build_matrix(library, workers=workers)

    distinct = np.unique(matrix).size
    all_correct = 3**library.word_length - 1
    print(f"Matrix shape: {matrix.shape}, dtype: {matrix.dtype}")
    print(f"Distinct feedback patterns: {distinct:,}")
    print(f"All-correct cells: {int(np.count_nonzero(matrix == all_correct)):,}")
    return matrix


def run_check(library):
    print("Checking every guess against every answer...")
    checked = check_library(library)
    print(f"All {checked:,} guess/answer pairs consistent.")
    return checked


def parse_args():
    parser = argparse.ArgumentParser(
        description="Score Wordle guesses against answers."
    )
    parser.add_argument(
        "guess",
        nargs="?",
        default=None,
        help="Guess to score.",
    )
    parser.add_argument(
        "-answer",
        type=str,
        default=None,
        help="Answer to score against (default: random from the answer list).",
    )
    parser.add_argument(
        "-guesses",
        type=str,
        default=str(GUESSES_PATH),
        help="Path to the guess word list.",
    )
    parser.add_argument(
        "-answers",
        type=str,
        default=str(ANSWERS_PATH),
        help="Path to the answer word list.",
    )
    parser.add_argument(
        "-seed",
        type=int,
        default=None,
        help="Seed for the random answer draw.",
    )
    parser.add_argument(
        "-matrix",
        action="store_true",
        help="Build the full guess x answer pattern matrix and print a summary.",
    )
    parser.add_argument(
        "-workers",
        type=int,
        default=None,
        help="Worker processes for -matrix (default: serial).",
    )
    parser.add_argument(
        "-check",
        action="store_true",
        help="Verify the feedback for every guess/answer pair.",
    )
    args = parser.parse_args()
    if args.guess is None and not (args.matrix or args.check):
        parser.error("a GUESS is required unless -matrix or -check is given")
    if args.guess is None and args.answer is not None:
        parser.error("-answer needs a GUESS to score against it")
    return args


def main():
    args = parse_args()

    try:
        library = load_library(args.guesses, args.answers)
    except WordListError as exc:
        raise SystemExit(str(exc)) from exc

    if args.guess is not None:
        guess = args.guess.lower()
        answer = args.answer.lower() if args.answer is not None else None
        try:
            run_single_guess(library, guess, answer, random.Random(args.seed))
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc

    if args.matrix:
        try:
            run_matrix(library, args.workers)
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc

    if args.check:
        try:
            run_check(library)
        except ConsistencyError as exc:
            raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
