"""Shared CLI prompt utilities.

Common input prompts and validation used across CLI flows.
"""

import os
from typing import Optional

from core import MIN_SCORE, MAX_SCORE


def prompt_for_score() -> Optional[int]:
    """Prompt user for a valid strength score.

    Returns:
        Score as integer, or None to cancel
    """
    while True:
        val = input(
            f"Enter strength score ({MIN_SCORE}-{MAX_SCORE}, or 'q' to cancel): "
        ).strip().lower()

        if val in ['q', 'exit']:
            return None

        try:
            score = int(val)
            if MIN_SCORE <= score <= MAX_SCORE:
                return score
            print(f"Please enter a number between {MIN_SCORE} and {MAX_SCORE}.")
        except ValueError:
            print("Invalid input. Enter a number.")


def prompt_for_path() -> Optional[str]:
    """Prompt user for an existing match file.

    Returns:
        Path string, or None to cancel
    """
    while True:
        val = input("Enter path to a match JSON file (or 'q' to cancel): ").strip()

        if val.lower() in ['q', 'exit']:
            return None
        if not val:
            print("No path entered.")
            continue
        if os.path.isfile(val):
            return val
        print(f"No such file: {val}")


def confirm_action(prompt: str) -> bool:
    """Prompt for a y/n confirmation.

    Returns:
        True if confirmed, False otherwise
    """
    response = input(f"{prompt} (y/n): ").strip().lower()
    return response == 'y'
