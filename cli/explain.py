"""Feedback explanation CLI flows.

Loads a matcher's output from a JSON file and shows the selected feedback.

A match file is either an object::

    {"score": 1, "sequence": [{"pattern": "spatial", "token": "qwerty", "turns": 1}]}

or a bare list of matches, in which case the score is asked for.
"""

from typing import Any, Optional

from core import (
    MIN_SCORE,
    MAX_SCORE,
    Feedback,
    Match,
    MatchError,
    StorageError,
    all_message_keys,
    get_feedback,
    load_json,
    sequence_from_dicts,
)
from cli.prompts import prompt_for_path, prompt_for_score, confirm_action


def parse_match_document(data: Any) -> tuple[Optional[int], list[Match]]:
    """Split a loaded match document into its score and sequence.

    Returns:
        Tuple of (score or None when absent, parsed sequence)

    Raises:
        MatchError: If the document shape, score or any match is invalid
    """
    if isinstance(data, list):
        return None, sequence_from_dicts(data)

    if not isinstance(data, dict):
        raise MatchError("Match file must contain an object or a list of matches")

    records = data.get("sequence", [])
    if not isinstance(records, list):
        raise MatchError("'sequence' must be a list of matches")

    score = data.get("score")
    if score is not None:
        if isinstance(score, bool) or not isinstance(score, int):
            raise MatchError("'score' must be an integer")
        if not MIN_SCORE <= score <= MAX_SCORE:
            raise MatchError(f"'score' must be between {MIN_SCORE} and {MAX_SCORE}")

    return score, sequence_from_dicts(records)


def print_feedback(feedback: Feedback) -> None:
    """Display feedback keys."""
    if feedback.warning:
        print(f"Warning: {feedback.warning.value}")
    else:
        print("Warning: (none)")

    if feedback.suggestions:
        print("Suggestions:")
        for key in feedback.suggestions:
            print(f"  - {key.value}")
    else:
        print("Suggestions: (none)")


def explain_file(path: str, score: Optional[int] = None) -> Feedback:
    """Select feedback for a match file without prompting.

    Args:
        path: Match JSON file
        score: Overrides the score stored in the file

    Raises:
        StorageError: If the file is missing or not JSON
        MatchError: If the contents are invalid or no score is available
    """
    file_score, sequence = parse_match_document(load_json(path))
    if score is None:
        score = file_score
    if score is None:
        raise MatchError("No score given and none stored in the match file")

    feedback = get_feedback(score, sequence)
    print_feedback(feedback)
    return feedback


def explain_flow() -> None:
    """Interactive flow: load a match file and explain its feedback."""
    print("\n--- Explain Feedback ---")

    path = prompt_for_path()
    if path is None:
        print("Canceled.")
        return

    try:
        score, sequence = parse_match_document(load_json(path))
    except (StorageError, MatchError) as e:
        print(f"Could not load matches: {e}")
        return

    if score is None or confirm_action(f"File score is {score}. Use a different score?"):
        score = prompt_for_score()
        if score is None:
            print("Canceled.")
            return

    print(f"\n{len(sequence)} match(es), score {score}")
    print_feedback(get_feedback(score, sequence))


def list_messages_flow() -> None:
    """Print every message key feedback can contain."""
    keys = all_message_keys()

    print("\n--- Warning Keys ---")
    for key in keys["warnings"]:
        print(f"  {key}")

    print("\n--- Suggestion Keys ---")
    for key in keys["suggestions"]:
        print(f"  {key}")
