"""Feedback selection for a decomposed password.

Turns a strength score and the matcher's sequence of patterns into one
optional warning key and an ordered list of suggestion keys. Pure and
stateless: safe to call from any thread.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from core.config import (
    STRONG_SCORE_THRESHOLD,
    TOP_10_RANK,
    TOP_100_RANK,
    SIMILAR_PASSWORD_MAX_GUESSES_LOG10,
    MIN_REVERSED_TOKEN_LENGTH,
)
from core.matches import (
    Match,
    Pattern,
    DictionaryMatch,
    SpatialMatch,
    RepeatMatch,
    RegexMatch,
)
from core.messages import WarningKey, SuggestionKey


# Token shapes, as classified by the scoring layer
START_UPPER = re.compile(r'^[A-Z][^A-Z]+$')
ALL_UPPER = re.compile(r'^[^a-z]+$')

NAME_DICTIONARIES = {"surnames", "male_names", "female_names"}


@dataclass
class Feedback:
    """Warning and suggestions for one password."""
    warning: Optional[WarningKey] = None
    suggestions: list[SuggestionKey] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Plain-string form for JSON output."""
        return {
            "warning": self.warning.value if self.warning else None,
            "suggestions": [s.value for s in self.suggestions],
        }


def default_feedback() -> Feedback:
    """Starting feedback, shown before any pattern has been typed."""
    return Feedback(
        suggestions=[
            SuggestionKey.FEW_WORDS,
            SuggestionKey.AVOID_COMMON_PHRASES,
            SuggestionKey.NO_NEED_SYMBOLS,
        ]
    )


def longest_match(sequence: Sequence[Match]) -> Optional[Match]:
    """The match with the longest token, the earliest on ties; None if empty."""
    if not sequence:
        return None
    # max() keeps the first of equally long tokens
    return max(sequence, key=lambda m: len(m.token))


def get_feedback(score: int, sequence: Sequence[Match]) -> Feedback:
    """Select feedback for a scored password decomposition.

    Args:
        score: Strength level from 0 (weakest) to 4 (strongest)
        sequence: Ordered matches covering the password, possibly empty

    Returns:
        A new Feedback. Strong passwords get no warning and no suggestions;
        otherwise the longest match drives the advice and "add another
        word" always comes first.
    """
    if not sequence:
        return default_feedback()

    if score > STRONG_SCORE_THRESHOLD:
        return Feedback()

    feedback = get_match_feedback(longest_match(sequence), len(sequence) == 1)

    if feedback is None:
        return Feedback(suggestions=[SuggestionKey.ADD_ANOTHER_WORD])

    feedback.suggestions.insert(0, SuggestionKey.ADD_ANOTHER_WORD)
    return feedback


def _spatial_feedback(match: SpatialMatch, is_sole_match: bool) -> Feedback:
    if match.turns == 1:
        warning = WarningKey.STRAIGHT_ROWS_EASY_GUESS
    else:
        warning = WarningKey.SHORT_KEYBOARD_PATTERNS_EASY_GUESS
    return Feedback(warning, [SuggestionKey.USE_LONGER_KEYBOARD_PATTERN])


def _repeat_feedback(match: RepeatMatch, is_sole_match: bool) -> Feedback:
    if len(match.base_token) == 1:
        warning = WarningKey.REPEATS_EASY_GUESS
    else:
        warning = WarningKey.REPEATS_SLIGHTLY_HARDER_GUESS
    return Feedback(warning, [SuggestionKey.AVOID_REPEATED_WORDS])


def _sequence_feedback(match: Match, is_sole_match: bool) -> Feedback:
    return Feedback(WarningKey.SEQUENCES_EASY_GUESS, [SuggestionKey.AVOID_SEQUENCES])


def _regex_feedback(match: RegexMatch, is_sole_match: bool) -> Optional[Feedback]:
    if match.regex_name != "recent_year":
        return None
    return Feedback(
        WarningKey.RECENT_YEARS_EASY_GUESS,
        [SuggestionKey.AVOID_RECENT_YEARS, SuggestionKey.AVOID_ASSOCIATED_YEARS],
    )


def _date_feedback(match: Match, is_sole_match: bool) -> Feedback:
    return Feedback(WarningKey.DATES_EASY_GUESS, [SuggestionKey.AVOID_DATES_ASSOCIATED_YEARS])


def _no_feedback(match: Match, is_sole_match: bool) -> None:
    return None


def _dictionary_warning(match: DictionaryMatch, is_sole_match: bool) -> Optional[WarningKey]:
    if match.dictionary_name == "passwords":
        if is_sole_match and not match.l33t and not match.reversed:
            if match.rank <= TOP_10_RANK:
                return WarningKey.TOP_10_COMMON_PASSWORD
            if match.rank <= TOP_100_RANK:
                return WarningKey.TOP_100_COMMON_PASSWORD
            return WarningKey.VERY_COMMON_PASSWORD
        if match.guesses_log10 <= SIMILAR_PASSWORD_MAX_GUESSES_LOG10:
            return WarningKey.SIMILAR_TO_COMMON_PASSWORD
        return None

    if match.dictionary_name == "english_wikipedia":
        return WarningKey.WORD_BY_ITSELF_EASY_GUESS if is_sole_match else None

    if match.dictionary_name in NAME_DICTIONARIES:
        if is_sole_match:
            return WarningKey.NAMES_SURNAMES_BY_THEMSELVES_EASY_GUESS
        return WarningKey.COMMON_NAMES_SURNAMES_EASY_GUESS

    return None


def get_dictionary_match_feedback(match: DictionaryMatch, is_sole_match: bool) -> Feedback:
    """Feedback for a dictionary word.

    The warning depends on which dictionary matched and whether the word
    is the whole password; suggestions call out capitalization, reversal
    and l33t substitutions, which add little strength.
    """
    suggestions = []
    word = match.token

    if START_UPPER.match(word):
        suggestions.append(SuggestionKey.CAPITALIZATION_NOT_HELP_MUCH)
    elif ALL_UPPER.match(word) and word.upper() == word and word.lower() != word:
        suggestions.append(SuggestionKey.ALL_UPPERCASE_ALMOST_EASY_GUESS)

    if match.reversed and len(word) >= MIN_REVERSED_TOKEN_LENGTH:
        suggestions.append(SuggestionKey.REVERSED_WORDS_NOT_MUCH_HARDER_GUESS)
    if match.l33t:
        suggestions.append(SuggestionKey.PREDICTABLE_SUBSTITUTIONS_NOT_HELP_MUCH)

    return Feedback(_dictionary_warning(match, is_sole_match), suggestions)


# One rule per known pattern kind
MATCH_FEEDBACK_RULES: dict[Pattern, Callable[..., Optional[Feedback]]] = {
    Pattern.DICTIONARY: get_dictionary_match_feedback,
    Pattern.SPATIAL: _spatial_feedback,
    Pattern.REPEAT: _repeat_feedback,
    Pattern.SEQUENCE: _sequence_feedback,
    Pattern.REGEX: _regex_feedback,
    Pattern.DATE: _date_feedback,
    Pattern.BRUTEFORCE: _no_feedback,
}


def get_match_feedback(match: Match, is_sole_match: bool) -> Optional[Feedback]:
    """Feedback for a single match, or None when its pattern has no advice.

    Args:
        match: The match to explain
        is_sole_match: True if the match is the only one in its sequence

    Returns:
        Feedback with a fresh suggestions list, or None
    """
    rule = MATCH_FEEDBACK_RULES.get(match.kind) if match.kind else None
    if rule is None:
        logging.debug(f"No feedback rule for pattern '{match.pattern}'")
        return None
    return rule(match, is_sole_match)
