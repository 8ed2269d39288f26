"""Feedback message vocabulary.

Warnings and suggestions are opaque keys. Rendering them into display
text belongs to the localization layer, which must provide a translation
for every member listed here.
"""

from enum import Enum


class WarningKey(str, Enum):
    """Keys for the single warning shown with a feedback result."""
    STRAIGHT_ROWS_EASY_GUESS = "straight_rows_easy_guess"
    SHORT_KEYBOARD_PATTERNS_EASY_GUESS = "short_keyboard_patterns_easy_guess"
    REPEATS_EASY_GUESS = "repeats_easy_guess"
    REPEATS_SLIGHTLY_HARDER_GUESS = "repeats_slightly_harder_guess"
    SEQUENCES_EASY_GUESS = "sequences_easy_guess"
    RECENT_YEARS_EASY_GUESS = "recent_years_easy_guess"
    DATES_EASY_GUESS = "dates_easy_guess"
    TOP_10_COMMON_PASSWORD = "top_10_common_password"
    TOP_100_COMMON_PASSWORD = "top_100_common_password"
    VERY_COMMON_PASSWORD = "very_common_password"
    SIMILAR_TO_COMMON_PASSWORD = "similar_to_common_password"
    WORD_BY_ITSELF_EASY_GUESS = "word_by_itself_easy_guess"
    NAMES_SURNAMES_BY_THEMSELVES_EASY_GUESS = "names_surnames_by_themselves_easy_guess"
    COMMON_NAMES_SURNAMES_EASY_GUESS = "common_names_surnames_easy_guess"


class SuggestionKey(str, Enum):
    """Keys for the ordered suggestions list."""
    FEW_WORDS = "few_words"
    AVOID_COMMON_PHRASES = "avoid_common_phrases"
    NO_NEED_SYMBOLS = "no_need_symbols"
    ADD_ANOTHER_WORD = "add_another_word"
    USE_LONGER_KEYBOARD_PATTERN = "use_longer_keyboard_pattern"
    AVOID_REPEATED_WORDS = "avoid_repeated_words"
    AVOID_SEQUENCES = "avoid_sequences"
    AVOID_RECENT_YEARS = "avoid_recent_years"
    AVOID_ASSOCIATED_YEARS = "avoid_associated_years"
    AVOID_DATES_ASSOCIATED_YEARS = "avoid_dates_associated_years"
    CAPITALIZATION_NOT_HELP_MUCH = "capitalization_not_help_much"
    ALL_UPPERCASE_ALMOST_EASY_GUESS = "all_uppercase_almost_easy_guess"
    REVERSED_WORDS_NOT_MUCH_HARDER_GUESS = "reversed_words_not_much_harder_guess"
    PREDICTABLE_SUBSTITUTIONS_NOT_HELP_MUCH = "predictable_substitutions_not_help_much"


def all_message_keys() -> dict[str, list[str]]:
    """List every key the localization layer has to translate.

    Returns:
        Dictionary with "warnings" and "suggestions" key lists,
        in declaration order
    """
    return {
        "warnings": [key.value for key in WarningKey],
        "suggestions": [key.value for key in SuggestionKey],
    }
