"""Password Feedback Core Package.

Provides modular components for password feedback selection:
- config: Centralized configuration constants
- messages: Warning and suggestion key vocabulary
- matches: Typed pattern matches and record parsing
- feedback: Feedback selection rules
- storage: File I/O operations
- siem: Security event logging
"""

# Configuration constants
from core.config import (
    MIN_SCORE,
    MAX_SCORE,
    STRONG_SCORE_THRESHOLD,
    MAX_SEQUENCE_LENGTH,
    MAX_TOKEN_LENGTH,
    API_VERSION,
)

# Message vocabulary
from core.messages import WarningKey, SuggestionKey, all_message_keys

# Matches
from core.matches import (
    Pattern,
    Match,
    DictionaryMatch,
    SpatialMatch,
    RepeatMatch,
    SequenceMatch,
    RegexMatch,
    DateMatch,
    BruteforceMatch,
    OtherMatch,
    MatchError,
    match_from_dict,
    sequence_from_dicts,
)

# Feedback selection
from core.feedback import (
    Feedback,
    default_feedback,
    get_feedback,
    longest_match,
    get_match_feedback,
    get_dictionary_match_feedback,
)

# SIEM logging
from core.siem import (
    configure_logging,
    log_siem_event,
    log_feedback_event,
    get_siem_events,
    count_events_by_status,
)

# Storage utilities
from core.storage import StorageError, load_json

__all__ = [
    # Config
    "MIN_SCORE",
    "MAX_SCORE",
    "STRONG_SCORE_THRESHOLD",
    "MAX_SEQUENCE_LENGTH",
    "MAX_TOKEN_LENGTH",
    "API_VERSION",
    # Messages
    "WarningKey",
    "SuggestionKey",
    "all_message_keys",
    # Matches
    "Pattern",
    "Match",
    "DictionaryMatch",
    "SpatialMatch",
    "RepeatMatch",
    "SequenceMatch",
    "RegexMatch",
    "DateMatch",
    "BruteforceMatch",
    "OtherMatch",
    "MatchError",
    "match_from_dict",
    "sequence_from_dicts",
    # Feedback
    "Feedback",
    "default_feedback",
    "get_feedback",
    "longest_match",
    "get_match_feedback",
    "get_dictionary_match_feedback",
    # SIEM
    "configure_logging",
    "log_siem_event",
    "log_feedback_event",
    "get_siem_events",
    "count_events_by_status",
    # Storage
    "StorageError",
    "load_json",
]
