"""Pattern matches produced by the password matcher.

A password is decomposed upstream into an ordered, non-overlapping
sequence of matches. Each recognised pattern kind has its own frozen
dataclass carrying the fields the feedback rules read; tags outside
``Pattern`` are kept as ``OtherMatch`` so new matcher output never breaks
feedback selection.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Iterable, Mapping, Optional


class Pattern(str, Enum):
    """Pattern kinds the matcher is known to emit."""
    DICTIONARY = "dictionary"
    SPATIAL = "spatial"
    REPEAT = "repeat"
    SEQUENCE = "sequence"
    REGEX = "regex"
    DATE = "date"
    BRUTEFORCE = "bruteforce"


class MatchError(ValueError):
    """A match record is missing a field its pattern requires."""
    pass


@dataclass(frozen=True)
class Match:
    """Base for a single recognised substring of a password."""
    token: str

    kind: ClassVar[Optional[Pattern]] = None

    @property
    def pattern(self) -> str:
        return self.kind.value if self.kind else ""


@dataclass(frozen=True)
class DictionaryMatch(Match):
    dictionary_name: str = ""
    rank: int = 0
    guesses_log10: float = 0.0
    l33t: bool = False
    reversed: bool = False

    kind: ClassVar[Optional[Pattern]] = Pattern.DICTIONARY


@dataclass(frozen=True)
class SpatialMatch(Match):
    turns: int = 0

    kind: ClassVar[Optional[Pattern]] = Pattern.SPATIAL


@dataclass(frozen=True)
class RepeatMatch(Match):
    base_token: str = ""

    kind: ClassVar[Optional[Pattern]] = Pattern.REPEAT


@dataclass(frozen=True)
class SequenceMatch(Match):
    kind: ClassVar[Optional[Pattern]] = Pattern.SEQUENCE


@dataclass(frozen=True)
class RegexMatch(Match):
    regex_name: str = ""

    kind: ClassVar[Optional[Pattern]] = Pattern.REGEX


@dataclass(frozen=True)
class DateMatch(Match):
    kind: ClassVar[Optional[Pattern]] = Pattern.DATE


@dataclass(frozen=True)
class BruteforceMatch(Match):
    kind: ClassVar[Optional[Pattern]] = Pattern.BRUTEFORCE


@dataclass(frozen=True)
class OtherMatch(Match):
    """A match whose pattern tag this service does not recognise."""
    tag: str = ""

    @property
    def pattern(self) -> str:
        return self.tag


# Required fields per pattern: name -> accepted types
_REQUIRED_FIELDS: dict[Pattern, dict[str, tuple[type, ...]]] = {
    Pattern.DICTIONARY: {
        "dictionary_name": (str,),
        "rank": (int,),
        "guesses_log10": (int, float),
    },
    Pattern.SPATIAL: {"turns": (int,)},
    Pattern.REPEAT: {"base_token": (str,)},
    Pattern.SEQUENCE: {},
    Pattern.REGEX: {"regex_name": (str,)},
    Pattern.DATE: {},
    Pattern.BRUTEFORCE: {},
}

_OPTIONAL_FLAGS: dict[Pattern, tuple[str, ...]] = {
    Pattern.DICTIONARY: ("l33t", "reversed"),
}

_MATCH_CLASSES: dict[Pattern, type[Match]] = {
    Pattern.DICTIONARY: DictionaryMatch,
    Pattern.SPATIAL: SpatialMatch,
    Pattern.REPEAT: RepeatMatch,
    Pattern.SEQUENCE: SequenceMatch,
    Pattern.REGEX: RegexMatch,
    Pattern.DATE: DateMatch,
    Pattern.BRUTEFORCE: BruteforceMatch,
}


def _check_type(name: str, value: Any, types: tuple[type, ...]) -> None:
    # bool is an int subclass, never accept it for numeric fields
    is_stray_bool = isinstance(value, bool) and bool not in types
    if is_stray_bool or not isinstance(value, types):
        expected = " or ".join(t.__name__ for t in types)
        raise MatchError(f"Field '{name}' must be {expected}, got {type(value).__name__}")


def match_from_dict(data: Mapping[str, Any]) -> Match:
    """Build a typed match from a matcher record.

    Accepts the dict shape zxcvbn-style matchers emit. Keys that no
    feedback rule reads (``i``, ``j``, ``guesses``, ``sub`` ...) are ignored.

    Args:
        data: Match record with at least ``pattern`` and ``token``

    Returns:
        The matching ``Match`` subclass, or ``OtherMatch`` for unknown tags

    Raises:
        MatchError: If a required field is missing or has the wrong type
    """
    for key in ("pattern", "token"):
        if key not in data:
            raise MatchError(f"Match is missing required field '{key}'")
        _check_type(key, data[key], (str,))

    tag = data["pattern"]
    token = data["token"]

    try:
        kind = Pattern(tag)
    except ValueError:
        return OtherMatch(token=token, tag=tag)

    fields: dict[str, Any] = {}
    for name, types in _REQUIRED_FIELDS[kind].items():
        if data.get(name) is None:
            raise MatchError(f"{kind.value} match is missing required field '{name}'")
        _check_type(name, data[name], types)
        fields[name] = data[name]

    for name in _OPTIONAL_FLAGS.get(kind, ()):
        value = data.get(name)
        if value is None:
            continue
        _check_type(name, value, (bool,))
        fields[name] = value

    return _MATCH_CLASSES[kind](token=token, **fields)


def sequence_from_dicts(records: Iterable[Mapping[str, Any]]) -> list[Match]:
    """Parse an ordered list of matcher records, keeping their order.

    Raises:
        MatchError: If any record is malformed (message names its index)
    """
    sequence = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise MatchError(f"Match #{index} must be an object")
        try:
            sequence.append(match_from_dict(record))
        except MatchError as e:
            raise MatchError(f"Match #{index}: {e}") from e
    return sequence
