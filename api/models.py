"""Pydantic models for API request/response validation.

Defines data structures for all API endpoints. Match records follow the
dict shape zxcvbn-style matchers emit; kind-specific fields are optional
here and checked against the pattern when converted to core matches.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from core.config import MIN_SCORE, MAX_SCORE, MAX_SEQUENCE_LENGTH, MAX_TOKEN_LENGTH
from core.matches import Match, match_from_dict


class MatchModel(BaseModel):
    """One match from the password matcher."""
    model_config = ConfigDict(extra="ignore")

    pattern: str = Field(..., max_length=64, description="Pattern tag")
    token: str = Field(..., max_length=MAX_TOKEN_LENGTH, description="Matched substring")
    dictionary_name: Optional[str] = None
    rank: Optional[int] = Field(default=None, ge=1)
    guesses_log10: Optional[float] = None
    l33t: Optional[bool] = None
    reversed: Optional[bool] = None
    turns: Optional[int] = Field(default=None, ge=0)
    base_token: Optional[str] = Field(default=None, max_length=MAX_TOKEN_LENGTH)
    regex_name: Optional[str] = None

    def to_match(self) -> Match:
        """Convert to a typed core match.

        Raises:
            MatchError: If a field required by the pattern is missing
        """
        return match_from_dict(self.model_dump(exclude_none=True))


class FeedbackRequest(BaseModel):
    """Request model for feedback selection."""
    score: int = Field(..., ge=MIN_SCORE, le=MAX_SCORE, description="Strength score (0-4)")
    sequence: list[MatchModel] = Field(
        default_factory=list,
        max_length=MAX_SEQUENCE_LENGTH,
        description="Ordered matches covering the password",
    )


class FeedbackResponse(BaseModel):
    """Response model for selected feedback."""
    warning: Optional[str] = None
    suggestions: list[str]


class MessagesResponse(BaseModel):
    """Every message key the localization layer must translate."""
    warnings: list[str]
    suggestions: list[str]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
