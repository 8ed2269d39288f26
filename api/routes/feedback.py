"""Feedback endpoint.

Public endpoint turning a scored match sequence into message keys.
"""

from fastapi import APIRouter, HTTPException, Request

from api.dependencies import get_client_ip, limiter
from api.models import FeedbackRequest, FeedbackResponse
from core import MatchError, get_feedback, longest_match, log_feedback_event, log_siem_event
from core.config import RATE_LIMIT


router = APIRouter(tags=["Feedback"])


@router.post("/feedback", response_model=FeedbackResponse)
@limiter.limit(RATE_LIMIT)
async def select_feedback(request: Request, body: FeedbackRequest):
    """Select the warning and suggestions for a scored password decomposition."""
    client_ip = get_client_ip(request)

    try:
        sequence = [m.to_match() for m in body.sequence]
    except MatchError as e:
        log_siem_event(
            "feedback_request",
            "REJECTED",
            source_ip=client_ip,
            details={"reason": str(e)},
        )
        raise HTTPException(status_code=422, detail=str(e))

    feedback = get_feedback(body.score, sequence)

    longest = longest_match(sequence)
    longest_pattern = longest.pattern if longest else None
    log_feedback_event(
        body.score,
        len(sequence),
        longest_pattern,
        feedback,
        source_ip=client_ip,
    )

    return FeedbackResponse(**feedback.to_dict())
