"""SIEM-compatible security event logging.

Provides structured JSON logging for feedback requests, suitable for
integration with SIEM platforms like Splunk, ELK, or QRadar. Events carry
pattern tags, counts, scores and message keys only: never tokens or
passwords.

Includes log rotation to prevent disk exhaustion and manage retention.
"""

import json
import logging
import os
import shutil
from datetime import datetime
from logging.handlers import RotatingFileHandler
from threading import Lock
from typing import Optional

from core.config import (
    FEEDBACK_LOG_FILE,
    SIEM_LOG_FILE,
    SIEM_LOG_MAX_BYTES,
    SIEM_LOG_BACKUP_COUNT,
    SIEM_ENABLED,
)
from core.feedback import Feedback
from core.storage import ensure_parent_dir, append_line, file_exists


# Module-level state
_logging_configured = False
_rotation_lock = Lock()


def _rotate_siem_log() -> None:
    """Rotate SIEM log file if it exceeds size limit.

    Shifts existing backups (log.1 -> log.2, etc.), drops the oldest
    beyond SIEM_LOG_BACKUP_COUNT, then moves the current log to log.1.
    """
    with _rotation_lock:
        if not file_exists(SIEM_LOG_FILE):
            return

        try:
            file_size = os.path.getsize(SIEM_LOG_FILE)
        except OSError:
            return

        if file_size < SIEM_LOG_MAX_BYTES:
            return

        # Another process may rotate the same files concurrently
        oldest = f"{SIEM_LOG_FILE}.{SIEM_LOG_BACKUP_COUNT}"
        if os.path.exists(oldest):
            try:
                os.remove(oldest)
            except OSError:
                pass

        for i in range(SIEM_LOG_BACKUP_COUNT - 1, 0, -1):
            src = f"{SIEM_LOG_FILE}.{i}"
            if os.path.exists(src):
                try:
                    shutil.move(src, f"{SIEM_LOG_FILE}.{i + 1}")
                except OSError:
                    pass

        try:
            if SIEM_LOG_BACKUP_COUNT > 0:
                shutil.move(SIEM_LOG_FILE, f"{SIEM_LOG_FILE}.1")
            else:
                os.remove(SIEM_LOG_FILE)
        except OSError:
            pass


def configure_logging(level: int = logging.INFO) -> None:
    """Configure standard logging with rotation on first use."""
    global _logging_configured
    if _logging_configured:
        return

    ensure_parent_dir(FEEDBACK_LOG_FILE)

    handler = RotatingFileHandler(
        FEEDBACK_LOG_FILE,
        maxBytes=SIEM_LOG_MAX_BYTES,
        backupCount=SIEM_LOG_BACKUP_COUNT,
    )
    handler.setFormatter(logging.Formatter('%(asctime)s - %(message)s'))

    logger = logging.getLogger()
    logger.setLevel(level)
    logger.addHandler(handler)

    _logging_configured = True


def log_siem_event(
    event_type: str,
    status: str,
    source_ip: str = "127.0.0.1",
    details: Optional[dict] = None
) -> None:
    """Log event in JSON format suitable for SIEM tools.

    Args:
        event_type: Type of event (e.g., 'feedback_request', 'invalid_sequence')
        status: Event status (e.g., 'SUCCESS', 'REJECTED')
        source_ip: Source IP address
        details: Optional additional event details
    """
    if not SIEM_ENABLED:
        return

    ensure_parent_dir(SIEM_LOG_FILE)

    # Check if rotation is needed before writing
    _rotate_siem_log()

    event = {
        "timestamp": datetime.now().isoformat(),
        "event_type": event_type,
        "status": status,
        "ip_address": source_ip,
        "source": "feedback_service"
    }

    if details:
        event["details"] = details

    append_line(SIEM_LOG_FILE, json.dumps(event))


def log_feedback_event(
    score: int,
    sequence_length: int,
    longest_pattern: Optional[str],
    feedback: Feedback,
    source_ip: str = "127.0.0.1"
) -> None:
    """Record a served feedback result.

    Args:
        score: Strength score the feedback was selected for
        sequence_length: Number of matches in the sequence
        longest_pattern: Pattern tag of the longest match, None if empty
        feedback: The feedback returned to the caller
        source_ip: Source IP address
    """
    configure_logging()
    logging.info(
        f"Feedback served - score {score} - pattern {longest_pattern} - IP: {source_ip}"
    )
    log_siem_event(
        "feedback_request",
        "SUCCESS",
        source_ip=source_ip,
        details={
            "score": score,
            "sequence_length": sequence_length,
            "longest_pattern": longest_pattern,
            **feedback.to_dict(),
        },
    )


def get_siem_events(limit: int = 100) -> list[dict]:
    """Read and parse SIEM log events.

    Args:
        limit: Maximum number of events to return

    Returns:
        List of parsed event dictionaries, oldest first
    """
    if not file_exists(SIEM_LOG_FILE):
        return []

    events = []
    with open(SIEM_LOG_FILE, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line))
            except json.JSONDecodeError:
                continue

    return events[-limit:]


def count_events_by_status(event_type: Optional[str] = None) -> dict[str, int]:
    """Count SIEM events grouped by status.

    Args:
        event_type: Optional filter by event type

    Returns:
        Dictionary mapping status to count
    """
    events = get_siem_events(limit=10000)
    counts = {}

    for event in events:
        if event_type and event.get("event_type") != event_type:
            continue

        status = event.get("status", "UNKNOWN")
        counts[status] = counts.get(status, 0) + 1

    return counts
