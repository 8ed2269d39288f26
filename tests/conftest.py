"""Shared fixtures: keep event logs out of the working directory."""

import os
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import core.siem


@pytest.fixture(autouse=True)
def siem_log(tmp_path, monkeypatch):
    """Point the SIEM event log at a temporary file."""
    path = str(tmp_path / "logs" / "siem_events.jsonl")
    monkeypatch.setattr(core.siem, "SIEM_LOG_FILE", path)
    monkeypatch.setattr(core.siem, "SIEM_ENABLED", True)
    return path


@pytest.fixture(autouse=True)
def feedback_log(tmp_path, monkeypatch):
    """Point the feedback log at a temporary file and keep it unconfigured."""
    path = str(tmp_path / "logs" / "feedback.log")
    monkeypatch.setattr(core.siem, "FEEDBACK_LOG_FILE", path)
    monkeypatch.setattr(core.siem, "_logging_configured", True)
    return path
