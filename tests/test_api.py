"""Tests for FastAPI endpoints."""

import json
import os
import shutil
import sys

import pytest

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient
from api.main import app
import core.siem


client = TestClient(app)


class TestPublicEndpoints:
    """Health and vocabulary endpoints."""

    def test_root_endpoint(self):
        """Root endpoint should return health status."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_endpoint(self):
        """Health endpoint should return detailed status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data
        assert data["version"] == "1.0.0"

    def test_messages_endpoint(self):
        """Vocabulary lists every warning and suggestion key."""
        response = client.get("/messages")
        assert response.status_code == 200
        data = response.json()
        assert "top_10_common_password" in data["warnings"]
        assert "add_another_word" in data["suggestions"]
        assert len(data["warnings"]) == 14
        assert len(data["suggestions"]) == 14

    def test_security_headers(self):
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert "no-store" in response.headers["Cache-Control"]


class TestFeedbackEndpoint:
    """POST /feedback."""

    def test_empty_sequence(self):
        """Empty body sequence gives onboarding suggestions."""
        response = client.post("/feedback", json={"score": 0})
        assert response.status_code == 200
        assert response.json() == {
            "warning": None,
            "suggestions": ["few_words", "avoid_common_phrases", "no_need_symbols"],
        }

    def test_keyboard_row(self):
        response = client.post("/feedback", json={
            "score": 1,
            "sequence": [{"pattern": "spatial", "token": "qwerty", "turns": 1, "graph": "qwerty"}],
        })
        assert response.status_code == 200
        assert response.json() == {
            "warning": "straight_rows_easy_guess",
            "suggestions": ["add_another_word", "use_longer_keyboard_pattern"],
        }

    def test_common_password(self):
        response = client.post("/feedback", json={
            "score": 0,
            "sequence": [{
                "pattern": "dictionary",
                "token": "password",
                "dictionary_name": "passwords",
                "rank": 1,
                "guesses_log10": 0.0,
                "l33t": False,
                "reversed": False,
            }],
        })
        assert response.status_code == 200
        data = response.json()
        assert data["warning"] == "top_10_common_password"
        assert data["suggestions"] == ["add_another_word"]

    def test_strong_password(self):
        response = client.post("/feedback", json={
            "score": 4,
            "sequence": [{"pattern": "bruteforce", "token": "x8#kQ!z2@Lp"}],
        })
        assert response.status_code == 200
        assert response.json() == {"warning": None, "suggestions": []}

    def test_unknown_pattern(self):
        """Unknown tags are accepted and give the fallback suggestion."""
        response = client.post("/feedback", json={
            "score": 2,
            "sequence": [{"pattern": "emoji", "token": "xx"}],
        })
        assert response.status_code == 200
        assert response.json() == {"warning": None, "suggestions": ["add_another_word"]}

    def test_empty_pattern_tag(self):
        """An empty tag is just another unrecognised pattern."""
        response = client.post("/feedback", json={
            "score": 1,
            "sequence": [{"pattern": "", "token": "xx"}],
        })
        assert response.status_code == 200
        assert response.json() == {"warning": None, "suggestions": ["add_another_word"]}

    def test_log_rotated_by_another_worker(self, siem_log, monkeypatch):
        """Rotation racing another process still serves the feedback."""
        monkeypatch.setattr(core.siem, "SIEM_LOG_MAX_BYTES", 10)
        core.siem.log_siem_event("feedback_request", "SUCCESS")

        real_move = shutil.move

        def move_after_other_worker(src, dst):
            os.remove(src)
            return real_move(src, dst)

        monkeypatch.setattr(core.siem.shutil, "move", move_after_other_worker)
        response = client.post("/feedback", json={
            "score": 1,
            "sequence": [{"pattern": "sequence", "token": "abc"}],
        })
        assert response.status_code == 200
        assert response.json()["warning"] == "sequences_easy_guess"

    def test_logs_event_without_tokens(self, siem_log):
        """A served request is logged with keys but never the token."""
        client.post("/feedback", json={
            "score": 1,
            "sequence": [{"pattern": "repeat", "token": "secretsecret", "base_token": "secret"}],
        })
        with open(siem_log, encoding="utf-8") as f:
            content = f.read()
        events = [json.loads(line) for line in content.splitlines()]
        assert events[-1]["event_type"] == "feedback_request"
        assert events[-1]["status"] == "SUCCESS"
        assert events[-1]["details"]["longest_pattern"] == "repeat"
        assert events[-1]["details"]["warning"] == "repeats_slightly_harder_guess"
        assert "secretsecret" not in content


class TestInputValidation:
    """Test input validation."""

    @pytest.mark.parametrize("score", [-1, 5])
    def test_score_out_of_range(self, score):
        response = client.post("/feedback", json={"score": score, "sequence": []})
        assert response.status_code == 422

    def test_missing_score(self):
        response = client.post("/feedback", json={"sequence": []})
        assert response.status_code == 422

    def test_match_missing_token(self):
        response = client.post("/feedback", json={
            "score": 1,
            "sequence": [{"pattern": "sequence"}],
        })
        assert response.status_code == 422

    def test_match_missing_pattern_field(self, siem_log):
        """A known pattern without its required field is rejected and logged."""
        response = client.post("/feedback", json={
            "score": 1,
            "sequence": [{"pattern": "spatial", "token": "qwe"}],
        })
        assert response.status_code == 422
        assert "turns" in response.json()["detail"]
        with open(siem_log, encoding="utf-8") as f:
            events = [json.loads(line) for line in f]
        assert events[-1]["status"] == "REJECTED"

    def test_invalid_rank(self):
        response = client.post("/feedback", json={
            "score": 1,
            "sequence": [{
                "pattern": "dictionary",
                "token": "password",
                "dictionary_name": "passwords",
                "rank": 0,
                "guesses_log10": 0.0,
            }],
        })
        assert response.status_code == 422
