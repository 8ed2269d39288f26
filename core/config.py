"""Centralized configuration constants.

All configurable values in one place for easy maintenance.
Deployment-specific settings can be overridden via environment variables.
"""

import os

# Base directories
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

# Scores come from the guess estimator on a 0-4 scale
MIN_SCORE = 0
MAX_SCORE = 4
# Scores above this are strong enough to need no guidance
STRONG_SCORE_THRESHOLD = 2

# Dictionary feedback thresholds
TOP_10_RANK = 10
TOP_100_RANK = 100
SIMILAR_PASSWORD_MAX_GUESSES_LOG10 = 4
MIN_REVERSED_TOKEN_LENGTH = 4

# Request size limits (API and CLI input)
MAX_SEQUENCE_LENGTH = int(os.environ.get("MAX_SEQUENCE_LENGTH", "256"))
MAX_TOKEN_LENGTH = int(os.environ.get("MAX_TOKEN_LENGTH", "256"))

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "logs")
FEEDBACK_LOG_FILE = os.environ.get("FEEDBACK_LOG_FILE", os.path.join(LOG_DIR, "feedback.log"))
SIEM_LOG_FILE = os.environ.get("SIEM_LOG_FILE", os.path.join(LOG_DIR, "siem_events.jsonl"))
SIEM_LOG_MAX_BYTES = int(os.environ.get("SIEM_LOG_MAX_BYTES", 10 * 1024 * 1024))  # 10MB default
SIEM_LOG_BACKUP_COUNT = int(os.environ.get("SIEM_LOG_BACKUP_COUNT", 5))
SIEM_ENABLED = os.environ.get("SIEM_ENABLED", "true").lower() == "true"

# Trusted proxy configuration
# SECURITY: Only trust X-Forwarded-For headers from these IP addresses
# Example: TRUSTED_PROXIES=10.0.0.1,10.0.0.2,172.17.0.1
_trusted_proxies_env = os.environ.get("TRUSTED_PROXIES", "")
TRUSTED_PROXIES: set[str] = set(
    ip.strip() for ip in _trusted_proxies_env.split(",") if ip.strip()
)

# HTTPS enforcement
# Set REQUIRE_HTTPS=true in production to reject non-HTTPS requests
REQUIRE_HTTPS = os.environ.get("REQUIRE_HTTPS", "false").lower() == "true"

# Rate limiting, in slowapi limit-string syntax
RATE_LIMIT = os.environ.get("RATE_LIMIT", "100/minute")

# CORS origins allowed to call the API
_cors_origins_env = os.environ.get("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000")
CORS_ORIGINS: list[str] = [
    origin.strip() for origin in _cors_origins_env.split(",") if origin.strip()
]

API_VERSION = "1.0.0"
