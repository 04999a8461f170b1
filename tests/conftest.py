import os

# Settings are read at import time; pin the test environment first.
os.environ.setdefault("LOG_FILES_ENABLED", "false")
os.environ.setdefault("JWT_SECRET", "docpub-test-secret-0123456789abcdef")
os.environ.setdefault("FRONTEND_URL", "http://frontend.test")
os.environ.setdefault("GOOGLE_CLIENT_ID", "client-id.apps.googleusercontent.com")
os.environ.setdefault("GOOGLE_CLIENT_SECRET", "client-secret")
os.environ.setdefault("REDIRECT_URI", "http://api.test/auth/google/callback")

import pytest

from common.docpub_common.config import settings


@pytest.fixture
def fast_retries(monkeypatch):
    """Keep backoff sleeps in the low milliseconds."""
    monkeypatch.setattr(settings, "HTTP_BACKOFF_BASE_MS", 1)
    monkeypatch.setattr(settings, "HTTP_BACKOFF_MAX_MS", 2)
    monkeypatch.setattr(settings, "HTTP_RETRIES", 2)
    return settings


@pytest.fixture
def user_claims():
    return {
        "googleId": "1234567890",
        "email": "ada@example.com",
        "name": "Ada Lovelace",
        "picture": "https://example.com/ada.png",
    }
