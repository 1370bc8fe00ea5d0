"""
Tests for HTTP utilities — utils/http.py

Tests RetryStrategy and SessionManager without requiring actual network calls.
"""
import sys
from pathlib import Path

import requests

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from utils.http import RetryStrategy, SessionManager


# ── RetryStrategy tests ──────────────────────────────────────────────────────

class TestRetryStrategy:
    def test_defaults(self):
        rs = RetryStrategy()
        assert rs.max_retries == 3
        assert rs.backoff_factor == 0.5
        assert 429 in rs.status_forcelist
        assert 503 in rs.status_forcelist

    def test_custom_params(self):
        rs = RetryStrategy(max_retries=5, backoff_factor=1.0,
                           status_forcelist=[500, 502])
        assert rs.max_retries == 5
        assert rs.backoff_factor == 1.0
        assert rs.status_forcelist == [500, 502]

    def test_get_retry_object(self):
        rs = RetryStrategy(max_retries=4, backoff_factor=3.0)
        retry = rs.get_retry_object()
        assert retry.total == 4
        assert retry.backoff_factor == 3.0
        assert retry.raise_on_status is False

    def test_only_reads_retried_by_default(self):
        retry = RetryStrategy().get_retry_object()
        allowed = retry.allowed_methods
        assert "GET" in allowed
        assert "HEAD" in allowed
        assert "PUT" not in allowed
        assert "POST" not in allowed

    def test_custom_allowed_methods(self):
        retry = RetryStrategy(allowed_methods=["GET", "PUT"]).get_retry_object()
        assert "PUT" in retry.allowed_methods


# ── SessionManager tests ─────────────────────────────────────────────────────

class TestSessionManager:
    def test_creates_session(self):
        sm = SessionManager()
        assert isinstance(sm.session, requests.Session)
        sm.close()

    def test_session_cached(self):
        """Accessing .session twice returns the same object."""
        sm = SessionManager()
        s1 = sm.session
        s2 = sm.session
        assert s1 is s2
        sm.close()

    def test_default_headers_applied(self):
        sm = SessionManager(headers={"Authorization": "Bearer t"})
        assert sm.session.headers["Authorization"] == "Bearer t"
        sm.close()

    def test_adapter_carries_retry_strategy(self):
        sm = SessionManager(retry_strategy=RetryStrategy(max_retries=7))
        adapter = sm.session.get_adapter("https://publishing-api.test")
        assert adapter.max_retries.total == 7
        sm.close()

    def test_close_resets_session(self):
        sm = SessionManager()
        _ = sm.session
        sm.close()
        assert sm._session is None

    def test_close_idempotent(self):
        sm = SessionManager()
        sm.close()  # no session yet
        sm.close()  # still fine

    def test_context_manager(self):
        with SessionManager() as sm:
            _ = sm.session
        assert sm._session is None
