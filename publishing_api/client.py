"""
Thin HTTP client for the GOV.UK Publishing API (v2 endpoints).

Every method returns the decoded JSON body as plain dicts/lists.  Error
responses raise HTTPErrorResponse (or a status-specific subclass), with the
decoded error body attached as ``error_details``.
"""

import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Tuple
from urllib.parse import quote

import requests

from publishing_api.errors import HTTPErrorResponse, build_http_error
from publishing_api.models import PublishRequest, UnpublishRequest
from utils.config import AppConfig
from utils.http import RetryStrategy, SessionManager

logger = logging.getLogger(__name__)


def encode_params(params: Optional[Dict[str, Any]]) -> List[Tuple[str, Any]]:
    """Flatten query parameters the way the Publishing API expects.

    List values become repeated ``name[]`` keys, None values are dropped:

        {"fields": ["title", "base_path"], "page": 2}
        -> [("fields[]", "title"), ("fields[]", "base_path"), ("page", 2)]
    """
    encoded: List[Tuple[str, Any]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set)):
            encoded.extend((f"{key}[]", item) for item in value)
        else:
            encoded.append((key, value))
    return encoded


class PublishingApiClient:
    """Client for the subset of the Publishing API used by Maslow."""

    def __init__(self, base_url: str, bearer_token: str = "",
                 timeout: float = 15.0,
                 session_manager: Optional[SessionManager] = None):
        """Create a client.

        Args:
            base_url: API root, e.g. http://publishing-api.dev.gov.uk
            bearer_token: Sent as ``Authorization: Bearer …`` when non-empty
            timeout: Per-request timeout in seconds
            session_manager: Pooled session to use (default: a new one)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        headers = {"Accept": "application/json"}
        if bearer_token:
            headers["Authorization"] = f"Bearer {bearer_token}"
        self.session_manager = session_manager or SessionManager(headers=headers)

    @classmethod
    def from_config(cls, config: AppConfig) -> "PublishingApiClient":
        """Build a client from an AppConfig."""
        headers = {"Accept": "application/json"}
        if config.publishing_api_bearer_token:
            headers["Authorization"] = f"Bearer {config.publishing_api_bearer_token}"
        session_manager = SessionManager(
            retry_strategy=RetryStrategy(max_retries=config.publishing_api_max_retries),
            headers=headers,
        )
        return cls(
            config.publishing_api_url,
            timeout=config.publishing_api_timeout,
            session_manager=session_manager,
        )

    # ── transport ─────────────────────────────────────────────────────────

    def _url(self, *parts: str) -> str:
        return "/".join([self.base_url] + [quote(str(p), safe="") for p in parts])

    def _request(self, method: str, url: str,
                 params: Optional[Dict[str, Any]] = None,
                 body: Optional[Dict[str, Any]] = None) -> Any:
        start = time.monotonic()
        try:
            response = self.session_manager.session.request(
                method,
                url,
                params=encode_params(params),
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise HTTPErrorResponse(None, f"{method} {url} failed: {e}") from e

        duration_ms = int((time.monotonic() - start) * 1000)
        logger.debug("%s %s -> %s (%dms)", method, url, response.status_code,
                     duration_ms, extra={"url": url, "status": response.status_code,
                                         "duration_ms": duration_ms})

        if response.status_code >= 400:
            raise build_http_error(
                response.status_code,
                f"URL: {url}\nResponse body:\n{response.text}",
                self._decode(response),
            )
        if not response.content:
            return {}
        return response.json()

    @staticmethod
    def _decode(response: requests.Response) -> Optional[Any]:
        try:
            return response.json()
        except ValueError:
            return None

    # ── reads ─────────────────────────────────────────────────────────────

    def get_content_items(self, **params: Any) -> Dict[str, Any]:
        """GET /v2/content: paginated list of content items."""
        return self._request("GET", self._url("v2", "content"), params=params)

    def get_content(self, content_id: str, version: Optional[int] = None,
                    **params: Any) -> Dict[str, Any]:
        """GET /v2/content/:content_id, optionally a historical version."""
        if version is not None:
            params["version"] = version
        return self._request("GET", self._url("v2", "content", content_id), params=params)

    def get_links(self, content_id: str) -> Dict[str, Any]:
        """GET /v2/links/:content_id: link set for a content item."""
        return self._request("GET", self._url("v2", "links", content_id))

    def get_linked_items(self, content_id: str, link_type: str,
                         fields: Iterable[str]) -> List[Dict[str, Any]]:
        """GET /v2/linked/:content_id: items linking to this one."""
        return self._request(
            "GET",
            self._url("v2", "linked", content_id),
            params={"link_type": link_type, "fields": list(fields)},
        )

    # ── writes ────────────────────────────────────────────────────────────

    def put_content(self, content_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """PUT /v2/content/:content_id: create or replace the draft."""
        return self._request("PUT", self._url("v2", "content", content_id), body=payload)

    def patch_links(self, content_id: str, links: Dict[str, Any]) -> Dict[str, Any]:
        """PATCH /v2/links/:content_id: body is ``{"links": {...}}``."""
        return self._request("PATCH", self._url("v2", "links", content_id), body=links)

    def publish(self, content_id: str, update_type: str = "major",
                locale: Optional[str] = None) -> Dict[str, Any]:
        """POST /v2/content/:content_id/publish."""
        body = PublishRequest(update_type=update_type, locale=locale).model_dump(exclude_none=True)
        return self._request("POST", self._url("v2", "content", content_id, "publish"), body=body)

    def discard_draft(self, content_id: str) -> Dict[str, Any]:
        """POST /v2/content/:content_id/discard-draft."""
        return self._request("POST", self._url("v2", "content", content_id, "discard-draft"), body={})

    def unpublish(self, content_id: str, type: str = "withdrawal",
                  explanation: Optional[str] = None,
                  alternative_path: Optional[str] = None) -> Dict[str, Any]:
        """POST /v2/content/:content_id/unpublish."""
        body = UnpublishRequest(
            type=type, explanation=explanation, alternative_path=alternative_path
        ).model_dump(exclude_none=True)
        return self._request("POST", self._url("v2", "content", content_id, "unpublish"), body=body)

    def close(self) -> None:
        self.session_manager.close()
