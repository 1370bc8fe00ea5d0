"""
Organisations that needs can be assigned to.

The Publishing API cannot expand a need's organisation links in the same
request, so names are resolved against the full organisation list, which
is fetched once and cached.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from publishing_api import get_publishing_api
from publishing_api.models import ContentItemsPage
from utils.cache import TTLCache
from utils.config import AppConfig

logger = logging.getLogger(__name__)

ORGANISATION_FIELDS = ["content_id", "title", "details", "base_path"]
ORGANISATIONS_PER_PAGE = 500
_CACHE_KEY = "organisations"

_cache: Optional[TTLCache] = None


def _organisation_cache() -> TTLCache:
    """The shared cache, built on first use with ORGANISATION_CACHE_TTL."""
    global _cache
    if _cache is None:
        _cache = TTLCache(maxsize=4, ttl_seconds=AppConfig.from_env().organisation_cache_ttl)
    return _cache


@dataclass
class Organisation:
    """A government organisation as published on GOV.UK."""

    content_id: str
    title: str
    abbreviation: Optional[str] = None
    govuk_status: Optional[str] = None
    base_path: Optional[str] = None

    @classmethod
    def from_content_item(cls, item: Dict[str, Any]) -> "Organisation":
        details = item.get("details") or {}
        return cls(
            content_id=item["content_id"],
            title=item.get("title", ""),
            abbreviation=details.get("abbreviation"),
            govuk_status=details.get("govuk_status"),
            base_path=item.get("base_path"),
        )

    @property
    def name(self) -> str:
        return self.title

    def label(self) -> str:
        """Title with abbreviation, as shown in organisation pickers."""
        if self.abbreviation and self.abbreviation != self.title:
            return f"{self.title} [{self.abbreviation}]"
        return self.title

    @classmethod
    def all(cls) -> List["Organisation"]:
        """Every organisation, served from cache while fresh."""
        return _organisation_cache().fetch(_CACHE_KEY, cls._load_all)

    @classmethod
    def _load_all(cls) -> List["Organisation"]:
        client = get_publishing_api()
        organisations: List[Organisation] = []
        page = 1
        while True:
            response = ContentItemsPage.model_validate(
                client.get_content_items(
                    document_type="organisation",
                    fields=ORGANISATION_FIELDS,
                    per_page=ORGANISATIONS_PER_PAGE,
                    page=page,
                    order="title",
                )
            )
            organisations.extend(cls.from_content_item(item) for item in response.results)
            if not response.pages or page >= response.pages:
                break
            page += 1
        logger.info("Loaded %d organisations from the Publishing API", len(organisations))
        return organisations

    @classmethod
    def clear_cache(cls) -> None:
        """Drop the cached list; the next lookup re-reads the TTL setting."""
        global _cache
        _cache = None
