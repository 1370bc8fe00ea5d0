"""
Pydantic models for Publishing API v2 request and response bodies.

Request models are dumped to plain dicts before sending.  Response models
accept extra keys so that new fields added by the API do not break parsing.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ── Request bodies ────────────────────────────────────────────────────────────

class Route(BaseModel):
    """A route the content item claims on GOV.UK."""
    path: str = Field(..., description="Path claimed by the item", examples=["/needs/apply-for-a-passport"])
    type: str = Field("exact", description="'exact' or 'prefix'")


class ContentPayload(BaseModel):
    """Body for PUT /v2/content/:content_id when saving a need draft."""
    schema_name: str = Field("need", description="Schema the details are validated against")
    publishing_app: str = Field("maslow", description="App that owns the content")
    rendering_app: str = Field("info-frontend", description="Frontend that renders the base path")
    locale: str = Field("en", description="Content locale")
    base_path: str = Field(..., description="Canonical URL path", examples=["/needs/apply-for-a-passport"])
    routes: list[Route] = Field(..., description="Routes claimed by the item")
    document_type: str = Field("need", description="Document type")
    title: str = Field(..., description="User story sentence used as the title")
    details: dict[str, Any] = Field(default_factory=dict, description="Need-specific fields")


class PublishRequest(BaseModel):
    """Body for POST /v2/content/:content_id/publish."""
    update_type: str = Field("major", description="'major', 'minor' or 'republish'")
    locale: str | None = Field(None, description="Locale to publish")


class UnpublishRequest(BaseModel):
    """Body for POST /v2/content/:content_id/unpublish."""
    type: str = Field("withdrawal", description="'withdrawal', 'redirect', 'gone' or 'vanish'")
    explanation: str | None = Field(None, description="Public reason shown on withdrawal")
    alternative_path: str | None = Field(None, description="Redirect target for type 'redirect'")


# ── Response bodies ───────────────────────────────────────────────────────────

class ContentItemsPage(BaseModel):
    """Response body for GET /v2/content."""
    model_config = ConfigDict(extra="allow")

    results: list[dict[str, Any]] = Field(default_factory=list, description="Content items on this page")
    total: int | None = Field(None, description="Total matching items")
    pages: int | None = Field(None, description="Total number of pages")
    current_page: int | None = Field(None, description="1-based page number")


class LinkSet(BaseModel):
    """Response body for GET /v2/links/:content_id."""
    model_config = ConfigDict(extra="allow")

    content_id: str | None = None
    links: dict[str, list[str] | None] = Field(default_factory=dict, description="Link type -> content ids")
    version: int | None = None
