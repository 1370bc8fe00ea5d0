"""
Conversion between Publishing API documents and need attributes.

Inbound documents nest the need-specific fields under ``details``; the
model works with one flat mapping.  Outbound payloads put them back under
``details`` and add the fixed publishing metadata.

    {"content_id": "…", "details": {"role": "foo"}}
    <->
    {"content_id": "…", "role": "foo"}
"""

from typing import Any, Dict, Mapping, Optional

from needs.constants import (
    BASE_PATH_PREFIX,
    DETAILS_FIELDS,
    SERVER_ONLY_FIELDS,
    TEXTAREA_FIELDS,
)
from publishing_api.models import ContentPayload, Route
from utils.strings import is_blank, slugify, strip_leading_newline


def move_details_to_top_level(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Flatten ``details`` into the top level and drop server bookkeeping.

    When a key appears both at the top level and inside ``details`` the
    top-level value is kept.
    """
    flattened: Dict[str, Any] = dict(document.get("details") or {})
    for key, value in document.items():
        if key == "details":
            continue
        flattened[key] = value
    for key in SERVER_ONLY_FIELDS:
        flattened.pop(key, None)
    return flattened


def strip_newline_from_textareas(attrs: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a copy of *attrs* with one leading newline removed from textareas.

    HTML forms prepend a newline to textarea contents; it must not reach
    the Publishing API.
    """
    cleaned = dict(attrs)
    for field in TEXTAREA_FIELDS:
        if not is_blank(cleaned.get(field)):
            cleaned[field] = strip_leading_newline(cleaned[field])
    return cleaned


def base_path_for(goal: Optional[str]) -> str:
    """``/needs/<slug of goal>``."""
    return f"{BASE_PATH_PREFIX}{slugify(goal or '')}"


def title_for(role, goal, benefit, need_id=None) -> str:
    """User-story title, with the legacy need id appended when there is one."""
    suffix = f" ({need_id})" if need_id else ""
    return f"As a {role}, I need to {goal}, so that {benefit}{suffix}"


def _as_json(value: Any) -> Any:
    if isinstance(value, (set, frozenset, tuple)):
        return list(value)
    return value


def details_from(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Pick the ``details`` fields out of *values*, omitting blanks.

    Textarea values are sent as given; ``Need.update`` has already removed
    the form's leading newline.
    """
    details: Dict[str, Any] = {}
    for field in DETAILS_FIELDS:
        value = values.get(field)
        if is_blank(value):
            continue
        details[field] = _as_json(value)
    return details


def publishing_api_payload(values: Mapping[str, Any]) -> Dict[str, Any]:
    """Build the PUT /v2/content body for a need's attribute mapping."""
    base_path = base_path_for(values.get("goal"))
    payload = ContentPayload(
        base_path=base_path,
        routes=[Route(path=base_path, type="exact")],
        title=title_for(
            values.get("role"),
            values.get("goal"),
            values.get("benefit"),
            values.get("need_id"),
        ),
        details=details_from(values),
    )
    return payload.model_dump()
