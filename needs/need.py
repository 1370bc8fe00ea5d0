"""
The Need record and its Publishing API operations.

A Need is built either fresh (new content id, not persisted) or from a
Publishing API document (``persisted`` is True).  Reads raise on failure;
the lifecycle writes (save, publish, unpublish, discard) log HTTP errors and
return a falsy RemoteResult instead, except for the base-path conflict on
save, which raises BasePathAlreadyInUse so the caller can point the editor
at the need that already owns the path.
"""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from needs.constants import (
    ALLOWED_FIELDS,
    DEFAULT_LIST_OPTIONS,
    FIELDS_WITH_ARRAY_VALUES,
    LINKED_ITEM_FIELDS,
    MEETS_USER_NEEDS_LINK_TYPE,
    NUMERIC_FIELDS,
    PUBLISH_UPDATE_TYPE,
    STATUS_LABELS,
    UNPUBLISH_TYPE,
)
from needs.errors import (
    BasePathAlreadyInUse,
    InvalidNeed,
    NotFound,
    UnknownFieldError,
    UnknownPublicationState,
)
from needs.organisation import Organisation
from needs.paginated_list import PaginatedList
from needs.payloads import (
    move_details_to_top_level,
    publishing_api_payload,
    strip_newline_from_textareas,
)
from needs.results import RemoteResult
from needs.revisions import compute_changes
from needs.validation import validate_need
from publishing_api import get_publishing_api
from publishing_api.errors import HTTPErrorResponse, HTTPNotFound
from publishing_api.models import ContentItemsPage, LinkSet
from utils.patterns import CONFLICTING_CONTENT_ID
from utils.strings import coerce_integer, is_blank
from utils.validation import ValidationResult

logger = logging.getLogger(__name__)

_ALLOWED = frozenset(ALLOWED_FIELDS)


def conflicting_content_id(error: HTTPErrorResponse) -> Optional[str]:
    """Content id named in a base-path conflict error body, if any.

    The Publishing API reports the clash as
    ``{"error": {"message": "... content_id=<id> ..."}}``.
    """
    details = error.error_details
    if not isinstance(details, dict):
        return None
    inner = details.get("error")
    if not isinstance(inner, dict):
        return None
    message = inner.get("message")
    if not isinstance(message, str):
        return None
    match = CONFLICTING_CONTENT_ID.search(message)
    return match.group(1) if match else None


@dataclass(init=False, repr=False, eq=False)
class Need:
    """A user need managed through the Publishing API."""

    # Numeric usage estimates
    yearly_user_contacts: Optional[int] = None
    yearly_site_views: Optional[int] = None
    yearly_need_views: Optional[int] = None
    yearly_searches: Optional[int] = None

    # Ordered lists, never None
    met_when: List[str] = field(default_factory=list)
    justifications: List[str] = field(default_factory=list)
    organisation_ids: List[str] = field(default_factory=list)

    # Publishing API metadata, passed through untouched
    base_path: Optional[str] = None
    content_id: Optional[str] = None
    description: Optional[str] = None
    details: Optional[Dict[str, Any]] = None
    first_published_at: Optional[str] = None
    last_edited_at: Optional[str] = None
    locale: Optional[str] = None
    phase: Optional[str] = None
    public_updated_at: Optional[str] = None
    publication_state: Optional[str] = None
    redirects: Optional[list] = None
    routes: Optional[list] = None
    schema_name: Optional[str] = None
    state_history: Optional[Dict[str, str]] = None
    title: Optional[str] = None
    unpublishing: Optional[Dict[str, Any]] = None
    update_type: Optional[str] = None
    updated_at: Optional[str] = None
    user_facing_version: Optional[int] = None
    version: Optional[int] = None

    # The need itself
    need_id: Optional[int] = None
    role: Optional[str] = None
    goal: Optional[str] = None
    benefit: Optional[str] = None
    impact: Optional[str] = None
    legislation: Optional[str] = None
    other_evidence: Optional[str] = None
    applies_to_all_organisations: Optional[bool] = None

    # True once loaded from the Publishing API; forms use it to pick a route
    persisted: bool = False

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any):
        for name in ALLOWED_FIELDS:
            setattr(self, name, [] if name in FIELDS_WITH_ARRAY_VALUES else None)
        self.persisted = False
        self._revisions: Optional[List[Dict[str, Any]]] = None
        self._organisations: Optional[List[Organisation]] = None
        self._content_items: Optional[List[Dict[str, Any]]] = None

        merged = dict(attributes or {})
        merged.update(kwargs)
        self.update(merged)
        if is_blank(self.content_id):
            self.content_id = str(uuid.uuid4())

    def __repr__(self) -> str:
        return (f"Need(content_id={self.content_id!r}, goal={self.goal!r}, "
                f"publication_state={self.publication_state!r})")

    @property
    def id(self) -> Optional[str]:
        return self.content_id

    # ── attributes ────────────────────────────────────────────────────────

    def update(self, attrs: Mapping[str, Any]) -> None:
        """Assign several attributes at once.

        Raises UnknownFieldError for a name outside ALLOWED_FIELDS, before
        any attribute is changed.  List fields turn blank input into [];
        numeric fields turn blank input into None and integer strings into
        ints, keeping anything else as given for validation to report.
        """
        attrs = {str(k): v for k, v in strip_newline_from_textareas(attrs).items()}
        for name in attrs:
            if name not in _ALLOWED:
                raise UnknownFieldError(name)

        for name, value in attrs.items():
            if name in FIELDS_WITH_ARRAY_VALUES:
                value = self._as_list(value)
            elif name in NUMERIC_FIELDS:
                value = coerce_integer(value)
            setattr(self, name, value)

        for name in FIELDS_WITH_ARRAY_VALUES:
            if getattr(self, name) is None:
                setattr(self, name, [])
        if "organisation_ids" in attrs:
            self._organisations = None

    @staticmethod
    def _as_list(value) -> list:
        if is_blank(value):
            return []
        if isinstance(value, str):
            return [value]
        return list(value)

    def to_dict(self) -> Dict[str, Any]:
        """Every allowed attribute, keyed by name."""
        return {name: getattr(self, name) for name in ALLOWED_FIELDS}

    def add_more_criteria(self) -> None:
        """Append an empty "met when" criterion for the editor to fill in."""
        self.met_when.append("")

    def remove_criteria(self, index: int) -> None:
        del self.met_when[index]

    # ── validation ────────────────────────────────────────────────────────

    def validate(self) -> ValidationResult:
        return validate_need(self)

    def valid(self) -> bool:
        return self.validate().is_valid()

    @property
    def errors(self) -> ValidationResult:
        return self.validate()

    # ── publication state ─────────────────────────────────────────────────

    def is_published(self) -> bool:
        return self.publication_state == "published"

    def is_draft(self) -> bool:
        return self.publication_state == "draft"

    def is_unpublished(self) -> bool:
        return self.publication_state == "unpublished"

    @property
    def status(self) -> str:
        """Editor-facing label for publication_state."""
        try:
            return STATUS_LABELS[self.publication_state]
        except (KeyError, TypeError):
            raise UnknownPublicationState(self.publication_state) from None

    # ── queries ───────────────────────────────────────────────────────────

    @classmethod
    def list(cls, **options: Any) -> PaginatedList:
        """One page of needs from the Publishing API.

        Options are passed through to GET /v2/content on top of the
        defaults, e.g. ``page``, ``q``, ``link_organisations``, ``per_page``.
        """
        options = {**DEFAULT_LIST_OPTIONS, **options}
        response = ContentItemsPage.model_validate(
            get_publishing_api().get_content_items(**options)
        )
        needs = [cls.from_publishing_api_payload(item) for item in response.results]
        return PaginatedList(
            needs,
            pages=response.pages,
            total=response.total,
            current_page=response.current_page,
            per_page=options["per_page"],
        )

    @classmethod
    def by_content_ids(cls, *content_ids: str) -> List["Need"]:
        """Every listed need, in order.  Not paginated."""
        return [cls.find(content_id) for content_id in content_ids]

    @classmethod
    def find(cls, content_id: str) -> "Need":
        """Load one need, raising NotFound if the Publishing API has no such item."""
        try:
            document = get_publishing_api().get_content(content_id)
        except HTTPNotFound as err:
            raise NotFound(content_id) from err
        return cls.from_publishing_api_payload(document)

    @classmethod
    def from_publishing_api_payload(cls, document: Mapping[str, Any]) -> "Need":
        """Hydrate a persisted need from a Publishing API document.

        Metadata keys the model does not declare are dropped here; only
        explicit ``update`` calls are strict about names.
        """
        attrs = move_details_to_top_level(document)
        unknown = sorted(k for k in attrs if k not in _ALLOWED)
        if unknown:
            logger.debug("Ignoring unknown Publishing API fields: %s", ", ".join(unknown))
        need = cls({k: v for k, v in attrs.items() if k in _ALLOWED})
        need.load_organisation_ids()
        need.persisted = True
        return need

    @staticmethod
    def fetch_from_publishing_api(content_id: str, version: Optional[int] = None) -> Dict[str, Any]:
        """One (optionally historical) version of a need, flattened."""
        document = get_publishing_api().get_content(content_id, version=version)
        return move_details_to_top_level(document)

    def load_organisation_ids(self) -> List[str]:
        links = LinkSet.model_validate(get_publishing_api().get_links(self.content_id))
        self.organisation_ids = list(links.links.get("organisations") or [])
        self._organisations = None
        return self.organisation_ids

    def organisations(self) -> List[Organisation]:
        """Organisation records for organisation_ids, from the cached full list."""
        if self._organisations is None:
            ids = set(self.organisation_ids)
            self._organisations = [o for o in Organisation.all() if o.content_id in ids]
        return self._organisations

    def revisions(self) -> List[Dict[str, Any]]:
        """Every version of this need, newest first, each with ``changes``.

        Versions are fetched one at a time from the latest user-facing
        version down to 1.  Any failed fetch propagates.
        """
        if self._revisions is not None:
            return self._revisions

        latest = self.fetch_from_publishing_api(self.content_id)
        version = latest.get("user_facing_version") or 1
        responses = [latest]
        while version > 1:
            version -= 1
            responses.append(self.fetch_from_publishing_api(self.content_id, version=version))

        self._revisions = compute_changes(responses)
        return self._revisions

    def content_items_meeting_this_need(self) -> RemoteResult:
        """Published content that links to this need via meets_user_needs."""
        operation = "content_items_meeting_this_need"
        if self._content_items is not None:
            return RemoteResult.success(self._content_items, operation)
        try:
            items = get_publishing_api().get_linked_items(
                self.content_id,
                link_type=MEETS_USER_NEEDS_LINK_TYPE,
                fields=list(LINKED_ITEM_FIELDS),
            )
        except HTTPErrorResponse as err:
            return self._remote_failure(operation, err)
        self._content_items = items
        return RemoteResult.success(items, operation)

    # ── lifecycle ─────────────────────────────────────────────────────────

    def publishing_api_payload(self) -> Dict[str, Any]:
        """Body for PUT /v2/content built from the current attributes."""
        return publishing_api_payload(self.to_dict())

    def save(self) -> RemoteResult:
        """Write the draft and its organisation links.

        Raises InvalidNeed, before any remote call, when validation fails,
        and BasePathAlreadyInUse when another item owns the base path.
        """
        errors = self.validate()
        if not errors.is_valid():
            raise InvalidNeed(errors)
        client = get_publishing_api()
        try:
            client.put_content(self.content_id, self.publishing_api_payload())
            response = client.patch_links(
                self.content_id,
                {"links": {"organisations": list(self.organisation_ids)}},
            )
        except HTTPErrorResponse as err:
            conflicting = conflicting_content_id(err)
            if conflicting:
                raise BasePathAlreadyInUse(conflicting) from err
            return self._remote_failure("save", err)
        return RemoteResult.success(response, "save")

    def publish(self) -> RemoteResult:
        """Publish the draft as a major update, re-creating it first if unpublished."""
        try:
            if self.is_unpublished():
                self.save()
            response = get_publishing_api().publish(self.content_id, PUBLISH_UPDATE_TYPE)
        except HTTPErrorResponse as err:
            return self._remote_failure("publish", err)
        return RemoteResult.success(response, "publish")

    def discard(self) -> RemoteResult:
        """Throw away the current draft."""
        try:
            response = get_publishing_api().discard_draft(self.content_id)
        except HTTPErrorResponse as err:
            return self._remote_failure("discard", err)
        return RemoteResult.success(response, "discard")

    def unpublish(self, explanation: str) -> RemoteResult:
        """Withdraw the need, showing *explanation* to visitors."""
        if is_blank(explanation):
            raise ValueError("An explanation is required to unpublish a need")
        try:
            response = get_publishing_api().unpublish(
                self.content_id,
                type=UNPUBLISH_TYPE,
                explanation=explanation,
            )
        except HTTPErrorResponse as err:
            return self._remote_failure("unpublish", err)
        return RemoteResult.success(response, "unpublish")

    def _remote_failure(self, operation: str, err: HTTPErrorResponse) -> RemoteResult:
        logger.error(
            "HTTPErrorResponse in Need.%s: %s", operation, err,
            extra={"content_id": self.content_id, "operation": operation},
        )
        return RemoteResult.failure(err, operation)
