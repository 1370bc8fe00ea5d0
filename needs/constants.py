"""Fixed value lists and field groups for needs.

The field-group tuples are the single source of truth for which attributes
a Need accepts; ``needs.need.Need`` declares exactly ``ALLOWED_FIELDS``.
"""

# Reasons a need is considered the government's responsibility
JUSTIFICATIONS = (
    "It's something only government does",
    "The government is legally obliged to provide it",
    "It's inherent to a person's or an organisation's rights and obligations",
    "It's something that people can do or it's something people need to know "
    "before they can do something that's regulated by/related to government",
    "There is clear demand for it from users",
    "It's something the government provides/does/pays for",
    "It's straightforward advice that helps people to comply with their "
    "statutory obligations",
)

# Consequence of GOV.UK not meeting the need, least to most severe
IMPACT = (
    "No impact",
    "Noticed only by an expert audience",
    "Noticed by the average member of the public",
    "Has consequences for the majority of your users",
    "Has serious consequences for your users and/or their customers",
    "Endangers people",
)

# ── Field groups ──────────────────────────────────────────────────────────────

NUMERIC_FIELDS = (
    "yearly_user_contacts",
    "yearly_site_views",
    "yearly_need_views",
    "yearly_searches",
)

FIELDS_WITH_ARRAY_VALUES = (
    "met_when",
    "justifications",
    "organisation_ids",
)

# Metadata owned by the Publishing API; carried on the record, never
# sent back inside ``details``
PUBLISHING_API_FIELDS = (
    "base_path",
    "content_id",
    "description",
    "details",
    "first_published_at",
    "last_edited_at",
    "locale",
    "phase",
    "public_updated_at",
    "publication_state",
    "redirects",
    "routes",
    "schema_name",
    "state_history",
    "title",
    "unpublishing",
    "update_type",
    "updated_at",
    "user_facing_version",
    "version",
)

DESCRIPTIVE_FIELDS = (
    "need_id",
    "role",
    "goal",
    "benefit",
    "impact",
    "legislation",
    "other_evidence",
    "applies_to_all_organisations",
)

ALLOWED_FIELDS = (
    NUMERIC_FIELDS
    + FIELDS_WITH_ARRAY_VALUES
    + PUBLISHING_API_FIELDS
    + DESCRIPTIVE_FIELDS
)

# Fields sent inside ``details`` on save (organisations travel as links)
DETAILS_FIELDS = tuple(
    f for f in ALLOWED_FIELDS
    if f not in PUBLISHING_API_FIELDS and f != "organisation_ids"
)

REQUIRED_FIELDS = ("role", "goal", "benefit")

# Multi-line free-text inputs
TEXTAREA_FIELDS = ("legislation", "other_evidence")

# Bookkeeping the Publishing API returns that a need never stores
SERVER_ONLY_FIELDS = (
    "publishing_app",
    "rendering_app",
    "document_type",
    "content_store",
    "need_ids",
    "lock_version",
    "warnings",
)

# ── Publishing ────────────────────────────────────────────────────────────────

# publication_state -> label shown to editors
STATUS_LABELS = {
    "published": "Valid",
    "draft": "Proposed",
    "unpublished": "Withdrawn",
}

BASE_PATH_PREFIX = "/needs/"
PUBLISH_UPDATE_TYPE = "major"
UNPUBLISH_TYPE = "withdrawal"

MEETS_USER_NEEDS_LINK_TYPE = "meets_user_needs"
LINKED_ITEM_FIELDS = ("title", "base_path", "document_type")

DEFAULT_PER_PAGE = 50

DEFAULT_LIST_OPTIONS = {
    "document_type": "need",
    "per_page": DEFAULT_PER_PAGE,
    "fields": ["content_id", "need_ids", "details", "publication_state"],
    "locale": "en",
    "order": "-updated_at",
}
