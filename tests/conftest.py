"""
Pytest fixtures for the Maslow needs tests.

Provides an in-memory stand-in for the Publishing API client that records
every call, plus helpers for building Publishing API need documents.
No test touches the network.
"""

import copy
import sys
from pathlib import Path

import pytest

_PROJECT_ROOT = str(Path(__file__).resolve().parent.parent)
if _PROJECT_ROOT not in sys.path:
    sys.path.insert(0, _PROJECT_ROOT)

from needs.organisation import Organisation  # noqa: E402
from publishing_api import set_publishing_api  # noqa: E402
from publishing_api.errors import HTTPNotFound  # noqa: E402

CONTENT_ID = "f2c8a9a2-7b4b-4c0e-9d52-3d5c1b1f0a11"
ORG_HMRC = "6667cce2-e809-4e21-ae09-cb0bdc1ddda3"
ORG_DWP = "b548a09f-8b35-4104-89f4-f1a40bf3136d"
ORG_GRO = "2a5a0b2e-1c2f-4b0e-9a57-2f0b4a5d1c33"


# ── Helpers ───────────────────────────────────────────────────────────────────

def need_document(content_id=CONTENT_ID, user_facing_version=1, **details):
    """A Publishing API v2 need document, as returned by GET /v2/content/:id."""
    base_details = {
        "role": "User",
        "goal": "find my local register office",
        "benefit": "I can find records of birth, marriage or death",
        "justifications": ["It's something only government does"],
        "impact": "Noticed by the average member of the public",
        "met_when": ["Can download a birth certificate."],
    }
    base_details.update(details)
    return {
        "content_id": content_id,
        "base_path": "/needs/find-my-local-register-office",
        "title": "As a User, I need to find my local register office, so that ...",
        "schema_name": "need",
        "document_type": "need",
        "publishing_app": "maslow",
        "rendering_app": "info-frontend",
        "locale": "en",
        "publication_state": "draft",
        "lock_version": 3,
        "user_facing_version": user_facing_version,
        "state_history": {str(user_facing_version): "draft"},
        "warnings": {},
        "details": base_details,
    }


def organisation_item(content_id, title, abbreviation=None):
    return {
        "content_id": content_id,
        "title": title,
        "base_path": "/government/organisations/" + title.lower().replace(" ", "-"),
        "details": {"abbreviation": abbreviation, "govuk_status": "live"},
    }


# ── Fake Publishing API ───────────────────────────────────────────────────────

class FakePublishingApi:
    """Records calls and serves canned documents.

    ``errors`` maps a method name to an exception raised on the next and
    every later call to that method.
    """

    def __init__(self):
        self.calls = []
        self.documents = {}          # content_id -> {version: document}
        self.links = {}              # content_id -> [organisation ids]
        self.linked_items = {}       # content_id -> [items]
        self.needs_page = {"results": [], "total": 0, "pages": 1, "current_page": 1}
        self.organisations = []
        self.errors = {}

    # bookkeeping

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        if name in self.errors:
            raise self.errors[name]

    def calls_to(self, name):
        return [c for c in self.calls if c[0] == name]

    def add_document(self, document):
        versions = self.documents.setdefault(document["content_id"], {})
        versions[document["user_facing_version"]] = document

    # reads

    def get_content_items(self, **params):
        self._record("get_content_items", **params)
        if params.get("document_type") == "organisation":
            return {
                "results": copy.deepcopy(self.organisations),
                "total": len(self.organisations),
                "pages": 1,
                "current_page": 1,
            }
        return copy.deepcopy(self.needs_page)

    def get_content(self, content_id, version=None, **params):
        self._record("get_content", content_id, version=version)
        versions = self.documents.get(content_id)
        if not versions:
            raise HTTPNotFound(404, f"No content with id {content_id}",
                               {"error": {"code": 404}})
        key = max(versions) if version is None else version
        return copy.deepcopy(versions[key])

    def get_links(self, content_id):
        self._record("get_links", content_id)
        return {
            "content_id": content_id,
            "links": {"organisations": list(self.links.get(content_id, []))},
            "version": 1,
        }

    def get_linked_items(self, content_id, link_type, fields):
        self._record("get_linked_items", content_id, link_type=link_type, fields=fields)
        return copy.deepcopy(self.linked_items.get(content_id, []))

    # writes

    def put_content(self, content_id, payload):
        self._record("put_content", content_id, payload)
        return {"content_id": content_id}

    def patch_links(self, content_id, links):
        self._record("patch_links", content_id, links)
        return {"content_id": content_id, **links}

    def publish(self, content_id, update_type="major", locale=None):
        self._record("publish", content_id, update_type)
        return {}

    def discard_draft(self, content_id):
        self._record("discard_draft", content_id)
        return {}

    def unpublish(self, content_id, type="withdrawal", explanation=None,
                  alternative_path=None):
        self._record("unpublish", content_id, type=type, explanation=explanation)
        return {}


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def _reset_organisation_cache():
    Organisation.clear_cache()
    yield
    Organisation.clear_cache()


@pytest.fixture
def fake_api():
    """Install a FakePublishingApi as the default client for the test."""
    api = FakePublishingApi()
    set_publishing_api(api)
    yield api
    set_publishing_api(None)


@pytest.fixture
def stored_need(fake_api):
    """A need with one stored version linked to two organisations."""
    fake_api.add_document(need_document())
    fake_api.links[CONTENT_ID] = [ORG_HMRC, ORG_GRO]
    return fake_api


@pytest.fixture
def valid_attrs():
    return {
        "role": "User",
        "goal": "find my local register office",
        "benefit": "I can find records of birth, marriage or death",
    }
