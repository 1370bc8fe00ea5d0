"""
Needs: government user needs stored in the Publishing API.

    from needs import Need

    need = Need(role="parent", goal="apply for child benefit",
                benefit="I can get financial support")
    if need.valid():
        need.save()
"""

from needs.constants import ALLOWED_FIELDS, IMPACT, JUSTIFICATIONS
from needs.errors import (
    BasePathAlreadyInUse,
    InvalidNeed,
    NotFound,
    UnknownFieldError,
    UnknownPublicationState,
)
from needs.need import Need
from needs.organisation import Organisation
from needs.paginated_list import PaginatedList
from needs.results import RemoteResult
from needs.validation import validate_need

__all__ = [
    "ALLOWED_FIELDS",
    "IMPACT",
    "JUSTIFICATIONS",
    "BasePathAlreadyInUse",
    "InvalidNeed",
    "NotFound",
    "UnknownFieldError",
    "UnknownPublicationState",
    "Need",
    "Organisation",
    "PaginatedList",
    "RemoteResult",
    "validate_need",
]
