"""
Validation rules for needs.

``validate_need(need)`` runs every rule and returns a ValidationResult.
Rules never short-circuit each other, so an editor sees every problem at
once.  Works on anything with the need attributes (a Need or a namespace).
"""

from typing import List

from needs.constants import IMPACT, JUSTIFICATIONS, NUMERIC_FIELDS, REQUIRED_FIELDS
from utils.strings import is_blank, is_number
from utils.validation import ValidationIssue, ValidationRegistry, ValidationResult

BLANK = "can't be blank"
NOT_INCLUDED = "is not included in the list"
UNKNOWN_JUSTIFICATION = "must contain a known value"
NOT_A_NUMBER = "is not a number"
NOT_AN_INTEGER = "must be an integer"
NEGATIVE = "must be greater than or equal to 0"


def check_required_fields(need) -> List[ValidationIssue]:
    """role, goal and benefit must be filled in."""
    return [
        ValidationIssue(field, BLANK)
        for field in REQUIRED_FIELDS
        if is_blank(getattr(need, field, None))
    ]


def check_impact(need) -> List[ValidationIssue]:
    """impact, when given, must be one of the fixed levels."""
    impact = getattr(need, "impact", None)
    if is_blank(impact) or impact in IMPACT:
        return []
    return [ValidationIssue("impact", NOT_INCLUDED, impact)]


def check_justifications(need) -> List[ValidationIssue]:
    """Every justification must come from the fixed list; one error covers all."""
    justifications = getattr(need, "justifications", None)
    if justifications is None:
        return []
    unknown = [j for j in justifications if j not in JUSTIFICATIONS]
    if not unknown:
        return []
    return [ValidationIssue("justifications", UNKNOWN_JUSTIFICATION, unknown)]


def numericality_issue(field: str, value) -> ValidationIssue | None:
    """Problem with a non-negative integer field, or None if *value* is fine."""
    if is_blank(value):
        return None
    if not is_number(value):
        return ValidationIssue(field, NOT_A_NUMBER, value)
    if isinstance(value, str):
        text = value.strip()
        if not text.lstrip("+-").isdigit():
            return ValidationIssue(field, NOT_AN_INTEGER, value)
        number = int(text)
    elif isinstance(value, float):
        return ValidationIssue(field, NOT_AN_INTEGER, value)
    else:
        number = value
    if number < 0:
        return ValidationIssue(field, NEGATIVE, value)
    return None


def check_numeric_fields(need) -> List[ValidationIssue]:
    """Usage estimates must be non-negative integers when present."""
    issues = []
    for field in NUMERIC_FIELDS:
        issue = numericality_issue(field, getattr(need, field, None))
        if issue:
            issues.append(issue)
    return issues


NEED_RULES = ValidationRegistry()
NEED_RULES.register("required_fields", check_required_fields)
NEED_RULES.register("impact", check_impact)
NEED_RULES.register("justifications", check_justifications)
NEED_RULES.register("numeric_fields", check_numeric_fields)


def validate_need(need) -> ValidationResult:
    """Run every need rule against *need*."""
    return NEED_RULES.run_all(need)
