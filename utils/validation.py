"""Record validation utilities for the Maslow needs tools.

Provides reusable building blocks for:
- Describing a single field-level validation problem
- Collecting problems into a result object
- Running a named set of validation rules against a record
"""

from typing import Any, Callable, Dict, List, Optional


class ValidationIssue:
    """Represents a single field-level validation problem."""

    def __init__(self, field: str, message: str, value: Optional[Any] = None):
        """Initialize a validation issue.

        Args:
            field: Name of the attribute that failed
            message: Human-readable description, e.g. "can't be blank"
            value: The offending value, when useful for reporting
        """
        self.field = field
        self.message = message
        self.value = value

    def full_message(self) -> str:
        """Message prefixed with a humanised field name ("Role can't be blank")."""
        label = self.field.replace("_", " ").capitalize()
        return f"{label} {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "field": self.field,
            "message": self.message,
            "value": self.value,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, ValidationIssue):
            return NotImplemented
        return (self.field, self.message) == (other.field, other.message)

    def __repr__(self) -> str:
        return f"ValidationIssue(field={self.field}, message={self.message!r})"


class ValidationResult:
    """Collects the field-level issues found for one record."""

    def __init__(self):
        """Initialize empty validation result."""
        self.issues: List[ValidationIssue] = []
        self.passed_checks: List[str] = []
        self.failed_checks: List[str] = []

    def add_issue(self, field: str, message: str, value: Optional[Any] = None) -> None:
        """Record a problem with *field*."""
        self.issues.append(ValidationIssue(field, message, value))

    def mark_check_passed(self, check_name: str) -> None:
        """Mark a check as passed."""
        self.passed_checks.append(check_name)

    def mark_check_failed(self, check_name: str) -> None:
        """Mark a check as failed."""
        self.failed_checks.append(check_name)

    def fields(self) -> List[str]:
        """Names of fields with at least one issue, in first-seen order."""
        seen: List[str] = []
        for issue in self.issues:
            if issue.field not in seen:
                seen.append(issue.field)
        return seen

    def messages_for(self, field: str) -> List[str]:
        """All messages recorded against *field*."""
        return [i.message for i in self.issues if i.field == field]

    def full_messages(self) -> List[str]:
        """Every issue rendered as a sentence."""
        return [i.full_message() for i in self.issues]

    def is_valid(self) -> bool:
        """Check if validation passed (no issues)."""
        return not self.issues

    def __contains__(self, field: str) -> bool:
        return any(i.field == field for i in self.issues)

    def __len__(self) -> int:
        """Number of issues, so an empty result is falsy like an empty list."""
        return len(self.issues)

    def summary_text(self) -> str:
        """Generate human-readable validation summary."""
        if self.is_valid():
            return "Validation passed"
        lines = [f"Validation failed ({len(self.issues)} issue(s)):"]
        lines.extend(f"  - {m}" for m in self.full_messages())
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        errors: Dict[str, List[str]] = {}
        for issue in self.issues:
            errors.setdefault(issue.field, []).append(issue.message)
        return {
            "valid": self.is_valid(),
            "errors": errors,
            "passed_checks": self.passed_checks,
            "failed_checks": self.failed_checks,
        }


class ValidationRegistry:
    """Manages a collection of validation rule functions.

    Each rule takes the record and returns a list of ValidationIssue
    (empty when the record satisfies the rule).  Rules are independent;
    every rule runs even when an earlier one failed.
    """

    def __init__(self):
        """Initialize empty registry."""
        self.checks: Dict[str, Callable[[Any], List[ValidationIssue]]] = {}

    def register(self, name: str, check_fn: Callable[[Any], List[ValidationIssue]]) -> None:
        """Register a validation rule.

        Args:
            name: Human-readable rule name
            check_fn: Function that returns List[ValidationIssue]
        """
        self.checks[name] = check_fn

    def run_all(self, record: Any,
                skip_checks: Optional[List[str]] = None) -> ValidationResult:
        """Run all registered rules against *record*.

        Args:
            record: Object to validate
            skip_checks: List of rule names to skip

        Returns:
            ValidationResult with all issues found
        """
        skip = skip_checks or []
        result = ValidationResult()

        for check_name, check_fn in self.checks.items():
            if check_name in skip:
                continue
            issues = check_fn(record)
            if issues:
                for issue in issues:
                    result.add_issue(issue.field, issue.message, issue.value)
                result.mark_check_failed(check_name)
            else:
                result.mark_check_passed(check_name)

        return result
