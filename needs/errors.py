"""Exceptions raised by the needs model."""


class NotFound(Exception):
    """No need exists in the Publishing API for the requested content id."""

    def __init__(self, need_id):
        super().__init__(f"Need with ID {need_id} not found")
        self.need_id = need_id


class BasePathAlreadyInUse(Exception):
    """Saving failed because another content item owns the derived base path."""

    def __init__(self, content_id: str):
        super().__init__(
            "Publishing API rejected update as the base path is already in use"
        )
        self.content_id = content_id


class UnknownFieldError(AttributeError):
    """An attribute name outside ALLOWED_FIELDS was passed to Need.update."""

    def __init__(self, field: str):
        super().__init__(f"Unknown need field: {field!r}")
        self.field = field


class UnknownPublicationState(ValueError):
    """publication_state holds a value the status mapping does not know."""

    def __init__(self, publication_state):
        super().__init__(f"publication_state: {publication_state} not recognised")
        self.publication_state = publication_state


class InvalidNeed(ValueError):
    """save() was called on a need that fails validation."""

    def __init__(self, errors):
        super().__init__(
            "Cannot save an invalid need: " + "; ".join(errors.full_messages())
        )
        self.errors = errors
