"""Shared utilities for the Maslow needs tools."""

# String utilities
from utils.strings import (
    is_blank,
    slugify,
    strip_leading_newline,
    coerce_integer,
    is_number,
    normalize_whitespace,
)

# Validation utilities
from utils.validation import (
    ValidationIssue,
    ValidationResult,
    ValidationRegistry,
)

# HTTP utilities
from utils.http import (
    RetryStrategy,
    SessionManager,
)

# Caching
from utils.cache import TTLCache

# Configuration
from utils.config import (
    Config,
    AppConfig,
)

# Logging
from utils.log import JsonFormatter, configure_logging

__all__ = [
    # Strings
    "is_blank",
    "slugify",
    "strip_leading_newline",
    "coerce_integer",
    "is_number",
    "normalize_whitespace",
    # Validation
    "ValidationIssue",
    "ValidationResult",
    "ValidationRegistry",
    # HTTP
    "RetryStrategy",
    "SessionManager",
    # Cache
    "TTLCache",
    # Config
    "Config",
    "AppConfig",
    # Logging
    "JsonFormatter",
    "configure_logging",
]
