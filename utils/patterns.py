"""Pre-compiled regex patterns for the Maslow needs tools.

All patterns are compiled once at module import.

Usage:
    from utils.patterns import CONFLICTING_CONTENT_ID, NON_ALPHANUMERIC

    match = CONFLICTING_CONTENT_ID.search(message)
"""

import re

# Runs of characters that cannot appear in a URL slug
NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]+')

# Textareas submitted from HTML forms may carry one leading newline
LEADING_NEWLINE = re.compile(r'\A\n')

# Publishing API base-path conflict message: "... content_id=<uuid> ..."
# Captures the conflicting content id (group 1)
CONFLICTING_CONTENT_ID = re.compile(r'content_id=([^\s]+)')

# Whole-string integer, optional sign: "12", "-3", "+7"
INTEGER = re.compile(r'\A[+-]?\d+\Z')

# Whole-string decimal number: "1.5", "-0.25", "3."
DECIMAL = re.compile(r'\A[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\Z')

# Whitespace normalization: multiple spaces/tabs/newlines
WHITESPACE = re.compile(r'\s+')
