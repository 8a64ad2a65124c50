"""
Python-specific naming utilities and sanitization.

Handles Python keywords.
"""

import keyword

from ...core.naming import NameSanitizer, create_sanitizer


# Python reserved keywords
PYTHON_RESERVED_WORDS = set(keyword.kwlist)


def create_python_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Python."""
    return create_sanitizer(PYTHON_RESERVED_WORDS)
