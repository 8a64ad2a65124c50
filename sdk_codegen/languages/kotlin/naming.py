"""
Kotlin-specific naming utilities and sanitization.

Only hard keywords are reserved; soft and modifier keywords are valid
identifiers in Kotlin.
"""

from ...core.naming import NameSanitizer, create_sanitizer


# Kotlin hard keywords
KOTLIN_RESERVED_WORDS = {
    "as",
    "break",
    "class",
    "continue",
    "do",
    "else",
    "false",
    "for",
    "fun",
    "if",
    "in",
    "interface",
    "is",
    "null",
    "object",
    "package",
    "return",
    "super",
    "this",
    "throw",
    "true",
    "try",
    "typealias",
    "typeof",
    "val",
    "var",
    "when",
    "while",
}


def create_kotlin_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Kotlin."""
    return create_sanitizer(KOTLIN_RESERVED_WORDS)
