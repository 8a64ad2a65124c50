"""
Swift-specific naming utilities and sanitization.

Handles Swift keywords used in declarations, statements and expressions.
"""

from ...core.naming import NameSanitizer, create_sanitizer


# Swift keywords
SWIFT_RESERVED_WORDS = {
    # Declarations
    "associatedtype",
    "class",
    "deinit",
    "enum",
    "extension",
    "fileprivate",
    "func",
    "import",
    "init",
    "inout",
    "internal",
    "let",
    "open",
    "operator",
    "private",
    "protocol",
    "public",
    "rethrows",
    "static",
    "struct",
    "subscript",
    "typealias",
    "var",
    # Statements
    "break",
    "case",
    "continue",
    "default",
    "defer",
    "do",
    "else",
    "fallthrough",
    "for",
    "guard",
    "if",
    "in",
    "repeat",
    "return",
    "switch",
    "where",
    "while",
    # Expressions and types
    "as",
    "Any",
    "catch",
    "false",
    "is",
    "nil",
    "super",
    "self",
    "Self",
    "throw",
    "throws",
    "true",
    "try",
}


def create_swift_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Swift."""
    return create_sanitizer(SWIFT_RESERVED_WORDS)
