"""
Dart-specific naming utilities and sanitization.

Handles Dart reserved words and built-in identifiers.
"""

from ...core.naming import NameSanitizer, create_sanitizer


# Dart reserved words, built-in identifiers and contextual keywords
DART_RESERVED_WORDS = {
    "abstract",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "covariant",
    "default",
    "deferred",
    "do",
    "dynamic",
    "else",
    "enum",
    "export",
    "extends",
    "extension",
    "external",
    "factory",
    "false",
    "final",
    "finally",
    "for",
    "Function",
    "get",
    "hide",
    "if",
    "implements",
    "import",
    "in",
    "interface",
    "is",
    "late",
    "library",
    "mixin",
    "new",
    "null",
    "on",
    "operator",
    "part",
    "required",
    "rethrow",
    "return",
    "set",
    "show",
    "static",
    "super",
    "switch",
    "sync",
    "this",
    "throw",
    "true",
    "try",
    "typedef",
    "var",
    "void",
    "while",
    "with",
    "yield",
}


def create_dart_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Dart."""
    return create_sanitizer(DART_RESERVED_WORDS)
