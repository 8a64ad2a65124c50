"""
TypeScript-specific naming utilities and sanitization.

Handles JavaScript reserved words and TypeScript contextual keywords.
"""

from ...core.naming import NameSanitizer, create_sanitizer


# JavaScript reserved words
JS_RESERVED_WORDS = {
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "debugger",
    "default",
    "delete",
    "do",
    "else",
    "enum",
    "export",
    "extends",
    "false",
    "finally",
    "for",
    "function",
    "if",
    "import",
    "in",
    "instanceof",
    "new",
    "null",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "typeof",
    "var",
    "void",
    "while",
    "with",
    "yield",
}

# Strict-mode and TypeScript keywords
TS_KEYWORDS = {
    "as",
    "implements",
    "interface",
    "let",
    "package",
    "private",
    "protected",
    "public",
    "static",
    "any",
    "boolean",
    "constructor",
    "declare",
    "module",
    "number",
    "string",
    "symbol",
    "type",
}

TYPESCRIPT_RESERVED_WORDS = JS_RESERVED_WORDS | TS_KEYWORDS


def create_typescript_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for TypeScript."""
    return create_sanitizer(TYPESCRIPT_RESERVED_WORDS)
