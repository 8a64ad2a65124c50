"""
TypeScript code generator module.

Generates TypeScript model classes and an APIMethods client from an ApiModel.
"""

from .generator import TypeScriptGenerator
from .naming import TYPESCRIPT_RESERVED_WORDS, create_typescript_sanitizer
from .types import TYPESCRIPT_TYPES

__all__ = [
    "TypeScriptGenerator",
    "TYPESCRIPT_RESERVED_WORDS",
    "TYPESCRIPT_TYPES",
    "create_typescript_sanitizer",
]
