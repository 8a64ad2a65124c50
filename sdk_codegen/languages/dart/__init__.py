"""
Dart code generator module.

Generates Dart model classes and an APIMethods client from an ApiModel.
"""

from .generator import DartGenerator
from .naming import DART_RESERVED_WORDS, create_dart_sanitizer
from .types import DART_TYPES

__all__ = [
    "DartGenerator",
    "DART_RESERVED_WORDS",
    "DART_TYPES",
    "create_dart_sanitizer",
]
