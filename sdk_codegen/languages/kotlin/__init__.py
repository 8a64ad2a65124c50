"""
Kotlin code generator module.

Generates Kotlin model classes and an APIMethods client from an ApiModel.
"""

from .generator import KotlinGenerator
from .naming import KOTLIN_RESERVED_WORDS, create_kotlin_sanitizer
from .types import KOTLIN_TYPES

__all__ = [
    "KotlinGenerator",
    "KOTLIN_RESERVED_WORDS",
    "KOTLIN_TYPES",
    "create_kotlin_sanitizer",
]
