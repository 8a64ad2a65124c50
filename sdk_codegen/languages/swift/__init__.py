"""
Swift code generator module.

Generates Swift model classes and an APIMethods client from an ApiModel.
"""

from .generator import SwiftGenerator
from .naming import SWIFT_RESERVED_WORDS, create_swift_sanitizer
from .types import SWIFT_TYPES

__all__ = [
    "SwiftGenerator",
    "SWIFT_RESERVED_WORDS",
    "SWIFT_TYPES",
    "create_swift_sanitizer",
]
