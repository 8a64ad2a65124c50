"""
C# code generator module.

Generates C# model classes and an ApiMethods client from an ApiModel.
"""

from .generator import CSharpGenerator
from .naming import CSHARP_RESERVED_WORDS, create_csharp_sanitizer
from .types import CSHARP_TYPES

__all__ = [
    "CSharpGenerator",
    "CSHARP_RESERVED_WORDS",
    "CSHARP_TYPES",
    "create_csharp_sanitizer",
]
