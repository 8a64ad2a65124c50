"""
Python code generator module.

Generates Python model classes and an APIMethods client from an ApiModel.
"""

from .generator import PythonGenerator
from .naming import PYTHON_RESERVED_WORDS, create_python_sanitizer
from .types import PYTHON_TYPES

__all__ = [
    "PythonGenerator",
    "PYTHON_RESERVED_WORDS",
    "PYTHON_TYPES",
    "create_python_sanitizer",
]
