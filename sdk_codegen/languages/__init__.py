"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .csharp import CSharpGenerator
from .dart import DartGenerator
from .kotlin import KotlinGenerator
from .python import PythonGenerator
from .swift import SwiftGenerator
from .typescript import TypeScriptGenerator

__all__ = [
    "CSharpGenerator",
    "DartGenerator",
    "KotlinGenerator",
    "PythonGenerator",
    "SwiftGenerator",
    "TypeScriptGenerator",
]
