"""
Exception hierarchy for SDK code generation.

All errors derive from CodegenError so a driver can isolate one target
language's failure from the others with a single except clause.
"""

from typing import Optional


class CodegenError(Exception):
    """Base exception for all code generation errors."""

    pass


class UnresolvedTypeError(CodegenError):
    """A type name is referenced but not present in the model."""

    def __init__(self, type_name: str, context: Optional[str] = None):
        self.type_name = type_name
        self.context = context
        message = f"Unresolved type: {type_name}"
        if context:
            message = f"{message} (referenced by {context})"
        super().__init__(message)


class UnknownPrimitiveError(CodegenError):
    """A primitive type has no mapping for the target language."""

    def __init__(self, name: str, language: str):
        self.name = name
        self.language = language
        super().__init__(f"No {language} mapping for primitive type '{name}'")


class ModelIntegrityError(CodegenError):
    """A structural invariant of the model is violated."""

    pass


class ModelLoadError(CodegenError):
    """A model document could not be read."""

    pass


class GeneratorError(CodegenError):
    """Base exception for generator-level failures."""

    pass
