"""
Type mapping from model types to target-language types.

Each language ships an immutable LanguageTypes table; map_type() is a
pure function over (type, table) so generators can call it freely.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Mapping, Optional

from .errors import ModelIntegrityError, UnknownPrimitiveError
from .model import ArrayType, EnumType, MapType, ObjectType, PrimitiveType, Type


@dataclass(frozen=True)
class MappedType:
    """
    Immutable description of a type in the target language.

    native_name is the spelling used in declarations; element carries the
    mapped element type for collections.
    """

    native_name: str
    is_nullable: bool = True
    is_collection: bool = False
    element: Optional["MappedType"] = field(default=None, compare=True)


@dataclass(frozen=True)
class LanguageTypes:
    """Type table for one target language."""

    language: str
    primitives: Mapping[str, str]
    array_format: str = "{}[]"
    map_format: str = "Map<String, {}>"
    # Whether a bare type name admits null in the target language
    nullable_by_default: bool = True
    # Native names that never admit null, even when nullable_by_default
    value_types: FrozenSet[str] = frozenset()

    def is_nullable(self, native_name: str) -> bool:
        return self.nullable_by_default and native_name not in self.value_types


def map_type(type_: Type, language: LanguageTypes) -> MappedType:
    """
    Map a model type to the target language.

    Args:
        type_: Any model type variant
        language: Target language type table

    Returns:
        MappedType for the target language

    Raises:
        UnknownPrimitiveError: If a primitive has no mapping in the table
    """
    if isinstance(type_, PrimitiveType):
        native = language.primitives.get(type_.name)
        if native is None:
            raise UnknownPrimitiveError(type_.name, language.language)
        return MappedType(native_name=native, is_nullable=language.is_nullable(native))

    elif isinstance(type_, ArrayType):
        element = map_type(type_.element_type, language)
        native = language.array_format.format(element.native_name)
        return MappedType(
            native_name=native,
            is_nullable=language.is_nullable(native),
            is_collection=True,
            element=element,
        )

    elif isinstance(type_, MapType):
        element = map_type(type_.value_type, language)
        native = language.map_format.format(element.native_name)
        return MappedType(
            native_name=native,
            is_nullable=language.is_nullable(native),
            is_collection=True,
            element=element,
        )

    elif isinstance(type_, (EnumType, ObjectType)):
        return MappedType(
            native_name=type_.name, is_nullable=language.is_nullable(type_.name)
        )

    raise ModelIntegrityError(f"Unsupported type kind: {type(type_).__name__}")
