"""Dart type table."""

from types import MappingProxyType

from ...core.types import LanguageTypes

DART_TYPES = LanguageTypes(
    language="dart",
    primitives=MappingProxyType(
        {
            "string": "String",
            "boolean": "bool",
            "integer": "int",
            "int64": "int",
            "number": "double",
            "float": "double",
            "double": "double",
            "date": "DateTime",
            "date-time": "DateTime",
            "binary": "dynamic",
            "uri": "String",
            "email": "String",
            "password": "String",
            "any": "dynamic",
        }
    ),
    array_format="List<{}>",
    map_format="Map<String, {}>",
    nullable_by_default=True,
)
