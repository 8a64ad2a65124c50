"""Kotlin type table."""

from types import MappingProxyType

from ...core.types import LanguageTypes

KOTLIN_TYPES = LanguageTypes(
    language="kotlin",
    primitives=MappingProxyType(
        {
            "string": "String",
            "boolean": "Boolean",
            "integer": "Long",
            "int64": "Long",
            "number": "Double",
            "float": "Float",
            "double": "Double",
            "date": "Date",
            "date-time": "Date",
            "binary": "ByteArray",
            "uri": "String",
            "email": "String",
            "password": "String",
            "any": "Any",
        }
    ),
    array_format="Array<{}>",
    map_format="Map<String, {}>",
    nullable_by_default=False,
)
