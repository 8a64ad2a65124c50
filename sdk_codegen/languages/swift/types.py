"""Swift type table."""

from types import MappingProxyType

from ...core.types import LanguageTypes

SWIFT_TYPES = LanguageTypes(
    language="swift",
    primitives=MappingProxyType(
        {
            "string": "String",
            "boolean": "Bool",
            "integer": "Int64",
            "int64": "Int64",
            "number": "Double",
            "float": "Float",
            "double": "Double",
            "date": "Date",
            "date-time": "Date",
            "binary": "Data",
            "uri": "String",
            "email": "String",
            "password": "String",
            "any": "Any",
        }
    ),
    array_format="[{}]",
    map_format="[String: {}]",
    nullable_by_default=False,
)
