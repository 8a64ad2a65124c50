"""C# type table."""

from types import MappingProxyType

from ...core.types import LanguageTypes

CSHARP_TYPES = LanguageTypes(
    language="csharp",
    primitives=MappingProxyType(
        {
            "string": "string",
            "boolean": "bool",
            "integer": "long",
            "int64": "long",
            "number": "double",
            "float": "float",
            "double": "double",
            "date": "DateTime",
            "date-time": "DateTime",
            "binary": "byte[]",
            "uri": "string",
            "email": "string",
            "password": "string",
            "any": "object",
        }
    ),
    array_format="{}[]",
    map_format="IDictionary<string, {}>",
    nullable_by_default=True,
    # Structs: nullable only when declared with '?'
    value_types=frozenset({"bool", "int", "long", "double", "float", "DateTime"}),
)
