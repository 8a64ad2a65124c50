"""TypeScript type table."""

from types import MappingProxyType

from ...core.types import LanguageTypes

TYPESCRIPT_TYPES = LanguageTypes(
    language="typescript",
    primitives=MappingProxyType(
        {
            "string": "string",
            "boolean": "boolean",
            "integer": "number",
            "int64": "number",
            "number": "number",
            "float": "number",
            "double": "number",
            "date": "Date",
            "date-time": "Date",
            "binary": "Blob",
            "uri": "string",
            "email": "string",
            "password": "string",
            "any": "any",
        }
    ),
    array_format="{}[]",
    map_format="Record<string, {}>",
    nullable_by_default=False,
)
