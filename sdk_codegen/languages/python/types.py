"""Python type table."""

from types import MappingProxyType

from ...core.types import LanguageTypes

PYTHON_TYPES = LanguageTypes(
    language="python",
    primitives=MappingProxyType(
        {
            "string": "str",
            "boolean": "bool",
            "integer": "int",
            "int64": "int",
            "number": "float",
            "float": "float",
            "double": "float",
            "date": "datetime.datetime",
            "date-time": "datetime.datetime",
            "binary": "bytes",
            "uri": "str",
            "email": "str",
            "password": "str",
            "any": "Any",
        }
    ),
    array_format="Sequence[{}]",
    map_format="MutableMapping[str, {}]",
    nullable_by_default=True,
)
