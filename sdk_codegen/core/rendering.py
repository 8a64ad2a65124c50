"""
Shared rendering helpers.

Free functions each language generator calls for the parts of the
contract whose shape is the same everywhere (doc comments, region
markers, parameter docs, path templates).
"""

import re
from enum import Enum
from typing import Callable, Iterable, List, Optional

from .model import (
    ArrayType,
    EnumType,
    MapType,
    Method,
    ObjectType,
    Parameter,
    ParameterLocation,
    PrimitiveType,
    Type,
)
from .types import MappedType

_PATH_PARAM = re.compile(r"\{([^}]+)\}")


def comment_lines(indent: str, text: str, prefix: str) -> str:
    """Single-line comment form: one prefixed line per text line."""
    lines = []
    for line in text.split("\n"):
        lines.append(f"{indent}{prefix} {line}".rstrip())
    return "\n".join(lines) + "\n"


def comment_block(
    indent: str, text: str, opener: str, closer: str, block_char: str
) -> str:
    """
    Block comment form.

    The text is padded with a blank line above and below; each text line
    and the closer are prefixed with block_char.
    """
    lines = [f"{indent}{opener}", ""]
    for line in text.split("\n"):
        lines.append(f"{indent}{block_char}{line}".rstrip())
    lines.append("")
    lines.append(f"{indent}{block_char}{closer}")
    return "\n".join(lines) + "\n"


def comment_header(
    indent: str,
    text: Optional[str],
    block_char: Optional[str],
    line_prefix: str,
    opener: str,
    closer: str,
) -> str:
    """Empty for empty text, otherwise the line or block comment form."""
    if not text:
        return ""
    if block_char is None:
        return comment_lines(indent, text, line_prefix)
    return comment_block(indent, text, opener, closer, block_char)


def region_marker(indent: str, marker: str, name: str) -> str:
    """Fold marker whose last token is the region name."""
    return f"{indent}{marker} {name}"


def param_comment(param: Parameter, mapped: MappedType) -> str:
    """One documentation line per parameter."""
    return f"@param {{{mapped.native_name}}} {param.name} {param.description}".rstrip()


def method_doc(summary: str, comments: Iterable[str]) -> str:
    """Method summary followed by its parameter lines."""
    lines = [summary] if summary else []
    lines.extend(comments)
    return "\n".join(lines)


def path_template(path: str, render: Callable[[str], str]) -> str:
    """Replace each {name} placeholder in a path with render(name)."""
    return _PATH_PARAM.sub(lambda match: render(match.group(1)), path)


def join_members(parts: Iterable[str]) -> str:
    """Join non-empty rendered members with a blank line between them."""
    chunks = [part.rstrip("\n") for part in parts if part and part.strip()]
    return "\n\n".join(chunks) + "\n" if chunks else ""


DATE_PRIMITIVES = frozenset({"date", "date-time"})


class ValueKind(Enum):
    """How a value converts between its raw JSON form and its typed form."""

    SCALAR = "scalar"
    DATETIME = "datetime"
    ENUM = "enum"
    OBJECT = "object"
    LIST = "list"
    DATETIME_LIST = "datetime_list"
    ENUM_LIST = "enum_list"
    OBJECT_LIST = "object_list"
    MAP = "map"


def value_kind(type_: Type) -> ValueKind:
    """Conversion category of a model type."""
    if isinstance(type_, PrimitiveType):
        if type_.name in DATE_PRIMITIVES:
            return ValueKind.DATETIME
        return ValueKind.SCALAR
    elif isinstance(type_, EnumType):
        return ValueKind.ENUM
    elif isinstance(type_, ObjectType):
        return ValueKind.OBJECT
    elif isinstance(type_, ArrayType):
        inner = value_kind(type_.element_type)
        if inner == ValueKind.DATETIME:
            return ValueKind.DATETIME_LIST
        if inner == ValueKind.ENUM:
            return ValueKind.ENUM_LIST
        if inner == ValueKind.OBJECT:
            return ValueKind.OBJECT_LIST
        return ValueKind.LIST
    elif isinstance(type_, MapType):
        return ValueKind.MAP
    raise TypeError(f"Unsupported type kind: {type(type_).__name__}")


def named_element(type_: Type) -> str:
    """Name of an array's element type (the type's own name otherwise)."""
    if isinstance(type_, ArrayType):
        return type_.element_type.name
    return type_.name


def signature_parameters(method: Method) -> List[Parameter]:
    """
    Parameters in call-signature order.

    A method with a body type but no explicit body parameter gets an
    implicit required "body" parameter after its declared ones.
    """
    params = list(method.parameters)
    has_body = any(p.location == ParameterLocation.BODY for p in params)
    if method.body_type is not None and not has_body:
        params.append(
            Parameter(
                name="body",
                type=method.body_type,
                description="body parameter",
                required=True,
                location=ParameterLocation.BODY,
            )
        )
    return Method(
        operation_id=method.operation_id,
        http_verb=method.http_verb,
        path=method.path,
        parameters=tuple(params),
    ).ordered_parameters()


def body_parameter(method: Method) -> Optional[Parameter]:
    for param in signature_parameters(method):
        if param.location == ParameterLocation.BODY:
            return param
    return None


def query_parameters(method: Method) -> List[Parameter]:
    return [p for p in signature_parameters(method) if p.location == ParameterLocation.QUERY]
