"""
In-memory API model for code generation.

Converts a normalized API document into an immutable ApiModel that
every language generator reads from during one generation run.
"""

import json
from dataclasses import FrozenInstanceError, dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from ..logging_config import get_logger
from .errors import ModelIntegrityError, ModelLoadError, UnresolvedTypeError

logger = get_logger(__name__)


# Primitive names every language type table is expected to cover
PRIMITIVE_NAMES = frozenset(
    {
        "string",
        "boolean",
        "integer",
        "int64",
        "number",
        "float",
        "double",
        "date",
        "date-time",
        "binary",
        "uri",
        "email",
        "password",
        "any",
    }
)


class ParameterLocation(Enum):
    """Where a method parameter travels in the HTTP request."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"
    HEADER = "header"


@dataclass(frozen=True)
class PrimitiveType:
    """Built-in scalar type such as string or date-time."""

    name: str


@dataclass(frozen=True)
class ArrayType:
    """Ordered collection of another type."""

    element_type: "Type"

    @property
    def name(self) -> str:
        return f"{type_name(self.element_type)}[]"


@dataclass(frozen=True)
class MapType:
    """String-keyed dictionary of another type."""

    value_type: "Type"

    @property
    def name(self) -> str:
        return f"Hash[{type_name(self.value_type)}]"


@dataclass(frozen=True)
class EnumType:
    """Named enumeration. Value order is the rendering order."""

    name: str
    values: Tuple[str, ...]
    description: str = ""


@dataclass(eq=False)
class ObjectType:
    """
    Named structure with properties.

    Compared by identity so self-referencing types stay hashable.
    The parent is stored by name and resolved through the model.
    """

    name: str
    properties: Mapping[str, "Property"] = field(default_factory=dict, repr=False)
    parent: Optional[str] = None
    description: str = ""

    def __setattr__(self, name: str, value: Any):
        if self.__dict__.get("_sealed", False):
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def seal(self):
        """Freeze the property mapping and reject further assignment."""
        if self.__dict__.get("_sealed", False):
            return
        self.properties = MappingProxyType(dict(self.properties))
        self._sealed = True


Type = Union[PrimitiveType, ArrayType, MapType, EnumType, ObjectType]
NamedType = Union[EnumType, ObjectType]


@dataclass(frozen=True)
class Property:
    """A property owned by its declaring ObjectType."""

    name: str
    type: Type
    description: str = ""
    required: bool = False


@dataclass(frozen=True)
class Parameter:
    """A method parameter. Order within a method is significant."""

    name: str
    type: Type
    description: str = ""
    required: bool = False
    location: ParameterLocation = ParameterLocation.QUERY


@dataclass(frozen=True)
class Method:
    """One API operation."""

    operation_id: str
    http_verb: str
    path: str
    summary: str = ""
    parameters: Tuple[Parameter, ...] = ()
    body_type: Optional[Type] = None
    response_type: Optional[Type] = None

    def ordered_parameters(self) -> List[Parameter]:
        """
        Parameters in call-signature order.

        Required parameters precede optional ones; source order is kept
        within each group, so an already conforming list is unchanged.
        """
        required = [p for p in self.parameters if p.required]
        optional = [p for p in self.parameters if not p.required]
        return required + optional


@dataclass(frozen=True)
class VersionInfo:
    """Version stamp a generator is bound to."""

    api_version: str
    product_version: str = ""


def type_name(type_: Type) -> str:
    """Display name of any type variant."""
    return type_.name


def element_type(type_: Type) -> Type:
    """Innermost element type of nested arrays and maps."""
    while isinstance(type_, (ArrayType, MapType)):
        type_ = type_.element_type if isinstance(type_, ArrayType) else type_.value_type
    return type_


class ApiModel:
    """
    Resolved description of one API version.

    Read-only once constructed: accessors never mutate state and
    object-type property mappings are frozen.
    """

    def __init__(
        self,
        version: str,
        types: Optional[List[NamedType]] = None,
        methods: Optional[List[Method]] = None,
    ):
        self.version = version
        self._types: Dict[str, NamedType] = {}
        self._methods: Dict[str, Method] = {}

        for type_ in types or []:
            if type_.name in self._types:
                raise ModelIntegrityError(f"Duplicate type name: {type_.name}")
            if isinstance(type_, EnumType) and not type_.values:
                raise ModelIntegrityError(f"Enum {type_.name} has no values")
            self._types[type_.name] = type_

        for method in methods or []:
            if method.operation_id in self._methods:
                raise ModelIntegrityError(
                    f"Duplicate operation id: {method.operation_id}"
                )
            self._methods[method.operation_id] = method

        self._check_references()

        for type_ in self._types.values():
            if isinstance(type_, ObjectType):
                type_.seal()

        logger.debug(
            "Model %s built with %d types and %d methods",
            version,
            len(self._types),
            len(self._methods),
        )

    def _check_references(self):
        """Every named type used anywhere must belong to this model."""
        for type_ in self._types.values():
            if isinstance(type_, ObjectType):
                for prop in type_.properties.values():
                    self._check_reference(prop.type, f"{type_.name}.{prop.name}")

        for method in self._methods.values():
            for param in method.parameters:
                self._check_reference(
                    param.type, f"{method.operation_id}({param.name})"
                )
            if method.body_type is not None:
                self._check_reference(method.body_type, f"{method.operation_id} body")
            if method.response_type is not None:
                self._check_reference(
                    method.response_type, f"{method.operation_id} response"
                )

    def _check_reference(self, type_: Type, context: str):
        inner = element_type(type_)
        if isinstance(inner, (EnumType, ObjectType)):
            if self._types.get(inner.name) is not inner:
                raise UnresolvedTypeError(inner.name, context)

    def resolve_type(self, ref: Union[str, Type]) -> Type:
        """
        Resolve a type name (or type) to the model's type.

        Raises:
            UnresolvedTypeError: If the name is neither declared nor primitive
        """
        if not isinstance(ref, str):
            inner = element_type(ref)
            if isinstance(inner, (EnumType, ObjectType)):
                self.resolve_type(inner.name)
            return ref

        if ref in self._types:
            return self._types[ref]
        if ref in PRIMITIVE_NAMES:
            return PrimitiveType(ref)
        raise UnresolvedTypeError(ref)

    def all_types(self) -> List[NamedType]:
        """All declared types in insertion order."""
        return list(self._types.values())

    def all_methods(self) -> List[Method]:
        """All methods in insertion order."""
        return list(self._methods.values())

    def get_method(self, operation_id: str) -> Method:
        try:
            return self._methods[operation_id]
        except KeyError:
            raise ModelIntegrityError(f"Unknown operation id: {operation_id}")

    def enum_values_of(self, type_name: str) -> Tuple[str, ...]:
        """Ordered values of a declared enum."""
        type_ = self.resolve_type(type_name)
        if not isinstance(type_, EnumType):
            raise ModelIntegrityError(f"{type_name} is not an enum type")
        return type_.values

    def parent_of(self, type_: ObjectType) -> Optional[ObjectType]:
        """
        Resolve the declared parent of an object type.

        Raises:
            ModelIntegrityError: If the parent is unknown, not an object
                type, or the parent chain is cyclic
        """
        if not type_.parent:
            return None

        seen = {type_.name}
        current = type_
        parent = None
        while current.parent:
            candidate = self._types.get(current.parent)
            if not isinstance(candidate, ObjectType):
                raise ModelIntegrityError(
                    f"Parent {current.parent} of {current.name} cannot be resolved"
                )
            if candidate.name in seen:
                raise ModelIntegrityError(
                    f"Cyclic parent chain through {candidate.name}"
                )
            seen.add(candidate.name)
            if parent is None:
                parent = candidate
            current = candidate
        return parent


def build_model(document: Dict[str, Any]) -> ApiModel:
    """
    Convert a normalized API document to an ApiModel.

    Args:
        document: Dict with "version", "types" and "methods" keys

    Returns:
        ApiModel ready for generation
    """
    named: Dict[str, NamedType] = {}
    type_entries = document.get("types", [])

    # Pass 1: create named shells so properties can reference any of them
    for entry in type_entries:
        name = entry["name"]
        if name in named:
            raise ModelIntegrityError(f"Duplicate type name: {name}")
        kind = entry.get("kind", "object")
        if kind == "enum":
            named[name] = EnumType(
                name=name,
                values=tuple(entry.get("values", [])),
                description=entry.get("description", ""),
            )
        elif kind == "object":
            named[name] = ObjectType(
                name=name,
                parent=entry.get("parent"),
                description=entry.get("description", ""),
            )
        else:
            raise ModelIntegrityError(f"Unknown type kind '{kind}' for {name}")

    def convert_type(expr: Any, context: str) -> Type:
        if isinstance(expr, dict):
            if "array" in expr:
                return ArrayType(convert_type(expr["array"], context))
            if "map" in expr:
                return MapType(convert_type(expr["map"], context))
            raise ModelIntegrityError(f"Invalid type expression for {context}: {expr}")
        if expr in named:
            return named[expr]
        if expr in PRIMITIVE_NAMES:
            return PrimitiveType(expr)
        raise UnresolvedTypeError(str(expr), context)

    # Pass 2: fill properties
    for entry in type_entries:
        type_ = named[entry["name"]]
        if isinstance(type_, ObjectType):
            properties = {}
            for prop in entry.get("properties", []):
                context = f"{type_.name}.{prop['name']}"
                properties[prop["name"]] = Property(
                    name=prop["name"],
                    type=convert_type(prop["type"], context),
                    description=prop.get("description", ""),
                    required=prop.get("required", False),
                )
            type_.properties = properties

    methods = []
    for entry in document.get("methods", []):
        operation_id = entry["operation_id"]
        parameters = tuple(
            Parameter(
                name=param["name"],
                type=convert_type(param["type"], f"{operation_id}({param['name']})"),
                description=param.get("description", ""),
                required=param.get("required", False),
                location=ParameterLocation(param.get("location", "query")),
            )
            for param in entry.get("parameters", [])
        )
        body = entry.get("body_type")
        response = entry.get("response_type")
        methods.append(
            Method(
                operation_id=operation_id,
                http_verb=entry.get("http_verb", "GET").upper(),
                path=entry["path"],
                summary=entry.get("summary", ""),
                parameters=parameters,
                body_type=convert_type(body, f"{operation_id} body") if body else None,
                response_type=(
                    convert_type(response, f"{operation_id} response")
                    if response
                    else None
                ),
            )
        )

    return ApiModel(
        version=str(document.get("version", "")),
        types=list(named.values()),
        methods=methods,
    )


def load_model(path: Union[str, Path]) -> ApiModel:
    """Load a normalized API document from a JSON file."""
    path = Path(path)
    logger.debug("Loading model document from %s", path)

    if not path.exists():
        raise ModelLoadError(f"Model document not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            document = json.load(f)
    except json.JSONDecodeError as e:
        raise ModelLoadError(f"Invalid JSON in model document {path}: {e}") from e

    if not isinstance(document, dict):
        raise ModelLoadError(f"Model document must contain a JSON object: {path}")

    return build_model(document)
