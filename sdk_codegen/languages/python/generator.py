"""
Python code generator implementation.

Generates Python model classes with lazily hydrated properties and an
APIMethods subclass with one method per API operation.
"""

from typing import Optional

from ...core import rendering
from ...core.generator import CodeGenerator
from ...core.model import EnumType, Method, ObjectType, Parameter, Property, Type
from ...core.naming import NameSanitizer, NamingCase, quote_literal
from ...core.rendering import ValueKind, named_element, value_kind
from ...core.types import MappedType
from .naming import create_python_sanitizer
from .templates import PYTHON_TEMPLATES
from .types import PYTHON_TYPES

RAW_MAP = "self._api_map_response"
CONTENT_TYPE = "self._api_response_content_type"


class PythonGenerator(CodeGenerator):
    """Code generator for Python SDKs."""

    language_types = PYTHON_TYPES
    templates = PYTHON_TEMPLATES
    property_case = NamingCase.SNAKE_CASE

    @property
    def language_name(self) -> str:
        return "python"

    @property
    def file_extension(self) -> str:
        return ".py"

    def create_sanitizer(self) -> NameSanitizer:
        return create_python_sanitizer()

    def supports_multi_api(self) -> bool:
        return True

    @property
    def api_package(self) -> str:
        """Versioned sub-package, e.g. api40 for API 4.0."""
        return "api" + "".join(ch for ch in self.api_version if ch.isalnum())

    def sdk_file_name(self, base_name: str) -> str:
        root = self.config.output_root
        package = self.config.package_name
        return f"{root}/python/{package}/sdk/{self.api_package}/{base_name}{self.file_extension}"

    def sdk_class_name(self) -> str:
        return self.config.sdk_class_name

    def _context(self, indent: str, depth: int = 3, **extra):
        return {
            **self.indent_levels(indent, depth),
            "product": self.config.product_name,
            "api_version": self.api_version,
            "package": self.config.package_name,
            **extra,
        }

    # Structural brackets

    def methods_prologue(self, indent: str) -> str:
        summary = self.summary(
            indent + self.indent_str,
            f"{self.config.product_name} SDK client for API {self.api_version}",
        )
        return self.render_template(
            "methods_prologue",
            self._context(
                indent,
                type_names=[t.name for t in self.api.all_types()],
                sdk_class=self.sdk_class_name(),
                summary=summary,
            ),
        )

    def methods_epilogue(self, indent: str) -> str:
        # Python classes close by dedent
        return ""

    def models_prologue(self, indent: str) -> str:
        return self.render_template("models_prologue", self._context(indent))

    def models_epilogue(self, indent: str) -> str:
        return ""

    # Documentation

    def comment_header(
        self, indent: str, text: Optional[str] = None, block_char: Optional[str] = None
    ) -> str:
        return rendering.comment_header(indent, text, block_char, "#", '"""', '"""')

    def begin_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "# region", name)

    def end_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "# endregion", name)

    def summary(self, indent: str, text: str) -> str:
        if not text:
            return ""
        return f"{indent}{self._docstring(text)}\n"

    def _docstring(self, text: str) -> str:
        return '"""' + text.replace("\\", "\\\\").replace('"""', '\\"\\"\\"') + '"""'

    def param_comment(self, param: Parameter, mapped: MappedType) -> str:
        return rendering.param_comment(param, mapped)

    # Properties

    def declare_property(self, indent: str, prop: Property) -> str:
        name = self.identifier(prop.name)
        flag = self.sanitizer.flag_name(name, self.property_case)
        native = self.type_map(prop.type).native_name
        return (
            f"{indent}_{name}: Optional[{native}] = None\n"
            f"{indent}_{flag}: bool = False\n"
        )

    def declare_property_get_set(self, indent: str, prop: Property) -> str:
        name = self.identifier(prop.name)
        doc = ""
        if self.config.add_comments and prop.description:
            doc = self._docstring(prop.description.replace("\n", " "))
        return self.render_template(
            "get_set",
            {
                **self.indent_levels(indent, 3),
                "native": self.type_map(prop.type).native_name,
                "name": name,
                "field": f"_{name}",
                "flag": f"_{self.sanitizer.flag_name(name, self.property_case)}",
                "map_var": RAW_MAP,
                "key": quote_literal(prop.name),
                "doc": doc,
                "assignment": self.property_from_json(prop, RAW_MAP),
            },
        )

    def property_from_json(self, prop: Property, map_var: str) -> str:
        name = self.identifier(prop.name)
        raw = f"{map_var}[{quote_literal(prop.name)}]"
        return f"self._{name} = {self._from_raw(prop.type, raw)}"

    def _from_raw(self, type_: Type, raw: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        native = self.type_map(type_).native_name

        if kind == ValueKind.SCALAR:
            if native in ("str", "float"):
                return f"None if {raw} is None else {native}({raw})"
            return raw
        elif kind == ValueKind.DATETIME:
            convert = f"datetime.datetime.fromisoformat({raw})"
        elif kind == ValueKind.ENUM:
            return f"{element}Mapper.from_string_value({raw})"
        elif kind == ValueKind.OBJECT:
            convert = f"{element}.from_response({raw}, {CONTENT_TYPE})"
        elif kind == ValueKind.OBJECT_LIST:
            convert = f"[{element}.from_response(i, {CONTENT_TYPE}) for i in {raw}]"
        elif kind == ValueKind.ENUM_LIST:
            convert = f"[{element}Mapper.from_string_value(i) for i in {raw}]"
        elif kind == ValueKind.DATETIME_LIST:
            convert = f"[datetime.datetime.fromisoformat(i) for i in {raw}]"
        elif kind == ValueKind.MAP:
            convert = f"dict({raw})"
        else:
            convert = f"list({raw})"
        return f"None if {raw} is None else {convert}"

    def _to_raw(self, type_: Type, getter: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        if kind == ValueKind.ENUM:
            return f"{element}Mapper.to_string_value({getter})"
        elif kind == ValueKind.OBJECT:
            convert = f"{getter}.to_json()"
        elif kind == ValueKind.DATETIME:
            convert = f"{getter}.isoformat()"
        elif kind == ValueKind.OBJECT_LIST:
            convert = f"[i.to_json() for i in {getter}]"
        elif kind == ValueKind.ENUM_LIST:
            convert = f"[{element}Mapper.to_string_value(i) for i in {getter}]"
        elif kind == ValueKind.DATETIME_LIST:
            convert = f"[i.isoformat() for i in {getter}]"
        else:
            return getter
        return f"None if {getter} is None else {convert}"

    # Enums

    def declare_enum_value(self, indent: str, value: str) -> str:
        return f"{indent}{self.identifier(value, NamingCase.SNAKE_CASE)}"

    def _enum_values(self, enum_type: EnumType):
        return [
            {
                "identifier": self.declare_enum_value("", value),
                "literal": quote_literal(value),
            }
            for value in enum_type.values
        ]

    def enum_mapper(self, enum_type: EnumType, indent: str = "") -> str:
        return self.render_template(
            "enum_mapper",
            {
                **self.indent_levels(indent, 4),
                "name": enum_type.name,
                "values": self._enum_values(enum_type),
            },
        )

    def declare_enum(self, indent: str, enum_type: EnumType) -> str:
        bump = indent + self.indent_str
        members = "".join(
            f"{bump}{value['identifier']} = {value['literal']}\n"
            for value in self._enum_values(enum_type)
        )
        declaration = self.type_signature(indent, enum_type) + members
        return f"{declaration}\n\n{self.enum_mapper(enum_type, indent)}"

    # Types

    def type_signature(self, indent: str, type_: Type) -> str:
        doc = ""
        if self.config.add_comments:
            doc = self.comment_header(indent, getattr(type_, "description", ""))
        if isinstance(type_, EnumType):
            return f"{doc}{indent}class {type_.name}(enum.Enum):\n"

        base = "model.Model"
        if isinstance(type_, ObjectType):
            parent = self.api.parent_of(type_)
            if parent is not None:
                base = parent.name
        return f"{doc}{indent}class {type_.name}({base}):\n"

    def default_constructor(self, type_: Type, indent: str = "") -> str:
        if isinstance(type_, EnumType):
            return ""
        bump = indent + self.indent_str
        lines = [f"{indent}def __init__(self):\n"]
        if isinstance(type_, ObjectType) and type_.parent:
            lines.append(f"{bump}super().__init__()\n")
        lines.append(f"{bump}{RAW_MAP} = {{}}\n")
        return "".join(lines)

    def get_api_raw_response(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}@property\n"
            f"{indent}def api_raw_response(self) -> Any:\n"
            f"{bump}return self._api_raw_response\n"
        )

    def get_api_raw_value(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}def get_api_raw_value(self, value_name: str) -> Any:\n"
            f"{bump}if {RAW_MAP} is None:\n"
            f"{bump}{self.indent_str}return None\n"
            f"{bump}return {RAW_MAP}.get(value_name)\n"
        )

    def get_content_type(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}@property\n"
            f"{indent}def api_response_content_type(self) -> str:\n"
            f"{bump}return {CONTENT_TYPE}\n"
        )

    def to_json(self, type_: Type, indent: str = "") -> str:
        properties = []
        for prop in getattr(type_, "properties", {}).values():
            name = self.identifier(prop.name)
            properties.append(
                {
                    "flag": f"_{self.sanitizer.flag_name(name, self.property_case)}",
                    "key": quote_literal(prop.name),
                    "value": self._to_raw(prop.type, f"self.{name}"),
                }
            )
        inherits = isinstance(type_, ObjectType) and self.api.parent_of(type_) is not None
        return self.render_template(
            "to_json",
            {
                **self.indent_levels(indent, 3),
                "properties": properties,
                "initial": "super().to_json()" if inherits else "{}",
            },
        )

    def from_response(self, type_: Type, indent: str = "") -> str:
        return self.render_template(
            "from_response", {**self.indent_levels(indent, 3), "name": type_.name}
        )

    def declare_type(self, indent: str, type_: ObjectType) -> str:
        bump = indent + self.indent_str
        props = list(type_.properties.values())
        fields = (
            f"{bump}_api_raw_response: Any = None\n"
            f"{bump}_api_map_response: Optional[MutableMapping[str, Any]] = None\n"
            f'{bump}_api_response_content_type: str = ""\n'
        )
        members = rendering.join_members(
            [
                fields + "".join(self.declare_property(bump, p) for p in props),
                self.default_constructor(type_, bump),
                *(self.declare_property_get_set(bump, p) for p in props),
                self.get_api_raw_response(type_, bump),
                self.get_api_raw_value(type_, bump),
                self.get_content_type(type_, bump),
                self.from_response(type_, bump),
                self.to_json(type_, bump),
            ]
        )
        return f"{self.type_signature(indent, type_)}{members}\n"

    # Methods

    def _argument(self, param: Parameter) -> str:
        native = self.type_map(param.type).native_name
        name = self.identifier(param.name)
        if param.required:
            return f"{name}: {native}"
        return f"{name}: Optional[{native}] = None"

    def _response_native(self, method: Method) -> str:
        if method.response_type is None:
            return "None"
        return self.type_map(method.response_type).native_name

    def method_signature(self, indent: str, method: Method) -> str:
        args = ["self"]
        args.extend(self._argument(p) for p in rendering.signature_parameters(method))
        name = self.identifier(method.operation_id)
        return f"{indent}def {name}({', '.join(args)}) -> {self._response_native(method)}:"

    def declare_method(self, indent: str, method: Method) -> str:
        bump = indent + self.indent_str
        name = self.identifier(method.operation_id)
        params = rendering.signature_parameters(method)

        doc = ""
        if self.config.add_comments:
            comments = [self.param_comment(p, self.type_map(p.type)) for p in params]
            text = rendering.method_doc(method.summary, comments)
            doc = self.comment_header(bump, text, "")

        has_placeholders = False

        def placeholder(raw: str) -> str:
            nonlocal has_placeholders
            has_placeholders = True
            return "{" + self.identifier(raw) + "}"

        path = quote_literal(rendering.path_template(method.path, placeholder))
        if has_placeholders:
            path = "f" + path

        body = rendering.body_parameter(method)
        call = self.render_template(
            "method",
            {
                **self.indent_levels(indent, 4),
                "signature": self.method_signature(indent, method),
                "doc": doc,
                "verb": method.http_verb.lower(),
                "path": path,
                "structure": self._response_native(method),
                "query": [
                    {"key": quote_literal(p.name), "name": self.identifier(p.name)}
                    for p in rendering.query_parameters(method)
                ],
                "body": self.identifier(body.name) if body else "",
            },
        )
        return (
            f"{self.begin_region(indent, name)}\n"
            f"{call}"
            f"{self.end_region(indent, name)}\n"
        )
