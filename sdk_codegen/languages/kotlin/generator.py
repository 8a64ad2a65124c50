"""
Kotlin code generator implementation.

Generates open Kotlin model classes with custom accessors and an
APIMethods subclass with one method per API operation.
"""

from typing import Optional

from ...core import rendering
from ...core.generator import CodeGenerator
from ...core.model import EnumType, Method, ObjectType, Parameter, Property, Type
from ...core.naming import NameSanitizer, NamingCase, convert_case, quote_literal
from ...core.rendering import ValueKind, named_element, value_kind
from ...core.types import MappedType
from .naming import create_kotlin_sanitizer
from .templates import KOTLIN_TEMPLATES
from .types import KOTLIN_TYPES

RAW_MAP = "_apiMapResponse"
CONTENT_TYPE = "_apiResponseContentType"

# Conversions from a boxed JSON number to each numeric type
NUMBER_CONVERSIONS = {
    "Long": "toLong",
    "Double": "toDouble",
    "Float": "toFloat",
}


def kotlin_string(value: str) -> str:
    """Double-quoted Kotlin literal with templates disabled."""
    return quote_literal(value).replace("$", "\\$")


class KotlinGenerator(CodeGenerator):
    """Code generator for Kotlin SDKs."""

    language_types = KOTLIN_TYPES
    templates = KOTLIN_TEMPLATES
    property_case = NamingCase.CAMEL_CASE

    @property
    def language_name(self) -> str:
        return "kotlin"

    @property
    def file_extension(self) -> str:
        return ".kt"

    def create_sanitizer(self) -> NameSanitizer:
        return create_kotlin_sanitizer()

    def supports_multi_api(self) -> bool:
        return False

    @property
    def api_package(self) -> str:
        return "api" + "".join(ch for ch in self.api_version if ch.isalnum())

    def sdk_file_name(self, base_name: str) -> str:
        root = self.config.output_root
        package_path = self.config.package_name.replace(".", "/")
        file_name = convert_case(base_name, NamingCase.PASCAL_CASE)
        return f"{root}/kotlin/src/main/{package_path}/{self.api_package}/{file_name}{self.file_extension}"

    def sdk_class_name(self) -> str:
        return self.config.sdk_class_name

    def _context(self, indent: str, **extra):
        return {
            **self.indent_levels(indent, 2),
            "product": self.config.product_name,
            "api_version": self.api_version,
            "package": self.config.package_name,
            "api_package": self.api_package,
            **extra,
        }

    # Structural brackets

    def methods_prologue(self, indent: str) -> str:
        return self.render_template(
            "methods_prologue", self._context(indent, sdk_class=self.sdk_class_name())
        )

    def methods_epilogue(self, indent: str) -> str:
        return f"{indent}}}"

    def models_prologue(self, indent: str) -> str:
        return self.render_template("file_header", self._context(indent))

    def models_epilogue(self, indent: str) -> str:
        return ""

    # Documentation

    def comment_header(
        self, indent: str, text: Optional[str] = None, block_char: Optional[str] = None
    ) -> str:
        return rendering.comment_header(indent, text, block_char, "//", "/**", "*/")

    def begin_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "//region", name)

    def end_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "//endregion", name)

    def summary(self, indent: str, text: str) -> str:
        if not text:
            return ""
        return f"{indent}/** {text} */\n"

    def param_comment(self, param: Parameter, mapped: MappedType) -> str:
        return rendering.param_comment(param, mapped)

    def _doc(self, indent: str, text: str, block_char: Optional[str] = None) -> str:
        if not self.config.add_comments:
            return ""
        return self.comment_header(indent, text, block_char)

    # Properties

    def declare_property(self, indent: str, prop: Property) -> str:
        name = self.identifier(prop.name)
        flag = self.sanitizer.flag_name(name)
        native = self.type_map(prop.type).native_name
        return (
            f"{indent}private var _{name}: {native}? = null\n"
            f"{indent}private var _{flag}: Boolean = false\n"
        )

    def declare_property_get_set(self, indent: str, prop: Property) -> str:
        name = self.identifier(prop.name)
        accessors = self.render_template(
            "get_set",
            {
                **self.indent_levels(indent, 4),
                "native": self.type_map(prop.type).native_name,
                "name": name,
                "field": f"_{name}",
                "flag": f"_{self.sanitizer.flag_name(name)}",
                "map_var": RAW_MAP,
                "key": kotlin_string(prop.name),
                "assignment": self.property_from_json(prop, RAW_MAP),
            },
        )
        return self._doc(indent, prop.description) + accessors

    def property_from_json(self, prop: Property, map_var: str) -> str:
        name = self.identifier(prop.name)
        raw = f"{map_var}[{kotlin_string(prop.name)}]"
        return f"_{name} = {self._from_raw(prop.type, raw)}"

    def _from_raw(self, type_: Type, raw: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        mapped = self.type_map(type_)
        native = mapped.native_name
        parse_date = "Date.from(Instant.parse(it as String))"

        if kind == ValueKind.SCALAR:
            if native == "String":
                return f"{raw}?.toString()"
            if native in NUMBER_CONVERSIONS:
                return f"({raw} as Number?)?.{NUMBER_CONVERSIONS[native]}()"
            if native == "Any":
                return raw
            return f"{raw} as {native}?"
        elif kind == ValueKind.DATETIME:
            return f"{raw}?.let {{ {parse_date} }}"
        elif kind == ValueKind.ENUM:
            return f"{element}Mapper.fromStringValue({raw} as String?)"
        elif kind == ValueKind.OBJECT:
            return f"{raw}?.let {{ {element}.fromResponse(it, {CONTENT_TYPE}) }}"

        if kind == ValueKind.OBJECT_LIST:
            convert = f"map {{ {element}.fromResponse(it, {CONTENT_TYPE}) }}"
        elif kind == ValueKind.ENUM_LIST:
            convert = f"mapNotNull {{ {element}Mapper.fromStringValue(it as String?) }}"
        elif kind == ValueKind.DATETIME_LIST:
            convert = f"map {{ {parse_date} }}"
        elif kind == ValueKind.LIST:
            convert = f"map {{ it as {mapped.element.native_name} }}"
        else:
            return f"{raw} as {native}?"
        return f"({raw} as List<*>?)?.{convert}?.toTypedArray()"

    def _to_raw(self, type_: Type, getter: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        if kind == ValueKind.ENUM:
            return f"{element}Mapper.toStringValue({getter})"
        elif kind == ValueKind.OBJECT:
            return f"{getter}?.toJson()"
        elif kind == ValueKind.DATETIME:
            return f"{getter}?.toInstant()?.toString()"
        elif kind == ValueKind.OBJECT_LIST:
            return f"{getter}?.map {{ it.toJson() }}"
        elif kind == ValueKind.ENUM_LIST:
            return f"{getter}?.map {{ {element}Mapper.toStringValue(it) }}"
        elif kind == ValueKind.DATETIME_LIST:
            return f"{getter}?.map {{ it.toInstant().toString() }}"
        return getter

    # Enums

    def declare_enum_value(self, indent: str, value: str) -> str:
        return f"{indent}{self.identifier(value, NamingCase.SCREAMING_SNAKE)}"

    def _enum_values(self, enum_type: EnumType):
        return [
            {
                "identifier": self.declare_enum_value("", value),
                "literal": kotlin_string(value),
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
        members = ",\n".join(
            self.declare_enum_value(bump, value) for value in enum_type.values
        )
        declaration = f"{self.type_signature(indent, enum_type)}{members}\n{indent}}}\n"
        return f"{declaration}\n{self.enum_mapper(enum_type, indent)}"

    # Types

    def _parent(self, type_: Type) -> Optional[ObjectType]:
        if isinstance(type_, ObjectType):
            return self.api.parent_of(type_)
        return None

    def type_signature(self, indent: str, type_: Type) -> str:
        doc = self._doc(indent, getattr(type_, "description", ""))
        if isinstance(type_, EnumType):
            return f"{doc}{indent}enum class {type_.name} {{\n"
        parent = self._parent(type_)
        extends = f" : {parent.name}" if parent else ""
        return f"{doc}{indent}open class {type_.name}{extends} {{\n"

    def default_constructor(self, type_: Type, indent: str = "") -> str:
        if isinstance(type_, EnumType):
            return ""
        bump = indent + self.indent_str
        delegate = " : super()" if self._parent(type_) is not None else ""
        return (
            f"{indent}constructor(){delegate} {{\n"
            f"{bump}{RAW_MAP} = emptyMap()\n"
            f"{indent}}}\n"
        )

    def get_api_raw_response(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return f"{indent}val apiRawResponse: Any?\n{bump}get() = _apiRawResponse\n"

    def get_api_raw_value(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}fun getApiRawValue(valueName: String): Any? {{\n"
            f"{bump}return {RAW_MAP}[valueName]\n"
            f"{indent}}}\n"
        )

    def get_content_type(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return f"{indent}val apiResponseContentType: String\n{bump}get() = {CONTENT_TYPE}\n"

    def to_json(self, type_: Type, indent: str = "") -> str:
        properties = []
        for prop in getattr(type_, "properties", {}).values():
            name = self.identifier(prop.name)
            properties.append(
                {
                    "flag": f"_{self.sanitizer.flag_name(name)}",
                    "key": kotlin_string(prop.name),
                    "value": self._to_raw(prop.type, name),
                }
            )
        if self._parent(type_) is not None:
            modifier, initial = "override", "super.toJson().toMutableMap()"
        else:
            modifier, initial = "open", "mutableMapOf<String, Any?>()"
        return self.render_template(
            "to_json",
            {
                **self.indent_levels(indent, 3),
                "properties": properties,
                "modifier": modifier,
                "initial": initial,
            },
        )

    def from_response(self, type_: Type, indent: str = "") -> str:
        return self.render_template(
            "from_response", {**self.indent_levels(indent, 4), "name": type_.name}
        )

    def declare_type(self, indent: str, type_: ObjectType) -> str:
        bump = indent + self.indent_str
        props = list(type_.properties.values())
        is_root = self._parent(type_) is None

        # Subclasses inherit the raw payload fields and accessors
        fields = ""
        raw_accessors = []
        if is_root:
            fields = (
                f"{bump}internal var _apiRawResponse: Any? = null\n"
                f"{bump}internal var {RAW_MAP}: Map<String, Any?> = emptyMap()\n"
                f'{bump}internal var {CONTENT_TYPE}: String = ""\n'
            )
            raw_accessors = [
                self.get_api_raw_response(type_, bump),
                self.get_api_raw_value(type_, bump),
                self.get_content_type(type_, bump),
            ]

        members = rendering.join_members(
            [
                fields + "".join(self.declare_property(bump, p) for p in props),
                self.default_constructor(type_, bump),
                *(self.declare_property_get_set(bump, p) for p in props),
                *raw_accessors,
                self.to_json(type_, bump),
                self.from_response(type_, bump),
            ]
        )
        return f"{self.type_signature(indent, type_)}{members}{indent}}}\n"

    # Methods

    def _argument(self, param: Parameter) -> str:
        native = self.type_map(param.type).native_name
        name = self.identifier(param.name)
        if param.required:
            return f"{name}: {native}"
        return f"{name}: {native}? = null"

    def _response_native(self, method: Method) -> str:
        if method.response_type is None:
            return "Any"
        return self.type_map(method.response_type).native_name

    def method_signature(self, indent: str, method: Method) -> str:
        args = ", ".join(self._argument(p) for p in rendering.signature_parameters(method))
        name = self.identifier(method.operation_id)
        return f"{indent}fun {name}({args}): SDKResponse"

    def declare_method(self, indent: str, method: Method) -> str:
        name = self.identifier(method.operation_id)
        params = rendering.signature_parameters(method)
        comments = [self.param_comment(p, self.type_map(p.type)) for p in params]
        doc = self._doc(indent, rendering.method_doc(method.summary, comments), " ")

        escaped = method.path.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
        path = rendering.path_template(
            escaped, lambda raw: f"${{encodeParam({self.identifier(raw)})}}"
        )
        query = rendering.query_parameters(method)
        query_map = (
            "mapOf("
            + ", ".join(f"{kotlin_string(p.name)} to {self.identifier(p.name)}" for p in query)
            + ")"
            if query
            else "mapOf()"
        )
        body = rendering.body_parameter(method)

        call = self.render_template(
            "method",
            {
                **self.indent_levels(indent, 2),
                "signature": self.method_signature(indent, method),
                "verb": method.http_verb.lower(),
                "response": self._response_native(method),
                "path": f'"{path}"',
                "query": query_map,
                "body": self.identifier(body.name) if body else "null",
            },
        )
        return (
            f"{self.begin_region(indent, name)}\n"
            f"{doc}{call}"
            f"{self.end_region(indent, name)}\n"
        )
