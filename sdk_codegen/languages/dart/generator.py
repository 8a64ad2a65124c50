"""
Dart code generator implementation.

Generates Dart model classes with lazily hydrated properties and an
APIMethods subclass exposing one async method per API operation.
"""

from typing import Optional

from ...core.generator import CodeGenerator
from ...core.model import EnumType, Method, ObjectType, Parameter, Property, Type
from ...core.naming import NameSanitizer, NamingCase, quote_literal
from ...core import rendering
from ...core.rendering import ValueKind, named_element, value_kind
from ...core.types import MappedType
from .naming import create_dart_sanitizer
from .templates import DART_TEMPLATES
from .types import DART_TYPES

RAW_MAP = "_apiMapResponse"


def dart_string(value: str) -> str:
    """Single-quoted Dart literal with interpolation disabled."""
    return quote_literal(value, "'").replace("$", "\\$")


class DartGenerator(CodeGenerator):
    """Code generator for Dart SDKs."""

    language_types = DART_TYPES
    templates = DART_TEMPLATES
    property_case = NamingCase.CAMEL_CASE

    @property
    def language_name(self) -> str:
        return "dart"

    @property
    def file_extension(self) -> str:
        return ".dart"

    def create_sanitizer(self) -> NameSanitizer:
        return create_dart_sanitizer()

    def supports_multi_api(self) -> bool:
        return False

    def sdk_file_name(self, base_name: str) -> str:
        root = self.config.output_root
        return f"{root}/dart/{self.config.package_name}/lib/src/sdk/{base_name}{self.file_extension}"

    def sdk_class_name(self) -> str:
        return self.config.sdk_class_name

    def _note(self, indent: str) -> str:
        return (
            f"{indent}// NOTE: Do not edit this file generated by "
            f"{self.config.product_name} SDK Codegen for API {self.api_version}\n"
        )

    # Structural brackets

    def methods_prologue(self, indent: str) -> str:
        return self.render_template(
            "methods_prologue",
            {
                **self.indent_levels(indent, 2),
                "product": self.config.product_name,
                "api_version": self.api_version,
                "package": self.config.package_name,
                "sdk_class": self.sdk_class_name(),
            },
        )

    def methods_epilogue(self, indent: str) -> str:
        return f"{indent}}}"

    def models_prologue(self, indent: str) -> str:
        return self._note(indent)

    def models_epilogue(self, indent: str) -> str:
        return ""

    # Documentation

    def comment_header(
        self, indent: str, text: Optional[str] = None, block_char: Optional[str] = None
    ) -> str:
        return rendering.comment_header(indent, text, block_char, "///", "/*", "*/")

    def begin_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "// #region", name)

    def end_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "// #endregion", name)

    def summary(self, indent: str, text: str) -> str:
        return ""

    def param_comment(self, param: Parameter, mapped: MappedType) -> str:
        return rendering.param_comment(param, mapped)

    def _doc(self, indent: str, text: str) -> str:
        if not self.config.add_comments:
            return ""
        return self.comment_header(indent, text)

    # Properties

    def declare_property(self, indent: str, prop: Property) -> str:
        name = self.identifier(prop.name)
        flag = self.sanitizer.flag_name(name)
        native = self.type_map(prop.type).native_name
        return f"{indent}{native} _{name};\n{indent}bool _{flag} = false;\n"

    def declare_property_get_set(self, indent: str, prop: Property) -> str:
        name = self.identifier(prop.name)
        accessors = self.render_template(
            "get_set",
            {
                **self.indent_levels(indent, 3),
                "native": self.type_map(prop.type).native_name,
                "name": name,
                "field": f"_{name}",
                "flag": f"_{self.sanitizer.flag_name(name)}",
                "map_var": RAW_MAP,
                "key": dart_string(prop.name),
                "assignment": self.property_from_json(prop, RAW_MAP),
            },
        )
        return self._doc(indent, prop.description) + accessors

    def property_from_json(self, prop: Property, map_var: str) -> str:
        name = self.identifier(prop.name)
        raw = f"{map_var}[{dart_string(prop.name)}]"
        return f"_{name} = {self._from_raw(prop.type, raw)}"

    def _from_raw(self, type_: Type, raw: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        native = self.type_map(type_).native_name
        content_type = "_apiResponseContentType"

        if kind == ValueKind.SCALAR:
            if native == "String":
                return f"{raw}?.toString()"
            if native == "double":
                return f"{raw}?.toDouble()"
            return raw
        elif kind == ValueKind.DATETIME:
            return f"{raw} == null ? null : DateTime.parse({raw})"
        elif kind == ValueKind.ENUM:
            return f"{element}Mapper.fromStringValue({raw})"
        elif kind == ValueKind.OBJECT:
            return f"{raw} == null ? null : {element}.fromResponse({raw}, {content_type})"

        if kind == ValueKind.OBJECT_LIST:
            convert = f"{element}.fromResponse(i, {content_type})"
        elif kind == ValueKind.ENUM_LIST:
            convert = f"{element}Mapper.fromStringValue(i)"
        elif kind == ValueKind.DATETIME_LIST:
            convert = "DateTime.parse(i)"
        else:
            return f"{raw} == null ? null : {native}.from({raw})"
        return f"{raw} == null ? null : ({raw} as List).map((i) => {convert}).toList()"

    def _to_raw(self, type_: Type, getter: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        if kind == ValueKind.ENUM:
            return f"{element}Mapper.toStringValue({getter})"
        elif kind == ValueKind.OBJECT:
            return f"{getter}?.toJson()"
        elif kind == ValueKind.DATETIME:
            return f"{getter}?.toIso8601String()"
        elif kind == ValueKind.OBJECT_LIST:
            return f"{getter}?.map((i) => i.toJson())?.toList()"
        elif kind == ValueKind.ENUM_LIST:
            return f"{getter}?.map((i) => {element}Mapper.toStringValue(i))?.toList()"
        elif kind == ValueKind.DATETIME_LIST:
            return f"{getter}?.map((i) => i.toIso8601String())?.toList()"
        return getter

    # Enums

    def declare_enum_value(self, indent: str, value: str) -> str:
        return f"{indent}{self.identifier(value, NamingCase.CAMEL_CASE)}"

    def enum_mapper(self, enum_type: EnumType, indent: str = "") -> str:
        values = [
            {
                "identifier": self.declare_enum_value("", value),
                "literal": dart_string(value),
            }
            for value in enum_type.values
        ]
        return self.render_template(
            "enum_mapper",
            {**self.indent_levels(indent), "name": enum_type.name, "values": values},
        )

    def declare_enum(self, indent: str, enum_type: EnumType) -> str:
        bump = indent + self.indent_str
        members = ",\n".join(
            self.declare_enum_value(bump, value) for value in enum_type.values
        )
        declaration = f"{self.type_signature(indent, enum_type)}{members}\n{indent}}}\n"
        return f"{declaration}\n{self.enum_mapper(enum_type, indent)}"

    # Types

    def type_signature(self, indent: str, type_: Type) -> str:
        doc = self._doc(indent, getattr(type_, "description", ""))
        if isinstance(type_, EnumType):
            return f"{doc}{indent}enum {type_.name} {{\n"

        extends = ""
        if isinstance(type_, ObjectType):
            parent = self.api.parent_of(type_)
            if parent is not None:
                extends = f" extends {parent.name}"
        return f"{doc}{indent}class {type_.name}{extends} {{\n"

    def default_constructor(self, type_: Type, indent: str = "") -> str:
        if isinstance(type_, EnumType):
            return ""
        bump = indent + self.indent_str
        return f"{indent}{type_.name}() {{\n{bump}{RAW_MAP} = {{}};\n{indent}}}\n"

    def get_api_raw_response(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}Object get apiRawResponse {{\n"
            f"{bump}return _apiRawResponse;\n"
            f"{indent}}}\n"
        )

    def get_api_raw_value(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}Object getApiRawValue(String valueName) {{\n"
            f"{bump}return {RAW_MAP} == null ? null : {RAW_MAP}[valueName];\n"
            f"{indent}}}\n"
        )

    def get_content_type(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}String get apiResponseContentType {{\n"
            f"{bump}return _apiResponseContentType;\n"
            f"{indent}}}\n"
        )

    def to_json(self, type_: Type, indent: str = "") -> str:
        properties = []
        for prop in getattr(type_, "properties", {}).values():
            name = self.identifier(prop.name)
            properties.append(
                {
                    "flag": f"_{self.sanitizer.flag_name(name)}",
                    "key": dart_string(prop.name),
                    "value": self._to_raw(prop.type, name),
                }
            )
        inherits = isinstance(type_, ObjectType) and self.api.parent_of(type_) is not None
        return self.render_template(
            "to_json",
            {
                **self.indent_levels(indent, 3),
                "properties": properties,
                "override": inherits,
                "initial": "super.toJson()" if inherits else "{}",
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
            f"{bump}Object _apiRawResponse;\n"
            f"{bump}Map {RAW_MAP} = {{}};\n"
            f"{bump}String _apiResponseContentType = '';\n"
        )
        members = rendering.join_members(
            [
                fields + "".join(self.declare_property(bump, p) for p in props),
                *(self.declare_property_get_set(bump, p) for p in props),
                self.get_api_raw_response(type_, bump),
                self.get_api_raw_value(type_, bump),
                self.get_content_type(type_, bump),
                self.default_constructor(type_, bump),
                self.from_response(type_, bump),
                self.to_json(type_, bump),
            ]
        )
        return f"{self.type_signature(indent, type_)}{members}{indent}}}\n"

    # Methods

    def _argument(self, param: Parameter) -> str:
        return f"{self.type_map(param.type).native_name} {self.identifier(param.name)}"

    def method_signature(self, indent: str, method: Method) -> str:
        params = rendering.signature_parameters(method)
        required = [self._argument(p) for p in params if p.required]
        optional = [self._argument(p) for p in params if not p.required]
        args = list(required)
        if optional:
            args.append("{" + ", ".join(optional) + "}")
        response = (
            self.type_map(method.response_type).native_name
            if method.response_type is not None
            else "dynamic"
        )
        name = self.identifier(method.operation_id)
        return f"{indent}Future<SDKResponse<{response}>> {name}({', '.join(args)})"

    def _response_conversion(self, method: Method) -> str:
        if method.response_type is None:
            return "json"
        kind = value_kind(method.response_type)
        element = named_element(method.response_type)
        if kind == ValueKind.OBJECT:
            return f"{element}.fromResponse(json, contentType)"
        elif kind == ValueKind.OBJECT_LIST:
            return (
                f"(json as List).map((i) => {element}.fromResponse(i, contentType))"
                ".toList()"
            )
        elif kind == ValueKind.ENUM:
            return f"{element}Mapper.fromStringValue(json)"
        elif kind == ValueKind.DATETIME:
            return "DateTime.parse(json)"
        return "json"

    def declare_method(self, indent: str, method: Method) -> str:
        name = self.identifier(method.operation_id)
        params = rendering.signature_parameters(method)
        mapped = [self.param_comment(p, self.type_map(p.type)) for p in params]
        doc = self._doc(indent, rendering.method_doc(method.summary, mapped))

        path = rendering.path_template(
            method.path, lambda raw: f"${{encodeParam({self.identifier(raw)})}}"
        )
        query = rendering.query_parameters(method)
        query_map = (
            "{" + ", ".join(
                f"{dart_string(p.name)}: {self.identifier(p.name)}" for p in query
            ) + "}"
            if query
            else "null"
        )
        body = rendering.body_parameter(method)

        call = self.render_template(
            "method",
            {
                **self.indent_levels(indent, 3),
                "signature": self.method_signature("", method),
                "conversion": self._response_conversion(method),
                "verb": method.http_verb.lower(),
                "path": quote_literal(path, "'"),
                "query": query_map,
                "body": self.identifier(body.name) if body else "null",
            },
        )
        return (
            f"{self.begin_region(indent, name)}\n"
            f"{doc}{call}"
            f"{self.end_region(indent, name)}\n"
        )
