"""
TypeScript code generator implementation.

Generates TypeScript model classes with accessor-based lazy hydration and
an APIMethods subclass whose methods return SDKResponse promises.
"""

from typing import Optional

from ...core import rendering
from ...core.generator import CodeGenerator
from ...core.model import EnumType, Method, ObjectType, Parameter, Property, Type
from ...core.naming import NameSanitizer, NamingCase, quote_literal
from ...core.rendering import ValueKind, named_element, value_kind
from ...core.types import MappedType
from .naming import create_typescript_sanitizer
from .templates import TYPESCRIPT_TEMPLATES
from .types import TYPESCRIPT_TYPES

RAW_MAP = "this._apiMapResponse"
CONTENT_TYPE = "this._apiResponseContentType"


def ts_string(value: str) -> str:
    return quote_literal(value, "'")


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript SDKs."""

    language_types = TYPESCRIPT_TYPES
    templates = TYPESCRIPT_TEMPLATES
    property_case = NamingCase.CAMEL_CASE

    @property
    def language_name(self) -> str:
        return "typescript"

    @property
    def file_extension(self) -> str:
        return ".ts"

    def create_sanitizer(self) -> NameSanitizer:
        return create_typescript_sanitizer()

    def supports_multi_api(self) -> bool:
        return True

    def sdk_file_name(self, base_name: str) -> str:
        root = self.config.output_root
        package = self.config.package_name
        return f"{root}/typescript/{package}/src/{self.api_version}/{base_name}{self.file_extension}"

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
                **self.indent_levels(indent, 3),
                "product": self.config.product_name,
                "api_version": self.api_version,
                "api_version_literal": ts_string(self.api_version),
                "package": self.config.package_name,
                "type_names": [t.name for t in self.api.all_types()],
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
        return rendering.comment_header(indent, text, block_char, "//", "/**", "*/")

    def begin_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "// #region", name)

    def end_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "// #endregion", name)

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
        return f"{indent}private _{name}?: {native}\n{indent}private _{flag} = false\n"

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
                "key": ts_string(prop.name),
                "assignment": self.property_from_json(prop, RAW_MAP),
            },
        )
        return self._doc(indent, prop.description) + accessors

    def property_from_json(self, prop: Property, map_var: str) -> str:
        name = self.identifier(prop.name)
        raw = f"{map_var}[{ts_string(prop.name)}]"
        return f"this._{name} = {self._from_raw(prop.type, raw)}"

    def _from_raw(self, type_: Type, raw: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        native = self.type_map(type_).native_name

        if kind == ValueKind.SCALAR:
            if native == "string":
                return f"{raw}?.toString()"
            if native == "number":
                return f"{raw} == null ? undefined : Number({raw})"
            return raw
        elif kind == ValueKind.DATETIME:
            convert = f"new Date({raw})"
        elif kind == ValueKind.ENUM:
            return f"{element}Mapper.fromStringValue({raw})"
        elif kind == ValueKind.OBJECT:
            convert = f"{element}.fromResponse({raw}, {CONTENT_TYPE})"
        elif kind == ValueKind.OBJECT_LIST:
            convert = f"({raw} as unknown[]).map((i) => {element}.fromResponse(i, {CONTENT_TYPE}))"
        elif kind == ValueKind.ENUM_LIST:
            convert = f"({raw} as string[]).map((i) => {element}Mapper.fromStringValue(i)!)"
        elif kind == ValueKind.DATETIME_LIST:
            convert = f"({raw} as string[]).map((i) => new Date(i))"
        else:
            return f"{raw} as {native}"
        return f"{raw} == null ? undefined : {convert}"

    def _to_raw(self, type_: Type, getter: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        if kind == ValueKind.ENUM:
            return f"{element}Mapper.toStringValue({getter})"
        elif kind == ValueKind.OBJECT:
            return f"{getter}?.toJson()"
        elif kind == ValueKind.DATETIME:
            return f"{getter}?.toISOString()"
        elif kind == ValueKind.OBJECT_LIST:
            return f"{getter}?.map((i) => i.toJson())"
        elif kind == ValueKind.ENUM_LIST:
            return f"{getter}?.map((i) => {element}Mapper.toStringValue(i))"
        elif kind == ValueKind.DATETIME_LIST:
            return f"{getter}?.map((i) => i.toISOString())"
        return getter

    # Enums

    def declare_enum_value(self, indent: str, value: str) -> str:
        return f"{indent}{self.identifier(value, NamingCase.PASCAL_CASE)}"

    def _enum_values(self, enum_type: EnumType):
        return [
            {"identifier": self.declare_enum_value("", value), "literal": ts_string(value)}
            for value in enum_type.values
        ]

    def enum_mapper(self, enum_type: EnumType, indent: str = "") -> str:
        return self.render_template(
            "enum_mapper",
            {
                **self.indent_levels(indent),
                "name": enum_type.name,
                "values": self._enum_values(enum_type),
            },
        )

    def declare_enum(self, indent: str, enum_type: EnumType) -> str:
        bump = indent + self.indent_str
        members = "".join(
            f"{bump}{value['identifier']} = {value['literal']},\n"
            for value in self._enum_values(enum_type)
        )
        declaration = f"{self.type_signature(indent, enum_type)}{members}{indent}}}\n"
        return f"{declaration}\n{self.enum_mapper(enum_type, indent)}"

    # Types

    def _parent(self, type_: Type) -> Optional[ObjectType]:
        if isinstance(type_, ObjectType):
            return self.api.parent_of(type_)
        return None

    def type_signature(self, indent: str, type_: Type) -> str:
        doc = self._doc(indent, getattr(type_, "description", ""))
        if isinstance(type_, EnumType):
            return f"{doc}{indent}export enum {type_.name} {{\n"
        parent = self._parent(type_)
        extends = f" extends {parent.name}" if parent else ""
        return f"{doc}{indent}export class {type_.name}{extends} {{\n"

    def default_constructor(self, type_: Type, indent: str = "") -> str:
        if isinstance(type_, EnumType):
            return ""
        bump = indent + self.indent_str
        lines = [f"{indent}constructor() {{\n"]
        if self._parent(type_) is not None:
            lines.append(f"{bump}super()\n")
        lines.append(f"{bump}{RAW_MAP} = {{}}\n")
        lines.append(f"{indent}}}\n")
        return "".join(lines)

    def get_api_raw_response(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}get apiRawResponse(): unknown {{\n"
            f"{bump}return this._apiRawResponse\n"
            f"{indent}}}\n"
        )

    def get_api_raw_value(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}getApiRawValue(valueName: string): unknown {{\n"
            f"{bump}return {RAW_MAP} == null ? undefined : {RAW_MAP}[valueName]\n"
            f"{indent}}}\n"
        )

    def get_content_type(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}get apiResponseContentType(): string {{\n"
            f"{bump}return {CONTENT_TYPE}\n"
            f"{indent}}}\n"
        )

    def to_json(self, type_: Type, indent: str = "") -> str:
        properties = []
        for prop in getattr(type_, "properties", {}).values():
            name = self.identifier(prop.name)
            properties.append(
                {
                    "flag": f"_{self.sanitizer.flag_name(name)}",
                    "key": ts_string(prop.name),
                    "value": self._to_raw(prop.type, f"this.{name}"),
                }
            )
        initial = "super.toJson()" if self._parent(type_) is not None else "{}"
        return self.render_template(
            "to_json",
            {**self.indent_levels(indent, 3), "properties": properties, "initial": initial},
        )

    def from_response(self, type_: Type, indent: str = "") -> str:
        return self.render_template(
            "from_response", {**self.indent_levels(indent, 3), "name": type_.name}
        )

    def declare_type(self, indent: str, type_: ObjectType) -> str:
        bump = indent + self.indent_str
        props = list(type_.properties.values())
        fields = (
            f"{bump}protected _apiRawResponse: unknown\n"
            f"{bump}protected _apiMapResponse: Record<string, any> = {{}}\n"
            f"{bump}protected _apiResponseContentType = ''\n"
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
        return f"{self.type_signature(indent, type_)}{members}{indent}}}\n"

    # Methods

    def _argument(self, param: Parameter) -> str:
        native = self.type_map(param.type).native_name
        marker = "" if param.required else "?"
        return f"{self.identifier(param.name)}{marker}: {native}"

    def _response_native(self, method: Method) -> str:
        if method.response_type is None:
            return "void"
        return self.type_map(method.response_type).native_name

    def method_signature(self, indent: str, method: Method) -> str:
        args = ", ".join(self._argument(p) for p in rendering.signature_parameters(method))
        name = self.identifier(method.operation_id)
        response = self._response_native(method)
        return f"{indent}async {name}({args}): Promise<SDKResponse<{response}>>"

    def _response_conversion(self, method: Method) -> str:
        if method.response_type is None:
            return "json"
        kind = value_kind(method.response_type)
        element = named_element(method.response_type)
        if kind == ValueKind.OBJECT:
            return f"{element}.fromResponse(json, contentType)"
        elif kind == ValueKind.OBJECT_LIST:
            return f"(json as unknown[]).map((i) => {element}.fromResponse(i, contentType))"
        elif kind == ValueKind.ENUM:
            return f"{element}Mapper.fromStringValue(json)"
        elif kind == ValueKind.DATETIME:
            return "new Date(json)"
        return "json"

    def declare_method(self, indent: str, method: Method) -> str:
        name = self.identifier(method.operation_id)
        params = rendering.signature_parameters(method)
        comments = [self.param_comment(p, self.type_map(p.type)) for p in params]
        doc = self._doc(indent, rendering.method_doc(method.summary, comments), " ")

        path = rendering.path_template(
            method.path.replace("\\", "\\\\").replace("`", "\\`"),
            lambda raw: f"${{encodeParam({self.identifier(raw)})}}",
        )
        query = rendering.query_parameters(method)
        query_map = (
            "{ "
            + ", ".join(f"{ts_string(p.name)}: {self.identifier(p.name)}" for p in query)
            + " }"
            if query
            else "undefined"
        )
        body = rendering.body_parameter(method)

        call = self.render_template(
            "method",
            {
                **self.indent_levels(indent, 3),
                "signature": self.method_signature(indent, method),
                "conversion": self._response_conversion(method),
                "verb": method.http_verb.lower(),
                "path": f"`{path}`",
                "query": query_map,
                "body": self.identifier(body.name) if body else "undefined",
            },
        )
        return (
            f"{self.begin_region(indent, name)}\n"
            f"{doc}{call}"
            f"{self.end_region(indent, name)}\n"
        )
