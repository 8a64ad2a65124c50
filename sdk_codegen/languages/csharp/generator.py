"""
C# code generator implementation.

Generates C# model classes with backing fields behind public properties
and an ApiMethods subclass with one async method per API operation.
"""

from typing import Optional

from ...core import rendering
from ...core.generator import CodeGenerator
from ...core.model import EnumType, Method, ObjectType, Parameter, Property, Type
from ...core.naming import NameSanitizer, NamingCase, convert_case, quote_literal
from ...core.rendering import ValueKind, named_element, value_kind
from ...core.types import MappedType
from .naming import create_csharp_sanitizer
from .templates import CSHARP_TEMPLATES
from .types import CSHARP_TYPES

RAW_MAP = "_apiMapResponse"
CONTENT_TYPE = "_apiResponseContentType"

# System.Convert methods for value types
CONVERSIONS = {
    "bool": "ToBoolean",
    "int": "ToInt32",
    "long": "ToInt64",
    "double": "ToDouble",
    "float": "ToSingle",
    "DateTime": "ToDateTime",
}


class CSharpGenerator(CodeGenerator):
    """Code generator for C# SDKs."""

    language_types = CSHARP_TYPES
    templates = CSHARP_TEMPLATES
    property_case = NamingCase.CAMEL_CASE

    @property
    def language_name(self) -> str:
        return "csharp"

    @property
    def file_extension(self) -> str:
        return ".cs"

    def create_sanitizer(self) -> NameSanitizer:
        return create_csharp_sanitizer()

    def supports_multi_api(self) -> bool:
        return False

    def sdk_file_name(self, base_name: str) -> str:
        root = self.config.output_root
        file_name = convert_case(base_name, NamingCase.PASCAL_CASE)
        return f"{root}/csharp/{self.config.package_name}/sdk/{self.api_version}/{file_name}{self.file_extension}"

    def sdk_class_name(self) -> str:
        return self.config.sdk_class_name

    def _context(self, indent: str, **extra):
        return {
            **self.indent_levels(indent, 2),
            "product": self.config.product_name,
            "api_version": self.api_version,
            "api_version_literal": quote_literal(self.api_version),
            "package": self.config.package_name,
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
        return rendering.comment_header(indent, text, block_char, "///", "/*", "*/")

    def begin_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "#region", name)

    def end_region(self, indent: str, name: str) -> str:
        return rendering.region_marker(indent, "#endregion", name)

    def summary(self, indent: str, text: str) -> str:
        if not text:
            return ""
        return f"{indent}/// <summary>{text}</summary>\n"

    def param_comment(self, param: Parameter, mapped: MappedType) -> str:
        return rendering.param_comment(param, mapped)

    def _doc(self, indent: str, text: str) -> str:
        if not self.config.add_comments:
            return ""
        return self.comment_header(indent, text)

    def _declared(self, type_: Type) -> str:
        """Native name, with '?' when the type is a struct."""
        mapped = self.type_map(type_)
        if not mapped.is_nullable or isinstance(type_, EnumType):
            return f"{mapped.native_name}?"
        return mapped.native_name

    def _public_name(self, name: str) -> str:
        return convert_case(name, NamingCase.PASCAL_CASE)

    # Properties

    def declare_property(self, indent: str, prop: Property) -> str:
        name = self.identifier(prop.name)
        flag = self.sanitizer.flag_name(name)
        return (
            f"{indent}private {self._declared(prop.type)} _{name};\n"
            f"{indent}private bool _{flag} = false;\n"
        )

    def declare_property_get_set(self, indent: str, prop: Property) -> str:
        name = self.identifier(prop.name)
        accessors = self.render_template(
            "get_set",
            {
                **self.indent_levels(indent, 4),
                "native": self._declared(prop.type),
                "public_name": self._public_name(name),
                "field": f"_{name}",
                "flag": f"_{self.sanitizer.flag_name(name)}",
                "map_var": RAW_MAP,
                "key": quote_literal(prop.name),
                "assignment": self.property_from_json(prop, RAW_MAP),
            },
        )
        return self._doc(indent, prop.description) + accessors

    def property_from_json(self, prop: Property, map_var: str) -> str:
        name = self.identifier(prop.name)
        raw = f"{map_var}[{quote_literal(prop.name)}]"
        return f"_{name} = {self._from_raw(prop.type, raw)}"

    def _from_raw(self, type_: Type, raw: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        mapped = self.type_map(type_)
        native = mapped.native_name
        sequence = f"({raw} as IEnumerable<object>)"

        if kind in (ValueKind.SCALAR, ValueKind.DATETIME):
            if native == "string":
                return f"{raw}?.ToString()"
            if native in CONVERSIONS:
                return f"{raw} == null ? ({native}?)null : Convert.{CONVERSIONS[native]}({raw})"
            if native == "object":
                return raw
            return f"{raw} as {native}"
        elif kind == ValueKind.ENUM:
            return f"{element}Mapper.FromStringValue({raw} as string)"
        elif kind == ValueKind.OBJECT:
            return f"{raw} == null ? null : {element}.FromResponse({raw}, {CONTENT_TYPE})"
        elif kind == ValueKind.OBJECT_LIST:
            return f"{sequence}?.Select(i => {element}.FromResponse(i, {CONTENT_TYPE})).ToArray()"
        elif kind == ValueKind.ENUM_LIST:
            return (
                f"{sequence}?.Select(i => {element}Mapper.FromStringValue(i as string))"
                ".Where(i => i.HasValue).Select(i => i.Value).ToArray()"
            )
        elif kind == ValueKind.DATETIME_LIST:
            return f"{sequence}?.Select(i => Convert.ToDateTime(i)).ToArray()"
        elif kind == ValueKind.LIST:
            return f"{sequence}?.Cast<{mapped.element.native_name}>().ToArray()"
        return f"{raw} as {native}"

    def _to_raw(self, type_: Type, getter: str) -> str:
        kind = value_kind(type_)
        element = named_element(type_)
        if kind == ValueKind.ENUM:
            return f"{element}Mapper.ToStringValue({getter})"
        elif kind == ValueKind.OBJECT:
            return f"{getter}?.ToJson()"
        elif kind == ValueKind.DATETIME:
            return f'{getter}?.ToString("o")'
        elif kind == ValueKind.OBJECT_LIST:
            return f"{getter}?.Select(i => i.ToJson()).ToArray()"
        elif kind == ValueKind.ENUM_LIST:
            return f"{getter}?.Select(i => {element}Mapper.ToStringValue(i)).ToArray()"
        elif kind == ValueKind.DATETIME_LIST:
            return f'{getter}?.Select(i => i.ToString("o")).ToArray()'
        return getter

    # Enums

    def declare_enum_value(self, indent: str, value: str) -> str:
        return f"{indent}{self.identifier(value, NamingCase.PASCAL_CASE)}"

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
                **self.indent_levels(indent),
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
            return f"{doc}{indent}public enum {type_.name}\n{indent}{{\n"
        parent = self._parent(type_)
        extends = f" : {parent.name}" if parent else ""
        return f"{doc}{indent}public class {type_.name}{extends}\n{indent}{{\n"

    def default_constructor(self, type_: Type, indent: str = "") -> str:
        if isinstance(type_, EnumType):
            return ""
        bump = indent + self.indent_str
        return (
            f"{indent}public {type_.name}()\n"
            f"{indent}{{\n"
            f"{bump}{RAW_MAP} = new Dictionary<string, object>();\n"
            f"{indent}}}\n"
        )

    def get_api_raw_response(self, type_: Type, indent: str = "") -> str:
        return f"{indent}public object ApiRawResponse => _apiRawResponse;\n"

    def get_api_raw_value(self, type_: Type, indent: str = "") -> str:
        bump = indent + self.indent_str
        return (
            f"{indent}public object GetApiRawValue(string valueName)\n"
            f"{indent}{{\n"
            f"{bump}return {RAW_MAP} != null && {RAW_MAP}.TryGetValue(valueName, out var value) ? value : null;\n"
            f"{indent}}}\n"
        )

    def get_content_type(self, type_: Type, indent: str = "") -> str:
        return f"{indent}public string ApiResponseContentType => {CONTENT_TYPE};\n"

    def to_json(self, type_: Type, indent: str = "") -> str:
        properties = []
        for prop in getattr(type_, "properties", {}).values():
            name = self.identifier(prop.name)
            properties.append(
                {
                    "flag": f"_{self.sanitizer.flag_name(name)}",
                    "key": quote_literal(prop.name),
                    "value": self._to_raw(prop.type, self._public_name(name)),
                }
            )
        if self._parent(type_) is not None:
            modifier = "override"
            initial = "new Dictionary<string, object>(base.ToJson())"
        else:
            modifier, initial = "virtual", "new Dictionary<string, object>()"
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
        hiding = "new " if self._parent(type_) is not None else ""
        return self.render_template(
            "from_response",
            {**self.indent_levels(indent, 3), "name": type_.name, "hiding": hiding},
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
                f"{bump}protected object _apiRawResponse;\n"
                f"{bump}protected IDictionary<string, object> {RAW_MAP} = new Dictionary<string, object>();\n"
                f'{bump}protected string {CONTENT_TYPE} = "";\n'
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
                self.from_response(type_, bump),
                self.to_json(type_, bump),
            ]
        )
        return f"{self.type_signature(indent, type_)}{members}{indent}}}\n"

    # Methods

    def _argument(self, param: Parameter) -> str:
        name = self.identifier(param.name)
        if param.required:
            return f"{self.type_map(param.type).native_name} {name}"
        return f"{self._declared(param.type)} {name} = null"

    def _response_native(self, method: Method) -> str:
        if method.response_type is None:
            return "object"
        return self.type_map(method.response_type).native_name

    def method_signature(self, indent: str, method: Method) -> str:
        args = ", ".join(self._argument(p) for p in rendering.signature_parameters(method))
        name = self._public_name(self.identifier(method.operation_id))
        response = self._response_native(method)
        return f"{indent}public async Task<SdkResponse<{response}, Exception>> {name}({args})"

    def declare_method(self, indent: str, method: Method) -> str:
        name = self._public_name(self.identifier(method.operation_id))
        params = rendering.signature_parameters(method)
        comments = [self.param_comment(p, self.type_map(p.type)) for p in params]
        doc = ""
        if self.config.add_comments:
            doc = self.summary(indent, method.summary)
            if comments:
                doc += rendering.comment_lines(indent, "\n".join(comments), "///")

        escaped = method.path.replace("\\", "\\\\").replace('"', '\\"')
        path = rendering.path_template(
            escaped, lambda raw: "{" + self.identifier(raw) + "}"
        )
        query = rendering.query_parameters(method)
        query_map = (
            "new Values { "
            + ", ".join(
                f"{{ {quote_literal(p.name)}, {self.identifier(p.name)} }}" for p in query
            )
            + " }"
            if query
            else "null"
        )
        body = rendering.body_parameter(method)

        call = self.render_template(
            "method",
            {
                **self.indent_levels(indent, 2),
                "signature": self.method_signature(indent, method),
                "response": self._response_native(method),
                "verb": convert_case(method.http_verb.lower(), NamingCase.PASCAL_CASE),
                "path": f'$"{path}"',
                "query": query_map,
                "body": self.identifier(body.name) if body else "null",
            },
        )
        return (
            f"{self.begin_region(indent, name)}\n"
            f"{doc}{call}"
            f"{self.end_region(indent, name)}\n"
        )
