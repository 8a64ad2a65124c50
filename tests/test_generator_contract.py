"""Behaviour every language generator must share.

Each test runs once per generator class (see the ``generator`` fixture
in conftest.py) against the same sample model.
"""

from __future__ import annotations

import re

import pytest

from sdk_codegen.core.generator import CodeGenerator, render_methods, render_models
from sdk_codegen.core.model import (
    ApiModel,
    EnumType,
    ObjectType,
    Parameter,
    PrimitiveType,
    Property,
)
from sdk_codegen.languages import (
    CSharpGenerator,
    DartGenerator,
    KotlinGenerator,
    PythonGenerator,
    SwiftGenerator,
    TypeScriptGenerator,
)

STRING = PrimitiveType("string")
MY_PROP = Property("my_prop", STRING)
MY_ENUM = EnumType("MyEnum", ("value1", "value2"))

SENTINELS = {
    DartGenerator: "null",
    PythonGenerator: "None",
    TypeScriptGenerator: "undefined",
    KotlinGenerator: "null",
    CSharpGenerator: "null",
    SwiftGenerator: "nil",
}

MAPPING_CHECKS = {
    DartGenerator: "apiRawResponse is Map",
    PythonGenerator: "isinstance(api_raw_response, Mapping)",
    TypeScriptGenerator: "!Array.isArray(apiRawResponse)",
    KotlinGenerator: "apiRawResponse is Map<*, *>",
    CSharpGenerator: "apiRawResponse is IDictionary<string, object> map",
    SwiftGenerator: "apiRawResponse as? [String: Any]",
}

EMPTY_CONTENT_TYPE = {
    DartGenerator: "apiResponseContentType ?? ''",
    PythonGenerator: 'api_response_content_type or ""',
    TypeScriptGenerator: "apiResponseContentType ?? ''",
    KotlinGenerator: 'apiResponseContentType ?: ""',
    CSharpGenerator: 'apiResponseContentType ?? ""',
    SwiftGenerator: 'apiResponseContentType ?? ""',
}


def _literal_positions(text: str, value: str) -> list[int]:
    return [m.start() for m in re.finditer(rf"(['\"]){value}\1", text)]


def _balance(text: str) -> int:
    return text.count("{") - text.count("}")


class TestPropertyNaming:
    def test_reserved_word_gets_value_suffix(self, generator: CodeGenerator) -> None:
        name = generator.identifier("class")
        flag = generator.sanitizer.flag_name(name, generator.property_case)
        assert name.replace("_", "").lower() == "classvalue"

        declared = generator.declare_property("", Property("class", STRING))
        assert f"_{name}" in declared
        assert f"_{flag}" in declared

    def test_plain_name_has_no_suffix(self, generator: CodeGenerator) -> None:
        declared = generator.declare_property("", MY_PROP)
        assert generator.identifier("my_prop") in declared
        assert "value" not in declared.lower()

    def test_flag_initialised_false(self, generator: CodeGenerator) -> None:
        declared = generator.declare_property("", MY_PROP).lower()
        flag = generator.sanitizer.flag_name(
            generator.identifier("my_prop"), generator.property_case
        ).lower()
        assert re.search(rf"_{flag}\b.*= false", declared)


class TestGetSet:
    def test_hydrates_from_raw_key(self, generator: CodeGenerator) -> None:
        accessors = generator.declare_property_get_set("", MY_PROP)
        assert _literal_positions(accessors, "my_prop")
        assert generator.property_from_json(MY_PROP, "raw") != ""

    def test_flag_set_by_getter_and_setter(self, generator: CodeGenerator) -> None:
        accessors = generator.declare_property_get_set("", MY_PROP).lower()
        flag = generator.sanitizer.flag_name(
            generator.identifier("my_prop"), generator.property_case
        ).lower()
        assert accessors.count(f"_{flag} = true") == 2


class TestEnumMapper:
    def test_declared_order_both_directions(self, generator: CodeGenerator) -> None:
        mapper = generator.enum_mapper(MY_ENUM)
        first = _literal_positions(mapper, "value1")
        second = _literal_positions(mapper, "value2")
        assert len(first) == len(second) == 2
        assert first[0] < second[0] < first[1] < second[1]

    def test_sentinel_after_values(self, generator: CodeGenerator) -> None:
        mapper = generator.enum_mapper(MY_ENUM)
        sentinel = SENTINELS[type(generator)]
        last = _literal_positions(mapper, "value2")[-1]
        assert sentinel in mapper[last:]
        assert mapper.count(sentinel) >= 2

    def test_enum_values_are_identifiers(self, generator: CodeGenerator) -> None:
        value = generator.declare_enum_value("", "in_progress")
        assert value.isidentifier()


class TestCommentHeader:
    @pytest.mark.parametrize("indent", ["", "    "])
    @pytest.mark.parametrize("block_char", [None, " ", "*"])
    def test_empty_text(self, generator: CodeGenerator, indent, block_char) -> None:
        assert generator.comment_header(indent, None, block_char) == ""
        assert generator.comment_header(indent, "", block_char) == ""

    def test_line_form(self, generator: CodeGenerator) -> None:
        header = generator.comment_header("  ", "hello")
        assert header.startswith("  ")
        assert header.rstrip().endswith("hello")
        assert header.count("\n") == 1

    def test_block_form_is_padded(self, generator: CodeGenerator) -> None:
        lines = generator.comment_header("", "hello", " ").split("\n")
        assert lines[1] == ""
        assert lines[-3] == ""
        assert "hello" in lines[2]


class TestRegions:
    @pytest.mark.parametrize("name", ["Things", "get_thing"])
    def test_end_echoes_begin(self, generator: CodeGenerator, name: str) -> None:
        begin = generator.begin_region("  ", name)
        end = generator.end_region("  ", name)
        assert begin.split()[-1] == name
        assert end.split()[-1] == name
        assert begin != end


class TestStructuralBrackets:
    def test_methods_prologue_closed_by_epilogue(self, generator: CodeGenerator) -> None:
        prologue = generator.methods_prologue("")
        epilogue = generator.methods_epilogue("")
        opened = 0 if isinstance(generator, PythonGenerator) else 1
        assert _balance(prologue) == opened
        assert _balance(prologue + epilogue) == 0

    def test_models_brackets_balance(self, generator: CodeGenerator) -> None:
        assert _balance(generator.models_prologue("") + generator.models_epilogue("")) == 0

    def test_rendered_models_balance(self, generator: CodeGenerator) -> None:
        assert _balance(render_models(generator)) == 0

    def test_rendered_methods_balance(self, generator: CodeGenerator) -> None:
        assert _balance(render_methods(generator)) == 0


class TestConstructionAndSerialization:
    def test_enum_has_no_constructor(self, generator: CodeGenerator) -> None:
        assert generator.default_constructor(MY_ENUM) == ""

    def test_constructor_initialises_raw_map(self, generator: CodeGenerator) -> None:
        constructor = generator.default_constructor(ObjectType("Plain"))
        assert "apimapresponse" in constructor.replace("_", "").lower()

    def test_from_response_only_keeps_mappings(self, generator: CodeGenerator) -> None:
        result = generator.from_response(ObjectType("Plain"))
        assert MAPPING_CHECKS[type(generator)] in result

    def test_from_response_defaults_content_type(self, generator: CodeGenerator) -> None:
        result = generator.from_response(ObjectType("Plain"))
        assert EMPTY_CONTENT_TYPE[type(generator)] in result

    def test_to_json_checks_flag_or_raw_key(self, generator: CodeGenerator) -> None:
        result = generator.to_json(ObjectType("Plain", {"my_prop": MY_PROP}))
        flag = generator.sanitizer.flag_name(
            generator.identifier("my_prop"), generator.property_case
        )
        assert f"_{flag}" in result
        assert len(_literal_positions(result, "my_prop")) == 2

    def test_declare_type_balances(self, generator: CodeGenerator, model: ApiModel) -> None:
        for name in ("MyType", "Child"):
            assert _balance(generator.declare_type("", model.resolve_type(name))) == 0

    def test_raw_accessors(self, generator: CodeGenerator) -> None:
        plain = ObjectType("Plain")
        assert "rawresponse" in generator.get_api_raw_response(plain).replace("_", "").lower()
        assert "rawvalue" in generator.get_api_raw_value(plain).replace("_", "").lower()
        assert "contenttype" in generator.get_content_type(plain).replace("_", "").lower()


class TestSignatureAndDocs:
    def test_type_signature_starts_with_doc(self, generator: CodeGenerator) -> None:
        my_type = ObjectType("MyType", description="This is my type")
        signature = generator.type_signature("", my_type)
        assert signature.startswith(generator.comment_header("", "This is my type"))
        assert "MyType" in signature

    def test_param_comment(self, generator: CodeGenerator) -> None:
        param = Parameter("limit", PrimitiveType("integer"), "Max items")
        mapped = generator.type_map(param.type)
        assert generator.param_comment(param, mapped) == (
            f"@param {{{mapped.native_name}}} limit Max items"
        )

    def test_declare_method_is_wrapped_in_region(
        self, generator: CodeGenerator, model: ApiModel
    ) -> None:
        result = generator.declare_method("  ", model.get_method("get_my_type"))
        lines = result.rstrip("\n").split("\n")
        assert lines[0].split()[-1] == lines[-1].split()[-1]


class TestIdentity:
    def test_sdk_class_name(self, generator: CodeGenerator) -> None:
        assert generator.sdk_class_name() == "ApiSDK"

    def test_sdk_file_names(self, generator: CodeGenerator) -> None:
        methods = generator.sdk_file_name("methods")
        models = generator.sdk_file_name("models")
        assert methods != models
        assert methods.endswith(generator.file_extension)

    def test_is_default_api(self, generator: CodeGenerator) -> None:
        assert generator.is_default_api()

    def test_multi_api_support(self, generator: CodeGenerator) -> None:
        expected = isinstance(generator, (PythonGenerator, TypeScriptGenerator))
        assert generator.supports_multi_api() is expected
