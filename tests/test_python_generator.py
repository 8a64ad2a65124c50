"""Tests for sdk_codegen.languages.python.

Besides exact shapes, the rendered Python artifacts are compiled to
check that they are syntactically valid.
"""

from __future__ import annotations

import pytest

from sdk_codegen.core.generator import render_methods, render_models
from sdk_codegen.core.model import (
    ApiModel,
    EnumType,
    ObjectType,
    PrimitiveType,
    Property,
    VersionInfo,
)
from sdk_codegen.languages.python import PythonGenerator

STRING = PrimitiveType("string")
MY_PROP = Property("my_prop", STRING)
MY_ENUM = EnumType("MyEnum", ("value1", "value2"))


class TestProperties:
    def test_declare_property(self, python_gen: PythonGenerator) -> None:
        assert python_gen.declare_property("    ", MY_PROP) == (
            "    _my_prop: Optional[str] = None\n"
            "    _my_prop_set: bool = False\n"
        )

    def test_keyword_property(self, python_gen: PythonGenerator) -> None:
        prop = Property("class", STRING)
        assert python_gen.declare_property("", prop) == (
            "_class_value: Optional[str] = None\n"
            "_class_value_set: bool = False\n"
        )

    def test_declare_property_get_set(self, python_gen: PythonGenerator) -> None:
        assert python_gen.declare_property_get_set("", MY_PROP) == (
            "@property\n"
            "def my_prop(self) -> Optional[str]:\n"
            '    if not self._my_prop_set and "my_prop" in self._api_map_response:\n'
            '        self._my_prop = None if self._api_map_response["my_prop"] is None '
            'else str(self._api_map_response["my_prop"])\n'
            "        self._my_prop_set = True\n"
            "    return self._my_prop\n"
            "\n"
            "@my_prop.setter\n"
            "def my_prop(self, v: Optional[str]):\n"
            "    self._my_prop = v\n"
            "    self._my_prop_set = True\n"
        )

    def test_property_from_json_enum(self, python_gen: PythonGenerator) -> None:
        prop = Property("status", MY_ENUM)
        assert python_gen.property_from_json(prop, "data") == (
            'self._status = MyEnumMapper.from_string_value(data["status"])'
        )


class TestEnums:
    def test_declare_enum(self, python_gen: PythonGenerator) -> None:
        result = python_gen.declare_enum("", MY_ENUM)
        assert result.startswith(
            "class MyEnum(enum.Enum):\n"
            '    value1 = "value1"\n'
            '    value2 = "value2"\n'
            "\n\n"
            "class MyEnumMapper:\n"
        )

    def test_enum_mapper_order_and_sentinel(self, python_gen: PythonGenerator) -> None:
        result = python_gen.enum_mapper(MY_ENUM)
        to_string, from_string = result.split("def from_string_value")
        assert to_string.index("MyEnum.value1") < to_string.index("MyEnum.value2")
        assert from_string.index('"value1"') < from_string.index('"value2"')
        assert to_string.index("return None") > to_string.index('"value2"')
        assert from_string.rstrip().endswith("return None")


class TestTypes:
    def test_type_signature(self, python_gen: PythonGenerator, model: ApiModel) -> None:
        assert python_gen.type_signature("", model.resolve_type("Child")) == (
            "class Child(MyType):\n"
        )
        assert python_gen.type_signature("", ObjectType("Plain")) == (
            "class Plain(model.Model):\n"
        )

    def test_default_constructor(self, python_gen: PythonGenerator, model: ApiModel) -> None:
        assert python_gen.default_constructor(ObjectType("Plain"), "    ") == (
            "    def __init__(self):\n"
            "        self._api_map_response = {}\n"
        )
        assert "super().__init__()" in python_gen.default_constructor(
            model.resolve_type("Child")
        )

    def test_from_response_checks_mapping(self, python_gen: PythonGenerator) -> None:
        result = python_gen.from_response(ObjectType("Plain"))
        assert "if isinstance(api_raw_response, Mapping):" in result
        assert 'instance._api_response_content_type = api_response_content_type or ""' in result

    def test_to_json(self, python_gen: PythonGenerator) -> None:
        result = python_gen.to_json(ObjectType("Plain", {"my_prop": MY_PROP}))
        assert 'if self._my_prop_set or "my_prop" in self._api_map_response:' in result
        assert 'json["my_prop"] = self.my_prop' in result


    def test_to_json_extends_parent(self, python_gen: PythonGenerator, model: ApiModel) -> None:
        result = python_gen.to_json(model.resolve_type("Child"))
        assert "json: MutableMapping[str, Any] = super().to_json()\n" in result
        assert "my_prop" not in result


class TestDocumentation:
    def test_comment_header(self, python_gen: PythonGenerator) -> None:
        assert python_gen.comment_header("", "text") == "# text\n"
        assert python_gen.comment_header("", "") == ""

    def test_regions(self, python_gen: PythonGenerator) -> None:
        assert python_gen.begin_region("    ", "get_thing") == "    # region get_thing"
        assert python_gen.end_region("    ", "get_thing") == "    # endregion get_thing"

    def test_summary(self, python_gen: PythonGenerator) -> None:
        assert python_gen.summary("    ", "Hello") == '    """Hello"""\n'
        assert python_gen.summary("    ", "") == ""


class TestIdentity:
    def test_sdk_file_name(self, python_gen: PythonGenerator) -> None:
        assert python_gen.sdk_file_name("methods") == "./python/api_sdk/sdk/api40/methods.py"

    def test_versioned_package(self, model: ApiModel) -> None:
        generator = PythonGenerator(model, VersionInfo(api_version="3.1"))
        assert generator.sdk_file_name("models") == "./python/api_sdk/sdk/api31/models.py"

    def test_multi_api(self, python_gen: PythonGenerator) -> None:
        assert python_gen.supports_multi_api()

    def test_methods_epilogue_is_empty(self, python_gen: PythonGenerator) -> None:
        assert python_gen.methods_epilogue("") == ""


class TestMethods:
    def test_method_signature(self, python_gen: PythonGenerator, model: ApiModel) -> None:
        method = model.get_method("get_my_type")
        assert python_gen.method_signature("", method) == (
            "def get_my_type(self, type_id: str, fields: Optional[str] = None) -> MyType:"
        )

    def test_declare_method(self, python_gen: PythonGenerator, model: ApiModel) -> None:
        result = python_gen.declare_method("    ", model.get_method("get_my_type"))
        assert result.startswith("    # region get_my_type\n")
        assert 'path=f"/types/{type_id}",' in result
        assert '"fields": fields,' in result
        assert "structure=MyType," in result

    def test_plain_path_is_not_f_string(self, python_gen: PythonGenerator, model: ApiModel) -> None:
        result = python_gen.declare_method("    ", model.get_method("create_my_type"))
        assert 'path="/types",' in result
        assert "body=body," in result


class TestRenderedSource:
    @pytest.mark.parametrize("render", [render_models, render_methods])
    def test_compiles(self, python_gen: PythonGenerator, render) -> None:
        source = render(python_gen)
        compile(source, "<generated>", "exec")

    def test_methods_import_models(self, python_gen: PythonGenerator) -> None:
        source = render_methods(python_gen)
        assert "from .models import (\n    MyEnum,\n    MyType,\n    Child,\n)" in source
        assert "class ApiSDK(api_methods.APIMethods):" in source
