"""Tests for sdk_codegen.core.model.

Covers:
- build_model from a normalized document, insertion order
- resolve_type / enum_values_of / get_method lookups
- reference and structural integrity checks
- parent resolution, including missing and cyclic parents
- parameter ordering for call signatures
- load_model from disk
"""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any

import pytest

from sdk_codegen.core.errors import (
    ModelIntegrityError,
    ModelLoadError,
    UnresolvedTypeError,
)
from sdk_codegen.core.model import (
    ApiModel,
    ArrayType,
    EnumType,
    MapType,
    Method,
    ObjectType,
    Parameter,
    ParameterLocation,
    PrimitiveType,
    Property,
    build_model,
    element_type,
    load_model,
)


# ------------------------------------------------------------------ #
# build_model
# ------------------------------------------------------------------ #


class TestBuildModel:
    def test_types_keep_insertion_order(self, model: ApiModel) -> None:
        assert [t.name for t in model.all_types()] == ["MyEnum", "MyType", "Child"]

    def test_methods_keep_insertion_order(self, model: ApiModel) -> None:
        assert [m.operation_id for m in model.all_methods()] == [
            "get_my_type",
            "create_my_type",
            "all_children",
        ]

    def test_version(self, model: ApiModel) -> None:
        assert model.version == "4.0"

    def test_property_types_are_converted(self, model: ApiModel) -> None:
        my_type = model.resolve_type("MyType")
        props = my_type.properties
        assert props["my_prop"].type == PrimitiveType("string")
        assert props["tags"].type == ArrayType(PrimitiveType("string"))
        assert props["labels"].type == MapType(PrimitiveType("string"))
        assert props["status"].type is model.resolve_type("MyEnum")

    def test_self_reference_resolves_to_same_object(self, model: ApiModel) -> None:
        child = model.resolve_type("Child")
        siblings = child.properties["siblings"].type
        assert isinstance(siblings, ArrayType)
        assert siblings.element_type is model.resolve_type("MyType")

    def test_http_verb_is_upper_cased(self, model: ApiModel) -> None:
        assert model.get_method("create_my_type").http_verb == "POST"

    def test_parameter_location(self, model: ApiModel) -> None:
        params = model.get_method("get_my_type").parameters
        assert params[0].location == ParameterLocation.PATH
        assert params[1].location == ParameterLocation.QUERY

    def test_unknown_type_reference(self, document: dict[str, Any]) -> None:
        document["types"][1]["properties"].append({"name": "x", "type": "Missing"})
        with pytest.raises(UnresolvedTypeError, match="Missing"):
            build_model(document)

    def test_unknown_kind(self, document: dict[str, Any]) -> None:
        document["types"].append({"name": "Odd", "kind": "union"})
        with pytest.raises(ModelIntegrityError, match="union"):
            build_model(document)

    def test_duplicate_type_name(self, document: dict[str, Any]) -> None:
        document["types"].append({"name": "MyType"})
        with pytest.raises(ModelIntegrityError, match="Duplicate"):
            build_model(document)


# ------------------------------------------------------------------ #
# ApiModel accessors
# ------------------------------------------------------------------ #


class TestModelAccessors:
    def test_resolve_declared_type(self, model: ApiModel) -> None:
        assert isinstance(model.resolve_type("MyEnum"), EnumType)

    def test_resolve_primitive(self, model: ApiModel) -> None:
        assert model.resolve_type("date-time") == PrimitiveType("date-time")

    def test_resolve_unknown(self, model: ApiModel) -> None:
        with pytest.raises(UnresolvedTypeError):
            model.resolve_type("Nope")

    def test_resolve_type_instance_passes_through(self, model: ApiModel) -> None:
        array = ArrayType(model.resolve_type("MyType"))
        assert model.resolve_type(array) is array

    def test_enum_values_keep_declared_order(self, model: ApiModel) -> None:
        assert model.enum_values_of("MyEnum") == ("value1", "value2")

    def test_enum_values_of_non_enum(self, model: ApiModel) -> None:
        with pytest.raises(ModelIntegrityError):
            model.enum_values_of("MyType")

    def test_unknown_operation(self, model: ApiModel) -> None:
        with pytest.raises(ModelIntegrityError):
            model.get_method("nope")

    def test_properties_are_read_only(self, model: ApiModel) -> None:
        my_type = model.resolve_type("MyType")
        with pytest.raises(TypeError):
            my_type.properties["extra"] = Property("extra", PrimitiveType("string"))

    def test_accessors_return_copies(self, model: ApiModel) -> None:
        model.all_types().clear()
        assert len(model.all_types()) == 3

    def test_object_types_sealed_by_model(self, model: ApiModel) -> None:
        my_type = model.resolve_type("MyType")
        with pytest.raises(dataclasses.FrozenInstanceError):
            my_type.parent = "Child"
        with pytest.raises(dataclasses.FrozenInstanceError):
            my_type.properties = {}
        assert my_type.parent is None

    def test_standalone_object_type_is_assignable(self) -> None:
        loose = ObjectType("Loose")
        loose.description = "still editable"
        assert loose.description == "still editable"

    def test_sealed_type_reused_in_second_model(self) -> None:
        shared = ObjectType("Shared", {"id": Property("id", PrimitiveType("string"))})
        first = ApiModel("3.1", types=[shared])
        second = ApiModel("4.0", types=[shared])
        assert second.resolve_type("Shared") is first.resolve_type("Shared")
        assert list(shared.properties) == ["id"]


# ------------------------------------------------------------------ #
# Integrity checks on direct construction
# ------------------------------------------------------------------ #


class TestModelIntegrity:
    def test_empty_enum_rejected(self) -> None:
        with pytest.raises(ModelIntegrityError, match="no values"):
            ApiModel("4.0", types=[EnumType("Empty", ())])

    def test_duplicate_operation_rejected(self) -> None:
        method = Method("ping", "GET", "/ping")
        with pytest.raises(ModelIntegrityError, match="ping"):
            ApiModel("4.0", methods=[method, method])

    def test_dangling_property_reference(self) -> None:
        orphan = ObjectType("Orphan")
        owner = ObjectType("Owner", {"o": Property("o", orphan)})
        with pytest.raises(UnresolvedTypeError, match="Owner.o"):
            ApiModel("4.0", types=[owner])

    def test_dangling_nested_reference(self) -> None:
        orphan = EnumType("Color", ("red",))
        method = Method(
            "paint", "GET", "/paint", response_type=MapType(ArrayType(orphan))
        )
        with pytest.raises(UnresolvedTypeError, match="Color"):
            ApiModel("4.0", methods=[method])

    def test_element_type_unwraps_nesting(self) -> None:
        inner = PrimitiveType("string")
        assert element_type(ArrayType(MapType(inner))) is inner


class TestParentOf:
    def test_no_parent(self, model: ApiModel) -> None:
        assert model.parent_of(model.resolve_type("MyType")) is None

    def test_declared_parent(self, model: ApiModel) -> None:
        child = model.resolve_type("Child")
        assert model.parent_of(child) is model.resolve_type("MyType")

    def test_missing_parent(self) -> None:
        child = ObjectType("Child", parent="Ghost")
        api = ApiModel("4.0", types=[child])
        with pytest.raises(ModelIntegrityError, match="Ghost"):
            api.parent_of(child)

    def test_parent_must_be_object(self) -> None:
        color = EnumType("Color", ("red",))
        child = ObjectType("Child", parent="Color")
        api = ApiModel("4.0", types=[color, child])
        with pytest.raises(ModelIntegrityError):
            api.parent_of(child)

    def test_cyclic_parent_chain(self) -> None:
        a = ObjectType("A", parent="B")
        b = ObjectType("B", parent="A")
        api = ApiModel("4.0", types=[a, b])
        with pytest.raises(ModelIntegrityError, match="Cyclic"):
            api.parent_of(a)


# ------------------------------------------------------------------ #
# Method.ordered_parameters
# ------------------------------------------------------------------ #


def _param(name: str, required: bool) -> Parameter:
    return Parameter(name, PrimitiveType("string"), required=required)


class TestOrderedParameters:
    def test_required_first(self) -> None:
        method = Method(
            "m",
            "GET",
            "/m",
            parameters=(_param("a", False), _param("b", True), _param("c", False)),
        )
        assert [p.name for p in method.ordered_parameters()] == ["b", "a", "c"]

    def test_conforming_order_unchanged(self) -> None:
        method = Method(
            "m",
            "GET",
            "/m",
            parameters=(_param("a", True), _param("b", True), _param("c", False)),
        )
        assert [p.name for p in method.ordered_parameters()] == ["a", "b", "c"]

    def test_relative_order_kept_within_groups(self) -> None:
        method = Method(
            "m",
            "GET",
            "/m",
            parameters=(
                _param("o1", False),
                _param("r1", True),
                _param("o2", False),
                _param("r2", True),
            ),
        )
        assert [p.name for p in method.ordered_parameters()] == [
            "r1",
            "r2",
            "o1",
            "o2",
        ]


# ------------------------------------------------------------------ #
# load_model
# ------------------------------------------------------------------ #


class TestLoadModel:
    def test_load_from_file(self, tmp_path: Path, document: dict[str, Any]) -> None:
        path = tmp_path / "api.json"
        path.write_text(json.dumps(document), encoding="utf-8")
        api = load_model(path)
        assert api.version == "4.0"
        assert len(api.all_methods()) == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ModelLoadError, match="not found"):
            load_model(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ModelLoadError, match="Invalid JSON"):
            load_model(path)

    def test_non_object_document(self, tmp_path: Path) -> None:
        path = tmp_path / "list.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ModelLoadError, match="JSON object"):
            load_model(path)
