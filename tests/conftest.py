"""Shared test fixtures for sdk_codegen.

Provides a small normalized API document, the model built from it, and
one generator per target language bound to that model.
"""

from __future__ import annotations

import copy
from typing import Any

import pytest

from sdk_codegen.core.model import ApiModel, build_model
from sdk_codegen.languages import (
    CSharpGenerator,
    DartGenerator,
    KotlinGenerator,
    PythonGenerator,
    SwiftGenerator,
    TypeScriptGenerator,
)


GENERATOR_CLASSES = [
    DartGenerator,
    PythonGenerator,
    TypeScriptGenerator,
    KotlinGenerator,
    CSharpGenerator,
    SwiftGenerator,
]


SAMPLE_DOCUMENT: dict[str, Any] = {
    "version": "4.0",
    "types": [
        {
            "name": "MyEnum",
            "kind": "enum",
            "values": ["value1", "value2"],
            "description": "Possible states",
        },
        {
            "name": "MyType",
            "description": "This is my type",
            "properties": [
                {"name": "my_prop", "type": "string", "description": "A string"},
                {"name": "count", "type": "integer"},
                {"name": "default", "type": "boolean"},
                {"name": "status", "type": "MyEnum"},
                {"name": "created_at", "type": "date-time"},
                {"name": "tags", "type": {"array": "string"}},
                {"name": "labels", "type": {"map": "string"}},
            ],
        },
        {
            "name": "Child",
            "parent": "MyType",
            "properties": [
                {"name": "siblings", "type": {"array": "MyType"}},
                {"name": "states", "type": {"array": "MyEnum"}},
            ],
        },
    ],
    "methods": [
        {
            "operation_id": "get_my_type",
            "http_verb": "GET",
            "path": "/types/{type_id}",
            "summary": "Get a type",
            "parameters": [
                {
                    "name": "type_id",
                    "type": "string",
                    "description": "Id of the type",
                    "required": True,
                    "location": "path",
                },
                {
                    "name": "fields",
                    "type": "string",
                    "description": "Fields to include",
                },
            ],
            "response_type": "MyType",
        },
        {
            "operation_id": "create_my_type",
            "http_verb": "post",
            "path": "/types",
            "summary": "Create a type",
            "body_type": "MyType",
            "response_type": "MyType",
        },
        {
            "operation_id": "all_children",
            "http_verb": "GET",
            "path": "/children",
            "parameters": [
                {"name": "limit", "type": "integer"},
            ],
            "response_type": {"array": "Child"},
        },
    ],
}


@pytest.fixture
def document() -> dict[str, Any]:
    """A fresh copy of the sample document."""
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def model(document: dict[str, Any]) -> ApiModel:
    return build_model(document)


@pytest.fixture
def dart(model: ApiModel) -> DartGenerator:
    return DartGenerator(model)


@pytest.fixture
def python_gen(model: ApiModel) -> PythonGenerator:
    return PythonGenerator(model)


@pytest.fixture(params=GENERATOR_CLASSES, ids=lambda cls: cls.__name__)
def generator(request: pytest.FixtureRequest, model: ApiModel):
    """Each language generator in turn, bound to the sample model."""
    return request.param(model)
