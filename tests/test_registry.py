"""Tests for sdk_codegen.registry.

Covers:
- lookup by language name or label alias, ignoring case
- factory-less and unknown entries never raise
- filtered views: code generators and legacy languages
- duplicate keys rejected when a registry is built
"""

from __future__ import annotations

import pytest

from sdk_codegen.core.model import ApiModel, VersionInfo
from sdk_codegen.languages import CSharpGenerator, DartGenerator, PythonGenerator
from sdk_codegen.registry import (
    GENERATORS,
    GeneratorRegistry,
    GeneratorSpec,
    RegistryError,
    find_generator,
    get_code_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_supported_languages,
)


@pytest.fixture
def registry() -> GeneratorRegistry:
    return GeneratorRegistry(GENERATORS)


class TestFindGenerator:
    def test_by_language(self, registry: GeneratorRegistry) -> None:
        assert registry.find_generator("Dart").factory is DartGenerator

    def test_case_insensitive(self, registry: GeneratorRegistry) -> None:
        assert registry.find_generator("PYTHON").language == "Python"

    def test_by_label_alias(self, registry: GeneratorRegistry) -> None:
        spec = registry.find_generator("c#")
        assert spec.language == "csharp"
        assert spec.factory is CSharpGenerator

    def test_unknown(self, registry: GeneratorRegistry) -> None:
        assert registry.find_generator("cobol") is None

    def test_factory_less_entry_is_found(self, registry: GeneratorRegistry) -> None:
        spec = registry.find_generator("rust")
        assert spec is not None
        assert spec.factory is None


class TestGetCodeGenerator:
    def test_builds_bound_generator(self, registry: GeneratorRegistry, model: ApiModel) -> None:
        versions = VersionInfo(api_version="4.0", product_version="24.0")
        generator = registry.get_code_generator("python", model, versions)
        assert isinstance(generator, PythonGenerator)
        assert generator.api is model
        assert generator.versions is versions

    def test_label_alias(self, registry: GeneratorRegistry, model: ApiModel) -> None:
        assert isinstance(registry.get_code_generator("C#", model), CSharpGenerator)

    def test_factory_less(self, registry: GeneratorRegistry, model: ApiModel) -> None:
        assert registry.get_code_generator("rust", model) is None
        assert registry.get_code_generator("go", model) is None

    def test_unknown(self, registry: GeneratorRegistry, model: ApiModel) -> None:
        assert registry.get_code_generator("cobol", model) is None


class TestFilteredViews:
    def test_code_generators(self, registry: GeneratorRegistry) -> None:
        assert [s.language for s in registry.code_generators()] == [
            "Python",
            "Typescript",
            "Kotlin",
            "csharp",
            "Swift",
            "Dart",
        ]

    def test_legacy_languages(self, registry: GeneratorRegistry) -> None:
        assert [s.legacy for s in registry.legacy_languages()] == ["csharp", "go"]

    def test_is_supported(self, registry: GeneratorRegistry) -> None:
        assert registry.is_supported("swift")
        assert not registry.is_supported("go")
        assert not registry.is_supported("cobol")


class TestGeneratorSpec:
    def test_output_path_defaults_to_language(self) -> None:
        assert GeneratorSpec(language="Go").output_path == "Go"
        assert GeneratorSpec(language="Go", path="golang").output_path == "golang"

    def test_option_pairs(self) -> None:
        spec = find_generator("go")
        assert spec.option_pairs() == {"apiPackage": "Api", "packageName": "api"}
        assert spec.options == "-papiPackage=Api -ppackageName=api"

    def test_option_pairs_ignores_other_flags(self) -> None:
        spec = GeneratorSpec(language="X", options="-v -pa=1 --b=2 -pc=x=y")
        assert spec.option_pairs() == {"a": "1", "c": "x=y"}

    def test_specs_are_frozen(self) -> None:
        with pytest.raises(AttributeError):
            GENERATORS[0].language = "Other"


class TestRegistryConstruction:
    def test_duplicate_language(self) -> None:
        specs = (GeneratorSpec(language="Dart"), GeneratorSpec(language="dart"))
        with pytest.raises(RegistryError, match="dart"):
            GeneratorRegistry(specs)

    def test_label_clashes_with_language(self) -> None:
        specs = (
            GeneratorSpec(language="csharp"),
            GeneratorSpec(language="sharp", label="CSharp"),
        )
        with pytest.raises(RegistryError):
            GeneratorRegistry(specs)

    def test_language_equal_to_own_label(self) -> None:
        registry = GeneratorRegistry((GeneratorSpec(language="Dart", label="dart"),))
        assert registry.find_generator("DART").language == "Dart"


class TestGlobalRegistry:
    def test_singleton(self) -> None:
        assert get_registry() is get_registry()

    def test_module_functions(self, model: ApiModel) -> None:
        assert find_generator("c#").language == "csharp"
        assert isinstance(get_code_generator("dart", model), DartGenerator)
        assert is_language_supported("Kotlin")
        assert "Dart" in list_supported_languages()

    def test_language_info(self) -> None:
        info = get_language_info("C#")
        assert info["name"] == "csharp"
        assert info["label"] == "C#"
        assert info["class"] == "CSharpGenerator"
        assert info["legacy"] == "csharp"
        assert info["options"] == {"apiPackage": "Api", "packageName": "api"}

    def test_language_info_without_factory(self) -> None:
        info = get_language_info("rust")
        assert info["class"] is None
        assert info["output_path"] == "Rust"

    def test_language_info_unknown(self) -> None:
        assert get_language_info("cobol") is None
