"""Tests for sdk_codegen.core.config.

Covers:
- per-language defaults
- JSON config files with shared keys and per-language sections
- explicit overrides and unknown keys landing in custom
- save/load, validation warnings, error cases
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from sdk_codegen.core.config import (
    ConfigError,
    ConfigManager,
    GeneratorConfig,
    load_config,
)


@pytest.fixture
def manager() -> ConfigManager:
    return ConfigManager()


def _write(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestDefaults:
    def test_base_defaults(self) -> None:
        config = GeneratorConfig()
        assert config.default_api_version == "4.0"
        assert config.output_root == "."
        assert config.sdk_class_name == "ApiSDK"

    def test_language_defaults(self, manager: ConfigManager) -> None:
        assert manager.get_config("python").indent_str == "    "
        assert manager.get_config("dart").indent_str == "  "
        assert manager.get_config("kotlin").package_name == "com.api.sdk"

    def test_language_is_case_insensitive(self, manager: ConfigManager) -> None:
        assert manager.get_config("Kotlin").package_name == "com.api.sdk"

    def test_unknown_language_gets_base(self, manager: ConfigManager) -> None:
        assert manager.get_config("cobol") == GeneratorConfig()

    def test_list_languages(self, manager: ConfigManager) -> None:
        assert set(manager.list_languages()) == {
            "dart",
            "python",
            "typescript",
            "kotlin",
            "csharp",
            "swift",
        }


class TestConfigFile:
    def test_shared_and_section_keys(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "codegen.json",
            {
                "product_name": "Acme",
                "dart": {"package_name": "acme_sdk"},
                "python": {"package_name": "acme"},
            },
        )
        dart = manager.get_config("dart", config_file=path)
        assert dart.product_name == "Acme"
        assert dart.package_name == "acme_sdk"
        assert dart.sdk_class_name == "AcmeSDK"

        python = manager.get_config("python", config_file=path)
        assert python.package_name == "acme"
        # Sections for other languages never leak into custom
        assert "dart" not in python.custom

    def test_overrides_win(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = _write(tmp_path / "codegen.json", {"product_name": "Acme"})
        config = manager.get_config("dart", {"product_name": "Other"}, path)
        assert config.product_name == "Other"

    def test_unknown_keys_go_to_custom(self, manager: ConfigManager) -> None:
        config = manager.get_config("swift", {"use_async": True})
        assert config.custom == {"use_async": True}

    def test_missing_file(self, manager: ConfigManager, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            manager.get_config("dart", config_file=tmp_path / "none.json")

    def test_wrong_suffix(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = tmp_path / "codegen.yaml"
        path.write_text("a: 1", encoding="utf-8")
        with pytest.raises(ConfigError, match="must be JSON"):
            manager.get_config("dart", config_file=path)

    def test_invalid_json(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = tmp_path / "codegen.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ConfigError, match="Invalid JSON"):
            manager.get_config("dart", config_file=path)

    def test_non_object(self, manager: ConfigManager, tmp_path: Path) -> None:
        path = _write(tmp_path / "codegen.json", [1, 2])
        with pytest.raises(ConfigError, match="JSON object"):
            manager.get_config("dart", config_file=path)


class TestSaveConfig:
    def test_save_then_load(self, manager: ConfigManager, tmp_path: Path) -> None:
        config = manager.get_config("dart", {"product_name": "Acme", "flavor": "x"})
        path = tmp_path / "saved.json"
        manager.save_config(config, path)

        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["product_name"] == "Acme"
        assert saved["flavor"] == "x"
        assert "custom" not in saved

        assert manager.get_config("dart", config_file=path) == config


class TestValidateConfig:
    def test_valid(self, manager: ConfigManager) -> None:
        assert manager.validate_config(manager.get_config("dart"), "dart") == []

    def test_bad_indent(self, manager: ConfigManager) -> None:
        config = GeneratorConfig(indent_str="--")
        assert "indent_str must contain only whitespace" in manager.validate_config(
            config, "dart"
        )

    def test_bad_product_name(self, manager: ConfigManager) -> None:
        config = GeneratorConfig(product_name="my product")
        warnings = manager.validate_config(config, "swift")
        assert any("product_name" in w for w in warnings)

    def test_kotlin_package(self, manager: ConfigManager) -> None:
        config = GeneratorConfig(package_name="com.1bad.sdk")
        warnings = manager.validate_config(config, "kotlin")
        assert any("Kotlin package" in w for w in warnings)


class TestLoadConfig:
    def test_convenience_function(self) -> None:
        config = load_config("csharp", {"package_name": "Acme.Sdk"})
        assert config.package_name == "Acme.Sdk"
        assert config.indent_str == "    "
