"""
Generator settings.

A GeneratorConfig is assembled per language from built-in defaults, an
optional JSON file and explicit overrides, applied in that order.
"""

import json
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..logging_config import get_logger
from .errors import CodegenError

logger = get_logger(__name__)


class ConfigError(CodegenError):
    """A configuration file is missing, unreadable or malformed."""

    pass


@dataclass
class GeneratorConfig:
    """Settings shared by every language generator."""

    # Naming of the generated package and entry point
    package_name: str = "api_sdk"
    product_name: str = "Api"
    output_root: str = "."

    indent_str: str = "  "

    # Generators bound to this version report is_default_api()
    default_api_version: str = "4.0"

    add_comments: bool = True

    # Keys GeneratorConfig does not declare
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def sdk_class_name(self) -> str:
        return f"{self.product_name}SDK"


LANGUAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "dart": {"package_name": "api_sdk", "indent_str": "  "},
    "python": {"package_name": "api_sdk", "indent_str": "    "},
    "typescript": {"package_name": "sdk", "indent_str": "  "},
    "kotlin": {"package_name": "com.api.sdk", "indent_str": "    "},
    "csharp": {"package_name": "ApiSdk", "indent_str": "    "},
    "swift": {"package_name": "ApiSDK", "indent_str": "    "},
}


class ConfigManager:
    """Builds GeneratorConfig instances for each target language."""

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        source = LANGUAGE_DEFAULTS if defaults is None else defaults
        self._defaults = {lang: dict(values) for lang, values in source.items()}

    def get_config(
        self,
        language: str,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Resolve the configuration for one language.

        Args:
            language: Language name, matched case-insensitively
            custom_config: Explicit values, applied last
            config_file: JSON file with shared keys and per-language sections

        Returns:
            GeneratorConfig for the language
        """
        language = language.lower()
        merged = dict(self._defaults.get(language, {}))

        if config_file:
            document = self._read_file(config_file)
            merged.update(self._section(document, language))

        if custom_config:
            merged.update(custom_config)

        return self._build(merged)

    def _section(self, document: Dict[str, Any], language: str) -> Dict[str, Any]:
        """Shared top-level keys, then the section for this language."""
        values = {
            key: value
            for key, value in document.items()
            if not (key.lower() in self._defaults and isinstance(value, dict))
        }
        for key, value in document.items():
            if key.lower() == language and isinstance(value, dict):
                values.update(value)
        return values

    def _read_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            document = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        if not isinstance(document, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Read configuration file %s", path)
        return document

    def _build(self, values: Dict[str, Any]) -> GeneratorConfig:
        declared = {f.name for f in fields(GeneratorConfig)}
        known = {k: v for k, v in values.items() if k in declared}
        extra = {k: v for k, v in values.items() if k not in declared}

        if extra:
            known["custom"] = {**known.get("custom", {}), **extra}

        return GeneratorConfig(**known)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write a config as flat JSON that get_config() reads back unchanged."""
        path = Path(output_path)

        document = asdict(config)
        document.update(document.pop("custom"))

        try:
            path.write_text(
                json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8"
            )
        except OSError as e:
            raise ConfigError(f"Cannot write configuration to {path}: {e}") from e

    def list_languages(self) -> List[str]:
        return list(self._defaults)

    def validate_config(self, config: GeneratorConfig, language: str) -> List[str]:
        """
        Check a config for values that would produce invalid source.

        Returns:
            Warning messages, empty when the config is usable
        """
        problems = []

        if not config.package_name:
            problems.append("Empty package_name")
        if not config.product_name or not config.product_name.isidentifier():
            problems.append(f"Invalid product_name: {config.product_name!r}")
        if config.indent_str.strip():
            problems.append("indent_str must contain only whitespace")

        language = language.lower()
        if language in ("dart", "python") and not config.package_name.isidentifier():
            problems.append(f"Invalid {language} package name: {config.package_name}")
        elif language == "kotlin" and not all(
            part.isidentifier() for part in config.package_name.split(".")
        ):
            problems.append(f"Invalid Kotlin package name: {config.package_name}")

        return problems


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Shared ConfigManager, created on first use."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Resolve a language's configuration through the shared manager."""
    return get_config_manager().get_config(language, custom_config, config_file)
