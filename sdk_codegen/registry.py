"""
Generator registry for the available target languages.

The registry is a static, ordered table of GeneratorSpec records with
lookup by language name or label alias. Lookups never raise; an unknown
or factory-less language is reported as None.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from .core.config import GeneratorConfig
from .core.errors import CodegenError
from .core.generator import CodeGenerator
from .core.model import ApiModel, VersionInfo
from .languages import (
    CSharpGenerator,
    DartGenerator,
    KotlinGenerator,
    PythonGenerator,
    SwiftGenerator,
    TypeScriptGenerator,
)
from .logging_config import get_logger

logger = get_logger(__name__)

GeneratorFactory = Callable[..., CodeGenerator]


class RegistryError(CodegenError):
    """Exception raised for an inconsistent registry table."""

    pass


@dataclass(frozen=True)
class GeneratorSpec:
    """One registry entry."""

    # Canonical language name, matched case-insensitively
    language: str
    # Alias such as "C#" for csharp
    label: Optional[str] = None
    # Output directory for a legacy generator, defaults to the language
    path: Optional[str] = None
    # Builds a generator bound to (api, versions, config)
    factory: Optional[GeneratorFactory] = None
    # Options passed unmodified to the legacy generator
    options: Optional[str] = None
    # Legacy generator tag
    legacy: Optional[str] = None

    @property
    def output_path(self) -> str:
        return self.path or self.language

    def option_pairs(self) -> Dict[str, str]:
        """Parse the -p<key>=<value> options into a dict."""
        pairs = {}
        for token in (self.options or "").split():
            if not token.startswith("-p") or "=" not in token:
                continue
            key, value = token[2:].split("=", 1)
            pairs[key] = value
        return pairs

    def keys(self) -> Tuple[str, ...]:
        """Lower-cased names this entry answers to."""
        names = [self.language.lower()]
        if self.label:
            names.append(self.label.lower())
        return tuple(names)


LEGACY_OPTIONS = "-papiPackage=Api -ppackageName=api"

# Comment an entry out to disable generation for that language
GENERATORS: Tuple[GeneratorSpec, ...] = (
    GeneratorSpec(language="Python", factory=PythonGenerator),
    GeneratorSpec(language="Typescript", factory=TypeScriptGenerator),
    GeneratorSpec(language="Kotlin", factory=KotlinGenerator),
    GeneratorSpec(
        language="csharp",
        label="C#",
        factory=CSharpGenerator,
        options=LEGACY_OPTIONS,
        legacy="csharp",
    ),
    GeneratorSpec(language="Swift", factory=SwiftGenerator),
    GeneratorSpec(language="Dart", factory=DartGenerator),
    GeneratorSpec(language="Go", options=LEGACY_OPTIONS, legacy="go"),
    GeneratorSpec(language="Rust", options=LEGACY_OPTIONS),
)


class GeneratorRegistry:
    """Read-only lookup over an ordered table of generator specs."""

    def __init__(self, specs: Sequence[GeneratorSpec] = GENERATORS):
        """
        Build the registry.

        Args:
            specs: Ordered registry entries

        Raises:
            RegistryError: If two entries share a language name or label
        """
        self._specs: Tuple[GeneratorSpec, ...] = tuple(specs)
        self._index: Dict[str, GeneratorSpec] = {}

        for spec in self._specs:
            for key in spec.keys():
                existing = self._index.get(key)
                if existing is not None and existing is not spec:
                    raise RegistryError(
                        f"'{key}' is claimed by both {existing.language} and {spec.language}"
                    )
                self._index[key] = spec

    @property
    def specs(self) -> Tuple[GeneratorSpec, ...]:
        return self._specs

    def find_generator(self, name: str) -> Optional[GeneratorSpec]:
        """
        Find an entry by language name or label, ignoring case.

        Args:
            name: Language name or alias

        Returns:
            The matching entry, or None
        """
        spec = self._index.get(name.lower())
        logger.debug("Registry lookup %r -> %s", name, spec.language if spec else None)
        return spec

    def get_code_generator(
        self,
        name: str,
        api: ApiModel,
        versions: Optional[VersionInfo] = None,
        config: Optional[GeneratorConfig] = None,
    ) -> Optional[CodeGenerator]:
        """
        Create a generator bound to a model.

        Returns:
            Generator instance, or None for unknown and factory-less entries
        """
        spec = self.find_generator(name)
        if spec is None or spec.factory is None:
            return None
        return spec.factory(api, versions, config)

    def code_generators(self) -> List[GeneratorSpec]:
        """Entries that can generate in process."""
        return [spec for spec in self._specs if spec.factory is not None]

    def legacy_languages(self) -> List[GeneratorSpec]:
        """Entries handled by an external legacy generator."""
        return [spec for spec in self._specs if spec.legacy]

    def list_languages(self) -> List[str]:
        """Canonical names of the generatable languages, in table order."""
        return [spec.language for spec in self.code_generators()]

    def is_supported(self, name: str) -> bool:
        """True when the name resolves to an entry with a factory."""
        spec = self.find_generator(name)
        return spec is not None and spec.factory is not None

    def get_language_info(self, name: str) -> Optional[Dict[str, Any]]:
        """
        Describe a registry entry.

        Returns:
            Dict with language information, or None if the name is unknown
        """
        spec = self.find_generator(name)
        if spec is None:
            return None

        return {
            "name": spec.language,
            "label": spec.label,
            "output_path": spec.output_path,
            "class": spec.factory.__name__ if spec.factory else None,
            "module": spec.factory.__module__ if spec.factory else None,
            "legacy": spec.legacy,
            "options": spec.option_pairs(),
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, building it on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry(GENERATORS)
    return _global_registry


# Public API functions using the global registry


def find_generator(name: str) -> Optional[GeneratorSpec]:
    return get_registry().find_generator(name)


def get_code_generator(
    name: str,
    api: ApiModel,
    versions: Optional[VersionInfo] = None,
    config: Optional[GeneratorConfig] = None,
) -> Optional[CodeGenerator]:
    return get_registry().get_code_generator(name, api, versions, config)


def code_generators() -> List[GeneratorSpec]:
    return get_registry().code_generators()


def legacy_languages() -> List[GeneratorSpec]:
    return get_registry().legacy_languages()


def list_supported_languages() -> List[str]:
    """List all generatable languages from the global registry."""
    return get_registry().list_languages()


def is_language_supported(name: str) -> bool:
    """Check if a language is generatable by the global registry."""
    return get_registry().is_supported(name)


def get_language_info(name: str) -> Optional[Dict[str, Any]]:
    """Get information about a registry entry."""
    return get_registry().get_language_info(name)
