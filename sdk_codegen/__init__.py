"""
SDK Code Generation

Generates client SDK source text in several languages from an API model.
"""

from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.errors import CodegenError
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.model import ApiModel, VersionInfo, build_model, load_model
from .logging_config import get_logger, setup_logging
from .registry import (
    GENERATORS,
    GeneratorRegistry,
    GeneratorSpec,
    RegistryError,
    find_generator,
    get_code_generator,
    get_registry,
    list_supported_languages,
)

logger = get_logger(__name__)

# Version info
__version__ = "0.1.0"


def generate_all(
    api: ApiModel,
    languages: Optional[Iterable[str]] = None,
    versions: Optional[VersionInfo] = None,
    config_file: Optional[Union[str, Path]] = None,
    registry: Optional[GeneratorRegistry] = None,
) -> Dict[str, GenerationResult]:
    """
    Generate every requested language from one model.

    Each language runs with its own generator, so a failure is reported
    in that language's result and the remaining languages still run.

    Args:
        api: Model shared by all generators
        languages: Language names or aliases (default: every generatable one)
        versions: Version stamp for all generators
        config_file: Optional JSON config file with per-language sections
        registry: Registry to resolve names against (default: the global one)

    Returns:
        GenerationResult per requested language name
    """
    registry = registry or get_registry()
    if languages is None:
        languages = registry.list_languages()

    results: Dict[str, GenerationResult] = {}
    for name in languages:
        spec = registry.find_generator(name)
        if spec is None:
            logger.warning("No generator registered for %s", name)
            results[name] = GenerationResult.error(f"Unsupported language: {name}")
            continue
        if spec.factory is None:
            logger.warning("%s is only available through a legacy generator", name)
            results[name] = GenerationResult.error(
                f"No code generator available for {spec.language}"
            )
            continue

        try:
            config = load_config(spec.language, config_file=config_file)
            generator = spec.factory(api, versions, config)
        except Exception as e:
            logger.error("%s generator setup failed: %s", name, e, exc_info=True)
            results[name] = GenerationResult.error(
                f"Generator setup failed: {e}", exception=e
            )
            continue

        results[name] = generate_code(generator)

    return results


def generate_from_document(
    document: Dict, languages: Optional[Iterable[str]] = None, **kwargs
) -> Dict[str, GenerationResult]:
    """Build a model from a normalized API document and generate it."""
    return generate_all(build_model(document), languages, **kwargs)


# Export main interfaces
__all__ = [
    "ApiModel",
    "CodeGenerator",
    "CodegenError",
    "ConfigManager",
    "GENERATORS",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorRegistry",
    "GeneratorSpec",
    "RegistryError",
    "VersionInfo",
    "build_model",
    "find_generator",
    "generate_all",
    "generate_code",
    "generate_from_document",
    "get_code_generator",
    "get_registry",
    "list_supported_languages",
    "load_config",
    "load_model",
    "setup_logging",
]
