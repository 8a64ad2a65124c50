"""
Core code generation components.

Provides the API model, type mapping, the generator contract and
utilities used by all language generators.
"""

from .errors import (
    CodegenError,
    GeneratorError,
    ModelIntegrityError,
    ModelLoadError,
    UnknownPrimitiveError,
    UnresolvedTypeError,
)
from .model import (
    PRIMITIVE_NAMES,
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
    Type,
    VersionInfo,
    build_model,
    load_model,
)
from .types import LanguageTypes, MappedType, map_type
from .generator import (
    CodeGenerator,
    GenerationResult,
    generate_code,
    render_methods,
    render_models,
    validate_model,
)
from .naming import NameSanitizer, NamingCase, convert_case
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Errors
    "CodegenError",
    "GeneratorError",
    "ModelIntegrityError",
    "ModelLoadError",
    "UnknownPrimitiveError",
    "UnresolvedTypeError",
    # Model
    "PRIMITIVE_NAMES",
    "ApiModel",
    "ArrayType",
    "EnumType",
    "MapType",
    "Method",
    "ObjectType",
    "Parameter",
    "ParameterLocation",
    "PrimitiveType",
    "Property",
    "Type",
    "VersionInfo",
    "build_model",
    "load_model",
    # Type mapping
    "LanguageTypes",
    "MappedType",
    "map_type",
    # Generator contract and driver
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    "render_methods",
    "render_models",
    "validate_model",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    "NamingCase",
    "convert_case",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
