"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement,
plus the reference driver that renders a whole model with it.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..logging_config import get_logger
from .config import GeneratorConfig, load_config
from .errors import GeneratorError
from .model import (
    ApiModel,
    EnumType,
    Method,
    ObjectType,
    Parameter,
    Property,
    Type,
    VersionInfo,
)
from .naming import NameSanitizer, NamingCase
from .templates import TemplateEngine, create_template_engine
from .types import LanguageTypes, MappedType, map_type

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """
    Abstract base class for all code generators.

    A generator is bound to exactly one ApiModel for its lifetime. Every
    rendering operation returns text and performs no I/O.
    """

    # Set by each language module
    language_types: LanguageTypes = None
    templates: Dict[str, str] = {}
    property_case: NamingCase = NamingCase.CAMEL_CASE

    def __init__(
        self,
        api: ApiModel,
        versions: Optional[VersionInfo] = None,
        config: Optional[GeneratorConfig] = None,
    ):
        """Bind the generator to a model and version stamp."""
        if self.language_types is None:
            raise GeneratorError(f"{type(self).__name__} declares no type table")
        self.api = api
        self.versions = versions
        self.config = config or load_config(self.language_name)
        self.api_version = versions.api_version if versions else api.version
        self.indent_str = self.config.indent_str
        self.sanitizer = self.create_sanitizer()
        self._template_engine = create_template_engine(self.templates)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'dart', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.dart')."""
        pass

    @abstractmethod
    def create_sanitizer(self) -> NameSanitizer:
        """Return the name sanitizer for this language."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        return self._template_engine

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render one of this generator's templates."""
        return self._template_engine.render_template(template_name, context)

    def identifier(self, name: str, case: Optional[NamingCase] = None) -> str:
        """Sanitized identifier, in the property case unless told otherwise."""
        return self.sanitizer.sanitize_name(name, case or self.property_case)

    def indent_levels(self, indent: str, depth: int = 5) -> Dict[str, str]:
        """Template context entries i0, i1, ... one indent_str deeper each."""
        return {f"i{level}": indent + self.indent_str * level for level in range(depth)}

    # Capabilities

    def is_default_api(self) -> bool:
        """True when the bound API version is the declared default."""
        return self.api_version == self.config.default_api_version

    @abstractmethod
    def supports_multi_api(self) -> bool:
        """True when several API versions can coexist in one build."""
        pass

    def type_map(self, type_: Type) -> MappedType:
        """Map a model type to this language."""
        return map_type(type_, self.language_types)

    @abstractmethod
    def sdk_file_name(self, base_name: str) -> str:
        """Output path for a named artifact such as 'methods' or 'models'."""
        pass

    @abstractmethod
    def sdk_class_name(self) -> str:
        """Name of the generated API client entry point."""
        pass

    # Structural brackets

    @abstractmethod
    def methods_prologue(self, indent: str) -> str:
        pass

    @abstractmethod
    def methods_epilogue(self, indent: str) -> str:
        pass

    @abstractmethod
    def models_prologue(self, indent: str) -> str:
        pass

    @abstractmethod
    def models_epilogue(self, indent: str) -> str:
        pass

    # Documentation

    @abstractmethod
    def comment_header(
        self, indent: str, text: Optional[str] = None, block_char: Optional[str] = None
    ) -> str:
        """Doc comment; empty string when there is no text."""
        pass

    @abstractmethod
    def begin_region(self, indent: str, name: str) -> str:
        pass

    @abstractmethod
    def end_region(self, indent: str, name: str) -> str:
        pass

    @abstractmethod
    def summary(self, indent: str, text: str) -> str:
        pass

    @abstractmethod
    def param_comment(self, param: Parameter, mapped: MappedType) -> str:
        pass

    # Properties

    @abstractmethod
    def declare_property(self, indent: str, prop: Property) -> str:
        """Private backing field plus its "was explicitly set" flag."""
        pass

    @abstractmethod
    def declare_property_get_set(self, indent: str, prop: Property) -> str:
        """Lazy getter hydrating from the raw map, and a flag-setting setter."""
        pass

    @abstractmethod
    def property_from_json(self, prop: Property, map_var: str) -> str:
        """Inline statement reading a property's raw key from map_var."""
        pass

    # Enums

    @abstractmethod
    def declare_enum_value(self, indent: str, value: str) -> str:
        pass

    @abstractmethod
    def enum_mapper(self, enum_type: EnumType, indent: str = "") -> str:
        """Total value-to-string and string-to-value conversions."""
        pass

    @abstractmethod
    def declare_enum(self, indent: str, enum_type: EnumType) -> str:
        pass

    # Types

    @abstractmethod
    def type_signature(self, indent: str, type_: Type) -> str:
        pass

    @abstractmethod
    def default_constructor(self, type_: Type, indent: str = "") -> str:
        pass

    @abstractmethod
    def get_api_raw_response(self, type_: Type, indent: str = "") -> str:
        pass

    @abstractmethod
    def get_api_raw_value(self, type_: Type, indent: str = "") -> str:
        pass

    @abstractmethod
    def get_content_type(self, type_: Type, indent: str = "") -> str:
        pass

    @abstractmethod
    def to_json(self, type_: Type, indent: str = "") -> str:
        pass

    @abstractmethod
    def from_response(self, type_: Type, indent: str = "") -> str:
        pass

    @abstractmethod
    def declare_type(self, indent: str, type_: ObjectType) -> str:
        pass

    # Methods

    @abstractmethod
    def method_signature(self, indent: str, method: Method) -> str:
        pass

    @abstractmethod
    def declare_method(self, indent: str, method: Method) -> str:
        pass


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated source text keyed by output path
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def declaration_order(api: ApiModel) -> List[Type]:
    """
    Declared types in insertion order, except that an object type always
    follows its parent chain.
    """
    ordered: List[Type] = []
    placed = set()

    def place(type_: Type):
        if type_.name in placed:
            return
        if isinstance(type_, ObjectType):
            parent = api.parent_of(type_)
            if parent is not None:
                place(parent)
        placed.add(type_.name)
        ordered.append(type_)

    for type_ in api.all_types():
        place(type_)
    return ordered


def render_models(generator: CodeGenerator, indent: str = "") -> str:
    """Render the models artifact: every declared enum and object type."""
    parts = [generator.models_prologue(indent)]
    for type_ in declaration_order(generator.api):
        logger.debug("Rendering %s type %s", generator.language_name, type_.name)
        if isinstance(type_, EnumType):
            parts.append(generator.declare_enum(indent, type_))
        elif isinstance(type_, ObjectType):
            parts.append(generator.declare_type(indent, type_))
    parts.append(generator.models_epilogue(indent))
    return "\n".join(part for part in parts if part)


def render_methods(generator: CodeGenerator, indent: str = "") -> str:
    """Render the methods artifact: the SDK class with one member per method."""
    member_indent = indent + generator.indent_str
    parts = [generator.methods_prologue(indent)]
    for method in generator.api.all_methods():
        logger.debug(
            "Rendering %s method %s", generator.language_name, method.operation_id
        )
        parts.append(generator.declare_method(member_indent, method))
    parts.append(generator.methods_epilogue(indent))
    return "\n".join(part for part in parts if part)


def validate_model(generator: CodeGenerator) -> List[str]:
    """
    Validate the bound model for basic generation issues.

    Returns:
        List of warning messages (empty if no issues)
    """
    warnings = []
    case = generator.property_case

    for type_ in generator.api.all_types():
        if not isinstance(type_, ObjectType):
            continue

        if not type_.properties:
            warnings.append(f"Type '{type_.name}' has no properties")

        for prop in type_.properties.values():
            if generator.sanitizer.was_renamed(prop.name, case):
                renamed = generator.sanitizer.sanitize_name(prop.name, case)
                warnings.append(
                    f"Property {type_.name}.{prop.name} renamed to {renamed} "
                    f"to avoid {generator.language_name} naming conflicts"
                )

    for method in generator.api.all_methods():
        if method.response_type is None:
            warnings.append(f"Method '{method.operation_id}' has no response type")

    return warnings


def generate_code(generator: CodeGenerator) -> GenerationResult:
    """
    Generate the models and methods artifacts with error handling.

    Args:
        generator: Code generator bound to a model

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    language = generator.language_name
    try:
        warnings = validate_model(generator)

        files = {
            generator.sdk_file_name("models"): render_models(generator),
            generator.sdk_file_name("methods"): render_methods(generator),
        }

        metadata = {
            "language": language,
            "file_extension": generator.file_extension,
            "api_version": generator.api_version,
            "is_default_api": generator.is_default_api(),
            "supports_multi_api": generator.supports_multi_api(),
            "type_count": len(generator.api.all_types()),
            "method_count": len(generator.api.all_methods()),
        }

        logger.info("Generated %s SDK for API %s", language, generator.api_version)
        return GenerationResult(files, warnings, metadata)

    except Exception as e:
        logger.error("%s generation failed: %s", language, e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
