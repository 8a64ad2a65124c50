"""
Naming utilities for safe code generation.

Handles case conversion and reserved-word conflicts for generated
identifiers across target languages.
"""

import re
from enum import Enum
from typing import Dict, Optional, Set, Tuple


class NamingCase(Enum):
    """Different naming case styles."""

    SNAKE_CASE = "snake"  # user_name
    CAMEL_CASE = "camel"  # userName
    PASCAL_CASE = "pascal"  # UserName
    KEBAB_CASE = "kebab"  # user-name
    SCREAMING_SNAKE = "screaming_snake"  # USER_NAME


# Appended (then re-cased) when an identifier collides with a reserved word
CONFLICT_SUFFIX = "value"


def split_words(name: str) -> list[str]:
    """Split a raw name on separators and lower-to-upper case boundaries."""
    spaced = re.sub(r"([a-z0-9])([A-Z])", r"\1_\2", name)
    return [word for word in re.split(r"[^A-Za-z0-9]+", spaced) if word]


def convert_case(name: str, target_case: NamingCase) -> str:
    """Convert a raw name to the target case style."""
    words = split_words(name)
    if not words:
        return name

    if target_case == NamingCase.SNAKE_CASE:
        return "_".join(word.lower() for word in words)
    elif target_case == NamingCase.CAMEL_CASE:
        return words[0].lower() + "".join(word.capitalize() for word in words[1:])
    elif target_case == NamingCase.PASCAL_CASE:
        return "".join(word.capitalize() for word in words)
    elif target_case == NamingCase.KEBAB_CASE:
        return "-".join(word.lower() for word in words)
    elif target_case == NamingCase.SCREAMING_SNAKE:
        return "_".join(word.upper() for word in words)
    return name


class NameSanitizer:
    """Handles name sanitization and case conversion for one language."""

    def __init__(self, reserved_words: Set[str] = None, digit_prefix: str = "_"):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words (case-sensitive)
            digit_prefix: Prefix for identifiers that would start with a digit
        """
        self.reserved_words = reserved_words or set()
        self.digit_prefix = digit_prefix
        self._name_cache: Dict[Tuple[str, NamingCase], str] = {}

    def sanitize_name(
        self, name: str, target_case: NamingCase = NamingCase.CAMEL_CASE
    ) -> str:
        """
        Sanitize a name for safe use in the target language.

        Args:
            name: Original name to sanitize
            target_case: Desired case style

        Returns:
            Identifier in the target case, suffixed when it is reserved
        """
        cache_key = (name, target_case)
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        converted = convert_case(name, target_case)
        if not split_words(converted):
            converted = convert_case("field", target_case)
        if converted[0].isdigit():
            converted = f"{self.digit_prefix}{converted}"

        final_name = self._resolve_conflicts(converted, target_case)
        self._name_cache[cache_key] = final_name
        return final_name

    def _resolve_conflicts(self, name: str, target_case: NamingCase) -> str:
        """Suffix reserved words so both field and flag names stay valid."""
        if self.is_reserved(name):
            return convert_case(f"{name}_{CONFLICT_SUFFIX}", target_case)
        return name

    def is_reserved(self, name: str) -> bool:
        return name in self.reserved_words

    def was_renamed(
        self, name: str, target_case: NamingCase = NamingCase.CAMEL_CASE
    ) -> bool:
        """True when sanitizing changed more than the case of a name."""
        return self.sanitize_name(name, target_case) != convert_case(name, target_case)

    def flag_name(
        self, identifier: str, target_case: NamingCase = NamingCase.CAMEL_CASE
    ) -> str:
        """Name of the "was explicitly set" flag paired with a field."""
        if target_case == NamingCase.SNAKE_CASE:
            return f"{identifier}_set"
        if target_case == NamingCase.SCREAMING_SNAKE:
            return f"{identifier}_SET"
        return f"{identifier}Set"


def quote_literal(value: str, quote: str = '"') -> str:
    """Quote a raw string as a source literal."""
    escaped = value.replace("\\", "\\\\").replace(quote, f"\\{quote}")
    return f"{quote}{escaped}{quote}"


def create_sanitizer(
    reserved_words: Optional[Set[str]] = None, digit_prefix: str = "_"
) -> NameSanitizer:
    """Create a name sanitizer from a reserved-word table."""
    return NameSanitizer(set(reserved_words or ()), digit_prefix)
