"""
Identifier normalization for generated artifacts.

Converts arbitrary strings from the processor document into type and
field identifiers, and validates processor names before anything is
written to disk.
"""

import re
from typing import Dict, Optional, Set

# Prefix used when a formatted type name would be empty or digit-leading
TYPE_NAME_FALLBACK_PREFIX = "Api"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")
_NON_WORD_CHARS = re.compile(r"[^A-Za-z0-9\s]")
_WORD_SEPARATORS = re.compile(r"[-_]")
_NON_FIELD_CHARS = re.compile(r"[^A-Za-z0-9_$]")


class InvalidIdentifierError(ValueError):
    """Raised when a string cannot be reduced to a valid identifier."""

    def __init__(self, raw: str):
        super().__init__(f"'{raw}' cannot be used as an identifier")
        self.raw = raw


def sanitize_identifier(raw: Optional[str]) -> str:
    """
    Strip everything outside [A-Za-z0-9] and validate the remainder.

    Args:
        raw: Candidate identifier (e.g. a processor name)

    Returns:
        The cleaned identifier

    Raises:
        InvalidIdentifierError: If nothing is left or the result starts with a digit
    """
    if raw is None:
        raise InvalidIdentifierError("")

    cleaned = _NON_ALPHANUMERIC.sub("", raw)
    if not cleaned or cleaned[0].isdigit():
        raise InvalidIdentifierError(raw)
    return cleaned


def is_valid_identifier(raw: Optional[str]) -> bool:
    """Check whether ``sanitize_identifier`` would accept ``raw``."""
    try:
        sanitize_identifier(raw)
    except InvalidIdentifierError:
        return False
    return True


def capitalize_word(raw: str) -> str:
    """Upper-case the first character and lower-case the rest ("ITEMS" -> "Items")."""
    if not raw:
        return raw
    return raw[:1].upper() + raw[1:].lower()


def to_pascal_case(raw: str) -> str:
    """
    Convert a free-form name into a PascalCase type name.

    Hyphens and underscores separate words; any other character outside
    [A-Za-z0-9] and whitespace is dropped. Each word is passed through
    ``capitalize_word``. An empty or digit-leading result gets the "Api" prefix.

    Examples:
        "Create Customer" -> "CreateCustomer"
        "get-status_v2"   -> "GetStatusV2"
        "123"             -> "Api123"
    """
    spaced = _WORD_SEPARATORS.sub(" ", raw or "")
    cleaned = _NON_WORD_CHARS.sub("", spaced)
    result = "".join(capitalize_word(word) for word in cleaned.split())

    if not result or result[0].isdigit():
        result = TYPE_NAME_FALLBACK_PREFIX + result

    return result


# API names become DTO class names through the same rules
format_class_name = to_pascal_case


def to_camel_case(raw: str) -> str:
    """
    Convert a JSON key into lowerCamelCase.

    snake_case input is split on underscores ("Customer_ID" -> "customerId");
    otherwise only a leading capital is lowered ("CustomerName" -> "customerName").
    """
    if not raw:
        return raw

    if "_" in raw:
        words = raw.split("_")
        return words[0].lower() + "".join(capitalize_word(w) for w in words[1:])

    if raw[0].isupper():
        return raw[0].lower() + raw[1:]

    return raw


def accessor_suffix(field_name: str) -> str:
    """Suffix for get/set accessors of a field ("customerId" -> "Customerid")."""
    return capitalize_word(field_name)


def package_segment(processor_name: str) -> str:
    """Lower-cased, sanitized package directory name for a processor."""
    return sanitize_identifier(processor_name).lower()


def class_name_part(raw: str) -> str:
    """Sanitized identifier with its first character upper-cased."""
    cleaned = sanitize_identifier(raw)
    return cleaned[:1].upper() + cleaned[1:]


class FieldNameAllocator:
    """Allocates unique, syntactically valid field names within one record."""

    def __init__(self, reserved_words: Set[str] = None, suffix_on_conflict: str = "_"):
        """
        Initialize allocator.

        Args:
            reserved_words: Target-language keywords that cannot be field names
            suffix_on_conflict: Suffix appended to keyword collisions
        """
        self.reserved_words = reserved_words or set()
        self.suffix_on_conflict = suffix_on_conflict
        self._assigned: Dict[str, str] = {}
        self._used_names: Set[str] = set()

    def allocate(self, json_key: str) -> str:
        """Return the field name for ``json_key``, stable for repeated keys."""
        if json_key in self._assigned:
            return self._assigned[json_key]

        name = _NON_FIELD_CHARS.sub("", to_camel_case(json_key))
        if not name or name[0].isdigit():
            name = f"_{name}"

        if name in self.reserved_words:
            name = f"{name}{self.suffix_on_conflict}"

        original_name = name
        counter = 1
        while name in self._used_names:
            name = f"{original_name}{counter}"
            counter += 1

        self._assigned[json_key] = name
        self._used_names.add(name)
        return name

    def reset(self):
        """Forget all allocated names."""
        self._assigned.clear()
        self._used_names.clear()
