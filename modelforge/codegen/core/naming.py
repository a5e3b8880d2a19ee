"""
Naming utilities for safe code generation.

Handles word splitting, case conversions, punctuation spelling and
conflict tracking shared by every target language.
"""

import re
from typing import Callable, Dict, Optional, Set

# Acronym runs, capitalized/lowercase words with trailing digits, bare numbers
_WORD_PATTERN = re.compile(
    r"[A-Z]+[0-9]*(?=[A-Z][a-z])|[A-Z]?[a-z]+[0-9]*|[A-Z]+[0-9]*|[0-9]+"
)

# Spelled-out names for punctuation that cannot appear in identifiers
SPECIAL_CHARACTER_NAMES: Dict[str, str] = {
    "!": "exclamation",
    '"': "quotation",
    "#": "hash",
    "$": "dollar",
    "%": "percent",
    "&": "ampersand",
    "'": "apostrophe",
    "(": "roundleft",
    ")": "roundright",
    "*": "asterisk",
    "+": "plus",
    ",": "comma",
    ".": "dot",
    "/": "slash",
    ":": "colon",
    ";": "semicolon",
    "<": "less",
    "=": "equal",
    ">": "greater",
    "?": "question",
    "@": "at",
    "[": "squareleft",
    "\\": "backslash",
    "]": "squareright",
    "^": "circumflex",
    "`": "grave",
    "{": "curlyleft",
    "|": "vertical",
    "}": "curlyright",
    "~": "tilde",
}


def split_words(value: str) -> list[str]:
    """Split an identifier-ish string into its words."""
    return _WORD_PATTERN.findall(str(value))


def to_pascal_case(value: str) -> str:
    """Convert to PascalCase, merging numbers into the preceding word."""
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(value))


def to_snake_case(value: str) -> str:
    """Convert to snake_case."""
    return "_".join(word.lower() for word in split_words(value))


def replace_special_characters(value: str, separator: str = "_") -> str:
    """
    Spell out punctuation so a raw literal can become an identifier.

    Word separators (space, underscore, hyphen) are left alone.

    Example:
        >>> replace_special_characters("click&pay")
        'click_ampersand_pay'
    """
    parts = []
    for char in str(value):
        name = SPECIAL_CHARACTER_NAMES.get(char)
        parts.append(f"{separator}{name}{separator}" if name else char)
    return "".join(parts)


def is_valid_identifier(name: str) -> bool:
    """Check the name is non-empty and does not start with a digit."""
    return bool(name) and re.match(r"^[A-Za-z_][A-Za-z0-9_]*$", name) is not None


class NameSanitizer:
    """Tracks names used within one scope and resolves collisions."""

    def __init__(self, is_reserved: Optional[Callable[[str], bool]] = None):
        """
        Initialize name sanitizer.

        Args:
            is_reserved: Predicate telling whether a name is a reserved word
        """
        self.is_reserved = is_reserved or (lambda name: False)
        self._used_names: Set[str] = set()

    def unique(self, name: str) -> str:
        """
        Return ``name``, or ``name`` with a numeric suffix if already used.

        The returned name is recorded as used.
        """
        candidate = name
        counter = 1
        while candidate in self._used_names or self.is_reserved(candidate):
            candidate = f"{name}{counter}"
            counter += 1
        self._used_names.add(candidate)
        return candidate
