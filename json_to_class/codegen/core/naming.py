"""
Naming utilities for safe code generation.

Handles identifier legalization, case conversions, keyword conflicts
and the wire-name conventions of generated serializers.
"""

from enum import Enum
from typing import List, Optional, Set

from .schema import InferenceError


class EmptyIdentifierError(InferenceError):
    """Raised when a name has no alphabetic character to build an identifier from."""

    pass


class Casing(Enum):
    """Different naming case styles."""

    CAMEL = "camel"  # userName
    PASCAL = "pascal"  # UserName
    SNAKE = "snake"  # user_name
    KEBAB = "kebab"  # user-name


def _starts_word(text: str, index: int, current: str) -> bool:
    char = text[index]
    previous = current[-1]
    if char.isdigit() != previous.isdigit():
        return True
    if not char.isupper():
        return False
    if previous.islower():
        return True
    # Last capital of an acronym opens the next word: HTTPServer -> HTTP Server
    following = text[index + 1 : index + 2]
    return previous.isupper() and following.islower()


def split_words(text: str) -> List[str]:
    """
    Split text into words.

    Words break on any run of non-alphanumeric characters, wherever letters
    and digits meet, and at lower-to-upper case changes. A run of capitals
    stays one word (``userID`` is ``user`` + ``ID``).
    """
    words = []
    current = ""
    for index, char in enumerate(text):
        if not char.isalnum():
            if current:
                words.append(current)
                current = ""
            continue
        if current and _starts_word(text, index, current):
            words.append(current)
            current = ""
        current += char
    if current:
        words.append(current)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def convert_case(text: str, casing: Casing) -> str:
    """Convert text to the given case style, keeping separators for snake/kebab."""
    words = split_words(text)
    if not words:
        return ""

    if casing == Casing.CAMEL:
        return words[0].lower() + "".join(_capitalize(w) for w in words[1:])
    elif casing == Casing.PASCAL:
        return "".join(_capitalize(w) for w in words)
    elif casing == Casing.SNAKE:
        return "_".join(w.lower() for w in words)
    elif casing == Casing.KEBAB:
        return "-".join(w.lower() for w in words)
    raise ValueError(f"Unknown casing: {casing}")


def _legalize_once(raw: str, casing: Casing) -> str:
    start = 0
    while start < len(raw) and not raw[start].isalpha():
        start += 1
    converted = convert_case(raw[start:], casing)
    return "".join(char for char in converted if char.isalnum())


def legalize(raw: str, casing: Casing) -> str:
    """
    Turn arbitrary text into an identifier in the given case style.

    Leading characters up to the first letter are dropped, the rest is case
    converted and anything that is not alphanumeric is removed. The result
    may be empty when ``raw`` has no letters at all.

    Adjacent one-letter words can merge into an acronym once cased
    (``a-b`` -> ``AB`` -> ``Ab``), so conversion repeats until the result
    is stable.
    """
    legal = _legalize_once(raw, casing)
    while True:
        again = _legalize_once(legal, casing)
        if again == legal:
            return legal
        legal = again


class NamingRule(Enum):
    """How a generated serializer maps field identifiers to JSON keys."""

    NONE = "none"
    SNAKE = "snake"
    PASCAL = "pascal"
    KEBAB = "kebab"

    def __str__(self) -> str:
        return self.value

    @property
    def casing(self) -> Casing:
        """Case style keys are converted to; ``none`` uses snake case."""
        return _RULE_CASING[self]

    def transform_key(self, key: str) -> str:
        """Convert a raw JSON key with this rule's casing."""
        return convert_case(key, self.casing)


_RULE_CASING = {
    NamingRule.NONE: Casing.SNAKE,
    NamingRule.SNAKE: Casing.SNAKE,
    NamingRule.PASCAL: Casing.PASCAL,
    NamingRule.KEBAB: Casing.KEBAB,
}


class NameSanitizer:
    """Handles name legalization and conflict resolution."""

    def __init__(
        self, reserved_words: Set[str] = None, builtin_types: Set[str] = None
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin type names that might conflict
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()

    def sanitize_name(
        self,
        name: str,
        target_case: Casing,
        placeholder: Optional[str] = None,
        suffix_on_conflict: str = "_",
    ) -> str:
        """
        Legalize a name for safe use in the target language.

        Args:
            name: Original name to sanitize
            target_case: Desired case style
            placeholder: Name to use when nothing legal is left; when None
                an EmptyIdentifierError is raised instead
            suffix_on_conflict: Suffix to add for reserved words

        Returns:
            Sanitized name safe for use
        """
        legal = legalize(name, target_case)
        if not legal:
            if placeholder is None:
                raise EmptyIdentifierError(
                    f"Cannot build an identifier from {name!r}: "
                    "it contains no alphabetic character"
                )
            legal = placeholder

        if self.is_reserved(legal):
            legal = f"{legal}{suffix_on_conflict}"
        return legal

    def is_reserved(self, name: str) -> bool:
        """Check a name against reserved words and builtin types."""
        return name in self.reserved_words or name in self.builtin_types

    @staticmethod
    def make_unique(name: str, used_names: Set[str]) -> str:
        """Append the lowest free numeric suffix to ``name`` and record it."""
        candidate = name
        counter = 1
        while candidate in used_names:
            candidate = f"{name}{counter}"
            counter += 1
        used_names.add(candidate)
        return candidate
