"""
Dart-specific naming utilities and sanitization.

Handles Dart reserved words, core types and string escaping.
"""

from ...core.naming import NameSanitizer

# Reserved words: never valid identifiers
DART_RESERVED_WORDS = {
    "assert",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "for",
    "if",
    "in",
    "is",
    "new",
    "null",
    "rethrow",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "var",
    "void",
    "while",
    "with",
}

# Core types, built-in identifiers and names the generated file relies on
DART_BUILTIN_TYPES = {
    "bool",
    "double",
    "dynamic",
    "int",
    "num",
    "BigInt",
    "DateTime",
    "Duration",
    "Enum",
    "Function",
    "Future",
    "Iterable",
    "JsonKey",
    "JsonSerializable",
    "List",
    "Map",
    "Never",
    "Null",
    "Object",
    "Record",
    "Set",
    "Stream",
    "String",
    "Symbol",
    "Type",
    "required",
}

_DART_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "$": "\\$",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def create_dart_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for Dart."""
    return NameSanitizer(DART_RESERVED_WORDS, DART_BUILTIN_TYPES)


def escape_dart_string(text: str) -> str:
    """Escape text for use inside a double-quoted Dart string literal."""
    escaped = []
    for char in text:
        if char in _DART_ESCAPES:
            escaped.append(_DART_ESCAPES[char])
        elif ord(char) < 0x20:
            escaped.append(f"\\u{{{ord(char):x}}}")
        else:
            escaped.append(char)
    return "".join(escaped)
