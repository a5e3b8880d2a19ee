"""
Rust keywords and diagnostic messages.
"""

# Strict keywords, invalid as items, variables, fields, variants and type parameters
# https://doc.rust-lang.org/reference/keywords.html#strict-keywords
RUST_STRICT_KEYWORDS = frozenset({
    "as",
    "async",
    "await",
    "break",
    "const",
    "continue",
    "crate",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "fn",
    "for",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "match",
    "mod",
    "move",
    "mut",
    "pub",
    "ref",
    "return",
    "self",
    "Self",
    "static",
    "struct",
    "super",
    "trait",
    "true",
    "try",
    "type",
    "unsafe",
    "use",
    "where",
    "while",
})

# Weak keywords, reserved everywhere for simplicity
RUST_WEAK_KEYWORDS = frozenset({
    "union",
    "'static",
    "macro_rules",
})

# Reserved for future use
# https://doc.rust-lang.org/reference/keywords.html#reserved-keywords
RUST_FUTURE_KEYWORDS = frozenset({
    "abstract",
    "become",
    "box",
    "do",
    "final",
    "macro",
    "override",
    "priv",
    "typeof",
    "unsized",
    "virtual",
    "yield",
})

RESERVED_RUST_KEYWORDS = RUST_STRICT_KEYWORDS | RUST_WEAK_KEYWORDS | RUST_FUTURE_KEYWORDS

# Fixed marker prepended to names that collide with a keyword
RESERVED_PREFIX = "reserved_"

ADDITIONAL_PROPERTIES_NAME = "additionalProperties"
PATTERN_PROPERTIES_SUFFIX = "PatternProperties"

DYNAMIC_VALUE_TYPE = "serde_json::Value"
HASHMAP_TYPE = "std::collections::HashMap"


def is_reserved_rust_keyword(word: str) -> bool:
    """Check whether a word is a reserved Rust keyword."""
    return word in RESERVED_RUST_KEYWORDS


def unstable_polymorphic_warning(field_name: str) -> str:
    return (
        "Polymorphic and union types are not fully supported by the Rust generator. "
        f"{field_name} output will be unstable!"
    )


def unstable_field_warning(field_name: str) -> str:
    return (
        f"Unsure how to handle {field_name}, so you must implement serialization "
        "(e.g. From<serde_json::Value>) for it yourself."
    )


def rust_string_literal(value: str) -> str:
    """Quote a value as a Rust string literal."""
    escaped = []
    for char in str(value):
        if char == "\\":
            escaped.append("\\\\")
        elif char == '"':
            escaped.append('\\"')
        elif char == "\n":
            escaped.append("\\n")
        elif char == "\r":
            escaped.append("\\r")
        elif char == "\t":
            escaped.append("\\t")
        elif ord(char) < 0x20:
            escaped.append(f"\\u{{{ord(char):x}}}")
        else:
            escaped.append(char)
    return '"' + "".join(escaped) + '"'
