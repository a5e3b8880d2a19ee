"""
Renderer for Rust ``enum`` declarations.

Literal lists of one JSON kind become unit-variant enums. Mixed lists
become tagged unions whose serde tag is the literal's position in the
source list.
"""

import json
from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ....core.naming import NameSanitizer, is_valid_identifier, to_pascal_case
from ....core.renderer import Preset
from ..constants import (
    DYNAMIC_VALUE_TYPE,
    HASHMAP_TYPE,
    rust_string_literal,
    unstable_polymorphic_warning,
)
from ..types import RUST_SCALAR_TYPES
from .base import RustRenderer

UNIT_ENUM_DERIVE = (
    "#[derive(Clone, Copy, Debug, Eq, PartialEq, Ord, PartialOrd, Hash, Serialize, Deserialize)]"
)
TAGGED_ENUM_DERIVE = "#[derive(Clone, Debug, PartialEq, Serialize, Deserialize)]"

# Literal kinds that can back a unit-variant enum
UNIT_LITERAL_KINDS = ("string", "number", "boolean", "null")

# Variant name and payload for each member type of a polymorphic node
UNION_VARIANTS = {
    "string": ("String", "String"),
    "integer": ("I32", "i32"),
    "int32": ("I32", "i32"),
    "int64": ("I64", "i64"),
    "long": ("I64", "i64"),
    "number": ("F64", "f64"),
    "boolean": ("Bool", "bool"),
    "object": ("HashMap", f"{HASHMAP_TYPE}<String, {DYNAMIC_VALUE_TYPE}>"),
    "array": ("Vec", f"Vec<{DYNAMIC_VALUE_TYPE}>"),
}


def literal_kind(value: Any) -> str:
    """JSON kind of a literal; booleans are not numbers."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    return "object"


def literal_string(value: Any) -> str:
    """The literal as it is spelled on the wire."""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def union_scalar_member(member_type: Optional[str]) -> Tuple[str, Optional[str]]:
    if member_type == "null":
        return "Null", None
    return UNION_VARIANTS.get(member_type, ("Value", DYNAMIC_VALUE_TYPE))


@dataclass
class EnumVariant:
    """One rendered enum member."""

    name: str
    tag: str
    payload_type: Optional[str] = None
    payload_value: Optional[str] = None  # Rust expression used by Default
    is_default: bool = False

    @property
    def value(self) -> str:
        if self.payload_type is None:
            return self.name
        return f"{self.name}({self.payload_value})"


class EnumRenderer(RustRenderer):
    """Renders enum and union models."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.variant_names = NameSanitizer(self.naming.is_reserved)

    def default_self(self) -> str:
        variants = self.render_variants()
        items = [
            self.run_preset("item", variant=variant, index=index)
            for index, variant in enumerate(variants)
        ]
        description = None
        if self.add_comments:
            description = f"{self.name} enum of type: {self.describe_type()}"

        additional_content = ""
        if getattr(self.options, "render_defaults", True) and variants:
            additional_content = self.render_default_implementation(variants)

        return self.render_template(
            "enum.rs.j2",
            name=self.name,
            description=description,
            derive=UNIT_ENUM_DERIVE if self.is_uniform() else TAGGED_ENUM_DERIVE,
            items=items,
            additional_content=additional_content,
        )

    def is_uniform(self) -> bool:
        """Whether every literal shares one scalar JSON kind."""
        if not self.model.enum:
            return False
        kinds = {literal_kind(value) for value in self.model.enum}
        return len(kinds) == 1 and kinds.pop() in UNIT_LITERAL_KINDS

    def render_variants(self) -> List[EnumVariant]:
        if self.model.enum is None:
            return self.render_union_variants()
        if self.is_uniform():
            return self.render_uniform_variants()
        return self.render_heterogeneous_variants()

    def render_uniform_variants(self) -> List[EnumVariant]:
        variants = []
        for value in self.model.enum:
            if isinstance(value, str):
                name = self.variant_name(value)
            else:
                name = self.naming.enum_member(literal_string(value))
            variants.append(
                EnumVariant(
                    name=self.variant_names.unique(name),
                    tag=literal_string(value),
                    is_default=self.is_default_value(value),
                )
            )
        return variants

    def render_heterogeneous_variants(self) -> List[EnumVariant]:
        variants = []
        for index, value in enumerate(self.model.enum):
            kind = literal_kind(value)
            if kind == "string":
                name = self.variant_name(value)
                payload_type = "String"
                payload_value = f"{rust_string_literal(value)}.to_string()"
            elif kind == "number":
                name, payload_type = "F64", "f64"
                payload_value = repr(float(value))
            elif kind == "boolean":
                name, payload_type = "Bool", "bool"
                payload_value = "true" if value else "false"
            elif kind == "null":
                name, payload_type, payload_value = "Null", None, None
            else:
                name = "HashMap"
                payload_type = f"{HASHMAP_TYPE}<String, String>"
                payload_value = f"{HASHMAP_TYPE}::new()"
            variants.append(
                EnumVariant(
                    name=self.variant_names.unique(name),
                    tag=str(index),
                    payload_type=payload_type,
                    payload_value=payload_value,
                    is_default=self.is_default_value(value),
                )
            )
        return variants

    def render_union_variants(self) -> List[EnumVariant]:
        """Best-effort variants for a node that is a list of types."""
        self.collector.warn(unstable_polymorphic_warning(self.name))
        variants = []
        for index, (name, payload_type) in enumerate(self.union_members()):
            variants.append(
                EnumVariant(
                    name=self.variant_names.unique(name),
                    tag=str(index),
                    payload_type=payload_type,
                    payload_value=None if payload_type is None else "Default::default()",
                )
            )
        return variants

    def union_members(self) -> List[Tuple[str, Optional[str]]]:
        """
        Variant name and payload type for each union member.

        Referenced members carry the boxed referenced model; typed members
        map through their JSON type, each distinct type once.
        """
        if not self.model.union:
            types = self.model.type if isinstance(self.model.type, list) else [self.model.type]
            return [union_scalar_member(member_type) for member_type in types]

        members = []
        seen_types = set()
        for index, member in enumerate(self.model.union):
            if member.ref is not None:
                identifier = self.input_model.resolve_ref(member.ref)
                payload_type = self.type_mapper.ref_to_rust_type(member, f"{self.name}_{index}")
                members.append((self.naming.type(identifier), payload_type))
                continue
            member_types = member.type if isinstance(member.type, list) else [member.type]
            for member_type in member_types:
                if isinstance(member_type, str) and member_type not in seen_types:
                    seen_types.add(member_type)
                    members.append(union_scalar_member(member_type))
        return members

    def variant_name(self, value: str) -> str:
        """PascalCase a string literal, falling back to the enum-member name."""
        name = to_pascal_case(value)
        if not is_valid_identifier(name) or self.naming.is_reserved(name):
            name = self.naming.enum_member(value)
        return name

    def is_default_value(self, value: Any) -> bool:
        original = self.model.original_input
        if "default" not in original:
            return False
        default = original["default"]
        return literal_kind(default) == literal_kind(value) and default == value

    def render_item(self, variant: EnumVariant) -> str:
        return self.render_template(
            "enum_item.rs.j2",
            name=variant.name,
            tag=variant.tag,
            payload_type=variant.payload_type,
        )

    def render_default_implementation(self, variants: List[EnumVariant]) -> str:
        selected = next((v for v in variants if v.is_default), variants[0])
        return self.render_template("impl_default.rs.j2", name=self.name, value=selected.value)

    def describe_type(self) -> str:
        """Human-readable value type, for the doc comment only."""
        if self.model.has_ref_members():
            return f"[{', '.join(name for name, _ in self.union_members())}]"
        if isinstance(self.model.type, list) and len(set(self.model.type)) > 1:
            return f"[{', '.join(self.model.type)}]"
        single = self.model.single_type()
        if single is not None:
            return RUST_SCALAR_TYPES.get(single, single)
        if self.is_uniform():
            kind = literal_kind(self.model.enum[0])
            return {"number": "f64", "boolean": "bool", "null": "()"}.get(kind, "String")
        return DYNAMIC_VALUE_TYPE


def _self(renderer: EnumRenderer, **kwargs) -> str:
    return renderer.default_self()


def _item(renderer: EnumRenderer, variant: EnumVariant, **kwargs) -> str:
    return renderer.render_item(variant)


RUST_DEFAULT_ENUM_PRESET: Preset = {
    "self": _self,
    "item": _item,
}
