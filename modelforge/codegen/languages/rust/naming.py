"""
Rust-specific naming conventions.

Every function takes a possibly-missing raw name plus a ``NamingContext``
and returns a Rust-safe identifier. Missing names always produce "".
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ...core.model import CommonModel, InputModel
from ...core.naming import (
    is_valid_identifier,
    replace_special_characters,
    to_pascal_case,
    to_snake_case,
)
from .constants import (
    ADDITIONAL_PROPERTIES_NAME,
    RESERVED_PREFIX,
    is_reserved_rust_keyword,
)


@dataclass(frozen=True)
class NamingContext:
    """Everything a naming function may consult."""

    model: CommonModel
    input_model: InputModel
    field: Optional[CommonModel] = None
    reserved_keyword_callback: Optional[Callable[[str], bool]] = None

    def is_reserved(self, name: str) -> bool:
        if self.reserved_keyword_callback is None:
            return False
        return self.reserved_keyword_callback(name)


def get_unique_property_name(model: CommonModel, name: str) -> str:
    """Prefix ``name`` until it no longer collides with a declared property."""
    properties = model.properties or {}
    while name in properties:
        name = f"{RESERVED_PREFIX}{name}"
    return name


def _needs_prefix(name: str, ctx: NamingContext) -> bool:
    return ctx.is_reserved(name) or not is_valid_identifier(name)


def type_name(name: Optional[str], ctx: NamingContext) -> str:
    """PascalCase type name, prefixed when it hits a keyword."""
    if not name:
        return ""
    formatted = to_pascal_case(name)
    if _needs_prefix(formatted, ctx):
        formatted = to_pascal_case(f"{RESERVED_PREFIX}{name}")
    return formatted


def field_name(name: Optional[str], ctx: NamingContext) -> str:
    """snake_case field name, prefixed when it hits a keyword."""
    if not name:
        return ""
    formatted = to_snake_case(name)
    if _needs_prefix(formatted, ctx):
        formatted = to_snake_case(f"{RESERVED_PREFIX}{name}")
    return formatted


def module_name(name: Optional[str], ctx: NamingContext) -> str:
    """snake_case module name, prefixed when it hits a keyword."""
    if not name:
        return ""
    formatted = to_snake_case(replace_special_characters(name))
    if _needs_prefix(formatted, ctx):
        formatted = to_snake_case(f"{RESERVED_PREFIX}{formatted}")
    return formatted


def enum_member_name(name: Any, ctx: NamingContext) -> str:
    """
    Variant name for a literal enum value.

    The literal is spelled out and prefixed with the owning type's
    identifier so numbers and punctuation still produce a valid name.
    """
    if name is None:
        return ""
    formatted = to_pascal_case(replace_special_characters(str(name)))
    prefix = ctx.model.id or "EnumMember"
    return to_pascal_case(f"{prefix}_{formatted}")


def additional_property_type_name(ctx: NamingContext) -> str:
    """Type name for the value type of an owner's additional properties."""
    if ctx.model.id is None:
        return ""
    property_name = to_pascal_case(
        get_unique_property_name(ctx.model, ADDITIONAL_PROPERTIES_NAME)
    )
    formatted = to_pascal_case(f"{ctx.model.id}_{property_name}")
    if ctx.is_reserved(formatted):
        formatted = to_pascal_case(f"{RESERVED_PREFIX}{formatted}")
    return formatted


@dataclass(frozen=True)
class RustNamingConvention:
    """Pluggable naming functions; any of them can be replaced."""

    type: Callable[[Optional[str], NamingContext], str] = type_name
    field: Callable[[Optional[str], NamingContext], str] = field_name
    module: Callable[[Optional[str], NamingContext], str] = module_name
    enum_member: Callable[[Any, NamingContext], str] = enum_member_name
    additional_property_type: Callable[[NamingContext], str] = additional_property_type_name


DEFAULT_NAMING_CONVENTION = RustNamingConvention()


@dataclass
class RustNaming:
    """
    Naming service bound to one model and registry.

    Stateless apart from its bindings; renderers share one per model.
    """

    convention: RustNamingConvention
    model: CommonModel
    input_model: InputModel
    reserved_keyword_callback: Callable[[str], bool] = is_reserved_rust_keyword

    def _ctx(self, model: Optional[CommonModel] = None, field: Optional[CommonModel] = None):
        return NamingContext(
            model=model or self.model,
            input_model=self.input_model,
            field=field,
            reserved_keyword_callback=self.reserved_keyword_callback,
        )

    def type(self, name: Optional[str], model: Optional[CommonModel] = None) -> str:
        return self.convention.type(name, self._ctx(model))

    def field(self, name: Optional[str], field: Optional[CommonModel] = None) -> str:
        return self.convention.field(name, self._ctx(field=field))

    def module(self, name: Optional[str], model: Optional[CommonModel] = None) -> str:
        return self.convention.module(name, self._ctx(model))

    def module_file(self, name: Optional[str], model: Optional[CommonModel] = None) -> str:
        return f"src/{self.module(name, model)}.rs"

    def enum_member(self, value: Any, model: Optional[CommonModel] = None) -> str:
        return self.convention.enum_member(value, self._ctx(model))

    def additional_property_type(self, model: Optional[CommonModel] = None) -> str:
        return self.convention.additional_property_type(self._ctx(model))

    def is_reserved(self, name: str) -> bool:
        return self.reserved_keyword_callback(name)
