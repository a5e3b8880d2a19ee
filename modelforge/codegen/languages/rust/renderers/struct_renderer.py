"""
Renderer for Rust ``struct`` declarations.
"""

from dataclasses import dataclass
from typing import List, Optional

from ....core.model import CommonModel
from ....core.naming import NameSanitizer
from ....core.renderer import Preset
from ..constants import (
    ADDITIONAL_PROPERTIES_NAME,
    PATTERN_PROPERTIES_SUFFIX,
    rust_string_literal,
)
from ..naming import get_unique_property_name
from ..types import FieldKind
from .base import RustRenderer


@dataclass
class StructField:
    """One rendered struct field."""

    original_name: str  # name handed to naming and type mapping
    serialized_name: str  # wire-format name in the rename annotation
    field: CommonModel
    kind: FieldKind
    required: bool
    name: str = ""
    rust_type: str = ""
    macro: str = ""


class StructRenderer(RustRenderer):
    """
    Renders an object model as a record type.

    Declared properties come first, followed by the additional-properties
    map and one map per pattern property. The in-memory field name is
    snake_case; the serialized name is always the untouched source name.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.field_names = NameSanitizer(self.naming.is_reserved)
        self._fields: Optional[List[StructField]] = None

    def default_self(self) -> str:
        fields = self.render_fields()
        description = None
        if self.add_comments:
            article = "an" if self.name[:1].lower() in ("a", "e", "i", "o", "u") else "a"
            description = f"{self.name} represents {article} {self.name} model."
        return self.render_template(
            "struct.rs.j2",
            name=self.name,
            description=description,
            fields=fields,
            additional_content=self.run_preset("additional_content", fields=fields),
        )

    def render_fields(self) -> List[StructField]:
        """Render every field once, in declaration order."""
        if self._fields is not None:
            return self._fields

        fields = []
        for property_name, field in (self.model.properties or {}).items():
            fields.append(
                self.render_field(
                    StructField(
                        original_name=property_name,
                        serialized_name=property_name,
                        field=field,
                        kind=FieldKind.FIELD,
                        required=self.model.is_required(property_name),
                    )
                )
            )

        if self.model.additional_properties is not None:
            fields.append(
                self.render_field(
                    StructField(
                        original_name=get_unique_property_name(
                            self.model, ADDITIONAL_PROPERTIES_NAME
                        ),
                        serialized_name=ADDITIONAL_PROPERTIES_NAME,
                        field=self.model.additional_properties,
                        kind=FieldKind.ADDITIONAL_PROPERTY,
                        required=False,
                    )
                )
            )

        for pattern, field in (self.model.pattern_properties or {}).items():
            property_name = get_unique_property_name(
                self.model, f"{pattern}{PATTERN_PROPERTIES_SUFFIX}"
            )
            fields.append(
                self.render_field(
                    StructField(
                        original_name=property_name,
                        serialized_name=property_name,
                        field=field,
                        kind=FieldKind.PATTERN_PROPERTIES,
                        required=False,
                    )
                )
            )

        self._fields = fields
        return fields

    def render_field(self, struct_field: StructField) -> StructField:
        params = {
            "field_name": struct_field.original_name,
            "field": struct_field.field,
            "field_kind": struct_field.kind,
            "required": struct_field.required,
        }
        name = self.run_preset("field_name", **params) or "field"
        struct_field.name = self.field_names.unique(name)
        struct_field.rust_type = self.run_preset("field_type", **params)
        struct_field.macro = self.run_preset(
            "field_macro", **{**params, "field_name": struct_field.serialized_name}
        )
        return struct_field

    def render_field_type(
        self, field: CommonModel, field_name: str, field_kind: FieldKind, required: bool
    ) -> str:
        if field_kind in (FieldKind.ADDITIONAL_PROPERTY, FieldKind.PATTERN_PROPERTIES):
            return self.type_mapper.to_rust_type(field_kind, field, field_name)
        return self.render_type(field, field_name, required)

    def render_field_macro(self, serialized_name: str, required: bool) -> str:
        serde_args = f"rename = {rust_string_literal(serialized_name)}"
        if not required:
            serde_args += ', skip_serializing_if = "Option::is_none"'
        return f"#[serde({serde_args})]"

    def render_new_implementation(self, fields: List[StructField]) -> str:
        """
        Render ``impl T { pub fn new(..) -> T }``.

        Required fields become parameters, unboxed so callers pass plain
        values; optional fields start as ``None``.
        """
        parameters = [
            f"{f.name}: {self.unbox(f.rust_type)}" for f in fields if f.required
        ]
        initializers = []
        for f in fields:
            if not f.required:
                initializers.append(f"{f.name}: None,")
            elif self.is_boxed(f.rust_type):
                initializers.append(f"{f.name}: Box::new({f.name}),")
            else:
                initializers.append(f"{f.name},")
        return self.render_template(
            "impl_new.rs.j2",
            name=self.name,
            parameters=parameters,
            initializers=initializers,
        )


def _self(renderer: StructRenderer, **kwargs) -> str:
    return renderer.default_self()


def _field_name(renderer: StructRenderer, field_name: str, field: CommonModel, **kwargs) -> str:
    return renderer.naming.field(field_name, field)


def _field_type(
    renderer: StructRenderer,
    field_name: str,
    field: CommonModel,
    field_kind: FieldKind,
    required: bool,
    **kwargs,
) -> str:
    return renderer.render_field_type(field, field_name, field_kind, required)


def _field_macro(renderer: StructRenderer, field_name: str, required: bool, **kwargs) -> str:
    return renderer.render_field_macro(field_name, required)


def _additional_content(renderer: StructRenderer, fields: List[StructField], options, **kwargs) -> str:
    if getattr(options, "render_initializer", True):
        return renderer.render_new_implementation(fields)
    return ""


RUST_DEFAULT_STRUCT_PRESET: Preset = {
    "self": _self,
    "field_name": _field_name,
    "field_type": _field_type,
    "field_macro": _field_macro,
    "additional_content": _additional_content,
}
