"""
Rust-specific type system for code generation.

Maps model nodes onto Rust type expressions and records the synthetic
types (tuple structs, anonymous structs) that a declaration needs.
"""

from dataclasses import dataclass
from dataclasses import field as dataclass_field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from ....logging_config import get_logger
from ...core.model import CommonModel, ModelKind, extract_kind
from .constants import (
    DYNAMIC_VALUE_TYPE,
    HASHMAP_TYPE,
    unstable_field_warning,
    unstable_polymorphic_warning,
)
from .naming import RustNaming

logger = get_logger(__name__)

# Scalar schema types and their Rust spelling
RUST_SCALAR_TYPES = {
    "string": "String",
    "int32": "i32",
    "integer": "i32",
    "int64": "i64",
    "long": "i64",
    "number": "f64",
    "boolean": "bool",
}

REF_KIND = "$ref"

# Kinds that are rendered as their own declaration when registered
NAMED_KINDS = (ModelKind.OBJECT, ModelKind.ENUM, ModelKind.UNION)


class FieldKind(Enum):
    """Where a struct field comes from."""

    FIELD = "field"
    ADDITIONAL_PROPERTY = "additional_property"
    PATTERN_PROPERTIES = "pattern_properties"


class RustDependencyType(Enum):
    """Kinds of synthetic module-level types."""

    TUPLE = "tuple"
    STRUCT = "struct"


@dataclass(frozen=True)
class RustDependency:
    """A synthetic type discovered while rendering its owner."""

    type: RustDependencyType
    original_field_name: str
    field_name: str  # synthesized type name
    field: CommonModel = dataclass_field(compare=False)
    parent: CommonModel = dataclass_field(compare=False)


class SyntheticTypeNames:
    """
    Names taken by synthetic types within one module.

    Each name remembers the shape it was claimed for. Claiming a taken name
    for the same shape returns it again; a different shape gets the
    owner-prefixed name, then a numbered one.
    """

    def __init__(self, reserved: Iterable[str] = ()):
        self._shapes: Dict[str, Any] = {}
        for name in reserved:
            self.reserve(name)

    def reserve(self, name: str) -> None:
        """Mark a declared type name as unavailable to synthetic types."""
        if name:
            self._shapes.setdefault(name, None)

    def claim(
        self,
        name: str,
        kind: RustDependencyType,
        model: CommonModel,
        owner_name: str = "",
    ) -> str:
        shape = (kind, model.original_input)
        candidates = [name]
        if owner_name and not name.startswith(owner_name):
            candidates.append(f"{owner_name}{name}")
        for candidate in candidates:
            if self._take(candidate, shape):
                return candidate

        base = candidates[-1]
        counter = 1
        while not self._take(f"{base}{counter}", shape):
            counter += 1
        name = f"{base}{counter}"
        logger.debug("Synthetic type name %s taken, using %s", base, name)
        return name

    def _take(self, name: str, shape: Any) -> bool:
        if name not in self._shapes:
            self._shapes[name] = shape
            return True
        return self._shapes[name] == shape


class DependencyCollector:
    """
    Per-renderer accumulator for discovered dependencies.

    Owned by exactly one renderer and handed to the orchestrator once
    rendering finishes. ``names`` is shared by every renderer working on
    the same module.
    """

    def __init__(self, names: Optional[SyntheticTypeNames] = None):
        self.names = names if names is not None else SyntheticTypeNames()
        self.module_dependencies: List[RustDependency] = []
        self.dependencies: List[str] = []
        self.warnings: List[str] = []

    def add_module_dependency(self, dependency: RustDependency) -> None:
        """Record a synthetic dependency, at most once per (kind, field)."""
        for existing in self.module_dependencies:
            if (
                existing.type == dependency.type
                and existing.original_field_name == dependency.original_field_name
            ):
                return
        self.module_dependencies.append(dependency)

    def add_dependency(self, name: str) -> None:
        if name and name not in self.dependencies:
            self.dependencies.append(name)

    def warn(self, message: str) -> None:
        logger.warning(message)
        if message not in self.warnings:
            self.warnings.append(message)


class RustTypeMapper:
    """
    Central engine for mapping model nodes to Rust types.

    Anything stored behind an object or tuple shape is boxed so that
    recursive and mutually recursive models have a finite size.
    """

    def __init__(
        self,
        naming: RustNaming,
        collector: DependencyCollector,
        parent_name: Optional[str] = None,
    ):
        """
        Args:
            naming: Naming service bound to the owning model
            collector: Dependency accumulator owned by the calling renderer
            parent_name: Rendered name of the owning type
        """
        self.naming = naming
        self.collector = collector
        self.parent = naming.model
        self.parent_name = parent_name if parent_name is not None else naming.type(naming.model.id)
        self._registry_names: Optional[Set[str]] = None
        self._inlining: Set[str] = set()

    def render_type(self, model: CommonModel, original_field_name: str, required: bool) -> str:
        """
        Render the type of a field, wrapping it in ``Option`` when not required.

        Args:
            model: Field model
            original_field_name: Field name as declared in the schema
            required: Whether the field is in the owner's required set
        """
        if model.ref is not None:
            field_type = self.to_rust_type(REF_KIND, model, original_field_name)
        else:
            field_type = self.to_rust_type(self._type_key(model), model, original_field_name)
        if required:
            return field_type
        return f"Option<{field_type}>"

    def to_rust_type(
        self,
        kind: Union[str, List[str], FieldKind, None],
        model: CommonModel,
        original_field_name: str,
    ) -> str:
        """Map a single type key onto a Rust type expression."""
        if kind == REF_KIND:
            return self.ref_to_rust_type(model, original_field_name)

        if isinstance(kind, FieldKind):
            return self._map_property_map(model, original_field_name)

        if self._is_named(model):
            return self._named_reference(model.id)

        if isinstance(kind, str) and kind in RUST_SCALAR_TYPES:
            return RUST_SCALAR_TYPES[kind]

        if kind == "array":
            return self._map_array_type(model, original_field_name)

        if kind == "object":
            return self._map_object_type(model, original_field_name)

        if isinstance(kind, list) and (len(set(kind)) > 1 or model.has_ref_members()):
            self.collector.warn(unstable_polymorphic_warning(original_field_name))
        return self._fallback_type(original_field_name)

    def ref_to_rust_type(self, model: CommonModel, original_field_name: str) -> str:
        """
        Boxed, crate-qualified reference to a registered model.

        Registered scalars and arrays have no declaration of their own, so
        their shape is mapped in place instead.
        """
        identifier = self.naming.input_model.resolve_ref(model.ref)
        target = self.naming.input_model.get(identifier)
        if (
            target is not None
            and extract_kind(target) not in NAMED_KINDS
            and identifier not in self._inlining
        ):
            self._inlining.add(identifier)
            try:
                return self.render_type(target, original_field_name, True)
            finally:
                self._inlining.discard(identifier)
        return self._named_reference(identifier)

    def _named_reference(self, identifier: str) -> str:
        name = self.naming.type(identifier)
        self.collector.add_dependency(name)
        return f"Box<crate::{name}>"

    def _map_array_type(self, model: CommonModel, original_field_name: str) -> str:
        """Uniform arrays become Vec<T>, heterogeneous ones tuple structs."""
        if isinstance(model.items, CommonModel):
            inner_type = self.render_type(model.items, original_field_name, True)
            return f"Vec<{inner_type}>"

        if isinstance(model.items, list):
            tuple_name = self.collector.names.claim(
                self.name_tuple_type(original_field_name),
                RustDependencyType.TUPLE,
                model,
                self.parent_name,
            )
            self.collector.add_module_dependency(
                RustDependency(
                    type=RustDependencyType.TUPLE,
                    original_field_name=original_field_name,
                    field_name=tuple_name,
                    field=model,
                    parent=self.parent,
                )
            )
            self.collector.add_dependency(tuple_name)
            return f"Box<{tuple_name}>"

        return self._fallback_type(original_field_name)

    def _map_object_type(
        self,
        model: CommonModel,
        original_field_name: str,
        struct_name: Optional[str] = None,
    ) -> str:
        """Anonymous objects become a synthetic struct in the same module."""
        name = struct_name or self.name_anonymous_struct(original_field_name)
        if not name:
            return self._fallback_type(original_field_name)
        name = self.collector.names.claim(
            name, RustDependencyType.STRUCT, model, self.parent_name
        )
        self.collector.add_module_dependency(
            RustDependency(
                type=RustDependencyType.STRUCT,
                original_field_name=original_field_name,
                field_name=name,
                field=model,
                parent=self.parent,
            )
        )
        self.collector.add_dependency(name)
        return f"Box<{name}>"

    def _map_property_map(self, model: CommonModel, original_field_name: str) -> str:
        """Additional/pattern properties become an optional string-keyed map."""
        if model.ref is not None or model.single_type() is not None:
            if self._type_key(model) == "object" and not self._is_named(model):
                struct_name = self.naming.additional_property_type(self.parent) or None
                inner_type = self._map_object_type(model, original_field_name, struct_name)
            else:
                inner_type = self.render_type(model, original_field_name, True)
            return f"Option<{HASHMAP_TYPE}<String, {inner_type}>>"

        self.collector.warn(unstable_field_warning(original_field_name))
        return f"Option<{HASHMAP_TYPE}<String, {DYNAMIC_VALUE_TYPE}>>"

    def _fallback_type(self, original_field_name: str) -> str:
        self.collector.warn(unstable_field_warning(original_field_name))
        return DYNAMIC_VALUE_TYPE

    def _type_key(self, model: CommonModel) -> Union[str, List[str], None]:
        """The dispatch key for a model without a ``$ref``."""
        if model.has_ref_members():
            return model.type
        single = model.single_type()
        if single is not None:
            return single
        if model.type is None and model.properties:
            return "object"
        return model.type

    def _is_named(self, model: CommonModel) -> bool:
        """Whether the node is rendered as its own registered declaration."""
        if model.id is None or model is self.parent:
            return False
        registered = self.naming.input_model.get(model.id)
        return registered is not None and extract_kind(registered) in NAMED_KINDS

    def name_tuple_type(self, original_field_name: str) -> str:
        """``{Owner}{Field}`` name for a tuple struct."""
        return f"{self.parent_name}{self.naming.type(original_field_name)}"

    def name_anonymous_struct(self, original_field_name: str) -> str:
        """
        Name for an anonymous struct, derived from its field name.

        Falls back to ``{Owner}{Field}`` when the plain name would clash with
        the owner or with a registered model.
        """
        name = self.naming.type(original_field_name)
        if name and (name == self.parent_name or name in self.registry_names()):
            name = f"{self.parent_name}{name}"
        return name

    def registry_names(self) -> Set[str]:
        if self._registry_names is None:
            self._registry_names = {
                self.naming.type(identifier) for identifier in self.naming.input_model
            }
        return self._registry_names
