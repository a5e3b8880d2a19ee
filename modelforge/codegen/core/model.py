"""
Core model representation for code generation.

Holds the language-neutral input model that renderers consume: one
``CommonModel`` per schema-derived type and an ``InputModel`` registry
keyed by identifier. Nodes may reference each other cyclically through
``$ref``; the registry owns every named node.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Union

from ...logging_config import get_logger

logger = get_logger(__name__)

# Keywords whose members collapse into a union of their types
UNION_KEYWORDS = ("oneOf", "anyOf")

# Locations in a document where named schemas are collected from
DEFINITION_PATHS = (
    ("definitions",),
    ("$defs",),
    ("components", "schemas"),
)


class ModelKind(Enum):
    """Coarse category of a model node."""

    OBJECT = "object"
    ARRAY = "array"
    ENUM = "enum"
    UNION = "union"
    PRIMITIVE = "primitive"


@dataclass
class CommonModel:
    """A single schema-derived type description."""

    id: Optional[str] = None
    ref: Optional[str] = None
    type: Union[str, List[str], None] = None
    enum: Optional[List[Any]] = None
    items: Union["CommonModel", List["CommonModel"], None] = None
    properties: Optional[Dict[str, "CommonModel"]] = None
    additional_properties: Optional["CommonModel"] = None
    pattern_properties: Optional[Dict[str, "CommonModel"]] = None
    union: Optional[List["CommonModel"]] = None
    required: List[str] = field(default_factory=list)
    original_input: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Any) -> "CommonModel":
        """
        Convert a raw JSON-Schema-like dictionary into a model tree.

        Args:
            raw: Schema dictionary (``True`` is treated as "any value")

        Returns:
            CommonModel mirroring the raw schema
        """
        if raw is True or raw is None:
            return cls(original_input={})
        if not isinstance(raw, dict):
            raise TypeError(f"Expected schema object, got {type(raw).__name__}")

        model = cls(
            id=raw.get("$id"),
            ref=raw.get("$ref"),
            type=raw.get("type"),
            enum=list(raw["enum"]) if isinstance(raw.get("enum"), list) else None,
            required=list(raw.get("required") or []),
            original_input=raw,
        )

        items = raw.get("items")
        if isinstance(items, list):
            model.items = [cls.from_dict(item) for item in items]
        elif isinstance(items, dict):
            model.items = cls.from_dict(items)

        properties = raw.get("properties")
        if isinstance(properties, dict):
            model.properties = {
                name: cls.from_dict(prop)
                for name, prop in properties.items()
                if isinstance(prop, (dict, bool))
            }

        additional = raw.get("additionalProperties")
        if additional is True or isinstance(additional, dict):
            model.additional_properties = cls.from_dict(additional)

        patterns = raw.get("patternProperties")
        if isinstance(patterns, dict):
            model.pattern_properties = {
                pattern: cls.from_dict(schema) for pattern, schema in patterns.items()
            }

        # Polymorphic members collapse into a list of types; members that
        # are references are kept as union variants of their own
        for keyword in UNION_KEYWORDS:
            members = raw.get(keyword)
            if isinstance(members, list) and model.type is None:
                model.union = [
                    cls.from_dict(member) for member in members if isinstance(member, dict)
                ]
                types: List[str] = []
                for member in members:
                    member_type = member.get("type") if isinstance(member, dict) else None
                    member_types = (
                        member_type if isinstance(member_type, list) else [member_type]
                    )
                    for value in member_types:
                        if isinstance(value, str) and value not in types:
                            types.append(value)
                model.type = types

        return model

    def is_required(self, property_name: str) -> bool:
        """Check whether a property name is in the required set."""
        return property_name in self.required

    def has_ref_members(self) -> bool:
        """Check whether any oneOf/anyOf member is a reference."""
        return any(member.ref is not None for member in self.union or [])

    def is_union(self) -> bool:
        """Check whether the node carries more than one distinct type."""
        if self.has_ref_members():
            return True
        return isinstance(self.type, list) and len(set(self.type)) > 1

    def single_type(self) -> Optional[str]:
        """Return the node's type if it is a single one, otherwise None."""
        if isinstance(self.type, str):
            return self.type
        if isinstance(self.type, list) and len(set(self.type)) == 1:
            return self.type[0]
        return None


def extract_kind(model: CommonModel) -> ModelKind:
    """Determine the coarse kind of a model node."""
    if model.has_ref_members():
        return ModelKind.UNION
    single = model.single_type()
    if single == "object":
        return ModelKind.OBJECT
    if single == "array":
        return ModelKind.ARRAY
    if model.enum is not None:
        return ModelKind.ENUM
    if model.is_union():
        return ModelKind.UNION
    return ModelKind.PRIMITIVE


class InputModel:
    """Read-only registry of every named model in one document."""

    def __init__(
        self,
        models: Optional[Dict[str, CommonModel]] = None,
        original_input: Optional[Dict[str, Any]] = None,
        aliases: Optional[Dict[str, str]] = None,
    ):
        self._models: Dict[str, CommonModel] = dict(models or {})
        self._aliases: Dict[str, str] = dict(aliases or {})
        self.original_input = original_input or {}

    def get(self, identifier: Optional[str]) -> Optional[CommonModel]:
        if identifier is None:
            return None
        return self._models.get(identifier)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._models

    def __iter__(self) -> Iterator[str]:
        return iter(self._models)

    def __len__(self) -> int:
        return len(self._models)

    def values(self):
        return self._models.values()

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "InputModel":
        """
        Build a registry from a schema document.

        Every node carrying a ``$id`` is registered, including the root,
        nested properties, array items and the usual definition sections.
        This is a convenience for already-normalized documents, not a full
        normalization pipeline.

        Args:
            document: Parsed JSON schema document

        Returns:
            InputModel with all discovered named models
        """
        models: Dict[str, CommonModel] = {}
        aliases: Dict[str, str] = {}

        def register(model: CommonModel) -> None:
            if model.id is not None and model.id not in models:
                models[model.id] = model
            for child in _children(model):
                register(child)

        # Named definitions first so pointer references can be aliased
        for path in DEFINITION_PATHS:
            section: Any = document
            for key in path:
                section = section.get(key) if isinstance(section, dict) else None
            if not isinstance(section, dict):
                continue
            for name, raw in section.items():
                if not isinstance(raw, dict):
                    continue
                definition = CommonModel.from_dict(raw)
                if definition.id is None:
                    definition.id = name
                aliases["#/" + "/".join(path + (name,))] = definition.id
                register(definition)

        def scan(raw: Any) -> None:
            if isinstance(raw, dict):
                if "$id" in raw:
                    register(CommonModel.from_dict(raw))
                    return
                for value in raw.values():
                    scan(value)
            elif isinstance(raw, list):
                for value in raw:
                    scan(value)

        scan(document)

        logger.debug("Built input model with %d named models", len(models))
        return cls(models, document, aliases)

    def resolve_ref(self, ref: str) -> str:
        """
        Resolve a ``$ref`` to the identifier of the model it points at.

        Unknown references resolve to themselves.
        """
        if ref in self._models:
            return ref
        return self._aliases.get(ref, ref)


def _children(model: CommonModel) -> List[CommonModel]:
    """Collect the direct child nodes of a model."""
    children: List[CommonModel] = []
    if model.properties:
        children.extend(model.properties.values())
    if isinstance(model.items, list):
        children.extend(model.items)
    elif model.items is not None:
        children.append(model.items)
    if model.additional_properties is not None:
        children.append(model.additional_properties)
    if model.pattern_properties:
        children.extend(model.pattern_properties.values())
    if model.union:
        children.extend(model.union)
    return children
