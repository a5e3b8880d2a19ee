"""
Renderer for tuple structs backing heterogeneous arrays.
"""

from typing import List

from ....core.model import CommonModel
from ....core.renderer import Preset
from .base import RustRenderer


class TupleRenderer(RustRenderer):
    """
    Renders ``pub struct Name(T1, T2, ..);`` for one array field.

    Slots are always required; the owning field decides optionality.
    """

    def __init__(self, *args, parent: CommonModel, original_field_name: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.parent = parent
        self.original_field_name = original_field_name

    def default_self(self) -> str:
        description = None
        if self.add_comments:
            description = (
                f"{self.name} represents field {self.original_field_name} "
                f"from {self.parent.id} model."
            )
        return self.render_template(
            "tuple.rs.j2",
            name=self.name,
            description=description,
            slots=self.render_slot_types(),
        )

    def render_slot_types(self) -> List[str]:
        items = self.model.items if isinstance(self.model.items, list) else []
        return [
            self.render_type(item, f"{self.original_field_name}_{index}", True)
            for index, item in enumerate(items)
        ]


def _self(renderer: TupleRenderer, **kwargs) -> str:
    return renderer.default_self()


RUST_DEFAULT_TUPLE_PRESET: Preset = {
    "self": _self,
}
