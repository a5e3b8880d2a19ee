"""
Shared plumbing for the Rust renderers.

Each renderer owns its dependency collector and type mapper. Naming,
templates and the module's synthetic type names are injected services
shared across a render pass.
"""

import re
from typing import Any, Optional, Sequence

from ....core.model import CommonModel, InputModel
from ....core.renderer import Preset, PresetRenderer
from ....core.templates import TemplateEngine
from ..naming import RustNaming
from ..output import RustRenderOutput
from ..types import DependencyCollector, RustTypeMapper, SyntheticTypeNames

_BOX_PATTERN = re.compile(r"^Box<(.*)>$")


class RustRenderer(PresetRenderer):
    """Base for the struct, enum and tuple renderers."""

    def __init__(
        self,
        options: Any,
        presets: Sequence[Preset],
        model: CommonModel,
        input_model: InputModel,
        naming: RustNaming,
        templates: TemplateEngine,
        name: Optional[str] = None,
        names: Optional[SyntheticTypeNames] = None,
    ):
        super().__init__(options, presets, model, input_model)
        self.naming = naming
        self.templates = templates
        self.name = name if name is not None else naming.type(model.id)
        self.collector = DependencyCollector(names)
        self.collector.names.reserve(self.name)
        self.type_mapper = RustTypeMapper(naming, self.collector, self.name)

    @property
    def indent_size(self) -> int:
        return getattr(self.options, "indent_size", 4)

    @property
    def add_comments(self) -> bool:
        return getattr(self.options, "add_comments", True)

    def render_template(self, template_name: str, **context: Any) -> str:
        context.setdefault("indent_size", self.indent_size)
        return self.templates.render_template(template_name, context).strip()

    def render_type(self, field: CommonModel, original_field_name: str, required: bool) -> str:
        return self.type_mapper.render_type(field, original_field_name, required)

    def is_boxed(self, rust_type: str) -> bool:
        return _BOX_PATTERN.match(rust_type) is not None

    def unbox(self, rust_type: str) -> str:
        """Strip one outer ``Box<..>`` from a type expression."""
        match = _BOX_PATTERN.match(rust_type)
        return match.group(1) if match else rust_type

    def render(self) -> RustRenderOutput:
        """Run the ``self`` operation and package the result."""
        result = self.run_self_preset()
        return RustRenderOutput(
            result=result,
            rendered_name=self.name,
            dependencies=list(self.collector.dependencies),
            file_name=self.naming.module_file(self.name) if self.name else "",
            warnings=list(self.collector.warnings),
            rust_module_dependencies=list(self.collector.module_dependencies),
        )
