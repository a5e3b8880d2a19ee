"""
Rust render output with the synthetic types it still needs.
"""

from dataclasses import dataclass, field
from typing import List

from ...core.output import RenderOutput
from .types import RustDependency


@dataclass
class RustRenderOutput(RenderOutput):
    """RenderOutput plus the tuple and anonymous struct types discovered."""

    rust_module_dependencies: List[RustDependency] = field(default_factory=list)
