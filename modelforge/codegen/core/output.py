"""
Render output containers shared by all generators.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .model import CommonModel, InputModel


@dataclass
class RenderOutput:
    """Result of rendering a single model declaration."""

    result: str
    rendered_name: str
    dependencies: List[str] = field(default_factory=list)
    file_name: str = ""
    warnings: List[str] = field(default_factory=list)


@dataclass
class OutputModel:
    """A complete, file-ready unit produced for one top-level model."""

    result: str
    model_name: str
    file_name: str
    model: Optional[CommonModel] = None
    input_model: Optional[InputModel] = None
    dependencies: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
