"""
Preset-driven rendering primitives.

Renderers expose named operations (``self``, ``field_name``, ...) whose
implementations come from a stack of presets. The first preset is the
default behavior; every later preset that defines the same operation is
called with the previous result as ``content``, so callers can wrap or
replace default output without subclassing.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence

from .model import CommonModel, InputModel

Preset = Dict[str, Callable[..., Any]]


class PresetRenderer:
    """Runs preset operations for one model."""

    def __init__(
        self,
        options: Any,
        presets: Sequence[Preset],
        model: CommonModel,
        input_model: InputModel,
    ):
        self.options = options
        self.presets: List[Preset] = list(presets)
        self.model = model
        self.input_model = input_model

    def run_preset(self, name: str, **params: Any) -> Any:
        """
        Run operation ``name`` through every preset that defines it.

        Returns:
            The output of the last preset in the chain, or "" if none ran
        """
        content: Any = None
        for preset in self.presets:
            operation = preset.get(name)
            if operation is None:
                continue
            content = operation(
                renderer=self,
                model=self.model,
                input_model=self.input_model,
                options=self.options,
                content=content,
                **params,
            )
        return "" if content is None else content

    def run_self_preset(self) -> str:
        return self.run_preset("self")


def merge_presets(default: Preset, extra: Optional[Sequence[Preset]] = None) -> List[Preset]:
    """Build the preset chain for one renderer kind, default first."""
    return [default] + [preset for preset in (extra or []) if preset]
