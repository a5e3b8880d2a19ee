"""
Core code generation components.

Provides the input model, base classes and utilities used by all
language generators.
"""

from .config import ConfigError, ConfigManager, GeneratorConfig, load_config
from .generator import (
    CodeGenerator,
    FileWriteError,
    GenerationResult,
    GeneratorError,
    generate_code,
)
from .model import CommonModel, InputModel, ModelKind, extract_kind
from .naming import NameSanitizer
from .output import OutputModel, RenderOutput
from .renderer import Preset, PresetRenderer, merge_presets
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "FileWriteError",
    "GenerationResult",
    "generate_code",
    # Input model
    "CommonModel",
    "InputModel",
    "ModelKind",
    "extract_kind",
    # Outputs
    "RenderOutput",
    "OutputModel",
    # Presets
    "Preset",
    "PresetRenderer",
    "merge_presets",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
