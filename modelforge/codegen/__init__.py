"""
modelforge code generation module.

Turns an input model registry into source code for a target language.
"""

from typing import Any, Dict, Optional, Union

from .core.config import ConfigManager, GeneratorConfig, load_config
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.model import CommonModel, InputModel
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_languages,
)


def generate_from_document(
    document: Dict[str, Any],
    language: str = "rust",
    config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None,
) -> GenerationResult:
    """
    Generate code for every named model in a schema document.

    Args:
        document: Parsed schema document
        language: Target language name or alias
        config: Generator configuration object or overrides

    Returns:
        GenerationResult with one output per rendered model
    """
    generator = get_generator(language, config)
    return generate_code(generator, document)


__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "CommonModel",
    "InputModel",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "generate_code",
    "generate_from_document",
    "get_generator",
    "get_registry",
    "list_supported_languages",
]
