"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ...logging_config import get_logger
from .config import GeneratorConfig
from .model import CommonModel, InputModel
from .output import OutputModel, RenderOutput
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class FileWriteError(GeneratorError):
    """Raised when a generated file cannot be written."""

    def __init__(self, path: Union[str, Path], reason: Union[str, Exception]):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write {self.path}: {reason}")


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())
        for name, func in self.get_template_filters().items():
            self._template_engine.add_filter(name, func)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'rust')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.rs')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    def get_template_filters(self) -> Dict[str, Any]:
        """Return extra template filters for this generator."""
        return {}

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def process(self, input_data: Union[InputModel, Dict[str, Any]]) -> InputModel:
        """
        Turn raw input into an input model registry.

        Already-built registries are returned unchanged.
        """
        if isinstance(input_data, InputModel):
            return input_data
        return InputModel.from_document(input_data)

    @abstractmethod
    def render(self, model: CommonModel, input_model: InputModel) -> RenderOutput:
        """
        Render the declaration of a single model, without its dependencies.

        Args:
            model: Model to render
            input_model: Registry the model belongs to

        Returns:
            RenderOutput for this model only
        """
        pass

    @abstractmethod
    def render_complete_model(
        self, model: CommonModel, input_model: InputModel
    ) -> RenderOutput:
        """
        Render a model together with every synthetic type it depends on.

        Args:
            model: Model to render
            input_model: Registry the model belongs to

        Returns:
            RenderOutput whose text is a self-contained module
        """
        pass

    @abstractmethod
    def generate_complete_models(
        self, input_data: Union[InputModel, Dict[str, Any]]
    ) -> List[OutputModel]:
        """Render one complete output unit per top-level model."""
        pass

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip()


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        outputs: List[OutputModel],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            outputs: Generated output units
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.outputs = outputs
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @property
    def model_names(self) -> List[str]:
        return [output.model_name for output in self.outputs]

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(outputs=[])
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, input_data: Union[InputModel, Dict[str, Any]]
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        input_data: Input model registry or raw schema document

    Returns:
        GenerationResult with outputs, warnings, and metadata
    """
    try:
        input_model = generator.process(input_data)
        outputs = generator.generate_complete_models(input_model)
    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)

    warnings = [warning for output in outputs for warning in output.warnings]
    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "model_count": len(input_model),
        "rendered_count": len(outputs),
        "has_escape_hatches": bool(warnings),
    }
    return GenerationResult(outputs, warnings, metadata)
