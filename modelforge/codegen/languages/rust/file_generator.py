"""
Write generated Rust modules and crate support files to disk.
"""

from pathlib import Path
from typing import Any, Dict, List, Union

from ....logging_config import get_logger
from ...core.generator import FileWriteError
from ...core.model import InputModel
from ...core.output import OutputModel
from .generator import RustGenerator

logger = get_logger(__name__)


class RustFileGenerator(RustGenerator):
    """RustGenerator that writes a crate layout to an output directory."""

    def generate_to_files(
        self,
        input_data: Union[InputModel, Dict[str, Any]],
        output_directory: Union[str, Path],
    ) -> List[OutputModel]:
        """
        Render every model and write one module file per model.

        Support files (Cargo.toml, src/lib.rs) follow when
        ``render_supporting_files`` is enabled.

        Raises:
            FileWriteError: If any file cannot be written; later writes are skipped
        """
        output_directory = Path(output_directory)
        outputs = [
            output for output in self.generate_complete_models(input_data) if output.model_name
        ]

        for output in outputs:
            self._write_file(output_directory / output.file_name, output.result)

        if self.config.render_supporting_files:
            self.generate_support_files(outputs, output_directory)

        logger.info("Wrote %d models to %s", len(outputs), output_directory)
        return outputs

    def generate_support_files(
        self, outputs: List[OutputModel], output_directory: Union[str, Path]
    ) -> None:
        output_directory = Path(output_directory)
        manifest = self.render_manifest()
        self._write_file(output_directory / manifest.file_name, manifest.result)

        lib = self.render_lib([output.model_name for output in outputs])
        self._write_file(output_directory / lib.file_name, lib.result)

    def _write_file(self, path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content + "\n", encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write %s: %s", path, e)
            raise FileWriteError(path, e) from e
        logger.debug("Wrote %s", path)
