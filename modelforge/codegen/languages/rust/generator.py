"""
Rust code generator implementation.

Generates serde-annotated Rust structs, enums and tuple structs from an
input model registry, one module per top-level model.
"""

import json
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Set, Union

from ....logging_config import get_logger
from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.model import CommonModel, InputModel, ModelKind, extract_kind
from ...core.output import OutputModel
from ...core.renderer import Preset, merge_presets
from .constants import is_reserved_rust_keyword, rust_string_literal
from .naming import DEFAULT_NAMING_CONVENTION, RustNaming, RustNamingConvention
from .output import RustRenderOutput
from .renderers import (
    RUST_DEFAULT_PRESETS,
    EnumRenderer,
    PackageRenderer,
    StructRenderer,
    TupleRenderer,
)
from .types import RustDependency, RustDependencyType, SyntheticTypeNames

logger = get_logger(__name__)

MANIFEST_FILE_NAME = "Cargo.toml"
LIB_FILE_NAME = "src/lib.rs"


def _toml_string(value: Any) -> str:
    return json.dumps(str(value), ensure_ascii=False)


class RustGenerator(CodeGenerator):
    """Code generator for Rust models with serde annotations."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        naming_convention: Optional[RustNamingConvention] = None,
        presets: Optional[Sequence[Dict[str, Preset]]] = None,
        reserved_keyword_callback: Optional[Callable[[str], bool]] = None,
    ):
        """
        Args:
            config: Generator configuration
            naming_convention: Replacement naming functions
            presets: Extra presets keyed by renderer kind, applied in order
            reserved_keyword_callback: Predicate for words that must be prefixed
        """
        super().__init__(config)
        self.naming_convention = naming_convention or DEFAULT_NAMING_CONVENTION
        self.presets = list(presets or [])
        self.reserved_keyword_callback = reserved_keyword_callback or is_reserved_rust_keyword

    @property
    def language_name(self) -> str:
        return "rust"

    @property
    def file_extension(self) -> str:
        return ".rs"

    def get_template_directory(self) -> Optional[Path]:
        """Return the Rust templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    def get_template_filters(self) -> Dict[str, Any]:
        return {"rust_string": rust_string_literal, "toml_string": _toml_string}

    def reserved_rust_keyword(self, word: str) -> bool:
        return self.reserved_keyword_callback(word)

    def _presets(self, kind: str) -> List[Preset]:
        return merge_presets(
            RUST_DEFAULT_PRESETS[kind], [preset.get(kind) for preset in self.presets]
        )

    def _naming(self, model: CommonModel, input_model: InputModel) -> RustNaming:
        return RustNaming(
            convention=self.naming_convention,
            model=model,
            input_model=input_model,
            reserved_keyword_callback=self.reserved_keyword_callback,
        )

    def render(
        self,
        model: CommonModel,
        input_model: InputModel,
        names: Optional[SyntheticTypeNames] = None,
    ) -> RustRenderOutput:
        """Dispatch a model to the renderer for its kind."""
        kind = extract_kind(model)
        if kind == ModelKind.OBJECT:
            return self.render_struct(model, input_model, names=names)
        if kind in (ModelKind.ENUM, ModelKind.UNION):
            return self.render_enum(model, input_model, names=names)

        message = f"Rust generator cannot render {model.id} of kind {kind.value}, skipping it"
        logger.warning(message)
        return RustRenderOutput(result="", rendered_name="", warnings=[message])

    def render_struct(
        self,
        model: CommonModel,
        input_model: InputModel,
        name: Optional[str] = None,
        names: Optional[SyntheticTypeNames] = None,
    ) -> RustRenderOutput:
        renderer = StructRenderer(
            self.config,
            self._presets("struct"),
            model,
            input_model,
            self._naming(model, input_model),
            self.template_engine,
            name=name,
            names=names,
        )
        return renderer.render()

    def render_enum(
        self,
        model: CommonModel,
        input_model: InputModel,
        names: Optional[SyntheticTypeNames] = None,
    ) -> RustRenderOutput:
        renderer = EnumRenderer(
            self.config,
            self._presets("enum"),
            model,
            input_model,
            self._naming(model, input_model),
            self.template_engine,
            names=names,
        )
        return renderer.render()

    def render_tuple(
        self,
        dependency: RustDependency,
        input_model: InputModel,
        names: Optional[SyntheticTypeNames] = None,
    ) -> RustRenderOutput:
        renderer = TupleRenderer(
            self.config,
            self._presets("tuple"),
            dependency.field,
            input_model,
            self._naming(dependency.field, input_model),
            self.template_engine,
            name=dependency.field_name,
            parent=dependency.parent,
            original_field_name=dependency.original_field_name,
            names=names,
        )
        return renderer.render()

    def render_dependency(
        self,
        dependency: RustDependency,
        input_model: InputModel,
        names: Optional[SyntheticTypeNames] = None,
    ) -> RustRenderOutput:
        if dependency.type == RustDependencyType.TUPLE:
            return self.render_tuple(dependency, input_model, names=names)
        return self.render_struct(
            dependency.field, input_model, name=dependency.field_name, names=names
        )

    def render_dependencies(
        self,
        dependencies: List[RustDependency],
        input_model: InputModel,
        emitted: Set[str],
        blocks: List[str],
        warnings: List[str],
        names: Optional[SyntheticTypeNames] = None,
    ) -> None:
        """
        Render synthetic dependencies depth-first into ``blocks``.

        A dependency's own dependencies land before it, so the module reads
        without forward references. ``emitted`` holds names already in the
        module and is updated in place. ``names`` is the module's synthetic
        type name table, so a shape never reuses a name claimed by another.
        """
        for dependency in dependencies:
            if dependency.field_name in emitted:
                continue
            emitted.add(dependency.field_name)
            logger.debug(
                "Rendering %s dependency %s", dependency.type.value, dependency.field_name
            )
            rendered = self.render_dependency(dependency, input_model, names)
            warnings.extend(rendered.warnings)
            self.render_dependencies(
                rendered.rust_module_dependencies, input_model, emitted, blocks, warnings, names
            )
            blocks.append(rendered.result)

    def render_complete_model(
        self, model: CommonModel, input_model: InputModel
    ) -> RustRenderOutput:
        """Render a model and every synthetic type it needs as one module."""
        names = SyntheticTypeNames()
        primary = self.render(model, input_model, names)
        if not primary.rendered_name:
            return primary

        blocks: List[str] = []
        warnings = list(primary.warnings)
        self.render_dependencies(
            primary.rust_module_dependencies,
            input_model,
            {primary.rendered_name},
            blocks,
            warnings,
            names,
        )
        blocks.append(primary.result)

        return RustRenderOutput(
            result=self.format_code("\n\n".join(block for block in blocks if block)),
            rendered_name=primary.rendered_name,
            dependencies=primary.dependencies,
            file_name=primary.file_name,
            warnings=list(dict.fromkeys(warnings)),
            rust_module_dependencies=primary.rust_module_dependencies,
        )

    def generate_complete_models(
        self, input_data: Union[InputModel, Dict[str, Any]]
    ) -> List[OutputModel]:
        """
        Render one module per registry entry, dropping unrenderable ones.

        Entries are independent, so they fan out over a thread pool when
        ``max_workers`` allows; output order follows the registry.
        """
        input_model = self.process(input_data)
        models = list(input_model.values())

        def render_one(model: CommonModel) -> RustRenderOutput:
            return self.render_complete_model(model, input_model)

        if self.config.max_workers > 1 and len(models) > 1:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as executor:
                rendered = list(executor.map(render_one, models))
        else:
            rendered = [render_one(model) for model in models]

        outputs = []
        for model, output in zip(models, rendered):
            if not output.rendered_name:
                logger.info("Skipping unrenderable model %s", model.id)
                continue
            outputs.append(
                OutputModel(
                    result=output.result,
                    model_name=output.rendered_name,
                    file_name=output.file_name,
                    model=model,
                    input_model=input_model,
                    dependencies=output.dependencies,
                    warnings=output.warnings,
                )
            )

        logger.info("Rendered %d of %d models", len(outputs), len(models))
        return outputs

    def _package_renderer(self) -> PackageRenderer:
        return PackageRenderer(
            self.config,
            self._presets("package"),
            self._naming(CommonModel(), InputModel()),
            self.template_engine,
        )

    def render_manifest(self) -> RustRenderOutput:
        """Render the supporting Cargo.toml."""
        result = self._package_renderer().run_preset("manifest")
        return RustRenderOutput(
            result=result, rendered_name=MANIFEST_FILE_NAME, file_name=MANIFEST_FILE_NAME
        )

    def render_lib(self, model_names: List[str]) -> RustRenderOutput:
        """Render src/lib.rs declaring and re-exporting every model module."""
        result = self._package_renderer().run_preset("lib", model_names=model_names)
        return RustRenderOutput(
            result=result, rendered_name=LIB_FILE_NAME, file_name=LIB_FILE_NAME
        )


def create_rust_generator(config: Optional[Dict[str, Any]] = None, **kwargs) -> RustGenerator:
    """Create a Rust generator, merging overrides over the default configuration."""
    return RustGenerator(load_config("rust", custom_config=config), **kwargs)
