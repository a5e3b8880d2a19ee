"""
Renderer for the crate support files (Cargo.toml and src/lib.rs).
"""

from typing import List

from ....core.model import CommonModel, InputModel
from ....core.renderer import Preset
from .base import RustRenderer


class PackageRenderer(RustRenderer):
    """Renders crate-level files; it has no model of its own."""

    def __init__(self, options, presets, naming, templates):
        super().__init__(
            options, presets, CommonModel(), InputModel(), naming, templates, name=""
        )

    def render_manifest(self) -> str:
        options = self.options
        return self.render_template(
            "Cargo.toml.j2",
            package_name=options.package_name,
            package_version=options.package_version,
            authors=options.authors,
            homepage=options.homepage,
            repository=options.repository,
            license=options.license,
            description=options.description,
            edition=options.edition,
            features=options.package_features,
        )

    def render_lib(self, model_names: List[str]) -> str:
        modules = []
        for model_name in model_names:
            module = self.naming.module(model_name)
            if module and module not in modules:
                modules.append(module)
        return self.render_template("lib.rs.j2", modules=modules)


def _manifest(renderer: PackageRenderer, **kwargs) -> str:
    return renderer.render_manifest()


def _lib(renderer: PackageRenderer, model_names: List[str], **kwargs) -> str:
    return renderer.render_lib(model_names)


RUST_DEFAULT_PACKAGE_PRESET: Preset = {
    "manifest": _manifest,
    "lib": _lib,
}
