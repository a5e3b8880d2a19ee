"""
Rust code generator.

Renders serde-annotated structs, enums and tuple structs, plus the
Cargo.toml and src/lib.rs needed to build them as a crate.
"""

from .constants import RESERVED_RUST_KEYWORDS, is_reserved_rust_keyword
from .file_generator import RustFileGenerator
from .generator import RustGenerator, create_rust_generator
from .naming import (
    DEFAULT_NAMING_CONVENTION,
    NamingContext,
    RustNaming,
    RustNamingConvention,
)
from .output import RustRenderOutput
from .renderers import RUST_DEFAULT_PRESETS
from .types import RustDependency, RustDependencyType, RustTypeMapper, SyntheticTypeNames

__all__ = [
    "RustGenerator",
    "RustFileGenerator",
    "create_rust_generator",
    "RustNamingConvention",
    "RustNaming",
    "NamingContext",
    "DEFAULT_NAMING_CONVENTION",
    "RustRenderOutput",
    "RustDependency",
    "RustDependencyType",
    "RustTypeMapper",
    "SyntheticTypeNames",
    "RUST_DEFAULT_PRESETS",
    "RESERVED_RUST_KEYWORDS",
    "is_reserved_rust_keyword",
]
