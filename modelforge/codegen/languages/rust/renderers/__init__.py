"""Per-kind Rust renderers and their default presets."""

from .base import RustRenderer
from .enum_renderer import RUST_DEFAULT_ENUM_PRESET, EnumRenderer, EnumVariant
from .package_renderer import RUST_DEFAULT_PACKAGE_PRESET, PackageRenderer
from .struct_renderer import RUST_DEFAULT_STRUCT_PRESET, StructField, StructRenderer
from .tuple_renderer import RUST_DEFAULT_TUPLE_PRESET, TupleRenderer

RUST_DEFAULT_PRESETS = {
    "struct": RUST_DEFAULT_STRUCT_PRESET,
    "enum": RUST_DEFAULT_ENUM_PRESET,
    "tuple": RUST_DEFAULT_TUPLE_PRESET,
    "package": RUST_DEFAULT_PACKAGE_PRESET,
}

__all__ = [
    "RustRenderer",
    "StructRenderer",
    "StructField",
    "EnumRenderer",
    "EnumVariant",
    "TupleRenderer",
    "PackageRenderer",
    "RUST_DEFAULT_STRUCT_PRESET",
    "RUST_DEFAULT_ENUM_PRESET",
    "RUST_DEFAULT_TUPLE_PRESET",
    "RUST_DEFAULT_PACKAGE_PRESET",
    "RUST_DEFAULT_PRESETS",
]
