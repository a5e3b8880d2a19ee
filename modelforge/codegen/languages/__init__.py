"""
Language-specific code generators.
"""

from .rust import RustFileGenerator, RustGenerator, create_rust_generator

__all__ = ["RustGenerator", "RustFileGenerator", "create_rust_generator"]
