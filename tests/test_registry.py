"""
Tests for the generator registry.
"""

import pytest

from modelforge.codegen.core.config import GeneratorConfig
from modelforge.codegen.registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    list_supported_languages,
)
from modelforge.codegen.languages.rust import RustFileGenerator, RustGenerator


@pytest.fixture
def registry():
    registry = GeneratorRegistry()
    registry.register("rust", RustFileGenerator, aliases=["rs"])
    return registry


class TestRegistration:
    def test_resolve_alias(self, registry):
        assert registry.resolve("RS") == "rust"
        assert registry.resolve("Rust") == "rust"
        assert type(registry.create_generator("rs")) is RustFileGenerator

    def test_unknown_language(self, registry):
        with pytest.raises(RegistryError, match="Available: rust"):
            registry.resolve("cobol")

    def test_rejects_non_generator(self, registry):
        with pytest.raises(RegistryError):
            registry.register("text", str)

    def test_alias_conflicts(self, registry):
        registry.register("rust2", RustGenerator)
        with pytest.raises(RegistryError, match="conflicts"):
            registry.register("other", RustGenerator, aliases=["rust2"])
        with pytest.raises(RegistryError, match="already points"):
            registry.register("third", RustGenerator, aliases=["rs"])

    def test_existing_registration_is_kept_unless_replaced(self, registry):
        registry.register("rust", RustGenerator)
        assert type(registry.create_generator("rust")) is RustFileGenerator
        registry.register("rust", RustGenerator, replace=True)
        assert type(registry.create_generator("rust")) is RustGenerator

    def test_aliases_for_language(self, registry):
        assert registry.get_aliases_for_language("rust") == ["rs"]
        assert registry.list_languages() == ["rust"]


class TestCreateGenerator:
    def test_default_config(self, registry):
        generator = registry.create_generator("rs")
        assert isinstance(generator, RustFileGenerator)
        assert generator.config.package_name == "modelforge-models"

    def test_config_object_is_used_as_is(self, registry):
        config = GeneratorConfig(indent_size=2)
        assert registry.create_generator("rust", config).config is config

    def test_config_dict(self, registry):
        generator = registry.create_generator("rust", {"edition": "2021"})
        assert generator.config.edition == "2021"

    def test_generator_kwargs(self, registry):
        generator = registry.create_generator(
            "rust", presets=[{"struct": {}}], reserved_keyword_callback=lambda word: False
        )
        assert generator.presets == [{"struct": {}}]
        assert not generator.reserved_rust_keyword("union")

    def test_invalid_config_type(self, registry):
        with pytest.raises(RegistryError, match="Invalid config type"):
            registry.create_generator("rust", 42)

    def test_constructor_failure_is_wrapped(self, registry):
        with pytest.raises(RegistryError, match="Failed to create"):
            registry.create_generator("rust", unexpected=True)


class TestGlobalRegistry:
    def test_rust_is_built_in(self):
        assert "rust" in list_supported_languages()
        assert get_registry().resolve("rs") == "rust"
        assert isinstance(get_generator("rust"), RustFileGenerator)

    def test_language_info(self):
        info = get_registry().get_language_info("rs")
        assert info == {
            "name": "rust",
            "class": "RustFileGenerator",
            "file_extension": ".rs",
            "aliases": ["rs"],
            "module": "modelforge.codegen.languages.rust.file_generator",
        }
