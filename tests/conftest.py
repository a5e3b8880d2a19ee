"""
Pytest configuration and shared fixtures for modelforge tests.
"""

import logging

import pytest

from modelforge.codegen.core.config import GeneratorConfig
from modelforge.codegen.languages.rust import RustFileGenerator, RustGenerator
from modelforge.logging_config import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo setup_logging so caplog keeps seeing modelforge records."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def config():
    return GeneratorConfig()


@pytest.fixture
def generator(config):
    """Rust generator with default settings."""
    return RustGenerator(config)


@pytest.fixture
def bare_generator():
    """Rust generator without initializers or Default impls."""
    return RustGenerator(GeneratorConfig(render_initializer=False, render_defaults=False))


@pytest.fixture
def file_generator(config):
    return RustFileGenerator(config)


@pytest.fixture
def address_document():
    """Object schema touching every struct feature."""
    return {
        "$id": "_address",
        "type": "object",
        "properties": {
            "street_name": {"type": "string"},
            "city": {"type": "string", "description": "City description"},
            "state": {"type": "string"},
            "house_number": {"type": "number"},
            "array_type": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["street_name", "city", "state", "house_number", "array_type"],
        "additionalProperties": {"type": "string"},
        "patternProperties": {"^S(.?*)test&": {"type": "string"}},
    }
