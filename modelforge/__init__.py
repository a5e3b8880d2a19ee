"""
modelforge - generate serde-ready Rust models from JSON Schema documents.
"""

__version__ = "0.1.0"
