"""Utility functions for loading schema documents.

This module provides functions for loading JSON/YAML schema documents from
files and URLs with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests
import yaml

from .logging_config import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class DocumentLoadError(Exception):
    """Custom exception for document loading errors."""

    pass


def load_document_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load a schema document from a local file.

    JSON is the default format; files ending in ``.yaml``/``.yml`` are parsed
    as YAML.

    Args:
        file_path: Path to the document.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        FileNotFoundError: If file doesn't exist.
        DocumentLoadError: If file cannot be read or parsed.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load document from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()
    if suffix not in YAML_SUFFIXES and suffix != ".json":
        logger.warning("Unrecognized extension, parsing as JSON: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            if suffix in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise DocumentLoadError(f"Invalid JSON in file {file_path}: {e}") from e
    except yaml.YAMLError as e:
        logger.error("Invalid YAML in file %s: %s", file_path, e)
        raise DocumentLoadError(f"Invalid YAML in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise DocumentLoadError(f"Error reading file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise DocumentLoadError(f"Document must be an object: {file_path}")

    logger.info("Loaded document from %s", file_path)
    return str(file_path), data


def load_document_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load a JSON schema document from a URL.

    Args:
        url: URL to fetch the document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed document).

    Raises:
        DocumentLoadError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load document from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise DocumentLoadError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise DocumentLoadError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise DocumentLoadError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise DocumentLoadError(f"Request error for URL {url}: {e}") from e
    except ValueError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise DocumentLoadError(f"Invalid JSON response from URL {url}: {e}") from e

    if not isinstance(data, dict):
        raise DocumentLoadError(f"Document must be an object: {url}")

    logger.info("Loaded document from %s", url)
    return url, data


def load_document(source: str | Path, timeout: int = 30) -> tuple[str, Any]:
    """Load a schema document from either a file path or an http(s) URL.

    Args:
        source: Local path or URL.
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, parsed document).
    """
    if isinstance(source, str) and urlparse(source).scheme in ("http", "https"):
        return load_document_from_url(source, timeout)
    return load_document_from_file(source)
