"""Utility functions for loading navigation graphs and writing generated sources.

This module provides functions for loading graph JSON from files and URLs
with proper error handling and validation.
"""

import json
from pathlib import Path
from typing import Any, Dict, List
from urllib.parse import urlparse

import requests

from .codegen.core.errors import ModelError
from .codegen.core.model import NavigationGraph, graph_from_dict
from .logging_config import get_logger

logger = get_logger(__name__)


class GraphLoaderError(Exception):
    """Custom exception for navigation graph loading errors."""

    pass


class SourceWriteError(Exception):
    """Generated sources could not be written."""

    pass


def load_json_from_file(file_path: str | Path) -> tuple[str, Any]:
    """Load JSON data from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        FileNotFoundError: If file doesn't exist.
        GraphLoaderError: If file cannot be read or JSON is invalid.
    """
    file_path = Path(file_path)
    logger.debug("Attempting to load JSON from file: %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning("File does not have .json extension: %s", file_path)

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
        logger.info("Successfully loaded JSON from %s", file_path)
        return str(file_path), data
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise GraphLoaderError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise GraphLoaderError(f"Error reading file {file_path}: {e}") from e


def load_json_from_url(url: str, timeout: int = 30) -> tuple[str, Any]:
    """Load JSON data from a URL.

    Args:
        url: URL to fetch JSON from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, parsed JSON data).

    Raises:
        GraphLoaderError: If URL is invalid, request fails, or response isn't valid JSON.
    """
    logger.debug("Attempting to load JSON from URL: %s", url)

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error("Invalid URL format: %s", url)
        raise GraphLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()

        content_type = response.headers.get("content-type", "").lower()
        if "application/json" not in content_type and not url.endswith(".json"):
            logger.warning("URL %s does not have JSON content type: %s", url, content_type)

        data = response.json()
        logger.info("Successfully loaded JSON from %s", url)
        return url, data

    except requests.exceptions.Timeout as e:
        logger.error("Request timeout for URL: %s", url)
        raise GraphLoaderError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error("Connection error for URL %s: %s", url, e)
        raise GraphLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error("HTTP error %s for URL: %s", e.response.status_code, url)
        raise GraphLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.JSONDecodeError as e:
        logger.error("Invalid JSON response from URL %s: %s", url, e)
        raise GraphLoaderError(f"Invalid JSON response from URL {url}: {e}") from e
    except requests.exceptions.RequestException as e:
        logger.error("Request error for URL %s: %s", url, e)
        raise GraphLoaderError(f"Request error for URL {url}: {e}") from e


def load_graph(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
    application_id: str = "",
) -> tuple[str, NavigationGraph]:
    """Load a navigation graph from either a file or URL.

    Args:
        file_path: Path to local graph JSON (mutually exclusive with url).
        url: URL to fetch graph JSON from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).
        application_id: Package for ids that do not name one.

    Returns:
        Tuple of (source description, navigation graph).

    Raises:
        GraphLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise GraphLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise GraphLoaderError("Cannot specify both file_path and url")

    if file_path:
        source, data = load_json_from_file(file_path)
    else:
        source, data = load_json_from_url(url, timeout)

    return source, parse_graph(data, source, application_id)


def parse_graph(
    data: Any, source: str = "<input>", application_id: str = ""
) -> NavigationGraph:
    """Convert loaded JSON into a graph, reporting model errors as load errors."""
    try:
        return graph_from_dict(data, application_id)
    except ModelError as e:
        logger.error("Invalid navigation graph in %s: %s", source, e)
        raise GraphLoaderError(f"Invalid navigation graph in {source}: {e}") from e


def write_sources(sources: Dict[str, str], output_dir: str | Path) -> List[Path]:
    """Write generated sources below ``output_dir``.

    Every source is encoded before the first file is touched, so content
    that cannot be written leaves the output directory unchanged.

    Args:
        sources: Mapping of relative path to file content.
        output_dir: Root directory for generated files.

    Returns:
        Paths of the written files, in input order.

    Raises:
        SourceWriteError: If a source cannot be encoded or written.
    """
    root = Path(output_dir)

    encoded = []
    for relative_path, content in sources.items():
        try:
            encoded.append((root / relative_path, content.encode("utf-8")))
        except UnicodeEncodeError as e:
            logger.error("Cannot encode %s: %s", relative_path, e)
            raise SourceWriteError(f"Cannot encode {relative_path} as UTF-8: {e}") from e

    written = []
    for target, data in encoded:
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            # bytes keep the configured line endings untouched
            target.write_bytes(data)
        except OSError as e:
            logger.error("Error writing %s: %s", target, e)
            raise SourceWriteError(f"Error writing {target}: {e}") from e
        logger.debug("Wrote %s", target)
        written.append(target)

    logger.info("Wrote %d file(s) to %s", len(written), root)
    return written
