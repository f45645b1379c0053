"""Utility functions for loading processor documents.

Documents are returned as raw text; decoding is left to the generation
run so that malformed JSON is reported in its result envelope.
"""

import sys
from pathlib import Path
from typing import TextIO
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

STDIN_MARKER = "-"


class JSONLoaderError(Exception):
    """Custom exception for document loading errors."""

    pass


def load_text_from_file(file_path: str | Path) -> tuple[str, str]:
    """Read a processor document from a local file.

    Args:
        file_path: Path to the JSON file.

    Returns:
        Tuple of (source description, document text).

    Raises:
        FileNotFoundError: If file doesn't exist.
        JSONLoaderError: If file cannot be read.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load document from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise JSONLoaderError(f"Error reading file {file_path}: {e}") from e

    logger.info(f"Loaded document from {file_path}")
    return f"📄 {file_path}", text


def load_text_from_url(url: str, timeout: int = 30) -> tuple[str, str]:
    """Fetch a processor document from a URL.

    Args:
        url: URL to fetch the document from.
        timeout: Request timeout in seconds.

    Returns:
        Tuple of (source description, document text).

    Raises:
        JSONLoaderError: If URL is invalid or the request fails.
    """
    logger.debug(f"Attempting to load document from URL: {url}")

    parsed_url = urlparse(url)
    if not all([parsed_url.scheme, parsed_url.netloc]):
        logger.error(f"Invalid URL format: {url}")
        raise JSONLoaderError(f"Invalid URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        logger.error(f"Request timeout for URL: {url}")
        raise JSONLoaderError(f"Request timeout for URL: {url}")
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise JSONLoaderError(f"Connection error for URL: {url}") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise JSONLoaderError(
            f"HTTP error {e.response.status_code} for URL: {url}"
        ) from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise JSONLoaderError(f"Request error for URL {url}: {e}") from e

    content_type = response.headers.get("content-type", "").lower()
    if "application/json" not in content_type and not url.endswith(".json"):
        logger.warning(f"URL {url} does not have JSON content type: {content_type}")

    logger.info(f"Loaded document from {url}")
    return f"🌐 {url}", response.text


def load_text_from_stream(stream: TextIO | None = None) -> tuple[str, str]:
    """Read a processor document from a stream, stdin by default."""
    stream = stream if stream is not None else sys.stdin
    try:
        text = stream.read()
    except OSError as e:
        raise JSONLoaderError(f"Error reading standard input: {e}") from e
    return "📥 <stdin>", text


def load_document(
    file_path: str | Path | None = None,
    url: str | None = None,
    timeout: int = 30,
) -> tuple[str, str]:
    """Load a processor document from a file, a URL or stdin.

    Args:
        file_path: Path to local JSON file, or "-" for stdin
            (mutually exclusive with url).
        url: URL to fetch the document from (mutually exclusive with file_path).
        timeout: Request timeout in seconds (only used for URLs).

    Returns:
        Tuple of (source description, document text).

    Raises:
        JSONLoaderError: If neither or both parameters are provided, or loading fails.
        FileNotFoundError: If file doesn't exist.
    """
    if not file_path and not url:
        logger.error("Neither file_path nor url provided")
        raise JSONLoaderError("Either file_path or url must be provided")

    if file_path and url:
        logger.error("Both file_path and url provided")
        raise JSONLoaderError("Cannot specify both file_path and url")

    if file_path == STDIN_MARKER:
        return load_text_from_stream()
    if file_path:
        return load_text_from_file(file_path)
    return load_text_from_url(url, timeout)
