"""Swagger / OpenAPI document loader.

Reads a Swagger 2.0 or OpenAPI 3.x document (YAML or JSON) from a URL or
a local file and parses it into a Swagger model.
"""

from pathlib import Path

import requests
import yaml
from pydantic import ValidationError

from swagger_hateoas.errors import MalformedSourceError, SourceUnavailableError
from .base import Swagger
from .detect import detect_source

DEFAULT_TIMEOUT = 10.0


def load_document(location: str, timeout: float = DEFAULT_TIMEOUT) -> Swagger:
    """Fetch and parse a Swagger document from a URL or file path."""
    return parse_document(fetch_text(location, timeout=timeout))


def fetch_text(location: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Read the raw document text from a URL or file path."""
    if detect_source(location) == "url":
        return _fetch_url(location, timeout)
    try:
        return Path(location).read_text(encoding="utf-8")
    except OSError as e:
        raise SourceUnavailableError(f"Could not read Swagger document {location}: {e}") from e


def parse_document(text: str) -> Swagger:
    """Parse YAML or JSON document text into a Swagger model."""
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedSourceError(f"Swagger document is not valid YAML/JSON: {e}") from e

    if doc is None:
        return Swagger()
    if not isinstance(doc, dict):
        raise MalformedSourceError("Swagger document must be a mapping at the top level")

    try:
        return Swagger(
            info=doc.get("info") or {},
            paths=_parse_paths(doc.get("paths") or {}),
        )
    except ValidationError as e:
        raise MalformedSourceError(f"Swagger document has an unexpected shape: {e}") from e


def _fetch_url(url: str, timeout: float) -> str:
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise SourceUnavailableError(f"Could not retrieve Swagger document from {url}: {e}") from e

    if response.status_code != 200:
        raise SourceUnavailableError(
            f"Received HTTP code {response.status_code} when attempting to retrieve Swagger document"
        )
    return response.text


def _parse_paths(paths) -> dict:
    if not isinstance(paths, dict):
        raise MalformedSourceError("Swagger document 'paths' must be a mapping")

    # Path items may be null in hand-written documents; treat them as empty.
    result = {}
    for path, item in paths.items():
        result[str(path)] = item or {}
    return result
