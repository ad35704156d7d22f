"""
Loading the protocol document from minecraft-data or a local file
"""

import json
import logging
from typing import Any, Dict

import requests

from .errors import FetchError, TypeMismatchError

logger = logging.getLogger(__name__)


def _check_document(document: Any, source: str) -> Dict[str, Any]:
    if not isinstance(document, dict):
        raise TypeMismatchError(
            f"protocol document from {source} must be a JSON object, "
            f"got {type(document).__name__}")
    return document


def download_document(url: str, timeout: float = 30.0) -> Dict[str, Any]:
    """Download and decode the protocol document"""
    logger.info(f"Downloading {url}")
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as e:
        raise FetchError(f"failed to download {url}: {e}") from e

    try:
        document = resp.json()
    except ValueError as e:
        raise FetchError(f"{url} did not return valid JSON: {e}") from e

    return _check_document(document, url)


def load_document(path: str) -> Dict[str, Any]:
    """Read the protocol document from a local JSON file"""
    logger.info(f"Loading {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except OSError as e:
        raise FetchError(f"failed to read {path}: {e}") from e
    except ValueError as e:
        raise FetchError(f"{path} is not valid JSON: {e}") from e

    return _check_document(document, path)
