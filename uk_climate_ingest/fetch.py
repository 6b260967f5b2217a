"""
Source retrieval for uk-climate-ingest.

Fetches the raw text of one climate table. Two kinds of location are
accepted:

- ``http://`` / ``https://`` URLs, fetched with requests;
- local paths or ``file://`` URLs, read from disk (useful for a local
  mirror of the Met Office datasets directory).

Failures are mapped onto the package's exception hierarchy so the batch
orchestrator can tell an unreachable host (``ConnectivityError``) from a
single broken table (``RetrievalError``).
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

from uk_climate_ingest.exceptions import ConnectivityError, RetrievalError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def _read_local(location: str) -> str:
    parsed = urlparse(location)
    path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(location)
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise RetrievalError(f"Could not read {path}: {exc}") from exc


def fetch_text(location: str, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Return the full text content at *location*.

    Args:
        location: An http(s) URL, a ``file://`` URL, or a filesystem path.
        timeout: Seconds to wait for the HTTP server.

    Raises:
        ConnectivityError: If the host cannot be reached.
        RetrievalError: On HTTP error status, timeout, or unreadable file.
    """
    if urlparse(location).scheme not in ("http", "https"):
        logger.debug("Reading local table %s", location)
        return _read_local(location)

    logger.debug("GET %s", location)
    try:
        response = requests.get(location, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.ConnectionError as exc:
        raise ConnectivityError(f"Could not connect to {location}: {exc}") from exc
    except requests.exceptions.RequestException as exc:
        raise RetrievalError(f"Failed to fetch {location}: {exc}") from exc
    return response.text
