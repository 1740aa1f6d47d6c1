"""Fetch the list of models published in the remote Ollama library."""

from __future__ import annotations

import logging
import re

import httpx

from .exceptions import DecodeFailure, TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = "https://ollama.com/library"
DEFAULT_CATALOG_TIMEOUT_SECONDS = 30.0

_LIBRARY_LINK_PATTERN = re.compile(r'href="/library/([a-zA-Z0-9][a-zA-Z0-9._-]*)"')


class CatalogClient:
    """Scrape model names from the library index page."""

    def __init__(
        self,
        url: str = DEFAULT_CATALOG_URL,
        timeout: float = DEFAULT_CATALOG_TIMEOUT_SECONDS,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._timeout = timeout
        self._transport = transport

    def fetch_models(self) -> list[str]:
        """Return model names in page order without duplicates."""
        action = "fetch model catalog"
        logger.debug("GET %s", self._url)
        try:
            with httpx.Client(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            ) as client:
                response = client.get(self._url)
        except httpx.HTTPError as exc:
            raise TransportFailure(action=action, detail=str(exc) or exc.__class__.__name__) from exc

        if response.is_error:
            raise TransportFailure(action=action, detail=f"HTTP {response.status_code}")

        names = parse_library_page(response.text)
        if not names:
            raise DecodeFailure(action=action, detail="no models found in library page")
        return names


def parse_library_page(html: str) -> list[str]:
    seen: set[str] = set()
    names: list[str] = []
    for match in _LIBRARY_LINK_PATTERN.finditer(html):
        name = match.group(1)
        if name in seen:
            continue
        seen.add(name)
        names.append(name)
    return names


def fetch_models(*, client: CatalogClient | None = None) -> list[str]:
    """Fetch remote library model names with the default catalog client."""
    resolved_client = client or CatalogClient()
    return resolved_client.fetch_models()
