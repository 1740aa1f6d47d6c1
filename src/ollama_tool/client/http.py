"""HTTP client for the local Ollama daemon generate endpoint."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import httpx
import typer
from pydantic import ValidationError

from ollama_tool.core.schemas import GenerateRequest, GenerateResponse

from .exceptions import DecodeFailure, TransportFailure

logger = logging.getLogger(__name__)

DEFAULT_DAEMON_PORT = 11434
DEFAULT_BASE_URL = f"http://localhost:{DEFAULT_DAEMON_PORT}"
GENERATE_PATH = "/api/generate"
# ``None`` disables the timeout; generation can legitimately take minutes.
DEFAULT_TIMEOUT_SECONDS: float | None = None

_UNREACHABLE_HINT = "is the Ollama daemon running? start it with `ollama serve`"


class GenerationClient:
    """Minimal client for one-shot, non-streaming generation requests."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    def generate(self, model: str, prompt: str, system: str) -> GenerateResponse:
        """Submit one generation request and return the decoded response."""
        request = GenerateRequest(model=model, prompt=prompt, system=system)
        action = f"generate with model {model!r}"
        response = self._send_request(
            "POST",
            GENERATE_PATH,
            json_payload=request.model_dump(mode="json"),
            action=action,
        )
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeFailure(
                action=action,
                detail="daemon returned non-JSON response",
            ) from exc

        try:
            return GenerateResponse.model_validate(payload)
        except ValidationError as exc:
            raise DecodeFailure(
                action=action,
                detail=f"daemon returned unexpected JSON payload: {exc.error_count()} error(s)",
            ) from exc

    def _send_request(
        self,
        method: str,
        path: str,
        *,
        json_payload: dict[str, Any] | None = None,
        action: str,
    ) -> httpx.Response:
        logger.debug("%s %s%s", method, self._base_url, path)
        try:
            with httpx.Client(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = client.request(method, path, json=json_payload)
        except httpx.HTTPError as exc:
            raise TransportFailure(
                action=action,
                detail=str(exc) or exc.__class__.__name__,
                hint=_UNREACHABLE_HINT,
            ) from exc

        if response.is_error:
            raise TransportFailure(
                action=action,
                detail=f"HTTP {response.status_code}: {_extract_error_detail(response)}",
            )
        return response


def generate_response(
    model: str,
    prompt: str,
    system: str,
    *,
    client: GenerationClient | None = None,
    echo: Callable[[str], Any] = typer.echo,
) -> None:
    """Run one generation and print the response text."""
    resolved_client = client or GenerationClient()
    result = resolved_client.generate(model, prompt, system)
    echo(result.response)


def _extract_error_detail(response: httpx.Response) -> str:
    text = response.text.strip()
    if not text:
        return response.reason_phrase or "empty response"

    try:
        payload = response.json()
    except ValueError:
        return text

    if isinstance(payload, dict):
        for key in ("error", "detail"):
            detail = payload.get(key)
            if isinstance(detail, str) and detail:
                return detail
    return text
