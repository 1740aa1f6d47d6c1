"""Wire schemas for the Ollama generate endpoint."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, StrictStr


class GenerateRequest(BaseModel):
    """Non-streaming request body for ``POST /api/generate``."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)

    model: StrictStr
    prompt: StrictStr
    system: StrictStr
    stream: Literal[False] = False


class GenerateResponse(BaseModel):
    """Completed generation returned by the daemon.

    The daemon also sends timing and context fields; only ``response`` is kept.
    """

    model_config = ConfigDict(extra="ignore")

    response: StrictStr
