"""Closed set of commands accepted by the dispatcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class ListRemote:
    """List models published in the remote library."""


@dataclass(frozen=True, slots=True)
class ListInstalled:
    """List models installed in the local daemon."""


@dataclass(frozen=True, slots=True)
class Pull:
    model: str


@dataclass(frozen=True, slots=True)
class Run:
    model: str


@dataclass(frozen=True, slots=True)
class Remove:
    model: str


@dataclass(frozen=True, slots=True)
class Generate:
    """One-shot generation; ``system`` of ``None`` selects the default prompt."""

    model: str
    prompt: str
    system: str | None = None


Command: TypeAlias = ListRemote | ListInstalled | Pull | Run | Remove | Generate
