"""Route one parsed command to the process runner or the HTTP clients."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

import typer

from ollama_tool.client.catalog import fetch_models
from ollama_tool.client.http import generate_response

from .commands import Command, Generate, ListInstalled, ListRemote, Pull, Remove, Run
from .prompts import DEFAULT_SYSTEM_PROMPT
from .runner import run_ollama_command

Runner = Callable[[Sequence[str]], None]
Generator = Callable[[str, str, str], None]
CatalogFetcher = Callable[[], list[str]]
Echo = Callable[[str], Any]


def _status_note(message: str) -> None:
    typer.echo(message, err=True)


def resolve_system_prompt(system: str | None) -> str:
    """Return ``system`` verbatim, or the default prompt when it is absent."""
    if system is None:
        return DEFAULT_SYSTEM_PROMPT
    return system


def dispatch(
    command: Command,
    *,
    runner: Runner = run_ollama_command,
    generator: Generator = generate_response,
    catalog: CatalogFetcher = fetch_models,
    echo: Echo = typer.echo,
    note: Echo = _status_note,
) -> None:
    """Execute exactly one command.

    Status lines go through ``note`` (stderr by default) and results through
    ``echo``. Any :class:`OperationError` raised by a collaborator propagates
    unchanged; nothing after the failing call runs.
    """
    if isinstance(command, ListRemote):
        note("Fetching available models...")
        models = catalog()
        note("Available models:")
        for model in models:
            echo(f"- {model}")
        return

    if isinstance(command, ListInstalled):
        note("Listing installed models...")
        runner(["list"])
        return

    if isinstance(command, Pull):
        note(f"Pulling model: {command.model}")
        runner(["pull", command.model])
        note(f"Model {command.model} pulled successfully.")
        return

    if isinstance(command, Run):
        note(f"Running model: {command.model}")
        runner(["run", command.model])
        return

    if isinstance(command, Remove):
        note(f"Removing model: {command.model}")
        runner(["rm", command.model])
        note(f"Model {command.model} removed.")
        return

    if isinstance(command, Generate):
        note(f"Generating response with model: {command.model}")
        generator(command.model, command.prompt, resolve_system_prompt(command.system))
        return

    raise TypeError(f"unsupported command: {command!r}")
