"""Typer-based CLI for managing Ollama models."""

from __future__ import annotations

import logging
from typing import Any, NoReturn

import typer

from ollama_tool import __version__
from ollama_tool.client import (
    DEFAULT_BASE_URL,
    DEFAULT_CATALOG_URL,
    CatalogClient,
    GenerationClient,
    OperationError,
    generate_response,
)
from ollama_tool.core.commands import (
    Command,
    Generate,
    ListInstalled,
    ListRemote,
    Pull,
    Remove,
    Run,
)
from ollama_tool.core.dispatch import dispatch
from ollama_tool.core.runner import run_ollama_command

app = typer.Typer(
    name="ollama-tool",
    help="ollama-tool: a tool to manage Ollama models.",
    no_args_is_help=True,
)

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_COLOR_WARNING = typer.colors.YELLOW
_COLOR_ERROR = typer.colors.RED


def _error_hint(exc: BaseException) -> str | None:
    value = getattr(exc, "hint", None)
    if isinstance(value, str):
        normalized = value.strip()
        if normalized:
            return normalized
    return None


def _exit_with_operation_error(exc: OperationError) -> NoReturn:
    typer.echo(typer.style(f"Error: {exc}", fg=_COLOR_ERROR), err=True)
    hint = _error_hint(exc)
    if hint is not None:
        typer.echo(typer.style(f"Hint: {hint}", fg=_COLOR_WARNING), err=True)
    raise typer.Exit(code=exc.exit_code) from exc


def _configure_logging(level: str) -> None:
    normalized = level.strip().lower()
    if normalized not in _LOG_LEVELS:
        raise typer.BadParameter(
            f"invalid log level {level!r}; choose from {', '.join(_LOG_LEVELS)}",
        )
    logging.basicConfig(level=normalized.upper(), format=_LOG_FORMAT)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit()


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level: debug, info, warning, error, or critical.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the ollama-tool version and exit.",
    ),
) -> None:
    """A tool to manage Ollama models."""
    del version
    _configure_logging(log_level)


def _run_command(command: Command, **overrides: Any) -> None:
    try:
        dispatch(command, runner=run_ollama_command, **overrides)
    except OperationError as exc:
        _exit_with_operation_error(exc)


@app.command("list")
def list_models(
    catalog_url: str = typer.Option(
        DEFAULT_CATALOG_URL,
        "--catalog-url",
        help="Library page to read model names from.",
    ),
) -> None:
    """List available models from the Ollama library."""
    client = CatalogClient(url=catalog_url)
    _run_command(ListRemote(), catalog=client.fetch_models)


@app.command("installed")
def installed() -> None:
    """List installed models."""
    _run_command(ListInstalled())


@app.command("pull")
def pull(model: str = typer.Argument(..., help="Model name to pull.")) -> None:
    """Pull a model."""
    _run_command(Pull(model=model))


@app.command("run")
def run(model: str = typer.Argument(..., help="Model name to run.")) -> None:
    """Run a model."""
    _run_command(Run(model=model))


@app.command("remove")
def remove(model: str = typer.Argument(..., help="Installed model name to remove.")) -> None:
    """Remove a model."""
    _run_command(Remove(model=model))


@app.command("generate")
def generate(
    model: str = typer.Argument(..., help="Model name to generate with."),
    prompt: str = typer.Argument(..., help="Prompt text."),
    system: str | None = typer.Option(None, "--system", help="Custom system prompt."),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL,
        help="Daemon base URL. Defaults to http://localhost:11434.",
    ),
    timeout: float | None = typer.Option(
        None,
        min=0.1,
        help="HTTP timeout in seconds. Waits indefinitely when omitted.",
    ),
) -> None:
    """Generate response with custom prompt and system."""
    client = GenerationClient(base_url=base_url, timeout=timeout)

    def _generate(model_name: str, prompt_text: str, system_prompt: str) -> None:
        generate_response(model_name, prompt_text, system_prompt, client=client)

    _run_command(Generate(model=model, prompt=prompt, system=system), generator=_generate)


def main() -> None:
    """Console script entrypoint for the Typer app."""
    app()


if __name__ == "__main__":
    main()
