"""Tests for the Typer-based ollama-tool CLI."""

from __future__ import annotations

import json
from collections.abc import Sequence

import httpx
from typer.testing import CliRunner

from ollama_tool import __version__
from ollama_tool.cli.main import app
from ollama_tool.client import GenerationClient
from ollama_tool.client.exceptions import IOFailure, NonZeroExit
from ollama_tool.core.prompts import DEFAULT_SYSTEM_PROMPT


def _new_runner() -> CliRunner:
    try:
        return CliRunner(mix_stderr=False)
    except TypeError:
        # Click>=8.2 always captures stderr separately.
        return CliRunner()


def _result_stdout(result: object) -> str:
    stdout = getattr(result, "stdout", None)
    if isinstance(stdout, str):
        return stdout
    output = getattr(result, "output", None)
    if isinstance(output, str):
        return output
    return ""


def _result_stderr(result: object) -> str:
    try:
        stderr = getattr(result, "stderr", None)
    except ValueError:
        stderr = None
    if isinstance(stderr, str):
        return stderr
    return _result_stdout(result)


def _patch_generation_client(monkeypatch, handler) -> dict[str, object]:
    captured: dict[str, object] = {}

    def _factory(base_url: str, timeout: float | None) -> GenerationClient:
        captured["base_url"] = base_url
        captured["timeout"] = timeout
        return GenerationClient(
            base_url=base_url,
            timeout=timeout,
            transport=httpx.MockTransport(handler),
        )

    monkeypatch.setattr("ollama_tool.cli.main.GenerationClient", _factory)
    return captured


def _patch_runner(monkeypatch) -> list[list[str]]:
    calls: list[list[str]] = []

    def _fake_run(args: Sequence[str]) -> None:
        calls.append(list(args))

    monkeypatch.setattr("ollama_tool.cli.main.run_ollama_command", _fake_run)
    return calls


def test_help_describes_tool() -> None:
    result = _new_runner().invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "manage Ollama models" in _result_stdout(result)
    for name in ("list", "installed", "pull", "run", "remove", "generate"):
        assert name in _result_stdout(result)


def test_version_flag_prints_package_version() -> None:
    result = _new_runner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert _result_stdout(result).strip() == __version__


def test_installed_runs_ollama_list(monkeypatch) -> None:
    calls = _patch_runner(monkeypatch)

    result = _new_runner().invoke(app, ["installed"])

    assert result.exit_code == 0
    assert calls == [["list"]]
    assert "Listing installed models..." in _result_stderr(result)


def test_pull_run_remove_forward_model_name(monkeypatch) -> None:
    calls = _patch_runner(monkeypatch)
    runner = _new_runner()

    assert runner.invoke(app, ["pull", "llama3"]).exit_code == 0
    assert runner.invoke(app, ["run", "llama3"]).exit_code == 0
    removed = runner.invoke(app, ["remove", "llama3"])

    assert removed.exit_code == 0
    assert calls == [["pull", "llama3"], ["run", "llama3"], ["rm", "llama3"]]
    assert "Model llama3 removed." in _result_stderr(removed)


def test_pull_requires_model_argument(monkeypatch) -> None:
    calls = _patch_runner(monkeypatch)

    result = _new_runner().invoke(app, ["pull"])

    assert result.exit_code == 2
    assert calls == []


def test_non_zero_exit_reports_error_and_fails(monkeypatch) -> None:
    def _failing_run(args: Sequence[str]) -> None:
        raise NonZeroExit(action="ollama pull missing", code=1)

    monkeypatch.setattr("ollama_tool.cli.main.run_ollama_command", _failing_run)

    result = _new_runner().invoke(app, ["pull", "missing"])

    assert result.exit_code == 1
    stderr = _result_stderr(result)
    assert "Error: ollama pull missing failed" in stderr
    assert "exit code 1" in stderr
    assert "pulled successfully" not in stderr


def test_missing_executable_exits_with_io_failure_code(monkeypatch) -> None:
    def _failing_run(args: Sequence[str]) -> None:
        raise IOFailure(action="ollama list", detail="No such file", hint="install ollama")

    monkeypatch.setattr("ollama_tool.cli.main.run_ollama_command", _failing_run)

    result = _new_runner().invoke(app, ["installed"])

    assert result.exit_code == 4
    assert "Hint: install ollama" in _result_stderr(result)


def test_list_prints_catalog_models(monkeypatch) -> None:
    captured: dict[str, object] = {}

    class _FakeCatalogClient:
        def __init__(self, url: str) -> None:
            captured["url"] = url

        def fetch_models(self) -> list[str]:
            return ["llama3.2", "gemma2"]

    monkeypatch.setattr("ollama_tool.cli.main.CatalogClient", _FakeCatalogClient)

    result = _new_runner().invoke(app, ["list"])

    assert result.exit_code == 0
    assert captured["url"] == "https://ollama.com/library"
    assert _result_stdout(result).splitlines() == ["- llama3.2", "- gemma2"]


def test_generate_prints_response_on_stdout(monkeypatch) -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/generate"
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"response": "ok"})

    captured = _patch_generation_client(monkeypatch, handler)

    result = _new_runner().invoke(app, ["generate", "m", "p"])

    assert result.exit_code == 0
    assert _result_stdout(result).splitlines() == ["ok"]
    assert "Generating response with model: m" in _result_stderr(result)
    assert captured == {"base_url": "http://localhost:11434", "timeout": None}
    assert bodies == [
        {"model": "m", "prompt": "p", "system": DEFAULT_SYSTEM_PROMPT, "stream": False},
    ]


def test_generate_forwards_custom_system_and_options(monkeypatch) -> None:
    bodies: list[dict[str, object]] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(200, json={"response": "bonjour"})

    captured = _patch_generation_client(monkeypatch, handler)

    result = _new_runner().invoke(
        app,
        [
            "generate",
            "m",
            "hello",
            "--system",
            "Answer in French.",
            "--base-url",
            "http://gpu-box:11434",
            "--timeout",
            "30",
        ],
    )

    assert result.exit_code == 0
    assert captured == {"base_url": "http://gpu-box:11434", "timeout": 30.0}
    assert bodies[0]["system"] == "Answer in French."


def test_generate_unreachable_daemon_writes_nothing_to_stdout(monkeypatch) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    _patch_generation_client(monkeypatch, handler)

    result = _new_runner().invoke(app, ["generate", "m", "p"])

    assert result.exit_code == 3
    assert _result_stdout(result) == ""
    stderr = _result_stderr(result)
    assert "Error: generate with model 'm' failed" in stderr
    assert "ollama serve" in stderr


def test_invalid_log_level_is_rejected(monkeypatch) -> None:
    _patch_runner(monkeypatch)

    result = _new_runner().invoke(app, ["--log-level", "loud", "installed"])

    assert result.exit_code == 2
