"""Typed error taxonomy for ollama-tool operations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ErrorMetadata:
    """Structured metadata for mapping errors to process exit status."""

    category: str
    exit_code: int


class OperationError(RuntimeError):
    """Base error for any external-boundary crossing."""

    metadata = ErrorMetadata(category="OPERATION_FAILED", exit_code=1)

    def __init__(
        self,
        *,
        action: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        message = f"{action} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.action = action
        self.detail = detail
        self.hint = hint

    @property
    def exit_code(self) -> int:
        return self.metadata.exit_code

    @property
    def category(self) -> str:
        return self.metadata.category


class TransportFailure(OperationError):
    """Network or HTTP layer failure."""

    metadata = ErrorMetadata(category="TRANSPORT_FAILURE", exit_code=3)


class IOFailure(OperationError):
    """Process spawn or pipe failure."""

    metadata = ErrorMetadata(category="IO_FAILURE", exit_code=4)


class DecodeFailure(OperationError):
    """Malformed or unexpected JSON payload."""

    metadata = ErrorMetadata(category="DECODE_FAILURE", exit_code=5)


class NonZeroExit(OperationError):
    """External command returned a failing exit status."""

    metadata = ErrorMetadata(category="NON_ZERO_EXIT", exit_code=1)

    def __init__(
        self,
        *,
        action: str,
        code: int,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            action=action,
            detail=f"ollama command failed with exit code {code}",
            hint=hint,
        )
        self.code = code
