"""Exception hierarchy for please.

Fatal errors (configuration, model request, empty reply) stop the process
before any UI is shown. ExecutionError is only ever reported.
"""

from __future__ import annotations

from typing import Any


class PleaseError(Exception):
    """Base exception carrying optional context and the wrapped error."""

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.original_error = original_error

    def __str__(self) -> str:
        parts = [self.message]
        if self.context:
            parts.append(", ".join(f"{k}={v}" for k, v in self.context.items()))
        if self.original_error:
            parts.append(str(self.original_error))
        return " | ".join(parts)


class ConfigError(PleaseError):
    """Raised when a required setting is missing or a setting is malformed."""

    def __init__(self, variable: str, reason: str, value: str | None = None) -> None:
        context = {"value": value} if value is not None else None
        super().__init__(f"{variable} {reason}", context)
        self.variable = variable


class CompletionError(PleaseError):
    """Raised when the model request itself fails."""

    def __init__(self, model: str, original_error: Exception) -> None:
        super().__init__(
            "Model request failed", {"model": model}, original_error
        )


class EmptyResponseError(PleaseError):
    """Raised when the model reply carries no content at all."""

    def __init__(self) -> None:
        super().__init__("Empty response from the model")


class ExecutionError(PleaseError):
    """Raised when the shell for a chosen command cannot be started."""

    def __init__(self, command: str, shell: str, original_error: Exception) -> None:
        super().__init__(
            f"Could not run command with {shell}",
            {"command": command},
            original_error,
        )
        self.command = command
