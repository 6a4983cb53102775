"""Contract violation exceptions.

These signal programmer errors at a call site, never recoverable failures.
Each kind also inherits the matching builtin so plain ``except TypeError``
style handlers keep working.
"""
from __future__ import annotations

from typing import Any


class ResultContractError(Exception):
    """Base exception for misuse of results and errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} - {self.details}"
        return self.message


class NullReferenceError(ResultContractError, TypeError):
    def __init__(self, parameter: str) -> None:
        super().__init__(f"Value cannot be None: '{parameter}'", {"parameter": parameter})
        self.parameter = parameter


class InvalidArgumentError(ResultContractError, ValueError):
    def __init__(self, parameter: str, message: str, value: Any = None) -> None:
        super().__init__(f"Invalid argument '{parameter}': {message}", {"parameter": parameter, "value": value})
        self.parameter = parameter
        self.value = value


class InvalidStateError(ResultContractError, RuntimeError):
    pass
