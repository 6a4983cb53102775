"""Error types used across the result tests."""
from __future__ import annotations

from dataclasses import dataclass, field

from clean_results import Error


class NotFoundError(Error):
    """Error subclass, narrowable as both itself and Error."""


@dataclass(frozen=True)
class ValidationFailure:
    """Independent IError implementation with no validation of its own."""

    message: str
    metadata: tuple[object, ...] = field(default=())
