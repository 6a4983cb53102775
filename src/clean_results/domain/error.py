"""Error Value Object.

Default implementation of the ``IError`` contract.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from clean_results.domain.exceptions import InvalidArgumentError, NullReferenceError


@dataclass(frozen=True, slots=True, init=False)
class Error:
    """Immutable error carrying a message template and its arguments.

    The metadata is positional: item ``n`` fills placeholder ``n`` of the
    message when the error is handed to a structured logger.

    Attributes:
        message: Non-empty message template
        metadata: Ordered placeholder arguments, possibly empty

    Example:
        >>> err = Error("Order %s not found", [42])
        >>> err.metadata
        (42,)
        >>> Error.of("Order %s not found", 42) == err
        True
    """

    message: str
    metadata: tuple[object | None, ...]

    def __init__(self, message: str, metadata: Sequence[object | None] = ()) -> None:
        """Validate message and freeze metadata.

        Raises:
            InvalidArgumentError: If message is empty or metadata is text
            NullReferenceError: If metadata is None
        """
        if not isinstance(message, str) or not message:
            raise InvalidArgumentError("message", "must be a non-empty string", message)
        if metadata is None:
            raise NullReferenceError("metadata")
        if isinstance(metadata, (str, bytes, bytearray)) or not isinstance(metadata, Sequence):
            raise InvalidArgumentError(
                "metadata", "must be a sequence of arguments; use Error.of() for single values", metadata,
            )
        object.__setattr__(self, "message", message)
        object.__setattr__(self, "metadata", tuple(metadata))

    def __str__(self) -> str:
        return self.message

    @classmethod
    def of(cls, message: str, *metadata: object | None) -> Error:
        """Create an Error from a message and inline placeholder arguments."""
        return cls(message, metadata)

