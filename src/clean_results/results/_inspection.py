"""Error inspection shared by every result type."""
from __future__ import annotations

from typing import Final, TypeVar

from clean_results.domain.abstractions import IError
from clean_results.domain.exceptions import InvalidArgumentError, NullReferenceError

E = TypeVar("E", bound=IError)


class _Missing:
    """Marker for arguments that were not supplied at all."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Final = _Missing()


def require_error(error: object, parameter: str = "error") -> IError:
    """Validate an error handed to a failing constructor.

    Args:
        error: Candidate error
        parameter: Name reported in the raised exception

    Returns:
        The same error, typed as IError

    Raises:
        NullReferenceError: If error is None
        InvalidArgumentError: If error does not satisfy IError
    """
    if error is None:
        raise NullReferenceError(parameter)
    if not isinstance(error, IError):
        raise InvalidArgumentError(
            parameter,
            f"{type(error).__name__} does not provide 'message' and 'metadata'",
        )
    return error


class ErrorInspectionMixin:
    """Success/failure flags and error narrowing derived from ``error``.

    Subclasses store the error however they like; the flags are never
    stored, so they cannot disagree with it.
    """

    __slots__ = ()

    error: IError | None

    def is_success(self) -> bool:
        """Check if result is success."""
        return self.error is None

    def is_failure(self) -> bool:
        """Check if result is failure."""
        return self.error is not None

    def has_error(self, error_type: type[IError]) -> bool:
        """Check if result failed with an error of ``error_type`` or a subtype."""
        return self.error is not None and isinstance(self.error, error_type)

    def try_get_error(self, error_type: type[E] | None = None) -> tuple[bool, E | IError | None]:
        """Get the error if there is one, optionally narrowed to a type.

        Args:
            error_type: Required error type; None accepts any error

        Returns:
            ``(True, error)`` when failed (and the error matches),
            otherwise ``(False, None)``
        """
        error = self.error
        if error is None:
            return False, None
        if error_type is None or isinstance(error, error_type):
            return True, error
        return False, None
