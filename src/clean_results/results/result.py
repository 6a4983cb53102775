"""Reference results.

``Result`` and ``ResultOf`` are ordinary heap objects compared by identity.
They can be subclassed and shared freely; use them when a result is stored
or passed around by reference. See ``value_result`` for the record-style
counterparts.
"""
from __future__ import annotations

from dataclasses import FrozenInstanceError
from typing import Any, Final, Generic, TypeVar

from clean_results.domain.abstractions import IError
from clean_results.domain.exceptions import InvalidArgumentError, InvalidStateError
from clean_results.results._inspection import (
    MISSING,
    ErrorInspectionMixin,
    _Missing,
    require_error,
)

T = TypeVar("T")


class Result(ErrorInspectionMixin):
    """Outcome of an operation that produces no value.

    A result is a success (no error) or a failure (exactly one error) and
    never changes after construction.

    Example:
        >>> Result.ok() is Result.ok()
        True
        >>> Result.fail(Error("boom")).is_failure()
        True
    """

    __slots__ = ("_error",)

    def __init__(self, error: IError | _Missing = MISSING) -> None:
        """Create a success, or a failure when ``error`` is given.

        Raises:
            NullReferenceError: If error is explicitly None
        """
        object.__setattr__(self, "_error", None if error is MISSING else require_error(error))

    @property
    def error(self) -> IError | None:
        """Error of a failed result, None on success."""
        return self._error

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenInstanceError(f"cannot assign to field '{name}'")

    def __delattr__(self, name: str) -> None:
        raise FrozenInstanceError(f"cannot delete field '{name}'")

    def __reduce__(self) -> tuple[Any, ...]:
        if self is _OK:
            return _shared_ok, ()
        return type(self), (() if self._error is None else (self._error,))

    def __repr__(self) -> str:
        if self._error is None:
            return f"{type(self).__name__}.ok()"
        return f"{type(self).__name__}.fail({self._error!r})"

    @classmethod
    def ok(cls) -> Result:
        """Get the shared success result."""
        return _OK

    @classmethod
    def fail(cls, error: IError) -> Result:
        """Create a failed result.

        Raises:
            NullReferenceError: If error is None
        """
        return cls(error)

    @classmethod
    def from_error(cls, error: IError) -> Result:
        """Wrap a bare error into a failed result."""
        return cls.fail(error)

    @staticmethod
    def ok_of(value: T) -> ResultOf[T]:
        """Create a successful result carrying ``value``."""
        return ResultOf(value)

    @staticmethod
    def fail_of(error: IError) -> ResultOf[Any]:
        """Create a failed result of a value-carrying operation."""
        return ResultOf(error=error)


_OK: Final = Result()


def _shared_ok() -> Result:
    return _OK


def _failed_result_of(cls: type[ResultOf[Any]], error: IError) -> ResultOf[Any]:
    return cls(error=error)


class ResultOf(Result, Generic[T]):
    """Outcome of an operation that produces a value of type ``T``.

    The value is only readable on success. A successful result may hold
    None; use ``fail_if_null`` when None should count as a failure.

    Example:
        >>> ResultOf.ok(5).value
        5
        >>> ResultOf.ok(None).fail_if_null(Error("was null")).error.message
        'was null'
    """

    __slots__ = ("_value",)

    def __init__(self, value: T | None = None, *, error: IError | _Missing = MISSING) -> None:
        """Create a success holding ``value``, or a failure when ``error`` is given.

        Raises:
            NullReferenceError: If error is explicitly None
            InvalidArgumentError: If both a value and an error are given
        """
        if error is not MISSING and value is not None:
            raise InvalidArgumentError("value", "a failed result cannot carry a value", value)
        Result.__init__(self, error)
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        """Get the value.

        Raises:
            InvalidStateError: If the result is failed
        """
        if self._error is not None:
            raise InvalidStateError("Result is in failed state. Value is not set.")
        return self._value  # type: ignore[return-value]

    def try_get_value(self) -> tuple[bool, T | None]:
        """Get the value without raising.

        Returns:
            ``(True, value)`` on success, ``(False, None)`` on failure
        """
        if self._error is not None:
            return False, None
        return True, self._value

    def fail_if_null(self, error: IError) -> ResultOf[T]:
        """Turn a success holding None into a failure.

        Args:
            error: Error for the new failed result

        Returns:
            A new failed result if this one succeeded with None, else self

        Raises:
            NullReferenceError: If error is None
        """
        require_error(error)
        if self._error is None and self._value is None:
            return type(self)(error=error)
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        if self._error is None:
            return type(self), (self._value,)
        return _failed_result_of, (type(self), self._error)

    def __repr__(self) -> str:
        if self._error is None:
            return f"{type(self).__name__}.ok({self._value!r})"
        return f"{type(self).__name__}.fail({self._error!r})"

    @classmethod
    def ok(cls, value: T) -> ResultOf[T]:  # type: ignore[override]
        """Create a successful result carrying ``value``."""
        return cls(value)

    @classmethod
    def fail(cls, error: IError) -> ResultOf[T]:
        """Create a failed result.

        Raises:
            NullReferenceError: If error is None
        """
        return cls(error=error)

    @classmethod
    def from_value(cls, value: T) -> ResultOf[T]:
        """Wrap a bare value into a successful result."""
        return cls.ok(value)
