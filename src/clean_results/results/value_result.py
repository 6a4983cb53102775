"""Record-style results.

``ValueResult`` and ``ValueResultOf`` are frozen, slotted dataclasses with
structural equality. They hold the same invariants as the reference
results but behave like plain values: compare them with ``==``, copy and
hash them freely, and prefer them for short-lived results on hot paths.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from clean_results.domain.abstractions import IError
from clean_results.domain.exceptions import InvalidArgumentError, InvalidStateError
from clean_results.results._inspection import (
    MISSING,
    ErrorInspectionMixin,
    _Missing,
    require_error,
)

T = TypeVar("T")


@dataclass(frozen=True, slots=True, init=False, repr=False)
class ValueResult(ErrorInspectionMixin):
    """Record outcome of an operation that produces no value.

    ``ValueResult()`` is the success; every success is equal to every
    other success.

    Attributes:
        error: Error of a failed result, None on success
    """

    error: IError | None

    def __init__(self, error: IError | _Missing = MISSING) -> None:
        object.__setattr__(self, "error", None if error is MISSING else require_error(error))

    def __repr__(self) -> str:
        if self.error is None:
            return "ValueResult.ok()"
        return f"ValueResult.fail({self.error!r})"

    @classmethod
    def ok(cls) -> ValueResult:
        """Create the success result."""
        return cls()

    @classmethod
    def fail(cls, error: IError) -> ValueResult:
        """Create a failed result.

        Raises:
            NullReferenceError: If error is None
        """
        return cls(error)

    @classmethod
    def from_error(cls, error: IError) -> ValueResult:
        """Wrap a bare error into a failed result."""
        return cls.fail(error)

    @staticmethod
    def ok_of(value: T) -> ValueResultOf[T]:
        """Create a successful record result carrying ``value``."""
        return ValueResultOf(value)

    @staticmethod
    def fail_of(error: IError) -> ValueResultOf[Any]:
        """Create a failed record result of a value-carrying operation."""
        return ValueResultOf(error=error)


@dataclass(frozen=True, slots=True, init=False, repr=False)
class ValueResultOf(ErrorInspectionMixin, Generic[T]):
    """Record outcome of an operation that produces a value of type ``T``.

    Equality compares both the value and the error.

    Example:
        >>> ValueResultOf.ok([1, 2]) == ValueResultOf.ok([1, 2])
        True
        >>> ValueResultOf.fail(Error("boom")).to_value_result().is_failure()
        True
    """

    _value: T | None
    error: IError | None

    def __init__(self, value: T | None = None, *, error: IError | _Missing = MISSING) -> None:
        """Create a success holding ``value``, or a failure when ``error`` is given.

        Raises:
            NullReferenceError: If error is explicitly None
            InvalidArgumentError: If both a value and an error are given
        """
        if error is MISSING:
            object.__setattr__(self, "error", None)
        else:
            if value is not None:
                raise InvalidArgumentError("value", "a failed result cannot carry a value", value)
            object.__setattr__(self, "error", require_error(error))
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        """Get the value.

        Raises:
            InvalidStateError: If the result is failed
        """
        if self.error is not None:
            raise InvalidStateError("Result is in failed state. Value is not set.")
        return self._value  # type: ignore[return-value]

    def try_get_value(self) -> tuple[bool, T | None]:
        """Get the value without raising."""
        if self.error is not None:
            return False, None
        return True, self._value

    def fail_if_null(self, error: IError) -> ValueResultOf[T]:
        """Turn a success holding None into a failure.

        Raises:
            NullReferenceError: If error is None
        """
        require_error(error)
        if self.error is None and self._value is None:
            return type(self)(error=error)
        return self

    def to_value_result(self) -> ValueResult:
        """Drop the value, keeping only success or the same error."""
        if self.error is None:
            return ValueResult()
        return ValueResult(self.error)

    def __repr__(self) -> str:
        if self.error is None:
            return f"ValueResultOf.ok({self._value!r})"
        return f"ValueResultOf.fail({self.error!r})"

    @classmethod
    def ok(cls, value: T) -> ValueResultOf[T]:
        """Create a successful result carrying ``value``."""
        return cls(value)

    @classmethod
    def fail(cls, error: IError) -> ValueResultOf[T]:
        """Create a failed result.

        Raises:
            NullReferenceError: If error is None
        """
        return cls(error=error)

    @classmethod
    def from_value(cls, value: T) -> ValueResultOf[T]:
        """Wrap a bare value into a successful result."""
        return cls.ok(value)

    @classmethod
    def from_error(cls, error: IError) -> ValueResultOf[T]:
        """Wrap a bare error into a failed result."""
        return cls.fail(error)
