"""Result and Error Interfaces (Protocols).

Defines the contracts every error object and every result must satisfy,
independent of how they are stored.
"""
from __future__ import annotations

from typing import Protocol, Sequence, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class IError(Protocol):
    """Minimal error contract.

    ``message`` is a non-empty template and ``metadata`` the ordered
    positional arguments substituted into it by structured loggers.
    """

    @property
    def message(self) -> str: ...

    @property
    def metadata(self) -> Sequence[object | None]: ...


@runtime_checkable
class IResult(Protocol):
    """Contract shared by every result, valued or not."""

    @property
    def error(self) -> IError | None: ...
    def is_success(self) -> bool: ...
    def is_failure(self) -> bool: ...


@runtime_checkable
class IValuedResult(IResult, Protocol[T_co]):
    """Result carrying a payload that is readable only on success."""

    @property
    def value(self) -> T_co: ...
