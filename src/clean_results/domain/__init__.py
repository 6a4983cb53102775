"""Domain layer.

Error contract, default error implementation and contract violations.
"""
from __future__ import annotations

from clean_results.domain.abstractions import IError, IResult, IValuedResult
from clean_results.domain.error import Error
from clean_results.domain.exceptions import (
    InvalidArgumentError,
    InvalidStateError,
    NullReferenceError,
    ResultContractError,
)

__all__ = [
    "IError", "IResult", "IValuedResult",
    "Error",
    "ResultContractError", "NullReferenceError", "InvalidArgumentError", "InvalidStateError",
]
