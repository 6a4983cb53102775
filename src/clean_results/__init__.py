"""Clean Results.

Explicit success/failure results with structured errors, as an
alternative to signalling expected failures with exceptions.
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Clean Results Team"

from clean_results.domain import (
    Error,
    IError,
    InvalidArgumentError,
    InvalidStateError,
    IResult,
    IValuedResult,
    NullReferenceError,
    ResultContractError,
)
from clean_results.results import Result, ResultOf, ValueResult, ValueResultOf

__all__ = [
    "__version__",
    "Error", "IError", "IResult", "IValuedResult",
    "Result", "ResultOf", "ValueResult", "ValueResultOf",
    "ResultContractError", "NullReferenceError", "InvalidArgumentError", "InvalidStateError",
]
