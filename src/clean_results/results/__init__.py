"""Result types.

Reference results (``Result``, ``ResultOf``) and record results
(``ValueResult``, ``ValueResultOf``) share one contract and differ only in
identity and copy semantics.
"""
from __future__ import annotations

from clean_results.results.result import Result, ResultOf
from clean_results.results.value_result import ValueResult, ValueResultOf

__all__ = [
    "Result", "ResultOf",
    "ValueResult", "ValueResultOf",
]
