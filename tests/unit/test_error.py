"""Tests for the Error value object and the IError contract."""
from __future__ import annotations

import copy
import pickle
from dataclasses import FrozenInstanceError

import pytest

from clean_results import (
    Error,
    IError,
    InvalidArgumentError,
    NullReferenceError,
    ResultContractError,
)
from sample_errors import NotFoundError, ValidationFailure


class TestErrorConstruction:
    """Tests for validating Error arguments."""

    def test_message_only(self) -> None:
        """Test error without metadata."""
        err = Error("boom")
        assert err.message == "boom"
        assert err.metadata == ()
        assert str(err) == "boom"

    @pytest.mark.parametrize("message", ["", None])
    def test_empty_message_rejected(self, message: str | None) -> None:
        """Test that missing messages raise InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="message"):
            Error(message)  # type: ignore[arg-type]

    def test_non_string_message_rejected(self) -> None:
        """Test that a message must be text."""
        with pytest.raises(InvalidArgumentError):
            Error(42)  # type: ignore[arg-type]

    def test_none_metadata_rejected(self) -> None:
        """Test that None metadata raises NullReferenceError."""
        with pytest.raises(NullReferenceError, match="metadata"):
            Error("boom", None)  # type: ignore[arg-type]

    def test_explicit_empty_metadata(self) -> None:
        """Test that an empty sequence is kept as an empty tuple."""
        err = Error("boom", [])
        assert err.metadata == ()
        assert err.metadata is not None

    def test_metadata_keeps_order(self) -> None:
        """Test that metadata order is preserved."""
        err = Error("%s then %s", ["first", "second"])
        assert err.metadata == ("first", "second")

    def test_metadata_may_contain_none(self) -> None:
        """Test that individual metadata items may be None."""
        err = Error.of("value was %s", None)
        assert err.metadata == (None,)

    def test_of_matches_constructor(self) -> None:
        """Test the inline-argument factory."""
        assert Error.of("Order %s", 42) == Error("Order %s", (42,))

    def test_metadata_copied_from_list(self) -> None:
        """Test that later changes to the source list do not leak in."""
        source = [1, 2]
        err = Error("%s %s", source)
        source.append(3)
        assert err.metadata == (1, 2)

    @pytest.mark.parametrize("metadata", ["abc", b"abc", 42, {"key": "value"}])
    def test_non_sequence_metadata_rejected(self, metadata: object) -> None:
        """Test that text and non-sequences are not split into arguments."""
        with pytest.raises(InvalidArgumentError, match="metadata"):
            Error("bad %s", metadata)  # type: ignore[arg-type]

    def test_single_text_argument_via_of(self) -> None:
        """Test that a lone string is kept whole by the inline factory."""
        assert Error.of("bad %s", "abc").metadata == ("abc",)

    def test_subclass_construction(self) -> None:
        """Test that subclasses share the validating constructor."""
        err = NotFoundError("missing %s", ["order"])
        assert err.metadata == ("order",)
        with pytest.raises(InvalidArgumentError):
            NotFoundError("")


class TestErrorImmutability:
    """Tests for Error immutability."""

    def test_cannot_assign_message(self, error: Error) -> None:
        """Test that fields are read-only."""
        with pytest.raises(FrozenInstanceError):
            error.message = "changed"  # type: ignore[misc]

    def test_equality_and_hash(self) -> None:
        """Test structural equality."""
        assert Error.of("x", 1) == Error.of("x", 1)
        assert hash(Error.of("x", 1)) == hash(Error.of("x", 1))
        assert Error("x") != Error("y")

    def test_pickle_and_copy(self, error_with_metadata: Error) -> None:
        """Test that errors survive copying and pickling."""
        assert pickle.loads(pickle.dumps(error_with_metadata)) == error_with_metadata
        assert copy.deepcopy(error_with_metadata) == error_with_metadata


class TestErrorContract:
    """Tests for the IError protocol."""

    def test_error_satisfies_protocol(self, error: Error) -> None:
        """Test default implementation."""
        assert isinstance(error, IError)

    def test_subclass_satisfies_protocol(self) -> None:
        """Test error subclasses."""
        err = NotFoundError("missing")
        assert isinstance(err, IError)
        assert isinstance(err, Error)

    def test_independent_implementation(self) -> None:
        """Test that any object with message and metadata qualifies."""
        assert isinstance(ValidationFailure("bad"), IError)

    def test_plain_object_is_not_error(self) -> None:
        """Test that unrelated objects do not qualify."""
        assert not isinstance("boom", IError)
        assert not isinstance(ValueError("boom"), IError)


class TestContractExceptions:
    """Tests for contract violation exceptions."""

    def test_null_reference_is_type_error(self) -> None:
        """Test builtin compatibility."""
        exc = NullReferenceError("error")
        assert isinstance(exc, TypeError)
        assert isinstance(exc, ResultContractError)
        assert exc.parameter == "error"
        assert exc.details == {"parameter": "error"}

    def test_invalid_argument_is_value_error(self) -> None:
        """Test builtin compatibility and message."""
        exc = InvalidArgumentError("message", "must be a non-empty string", "")
        assert isinstance(exc, ValueError)
        assert "Invalid argument 'message'" in str(exc)
