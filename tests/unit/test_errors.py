"""Tests for the store error hierarchy."""

import pytest

from shopify_session_storage.errors import (
    ConnectionError,
    QueryError,
    SchemaError,
    StoreError,
)


@pytest.mark.parametrize("error_cls", [ConnectionError, SchemaError, QueryError])
def test_subclasses_store_error(error_cls) -> None:
    """Every backend error can be caught as StoreError."""
    assert issubclass(error_cls, StoreError)


def test_cause_is_kept() -> None:
    """The wrapped driver exception is available as ``cause``."""
    cause = OSError("connection refused")
    error = ConnectionError("Failed to connect", cause=cause)

    assert error.cause is cause
    assert str(error) == "Failed to connect"


def test_cause_defaults_to_none() -> None:
    assert QueryError("boom").cause is None
