"""Tests for the exception hierarchy."""

import pytest

from propledger.exceptions import (
    ConfigurationError,
    EntityNotFoundError,
    InvalidInputError,
    PropLedgerError,
    ReferentialIntegrityError,
    SnapshotError,
)


@pytest.mark.parametrize(
    "exc_class",
    [ConfigurationError, EntityNotFoundError, InvalidInputError, ReferentialIntegrityError, SnapshotError],
)
def test_all_errors_derive_from_base(exc_class: type) -> None:
    with pytest.raises(PropLedgerError, match="detail"):
        raise exc_class("detail")


def test_referential_integrity_is_not_found() -> None:
    """A dangling reference is a kind of missing entity."""
    assert issubclass(ReferentialIntegrityError, EntityNotFoundError)
    assert not issubclass(InvalidInputError, EntityNotFoundError)
