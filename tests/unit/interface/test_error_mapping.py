"""Unit tests for domain error to HTTP status mapping."""

import pytest

from gallery.adapter.error import ImageHostError
from gallery.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    StoreUnavailableError,
    UnauthenticatedError,
    ValidationError,
)
from gallery.interface.error import status_code_for


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (UnauthenticatedError("vote"), 401),
        (ForbiddenError("delete designs", "u1"), 403),
        (NotFoundError("Design", "d1"), 404),
        (ValidationError("Title must not be blank"), 422),
        (BusinessRuleViolationError("confirm required"), 409),
        (ImageHostError("rejected", status_code=400), 502),
        (StoreUnavailableError("down"), 503),
        (DomainError("other"), 400),
    ],
)
def test_status_code_for(error, expected):
    assert status_code_for(error) == expected
