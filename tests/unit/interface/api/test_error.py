"""Unit tests for HTTP error mapping."""

import pytest

from showcase.domain.error import (
    CommentHasRepliesError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
    SelfVoteError,
    UsernameTakenError,
    ValidationError,
)
from showcase.interface.error import to_http_exception


class TestToHttpException:
    """Tests for to_http_exception."""

    @pytest.mark.parametrize(
        "error,status_code",
        [
            (NotAuthenticatedError("vote"), 401),
            (NotAuthorizedError("product", "1", "2"), 403),
            (SelfVoteError("1", "2"), 403),
            (NotFoundError("Product", "1"), 404),
            (CommentHasRepliesError("1", 2), 409),
            (UsernameTakenError("maker"), 409),
            (ValidationError("Comment content cannot be empty"), 400),
            (ValueError("Must be an http(s) URL"), 400),
        ],
    )
    def test_status_codes(self, error, status_code):
        """Each error kind should map to its HTTP status."""
        exc = to_http_exception(error)

        assert exc.status_code == status_code
        assert exc.detail == str(error)
