"""HTTP error mapping for domain errors."""

import logfire
from fastapi import HTTPException, status

from showcase.domain.error import (
    BusinessRuleViolationError,
    DomainError,
    NotAuthenticatedError,
    NotAuthorizedError,
    NotFoundError,
)


def to_http_exception(error: DomainError | ValueError) -> HTTPException:
    """Translate a domain or validation error into an HTTP error response.

    NotAuthenticated -> 401, NotAuthorized (incl. self-votes) -> 403,
    NotFound -> 404, business rule violations -> 409, anything else
    (domain ValidationError, ValueError from request models) -> 400.

    Args:
        error: Error raised by a use case or while building its request

    Returns:
        HTTPException carrying the matching status code and the error message
    """
    if isinstance(error, NotAuthenticatedError):
        code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(error, NotAuthorizedError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, BusinessRuleViolationError):
        code = status.HTTP_409_CONFLICT
    else:
        code = status.HTTP_400_BAD_REQUEST

    logfire.warn(
        "Request failed",
        status_code=code,
        error_type=type(error).__name__,
        error=str(error),
    )
    return HTTPException(status_code=code, detail=str(error))
