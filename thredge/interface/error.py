"""Translation of domain errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from thredge.domain.error import (
    CycleDetectedError,
    DepthLimitExceededError,
    DomainError,
    EntryLockedError,
    NotFoundError,
    SelfContainmentError,
    TargetNotFoundError,
    ValidationError,
)

# Checked in order; the first matching class wins
_STATUS_BY_ERROR: list[tuple[type[Exception], int]] = [
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    # Target vanished under a concurrent edit: client refreshes and retries
    (TargetNotFoundError, status.HTTP_409_CONFLICT),
    (CycleDetectedError, status.HTTP_409_CONFLICT),
    (DepthLimitExceededError, status.HTTP_400_BAD_REQUEST),
    (SelfContainmentError, status.HTTP_400_BAD_REQUEST),
    (EntryLockedError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (ValueError, status.HTTP_400_BAD_REQUEST),
]


def to_http_exception(error: DomainError | ValueError) -> HTTPException:
    """Map a domain error (or a malformed ID) to an HTTPException.

    Args:
        error: The error raised by a use case

    Returns:
        HTTPException carrying the error message as detail
    """
    status_code = next(
        (code for cls, code in _STATUS_BY_ERROR if isinstance(error, cls)),
        status.HTTP_400_BAD_REQUEST,
    )
    if status_code == status.HTTP_409_CONFLICT:
        logfire.warn("Request conflicts with current thread state", error=str(error))
    return HTTPException(status_code=status_code, detail=str(error))
