"""Custom exceptions for the teleprompter service."""

from fastapi import HTTPException, status


class TeleprompterException(Exception):
    """Base exception for teleprompter service."""

    pass


class PromptNotFoundException(TeleprompterException):
    """Raised when a prompt has no current value."""

    pass


class VersionNotFoundException(TeleprompterException):
    """Raised when a prompt has no history entry with the requested version."""

    pass


class InvalidPromptException(TeleprompterException):
    """Raised when a prompt id, body or version is malformed."""

    pass


# HTTP exception mappers
def map_to_http_exception(exc: TeleprompterException) -> HTTPException:
    """Map service exceptions to HTTP exceptions."""
    if isinstance(exc, (PromptNotFoundException, VersionNotFoundException)):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    elif isinstance(exc, InvalidPromptException):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    else:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        )
