"""Error taxonomy translated to HTTP responses by bloglist.middleware.errors."""

from fastapi import status


class BloglistError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BloglistError):
    """Missing or malformed fields, or a badly formatted id."""

    status_code = status.HTTP_400_BAD_REQUEST


class Unauthenticated(BloglistError):
    """Bearer token missing, invalid, or expired."""

    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(BloglistError):
    # Answered with 401 like an authentication failure, not 403
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(BloglistError):
    status_code = status.HTTP_404_NOT_FOUND
