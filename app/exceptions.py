# app/exceptions.py
"""
Typed service errors. Each carries the HTTP status the API maps it to;
main.py turns them into {"message": ...} JSON responses.
"""

from fastapi import status


class ServiceError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestError(ServiceError):
    """Malformed or missing input, e.g. an invalid user id."""
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ServiceError):
    """Credentials did not match."""
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(ServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(ServiceError):
    """Store or unexpected failure. Message is generic; details go to the log only."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
