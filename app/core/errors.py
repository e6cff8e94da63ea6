"""
Failure types raised by the API and the CRUD layer.

All of them are HTTPException subclasses, so FastAPI's exception handling
turns them into `{"detail": ...}` responses without any per-endpoint
try/except.
"""

from typing import List, Union
from fastapi import HTTPException, status


class BadRequestError(HTTPException):
    """Payload or query failed validation. `detail` holds the violation messages."""

    def __init__(self, detail: Union[str, List[str]] = "Bad Request"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class UnauthorizedError(HTTPException):
    def __init__(self, detail: str = "Could not validate credentials"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(HTTPException):
    def __init__(self, detail: str = "Admin privileges required"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFoundError(HTTPException):
    def __init__(self, detail: str = "Not Found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
