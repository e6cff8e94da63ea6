"""
FastAPI dependencies for authentication and authorization.

The admin gate runs before the request body is read and before any
validation or database work, so rejected callers never touch the job tables.
"""

import logging
from typing import Any, Optional
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.core.errors import BadRequestError, ForbiddenError, UnauthorizedError
from app.core.security import JWTError, decode_token
from app.schemas.user import TokenUser

logger = logging.getLogger(__name__)

# HTTP Bearer token scheme (Authorization: Bearer <token>)
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> Optional[TokenUser]:
    """
    Extract the caller from the JWT token if one was sent.

    Returns None when no token is provided or the token does not verify.
    """
    if not credentials:
        return None

    try:
        payload = decode_token(credentials.credentials)
    except JWTError as e:
        logger.warning(f"Rejected bearer token: {e}")
        return None

    username = payload.get("sub")
    if username is None:
        return None

    return TokenUser(username=username, is_admin=bool(payload.get("is_admin", False)))


async def get_admin_user(
    user: Optional[TokenUser] = Depends(get_current_user),
) -> TokenUser:
    """
    Require an authenticated admin.

    Raises:
        UnauthorizedError 401: No valid token
        ForbiddenError 403: Token is valid but the user is not an admin
    """
    if user is None:
        raise UnauthorizedError()

    if not user.is_admin:
        logger.info(f"Non-admin user {user.username} denied access to admin route")
        raise ForbiddenError()

    return user


async def get_admin_json_body(
    request: Request,
    admin_user: TokenUser = Depends(get_admin_user),
) -> Any:
    """
    Decode the JSON request body once the caller has passed the admin gate.

    Raises:
        BadRequestError 400: Body is empty or not valid JSON
    """
    try:
        return await request.json()
    except ValueError:
        raise BadRequestError(["instance is not valid JSON"])
