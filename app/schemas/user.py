"""
Pydantic schemas for the authenticated caller.
"""

from pydantic import BaseModel


class TokenUser(BaseModel):
    """Caller identity decoded from a bearer token."""
    username: str
    is_admin: bool = False
