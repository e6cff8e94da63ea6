"""
Read-only CRUD operations for the Company model.
"""

from typing import Optional
from sqlalchemy.orm import Session
from app.models.company import Company


def get_by_handle(db: Session, handle: str) -> Optional[Company]:
    """
    Retrieve a company by its handle.

    Returns:
        Company instance if found, None otherwise
    """
    return db.query(Company).filter(Company.handle == handle).first()
