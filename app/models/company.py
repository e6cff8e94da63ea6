"""
Company database model.

Companies own job postings. This service only reads them: a job's
company_handle must reference an existing row, and job detail responses embed
the full company record.
"""

from sqlalchemy import Column, Integer, String, Text, CheckConstraint
from sqlalchemy.orm import relationship
from app.core.database import Base


class Company(Base):
    __tablename__ = "companies"
    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )

    handle = Column(String(25), primary_key=True)
    name = Column(Text, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    num_employees = Column(Integer, nullable=True)
    logo_url = Column(Text, nullable=True)

    # Deleting a company removes its jobs
    jobs = relationship("Job", back_populates="company", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
