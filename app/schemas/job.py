"""
Pydantic schemas for jobs.

Request schemas (JobNew, JobUpdate, JobSearch) are strict structural
contracts: camelCase keys on the wire, no type coercion, and unknown keys
rejected. Response schemas serialize ORM objects back to camelCase JSON.
"""

from decimal import Decimal, InvalidOperation
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.core.filters import Unparseable
from app.schemas.company import CompanyResponse

# jobs.salary is a 32-bit INTEGER column
MAX_SALARY = 2_147_483_647


def _parse_equity(v):
    """Accept a JSON number or numeric string and turn it into a Decimal."""
    if v is None or isinstance(v, Decimal):
        return v
    # bool is an int subclass; true/false is never a valid equity
    if isinstance(v, bool) or not isinstance(v, (int, float, str)):
        raise PydanticCustomError("decimal_type", "Input should be a number or numeric string")
    try:
        return Decimal(str(v).strip())
    except InvalidOperation:
        raise PydanticCustomError("decimal_parsing", "Input should be a number or numeric string")


class _RequestSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, extra="forbid", strict=True)


class JobNew(_RequestSchema):
    """Schema for creating a new job"""
    title: str = Field(..., min_length=1)
    company_handle: str = Field(..., min_length=1)
    salary: Optional[int] = Field(default=None, ge=0, le=MAX_SALARY)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)

    @field_validator("equity", mode="before")
    @classmethod
    def parse_equity(cls, v):
        return _parse_equity(v)


class JobUpdate(_RequestSchema):
    """Schema for a partial job update. id and companyHandle are not updatable."""
    # may be omitted, but never null: jobs.title is NOT NULL
    title: str = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0, le=MAX_SALARY)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)

    @field_validator("equity", mode="before")
    @classmethod
    def parse_equity(cls, v):
        return _parse_equity(v)


class JobSearch(_RequestSchema):
    """Schema for normalized listing filters"""
    min_salary: Optional[int] = Field(default=None, ge=0)
    has_equity: bool = False
    title: Optional[str] = Field(default=None, min_length=1)

    @field_validator("min_salary", mode="before")
    @classmethod
    def reject_unparseable(cls, v):
        if isinstance(v, Unparseable):
            raise PydanticCustomError("int_parsing", '"{raw}" is not an integer', {"raw": v.raw})
        return v


class _ResponseSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class JobResponse(_ResponseSchema):
    """Job as returned by create and update"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str


class JobListItem(JobResponse):
    """Job as returned in listings, with the owning company's name"""
    company_name: Optional[str] = None


class JobDetailResponse(_ResponseSchema):
    """Job with its full company record"""
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company: CompanyResponse


class JobEnvelope(BaseModel):
    job: JobResponse


class JobDetailEnvelope(BaseModel):
    job: JobDetailResponse


class JobListEnvelope(BaseModel):
    jobs: List[JobListItem]


class JobDeletedResponse(BaseModel):
    deleted: int
