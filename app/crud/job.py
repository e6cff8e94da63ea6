"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs. Lookups that miss raise NotFoundError; database errors propagate
unchanged to the application's exception handlers.
"""

from typing import List
from sqlalchemy.orm import Session, joinedload
from app.core.errors import BadRequestError, NotFoundError
from app.crud import company as company_crud
from app.models.job import Job
from app.schemas.job import JobNew, JobSearch, JobUpdate

UPDATABLE_FIELDS = ("title", "salary", "equity")


def _like_escape(text: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return text.replace("/", "//").replace("%", "/%").replace("_", "/_")


def create(db: Session, job_data: JobNew) -> Job:
    """
    Create a new job in the database.

    Args:
        db: Database session
        job_data: Validated job creation data

    Returns:
        Created Job instance with id

    Raises:
        BadRequestError: company_handle does not reference an existing company
    """
    if company_crud.get_by_handle(db, job_data.company_handle) is None:
        raise BadRequestError(f"No company: {job_data.company_handle}")

    db_job = Job(
        title=job_data.title,
        salary=job_data.salary,
        equity=job_data.equity,
        company_handle=job_data.company_handle
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def find_all(db: Session, filters: JobSearch) -> List[Job]:
    """
    Retrieve jobs matching the given filters, ordered by title.

    - min_salary: salary >= min_salary
    - has_equity: only jobs with equity > 0 when True; no equity filter when False
    - title: case-insensitive substring match
    """
    query = db.query(Job).options(joinedload(Job.company))

    if filters.min_salary is not None:
        query = query.filter(Job.salary >= filters.min_salary)

    if filters.has_equity:
        query = query.filter(Job.equity > 0)

    if filters.title is not None:
        query = query.filter(Job.title.ilike(f"%{_like_escape(filters.title)}%", escape="/"))

    return query.order_by(Job.title, Job.id).all()


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID, with its company loaded.

    Raises:
        NotFoundError: No job with that ID
    """
    job = (
        db.query(Job)
        .options(joinedload(Job.company))
        .filter(Job.id == job_id)
        .first()
    )

    if not job:
        raise NotFoundError(f"No job: {job_id}")

    return job


def update(db: Session, job_id: int, job_data: JobUpdate) -> Job:
    """
    Partially update a job. Only fields present in the request are changed.

    Raises:
        BadRequestError: The request contained no fields
        NotFoundError: No job with that ID
    """
    changes = job_data.model_dump(exclude_unset=True)
    if not changes:
        raise BadRequestError("No data")

    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    for field in UPDATABLE_FIELDS:
        if field in changes:
            setattr(job, field, changes[field])

    db.commit()
    db.refresh(job)

    return job


def remove(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: No job with that ID
    """
    job = db.query(Job).filter(Job.id == job_id).first()
    if not job:
        raise NotFoundError(f"No job: {job_id}")

    db.delete(job)
    db.commit()
