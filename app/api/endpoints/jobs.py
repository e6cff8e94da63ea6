import logging
from typing import Any
from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_json_body, get_admin_user
from app.core.filters import normalize_filters
from app.core.validation import parse
from app.crud import job as job_crud
from app.schemas.job import (
    JobDeletedResponse,
    JobDetailEnvelope,
    JobDetailResponse,
    JobEnvelope,
    JobListEnvelope,
    JobListItem,
    JobResponse,
)
from app.schemas.user import TokenUser

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobEnvelope)
def create_job(
    payload: Any = Depends(get_admin_json_body),
    db: Session = Depends(get_db),
    admin_user: TokenUser = Depends(get_admin_user)
):
    """
    Create a job. Admin only.

    Body: { title, companyHandle, salary?, equity? }
    Returns { job: { id, title, salary, equity, companyHandle } }
    """
    job_data = parse(payload, "create")
    new_job = job_crud.create(db, job_data)

    logger.info(f"Admin {admin_user.username} created job {new_job.id}: {new_job.title}")
    return {"job": JobResponse.model_validate(new_job)}


@router.get("/", response_model=JobListEnvelope)
def list_jobs(request: Request, db: Session = Depends(get_db)):
    """
    List jobs, optionally filtered.

    Query filters:
    - minSalary: integer, jobs paying at least this much
    - hasEquity: "true" to only return jobs with non-zero equity
    - title: case-insensitive substring of the job title

    Returns { jobs: [ { id, title, salary, equity, companyHandle, companyName }, ... ] }
    """
    filters = parse(normalize_filters(request.query_params), "search")
    jobs = job_crud.find_all(db, filters)
    return {"jobs": [JobListItem.model_validate(job) for job in jobs]}


@router.get("/{job_id}", response_model=JobDetailEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """
    Retrieve a job by ID.

    Returns { job: { id, title, salary, equity, company } }
    where company is { handle, name, description, numEmployees, logoUrl }
    """
    job = job_crud.get(db, job_id)
    return {"job": JobDetailResponse.model_validate(job)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    payload: Any = Depends(get_admin_json_body),
    db: Session = Depends(get_db),
    admin_user: TokenUser = Depends(get_admin_user)
):
    """
    Partially update a job. Admin only.

    Body can include { title, salary, equity }; id and companyHandle are fixed.
    """
    job_data = parse(payload, "update")
    job = job_crud.update(db, job_id, job_data)

    logger.info(f"Admin {admin_user.username} updated job {job_id}")
    return {"job": JobResponse.model_validate(job)}


@router.delete("/{job_id}", response_model=JobDeletedResponse)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: TokenUser = Depends(get_admin_user)
):
    """
    Delete a job by ID. Admin only.
    """
    job_crud.remove(db, job_id)

    logger.info(f"Admin {admin_user.username} deleted job {job_id}")
    return {"deleted": job_id}
