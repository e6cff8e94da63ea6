"""
Validation of request payloads against the named job schemas.

`validate` reports violations as a list of human-readable messages (empty when
the payload is valid). `parse` is what the endpoints use: it returns the typed
model or raises BadRequestError carrying the same messages.
"""

from typing import Any, Dict, List, Literal, Type

from pydantic import BaseModel, ValidationError

from app.core.errors import BadRequestError
from app.schemas.job import JobNew, JobSearch, JobUpdate

SchemaName = Literal["create", "update", "search"]

SCHEMAS: Dict[str, Type[BaseModel]] = {
    "create": JobNew,
    "update": JobUpdate,
    "search": JobSearch,
}


def format_error(error: Dict[str, Any]) -> str:
    """Render one pydantic error as a single message."""
    path = ".".join(str(part) for part in error["loc"])

    if error["type"] == "missing":
        return f'instance requires property "{path}"'
    if error["type"] == "extra_forbidden":
        return f'instance is not allowed to have the additional property "{path}"'

    prefix = f"instance.{path}" if path else "instance"
    return f"{prefix} {error['msg']}"


def parse(payload: Any, schema_name: SchemaName) -> BaseModel:
    """
    Validate `payload` and return the typed model.

    Raises:
        KeyError: Unknown schema name
        BadRequestError: One message per violation
    """
    schema = SCHEMAS[schema_name]
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise BadRequestError([format_error(err) for err in e.errors()])


def validate(payload: Any, schema_name: SchemaName) -> List[str]:
    """Return the violation messages for `payload`; an empty list means valid."""
    try:
        parse(payload, schema_name)
    except BadRequestError as e:
        return list(e.detail)
    return []
