"""
Query-string normalization for the job listing endpoint.

Query values arrive as strings. `normalize_filters` turns them into the
typed values the search schema expects and never raises: a value that cannot
be parsed is wrapped in `Unparseable` so validation reports it instead of it
silently becoming 0.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Unparseable:
    """Marker for a query value that could not be converted to its target type."""
    raw: str


_INT_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


def parse_int(raw: str) -> Any:
    # int() alone would also accept "1_000" and non-ASCII digits
    if not _INT_RE.fullmatch(raw):
        return Unparseable(raw)
    return int(raw)


def normalize_filters(query: Mapping[str, str]) -> Dict[str, Any]:
    """
    Coerce raw listing filters.

    - minSalary: base-10 integer, otherwise Unparseable
    - hasEquity: always set; True only for the exact string "true"
    - everything else passes through unchanged
    """
    filters: Dict[str, Any] = dict(query)

    if "minSalary" in filters:
        filters["minSalary"] = parse_int(filters["minSalary"])

    filters["hasEquity"] = query.get("hasEquity") == "true"

    return filters
