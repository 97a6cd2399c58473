"""
Demo data for a fresh store.

Rows come from a CSV (``firstName,lastName,salary,age,jobTitle,email,
contractHireDate``) and go through ``EmployeeService.create``, so every
seeded record obeys the same rules as one created over HTTP.
"""

from pathlib import Path
from typing import Optional
import logging

import pandas as pd

from app.exceptions import EmployeeServiceError
from app.schemas import CreateEmployeeRequest
from app.services import EmployeeService

logger = logging.getLogger("seed")

READ_CSV_KW = dict(
    dtype=str,
    keep_default_na=False,
    na_values=["", " ", "NA", "NaN", "nan", "NULL", "Null", "None", "none"],
)
REQUIRED_COLUMNS = ["firstName", "lastName"]
OPTIONAL_COLUMNS = ["salary", "age", "jobTitle", "email", "contractHireDate"]


class SeedRowError(ValueError):
    """A CSV cell could not be converted to its field type."""


def _clean(x) -> Optional[str]:
    if x is None or pd.isna(x):
        return None
    s = str(x).strip()
    return s or None


def _to_int(x, column: str) -> Optional[int]:
    s = _clean(x)
    if s is None:
        return None
    try:
        return int(float(s)) if "." in s else int(s)
    except (ValueError, OverflowError):
        raise SeedRowError(f"{column} is not an integer: {s!r}")


def _to_datetime(x):
    """Parse an ISO-ish timestamp into an aware datetime (UTC when naive)."""
    s = _clean(x)
    if s is None:
        return None
    ts = pd.to_datetime(s, utc=True, errors="coerce")
    if pd.isna(ts):
        raise SeedRowError(f"contractHireDate is not a timestamp: {s!r}")
    return ts.to_pydatetime()


def read_seed_file(path: Path) -> pd.DataFrame:
    df = pd.read_csv(path, **READ_CSV_KW)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"seed file {path} is missing columns {missing}")
    for column in OPTIONAL_COLUMNS:
        if column not in df.columns:
            df[column] = None
    return df


def row_to_request(row) -> CreateEmployeeRequest:
    return CreateEmployeeRequest(
        first_name=_clean(row.get("firstName")),
        last_name=_clean(row.get("lastName")),
        salary=_to_int(row.get("salary"), "salary"),
        age=_to_int(row.get("age"), "age"),
        job_title=_clean(row.get("jobTitle")),
        email=_clean(row.get("email")),
        contract_hire_date=_to_datetime(row.get("contractHireDate")),
    )


def seed_employees(service: EmployeeService, path: Path) -> dict:
    """Create one employee per valid CSV row.

    Returns a summary dict ``{"rows", "created", "skipped"}``. A missing
    file seeds nothing.
    """
    if not path.exists():
        logger.warning("seed file %s not found, starting with an empty store", path)
        return {"rows": 0, "created": 0, "skipped": 0}

    df = read_seed_file(path)
    created = skipped = 0
    for idx, row in df.iterrows():
        try:
            service.create(row_to_request(row))
            created += 1
        except (SeedRowError, EmployeeServiceError) as exc:
            skipped += 1
            logger.info("reject_row", extra={"row_index": int(idx), "reason": str(exc)})

    logger.info("seeded %d employees from %s (%d skipped)", created, path, skipped)
    return {"rows": len(df), "created": created, "skipped": skipped}
