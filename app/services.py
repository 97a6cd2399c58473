# app/services.py
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4
import logging

from app.db import EmployeeStore
from app.exceptions import MissingBodyError, NotFoundError, ValidationError
from app.models import Employee
from app.schemas import CreateEmployeeRequest, UpdateEmployeeRequest
from app.validators import is_blank, is_valid_age, is_valid_email, is_valid_salary

logger = logging.getLogger("employees")


def _require_name(value: Optional[str], field: str) -> None:
    if is_blank(value):
        raise ValidationError(field, f"{field} is required")


def _check_optional_fields(req) -> None:
    """Check salary, age, jobTitle and email, in that order, when supplied."""
    if req.salary is not None and not is_valid_salary(req.salary):
        raise ValidationError("salary", "salary must be >= 0")
    if req.age is not None and not is_valid_age(req.age):
        raise ValidationError("age", "age must be between 0 and 100")
    if req.job_title is not None and is_blank(req.job_title):
        raise ValidationError("jobTitle", "jobTitle must not be blank")
    if req.email is not None and not is_valid_email(req.email):
        raise ValidationError("email", "email must be a valid email address")


def _strip(value: Optional[str]) -> Optional[str]:
    return value.strip() if value is not None else None


class EmployeeService:
    """Validation and mutation rules for employee records.

    The only writer of the store it is given. Updates validate every
    supplied field before anything is written, so a rejected update leaves
    the stored record as it was.

    Update and delete are not atomic as a whole: a delete that lands between
    an update's lookup and its write-back is undone by the write-back.
    """

    def __init__(self, store: EmployeeStore):
        self._store = store

    def list(self) -> List[Employee]:
        return self._store.list_all()

    def get(self, employee_id: UUID) -> Employee:
        employee = self._store.get(employee_id)
        if employee is None:
            logger.info("employee_not_found", extra={"uuid": str(employee_id)})
            raise NotFoundError(employee_id)
        return employee

    def create(self, req: Optional[CreateEmployeeRequest]) -> Employee:
        if req is None:
            raise MissingBodyError()
        _require_name(req.first_name, "firstName")
        _require_name(req.last_name, "lastName")
        _check_optional_fields(req)

        first = req.first_name.strip()
        last = req.last_name.strip()
        employee = Employee(
            uuid=uuid4(),
            first_name=first,
            last_name=last,
            full_name=f"{first} {last}",
            salary=req.salary,
            age=req.age,
            job_title=_strip(req.job_title),
            email=_strip(req.email),
            contract_hire_date=req.contract_hire_date or datetime.now(timezone.utc),
        )
        self._store.put(employee.uuid, employee)
        logger.info("employee_created", extra={"uuid": str(employee.uuid)})
        return employee

    def update(self, employee_id: UUID, req: Optional[UpdateEmployeeRequest]) -> Employee:
        if req is None:
            raise MissingBodyError()
        current = self.get(employee_id)

        if req.first_name is not None:
            _require_name(req.first_name, "firstName")
        if req.last_name is not None:
            _require_name(req.last_name, "lastName")
        _check_optional_fields(req)

        changes = {}
        if req.first_name is not None:
            changes["first_name"] = req.first_name.strip()
        if req.last_name is not None:
            changes["last_name"] = req.last_name.strip()
        if changes:
            first = changes.get("first_name", current.first_name).strip()
            last = changes.get("last_name", current.last_name).strip()
            changes["full_name"] = f"{first} {last}".strip()
        if req.salary is not None:
            changes["salary"] = req.salary
        if req.age is not None:
            changes["age"] = req.age
        if req.job_title is not None:
            changes["job_title"] = req.job_title.strip()
        if req.email is not None:
            changes["email"] = req.email.strip()
        if req.contract_hire_date is not None:
            changes["contract_hire_date"] = req.contract_hire_date

        updated = current.model_copy(update=changes)
        self._store.put(employee_id, updated)
        logger.info("employee_updated", extra={"uuid": str(employee_id), "fields": sorted(changes)})
        return updated

    def delete(self, employee_id: UUID) -> None:
        if self._store.remove(employee_id) is None:
            logger.info("employee_not_found", extra={"uuid": str(employee_id)})
            raise NotFoundError(employee_id)
        logger.info("employee_deleted", extra={"uuid": str(employee_id)})
