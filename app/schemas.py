from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, StrictInt
from pydantic.alias_generators import to_camel


class _EmployeeRequest(BaseModel):
    # unknown keys (contractTerminationDate included) are dropped
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    # strict: JSON true/false and "5" are type errors, not 1/0/5
    salary: Optional[StrictInt] = None
    age: Optional[StrictInt] = None
    job_title: Optional[str] = None
    email: Optional[str] = None
    contract_hire_date: Optional[datetime] = None


class CreateEmployeeRequest(_EmployeeRequest):
    """Payload for POST /employee. firstName and lastName are checked by the service."""


class UpdateEmployeeRequest(_EmployeeRequest):
    """Payload for PATCH /employee/{uuid}. A ``None`` field leaves the stored value as is."""
