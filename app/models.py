from datetime import datetime
from typing import Optional
from uuid import UUID
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Employee(BaseModel):
    """Stored employee record.

    Instances are frozen; updates go through ``model_copy(update=...)`` and
    the new value replaces the old one in the store.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    uuid: UUID
    first_name: str
    last_name: str
    full_name: str
    salary: Optional[int] = None
    age: Optional[int] = None
    job_title: Optional[str] = None
    email: Optional[str] = None
    contract_hire_date: Optional[datetime] = None
    # set by the system only; no request shape carries it
    contract_termination_date: Optional[datetime] = None
