# app/routers/employees.py
from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Body, Depends, Response, status
from app.dependencies import get_employee_service
from app.models import Employee
from app.schemas import CreateEmployeeRequest, UpdateEmployeeRequest
from app.services import EmployeeService

router = APIRouter()

NOT_FOUND = {404: {"description": "Employee not found"}}
BAD_REQUEST = {400: {"description": "Missing body or invalid field"}}


@router.get("/employee", tags=["Employees"], summary="List employees",
            response_model=List[Employee])
def list_employees(service: EmployeeService = Depends(get_employee_service)):
    return service.list()


@router.get("/employee/{uuid}", tags=["Employees"], summary="Get an employee",
            response_model=Employee, responses=NOT_FOUND)
def get_employee(uuid: UUID, service: EmployeeService = Depends(get_employee_service)):
    return service.get(uuid)


@router.post("/employee", tags=["Employees"], summary="Create an employee",
             response_model=Employee, status_code=status.HTTP_201_CREATED,
             responses=BAD_REQUEST)
def create_employee(
    payload: Optional[CreateEmployeeRequest] = Body(default=None),
    service: EmployeeService = Depends(get_employee_service),
):
    return service.create(payload)


@router.patch("/employee/{uuid}", tags=["Employees"], summary="Partially update an employee",
              response_model=Employee, responses={**NOT_FOUND, **BAD_REQUEST})
def update_employee(
    uuid: UUID,
    payload: Optional[UpdateEmployeeRequest] = Body(default=None),
    service: EmployeeService = Depends(get_employee_service),
):
    return service.update(uuid, payload)


@router.delete("/employee/{uuid}", tags=["Employees"], summary="Delete an employee",
               status_code=status.HTTP_204_NO_CONTENT, response_class=Response,
               responses=NOT_FOUND)
def delete_employee(uuid: UUID, service: EmployeeService = Depends(get_employee_service)):
    service.delete(uuid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
