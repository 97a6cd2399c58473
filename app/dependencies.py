from fastapi import Request
from app.core.config import Settings
from app.services import EmployeeService


# one service (and store) per application, built in create_app
def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings
