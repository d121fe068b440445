"""
Employees (site workers) API Endpoints
"""

from typing import List

from fastapi import APIRouter, Depends

from ..deps import employee_service
from ..models import Employee, EmployeeIn
from ..service import EmployeeService

router = APIRouter()


@router.get("", response_model=List[Employee])
async def list_employees(service: EmployeeService = Depends(employee_service)):
    return service.list()


@router.post("", response_model=Employee, status_code=201)
async def create_employee(data: EmployeeIn, service: EmployeeService = Depends(employee_service)):
    """Create an employee; dailyWage must be a number"""
    return service.create(data)


@router.patch("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: int,
    data: EmployeeIn,
    service: EmployeeService = Depends(employee_service),
):
    return service.update(employee_id, data)


@router.delete("/{employee_id}", response_model=Employee)
async def delete_employee(employee_id: int, service: EmployeeService = Depends(employee_service)):
    return service.delete(employee_id)
