from fastapi import APIRouter, status

from payroll_api.api.deps import DB
from payroll_api.core.exceptions import PersistenceError
from payroll_api.models.employee import Employee
from payroll_api.schemas.employee import EmployeeCreate, EmployeeOut
from payroll_api.services.store import RecordStore
from payroll_api.services.validation import validate_employee

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("", response_model=list[EmployeeOut])
async def list_employees(db: DB):
    try:
        return await RecordStore(db, Employee).list_all()
    except PersistenceError as exc:
        raise PersistenceError("Failed to fetch employees.") from exc


@router.post("", response_model=EmployeeOut, status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeeCreate, db: DB):
    validate_employee(payload).raise_for_errors()

    employee = Employee(
        name=payload.name,
        position=payload.position,
        department=payload.department,
        monthly_salary=payload.monthly_salary,
        # leere Zeiten = nicht erfasst
        time_in=payload.time_in or None,
        time_out=payload.time_out or None,
    )
    try:
        return await RecordStore(db, Employee).create(employee)
    except PersistenceError as exc:
        raise PersistenceError("Failed to add employee.") from exc
