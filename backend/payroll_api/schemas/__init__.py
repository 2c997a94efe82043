from payroll_api.schemas.employee import EmployeeCreate, EmployeeOut
from payroll_api.schemas.payroll import PayrollCreate, PayrollOut
from payroll_api.schemas.history import CalculateRequest, CalculateOut, HistoryOut

__all__ = [
    "EmployeeCreate", "EmployeeOut",
    "PayrollCreate", "PayrollOut",
    "CalculateRequest", "CalculateOut", "HistoryOut",
]
