from payroll_api.models.employee import Employee
from payroll_api.models.payroll import Payroll
from payroll_api.models.history import History

__all__ = [
    "Employee",
    "Payroll",
    "History",
]
