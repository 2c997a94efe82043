"""
13th-month pay: one twelfth of the monthly salary, rounded half-up to cents.
Every calculation is appended to the history; repeated calls are not deduplicated.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP

from sqlalchemy.ext.asyncio import AsyncSession

from payroll_api.core.exceptions import InvalidArgumentError, NotFoundError
from payroll_api.models.employee import Employee
from payroll_api.models.history import History
from payroll_api.services.store import RecordStore, HistoryStore
from payroll_api.services.validation import validate_monthly_salary

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = Decimal(12)


def round_half_up(value, places: int = 2) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def thirteenth_month_pay(monthly_salary) -> Decimal:
    return round_half_up(Decimal(str(monthly_salary)) / MONTHS_PER_YEAR)


class ThirteenthMonthService:

    def __init__(self, db: AsyncSession):
        self.db = db
        self.employees = RecordStore(db, Employee)
        self.history = HistoryStore(db)

    async def calculate(self, employee_id) -> Decimal:
        """Computes the pay for ``employee_id`` and appends one History row.

        Lookup and append are not one transaction; an employee removed in
        between still gets its row.
        """
        if employee_id is None or not str(employee_id).strip():
            raise InvalidArgumentError("employeeId required")

        employee = await self.employees.get(employee_id)
        if employee is None:
            raise NotFoundError("Employee not found")

        validate_monthly_salary(employee.monthly_salary).raise_for_errors()

        pay = thirteenth_month_pay(employee.monthly_salary)
        await self.history.create(History(employee_id=employee.id, pay=pay))
        logger.info("13th month pay for employee %s: %s", employee.id, pay)
        return pay
