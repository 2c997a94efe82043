"""
Validation layer: explicit field checks applied before anything is persisted.
Each validator returns a ValidationResult; callers decide when to raise.
"""
import math
import re
from dataclasses import dataclass, field
from decimal import Decimal

from payroll_api.core.exceptions import ValidationError
from payroll_api.schemas.employee import EmployeeCreate
from payroll_api.schemas.payroll import PayrollCreate, PAYROLL_AMOUNT_FIELDS

TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


@dataclass
class FieldError:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field} {self.message}"


@dataclass
class ValidationResult:
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.errors) == 0

    def add(self, field_name: str, message: str) -> None:
        self.errors.append(FieldError(field_name, message))

    def merge(self, other: "ValidationResult") -> None:
        self.errors.extend(other.errors)

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValidationError("; ".join(str(e) for e in self.errors), self.errors)


def is_valid_time(value: str | None) -> bool:
    """True for a zero-padded 24h "HH:mm" string, or for an absent/empty value."""
    if not value:
        return True
    return TIME_PATTERN.fullmatch(value) is not None


def _is_non_negative_number(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if not math.isfinite(value):
        return False
    return value >= 0


def _check_text(result: ValidationResult, field_name: str, value: str | None) -> None:
    if value is None or not str(value).strip():
        result.add(field_name, "is required")


def validate_monthly_salary(value, field_name: str = "monthlySalary") -> ValidationResult:
    result = ValidationResult()
    if value is None:
        result.add(field_name, "is required")
    elif not _is_non_negative_number(value):
        result.add(field_name, "must be a non-negative number")
    return result


def validate_employee(payload: EmployeeCreate) -> ValidationResult:
    result = ValidationResult()
    _check_text(result, "name", payload.name)
    _check_text(result, "position", payload.position)
    _check_text(result, "department", payload.department)
    result.merge(validate_monthly_salary(payload.monthly_salary))

    if not is_valid_time(payload.time_in):
        result.add("timeIn", "must be HH:mm 24-hour format or empty")
    if not is_valid_time(payload.time_out):
        result.add("timeOut", "must be HH:mm 24-hour format or empty")
    return result


def validate_payroll(payload: PayrollCreate) -> ValidationResult:
    result = ValidationResult()
    _check_text(result, "employeeName", payload.employee_name)
    for wire_name, attr in PAYROLL_AMOUNT_FIELDS.items():
        value = getattr(payload, attr)
        if value is None:
            result.add(wire_name, "is required")
        elif not _is_non_negative_number(value):
            result.add(wire_name, "must be a non-negative number")
    if payload.payday is None:
        result.add("payday", "is required")
    return result
