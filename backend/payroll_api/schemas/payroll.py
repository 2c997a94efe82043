import uuid
from datetime import date, datetime

from pydantic import BaseModel, Field

# Wire name -> attribute name. The wire names are kept from the existing frontend.
PAYROLL_AMOUNT_FIELDS = {
    "RateperHour": "rate_per_hour",
    "HoursperDay": "hours_per_day",
    "NumbersofDaysWorked": "days_worked",
    "GrossSalary": "gross_salary",
    "Tax": "tax",
    "Philhealth": "philhealth",
    "SSS": "sss",
    "TotalDeductions": "total_deductions",
    "NetSalary": "net_salary",
}


class PayrollCreate(BaseModel):
    """Request body for POST /api/payrolls.

    Optional at the schema level like EmployeeCreate, so missing fields are
    reported per field by ``validate_payroll``.
    """
    employee_name: str | None = Field(None, alias="employeeName")
    rate_per_hour: float | None = Field(None, alias="RateperHour")
    hours_per_day: float | None = Field(None, alias="HoursperDay")
    days_worked: float | None = Field(None, alias="NumbersofDaysWorked")
    gross_salary: float | None = Field(None, alias="GrossSalary")
    tax: float | None = Field(None, alias="Tax")
    philhealth: float | None = Field(None, alias="Philhealth")
    sss: float | None = Field(None, alias="SSS")
    total_deductions: float | None = Field(None, alias="TotalDeductions")
    net_salary: float | None = Field(None, alias="NetSalary")
    payday: date | None = None

    model_config = {"populate_by_name": True}


class PayrollOut(BaseModel):
    id: uuid.UUID = Field(serialization_alias="_id")
    employee_name: str = Field(serialization_alias="employeeName")
    rate_per_hour: float = Field(serialization_alias="RateperHour")
    hours_per_day: float = Field(serialization_alias="HoursperDay")
    days_worked: float = Field(serialization_alias="NumbersofDaysWorked")
    gross_salary: float = Field(serialization_alias="GrossSalary")
    tax: float = Field(serialization_alias="Tax")
    philhealth: float = Field(serialization_alias="Philhealth")
    sss: float = Field(serialization_alias="SSS")
    total_deductions: float = Field(serialization_alias="TotalDeductions")
    net_salary: float = Field(serialization_alias="NetSalary")
    payday: date
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}
