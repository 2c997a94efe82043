import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class EmployeeCreate(BaseModel):
    """Request body for POST /api/employees.

    Fields are optional at the schema level so that missing values reach
    ``validate_employee`` and get reported per field.
    """
    name: str | None = None
    position: str | None = None
    department: str | None = None
    monthly_salary: float | None = Field(None, alias="monthlySalary")
    time_in: str | None = Field(None, alias="timeIn")    # "HH:mm" oder leer
    time_out: str | None = Field(None, alias="timeOut")

    model_config = {"populate_by_name": True}


class EmployeeOut(BaseModel):
    id: uuid.UUID = Field(serialization_alias="_id")
    name: str
    position: str
    department: str
    monthly_salary: float = Field(serialization_alias="monthlySalary")
    time_in: str | None = Field(serialization_alias="timeIn")
    time_out: str | None = Field(serialization_alias="timeOut")
    created_at: datetime = Field(serialization_alias="createdAt")
    updated_at: datetime = Field(serialization_alias="updatedAt")

    model_config = {"from_attributes": True}
