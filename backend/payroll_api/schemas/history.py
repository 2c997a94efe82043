import uuid
from datetime import datetime

from pydantic import BaseModel, Field


class CalculateRequest(BaseModel):
    # str statt UUID: fehlende/ungültige IDs werden im Service behandelt (400 bzw. 404)
    employee_id: str | None = Field(None, alias="employeeId")

    model_config = {"populate_by_name": True}


class CalculateOut(BaseModel):
    pay: float


class HistoryOut(BaseModel):
    id: uuid.UUID = Field(serialization_alias="_id")
    employee_id: uuid.UUID = Field(serialization_alias="employeeId")
    pay: float
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}
