"""
13th-month pay API – Berechnung und Verlauf
"""
from fastapi import APIRouter

from payroll_api.api.deps import DB
from payroll_api.core.exceptions import PersistenceError
from payroll_api.schemas.history import CalculateRequest, CalculateOut, HistoryOut
from payroll_api.services.store import HistoryStore
from payroll_api.services.thirteenth_month import ThirteenthMonthService

router = APIRouter(tags=["13th-month"])


@router.post("/calculate", response_model=CalculateOut)
async def calculate_thirteenth_month(payload: CalculateRequest, db: DB):
    """Calculate the 13th-month pay for one employee and append it to the history."""
    service = ThirteenthMonthService(db)
    try:
        pay = await service.calculate(payload.employee_id)
    except PersistenceError as exc:
        raise PersistenceError("Calculation failed.") from exc
    return {"pay": float(pay)}


@router.get("/history/{employee_id}", response_model=list[HistoryOut])
async def list_history(employee_id: str, db: DB):
    """All calculations for one employee, newest first."""
    try:
        return await HistoryStore(db).list_by_employee(employee_id)
    except PersistenceError as exc:
        raise PersistenceError("Failed to fetch history.") from exc
