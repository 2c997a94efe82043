from fastapi import APIRouter, status

from payroll_api.api.deps import DB
from payroll_api.core.exceptions import PersistenceError
from payroll_api.models.payroll import Payroll
from payroll_api.schemas.payroll import PayrollCreate, PayrollOut
from payroll_api.services.store import RecordStore
from payroll_api.services.validation import validate_payroll

router = APIRouter(prefix="/payrolls", tags=["payroll"])


@router.get("", response_model=list[PayrollOut])
async def list_payrolls(db: DB):
    try:
        return await RecordStore(db, Payroll).list_all()
    except PersistenceError as exc:
        raise PersistenceError("Failed to fetch payroll data.") from exc


@router.post("", response_model=PayrollOut, status_code=status.HTTP_201_CREATED)
async def create_payroll(payload: PayrollCreate, db: DB):
    """Stores a payroll snapshot exactly as supplied; nothing is computed here."""
    validate_payroll(payload).raise_for_errors()

    payroll = Payroll(**payload.model_dump())
    try:
        return await RecordStore(db, Payroll).create(payroll)
    except PersistenceError as exc:
        raise PersistenceError("Failed to save payroll data.") from exc
