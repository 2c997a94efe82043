import uuid
from datetime import date, datetime, timezone

from sqlalchemy import String, DateTime, Numeric, Date, Integer
from sqlalchemy.orm import Mapped, mapped_column

from payroll_api.core.database import Base


class Payroll(Base):
    """Snapshot of one pay computation, supplied by the caller as-is."""

    __tablename__ = "payrolls"

    # Einfügereihenfolge; die UUID bleibt die öffentliche ID
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[uuid.UUID] = mapped_column(unique=True, default=uuid.uuid4)
    employee_name: Mapped[str] = mapped_column(String(200), nullable=False)

    # Hours
    rate_per_hour: Mapped[float] = mapped_column(Numeric, nullable=False)
    hours_per_day: Mapped[float] = mapped_column(Numeric, nullable=False)
    days_worked: Mapped[float] = mapped_column(Numeric, nullable=False)

    # Wages
    gross_salary: Mapped[float] = mapped_column(Numeric, nullable=False)
    tax: Mapped[float] = mapped_column(Numeric, nullable=False)
    philhealth: Mapped[float] = mapped_column(Numeric, nullable=False)
    sss: Mapped[float] = mapped_column(Numeric, nullable=False)
    total_deductions: Mapped[float] = mapped_column(Numeric, nullable=False)
    net_salary: Mapped[float] = mapped_column(Numeric, nullable=False)

    payday: Mapped[date] = mapped_column(Date, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
