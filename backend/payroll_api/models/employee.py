import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column

from payroll_api.core.database import Base


class Employee(Base):
    __tablename__ = "employees"

    # Einfügereihenfolge; die UUID bleibt die öffentliche ID
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[uuid.UUID] = mapped_column(unique=True, default=uuid.uuid4)

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    position: Mapped[str] = mapped_column(String(200), nullable=False)
    department: Mapped[str] = mapped_column(String(200), nullable=False)
    monthly_salary: Mapped[float] = mapped_column(Numeric, nullable=False)

    # "HH:mm" (24h) oder None = nicht erfasst
    time_in: Mapped[str | None] = mapped_column(String(5), nullable=True)
    time_out: Mapped[str | None] = mapped_column(String(5), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )
