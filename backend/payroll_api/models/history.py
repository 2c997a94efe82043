import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Numeric, Integer
from sqlalchemy.orm import Mapped, mapped_column

from payroll_api.core.database import Base


class History(Base):
    """One 13th-month-pay calculation. Append-only."""

    __tablename__ = "history"

    # Einfügereihenfolge; die UUID bleibt die öffentliche ID
    seq: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[uuid.UUID] = mapped_column(unique=True, default=uuid.uuid4)
    # Kein ForeignKey: der Eintrag bleibt bestehen, wenn der Mitarbeiter entfernt wird
    employee_id: Mapped[uuid.UUID] = mapped_column(nullable=False, index=True)
    pay: Mapped[float] = mapped_column(Numeric(12, 2), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True
    )
