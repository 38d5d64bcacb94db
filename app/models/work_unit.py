"""SQLAlchemy model for logged time on a ticket."""

from __future__ import annotations

from decimal import Decimal

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import relationship

from ..core.invoicing import InvoiceStatus
from ..db.session import Base

ZERO = Decimal("0")


class WorkUnit(Base):
    """Time logged against a ticket, billed once through the invoicing workflow."""

    __tablename__ = "work_units"
    __table_args__ = (
        CheckConstraint("hours >= 0", name="ck_work_units_hours_non_negative"),
        CheckConstraint("hours_adjustment >= 0", name="ck_work_units_adjustment_non_negative"),
    )
    __allow_unmapped__ = True

    id = Column(Integer, primary_key=True, index=True)
    ticket_id = Column(Integer, ForeignKey("tickets.id"), nullable=False, index=True)
    description = Column(Text, nullable=True)
    scheduled_at = Column(Text, nullable=True)
    hours = Column(Numeric(10, 2, asdecimal=True), nullable=False, default=ZERO)
    hours_adjustment = Column(Numeric(10, 2, asdecimal=True), nullable=False, default=ZERO)
    invoiced = Column(Text, nullable=False, default=InvoiceStatus.NOT_INVOICED.value, index=True)
    invoiced_at = Column(Text, nullable=True)
    created_at = Column(Text, nullable=False)

    ticket = relationship("Ticket", back_populates="work_units")

    @property
    def project(self):
        return self.ticket.project if self.ticket is not None else None

    @property
    def invoice_status(self) -> InvoiceStatus:
        return InvoiceStatus.coerce(self.invoiced)

    @property
    def is_invoiced(self) -> bool:
        return self.invoice_status is InvoiceStatus.INVOICED

    @property
    def effective_hours(self) -> Decimal:
        raw = Decimal(self.hours or ZERO)
        adjustment = Decimal(self.hours_adjustment or ZERO)
        return max(raw - adjustment, ZERO)


__all__ = ["WorkUnit"]
