"""CRUD helpers for work units and the billing transition."""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation

from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.errors import InvalidArgument
from ..core.invoicing import InvoiceStatus
from ..models.ticket import Ticket
from ..models.work_unit import WorkUnit
from ..services.timecalc import hours_between, utcnow_iso

logger = logging.getLogger(__name__)

def _to_hours(value: object, field: str) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        hours = Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise InvalidArgument(f"{field} must be a number") from exc
    if not hours.is_finite():
        raise InvalidArgument(f"{field} must be a number")
    if hours < 0:
        raise InvalidArgument(f"{field} must not be negative")
    return hours


def create_work_unit(db: Session, ticket: Ticket, payload: dict) -> WorkUnit:
    """Log time on ``ticket``.

    ``hours`` wins when given; otherwise the duration between ``start_iso`` and
    ``end_iso`` is used.
    """

    if ticket is None or ticket.id is None:
        raise InvalidArgument("ticket is required")
    if payload.get("hours") not in (None, ""):
        hours = _to_hours(payload.get("hours"), "hours")
    elif payload.get("start_iso") and payload.get("end_iso"):
        hours = hours_between(payload["start_iso"], payload["end_iso"], settings.TIMEZONE)
    else:
        raise InvalidArgument("hours or start_iso/end_iso is required")

    status = InvoiceStatus.coerce(payload.get("invoiced"))
    invoiced_at = payload.get("invoiced_at") or None
    if status is InvoiceStatus.INVOICED and invoiced_at is None:
        invoiced_at = utcnow_iso()

    work_unit = WorkUnit(
        ticket_id=ticket.id,
        description=(payload.get("description") or None),
        scheduled_at=(payload.get("scheduled_at") or payload.get("start_iso") or None),
        hours=hours,
        hours_adjustment=_to_hours(payload.get("hours_adjustment"), "hours_adjustment"),
        invoiced=status.value,
        invoiced_at=invoiced_at,
        created_at=utcnow_iso(),
    )
    db.add(work_unit)
    db.commit()
    db.refresh(work_unit)
    return work_unit

def mark_invoiced(db: Session, work_unit: WorkUnit, invoiced_at: str | None = None) -> WorkUnit:
    """Move ``work_unit`` to Invoiced. Already-invoiced units keep their stamp."""

    if work_unit.is_invoiced:
        return work_unit
    status = InvoiceStatus.transition(work_unit.invoiced, InvoiceStatus.INVOICED)
    work_unit.invoiced = status.value
    work_unit.invoiced_at = invoiced_at or utcnow_iso()
    db.commit()
    db.refresh(work_unit)
    logger.info(
        "work_unit.invoiced",
        extra={"extra_data": {"work_unit_id": work_unit.id, "invoiced_at": work_unit.invoiced_at}},
    )
    return work_unit

def set_invoice_status(db: Session, work_unit: WorkUnit, status: InvoiceStatus | str) -> WorkUnit:
    """Apply an explicit status, refusing to un-invoice."""

    target = InvoiceStatus.transition(work_unit.invoiced, status)
    if target is InvoiceStatus.INVOICED:
        return mark_invoiced(db, work_unit)
    return work_unit
