from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument
from ..models.project import Project
from ..models.ticket import Ticket
from ..services.timecalc import utcnow_iso


def list_project_tickets(db: Session, project_id: int):
    stmt = select(Ticket).where(Ticket.project_id == project_id).order_by(Ticket.id)
    return db.execute(stmt).scalars().all()

def create_ticket(db: Session, project: Project, payload: dict | None = None) -> Ticket:
    if project is None or project.id is None:
        raise InvalidArgument("project is required")
    data = payload or {}
    name = (data.get("name") or "").strip() or f"Ticket for {project.name}"
    ticket = Ticket(
        project_id=project.id,
        name=name,
        description=(data.get("description") or None),
        created_at=utcnow_iso(),
    )
    db.add(ticket)
    db.commit()
    db.refresh(ticket)
    return ticket
