"""Read access to the Client -> Project -> Ticket -> WorkUnit hierarchy."""

from __future__ import annotations

from typing import Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument, NotFound
from ..models.client import Client
from ..models.comment import Comment
from ..models.file_attachment import FileAttachment
from ..models.project import Project
from ..models.ticket import Ticket
from ..models.work_unit import WorkUnit


class HierarchyReader(Protocol):
    def tickets_of(self, project) -> Sequence[Ticket]:
        ...

    def work_units_of(self, ticket) -> Sequence[WorkUnit]:
        ...

    def comments_of(self, project) -> Sequence[Comment]:
        ...

    def attachments_of(self, project) -> Sequence[FileAttachment]:
        ...


def _require_id(record, label: str) -> int:
    if record is None or getattr(record, "id", None) is None:
        raise InvalidArgument(f"{label} is required")
    return record.id


class SqlHierarchyReader:
    """Hierarchy reader that issues one query per call against the session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _get(self, model, ident: int, kind: str):
        record = self.db.get(model, ident)
        if record is None:
            raise NotFound(kind, ident)
        return record

    def get_client(self, client_id: int) -> Client:
        return self._get(Client, client_id, "Client")

    def get_project(self, project_id: int) -> Project:
        return self._get(Project, project_id, "Project")

    def get_ticket(self, ticket_id: int) -> Ticket:
        return self._get(Ticket, ticket_id, "Ticket")

    def get_work_unit(self, work_unit_id: int) -> WorkUnit:
        return self._get(WorkUnit, work_unit_id, "WorkUnit")

    def tickets_of(self, project) -> Sequence[Ticket]:
        project_id = _require_id(project, "project")
        stmt = select(Ticket).where(Ticket.project_id == project_id).order_by(Ticket.id)
        return self.db.execute(stmt).scalars().all()

    def work_units_of(self, ticket) -> Sequence[WorkUnit]:
        ticket_id = _require_id(ticket, "ticket")
        stmt = select(WorkUnit).where(WorkUnit.ticket_id == ticket_id).order_by(WorkUnit.id)
        return self.db.execute(stmt).scalars().all()

    def comments_of(self, project) -> Sequence[Comment]:
        project_id = _require_id(project, "project")
        stmt = (
            select(Comment)
            .where(Comment.project_id == project_id)
            .order_by(Comment.created_at, Comment.id)
        )
        return self.db.execute(stmt).scalars().all()

    def attachments_of(self, project) -> Sequence[FileAttachment]:
        project_id = _require_id(project, "project")
        stmt = (
            select(FileAttachment)
            .where(FileAttachment.project_id == project_id)
            .order_by(FileAttachment.created_at, FileAttachment.id)
        )
        return self.db.execute(stmt).scalars().all()


__all__ = ["HierarchyReader", "SqlHierarchyReader"]
