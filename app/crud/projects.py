"""CRUD helpers for projects."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..core.errors import InvalidArgument
from ..models.project import Project
from ..services.timecalc import utcnow_iso
from .clients import require_client


def list_projects(db: Session, limit: int = 200, offset: int = 0):
    stmt = select(Project).order_by(Project.id).limit(limit).offset(offset)
    return db.execute(stmt).scalars().all()


def get_project(db: Session, project_id: int) -> Project | None:
    stmt = select(Project).options(selectinload(Project.tickets)).where(Project.id == project_id)
    return db.execute(stmt).scalars().first()


def _ensure_unique_name(db: Session, name: str, client_id: int, *, exclude_id: int | None = None) -> None:
    stmt = select(Project.id).where(Project.name == name, Project.client_id == client_id)
    if exclude_id is not None:
        stmt = stmt.where(Project.id != exclude_id)
    if db.execute(stmt).first() is not None:
        raise InvalidArgument("name has already been taken for this client")


def create_project(db: Session, payload: dict) -> Project:
    name = (payload.get("name") or "").strip()
    if not name:
        raise InvalidArgument("name is required")
    client = require_client(db, payload.get("client_id"))
    _ensure_unique_name(db, name, client.id)
    now = utcnow_iso()
    project = Project(
        name=name,
        client_id=client.id,
        description=(payload.get("description") or None),
        created_at=now,
        updated_at=now,
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    return project


def update_project(db: Session, project: Project, payload: dict) -> Project:
    name = project.name
    client_id = project.client_id
    if "name" in payload:
        name = (payload.get("name") or "").strip()
        if not name:
            raise InvalidArgument("name is required")
    if "client_id" in payload:
        client_id = require_client(db, payload.get("client_id")).id
    if name != project.name or client_id != project.client_id:
        _ensure_unique_name(db, name, client_id, exclude_id=project.id)
    project.name = name
    project.client_id = client_id
    if "description" in payload:
        project.description = payload.get("description") or None
    project.updated_at = utcnow_iso()
    db.commit()
    db.refresh(project)
    return project


def delete_project(db: Session, project: Project) -> None:
    # Scoped roles are revoked by the Project before_delete listener.
    db.delete(project)
    db.commit()
