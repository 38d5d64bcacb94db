from __future__ import annotations

from pathlib import PurePath

from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument
from ..models.file_attachment import FileAttachment
from ..models.project import Project
from ..services.timecalc import utcnow_iso


def create_file_attachment(db: Session, project: Project, payload: dict) -> FileAttachment:
    """Record an attachment's metadata. The bytes are stored by the caller."""

    if project is None or project.id is None:
        raise InvalidArgument("project is required")
    filename = PurePath((payload.get("filename") or "").strip()).name
    if not filename:
        raise InvalidArgument("filename is required")
    size = payload.get("size_bytes")
    if size is not None and int(size) < 0:
        raise InvalidArgument("size_bytes must not be negative")
    attachment = FileAttachment(
        project_id=project.id,
        filename=filename,
        content_type=(payload.get("content_type") or None),
        size_bytes=int(size) if size is not None else None,
        storage_key=(payload.get("storage_key") or None),
        created_at=payload.get("created_at") or utcnow_iso(),
    )
    db.add(attachment)
    db.commit()
    db.refresh(attachment)
    return attachment
