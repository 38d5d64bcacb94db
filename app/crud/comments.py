from __future__ import annotations

from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument
from ..models.comment import Comment
from ..models.project import Project
from ..services.timecalc import utcnow_iso


def create_comment(db: Session, project: Project, payload: dict) -> Comment:
    if project is None or project.id is None:
        raise InvalidArgument("project is required")
    body = (payload.get("comment") or "").strip()
    if not body:
        raise InvalidArgument("comment is required")
    comment = Comment(
        project_id=project.id,
        user_id=payload.get("user_id"),
        title=(payload.get("title") or None),
        comment=body,
        created_at=payload.get("created_at") or utcnow_iso(),
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment
