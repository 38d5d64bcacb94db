"""Bulk project listings scoped to what a user may see.

Both queries run as a single SELECT against ``projects`` joined to the user's
role assignments instead of evaluating access project by project.
"""

from __future__ import annotations

from sqlalchemy import and_, exists, or_, select
from sqlalchemy.orm import Session

from ..core.config import settings
from ..core.errors import InvalidArgument
from ..core.roles import AuthorizableKind, normalize_role_name
from ..models.project import Project
from ..models.role import Role


def _require_user_id(user) -> int:
    if user is None or getattr(user, "id", None) is None:
        raise InvalidArgument("user is required")
    return user.id


def projects_for_user(db: Session, user, *, admin_role: str | None = None) -> list[Project]:
    """Projects for which ``AccessEvaluator.allows_access`` would return True."""

    user_id = _require_user_id(user)
    admin_name = normalize_role_name(admin_role or settings.ADMIN_ROLE)
    is_admin = exists().where(
        Role.user_id == user_id,
        Role.name == admin_name,
        Role.authorizable_type.is_(None),
    )
    has_scoped_role = exists().where(
        Role.user_id == user_id,
        Role.authorizable_type == AuthorizableKind.PROJECT,
        Role.authorizable_id == Project.id,
    )
    stmt = select(Project).where(or_(is_admin, has_scoped_role)).order_by(Project.id)
    return list(db.execute(stmt).scalars().all())


def projects_for_user_and_role(db: Session, user, role_name: str) -> list[Project]:
    """Projects where ``user`` holds ``role_name`` scoped to that project.

    Global roles carrying the same name are ignored.
    """

    user_id = _require_user_id(user)
    if not role_name or not role_name.strip():
        raise InvalidArgument("role_name is required")
    stmt = (
        select(Project)
        .join(
            Role,
            and_(
                Role.authorizable_type == AuthorizableKind.PROJECT,
                Role.authorizable_id == Project.id,
            ),
        )
        .where(Role.user_id == user_id, Role.name == role_name)
        .distinct()
        .order_by(Project.id)
    )
    return list(db.execute(stmt).scalars().all())


__all__ = ["projects_for_user", "projects_for_user_and_role"]
