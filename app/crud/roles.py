"""Grant and revoke role assignments."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument
from ..core.roles import ResourceRef, normalize_role_name
from ..models.project import Project
from ..models.role import Role
from ..models.user import User
from ..services.timecalc import utcnow_iso


def _resource_ref(resource) -> ResourceRef | None:
    if resource is None or isinstance(resource, ResourceRef):
        return resource
    if isinstance(resource, Project):
        if resource.id is None:
            raise InvalidArgument("project must be saved before roles can target it")
        return ResourceRef.for_project(resource)
    raise InvalidArgument(f"{type(resource).__name__} cannot be a role target")


def _scoped(stmt, ref: ResourceRef | None):
    if ref is None:
        return stmt.where(Role.authorizable_type.is_(None), Role.authorizable_id.is_(None))
    return stmt.where(Role.authorizable_type == ref.kind, Role.authorizable_id == ref.id)


def grant_role(db: Session, user: User, name: str, resource=None) -> Role:
    """Give ``user`` the role ``name``, globally or on ``resource``.

    Granting a role the user already holds returns the existing assignment.
    """

    if user is None or user.id is None:
        raise InvalidArgument("user is required")
    role_name = normalize_role_name(name)
    if not role_name:
        raise InvalidArgument("role name is required")
    ref = _resource_ref(resource)
    stmt = _scoped(select(Role).where(Role.user_id == user.id, Role.name == role_name), ref)
    existing = db.execute(stmt).scalars().first()
    if existing is not None:
        return existing
    role = Role(user_id=user.id, name=role_name, created_at=utcnow_iso())
    role.authorizable = ref
    db.add(role)
    db.commit()
    db.refresh(role)
    db.refresh(user)
    return role


def revoke_roles_for(db: Session, user: User, resource) -> int:
    """Drop every role ``user`` holds on ``resource``. Returns how many went."""

    if user is None or user.id is None:
        raise InvalidArgument("user is required")
    ref = _resource_ref(resource)
    if ref is None:
        raise InvalidArgument("resource is required")
    roles = db.execute(_scoped(select(Role).where(Role.user_id == user.id), ref)).scalars().all()
    for role in roles:
        db.delete(role)
    db.commit()
    db.refresh(user)
    return len(roles)
