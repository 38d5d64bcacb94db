"""Project access decisions.

A user may open a project when they hold a global admin role, or any role
scoped to that exact project. Everything else is a denial, never an error.
"""

from __future__ import annotations

import logging

from ..core.config import settings
from ..core.errors import InvalidArgument
from ..core.roles import AuthorizableKind, normalize_role_name
from .role_store import RoleStore

logger = logging.getLogger(__name__)


class AccessEvaluator:
    def __init__(self, role_store: RoleStore, *, admin_role: str | None = None) -> None:
        self.role_store = role_store
        self.admin_role = normalize_role_name(admin_role or settings.ADMIN_ROLE)

    def allows_access(self, project, user) -> bool:
        if user is None:
            raise InvalidArgument("user is required")
        if project is None or getattr(project, "id", None) is None:
            raise InvalidArgument("project is required")

        granted_by = None
        for role in self.role_store.roles_of(user):
            target = role.authorizable
            if target is None:
                if role.name == self.admin_role:
                    granted_by = role
                    break
                continue
            if target.kind is AuthorizableKind.PROJECT and target.id == project.id:
                granted_by = role
                break

        logger.debug(
            "access.decision",
            extra={
                "extra_data": {
                    "user_id": user.id,
                    "project_id": project.id,
                    "granted": granted_by is not None,
                    "role": granted_by.name if granted_by is not None else None,
                }
            },
        )
        return granted_by is not None


__all__ = ["AccessEvaluator"]
