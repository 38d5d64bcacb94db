"""Read access to role assignments.

The evaluator only needs ``roles_of(user)``; anything that can answer that
question (the database, a fixture, a cache) can be injected.
"""

from __future__ import annotations

from typing import Iterable, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument
from ..models.role import Role


class RoleStore(Protocol):
    def roles_of(self, user) -> Sequence[Role]:
        ...


class SqlRoleStore:
    """Role store backed by the ``roles`` table."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def roles_of(self, user) -> Sequence[Role]:
        if user is None or getattr(user, "id", None) is None:
            raise InvalidArgument("user is required")
        stmt = select(Role).where(Role.user_id == user.id).order_by(Role.id)
        return self.db.execute(stmt).scalars().all()


class StaticRoleStore:
    """Role store over a fixed mapping of user id to roles."""

    def __init__(self, assignments: dict[int, Iterable[Role]] | None = None) -> None:
        self._assignments = {key: list(value) for key, value in (assignments or {}).items()}

    def roles_of(self, user) -> Sequence[Role]:
        if user is None or getattr(user, "id", None) is None:
            raise InvalidArgument("user is required")
        return list(self._assignments.get(user.id, ()))


__all__ = ["RoleStore", "SqlRoleStore", "StaticRoleStore"]
