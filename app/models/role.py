"""Role assignments, optionally scoped to a single authorizable resource.

A role with no target is global. Scoped roles carry a resource kind plus the
target id instead of a free-form polymorphic reference, so only kinds listed in
``AuthorizableKind`` can ever be stored.
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Enum, ForeignKey, Index, Integer, Text, event
from sqlalchemy.orm import relationship

from ..core.roles import AuthorizableKind, ResourceRef
from ..db.session import Base
from .project import Project


class Role(Base):
    __tablename__ = "roles"
    __table_args__ = (
        CheckConstraint(
            "(authorizable_type IS NULL AND authorizable_id IS NULL)"
            " OR (authorizable_type IS NOT NULL AND authorizable_id IS NOT NULL)",
            name="ck_roles_authorizable_pair",
        ),
        Index("ix_roles_authorizable", "authorizable_type", "authorizable_id"),
    )
    __allow_unmapped__ = True

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    authorizable_type = Column(
        Enum(AuthorizableKind, values_callable=lambda kinds: [kind.value for kind in kinds], native_enum=False),
        nullable=True,
    )
    authorizable_id = Column(Integer, nullable=True)
    created_at = Column(Text, nullable=False)

    user = relationship("User", back_populates="roles")

    @property
    def authorizable(self) -> ResourceRef | None:
        if self.authorizable_type is None or self.authorizable_id is None:
            return None
        return ResourceRef(AuthorizableKind(self.authorizable_type), int(self.authorizable_id))

    @authorizable.setter
    def authorizable(self, value: ResourceRef | None) -> None:
        if value is None:
            self.authorizable_type = None
            self.authorizable_id = None
            return
        self.authorizable_type = value.kind
        self.authorizable_id = value.id

    def __repr__(self) -> str:
        target = self.authorizable
        scope = f"{target.kind.value}#{target.id}" if target else "global"
        return f"<Role {self.name!r} {scope} user_id={self.user_id}>"


@event.listens_for(Project, "before_delete")
def _revoke_roles_for_deleted_project(mapper, connection, target) -> None:
    connection.execute(
        Role.__table__.delete().where(
            Role.authorizable_type == AuthorizableKind.PROJECT,
            Role.authorizable_id == target.id,
        )
    )


__all__ = ["Role"]
