from __future__ import annotations

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from ..db.session import Base


class User(Base):
    __tablename__ = "users"
    __allow_unmapped__ = True

    id = Column(Integer, primary_key=True, index=True)
    login = Column(Text, nullable=False, unique=True)
    name = Column(Text, nullable=True)
    created_at = Column(Text, nullable=False)

    roles = relationship(
        "Role",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="Role.id",
    )

    def roles_by_name(self) -> dict[str, list]:
        """Group this user's role assignments by role name."""

        grouped: dict[str, list] = {}
        for role in self.roles:
            grouped.setdefault(role.name, []).append(role)
        return grouped

    def __str__(self) -> str:
        return self.name or self.login or ""


__all__ = ["User"]
