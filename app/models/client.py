"""SQLAlchemy model for clients, the owners of projects."""

from __future__ import annotations

from sqlalchemy import Column, Integer, Text
from sqlalchemy.orm import relationship

from ..db.session import Base


class Client(Base):
    __tablename__ = "clients"
    __allow_unmapped__ = True

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False, unique=True)
    created_at = Column(Text, nullable=False)

    projects = relationship("Project", back_populates="client", order_by="Project.id")

    def __str__(self) -> str:
        return self.name or ""


__all__ = ["Client"]
