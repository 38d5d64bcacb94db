"""SQLAlchemy model for tickets. A ticket belongs to exactly one project."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from ..db.session import Base


class Ticket(Base):
    __tablename__ = "tickets"
    __allow_unmapped__ = True

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(Text, nullable=False)

    project = relationship("Project", back_populates="tickets")
    work_units = relationship(
        "WorkUnit",
        back_populates="ticket",
        cascade="all, delete-orphan",
        order_by="WorkUnit.id",
    )

    def __str__(self) -> str:
        return self.name or ""


__all__ = ["Ticket"]
