"""SQLAlchemy model for projects: a client's container of tickets."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from ..db.session import Base


class Project(Base):
    """High level project that groups multiple tickets for a single client."""

    __tablename__ = "projects"
    __table_args__ = (
        UniqueConstraint("name", "client_id", name="uq_projects_name_client"),
        # Ids are never reused, so a stale scoped role cannot match a newer project.
        {"sqlite_autoincrement": True},
    )
    __allow_unmapped__ = True

    id = Column(Integer, primary_key=True, index=True)
    name = Column(Text, nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    description = Column(Text, nullable=True)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    client = relationship("Client", back_populates="projects")
    tickets = relationship(
        "Ticket",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Ticket.id",
    )
    comments = relationship(
        "Comment",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="Comment.id",
    )
    file_attachments = relationship(
        "FileAttachment",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="FileAttachment.id",
    )

    def __str__(self) -> str:
        return self.name or ""

    def __repr__(self) -> str:
        return f"<Project id={self.id} name={self.name!r} client_id={self.client_id}>"


__all__ = ["Project"]
