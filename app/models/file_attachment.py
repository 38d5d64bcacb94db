"""Metadata for files attached to a project. Byte storage lives elsewhere."""

from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from ..db.session import Base


class FileAttachment(Base):
    __tablename__ = "file_attachments"
    __allow_unmapped__ = True

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    filename = Column(Text, nullable=False)
    content_type = Column(Text, nullable=True)
    size_bytes = Column(Integer, nullable=True)
    storage_key = Column(Text, nullable=True)
    created_at = Column(Text, nullable=False, index=True)

    project = relationship("Project", back_populates="file_attachments")


__all__ = ["FileAttachment"]
