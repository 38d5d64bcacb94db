from __future__ import annotations

from sqlalchemy import Column, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship

from ..db.session import Base


class Comment(Base):
    __tablename__ = "comments"
    __allow_unmapped__ = True

    id = Column(Integer, primary_key=True, index=True)
    project_id = Column(Integer, ForeignKey("projects.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)
    title = Column(Text, nullable=True)
    comment = Column(Text, nullable=False)
    created_at = Column(Text, nullable=False, index=True)

    project = relationship("Project", back_populates="comments")


__all__ = ["Comment"]
