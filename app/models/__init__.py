"""Importing this package registers every mapped table with ``Base.metadata``."""

from .client import Client
from .comment import Comment
from .file_attachment import FileAttachment
from .project import Project
from .role import Role
from .ticket import Ticket
from .user import User
from .work_unit import WorkUnit

__all__ = [
    "Client",
    "Comment",
    "FileAttachment",
    "Project",
    "Role",
    "Ticket",
    "User",
    "WorkUnit",
]
