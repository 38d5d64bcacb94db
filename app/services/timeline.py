from __future__ import annotations

from typing import Union

from ..core.errors import InvalidArgument
from ..models.comment import Comment
from ..models.file_attachment import FileAttachment
from .hierarchy import HierarchyReader

TimelineEntry = Union[Comment, FileAttachment]


def files_and_comments(reader: HierarchyReader, project) -> list[TimelineEntry]:
    """Comments and file attachments of ``project`` in creation order.

    Entries created at the same instant list comments first, then by id.
    """

    if project is None:
        raise InvalidArgument("project is required")
    entries: list[tuple[str, int, int, TimelineEntry]] = []
    for comment in reader.comments_of(project):
        entries.append((comment.created_at or "", 0, comment.id or 0, comment))
    for attachment in reader.attachments_of(project):
        entries.append((attachment.created_at or "", 1, attachment.id or 0, attachment))
    entries.sort(key=lambda entry: entry[:3])
    return [entry[3] for entry in entries]


__all__ = ["TimelineEntry", "files_and_comments"]
