from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from ..db.session import get_db
from ..deps.auth import require_current_user
from ..deps.services import get_access_evaluator, get_hierarchy_reader, get_hours_aggregator
from ..models.comment import Comment
from ..models.user import User
from ..schemas.project import HoursSummary, ProjectDetail, ProjectOut, TimelineEntryOut
from ..services.access import AccessEvaluator
from ..services.hierarchy import SqlHierarchyReader
from ..services.hours import HoursAggregator
from ..services.project_scope import projects_for_user, projects_for_user_and_role
from ..services.timeline import files_and_comments

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


def _load_accessible_project(
    project_id: int,
    user: User,
    reader: SqlHierarchyReader,
    evaluator: AccessEvaluator,
):
    # NotFound propagates to the domain handler as a 404.
    project = reader.get_project(project_id)
    if not evaluator.allows_access(project, user):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Access denied")
    return project


def _timeline_entry(record) -> TimelineEntryOut:
    if isinstance(record, Comment):
        return TimelineEntryOut(
            kind="comment",
            id=record.id,
            created_at=record.created_at,
            title=record.title,
            body=record.comment,
        )
    return TimelineEntryOut(
        kind="file_attachment",
        id=record.id,
        created_at=record.created_at,
        filename=record.filename,
        content_type=record.content_type,
        size_bytes=record.size_bytes,
    )


@router.get("", response_model=list[ProjectOut])
def api_list_projects(
    role: Optional[str] = Query(default=None, min_length=1),
    user: User = Depends(require_current_user),
    db: Session = Depends(get_db),
):
    if role:
        projects = projects_for_user_and_role(db, user, role)
    else:
        projects = projects_for_user(db, user)
    return [ProjectOut.model_validate(project) for project in projects]


@router.get("/{project_id}", response_model=ProjectDetail)
def api_get_project(
    project_id: int,
    user: User = Depends(require_current_user),
    reader: SqlHierarchyReader = Depends(get_hierarchy_reader),
    evaluator: AccessEvaluator = Depends(get_access_evaluator),
    hours: HoursAggregator = Depends(get_hours_aggregator),
):
    project = _load_accessible_project(project_id, user, reader, evaluator)
    base = ProjectOut.model_validate(project)
    return ProjectDetail(
        **base.model_dump(),
        hours=hours.total_hours(project),
        uninvoiced_hours=hours.uninvoiced_hours(project),
        ticket_count=len(reader.tickets_of(project)),
    )


@router.get("/{project_id}/hours", response_model=HoursSummary)
def api_project_hours(
    project_id: int,
    user: User = Depends(require_current_user),
    reader: SqlHierarchyReader = Depends(get_hierarchy_reader),
    evaluator: AccessEvaluator = Depends(get_access_evaluator),
    hours: HoursAggregator = Depends(get_hours_aggregator),
):
    project = _load_accessible_project(project_id, user, reader, evaluator)
    return HoursSummary(
        project_id=project.id,
        hours=hours.total_hours(project),
        uninvoiced_hours=hours.uninvoiced_hours(project),
        work_unit_count=len(hours.work_units(project)),
    )


@router.get("/{project_id}/timeline", response_model=list[TimelineEntryOut])
def api_project_timeline(
    project_id: int,
    user: User = Depends(require_current_user),
    reader: SqlHierarchyReader = Depends(get_hierarchy_reader),
    evaluator: AccessEvaluator = Depends(get_access_evaluator),
):
    project = _load_accessible_project(project_id, user, reader, evaluator)
    return [_timeline_entry(record) for record in files_and_comments(reader, project)]
