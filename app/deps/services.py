from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import Session

from ..db.session import get_db
from ..services.access import AccessEvaluator
from ..services.hierarchy import SqlHierarchyReader
from ..services.hours import HoursAggregator
from ..services.role_store import SqlRoleStore


def get_hierarchy_reader(db: Session = Depends(get_db)) -> SqlHierarchyReader:
    return SqlHierarchyReader(db)


def get_access_evaluator(db: Session = Depends(get_db)) -> AccessEvaluator:
    return AccessEvaluator(SqlRoleStore(db))


def get_hours_aggregator(reader: SqlHierarchyReader = Depends(get_hierarchy_reader)) -> HoursAggregator:
    return HoursAggregator(reader)
