from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable

from ..core.errors import InvalidArgument
from ..core.invoicing import InvoiceStatus
from ..models.work_unit import WorkUnit
from .hierarchy import HierarchyReader

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def _sum_effective_hours(work_units: Iterable[WorkUnit]) -> Decimal:
    total = ZERO
    for work_unit in work_units:
        total += work_unit.effective_hours
    return total


class HoursAggregator:
    """Billable-hour totals for a project, walked through its tickets."""

    def __init__(self, reader: HierarchyReader) -> None:
        self.reader = reader

    def work_units(self, project) -> list[WorkUnit]:
        """Every work unit under every ticket of ``project``, each exactly once."""

        if project is None:
            raise InvalidArgument("project is required")
        seen_tickets: set[int] = set()
        seen_units: set[int] = set()
        collected: list[WorkUnit] = []
        for ticket in self.reader.tickets_of(project):
            if ticket.id in seen_tickets:
                continue
            seen_tickets.add(ticket.id)
            for work_unit in self.reader.work_units_of(ticket):
                if work_unit.id in seen_units:
                    continue
                seen_units.add(work_unit.id)
                collected.append(work_unit)
        return collected

    def total_hours(self, project) -> Decimal:
        total = _sum_effective_hours(self.work_units(project))
        logger.debug(
            "hours.computed",
            extra={"extra_data": {"project_id": project.id, "scope": "total", "hours": str(total)}},
        )
        return total

    def uninvoiced_hours(self, project) -> Decimal:
        pending = [
            work_unit
            for work_unit in self.work_units(project)
            if work_unit.invoice_status is InvoiceStatus.NOT_INVOICED
        ]
        total = _sum_effective_hours(pending)
        logger.debug(
            "hours.computed",
            extra={"extra_data": {"project_id": project.id, "scope": "uninvoiced", "hours": str(total)}},
        )
        return total


__all__ = ["HoursAggregator"]
