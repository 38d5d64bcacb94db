"""Invoicing states for work units and the one-way transition between them."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidTransition


class InvoiceStatus(str, Enum):
    NOT_INVOICED = "Not Invoiced"
    INVOICED = "Invoiced"

    @classmethod
    def coerce(cls, value: "InvoiceStatus | str | None") -> "InvoiceStatus":
        if value is None or value == "":
            return cls.NOT_INVOICED
        if isinstance(value, cls):
            return value
        for member in cls:
            if member.value.casefold() == str(value).strip().casefold():
                return member
        raise ValueError(f"unknown invoice status: {value!r}")

    @classmethod
    def transition(cls, current: "InvoiceStatus | str | None", target: "InvoiceStatus | str") -> "InvoiceStatus":
        """Validate a status change. Billing only ever moves forward."""

        current_status = cls.coerce(current)
        target_status = cls.coerce(target)
        if current_status is cls.INVOICED and target_status is cls.NOT_INVOICED:
            raise InvalidTransition("an invoiced work unit cannot be marked as not invoiced")
        return target_status


__all__ = ["InvoiceStatus"]
