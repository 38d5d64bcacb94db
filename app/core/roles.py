"""Role names and the resource kinds a role may be scoped to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ROLE_ADMIN = "admin"


class AuthorizableKind(str, Enum):
    """Resource kinds a role assignment can target."""

    PROJECT = "Project"


@dataclass(frozen=True)
class ResourceRef:
    """A typed pointer to one authorizable record."""

    kind: AuthorizableKind
    id: int

    @classmethod
    def for_project(cls, project) -> "ResourceRef":
        return cls(AuthorizableKind.PROJECT, int(project.id))


def normalize_role_name(value: str | None) -> str:
    """Return a trimmed, lowercase role name; empty string when missing."""

    return (value or "").strip().lower()


__all__ = [
    "AuthorizableKind",
    "ROLE_ADMIN",
    "ResourceRef",
    "normalize_role_name",
]
