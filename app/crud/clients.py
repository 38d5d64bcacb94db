from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument, NotFound
from ..models.client import Client
from ..services.timecalc import utcnow_iso


def get_client(db: Session, client_id: int) -> Client | None:
    return db.get(Client, client_id)


def require_client(db: Session, client_id: int | None) -> Client:
    if client_id is None:
        raise InvalidArgument("client_id is required")
    client = get_client(db, client_id)
    if client is None:
        raise NotFound("Client", client_id)
    return client


def create_client(db: Session, payload: dict) -> Client:
    name = (payload.get("name") or "").strip()
    if not name:
        raise InvalidArgument("name is required")
    existing = db.execute(select(Client).where(Client.name == name)).scalars().first()
    if existing is not None:
        raise InvalidArgument(f"client {name!r} already exists")
    client = Client(name=name, created_at=utcnow_iso())
    db.add(client)
    db.commit()
    db.refresh(client)
    return client
