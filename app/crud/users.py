from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from ..core.errors import InvalidArgument
from ..models.user import User
from ..services.timecalc import utcnow_iso


def get_user(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def create_user(db: Session, payload: dict) -> User:
    login = (payload.get("login") or "").strip()
    if not login:
        raise InvalidArgument("login is required")
    if db.execute(select(User.id).where(User.login == login)).first() is not None:
        raise InvalidArgument(f"login {login!r} is already taken")
    user = User(login=login, name=(payload.get("name") or None), created_at=utcnow_iso())
    db.add(user)
    db.commit()
    db.refresh(user)
    return user
