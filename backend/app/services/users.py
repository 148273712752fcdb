from datetime import datetime

from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.user import User

logger = get_logger(__name__)


def get_user(db: Session, user_id: str) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()


def create_user(db: Session, **fields) -> User:
    user = User(**fields)
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("user created id=%s role=%s", user.id, user.role.value)
    return user


def upsert_user(db: Session, data: dict) -> User:
    """Insert a user, or overwrite the given fields of the row with the same id."""
    user_id = data.get("id")
    user = get_user(db, user_id) if user_id else None
    if user is None:
        return create_user(db, **data)

    for field, value in data.items():
        if field != "id":
            setattr(user, field, value)
    user.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(user)
    return user
