from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.favorite import Favorite
from app.models.property import Property


def get_user_favorites(db: Session, user_id: str) -> list[Property]:
    return (
        db.query(Property)
        .join(Favorite, Favorite.property_id == Property.id)
        .filter(Favorite.user_id == user_id)
        .order_by(Favorite.created_at.desc(), Favorite.id.desc())
        .all()
    )


def get_favorite(db: Session, user_id: str, property_id: str) -> Favorite | None:
    return (
        db.query(Favorite)
        .filter(Favorite.user_id == user_id, Favorite.property_id == property_id)
        .first()
    )


def add_favorite(db: Session, user_id: str, property_id: str) -> tuple[Favorite, bool]:
    """Favorite a property once per user. Returns the row and whether it was created."""
    existing = get_favorite(db, user_id, property_id)
    if existing:
        return existing, False

    favorite = Favorite(user_id=user_id, property_id=property_id)
    db.add(favorite)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent add of the same pair.
        db.rollback()
        existing = get_favorite(db, user_id, property_id)
        if existing is None:
            raise
        return existing, False
    db.refresh(favorite)
    return favorite, True


def remove_favorite(db: Session, user_id: str, property_id: str) -> bool:
    removed = (
        db.query(Favorite)
        .filter(Favorite.user_id == user_id, Favorite.property_id == property_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return removed > 0


def is_favorite(db: Session, user_id: str, property_id: str) -> bool:
    return get_favorite(db, user_id, property_id) is not None
