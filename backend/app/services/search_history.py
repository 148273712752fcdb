from typing import Any

from sqlalchemy.orm import Session

from app.models.search_history import SearchHistory


def add_search_history(db: Session, user_id: str, query: str, filters: dict[str, Any] | None = None) -> SearchHistory:
    entry = SearchHistory(user_id=user_id, query=query, filters=filters)
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


def get_user_search_history(db: Session, user_id: str, limit: int = 10) -> list[SearchHistory]:
    return (
        db.query(SearchHistory)
        .filter(SearchHistory.user_id == user_id)
        .order_by(SearchHistory.created_at.desc())
        .limit(limit)
        .all()
    )
