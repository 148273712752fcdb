from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.deps import get_current_user
from app.models.user import User
from app.schemas.search_history import SearchHistoryCreate, SearchHistoryResponse
from app.services.search_history import add_search_history, get_user_search_history

router = APIRouter(prefix="/search-history", tags=["search-history"])


@router.post("", response_model=SearchHistoryResponse, status_code=status.HTTP_201_CREATED)
def record_search(
    payload: SearchHistoryCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return add_search_history(db, current_user.id, payload.query, payload.filters)


@router.get("", response_model=list[SearchHistoryResponse])
def recent_searches(
    limit: int = Query(default=get_settings().SEARCH_HISTORY_LIMIT, ge=1, le=50),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return get_user_search_history(db, current_user.id, limit=limit)
