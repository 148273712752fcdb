from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_current_user
from app.models.user import User
from app.schemas.favorite import FavoriteCheck, FavoriteCreate, FavoriteResponse
from app.schemas.property import PropertyResponse
from app.services import favorites
from app.services.listings import get_property

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=list[PropertyResponse])
def list_favorites(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return favorites.get_user_favorites(db, current_user.id)


@router.post("", response_model=FavoriteResponse)
def add_favorite(
    payload: FavoriteCreate,
    response: Response,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not get_property(db, payload.property_id):
        raise HTTPException(status_code=404, detail="Property not found")
    favorite, created = favorites.add_favorite(db, current_user.id, payload.property_id)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return favorite


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_favorite(property_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    if not favorites.remove_favorite(db, current_user.id, property_id):
        raise HTTPException(status_code=404, detail="Favorite not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{property_id}/check", response_model=FavoriteCheck)
def check_favorite(property_id: str, db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return FavoriteCheck(is_favorite=favorites.is_favorite(db, current_user.id, property_id))
