from decimal import Decimal
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from sqlalchemy.orm import Session

from app.core.config import get_settings
from app.core.database import get_db
from app.core.deps import ensure_can_manage, get_optional_user, require_roles
from app.models.property import Property, PropertyStatus, PropertyType
from app.models.user import User, UserRole
from app.schemas.property import (
    PropertyCreate,
    PropertyListResponse,
    PropertyResponse,
    PropertySearch,
    PropertyUpdate,
)
from app.services import listings
from app.services.audit import audit_event
from app.services.search_history import add_search_history
from app.services.users import get_user

router = APIRouter(prefix="/properties", tags=["properties"])

_settings = get_settings()


def search_params(
    query: str | None = None,
    city: str | None = None,
    state: str | None = None,
    zip_code: str | None = None,
    property_type: PropertyType | None = None,
    status: PropertyStatus | None = None,
    min_price: Decimal | None = Query(default=None, ge=0),
    max_price: Decimal | None = Query(default=None, ge=0),
    min_bedrooms: int | None = Query(default=None, ge=0),
    max_bedrooms: int | None = Query(default=None, ge=0),
    min_bathrooms: Decimal | None = Query(default=None, ge=0),
    max_bathrooms: Decimal | None = Query(default=None, ge=0),
    min_sqft: int | None = Query(default=None, ge=0),
    max_sqft: int | None = Query(default=None, ge=0),
    featured: bool | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=_settings.DEFAULT_PAGE_SIZE, ge=1, le=_settings.MAX_PAGE_SIZE),
    sort_by: str = "created_at",
    sort_order: Literal["asc", "desc"] = "desc",
) -> PropertySearch:
    return PropertySearch(
        query=query,
        city=city,
        state=state,
        zip_code=zip_code,
        property_type=property_type,
        status=status,
        min_price=min_price,
        max_price=max_price,
        min_bedrooms=min_bedrooms,
        max_bedrooms=max_bedrooms,
        min_bathrooms=min_bathrooms,
        max_bathrooms=max_bathrooms,
        min_sqft=min_sqft,
        max_sqft=max_sqft,
        featured=featured,
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
    )


def _client_ip(request: Request) -> str | None:
    return request.client.host if request.client else None


def _get_or_404(db: Session, property_id: str) -> Property:
    prop = listings.get_property(db, property_id)
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    return prop


def _check_agent(db: Session, agent_id: str | None) -> None:
    if agent_id and not get_user(db, agent_id):
        raise HTTPException(status_code=400, detail="Unknown agent")


@router.get("", response_model=PropertyListResponse)
def list_properties(
    search: PropertySearch = Depends(search_params),
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    if current_user and search.query:
        add_search_history(db, current_user.id, search.query, search.filters())
    rows, total = listings.search_properties(db, search)
    return {"properties": rows, "total": total}


@router.get("/featured", response_model=list[PropertyResponse])
def featured_properties(
    limit: int = Query(default=_settings.FEATURED_LIMIT, ge=1, le=_settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    return listings.get_featured_properties(db, limit=limit)


@router.get("/{property_id}", response_model=PropertyResponse)
def get_property(property_id: str, db: Session = Depends(get_db)):
    prop = _get_or_404(db, property_id)
    listings.increment_views(db, prop.id)
    db.refresh(prop)
    return prop


@router.post("/{property_id}/views", status_code=status.HTTP_204_NO_CONTENT)
def record_view(property_id: str, db: Session = Depends(get_db)):
    _get_or_404(db, property_id)
    listings.increment_views(db, property_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("", response_model=PropertyResponse, status_code=status.HTTP_201_CREATED)
def create_property(
    payload: PropertyCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.admin, UserRole.agent)),
):
    data = payload.model_dump()
    if current_user.role == UserRole.agent:
        data["agent_id"] = current_user.id
    else:
        _check_agent(db, data.get("agent_id"))
    prop = listings.create_property(db, data)
    audit_event(
        db, "property_create", "property", user_id=current_user.id, resource_id=prop.id, ip_address=_client_ip(request)
    )
    return prop


@router.api_route("/{property_id}", methods=["PUT", "PATCH"], response_model=PropertyResponse)
def update_property(
    property_id: str,
    payload: PropertyUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.admin, UserRole.agent)),
):
    prop = _get_or_404(db, property_id)
    ensure_can_manage(prop, current_user)

    changes = payload.model_dump(exclude_unset=True)
    if current_user.role == UserRole.agent:
        changes.pop("agent_id", None)
    else:
        _check_agent(db, changes.get("agent_id"))
    updated = listings.update_property(db, property_id, changes)
    if not updated:
        raise HTTPException(status_code=404, detail="Property not found")
    audit_event(
        db,
        "property_update",
        "property",
        user_id=current_user.id,
        resource_id=property_id,
        ip_address=_client_ip(request),
        details=",".join(sorted(changes)),
    )
    return updated


@router.delete("/{property_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_property(
    property_id: str,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.admin, UserRole.agent)),
):
    prop = listings.get_property(db, property_id)
    if prop:
        ensure_can_manage(prop, current_user)
    if not listings.delete_property(db, property_id):
        raise HTTPException(status_code=404, detail="Property not found")
    audit_event(
        db, "property_delete", "property", user_id=current_user.id, resource_id=property_id, ip_address=_client_ip(request)
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
