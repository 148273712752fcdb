from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import ensure_can_manage, get_current_user, get_optional_user, require_roles
from app.models.user import User, UserRole
from app.schemas.inquiry import InquiryCreate, InquiryResponse, InquiryStatusUpdate
from app.services import inquiries
from app.services.audit import audit_event
from app.services.listings import get_property

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


@router.post("", response_model=InquiryResponse, status_code=status.HTTP_201_CREATED)
def create_inquiry(
    payload: InquiryCreate,
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
):
    if not get_property(db, payload.property_id):
        raise HTTPException(status_code=404, detail="Property not found")
    return inquiries.create_inquiry(db, payload.model_dump(), user_id=current_user.id if current_user else None)


@router.get("/user", response_model=list[InquiryResponse])
def list_my_inquiries(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return inquiries.get_user_inquiries(db, current_user.id)


@router.get("/property/{property_id}", response_model=list[InquiryResponse])
def list_property_inquiries(
    property_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.admin, UserRole.agent)),
):
    prop = get_property(db, property_id)
    if not prop:
        raise HTTPException(status_code=404, detail="Property not found")
    ensure_can_manage(prop, current_user)
    return inquiries.get_property_inquiries(db, property_id)


@router.patch("/{inquiry_id}", response_model=InquiryResponse)
def update_inquiry_status(
    inquiry_id: str,
    payload: InquiryStatusUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(require_roles(UserRole.admin, UserRole.agent)),
):
    inquiry = inquiries.get_inquiry(db, inquiry_id)
    if not inquiry:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    ensure_can_manage(get_property(db, inquiry.property_id), current_user)

    inquiry = inquiries.update_inquiry_status(db, inquiry_id, payload.status)
    if not inquiry:
        raise HTTPException(status_code=404, detail="Inquiry not found")
    audit_event(
        db,
        "inquiry_status",
        "inquiry",
        user_id=current_user.id,
        resource_id=inquiry_id,
        ip_address=request.client.host if request.client else None,
        details=f"status={payload.status.value}",
    )
    return inquiry
