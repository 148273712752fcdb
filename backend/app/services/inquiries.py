from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.inquiry import Inquiry, InquiryStatus

logger = get_logger(__name__)


def create_inquiry(db: Session, data: dict, user_id: str | None = None) -> Inquiry:
    inquiry = Inquiry(**data, user_id=user_id)
    db.add(inquiry)
    db.commit()
    db.refresh(inquiry)
    logger.info(
        "inquiry created id=%s property_id=%s type=%s", inquiry.id, inquiry.property_id, inquiry.inquiry_type.value
    )
    return inquiry


def get_property_inquiries(db: Session, property_id: str) -> list[Inquiry]:
    return db.query(Inquiry).filter(Inquiry.property_id == property_id).order_by(Inquiry.created_at.desc()).all()


def get_user_inquiries(db: Session, user_id: str) -> list[Inquiry]:
    return db.query(Inquiry).filter(Inquiry.user_id == user_id).order_by(Inquiry.created_at.desc()).all()


def get_inquiry(db: Session, inquiry_id: str) -> Inquiry | None:
    return db.query(Inquiry).filter(Inquiry.id == inquiry_id).first()


def update_inquiry_status(db: Session, inquiry_id: str, status: InquiryStatus) -> Inquiry | None:
    inquiry = get_inquiry(db, inquiry_id)
    if not inquiry:
        return None
    inquiry.status = status
    db.commit()
    db.refresh(inquiry)
    return inquiry
