from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.inquiry import Inquiry
from app.models.property import Property
from app.models.user import User
from app.schemas.analytics import AnalyticsSummary


def get_analytics(db: Session) -> AnalyticsSummary:
    total_properties = db.query(func.count(Property.id)).scalar() or 0
    total_users = db.query(func.count(User.id)).scalar() or 0
    total_views = db.query(func.sum(Property.views)).scalar() or 0
    total_inquiries = db.query(func.count(Inquiry.id)).scalar() or 0

    return AnalyticsSummary(
        total_properties=int(total_properties),
        total_users=int(total_users),
        total_views=int(total_views),
        total_inquiries=int(total_inquiries),
    )
