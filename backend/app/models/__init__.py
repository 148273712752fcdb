from app.models.user import User, UserRole
from app.models.property import Property, PropertyStatus, PropertyType
from app.models.favorite import Favorite
from app.models.inquiry import Inquiry, InquiryStatus, InquiryType
from app.models.search_history import SearchHistory
from app.models.audit import AuditLog

__all__ = [
    "User",
    "UserRole",
    "Property",
    "PropertyStatus",
    "PropertyType",
    "Favorite",
    "Inquiry",
    "InquiryStatus",
    "InquiryType",
    "SearchHistory",
    "AuditLog",
]
