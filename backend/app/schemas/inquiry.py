from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from app.models.inquiry import InquiryStatus, InquiryType


class InquiryCreate(BaseModel):
    property_id: str
    name: str = Field(min_length=1, max_length=120)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=30)
    message: str = Field(min_length=1)
    inquiry_type: InquiryType = InquiryType.general


class InquiryStatusUpdate(BaseModel):
    status: InquiryStatus


class InquiryResponse(BaseModel):
    id: str
    property_id: str
    user_id: str | None
    name: str
    email: str
    phone: str | None
    message: str
    inquiry_type: InquiryType
    status: InquiryStatus
    created_at: datetime

    class Config:
        from_attributes = True
