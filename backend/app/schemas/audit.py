from datetime import datetime

from pydantic import BaseModel


class AuditLogResponse(BaseModel):
    id: int
    user_id: str | None
    action: str
    resource: str
    resource_id: str | None
    ip_address: str | None
    details: str | None
    created_at: datetime

    class Config:
        from_attributes = True
