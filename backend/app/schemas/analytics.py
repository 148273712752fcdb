from pydantic import BaseModel


class AnalyticsSummary(BaseModel):
    total_properties: int
    total_users: int
    total_views: int
    total_inquiries: int
