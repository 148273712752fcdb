from app.api.routes import analytics, audit, auth, favorites, inquiries, properties, search_history

__all__ = [
    "auth",
    "properties",
    "favorites",
    "inquiries",
    "search_history",
    "analytics",
    "audit",
]
