from fastapi import APIRouter

from app.api.routes import analytics, audit, auth, favorites, inquiries, properties, search_history

api_router = APIRouter()
api_router.include_router(auth.router)
api_router.include_router(properties.router)
api_router.include_router(favorites.router)
api_router.include_router(inquiries.router)
api_router.include_router(search_history.router)
api_router.include_router(analytics.router)
api_router.include_router(audit.router)
