"""API module - REST endpoints."""
from api.people import router as people_router

__all__ = ["people_router"]
