"""API routers mounted under /api"""
from fastapi import APIRouter
from . import dev, expenses, schedule, trips

api_router = APIRouter(prefix="/api")
api_router.include_router(trips.router)
api_router.include_router(schedule.router)
api_router.include_router(expenses.router)
api_router.include_router(dev.router)

__all__ = ["api_router"]
