"""FastAPI dependencies"""
from fastapi import Request
from .config import Settings
from .storage import TripStore


def get_store(request: Request) -> TripStore:
    """Store selected at startup"""
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
