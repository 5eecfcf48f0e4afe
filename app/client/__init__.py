"""Python client for the Trip Planner API"""
from .api import ApiError, TripPlannerClient
from .resource_list import QueryCache, ResourceList, expense_share

__all__ = ["ApiError", "TripPlannerClient", "QueryCache", "ResourceList", "expense_share"]
