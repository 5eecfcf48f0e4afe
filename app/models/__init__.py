"""Record models shared by the stores and the API"""
from .trip import Trip
from .schedule import ScheduleItem
from .expense import Expense

__all__ = ["Trip", "ScheduleItem", "Expense"]
