"""Storage interface shared by the mock store and the Supabase adapter"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Tuple

DEMO_PROFILE = {
    "id": "11111111-1111-1111-1111-111111111111",
    "full_name": "Demo Owner",
}

DEMO_TRIP = {
    "id": "22222222-2222-2222-2222-222222222222",
    "owner_id": DEMO_PROFILE["id"],
    "title": "Demo Trip (Seeded)",
    "description": "Seeded demo trip for local development",
    "start_date": "2026-03-01",
    "end_date": "2026-03-05",
}


class TripStore(ABC):
    """
    Trip-scoped CRUD over trips, schedule items and expenses

    Records are plain dicts shaped like the models in ``app.models``.
    Updates and deletes of unknown ids are not errors.
    """

    name = "store"
    accepts_mock_ids = True

    # Trips
    @abstractmethod
    async def list_trips(self, owner_id: str) -> List[Dict[str, Any]]:
        """Trips owned by ``owner_id``"""

    @abstractmethod
    async def create_trip(self, fields: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Insert a trip and return the inserted rows"""

    # Schedule items
    @abstractmethod
    async def list_schedule(self, trip_id: str) -> List[Dict[str, Any]]:
        """Schedule items of a trip"""

    @abstractmethod
    async def create_schedule(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Insert a schedule item and return it with its id"""

    @abstractmethod
    async def update_schedule(self, item_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``changes`` into the item with ``item_id``"""

    @abstractmethod
    async def delete_schedule(self, item_id: str) -> None:
        """Remove the item with ``item_id`` if present"""

    # Expenses
    @abstractmethod
    async def list_expenses(self, trip_id: str) -> List[Dict[str, Any]]:
        """Expenses of a trip"""

    @abstractmethod
    async def create_expense(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Insert an expense and return it with its id"""

    @abstractmethod
    async def update_expense(self, expense_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``changes`` into the expense with ``expense_id``"""

    @abstractmethod
    async def delete_expense(self, expense_id: str) -> None:
        """Remove the expense with ``expense_id`` if present"""

    # Development
    @abstractmethod
    async def seed_demo(self) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Write the demo profile and trip; return (profile, trip)"""
