"""Store used when no database is configured and the mock store is not allowed"""
from .base import TripStore
from ..errors import StoreUnavailableError


class UnavailableStore(TripStore):
    """Fails every operation with 503"""

    name = "unavailable"
    accepts_mock_ids = True

    def _fail(self, *args, **kwargs):
        raise StoreUnavailableError("Supabase not configured")

    async def list_trips(self, owner_id):
        self._fail()

    async def create_trip(self, fields):
        self._fail()

    async def list_schedule(self, trip_id):
        self._fail()

    async def create_schedule(self, fields):
        self._fail()

    async def update_schedule(self, item_id, changes):
        self._fail()

    async def delete_schedule(self, item_id):
        self._fail()

    async def list_expenses(self, trip_id):
        self._fail()

    async def create_expense(self, fields):
        self._fail()

    async def update_expense(self, expense_id, changes):
        self._fail()

    async def delete_expense(self, expense_id):
        self._fail()

    async def seed_demo(self):
        self._fail()
