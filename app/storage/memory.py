"""In-memory mock store for local development"""
import logging
import threading
import time
from typing import Any, Dict, List, Tuple
from .base import TripStore, DEMO_PROFILE, DEMO_TRIP
from ..models import Trip, ScheduleItem, Expense
from ..schemas.request import utc_now_iso

logger = logging.getLogger(__name__)

MOCK_TRIP_ID = "mock-trip-1"


def demo_schedule() -> Dict[str, List[Dict[str, Any]]]:
    return {
        MOCK_TRIP_ID: [
            ScheduleItem(
                id="s1",
                trip_id=MOCK_TRIP_ID,
                title="Mock Event: Welcome Dinner",
                start=utc_now_iso(),
                location="Downtown",
                notes="Meet at 7pm"
            ).model_dump()
        ]
    }


def demo_expenses() -> Dict[str, List[Dict[str, Any]]]:
    return {
        MOCK_TRIP_ID: [
            Expense(
                id="e1",
                trip_id=MOCK_TRIP_ID,
                description="Dinner",
                amount=120.5,
                payer="Alice",
                participants=["Alice", "Bob", "Charlie"]
            ).model_dump()
        ]
    }


def mock_trip(owner_id: str) -> Dict[str, Any]:
    """The synthesized trip every owner sees when running on the mock store"""
    return Trip(
        id=MOCK_TRIP_ID,
        owner_id=owner_id,
        title="Mock Trip",
        description="Local development trip (no database configured)",
        start_date="2026-03-01",
        end_date="2026-03-05"
    ).model_dump()


class MemoryStore(TripStore):
    """
    Process-local, non-persistent store

    Each resource maps trip_id to that trip's records, newest first.
    All reads and writes hold one lock; records are copied in and out so
    callers never share state with the store.
    """

    name = "memory"
    accepts_mock_ids = True

    def __init__(self, seed: bool = True):
        self._lock = threading.Lock()
        self._last_id = 0
        self._trips: List[Dict[str, Any]] = []
        self._schedule: Dict[str, List[Dict[str, Any]]] = demo_schedule() if seed else {}
        self._expenses: Dict[str, List[Dict[str, Any]]] = demo_expenses() if seed else {}

    def _next_id(self) -> str:
        """Millisecond timestamp, bumped so ids stay unique within a process"""
        now_ms = int(time.time() * 1000)
        self._last_id = max(now_ms, self._last_id + 1)
        return str(self._last_id)

    @staticmethod
    def _insert(table: Dict[str, List[Dict[str, Any]]], record: Dict[str, Any]) -> None:
        table.setdefault(record["trip_id"], []).insert(0, record)

    @staticmethod
    def _merge(table: Dict[str, List[Dict[str, Any]]], record_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        changes = {key: value for key, value in changes.items() if key not in ("id", "trip_id")}
        merged = None
        for records in table.values():
            for record in records:
                if record["id"] == record_id:
                    record.update(changes)
                    merged = dict(record)
        return merged if merged is not None else {"id": record_id, **changes}

    @staticmethod
    def _remove(table: Dict[str, List[Dict[str, Any]]], record_id: str) -> None:
        for trip_id in list(table):
            table[trip_id] = [record for record in table[trip_id] if record["id"] != record_id]

    # Trips
    async def list_trips(self, owner_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            owned = [dict(trip) for trip in self._trips if trip["owner_id"] == owner_id]
        return owned + [mock_trip(owner_id)]

    async def create_trip(self, fields: Dict[str, Any]) -> List[Dict[str, Any]]:
        with self._lock:
            trip = Trip(id=f"mock-trip-{self._next_id()}", **fields).model_dump()
            self._trips.insert(0, trip)
        logger.info(f"Created mock trip {trip['id']}")
        return [dict(trip)]

    # Schedule items
    async def list_schedule(self, trip_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(item) for item in self._schedule.get(trip_id, [])]

    async def create_schedule(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            item = ScheduleItem(id=self._next_id(), **fields).model_dump()
            self._insert(self._schedule, item)
        return dict(item)

    async def update_schedule(self, item_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            return self._merge(self._schedule, item_id, changes)

    async def delete_schedule(self, item_id: str) -> None:
        with self._lock:
            self._remove(self._schedule, item_id)

    # Expenses
    async def list_expenses(self, trip_id: str) -> List[Dict[str, Any]]:
        with self._lock:
            return [dict(expense) for expense in self._expenses.get(trip_id, [])]

    async def create_expense(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            expense = Expense(id=self._next_id(), **fields).model_dump()
            self._insert(self._expenses, expense)
        return dict(expense)

    async def update_expense(self, expense_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        with self._lock:
            return self._merge(self._expenses, expense_id, changes)

    async def delete_expense(self, expense_id: str) -> None:
        with self._lock:
            self._remove(self._expenses, expense_id)

    # Development
    async def seed_demo(self) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Store the demo trip and restore the mock-trip-1 demo rows"""
        with self._lock:
            trip = Trip(**DEMO_TRIP).model_dump()
            self._trips = [t for t in self._trips if t["id"] != trip["id"]]
            self._trips.insert(0, trip)
            for table, demo in ((self._schedule, demo_schedule()), (self._expenses, demo_expenses())):
                kept = [r for r in table.get(MOCK_TRIP_ID, []) if r["id"] not in {d["id"] for d in demo[MOCK_TRIP_ID]}]
                table[MOCK_TRIP_ID] = kept + demo[MOCK_TRIP_ID]
        return dict(DEMO_PROFILE), dict(trip)
