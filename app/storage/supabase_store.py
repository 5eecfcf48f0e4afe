"""Supabase-backed store"""
import logging
from typing import Any, Dict, List, Optional, Tuple
from supabase import create_client, Client, PostgrestAPIError
from .base import TripStore, DEMO_PROFILE, DEMO_TRIP
from ..config import Settings
from ..errors import StoreError
from ..models.schedule import ScheduleItem, to_row
from ..schemas.request import parse_timestamp

logger = logging.getLogger(__name__)


class SupabaseClient:
    """Singleton Supabase client wrapper"""
    _instance: Optional[Client] = None

    @classmethod
    def get_client(cls, settings: Settings) -> Client:
        """Get or create Supabase client instance"""
        if cls._instance is None:
            cls._instance = create_client(
                supabase_url=settings.supabase_url,
                supabase_key=settings.supabase_key
            )
        return cls._instance


def _run(query, status_code: int = 500) -> List[Dict[str, Any]]:
    """
    Execute a query and return its rows

    Args:
        query: Supabase query builder ready to execute
        status_code: Status to report if the database rejects the query

    Returns:
        List of rows (empty if none)

    Raises:
        StoreError: If the database returns an error
    """
    try:
        result = query.execute()
    except PostgrestAPIError as e:
        logger.error(f"Supabase query failed: {e.message}")
        raise StoreError(e.message or "database error", status_code=status_code)
    return result.data if result.data else []


class SupabaseStore(TripStore):
    """
    Store backed by the Supabase tables trips, schedule_days, schedule_items
    and expenses

    Schedule items hang off a schedule_days row per (trip_id, date); the
    store creates days on demand and flattens items back to trip_id.
    """

    name = "supabase"
    accepts_mock_ids = False

    def __init__(self, client: Client):
        self.client = client

    # Trips
    async def list_trips(self, owner_id: str) -> List[Dict[str, Any]]:
        return _run(self.client.table('trips').select('*').eq('owner_id', owner_id))

    async def create_trip(self, fields: Dict[str, Any]) -> List[Dict[str, Any]]:
        rows = _run(self.client.table('trips').insert(fields), status_code=400)
        if not rows:
            raise StoreError("Failed to create trip")
        return rows

    # Schedule items
    async def _ensure_day(self, trip_id: str, start: str) -> str:
        """Id of the schedule_days row for the date of ``start``, created if missing"""
        day = parse_timestamp(start).date().isoformat()
        existing = _run(
            self.client.table('schedule_days')
            .select('id')
            .eq('trip_id', trip_id)
            .eq('date', day)
        )
        if existing:
            return existing[0]['id']

        created = _run(
            self.client.table('schedule_days').insert({'trip_id': trip_id, 'date': day})
        )
        if not created:
            raise StoreError("Failed to create schedule day")
        return created[0]['id']

    async def _trip_id_for_day(self, day_id: str) -> Optional[str]:
        days = _run(self.client.table('schedule_days').select('trip_id').eq('id', day_id))
        return days[0]['trip_id'] if days else None

    async def list_schedule(self, trip_id: str) -> List[Dict[str, Any]]:
        days = _run(self.client.table('schedule_days').select('id,date').eq('trip_id', trip_id))
        day_ids = [day['id'] for day in days]
        if not day_ids:
            return []

        rows = _run(
            self.client.table('schedule_items')
            .select('*')
            .in_('schedule_day_id', day_ids)
            .order('start_time', desc=False)
        )
        return [ScheduleItem.from_row(row, trip_id).model_dump() for row in rows]

    async def create_schedule(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        trip_id = fields['trip_id']
        day_id = await self._ensure_day(trip_id, fields['start'])

        row = to_row(fields)
        row['schedule_day_id'] = day_id
        rows = _run(self.client.table('schedule_items').insert(row), status_code=400)
        if not rows:
            raise StoreError("Failed to create schedule item")
        return ScheduleItem.from_row(rows[0], trip_id).model_dump()

    async def update_schedule(self, item_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        row = to_row(changes)
        if not row:
            return {'id': item_id}

        existing = _run(self.client.table('schedule_items').select('schedule_day_id').eq('id', item_id))
        if not existing:
            return {'id': item_id, **changes}
        trip_id = await self._trip_id_for_day(existing[0]['schedule_day_id'])

        # Moving the start to another date moves the item to that day
        if 'start_time' in row and trip_id:
            row['schedule_day_id'] = await self._ensure_day(trip_id, row['start_time'])

        rows = _run(self.client.table('schedule_items').update(row).eq('id', item_id), status_code=400)
        if not rows:
            return {'id': item_id, **changes}
        return ScheduleItem.from_row(rows[0], trip_id).model_dump()

    async def delete_schedule(self, item_id: str) -> None:
        _run(self.client.table('schedule_items').delete().eq('id', item_id), status_code=400)

    # Expenses
    async def list_expenses(self, trip_id: str) -> List[Dict[str, Any]]:
        return _run(self.client.table('expenses').select('*').eq('trip_id', trip_id))

    async def create_expense(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        rows = _run(self.client.table('expenses').insert(fields), status_code=400)
        if not rows:
            raise StoreError("Failed to create expense")
        return rows[0]

    async def update_expense(self, expense_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        changes = {key: value for key, value in changes.items() if key not in ('id', 'trip_id')}
        if not changes:
            return {'id': expense_id}
        rows = _run(self.client.table('expenses').update(changes).eq('id', expense_id), status_code=400)
        return rows[0] if rows else {'id': expense_id, **changes}

    async def delete_expense(self, expense_id: str) -> None:
        _run(self.client.table('expenses').delete().eq('id', expense_id), status_code=400)

    # Development
    async def seed_demo(self) -> Tuple[Dict[str, Any], Dict[str, Any]]:
        """Upsert the demo profile, trip and owner membership"""
        _run(self.client.table('profiles').upsert(DEMO_PROFILE))
        _run(self.client.table('trips').upsert(DEMO_TRIP))
        _run(self.client.table('trip_members').upsert({
            'trip_id': DEMO_TRIP['id'],
            'profile_id': DEMO_PROFILE['id'],
            'name': DEMO_PROFILE['full_name'],
            'role': 'owner'
        }))
        logger.info(f"Seeded demo trip {DEMO_TRIP['id']}")
        return dict(DEMO_PROFILE), dict(DEMO_TRIP)
