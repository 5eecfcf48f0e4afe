"""
Generic trip resource list.

One ResourceList drives any of the per-trip list screens (schedule,
expenses): it reads through a query cache keyed by (resource, trip_id),
invalidates that key after every successful write, asks for confirmation
before deleting, and reports API failures through an alert callback.
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple
from .api import ApiError, TripPlannerClient

CacheKey = Tuple[str, str]


def expense_share(expense: Dict[str, Any]) -> float:
    """Amount each participant owes, rounded to cents"""
    participants = expense.get("participants") or [expense.get("payer") or "Unknown"]
    return round(float(expense["amount"]) / len(participants), 2)


def schedule_row(item: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "id": item["id"],
        "label": item["title"],
        "detail": " · ".join(part for part in (item.get("start"), item.get("location")) if part),
        "record": item,
    }


def expense_row(expense: Dict[str, Any]) -> Dict[str, Any]:
    share = expense_share(expense)
    return {
        "id": expense["id"],
        "label": expense["description"],
        "detail": f"{expense['amount']:.2f} paid by {expense.get('payer', 'Unknown')}, {share:.2f} each",
        "share": share,
        "record": expense,
    }


@dataclass(frozen=True)
class ResourceType:
    """How one resource is addressed and rendered"""
    path: str
    render: Callable[[Dict[str, Any]], Dict[str, Any]]
    confirm_text: str


RESOURCE_TYPES = {
    "schedule": ResourceType(path="schedule", render=schedule_row, confirm_text="Delete this event?"),
    "expenses": ResourceType(path="expenses", render=expense_row, confirm_text="Delete this expense?"),
}


class QueryCache:
    """Cached query results keyed by (resource, trip_id)"""

    def __init__(self):
        self._entries: Dict[CacheKey, List[Dict[str, Any]]] = {}

    def __contains__(self, key: CacheKey) -> bool:
        return key in self._entries

    async def fetch(self, key: CacheKey, loader: Callable[[], Awaitable[List[Dict[str, Any]]]]) -> List[Dict[str, Any]]:
        """Return the cached value, loading it on a miss"""
        if key not in self._entries:
            self._entries[key] = await loader()
        return self._entries[key]

    def invalidate(self, key: CacheKey) -> None:
        self._entries.pop(key, None)


def _always(message: str) -> bool:
    return True


def _ignore(message: str) -> None:
    return None


class ResourceList:
    """
    List, add and remove one resource of one trip

    Args:
        client: API client
        resource: Key of RESOURCE_TYPES ("schedule" or "expenses")
        trip_id: Trip whose records are shown
        cache: Shared query cache; a private one is created if omitted
        confirm: Blocking yes/no prompt used before deletes
        alert: Called with the error text when a request fails
    """

    def __init__(
        self,
        client: TripPlannerClient,
        resource: str,
        trip_id: str,
        cache: Optional[QueryCache] = None,
        confirm: Callable[[str], bool] = _always,
        alert: Callable[[str], None] = _ignore
    ):
        if resource not in RESOURCE_TYPES:
            raise ValueError(f"Unknown resource: {resource}")
        self.client = client
        self.type = RESOURCE_TYPES[resource]
        self.trip_id = trip_id
        self.cache = cache if cache is not None else QueryCache()
        self.confirm = confirm
        self.alert = alert

    @property
    def key(self) -> CacheKey:
        return (self.type.path, self.trip_id)

    async def items(self) -> List[Dict[str, Any]]:
        return await self.cache.fetch(self.key, lambda: self.client.list(self.type.path, self.trip_id))

    async def rows(self) -> List[Dict[str, Any]]:
        """Render-ready rows in list order"""
        return [self.type.render(record) for record in await self.items()]

    async def add(self, payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Create a record for this trip

        Returns:
            The created record, or None if the API rejected it
        """
        try:
            created = await self.client.create(self.type.path, {**payload, "trip_id": self.trip_id})
        except ApiError as e:
            self.alert(e.body)
            return None
        self.cache.invalidate(self.key)
        return created

    async def update(self, record_id: str, changes: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        try:
            updated = await self.client.update(self.type.path, record_id, changes)
        except ApiError as e:
            self.alert(e.body)
            return None
        self.cache.invalidate(self.key)
        return updated

    async def remove(self, record_id: str) -> bool:
        """
        Delete a record after confirmation

        Returns:
            True if the record was deleted
        """
        if not self.confirm(self.type.confirm_text):
            return False
        try:
            await self.client.delete(self.type.path, record_id)
        except ApiError as e:
            self.alert(e.body)
            return False
        self.cache.invalidate(self.key)
        return True
