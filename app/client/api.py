"""HTTP client for the Trip Planner API"""
from typing import Any, Dict, List, Optional
from urllib.parse import quote
import httpx
from ..config import settings

RESOURCES = ("schedule", "expenses")


class ApiError(Exception):
    """Non-2xx response; the message is the raw response body"""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(body)


class TripPlannerClient:
    """
    One method per API operation

    Each call returns the ``data`` field of the JSON envelope. There is no
    retry, and no timeout unless one is passed.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Content-Type": "application/json"}
        )

    async def close(self):
        """Close the HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send a request and unwrap the envelope

        Raises:
            ApiError: If the status is not 2xx
        """
        response = await self.client.request(method, path, **kwargs)
        if not response.is_success:
            raise ApiError(response.status_code, response.text)
        return response.json().get("data")

    # Generic resource operations
    async def list(self, resource: str, trip_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", f"/api/{resource}", params={"trip_id": trip_id})

    async def create(self, resource: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("POST", f"/api/{resource}", json=payload)

    async def update(self, resource: str, record_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self._request("PUT", f"/api/{resource}/{quote(record_id, safe='')}", json=changes)

    async def delete(self, resource: str, record_id: str) -> Dict[str, Any]:
        return await self._request("DELETE", f"/api/{resource}/{quote(record_id, safe='')}")

    # Trips
    async def fetch_trips(self, user_id: str) -> List[Dict[str, Any]]:
        return await self._request("GET", "/api/trips", params={"user_id": user_id})

    async def create_trip(self, payload: Dict[str, Any]) -> List[Dict[str, Any]]:
        return await self._request("POST", "/api/trips", json=payload)

    # Schedule
    async def fetch_schedule(self, trip_id: str) -> List[Dict[str, Any]]:
        return await self.list("schedule", trip_id)

    async def create_schedule(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create("schedule", payload)

    async def update_schedule(self, item_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self.update("schedule", item_id, changes)

    async def delete_schedule(self, item_id: str) -> Dict[str, Any]:
        return await self.delete("schedule", item_id)

    # Expenses
    async def fetch_expenses(self, trip_id: str) -> List[Dict[str, Any]]:
        return await self.list("expenses", trip_id)

    async def create_expense(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self.create("expenses", payload)

    async def update_expense(self, expense_id: str, changes: Dict[str, Any]) -> Dict[str, Any]:
        return await self.update("expenses", expense_id, changes)

    async def delete_expense(self, expense_id: str) -> Dict[str, Any]:
        return await self.delete("expenses", expense_id)

    # Development
    async def seed(self) -> Dict[str, Any]:
        """POST /api/dev/seed; the response has no data envelope"""
        response = await self.client.post("/api/dev/seed")
        if not response.is_success:
            raise ApiError(response.status_code, response.text)
        return response.json()

    async def health(self) -> Dict[str, Any]:
        response = await self.client.get("/health")
        if not response.is_success:
            raise ApiError(response.status_code, response.text)
        return response.json()
