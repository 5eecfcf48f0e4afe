import asyncio

import httpx
import pytest

from app.client import ApiError, QueryCache, ResourceList, TripPlannerClient, expense_share
from app.main import create_app
from app.storage import MemoryStore
from tests.conftest import OWNER_UUID


@pytest.fixture
def api(settings):
    """TripPlannerClient talking to an in-process app on a fresh mock store."""
    app = create_app(settings, store=MemoryStore())
    return TripPlannerClient(base_url="http://testserver", transport=httpx.ASGITransport(app=app))


def run(coro):
    return asyncio.run(coro)


def test_expense_scenario(api):
    async def scenario():
        async with api:
            created = await api.create_expense({
                "trip_id": "mock-trip-1",
                "description": "Dinner",
                "amount": 120.5,
                "payer": "Alice",
                "participants": ["Alice", "Bob", "Charlie"],
            })
            listed = await api.fetch_expenses("mock-trip-1")
            return created, listed

    created, listed = run(scenario())
    assert listed[0]["id"] == created["id"]
    assert expense_share(listed[0]) == 40.17


def test_non_2xx_raises_with_body(api):
    async def scenario():
        async with api:
            await api.fetch_schedule("not-valid")

    with pytest.raises(ApiError) as exc_info:
        run(scenario())
    assert exc_info.value.status_code == 400
    assert exc_info.value.body == '{"error":"Invalid trip_id"}'
    assert "Invalid trip_id" in str(exc_info.value)


def test_trip_and_schedule_calls(api):
    async def scenario():
        async with api:
            trips = await api.fetch_trips(OWNER_UUID)
            item = await api.create_schedule({"trip_id": trips[0]["id"], "title": "Walk"})
            updated = await api.update_schedule(item["id"], {"notes": "Bring water"})
            deleted = await api.delete_schedule(item["id"])
            health = await api.health()
            return trips, updated, deleted, health

    trips, updated, deleted, health = run(scenario())
    assert trips[0]["id"] == "mock-trip-1"
    assert updated["notes"] == "Bring water"
    assert deleted == {"id": updated["id"]}
    assert health == {"status": "ok"}


def test_ids_are_url_encoded(api):
    async def scenario():
        async with api:
            return await api.delete_expense("e 1")

    assert run(scenario()) == {"id": "e 1"}


def test_base_url_defaults_to_settings():
    client = TripPlannerClient()
    assert client.base_url == "http://localhost:4000"
    run(client.close())


def test_expense_share_defaults_to_payer():
    assert expense_share({"amount": 10, "payer": "Ann", "participants": []}) == 10
    assert expense_share({"amount": 100, "participants": ["a", "b", "c"]}) == 33.33


class TestResourceList:
    def test_reads_are_cached_until_a_write(self, api):
        calls = []
        original = api.list

        async def counting_list(resource, trip_id):
            calls.append((resource, trip_id))
            return await original(resource, trip_id)

        api.list = counting_list
        expenses = ResourceList(api, "expenses", "mock-trip-1")

        async def scenario():
            async with api:
                await expenses.items()
                await expenses.items()
                assert len(calls) == 1
                await expenses.add({"description": "Coffee", "amount": 9, "payer": "Bob"})
                rows = await expenses.rows()
                assert len(calls) == 2
                return rows

        rows = run(scenario())
        assert rows[0]["label"] == "Coffee"
        assert rows[0]["share"] == 9
        assert rows[1]["share"] == 40.17

    def test_failed_add_alerts_and_keeps_cache(self, api):
        alerts = []
        schedule = ResourceList(api, "schedule", "mock-trip-1", alert=alerts.append)

        async def scenario():
            async with api:
                await schedule.items()
                result = await schedule.add({"title": ""})
                return result, schedule.key in schedule.cache

        result, still_cached = run(scenario())
        assert result is None
        assert still_cached
        assert "title required" in alerts[0]

    def test_remove_requires_confirmation(self, api):
        prompts = []
        answers = iter([False, True])

        def confirm(message):
            prompts.append(message)
            return next(answers)

        schedule = ResourceList(api, "schedule", "mock-trip-1", confirm=confirm)

        async def scenario():
            async with api:
                declined = await schedule.remove("s1")
                after_decline = [row["id"] for row in await schedule.rows()]
                accepted = await schedule.remove("s1")
                after_accept = [row["id"] for row in await schedule.rows()]
                return declined, after_decline, accepted, after_accept

        declined, after_decline, accepted, after_accept = run(scenario())
        assert declined is False
        assert after_decline == ["s1"]
        assert accepted is True
        assert after_accept == []
        assert prompts == ["Delete this event?", "Delete this event?"]

    def test_shared_cache_is_keyed_by_resource_and_trip(self, api):
        cache = QueryCache()
        schedule = ResourceList(api, "schedule", "mock-trip-1", cache=cache)
        expenses = ResourceList(api, "expenses", "mock-trip-1", cache=cache)

        async def scenario():
            async with api:
                await schedule.items()
                await expenses.items()
                await expenses.remove("e1")

        run(scenario())
        assert ("schedule", "mock-trip-1") in cache
        assert ("expenses", "mock-trip-1") not in cache

    def test_unknown_resource(self, api):
        with pytest.raises(ValueError):
            ResourceList(api, "goals", "mock-trip-1")


class DeadlineTransport(httpx.AsyncBaseTransport):
    """ASGI transport that honours the read timeout the way a socket would."""

    def __init__(self, app):
        self.inner = httpx.ASGITransport(app=app)
        self.seen_timeouts = []

    async def handle_async_request(self, request):
        read_timeout = request.extensions["timeout"]["read"]
        self.seen_timeouts.append(read_timeout)
        try:
            return await asyncio.wait_for(self.inner.handle_async_request(request), timeout=read_timeout)
        except asyncio.TimeoutError:
            raise httpx.ReadTimeout("read timed out", request=request)


class SlowStore(MemoryStore):
    async def list_expenses(self, trip_id):
        await asyncio.sleep(2)
        return await super().list_expenses(trip_id)


def test_short_timeout_raises(settings):
    transport = DeadlineTransport(create_app(settings, store=SlowStore()))
    api = TripPlannerClient(base_url="http://testserver", timeout=0.1, transport=transport)

    async def scenario():
        async with api:
            await api.fetch_expenses("mock-trip-1")

    with pytest.raises(httpx.TimeoutException):
        run(scenario())
    assert transport.seen_timeouts == [0.1]


def test_no_timeout_by_default(settings):
    transport = DeadlineTransport(create_app(settings, store=MemoryStore()))
    api = TripPlannerClient(base_url="http://testserver", transport=transport)

    async def scenario():
        async with api:
            return await api.fetch_expenses("mock-trip-1")

    assert run(scenario())[0]["id"] == "e1"
    assert transport.seen_timeouts == [None]
