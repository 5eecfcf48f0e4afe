import asyncio
from concurrent.futures import ThreadPoolExecutor

from app.storage import MemoryStore


def run(coro):
    return asyncio.run(coro)


def expense_fields(trip_id="mock-trip-1", description="Snacks"):
    return {
        "trip_id": trip_id,
        "description": description,
        "amount": 12.0,
        "payer": "Alice",
        "participants": ["Alice", "Bob"],
    }


def test_unseeded_store_is_empty():
    store = MemoryStore(seed=False)
    assert run(store.list_expenses("mock-trip-1")) == []
    assert run(store.list_schedule("mock-trip-1")) == []


def test_returned_records_are_copies():
    store = MemoryStore()
    listed = run(store.list_expenses("mock-trip-1"))
    listed[0]["description"] = "Changed outside"
    assert run(store.list_expenses("mock-trip-1"))[0]["description"] == "Dinner"


def test_update_scans_all_trips():
    store = MemoryStore(seed=False)
    created = run(store.create_expense(expense_fields(trip_id="mock-other")))
    merged = run(store.update_expense(created["id"], {"amount": 20.0, "trip_id": "mock-moved"}))
    assert merged["amount"] == 20.0
    assert merged["trip_id"] == "mock-other"


def test_delete_only_removes_matching_id():
    store = MemoryStore(seed=False)
    keep = run(store.create_expense(expense_fields(description="Keep")))
    drop = run(store.create_expense(expense_fields(description="Drop")))
    run(store.delete_expense(drop["id"]))
    assert [e["id"] for e in run(store.list_expenses("mock-trip-1"))] == [keep["id"]]


def test_concurrent_creates_keep_every_record():
    store = MemoryStore(seed=False)

    def create(i):
        return run(store.create_expense(expense_fields(description=f"Item {i}")))

    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(create, range(50)))

    listed = run(store.list_expenses("mock-trip-1"))
    assert len(listed) == 50
    assert len({e["id"] for e in created}) == 50


def test_trips_listed_per_owner():
    store = MemoryStore()
    run(store.create_trip({"owner_id": "mock-owner-a", "title": "A"}))
    run(store.create_trip({"owner_id": "mock-owner-b", "title": "B"}))

    titles = [t["title"] for t in run(store.list_trips("mock-owner-a"))]
    assert titles == ["A", "Mock Trip"]
