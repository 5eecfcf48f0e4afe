"""Schedule item routes"""
from typing import Optional
from fastapi import APIRouter, Depends
from ..dependencies import get_store
from ..schemas.request import ScheduleItemCreate, ScheduleItemUpdate
from ..schemas.response import DataResponse, ERROR_RESPONSES
from ..storage import TripStore
from ..validators.input_validator import clean_query_id, validate_trip_id

router = APIRouter(prefix="/schedule", tags=["schedule"])


@router.get("", response_model=DataResponse, responses=ERROR_RESPONSES)
async def list_schedule(trip_id: Optional[str] = None, store: TripStore = Depends(get_store)):
    """
    List a trip's schedule items

    Missing trip_id yields an empty list rather than an error.
    """
    trip_id = clean_query_id(trip_id)
    if not trip_id:
        return {"data": []}
    trip_id = validate_trip_id(trip_id, allow_mock=store.accepts_mock_ids)
    return {"data": await store.list_schedule(trip_id)}


@router.post("", status_code=201, response_model=DataResponse, responses=ERROR_RESPONSES)
async def create_schedule_item(payload: ScheduleItemCreate, store: TripStore = Depends(get_store)):
    fields = payload.model_dump()
    fields["trip_id"] = validate_trip_id(payload.trip_id, allow_mock=store.accepts_mock_ids)
    return {"data": await store.create_schedule(fields)}


@router.put("/{item_id}", response_model=DataResponse, responses=ERROR_RESPONSES)
async def update_schedule_item(item_id: str, payload: ScheduleItemUpdate, store: TripStore = Depends(get_store)):
    """Merge the sent fields into the item"""
    return {"data": await store.update_schedule(item_id, payload.changes())}


@router.delete("/{item_id}", response_model=DataResponse, responses=ERROR_RESPONSES)
async def delete_schedule_item(item_id: str, store: TripStore = Depends(get_store)):
    """Delete an item; unknown ids are not an error"""
    await store.delete_schedule(item_id)
    return {"data": {"id": item_id}}
