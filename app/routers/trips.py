"""Trip routes"""
from typing import Optional
from fastapi import APIRouter, Depends
from ..dependencies import get_store
from ..schemas.request import TripCreate
from ..schemas.response import DataResponse, ERROR_RESPONSES
from ..storage import TripStore
from ..validators.input_validator import clean_query_id, validate_trip_id

router = APIRouter(prefix="/trips", tags=["trips"])


@router.get("", response_model=DataResponse, responses=ERROR_RESPONSES)
async def list_trips(user_id: Optional[str] = None, store: TripStore = Depends(get_store)):
    """
    List trips owned by a user

    Args:
        user_id: Owner id; when missing the list is empty
        store: Active store

    Returns:
        {data: Trip[]}
    """
    user_id = clean_query_id(user_id)
    if not user_id:
        return {"data": []}
    user_id = validate_trip_id(user_id, allow_mock=store.accepts_mock_ids, field="user_id")
    return {"data": await store.list_trips(user_id)}


@router.post("", status_code=201, response_model=DataResponse, responses=ERROR_RESPONSES)
async def create_trip(payload: TripCreate, store: TripStore = Depends(get_store)):
    """
    Create a trip

    Returns:
        {data: Trip[]} with the inserted rows
    """
    fields = payload.model_dump()
    fields["owner_id"] = validate_trip_id(payload.owner_id, allow_mock=store.accepts_mock_ids, field="owner_id")
    return {"data": await store.create_trip(fields)}
