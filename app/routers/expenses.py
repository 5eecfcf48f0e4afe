"""Expense routes"""
from typing import Optional
from fastapi import APIRouter, Depends
from ..dependencies import get_store
from ..schemas.request import ExpenseCreate, ExpenseUpdate
from ..schemas.response import DataResponse, ERROR_RESPONSES
from ..storage import TripStore
from ..validators.input_validator import clean_query_id, validate_trip_id

router = APIRouter(prefix="/expenses", tags=["expenses"])


@router.get("", response_model=DataResponse, responses=ERROR_RESPONSES)
async def list_expenses(trip_id: Optional[str] = None, store: TripStore = Depends(get_store)):
    """
    List a trip's expenses

    Args:
        trip_id: Trip id; when missing the list is empty
        store: Active store

    Returns:
        {data: Expense[]}, newest first on the mock store

    Raises:
        ValidationError: If trip_id is malformed
    """
    trip_id = clean_query_id(trip_id)
    if not trip_id:
        return {"data": []}
    trip_id = validate_trip_id(trip_id, allow_mock=store.accepts_mock_ids)
    return {"data": await store.list_expenses(trip_id)}


@router.post("", status_code=201, response_model=DataResponse, responses=ERROR_RESPONSES)
async def create_expense(payload: ExpenseCreate, store: TripStore = Depends(get_store)):
    """
    Record an expense

    The amount must be a positive number. The per-person share is not
    stored; clients derive it from amount and participants.
    """
    fields = payload.model_dump()
    fields["trip_id"] = validate_trip_id(payload.trip_id, allow_mock=store.accepts_mock_ids)
    return {"data": await store.create_expense(fields)}


@router.put("/{expense_id}", response_model=DataResponse, responses=ERROR_RESPONSES)
async def update_expense(expense_id: str, payload: ExpenseUpdate, store: TripStore = Depends(get_store)):
    return {"data": await store.update_expense(expense_id, payload.changes())}


@router.delete("/{expense_id}", response_model=DataResponse, responses=ERROR_RESPONSES)
async def delete_expense(expense_id: str, store: TripStore = Depends(get_store)):
    await store.delete_expense(expense_id)
    return {"data": {"id": expense_id}}
