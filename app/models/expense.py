"""Expense database model"""
from typing import List
from pydantic import BaseModel, Field


class Expense(BaseModel):
    """Expense model matching Supabase expenses table schema"""
    id: str
    trip_id: str = Field(..., description="Trip the expense belongs to")
    description: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    payer: str = "Unknown"
    participants: List[str] = Field(..., min_length=1, description="Names sharing the expense")

    class Config:
        from_attributes = True
