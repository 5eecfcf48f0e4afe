"""Trip database model"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class Trip(BaseModel):
    """Trip model matching Supabase trips table schema"""
    id: str
    owner_id: str = Field(..., description="Foreign key to profiles table")
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    currency: str = "USD"
    flags: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        from_attributes = True
