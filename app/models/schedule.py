"""Schedule item database model"""
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class ScheduleItem(BaseModel):
    """
    Schedule item as returned by the API

    Supabase stores items under a schedule_days row (one per trip and date);
    the store flattens that back into trip_id and start.
    """
    id: str
    trip_id: str = Field(..., description="Trip the item belongs to")
    title: str = Field(..., min_length=1)
    start: str = Field(..., description="Start time (ISO 8601)")
    end: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    place_id: Optional[str] = None
    ai_generated: bool = False

    class Config:
        from_attributes = True

    @classmethod
    def from_row(cls, row: Dict[str, Any], trip_id: str) -> "ScheduleItem":
        """Build an item from a schedule_items row"""
        return cls(
            id=str(row["id"]),
            trip_id=trip_id,
            title=row["title"],
            start=row["start_time"],
            end=row.get("end_time"),
            location=row.get("location"),
            notes=row.get("description"),
            lat=row.get("lat"),
            lng=row.get("lng"),
            place_id=row.get("place_id"),
            ai_generated=bool(row.get("ai_generated", False))
        )


# API field name -> schedule_items column
ROW_COLUMNS = {
    "title": "title",
    "start": "start_time",
    "end": "end_time",
    "location": "location",
    "notes": "description",
    "lat": "lat",
    "lng": "lng",
    "place_id": "place_id",
    "ai_generated": "ai_generated",
}


def to_row(fields: Dict[str, Any]) -> Dict[str, Any]:
    """Rename API fields to schedule_items columns, dropping unknown keys"""
    return {ROW_COLUMNS[key]: value for key, value in fields.items() if key in ROW_COLUMNS}
