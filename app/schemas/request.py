"""Request schemas for API endpoints"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field, field_validator, model_validator
from ..validators.input_validator import require_flag, require_text, validate_amount, validate_participants


def utc_now_iso() -> str:
    """Current time as an ISO 8601 string with millisecond precision"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TripCreate(BaseModel):
    """Request body for POST /api/trips"""
    model_config = {"extra": "ignore"}

    owner_id: str = Field(..., description="Owner profile id (UUID or mock- id)")
    title: str = Field(..., description="Trip title")
    description: Optional[str] = None
    start_date: Optional[str] = Field(None, description="YYYY-MM-DD")
    end_date: Optional[str] = Field(None, description="YYYY-MM-DD")
    currency: str = Field(default="USD", min_length=3, max_length=3)
    flags: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v):
        return require_text(v, "title")

    @field_validator("currency")
    @classmethod
    def currency_upper(cls, v):
        return v.upper()


class ScheduleItemCreate(BaseModel):
    """Request body for POST /api/schedule"""
    model_config = {"extra": "ignore"}

    trip_id: str = Field(..., description="Trip id (UUID or mock- id)")
    title: str = Field(..., description="Event title")
    start: str = Field(default_factory=utc_now_iso, description="Start time (ISO 8601), defaults to now")
    end: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)
    place_id: Optional[str] = None
    ai_generated: bool = False

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v):
        return require_text(v, "title")

    @field_validator("start")
    @classmethod
    def start_is_timestamp(cls, v):
        """Accept only parseable ISO 8601 timestamps"""
        parse_timestamp(v)
        return v


class ScheduleItemUpdate(BaseModel):
    """Request body for PUT /api/schedule/{id}; only sent fields are merged"""
    model_config = {"extra": "ignore"}

    title: Optional[str] = None
    start: Optional[str] = None
    end: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None
    lat: Optional[float] = Field(None, ge=-90, le=90)
    lng: Optional[float] = Field(None, ge=-180, le=180)
    place_id: Optional[str] = None
    ai_generated: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, v):
        return require_text(v, "title")

    @field_validator("ai_generated", mode="before")
    @classmethod
    def ai_generated_is_flag(cls, v):
        return require_flag(v, "ai_generated")

    @field_validator("start")
    @classmethod
    def start_is_timestamp(cls, v):
        parse_timestamp(v)
        return v

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class ExpenseCreate(BaseModel):
    """
    Request body for POST /api/expenses

    payer defaults to "Unknown" and participants to just the payer.
    """
    model_config = {"extra": "ignore"}

    trip_id: str = Field(..., description="Trip id (UUID or mock- id)")
    description: str = Field(..., description="What the money was spent on")
    amount: float = Field(..., description="Positive amount")
    payer: Optional[str] = None
    participants: Optional[List[str]] = None

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v):
        return require_text(v, "description")

    @field_validator("amount", mode="before")
    @classmethod
    def amount_positive(cls, v):
        return validate_amount(v)

    @field_validator("participants", mode="before")
    @classmethod
    def participants_named(cls, v):
        # Missing or empty falls back to the payer below
        if v is None or v == []:
            return None
        return validate_participants(v)

    @model_validator(mode="after")
    def default_payer_and_participants(self):
        if not self.payer or not self.payer.strip():
            self.payer = "Unknown"
        if not self.participants:
            self.participants = [self.payer]
        return self


class ExpenseUpdate(BaseModel):
    """Request body for PUT /api/expenses/{id}; only sent fields are merged"""
    model_config = {"extra": "ignore"}

    description: Optional[str] = None
    amount: Optional[float] = None
    payer: Optional[str] = None
    participants: Optional[List[str]] = None

    @field_validator("description")
    @classmethod
    def description_not_blank(cls, v):
        return require_text(v, "description")

    @field_validator("amount", mode="before")
    @classmethod
    def amount_positive(cls, v):
        return validate_amount(v)

    @field_validator("payer", mode="before")
    @classmethod
    def payer_not_blank(cls, v):
        return require_text(v, "payer")

    @field_validator("participants", mode="before")
    @classmethod
    def participants_named(cls, v):
        return validate_participants(v)

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


def parse_timestamp(value: str) -> datetime:
    """
    Parse an ISO 8601 timestamp, accepting a trailing Z

    Raises:
        ValueError: If the value is not a timestamp
    """
    if not isinstance(value, str):
        raise ValueError("start must be an ISO 8601 timestamp")
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise ValueError("start must be an ISO 8601 timestamp")
