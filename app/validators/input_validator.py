"""Input validation for API requests"""
import re
from typing import Optional
from ..errors import ValidationError

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE
)
MOCK_ID_PREFIX = "mock-"


def is_uuid(value: str) -> bool:
    """Check for the textual 8-4-4-4-12 hex UUID form"""
    return bool(UUID_PATTERN.match(value))


def is_valid_trip_id(value: str, allow_mock: bool = True) -> bool:
    """
    Check a trip (or owner) id

    Args:
        value: Candidate id
        allow_mock: Whether ``mock-`` prefixed ids are accepted

    Returns:
        True if the id is a UUID, or a mock id when those are allowed
    """
    if not isinstance(value, str):
        return False
    if is_uuid(value):
        return True
    return allow_mock and value.startswith(MOCK_ID_PREFIX)


def clean_query_id(value: Optional[str]) -> Optional[str]:
    """Strip a query-string id, treating blank as missing"""
    if value is None:
        return None
    value = value.strip()
    return value or None


def validate_trip_id(value: str, allow_mock: bool = True, field: str = "trip_id") -> str:
    """
    Validate a trip id from a query string or body

    Args:
        value: Id to validate
        allow_mock: Whether the active store accepts ``mock-`` ids
        field: Field name used in the error message

    Returns:
        The stripped id

    Raises:
        ValidationError: If the id is not acceptable
    """
    value = value.strip() if isinstance(value, str) else value
    if is_valid_trip_id(value, allow_mock=allow_mock):
        return value
    if not allow_mock:
        raise ValidationError(f"Invalid {field}: must be a UUID when Supabase is configured")
    raise ValidationError(f"Invalid {field}")


def require_text(value: Optional[str], field: str) -> str:
    """Reject missing or blank strings"""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field} required")
    return value.strip()


def validate_amount(value) -> float:
    """
    Validate an expense amount

    Booleans and numeric strings are rejected; the amount must be a
    finite number greater than zero.

    Raises:
        ValidationError: If the amount is not a positive number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError("amount required and must be > 0")
    amount = float(value)
    if amount != amount or amount in (float("inf"), float("-inf")) or amount <= 0:
        raise ValidationError("amount required and must be > 0")
    return amount


def validate_participants(value) -> list:
    """
    Validate an expense participant list

    Raises:
        ValidationError: If the list is missing, empty, or holds a blank name
    """
    if not isinstance(value, list) or not value:
        raise ValidationError("participants must be a non-empty list of names")
    return [require_text(name, "participant name") for name in value]


def require_flag(value, field: str) -> bool:
    """Reject anything but a JSON boolean"""
    if not isinstance(value, bool):
        raise ValidationError(f"{field} must be true or false")
    return value
