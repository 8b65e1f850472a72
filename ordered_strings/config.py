import os

from pydantic import BaseModel, Field, StrictInt, ValidationError

from .errors import InvalidArgument

DEFAULT_CAPACITY = 10
RESIZE_FACTOR = 2

# Logging only; list behaviour never depends on the environment.
LOG_LEVEL = os.getenv("ORDERED_LIST_LOG_LEVEL", "INFO").upper()
RESIZE_ALERT_THRESHOLD = int(os.getenv("ORDERED_LIST_RESIZE_ALERT_THRESHOLD", "0"))
INDEX_ERROR_ALERT_THRESHOLD = int(
    os.getenv("ORDERED_LIST_INDEX_ERROR_ALERT_THRESHOLD", "0")
)


class ListSettings(BaseModel):
    capacity: StrictInt = Field(DEFAULT_CAPACITY, ge=1)


def validate_capacity(capacity: int) -> int:
    """Return ``capacity`` if usable, otherwise raise ``InvalidArgument``."""
    try:
        return ListSettings(capacity=capacity).capacity
    except ValidationError as exc:
        raise InvalidArgument(f"capacity must be an integer >= 1, got {capacity!r}") from exc
