"""
Response reshaping and request normalization for catalog calls.

SOAP responses arrive as nested dicts/lists. A repeated element comes back
as a list when there are several entries, a bare object when there is one,
and nothing at all when there are none; as_sequence() flattens those three
cases into a list.
"""

from datetime import UTC, date, datetime, time, timedelta
from typing import Any, Dict, List, Mapping, Optional

from .models import Category, ProgramDetail

DAY = timedelta(days=1)

# Keys zeep/xml2js use for the text content of an element
VALUE_KEYS = ("$value", "_value_1")


def as_sequence(value: Any) -> List[Any]:
    """
    Normalize a possibly-repeated element to a list.

    None becomes [], a list or tuple becomes a list, anything else becomes
    a one-element list.
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def scalar(value: Any) -> Any:
    """Unwrap ``{"$value": x}`` style text nodes."""
    if isinstance(value, Mapping):
        for key in VALUE_KEYS:
            if key in value:
                return value[key]
    return value


def descend(value: Any, *keys: str) -> Any:
    """
    Walk down through wrapper elements.

    Each key is followed only when the current value is a mapping that
    contains it, so both ``{"A": {"A": [..]}}`` and ``{"A": [..]}`` resolve
    to the list.
    """
    for key in keys:
        if isinstance(value, Mapping) and key in value:
            value = value[key]
    return value


def _items(value: Any, *keys: str) -> List[Any]:
    value = descend(value, *keys)
    if isinstance(value, Mapping) and not value:
        return []
    return as_sequence(value)


# Request normalization


def format_update_time(value: datetime) -> str:
    """Render a datetime as ``yyyyMMddHHmmss``."""
    return value.strftime("%Y%m%d%H%M%S")


def format_prog_date(value: Any) -> Any:
    """Render datetimes and dates as ISO-8601; other values pass through."""
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, date):
        return datetime.combine(value, time()).isoformat()
    return value


def to_datetime(value: Any) -> datetime:
    """
    Coerce a range boundary to a datetime.

    Accepts datetime, date (midnight), ISO-8601 strings and epoch seconds
    (interpreted as UTC).

    Raises:
        ValueError: Value cannot be interpreted as a point in time
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, bool):
        raise ValueError(f"Not a date: {value!r}")
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value, tz=UTC)
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip())
        except ValueError as e:
            raise ValueError(f"Not an ISO-8601 date: {value!r}") from e
    raise ValueError(f"Not a date: {value!r}")


def day_steps(start: Any, end: Any) -> List[datetime]:
    """
    Split [start, end) into 24-hour steps.

    Returns:
        Step start times, beginning at start; empty when end <= start
    """
    current = to_datetime(start)
    stop = to_datetime(end)

    if (current.tzinfo is None) != (stop.tzinfo is None):
        raise ValueError("Range start and end must both be timezone-aware or both naive")

    steps = []
    while current < stop:
        steps.append(current)
        current = current + DAY
    return steps


def normalize_search_params(
    params: Optional[Mapping[str, Any]], defaults: Mapping[str, Any]
) -> Dict[str, Any]:
    """
    Merge caller search params over the defaults and format date fields.

    ``progDate`` dates become ISO-8601; ``updateTime`` dates become
    ``yyyyMMddHHmmss``.
    """
    opts = dict(defaults)
    opts.update(params or {})

    if isinstance(opts.get("progDate"), date):
        opts["progDate"] = format_prog_date(opts["progDate"])

    update_time = opts.get("updateTime")
    if isinstance(update_time, datetime):
        opts["updateTime"] = format_update_time(update_time)
    elif isinstance(update_time, date):
        opts["updateTime"] = format_update_time(datetime.combine(update_time, time()))

    return opts


# Response reshaping


def parse_ids(response: Any) -> List[int]:
    """Program ids from a searchVodPrograms response."""
    items = _items(response, "ArrayOfInteger", "ArrayOfInteger", "item")
    return [int(scalar(item)) for item in items]


def parse_categories(response: Any) -> List[Category]:
    """Category records from a getCategories response."""
    items = _items(response, "ArrayOfCategory", "ArrayOfCategory")
    categories = []
    for item in items:
        fields = {key: scalar(value) for key, value in item.items()}
        categories.append(Category.model_validate(fields))
    return categories


def parse_program_detail(response: Any) -> Optional[ProgramDetail]:
    """
    Program record from a getProgramDetail response.

    Returns:
        ProgramDetail, or None when the response holds no detail element
    """
    details = descend(response, "ProgramDetail")
    if not isinstance(details, Mapping):
        return None

    record = {
        key: scalar(value)
        for key, value in details.items()
        if key not in ("categoryIdArray", "tagArray")
    }
    record["categoryIdArray"] = [
        int(scalar(item))
        for item in _items(details.get("categoryIdArray"), "categoryIdArray", "item")
    ]
    record["tagArray"] = [
        scalar(item) for item in _items(details.get("tagArray"), "tagArray", "item")
    ]

    return ProgramDetail.model_validate(record)
