"""Project Interval Enforcement — date parsing and start/end ordering rules.

Invariants:
    - Intervals are strict: start_date < end_date, equality is rejected
    - Dates are compared as epoch milliseconds; naive datetimes are UTC
    - Update checks compare the *stored* start_date when validating a new
      end_date, even if the same update also carries a new start_date
    - Functions are PURE: they return parsed values or raise ValidationError
    - An empty-string date is treated as not provided

Design Decisions:
    - Error messages use the camelCase field names clients send (startDate, endDate)
    - A stored project without end_date has nothing to order a new start_date against,
      so that comparison is skipped
"""

from datetime import date, datetime, timedelta, timezone

from staffing.core.errors import ValidationError


START_BEFORE_END_MESSAGE = "startDate must be lesser than endDate"
END_AFTER_START_MESSAGE = "endDate must be greater than startDate"

FIELD_LABELS: dict[str, str] = {
    "start_date": "startDate",
    "end_date": "endDate",
}

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_date(value: object, field: str) -> datetime:
    """Parse an ISO-8601 string, date, or datetime into an aware UTC datetime."""
    label = FIELD_LABELS.get(field, field)
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            raise ValidationError(f"{label} must be a date", field=label)
    else:
        raise ValidationError(f"{label} must be a date", field=label)

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops tzinfo on the way back)."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


def is_given(value: object) -> bool:
    """Empty strings count as absent, like a missing key."""
    return value is not None and value != ""


def to_epoch_millis(value: datetime) -> int:
    """Milliseconds since the Unix epoch. Naive values are read as UTC."""
    return (as_utc(value) - _EPOCH) // timedelta(milliseconds=1)


def validate_create_interval(
    start_date: object, end_date: object | None = None,
) -> tuple[datetime, datetime | None]:
    """Parse both ends of a new project's interval and require start < end."""
    start = parse_date(start_date, "start_date")
    if not is_given(end_date):
        return start, None

    end = parse_date(end_date, "end_date")
    if to_epoch_millis(start) >= to_epoch_millis(end):
        raise ValidationError(START_BEFORE_END_MESSAGE, field="startDate")
    return start, end


def validate_update_interval(
    stored: dict, start_date: object | None = None, end_date: object | None = None,
) -> dict[str, datetime]:
    """Check a partial date update against itself and the stored project.

    Returns the parsed values for whichever of start_date/end_date were given.
    """
    parsed: dict[str, datetime] = {}

    if is_given(start_date):
        start = parse_date(start_date, "start_date")
        if is_given(end_date):
            end = parse_date(end_date, "end_date")
            if to_epoch_millis(start) >= to_epoch_millis(end):
                raise ValidationError(START_BEFORE_END_MESSAGE, field="startDate")
        elif stored.get("end_date") is not None:
            if to_epoch_millis(start) >= to_epoch_millis(stored["end_date"]):
                raise ValidationError(START_BEFORE_END_MESSAGE, field="startDate")
        parsed["start_date"] = start

    if is_given(end_date):
        end = parse_date(end_date, "end_date")
        if to_epoch_millis(end) <= to_epoch_millis(stored["start_date"]):
            raise ValidationError(END_AFTER_START_MESSAGE, field="endDate")
        parsed["end_date"] = end

    return parsed
