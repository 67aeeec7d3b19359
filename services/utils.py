# services/utils.py

import re
from datetime import date, datetime

from models.roomingList import VALID_AGREEMENT_TYPES, VALID_STATUSES
from repositories.filters import (
    BOOKING_SORT_COLUMNS,
    ROOMING_LIST_SORT_COLUMNS,
    SORT_ORDERS,
    BookingFilters,
    RoomingListFilters,
)
from services.errors import ValidationError

DATE_FORMAT = "%Y-%m-%d"

# bounds of a signed 32-bit INTEGER column
INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIMESTAMP_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}[T ]")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

_CAMEL_BOUNDARY = re.compile(r'_([a-z0-9])')


def to_camel(name):
    return _CAMEL_BOUNDARY.sub(lambda m: m.group(1).upper(), name)


def serialize(row):
    """Render a store row with camelCase keys and ISO dates."""
    if row is None:
        return None
    result = {}
    for key, value in row.items():
        if isinstance(value, (date, datetime)):
            value = value.isoformat()
        elif isinstance(value, list):
            value = [serialize(item) for item in value]
        result[to_camel(key)] = value
    return result


def serialize_rows(rows):
    return [serialize(row) for row in rows]


def parse_date(value, field_name):
    """
    Accept a plain ``YYYY-MM-DD`` date or a full ISO 8601 timestamp.

    Timestamps keep only their date part. Anything else, including a valid date
    followed by trailing text, is rejected.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a date in 'YYYY-MM-DD' format.")
    text = value.strip()
    try:
        if _DATE_PATTERN.fullmatch(text):
            return datetime.strptime(text, DATE_FORMAT).date()
        if _TIMESTAMP_PATTERN.match(text):
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
    except ValueError:
        pass
    raise ValidationError(f"{field_name} must be a date in 'YYYY-MM-DD' format.")


def check_id(value, field_name='id'):
    """Reject integers the INTEGER columns cannot hold."""
    if not INT_MIN <= value <= INT_MAX:
        raise ValidationError(f"{field_name} is out of range.")
    return value


def parse_int(value, field_name):
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer.")
    if isinstance(value, str) and _INT_PATTERN.fullmatch(value.strip()):
        value = int(value.strip())
    if not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer.")
    return check_id(value, field_name)


def parse_text(value, field_name):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string.")
    value = value.strip()
    return value or None


def require_fields(data, required_fields):
    """Raise ValidationError naming every required field that is absent or blank."""
    missing = [
        field for field in required_fields
        if data.get(field) is None or (isinstance(data.get(field), str) and not data.get(field).strip())
    ]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def extract_values(data, field_specs, required=()):
    """
    Map a camelCase payload onto column values.

    ``field_specs`` maps payload key -> (column name, parser). Only keys present
    in the payload are returned, which gives update calls their partial semantics.
    Keys listed in ``required`` may not be cleared with null or blank values.
    """
    values = {}
    for key, (column, parser) in field_specs.items():
        if key not in data:
            continue
        raw = data[key]
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            if key in required:
                raise ValidationError(f"{key} cannot be empty.")
            values[column] = None
            continue
        values[column] = parser(raw, key)
    return values


def validate_status(status, field_name='status'):
    if status not in VALID_STATUSES:
        raise ValidationError(
            f"Invalid {field_name} value: {status}. Expected one of: {', '.join(VALID_STATUSES)}"
        )
    return status


def validate_agreement_type(agreement_type, field_name='agreementType'):
    if agreement_type not in VALID_AGREEMENT_TYPES:
        raise ValidationError(
            f"Invalid {field_name} value: {agreement_type}. "
            f"Expected one of: {', '.join(VALID_AGREEMENT_TYPES)}"
        )
    return agreement_type


def _status_param(args):
    status = args.get('status') or None
    if status is None or status == 'all':
        return None
    return validate_status(status)


def _sort_params(args, allowed_columns):
    sort_by = args.get('sortBy') or None
    sort_order = (args.get('sortOrder') or 'asc').lower()
    if sort_by is not None and sort_by not in allowed_columns:
        raise ValidationError(
            f"Invalid sortBy value: {sort_by}. Expected one of: {', '.join(allowed_columns)}"
        )
    if sort_order not in SORT_ORDERS:
        raise ValidationError(f"Invalid sortOrder value: {sort_order}. Expected 'asc' or 'desc'.")
    return sort_by, sort_order


def parse_booking_filters(args):
    sort_by, sort_order = _sort_params(args, BOOKING_SORT_COLUMNS)
    status = _status_param(args)
    date_from = args.get('dateFrom') or None
    date_to = args.get('dateTo') or None
    return BookingFilters(
        search=args.get('search') or None,
        status=status,
        date_from=parse_date(date_from, 'dateFrom') if date_from else None,
        date_to=parse_date(date_to, 'dateTo') if date_to else None,
        sort_by=sort_by,
        sort_order=sort_order,
    )


def parse_rooming_list_filters(args):
    sort_by, sort_order = _sort_params(args, ROOMING_LIST_SORT_COLUMNS)
    status = _status_param(args)
    return RoomingListFilters(
        search=args.get('search') or None,
        status=status,
        sort_by=sort_by,
        sort_order=sort_order,
    )
