"""Operator input validators.

Side-effect-free: every function either returns the normalized value
or raises a :class:`~parkingtracker.exceptions.ParkingValidationError`
subclass describing why the input was rejected.
"""

from __future__ import annotations

from datetime import date, datetime

from parkingtracker._constants import (
    DATE_FORMAT,
    DATE_FORMAT_HINT,
    PLATE_MAX_LENGTH,
    PLATE_MIN_LENGTH,
    PLATE_PATTERN,
)
from parkingtracker.exceptions import (
    DateNotInFutureError,
    InvalidPlateFormatError,
    InvalidPlateLengthError,
    MalformedDateError,
)


def normalize_plate(raw: str) -> str:
    """Uppercase *raw* and strip surrounding whitespace; no validation."""
    return raw.strip().upper()


def validate_license_plate(raw: str) -> str:
    """Return the uppercased plate or raise.

    The character check runs before the length check, so ``"AB-1"``
    reports a format problem rather than a length problem.
    """
    plate = normalize_plate(raw)
    # Checked on the raw text: upper() can lengthen non-ASCII input ("ß" -> "SS").
    if not raw.strip().isascii() or not PLATE_PATTERN.match(plate):
        raise InvalidPlateFormatError(
            "Invalid license plate number! Must only include letters and integers.",
            value=raw,
        )
    if not PLATE_MIN_LENGTH <= len(plate) <= PLATE_MAX_LENGTH:
        raise InvalidPlateLengthError(
            f"Invalid license plate number! Must be {PLATE_MIN_LENGTH}-{PLATE_MAX_LENGTH} characters long.",
            value=raw,
        )
    return plate


def to_calendar_date(moment: date | datetime) -> date:
    """Drop the time of day from *moment*, keeping its own time zone."""
    if isinstance(moment, datetime):
        return moment.date()
    return moment


def parse_date(raw: str) -> date:
    """Parse *raw* with the fixed ``MM/DD/YYYY`` pattern."""
    try:
        return datetime.strptime(raw.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise MalformedDateError(
            f"Invalid expiration date! Ensure date is in this format: {DATE_FORMAT_HINT}",
            value=raw,
        ) from exc


def validate_future_date(raw: str, reference_now: date | datetime) -> date:
    """Parse *raw* and require it to fall on a later calendar day than *reference_now*.

    The comparison is day-granular: any time later today is still
    "today" and is rejected.
    """
    parsed = parse_date(raw)
    today = to_calendar_date(reference_now)
    if parsed <= today:
        raise DateNotInFutureError(
            "You must input a future date!",
            value=raw,
            reference_date=today,
        )
    return parsed
