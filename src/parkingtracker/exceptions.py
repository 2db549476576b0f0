"""Custom exception hierarchy for parkingtracker."""

from __future__ import annotations

from datetime import date


class ParkingError(Exception):
    """Base exception for all parkingtracker errors."""


class ParkingConfigError(ParkingError):
    """Invalid or missing configuration."""


class ParkingValidationError(ParkingError):
    """Raw operator input failed validation.

    Always recoverable: the caller reprompts.
    """

    def __init__(self, message: str, *, value: str = "") -> None:
        self.value = value
        super().__init__(message)


class InvalidPlateFormatError(ParkingValidationError):
    """License plate contains something other than letters and digits."""


class InvalidPlateLengthError(ParkingValidationError):
    """License plate is not 6 or 7 characters long."""


class MalformedDateError(ParkingValidationError):
    """Date does not match the ``MM/DD/YYYY`` pattern."""


class InvalidRecordFieldError(ParkingValidationError):
    """A record field (make, model, color, date) was rejected by the model.

    ``field`` names the first offending field.
    """

    def __init__(self, message: str, *, value: str = "", field: str = "") -> None:
        self.field = field
        super().__init__(message, value=value)


class DateNotInFutureError(ParkingValidationError):
    """Date is today or earlier.

    ``reference_date`` is the calendar day the input was compared against.
    """

    def __init__(self, message: str, *, value: str = "", reference_date: date | None = None) -> None:
        self.reference_date = reference_date
        super().__init__(message, value=value)


class ParkingStoreError(ParkingError):
    """A store operation could not be applied."""

    def __init__(self, message: str, *, plate: str = "") -> None:
        self.plate = plate
        super().__init__(message)


class DuplicatePlateError(ParkingStoreError):
    """A record with the same normalized plate already exists."""


class RecordNotFoundError(ParkingStoreError):
    """No record matches the requested plate."""


class DataInconsistencyError(ParkingError):
    """A subscribed record has no expiration date.

    Reported, never corrected: the store leaves the record as it is.
    """

    def __init__(self, message: str, *, plate: str = "") -> None:
        self.plate = plate
        super().__init__(message)
