"""parkingtracker - In-memory tracker for residents' cars and covered parking."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("parkingtracker")
except PackageNotFoundError:
    __version__ = "0+local"
from parkingtracker.config import ParkingConfig
from parkingtracker.exceptions import (
    DataInconsistencyError,
    DateNotInFutureError,
    DuplicatePlateError,
    InvalidPlateFormatError,
    InvalidPlateLengthError,
    InvalidRecordFieldError,
    MalformedDateError,
    ParkingConfigError,
    ParkingError,
    ParkingStoreError,
    ParkingValidationError,
    RecordNotFoundError,
)
from parkingtracker.models import SubscriptionStatus, VehicleRecord
from parkingtracker.session import TerminalSession
from parkingtracker.store import VehicleRecordStore
from parkingtracker.validation import validate_future_date, validate_license_plate

__all__ = [
    "__version__",
    "DataInconsistencyError",
    "DateNotInFutureError",
    "DuplicatePlateError",
    "InvalidPlateFormatError",
    "InvalidPlateLengthError",
    "InvalidRecordFieldError",
    "MalformedDateError",
    "ParkingConfig",
    "ParkingConfigError",
    "ParkingError",
    "ParkingStoreError",
    "ParkingValidationError",
    "RecordNotFoundError",
    "SubscriptionStatus",
    "TerminalSession",
    "VehicleRecord",
    "VehicleRecordStore",
    "validate_future_date",
    "validate_license_plate",
]
