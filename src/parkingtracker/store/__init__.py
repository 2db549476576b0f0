"""Record store layer.

This package is the single source of truth for the set of vehicle
records and for how a subscription's expiry is judged.
"""

from parkingtracker.store.policy import is_expired, subscription_status
from parkingtracker.store.store import VehicleRecordStore

__all__ = [
    "VehicleRecordStore",
    "is_expired",
    "subscription_status",
]
