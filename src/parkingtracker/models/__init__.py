"""Data models for parkingtracker."""

from parkingtracker.models._base import ParkingBaseModel, SubscriptionStatus
from parkingtracker.models.vehicle import VehicleRecord

__all__ = [
    "ParkingBaseModel",
    "SubscriptionStatus",
    "VehicleRecord",
]
