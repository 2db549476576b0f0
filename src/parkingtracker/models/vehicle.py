"""Vehicle record model."""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import Field, field_validator

from parkingtracker.exceptions import ParkingValidationError
from parkingtracker.models._base import ParkingBaseModel
from parkingtracker.validation import validate_license_plate


class VehicleRecord(ParkingBaseModel):
    """A resident's vehicle and its covered-parking subscription.

    Records are keyed by :attr:`license_plate` in the store. A record
    with ``subscribed=True`` and no ``expiration_date`` can be built
    (so that it can be detected and reported) but the store never
    creates one itself.
    """

    license_plate: str = Field(..., description="Normalized plate, 6-7 uppercase letters/digits")
    make: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    subscribed: bool = False
    expiration_date: date | None = None
    """Last subscription expiry; may already have elapsed."""

    @field_validator("license_plate", mode="before")
    @classmethod
    def _normalize_plate(cls, value: Any) -> Any:
        if not isinstance(value, str):
            return value
        try:
            return validate_license_plate(value)
        except ParkingValidationError as exc:
            raise ValueError(str(exc)) from exc

    @property
    def make_model(self) -> str:
        return f"{self.make} {self.model}"

    @property
    def is_consistent(self) -> bool:
        """Whether a subscribed record carries an expiration date."""
        return not self.subscribed or self.expiration_date is not None
