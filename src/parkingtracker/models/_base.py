"""Base model and enum shared by parkingtracker models.

Every record model inherits from :class:`ParkingBaseModel` which
provides:

* ``str_strip_whitespace`` so operator input is trimmed on the way in.
* ``validate_assignment`` so in-place mutation by the store goes
  through the same field validators as construction.
* ``extra="forbid"`` so a typo in a field name fails loudly.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class SubscriptionStatus(StrEnum):
    """Observed state of a record's covered-parking subscription.

    ``NO_SUBSCRIPTION`` is reported for records without an expiration
    date instead of collapsing to "not expired".
    """

    EXPIRED = "expired"
    NOT_EXPIRED = "not_expired"
    NO_SUBSCRIPTION = "no_subscription"


class ParkingBaseModel(BaseModel):
    """Base for mutable records held by the store."""

    model_config = ConfigDict(
        extra="forbid",
        str_strip_whitespace=True,
        validate_assignment=True,
        validate_default=True,
    )
