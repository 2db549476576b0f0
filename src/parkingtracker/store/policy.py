"""Subscription expiry policy.

Pure functions over dates; the store and the session both call these
so "expired" has exactly one definition.
"""

from __future__ import annotations

from datetime import date, datetime

from parkingtracker.models import SubscriptionStatus, VehicleRecord
from parkingtracker.validation import to_calendar_date


def is_expired(now: date | datetime, expires_on: date) -> bool:
    # A subscription runs out at the start of its expiration day.
    return to_calendar_date(now) >= expires_on


def subscription_status(record: VehicleRecord, reference_now: date | datetime) -> SubscriptionStatus:
    """Classify *record* against *reference_now*.

    Records without an expiration date report ``NO_SUBSCRIPTION``
    regardless of the ``subscribed`` flag.
    """
    if record.expiration_date is None:
        return SubscriptionStatus.NO_SUBSCRIPTION
    if is_expired(reference_now, record.expiration_date):
        return SubscriptionStatus.EXPIRED
    return SubscriptionStatus.NOT_EXPIRED
