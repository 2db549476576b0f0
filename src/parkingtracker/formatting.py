"""Text rendering helpers for the terminal session.

Everything here returns strings; nothing prints.
"""

from __future__ import annotations

from datetime import date

from parkingtracker._constants import DATE_FORMAT, NO_DATE_PLACEHOLDER
from parkingtracker.models import SubscriptionStatus, VehicleRecord

RULE = "-" * 50
WIDE_RULE = "-" * 57

ALL_CARS_HEADER = "License Plate:   Make, Model:           Color:       Covered Parking:   Expiration:"
SUBSCRIBED_HEADER = "License Plate:       Expiration Date:"

# Column widths for the full listing: plate, make+model, color, subscribed.
_ALL_WIDTHS = (16, 22, 12, 18)
_SUBSCRIBED_PLATE_WIDTH = 21


def pad(text: str, width: int) -> str:
    """Left-align *text* in exactly *width* characters, truncating overflow."""
    return text[:width].ljust(width)


def format_date(value: date | None) -> str | None:
    if value is None:
        return None
    return value.strftime(DATE_FORMAT)


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def format_all_row(record: VehicleRecord) -> str:
    plate_w, make_model_w, color_w, subbed_w = _ALL_WIDTHS
    return " ".join(
        (
            pad(record.license_plate, plate_w),
            pad(record.make_model, make_model_w),
            pad(record.color, color_w),
            pad(yes_no(record.subscribed), subbed_w),
            format_date(record.expiration_date) or NO_DATE_PLACEHOLDER,
        )
    )


def format_subscribed_row(record: VehicleRecord) -> str:
    """One row of the subscribed listing, or an inline warning for a record missing its date."""
    expiration = format_date(record.expiration_date)
    if expiration is None:
        return (
            f"Error( License Plate: {record.license_plate} has active subscription "
            "without valid expiration date.)"
        )
    return f"{pad(record.license_plate, _SUBSCRIBED_PLATE_WIDTH)}{expiration}"


def render_all_table(records: list[VehicleRecord]) -> list[str]:
    return [ALL_CARS_HEADER, "", *(format_all_row(record) for record in records)]


def render_subscribed_table(records: list[VehicleRecord]) -> list[str]:
    return [SUBSCRIBED_HEADER, "", *(format_subscribed_row(record) for record in records)]


def render_details(record: VehicleRecord) -> list[str]:
    lines = [
        f"License Plate: {record.license_plate}",
        f"Make: {record.make}",
        f"Model: {record.model}",
        f"Color: {record.color}",
        f"Subscribed to covered parking: {yes_no(record.subscribed)}",
    ]
    expiration = format_date(record.expiration_date)
    if expiration is not None:
        lines.append(f"Covered parking expiration: {expiration}")
    return lines


def describe_status(status: SubscriptionStatus) -> str:
    if status is SubscriptionStatus.EXPIRED:
        return "This covered parking subscription has expired."
    if status is SubscriptionStatus.NOT_EXPIRED:
        return "This covered parking subscription is active."
    return "That car does not have an active subscription!"
