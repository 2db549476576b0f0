from __future__ import annotations

from datetime import date

from parkingtracker.formatting import (
    ALL_CARS_HEADER,
    describe_status,
    format_all_row,
    format_date,
    format_subscribed_row,
    pad,
    render_details,
)
from parkingtracker.models import SubscriptionStatus, VehicleRecord


def _record(**overrides: object) -> VehicleRecord:
    fields: dict[str, object] = {
        "license_plate": "ABC1234",
        "make": "Honda",
        "model": "Civic",
        "color": "Blue",
    }
    fields.update(overrides)
    return VehicleRecord(**fields)


def test_pad_truncates_and_fills() -> None:
    assert pad("abc", 5) == "abc  "
    assert pad("abcdefgh", 5) == "abcde"


def test_format_date_uses_fixed_pattern() -> None:
    assert format_date(date(2027, 3, 4)) == "03/04/2027"
    assert format_date(None) is None


def test_all_row_columns_line_up_with_header() -> None:
    row = format_all_row(_record(subscribed=True, expiration_date=date(2099, 1, 1)))
    assert row == "ABC1234          Honda Civic            Blue         Yes                01/01/2099"
    assert row.index("Honda") == ALL_CARS_HEADER.index("Make")
    assert row.index("01/01/2099") == ALL_CARS_HEADER.index("Expiration")


def test_all_row_placeholder_without_date() -> None:
    row = format_all_row(_record())
    assert row.endswith("No                 N/A")


def test_subscribed_row() -> None:
    row = format_subscribed_row(_record(subscribed=True, expiration_date=date(2099, 12, 31)))
    assert row == "ABC1234              12/31/2099"


def test_subscribed_row_warns_on_missing_date() -> None:
    row = format_subscribed_row(_record(subscribed=True))
    assert row == "Error( License Plate: ABC1234 has active subscription without valid expiration date.)"


def test_details_skip_expiration_when_absent() -> None:
    lines = render_details(_record())
    assert lines[-1] == "Subscribed to covered parking: No"
    assert not any(line.startswith("Covered parking expiration") for line in lines)

    lines = render_details(_record(subscribed=True, expiration_date=date(2099, 1, 1)))
    assert lines[-1] == "Covered parking expiration: 01/01/2099"


def test_describe_status() -> None:
    assert "expired" in describe_status(SubscriptionStatus.EXPIRED)
    assert "active" in describe_status(SubscriptionStatus.NOT_EXPIRED)
    assert describe_status(SubscriptionStatus.NO_SUBSCRIPTION) == "That car does not have an active subscription!"
