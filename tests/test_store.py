from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import pytest

from parkingtracker.exceptions import (
    DataInconsistencyError,
    DuplicatePlateError,
    InvalidPlateLengthError,
    InvalidRecordFieldError,
    ParkingConfigError,
    ParkingValidationError,
    RecordNotFoundError,
)
from parkingtracker.models import SubscriptionStatus, VehicleRecord
from parkingtracker.store import VehicleRecordStore, is_expired, subscription_status


class _Clock:
    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def _dt() -> datetime:
    return datetime(2026, 1, 1, 9, 0, tzinfo=UTC)


@pytest.fixture
def clock() -> _Clock:
    return _Clock(_dt())


@pytest.fixture
def store(clock: _Clock) -> VehicleRecordStore:
    return VehicleRecordStore(clock=clock)


def test_add_then_find_returns_equal_record(store: VehicleRecordStore) -> None:
    added = store.add_record("abc123", "Toyota", "Corolla", "Red", True, date(2027, 5, 1))
    found = store.find_by_plate("ABC123")

    assert found == added
    assert found == VehicleRecord(
        license_plate="ABC123",
        make="Toyota",
        model="Corolla",
        color="Red",
        subscribed=True,
        expiration_date=date(2027, 5, 1),
    )


def test_find_is_case_insensitive(store: VehicleRecordStore) -> None:
    store.add_record("XYZ7890", "Ford", "Focus", "Gray")
    assert store.find_by_plate("xyz7890") is not None
    assert "xYz7890" in store


def test_find_missing_returns_none(store: VehicleRecordStore) -> None:
    assert store.find_by_plate("NOPE123") is None


def test_require_missing_raises(store: VehicleRecordStore) -> None:
    with pytest.raises(RecordNotFoundError) as exc_info:
        store.require("nope123")
    assert exc_info.value.plate == "NOPE123"


def test_duplicate_plate_differing_in_case_rejected(store: VehicleRecordStore) -> None:
    store.add_record("ABC1234", "Honda", "Civic", "Blue")
    with pytest.raises(DuplicatePlateError):
        store.add_record("abc1234", "Mazda", "3", "White")

    # The first record is untouched.
    record = store.require("ABC1234")
    assert record.make == "Honda"
    assert len(store) == 1


def test_add_rejects_invalid_plate(store: VehicleRecordStore) -> None:
    with pytest.raises(InvalidPlateLengthError):
        store.add_record("AB12", "Honda", "Civic", "Blue")
    assert len(store) == 0


def test_add_subscribed_without_date_rejected(store: VehicleRecordStore) -> None:
    with pytest.raises(DataInconsistencyError):
        store.add_record("ABC1234", "Honda", "Civic", "Blue", True)
    assert store.find_by_plate("ABC1234") is None


def test_add_does_not_recheck_past_dates(store: VehicleRecordStore) -> None:
    record = store.add_record("OLD1234", "Honda", "Civic", "Blue", True, date(2000, 1, 1))
    assert record.expiration_date == date(2000, 1, 1)


def test_add_rejects_blank_fields_with_parking_error(store: VehicleRecordStore) -> None:
    with pytest.raises(InvalidRecordFieldError) as exc_info:
        store.add_record("ABC1234", "Honda", "   ", "Blue")

    assert isinstance(exc_info.value, ParkingValidationError)
    assert exc_info.value.field == "model"
    assert len(store) == 0


def test_update_without_date_rejected_and_record_unchanged(store: VehicleRecordStore) -> None:
    store.add_record("ABC1234", "Honda", "Civic", "Blue")

    with pytest.raises(DataInconsistencyError):
        store.update_subscription("ABC1234", None)  # type: ignore[arg-type]

    record = store.require("ABC1234")
    assert record.subscribed is False
    assert record.expiration_date is None


def test_update_with_invalid_date_leaves_record_untouched(store: VehicleRecordStore) -> None:
    store.add_record("ABC1234", "Honda", "Civic", "Blue")

    with pytest.raises(InvalidRecordFieldError) as exc_info:
        store.update_subscription("ABC1234", "not-a-date")  # type: ignore[arg-type]
    assert exc_info.value.field == "expiration_date"

    record = store.require("ABC1234")
    assert record.subscribed is False
    assert record.expiration_date is None
    assert record.is_consistent


def test_failed_renewal_keeps_previous_date(store: VehicleRecordStore) -> None:
    store.add_record("REN1234", "Subaru", "Outback", "Green", True, date(2027, 1, 1))

    with pytest.raises(InvalidRecordFieldError):
        store.update_subscription("REN1234", "13/45/2027")  # type: ignore[arg-type]

    assert store.require("REN1234").expiration_date == date(2027, 1, 1)


def test_delete_then_find_returns_none(store: VehicleRecordStore) -> None:
    store.add_record("DEL1234", "Kia", "Rio", "Black")
    deleted = store.delete_record("del1234")

    assert deleted.license_plate == "DEL1234"
    assert store.find_by_plate("DEL1234") is None
    assert len(store) == 0


def test_delete_missing_raises(store: VehicleRecordStore) -> None:
    with pytest.raises(RecordNotFoundError):
        store.delete_record("GONE123")


def test_update_missing_raises(store: VehicleRecordStore) -> None:
    with pytest.raises(RecordNotFoundError):
        store.update_subscription("GONE123", date(2099, 1, 1))


def test_returned_records_are_snapshots(store: VehicleRecordStore) -> None:
    store.add_record("SNAP123", "Kia", "Rio", "Black")
    snapshot = store.require("SNAP123")
    snapshot.color = "Pink"

    assert store.require("SNAP123").color == "Black"


def test_example_scenario(store: VehicleRecordStore) -> None:
    store.add_record("ABC1234", "Honda", "Civic", "Blue", False, None)
    assert len(store.list_all()) == 1
    assert store.list_subscribed() == []

    store.update_subscription("abc1234", date(2099, 1, 1))

    record = store.find_by_plate("ABC1234")
    assert record is not None
    assert record.subscribed is True
    assert record.expiration_date == date(2099, 1, 1)
    assert len(store.list_subscribed()) == 1


def test_update_then_expire_as_clock_advances(store: VehicleRecordStore, clock: _Clock) -> None:
    store.add_record("EXP1234", "Subaru", "Outback", "Green")
    assert store.subscription_status("EXP1234") == SubscriptionStatus.NO_SUBSCRIPTION

    store.update_subscription("EXP1234", date(2026, 1, 10))
    assert store.subscription_status("EXP1234") == SubscriptionStatus.NOT_EXPIRED

    clock.now = datetime(2026, 1, 9, 23, 59, tzinfo=UTC)
    assert store.subscription_status("EXP1234") == SubscriptionStatus.NOT_EXPIRED

    clock.now = datetime(2026, 1, 10, 0, 0, tzinfo=UTC)
    assert store.subscription_status("EXP1234") == SubscriptionStatus.EXPIRED


def test_renewal_replaces_expired_date(store: VehicleRecordStore) -> None:
    store.add_record("REN1234", "Subaru", "Outback", "Green", True, date(2025, 6, 1))
    assert store.subscription_status("REN1234") == SubscriptionStatus.EXPIRED

    store.update_subscription("REN1234", _dt().date() + timedelta(days=30))
    assert store.subscription_status("REN1234") == SubscriptionStatus.NOT_EXPIRED


def test_explicit_reference_overrides_clock(store: VehicleRecordStore) -> None:
    record = store.add_record("REF1234", "Subaru", "Outback", "Green", True, date(2026, 2, 1))
    assert store.subscription_status(record, date(2026, 2, 1)) == SubscriptionStatus.EXPIRED
    assert store.subscription_status(record, date(2026, 1, 31)) == SubscriptionStatus.NOT_EXPIRED


def test_listing_keeps_insertion_order(store: VehicleRecordStore) -> None:
    for plate in ("ZZZ111", "AAA111", "MMM111"):
        store.add_record(plate, "Make", "Model", "Color")
    assert [r.license_plate for r in store.list_all()] == ["ZZZ111", "AAA111", "MMM111"]
    assert [r.license_plate for r in store] == ["ZZZ111", "AAA111", "MMM111"]


def test_listing_sorted_by_plate(clock: _Clock) -> None:
    store = VehicleRecordStore(clock=clock, list_order="plate")
    for plate in ("ZZZ111", "AAA111", "MMM111"):
        store.add_record(plate, "Make", "Model", "Color")
    assert [r.license_plate for r in store.list_all()] == ["AAA111", "MMM111", "ZZZ111"]


def test_unknown_list_order_rejected() -> None:
    with pytest.raises(ParkingConfigError):
        VehicleRecordStore(list_order="random")


def test_inconsistent_record_is_listed_and_reported(store: VehicleRecordStore) -> None:
    broken = VehicleRecord(license_plate="BAD1234", make="VW", model="Golf", color="Silver", subscribed=True)
    store._records[broken.license_plate] = broken  # noqa: SLF001
    store.add_record("GOOD123", "VW", "Polo", "Blue", True, date(2099, 1, 1))

    subscribed = store.list_subscribed()
    assert [r.license_plate for r in subscribed] == ["BAD1234", "GOOD123"]
    assert [r.license_plate for r in store.inconsistencies()] == ["BAD1234"]
    with pytest.raises(DataInconsistencyError):
        store.check_consistency(broken)
    assert store.subscription_status(broken) == SubscriptionStatus.NO_SUBSCRIPTION


class TestPolicy:
    def test_is_expired_on_expiration_day(self) -> None:
        assert is_expired(date(2026, 3, 1), date(2026, 3, 1))
        assert not is_expired(date(2026, 2, 28), date(2026, 3, 1))

    def test_status_without_date(self) -> None:
        record = VehicleRecord(license_plate="ABC123", make="a", model="b", color="c")
        assert subscription_status(record, _dt()) == SubscriptionStatus.NO_SUBSCRIPTION
