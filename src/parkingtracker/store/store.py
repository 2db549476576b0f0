"""In-memory vehicle record store.

This is the only component allowed to mutate vehicle records.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from parkingtracker._constants import LIST_ORDERS
from parkingtracker.exceptions import (
    DataInconsistencyError,
    DuplicatePlateError,
    InvalidRecordFieldError,
    ParkingConfigError,
    RecordNotFoundError,
)
from parkingtracker.models import SubscriptionStatus, VehicleRecord
from parkingtracker.store.policy import subscription_status
from parkingtracker.validation import normalize_plate, validate_license_plate

_logger = logging.getLogger(__name__)


def _localnow() -> datetime:
    return datetime.now().astimezone()


def _build_record(**fields: Any) -> VehicleRecord:
    """Validate *fields* into a record, mapping model errors onto :class:`InvalidRecordFieldError`."""
    try:
        return VehicleRecord(**fields)
    except ValidationError as exc:
        error = exc.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        raise InvalidRecordFieldError(
            f"Invalid value for {field}: {error['msg']}",
            value=str(error.get("input", "")),
            field=field,
        ) from exc


class VehicleRecordStore:
    """Plate-keyed store of :class:`VehicleRecord`.

    Records are held in a dict keyed by normalized plate. Every read
    hands out a copy, so callers cannot break the store's invariants by
    mutating what they were given.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = _localnow,
        list_order: str = "insertion",
    ) -> None:
        if list_order not in LIST_ORDERS:
            raise ParkingConfigError(f"list_order must be one of {sorted(LIST_ORDERS)}, got {list_order!r}")
        self._clock = clock
        self._list_order = list_order
        self._records: dict[str, VehicleRecord] = {}
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, plate: object) -> bool:
        return isinstance(plate, str) and normalize_plate(plate) in self._records

    def __iter__(self) -> Iterator[VehicleRecord]:
        return iter(self.list_all())

    def now(self) -> datetime:
        """Current time according to the store's clock."""
        return self._clock()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_record(
        self,
        plate: str,
        make: str,
        model: str,
        color: str,
        subscribed: bool = False,
        expiration_date: date | None = None,
    ) -> VehicleRecord:
        """Insert a new record.

        *expiration_date* is expected to be future-validated already;
        only its presence is checked against *subscribed*.
        """
        key = validate_license_plate(plate)
        if subscribed and expiration_date is None:
            raise DataInconsistencyError(
                f"License plate {key} cannot be subscribed without an expiration date",
                plate=key,
            )
        record = _build_record(
            license_plate=key,
            make=make,
            model=model,
            color=color,
            subscribed=subscribed,
            expiration_date=expiration_date,
        )
        with self._lock:
            if key in self._records:
                raise DuplicatePlateError(f"A car with license plate {key} already exists", plate=key)
            self._records[key] = record
        _logger.debug("Record added plate=%s subscribed=%s", key, subscribed)
        return record.model_copy()

    def update_subscription(self, plate: str, new_expiration_date: date) -> VehicleRecord:
        """Subscribe (or renew) the record for *plate* until *new_expiration_date*.

        All-or-nothing: the new state is validated as a whole before it
        replaces the stored record, so a rejected date leaves it unchanged.
        """
        with self._lock:
            current = self._get(plate)
            if new_expiration_date is None:
                raise DataInconsistencyError(
                    f"License plate {current.license_plate} cannot be subscribed without an expiration date",
                    plate=current.license_plate,
                )
            record = _build_record(
                **{**current.model_dump(), "subscribed": True, "expiration_date": new_expiration_date}
            )
            self._records[record.license_plate] = record
        _logger.debug("Subscription updated plate=%s expires=%s", record.license_plate, new_expiration_date)
        return record.model_copy()

    def delete_record(self, plate: str) -> VehicleRecord:
        """Remove the record for *plate* and return it.

        Irreversible. Confirmation is the caller's job.
        """
        with self._lock:
            record = self._get(plate)
            del self._records[record.license_plate]
        _logger.debug("Record deleted plate=%s", record.license_plate)
        return record

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def find_by_plate(self, plate: str) -> VehicleRecord | None:
        record = self._records.get(normalize_plate(plate))
        if record is None:
            return None
        return record.model_copy()

    def require(self, plate: str) -> VehicleRecord:
        """Like :meth:`find_by_plate` but raise when the plate is unknown."""
        return self._get(plate).model_copy()

    def list_all(self) -> list[VehicleRecord]:
        records = list(self._records.values())
        if self._list_order == "plate":
            records.sort(key=lambda r: r.license_plate)
        return [record.model_copy() for record in records]

    def list_subscribed(self) -> list[VehicleRecord]:
        """Subscribed records, including any missing their expiration date.

        Inconsistent records are logged here and left for the display
        layer to flag per row.
        """
        subscribed = [record for record in self.list_all() if record.subscribed]
        for record in subscribed:
            if not record.is_consistent:
                _logger.warning("Subscribed record without expiration date plate=%s", record.license_plate)
        return subscribed

    def subscription_status(
        self,
        record: VehicleRecord | str,
        reference_now: date | datetime | None = None,
    ) -> SubscriptionStatus:
        """Expired / not expired / no subscription for *record* (or a plate).

        *reference_now* defaults to the store's clock.
        """
        if isinstance(record, str):
            record = self._get(record)
        if reference_now is None:
            reference_now = self._clock()
        return subscription_status(record, reference_now)

    # ------------------------------------------------------------------
    # Consistency
    # ------------------------------------------------------------------

    @staticmethod
    def check_consistency(record: VehicleRecord) -> None:
        if not record.is_consistent:
            raise DataInconsistencyError(
                f"License plate {record.license_plate} has active subscription without valid expiration date",
                plate=record.license_plate,
            )

    def inconsistencies(self) -> list[VehicleRecord]:
        return [record for record in self.list_all() if not record.is_consistent]

    def _get(self, plate: str) -> VehicleRecord:
        key = normalize_plate(plate)
        record = self._records.get(key)
        if record is None:
            raise RecordNotFoundError(f"No car exists in the database with license plate {key}", plate=key)
        return record
