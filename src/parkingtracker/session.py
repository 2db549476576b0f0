"""Interactive terminal session.

Renders the menu, collects raw operator input, reprompts on validation
failures and prints listings. All record state lives in the
:class:`~parkingtracker.store.VehicleRecordStore` the session owns; the
session itself keeps no records.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from parkingtracker._constants import DATE_FORMAT_HINT
from parkingtracker.config import ParkingConfig
from parkingtracker.exceptions import (
    DateNotInFutureError,
    DuplicatePlateError,
    MalformedDateError,
    ParkingValidationError,
    RecordNotFoundError,
)
from parkingtracker.formatting import (
    RULE,
    WIDE_RULE,
    describe_status,
    format_date,
    render_all_table,
    render_details,
    render_subscribed_table,
)
from parkingtracker.models import VehicleRecord
from parkingtracker.store import VehicleRecordStore
from parkingtracker.validation import validate_future_date, validate_license_plate

_logger = logging.getLogger(__name__)

MENU_OPTIONS: tuple[str, ...] = (
    "Add new resident car (without covered parking).",
    "Add new resident car (with covered parking).",
    "Add or extend covered parking on existing car.",
    "See covered parking expiration date of a car.",
    "See covered parking expiration dates of all cars.",
    "See all details of a specific car.",
    "See all cars in database.",
    "Delete a car from the database.",
    "Exit program.",
)


class TerminalSession:
    """Menu-driven front end over one :class:`VehicleRecordStore`.

    Parameters
    ----------
    store : VehicleRecordStore or None
        Store to operate on. A fresh one is created when omitted.
    config : ParkingConfig or None
        Session options; defaults are used when omitted.
    clock : callable or None
        Returns the current time. Defaults to ``config.now``.
    input_func, output_func : callable
        Line-oriented I/O, ``input``/``print`` by default. ``input_func``
        raising :class:`EOFError` ends the session.
    """

    def __init__(
        self,
        store: VehicleRecordStore | None = None,
        *,
        config: ParkingConfig | None = None,
        clock: Callable[[], datetime] | None = None,
        input_func: Callable[[str], str] | None = None,
        output_func: Callable[[str], None] | None = None,
    ) -> None:
        self._config = config or ParkingConfig()
        self._clock = clock or self._config.now
        if store is None:
            store = VehicleRecordStore(clock=self._clock, list_order=self._config.list_order)
        self._store = store
        self._input = input_func or input
        self._output = output_func or print
        self._running = False
        self._actions: tuple[Callable[[], None], ...] = (
            self.add_unsubscribed_car,
            self.add_subscribed_car,
            self.update_subscription,
            self.show_expiration_date,
            self.show_subscribed_cars,
            self.show_car_details,
            self.show_all_cars,
            self.delete_car,
            self.exit,
        )

    @property
    def store(self) -> VehicleRecordStore:
        return self._store

    @property
    def running(self) -> bool:
        return self._running

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Show the menu until the operator exits or input runs out."""
        self._running = True
        self._say("\nHello and welcome to the parking tracker program!")
        try:
            while self._running:
                self._show_menu()
                self.handle_choice(self._ask("\n>> "))
        except EOFError:
            _logger.debug("Input closed; ending session")
            self._running = False
            self._say("\nExiting program...\n")

    def handle_choice(self, raw: str) -> None:
        """Dispatch one menu selection; bad selections are reported, not raised."""
        try:
            number = int(raw.strip())
        except ValueError:
            self._say("\nYou must enter a valid integer! Please try again.\n")
            self._pause("Press Enter to try again...")
            return
        if not 1 <= number <= len(MENU_OPTIONS):
            self._say(f"\nInput number must be between 1 and {len(MENU_OPTIONS)}! Please try again.\n")
            self._pause("Press Enter to try again...")
            return
        self._actions[number - 1]()

    def _show_menu(self) -> None:
        self._say("\nPlease choose a number from the following list:")
        self._say("-" * 47 + "\n")
        for index, title in enumerate(MENU_OPTIONS, start=1):
            self._say(f"    {index}) {title}")

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def add_unsubscribed_car(self) -> None:
        self._add_car(subscribed=False)

    def add_subscribed_car(self) -> None:
        self._add_car(subscribed=True)

    def _add_car(self, *, subscribed: bool) -> None:
        self._say("\nAdding Car to Database:")
        self._say(RULE)
        plate = self.prompt_plate()
        if plate in self._store:
            self._say(f"\nA car with license plate {plate} is already in the database.")
            self._pause()
            return
        make = self._prompt_text("\nPlease input the car's make: ")
        model = self._prompt_text("\nPlease input the car's model: ")
        color = self._prompt_text("\nPlease input the car's color: ")
        expiration_date = self.prompt_future_date() if subscribed else None
        try:
            self._store.add_record(plate, make, model, color, subscribed, expiration_date)
        except DuplicatePlateError as exc:
            self._say(f"\n{exc}.")
            self._pause()
            return
        self._say("\nCar successfully added to database!\n")
        self._say("Returning to main menu...")
        self._say(RULE + "\n" + RULE + "\n")

    def update_subscription(self) -> None:
        self._say("\nUpdating Subscription of Car:")
        self._say(RULE)
        record = self._lookup()
        if record is None:
            return
        expiration_date = self.prompt_future_date()
        try:
            self._store.update_subscription(record.license_plate, expiration_date)
        except RecordNotFoundError:
            self._not_found()
            return
        self._say("\nCar subscription updated!\n")
        self._say("Returning to main menu...")
        self._say(RULE + "\n" + RULE + "\n")

    def show_expiration_date(self) -> None:
        self._say("\nShowing Expiration Date of Car:")
        self._say(RULE)
        record = self._lookup()
        if record is None:
            return
        expiration = format_date(record.expiration_date)
        status = self._store.subscription_status(record, self._clock())
        if expiration is None:
            self._say(f"\n{describe_status(status)}\n")
        else:
            self._say(f"\nExpiration Date: {expiration}")
            self._say(f"{describe_status(status)}\n")
        self._pause()

    def show_subscribed_cars(self) -> None:
        if not len(self._store):
            self._no_cars()
            return
        records = self._store.list_subscribed()
        self._say("\nHere is a list of all cars subscribed to covered parking:")
        self._say(WIDE_RULE + "\n")
        if records:
            for line in render_subscribed_table(records):
                self._say(line)
        else:
            self._say("There are no cars with covered parking.")
        self._say("\n" + WIDE_RULE + "\n")
        self._pause()

    def show_car_details(self) -> None:
        record = self._lookup()
        if record is None:
            return
        self._show_details(record)
        self._pause()

    def show_all_cars(self) -> None:
        records = self._store.list_all()
        if not records:
            self._no_cars()
            return
        self._say("\nHere are all residents' cars:")
        self._say(WIDE_RULE + "\n")
        for line in render_all_table(records):
            self._say(line)
        self._say("\n" + WIDE_RULE + "\n")
        self._pause()

    def delete_car(self) -> None:
        record = self._lookup()
        if record is None:
            return
        self._show_details(record)
        answer = self._ask(f"\nAre you sure you want to delete? (Enter '{self._config.confirm_token}' to confirm.) ")
        if answer.strip().upper() == self._config.confirm_token.strip().upper():
            try:
                self._store.delete_record(record.license_plate)
            except RecordNotFoundError:
                self._not_found()
                return
            self._say("\nCar deleted!")
        else:
            self._say("\nCar NOT deleted!")
        self._pause()

    def exit(self) -> None:
        self._say("\nExiting program...\n")
        self._running = False

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def prompt_plate(self) -> str:
        """Ask until a valid plate is entered; return it uppercased."""
        while True:
            raw = self._ask("\nPlease enter the car's license plate number: ")
            try:
                return validate_license_plate(raw)
            except ParkingValidationError as exc:
                self._say(f"\n\n{exc}")
                self._retry()

    def prompt_future_date(self) -> date:
        """Ask until a well-formed date later than today is entered."""
        while True:
            raw = self._ask(f"\nPlease input the covered parking expiration date ({DATE_FORMAT_HINT}): ")
            try:
                return validate_future_date(raw, self._clock())
            except MalformedDateError as exc:
                self._say("\n\n" + RULE)
                self._say(f"\n{exc}")
                self._retry()
            except DateNotInFutureError as exc:
                self._say("\n\n" + RULE)
                self._say(f"\n{exc} Please try again.")
                self._retry()

    def _prompt_text(self, prompt: str) -> str:
        while True:
            value = self._ask(prompt).strip()
            if value:
                return value
            self._say("\nThis field cannot be empty. Please try again.")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _lookup(self) -> VehicleRecord | None:
        record = self._store.find_by_plate(self.prompt_plate())
        if record is None:
            self._not_found()
        return record

    def _show_details(self, record: VehicleRecord) -> None:
        self._say("\nAll details for that car:")
        self._say(RULE + "\n")
        for line in render_details(record):
            self._say(line)
        if not record.is_consistent:
            self._say("Warning: subscribed without a valid expiration date.")
        self._say("\n" + WIDE_RULE + "\n")

    def _not_found(self) -> None:
        self._say("\nSorry, no car exists in the database with that license plate. Please try again.\n")
        self._pause()

    def _no_cars(self) -> None:
        self._say("\nSorry, there are no cars in the database.\n")
        self._pause()

    def _retry(self) -> None:
        if self._config.pause_after_action:
            self._ask("\nPress Enter to try again...")
        self._say("\n" + RULE + "\n")

    def _pause(self, prompt: str = "Press Enter to return to menu...") -> None:
        if self._config.pause_after_action:
            self._ask(prompt)
        self._say(RULE + "\n" + RULE + "\n")

    def _ask(self, prompt: str) -> str:
        return self._input(prompt)

    def _say(self, text: str) -> None:
        self._output(text)
