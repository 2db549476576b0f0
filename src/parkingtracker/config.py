"""Session configuration for parkingtracker."""

from __future__ import annotations

import dataclasses
import logging
import os
from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from parkingtracker._constants import LIST_ORDERS
from parkingtracker.exceptions import ParkingConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class ParkingConfig:
    """Session configuration.

    Parameters
    ----------
    log_level : str
        Name of the root logging level (``"DEBUG"``, ``"INFO"``, ...).
    list_order : str
        ``"insertion"`` lists records in the order they were added,
        ``"plate"`` sorts them by license plate.
    pause_after_action : bool
        Wait for Enter before returning to the menu after each action.
    confirm_token : str
        Answer (case-insensitive) that confirms a deletion.
    time_zone : str or None
        IANA time zone used to decide what "today" is. ``None`` uses
        the machine's local time zone.
    """

    log_level: str = "WARNING"
    list_order: str = "insertion"
    pause_after_action: bool = True
    confirm_token: str = "Y"
    time_zone: str | None = None

    def __post_init__(self) -> None:
        level = self.log_level.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ParkingConfigError(f"Unknown log level {self.log_level!r}")
        object.__setattr__(self, "log_level", level)
        if self.list_order not in LIST_ORDERS:
            raise ParkingConfigError(f"list_order must be one of {sorted(LIST_ORDERS)}, got {self.list_order!r}")
        if not self.confirm_token.strip():
            raise ParkingConfigError("confirm_token must be non-empty")
        if self.time_zone is not None:
            self.tzinfo()

    def tzinfo(self) -> ZoneInfo | None:
        if self.time_zone is None:
            return None
        try:
            return ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ParkingConfigError(f"Unknown time zone {self.time_zone!r}") from exc

    def now(self) -> datetime:
        """Current time in the configured zone (local zone when unset)."""
        tz = self.tzinfo()
        if tz is None:
            return datetime.now().astimezone()
        return datetime.now(tz)

    @classmethod
    def from_env(cls, **overrides: Any) -> ParkingConfig:
        """Create configuration from ``PARKING_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "PARKING_LOG_LEVEL": "log_level",
            "PARKING_LIST_ORDER": "list_order",
            "PARKING_CONFIRM_TOKEN": "confirm_token",
            "PARKING_TIME_ZONE": "time_zone",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "pause_after_action" not in overrides:
            config_kwargs["pause_after_action"] = _env_bool(env.get("PARKING_PAUSE"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
