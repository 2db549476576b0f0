"""Internal constants shared across the package."""

import re

PLATE_MIN_LENGTH = 6
PLATE_MAX_LENGTH = 7
PLATE_PATTERN = re.compile(r"^[A-Z0-9]+$")

#: The single accepted date pattern (``MM/DD/YYYY``) for input and display.
DATE_FORMAT = "%m/%d/%Y"
DATE_FORMAT_HINT = "mm/dd/yyyy"

#: Placeholder shown in listings when a record has no expiration date.
NO_DATE_PLACEHOLDER = "N/A"

LIST_ORDERS: frozenset[str] = frozenset({"insertion", "plate"})
