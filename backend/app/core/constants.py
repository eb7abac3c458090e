"""Shared constants and enums used across the application."""

from enum import StrEnum


class FilterIssueKind(StrEnum):
    """Reasons a list-query filter parameter is rejected."""

    MISSING_DEPENDENCY = "MISSING_DEPENDENCY"
    OUT_OF_RANGE = "OUT_OF_RANGE"
    UNPARSEABLE = "UNPARSEABLE"


class ParameterKind(StrEnum):
    """How a raw query-string value is interpreted."""

    INTEGER = "INTEGER"
    TEXT = "TEXT"
    BOOLEAN_STRING = "BOOLEAN_STRING"
    CHOICE = "CHOICE"


class CoverType(StrEnum):
    """Optional add-on covers carried by a plan."""

    MATERNITY = "maternity"
    DENTAL = "dental"
    OPTICAL = "optical"


# "outpatientLimit=none" means the caller explicitly wants no outpatient cover
NO_OUTPATIENT_COVER = "none"

# Value that switches on a dental/optical filter
COVER_REQUESTED = "yes"

MIN_KIDS = 1
MAX_KIDS = 5

DEFAULT_ACCIDENTS_WAITING_PERIOD = "No Waiting!"
DEFAULT_ILLNESS_CLAIMS_WAITING_PERIOD_MONTHS = 1
DEFAULT_SURGICAL_CLAIMS_WAITING_PERIOD_MONTHS = 2

# Largest value an integer plan column holds (32-bit INTEGER)
MAX_STORED_INTEGER = 2**31 - 1
