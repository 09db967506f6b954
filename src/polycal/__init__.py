"""polycal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    to_jdn,
    from_jdn,
    convert,
    parse_date,
    format_date,
    get_converter,
    register_converter,
    list_calendars,
    calendar_info,
    epoch_jdn,
    day_of_week,
    months_in_year,
    days_in_month,
    days_in_year,
    is_leap_year,
    new_year_day,
    month_name,
    tier_names,
    macro_cycles,
    verify,
    solstices_equinoxes,
    moon_phase,
    moon_phases,
    astronomical_events,
)
from .astro.events import AstroEvent
from .core.errors import DateRangeError, PolycalError, UnsupportedCalendarError, VerificationError
from .core.types import Calendar, CalendarDate, CalendarInfo, TierNames

__all__ = [
    "to_jdn",
    "from_jdn",
    "convert",
    "parse_date",
    "format_date",
    "get_converter",
    "register_converter",
    "list_calendars",
    "calendar_info",
    "epoch_jdn",
    "day_of_week",
    "months_in_year",
    "days_in_month",
    "days_in_year",
    "is_leap_year",
    "new_year_day",
    "month_name",
    "tier_names",
    "macro_cycles",
    "verify",
    "solstices_equinoxes",
    "moon_phase",
    "moon_phases",
    "astronomical_events",
    "AstroEvent",
    "Calendar",
    "CalendarDate",
    "CalendarInfo",
    "TierNames",
    "PolycalError",
    "DateRangeError",
    "UnsupportedCalendarError",
    "VerificationError",
]
