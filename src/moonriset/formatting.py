"""Turn computed instants into display-ready events."""

import math

from moonriset.models import Event
from moonriset.timekeeping import Calendar


def format_instant(t: float, calendar: Calendar) -> Event:
    """Round an instant to the minute and render it in local time.

    Rounding is skipped when it would move the instant onto another local
    calendar day, e.g. 23:59:40 stays 23:59 instead of becoming 00:00.

    Args:
        t: Unix timestamp, possibly fractional.
        calendar: Calendar of the observer's timezone.

    Returns:
        Event of kind OCCURS with the timestamp, "HHMM" and "HH:MM" strings.
    """
    timestamp = int(t)
    rounded = 60 * math.floor(timestamp / 60.0 + 0.5)
    if calendar.local_date(timestamp) == calendar.local_date(rounded):
        timestamp = rounded
    return Event.occurs(
        timestamp,
        calendar.strftime(timestamp, "%H%M"),
        calendar.strftime(timestamp, "%H:%M"),
    )
