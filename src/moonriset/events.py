"""Event detection — transit, rise and set located in a DayTable."""

import logging
import math

from moonriset.formatting import format_instant
from moonriset.interpolation import find_quadratic_roots
from moonriset.models import DayTable, Event, EventKind
from moonriset.timekeeping import Calendar

_LOGGER = logging.getLogger(__name__)

# Altitude of the Moon's centre at rise/set (degrees):
# parallax 57' - refraction 34' - semi-diameter 15.5'
HORIZON_ALTITUDE = 0.125

# Reported for a set that was not found on a day that does have a rise.
_MISSING_SET = Event(EventKind.ALWAYS_ABOVE, None, "    ", "     ")


def find_transit(table: DayTable, calendar: Calendar) -> Event:
    """Upper meridian transit of the Moon, while above the horizon.

    The table is scanned in non-overlapping windows of three samples and the
    first window where the hour angle crosses zero upwards wins.
    """
    samples = table.samples
    last = len(samples) - 1
    for i in range(1, last, 2):
        prev, mid, nxt = samples[i - 1], samples[i], samples[i + 1]
        if not (prev.sin_alt > 0 and mid.sin_alt > 0 and nxt.sin_alt > 0):
            continue
        if (prev.ha < 0 <= mid.ha) or (mid.ha <= 0 < nxt.ha):
            roots = find_quadratic_roots(prev.ha, mid.ha, nxt.ha)
            instant = mid.timestamp + table.tdiff * roots.z1
            _LOGGER.debug("Transit found in window %d at %.1f", i, instant)
            return format_instant(instant, calendar)
    return Event.not_found()


def find_rise_set(
    table: DayTable,
    calendar: Calendar,
    threshold: float | None = None,
) -> tuple[Event, Event, Event, Event]:
    """Rise and set of the Moon, including a second rise or set near the poles.

    Args:
        table: Samples of the day.
        calendar: Calendar of the observer's timezone.
        threshold: Sine of the horizon altitude. Defaults to sin(HORIZON_ALTITUDE).

    Returns:
        (rise, set, rise2, set2). Without any crossing during the day rise and
        set are both ALWAYS_ABOVE or both ALWAYS_BELOW.
    """
    if threshold is None:
        threshold = math.sin(math.radians(HORIZON_ALTITUDE))

    samples = table.samples
    above = samples[0].sin_alt > threshold
    rise_at = set_at = rise2_at = set2_at = None

    for i in range(1, len(samples) - 1, 2):
        prev, mid, nxt = samples[i - 1], samples[i], samples[i + 1]
        roots = find_quadratic_roots(
            prev.sin_alt - threshold, mid.sin_alt - threshold, nxt.sin_alt - threshold
        )
        if roots.count == 1:
            instant = mid.timestamp + table.tdiff * roots.z1
            if prev.sin_alt < threshold:
                if rise_at is None:
                    rise_at = instant
                else:
                    rise2_at = instant
            elif set_at is None:
                set_at = instant
            else:
                set2_at = instant
        elif roots.count == 2:
            # Both crossings in one window; the extremum tells which comes first
            if roots.ye < 0.0:
                rise_at = mid.timestamp + table.tdiff * roots.z2
                set_at = mid.timestamp + table.tdiff * roots.z1
            else:
                rise_at = mid.timestamp + table.tdiff * roots.z1
                set_at = mid.timestamp + table.tdiff * roots.z2

    if rise_at is None and set_at is None:
        if above:
            rise = set_ = Event.always_above()
        else:
            rise = set_ = Event.always_below()
    else:
        rise = format_instant(rise_at, calendar) if rise_at is not None else Event.not_found()
        set_ = format_instant(set_at, calendar) if set_at is not None else _MISSING_SET

    rise2 = format_instant(rise2_at, calendar) if rise2_at is not None else Event.not_found()
    set2 = format_instant(set2_at, calendar) if set2_at is not None else Event.not_found()

    _LOGGER.debug(
        "Rise/set: rise=%s set=%s rise2=%s set2=%s",
        rise.kind.value,
        set_.kind.value,
        rise2.kind.value,
        set2.kind.value,
    )
    return rise, set_, rise2, set2
