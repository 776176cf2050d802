"""Data model definitions — explicit boundaries between calendar, table, and event layers."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True)
class Observer:
    """Where the Moon is watched from."""

    latitude: float  # Decimal degrees, north positive
    longitude: float  # Decimal degrees, east positive
    timezone: str  # IANA timezone name ("Europe/London")


@dataclass(frozen=True)
class Sample:
    """Observable quantities for one sampled instant of the day."""

    timestamp: int  # Unix epoch seconds
    lst: float  # Local Sidereal Time (hours, [0, 24))
    ra: float  # Moon right ascension (hours, [0, 24))
    dec: float  # Moon declination (degrees)
    ha: float  # Hour angle (hours, (-12, 12])
    sin_alt: float  # Sine of the Moon's geometric altitude


@dataclass(frozen=True)
class DayTable:
    """Equally spaced samples from local midnight to the next local midnight."""

    start: int  # Local midnight (epoch seconds)
    end: int  # Next local midnight (epoch seconds)
    tdiff: float  # Seconds between consecutive samples
    samples: tuple[Sample, ...]
    sin_latitude: float
    cos_latitude: float


@dataclass(frozen=True)
class QuadraticRoots:
    """Parabola through (-1, ym), (0, yz), (1, yp) and its zero crossings."""

    count: int  # Roots inside [-1, 1]: 0, 1 or 2
    z1: float  # First root (the in-range one when count == 1)
    z2: float  # Second root
    xe: float  # Abscissa of the extremum
    ye: float  # Value at the extremum


class EventKind(Enum):
    """How an event manifests on the requested day."""

    OCCURS = "occurs"
    ALWAYS_ABOVE = "always_above"
    ALWAYS_BELOW = "always_below"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Event:
    """A rise, set or transit with its display strings.

    ``timestamp`` is only set for ``EventKind.OCCURS``; the other kinds carry
    placeholder strings instead of a time of day.
    """

    kind: EventKind
    timestamp: int | None = None
    hhmm: str = "    "  # "1931"
    hh_mm: str = "     "  # "19:31"

    @classmethod
    def occurs(cls, timestamp: int, hhmm: str, hh_mm: str) -> "Event":
        return cls(EventKind.OCCURS, timestamp, hhmm, hh_mm)

    @classmethod
    def always_above(cls) -> "Event":
        return cls(EventKind.ALWAYS_ABOVE, None, "****", "**:**")

    @classmethod
    def always_below(cls) -> "Event":
        return cls(EventKind.ALWAYS_BELOW, None, "----", "--:--")

    @classmethod
    def not_found(cls) -> "Event":
        return cls(EventKind.NOT_FOUND, None, "    ", "     ")

    @property
    def found(self) -> bool:
        """True when the event happens at a definite instant."""
        return self.kind is EventKind.OCCURS


@dataclass(frozen=True)
class RiseSetResult:
    """Everything computed for one observer and calendar date."""

    transit: Event = field(default_factory=Event.not_found)
    rise: Event = field(default_factory=Event.not_found)
    set: Event = field(default_factory=Event.not_found)
    rise2: Event = field(default_factory=Event.not_found)  # Second rise (polar regions)
    set2: Event = field(default_factory=Event.not_found)  # Second set (polar regions)
