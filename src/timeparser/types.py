"""Core types for timeparser."""

from enum import Enum

from timeparser.errors import UnknownUnitError

YEAR_IN_SECONDS = 365 * 24 * 60 * 60
MONTH_IN_SECONDS = 30 * 24 * 60 * 60
WEEK_IN_SECONDS = 7 * 24 * 60 * 60
DAY_IN_SECONDS = 24 * 60 * 60
HOUR_IN_SECONDS = 60 * 60
MINUTE_IN_SECONDS = 60
SECOND = 1


class Unit(Enum):
    """A duration unit, valued by its marker character."""

    YEAR = "y"
    MONTH = "M"
    WEEK = "w"
    DAY = "d"
    HOUR = "h"
    MINUTE = "m"
    SECOND = "s"
    # Only meaningful as a fallback: "no fallback allowed"
    NONE = "\0"

    @classmethod
    def from_marker(cls, marker: "Unit | str | None") -> "Unit":
        """Resolve a marker character (or a Unit, or None) to a Unit."""
        if isinstance(marker, Unit):
            return marker
        if marker is None:
            return cls.NONE
        try:
            return cls(marker)
        except ValueError:
            raise UnknownUnitError(marker) from None

    @property
    def seconds(self) -> int:
        """Fixed length of this unit in seconds."""
        try:
            return _UNIT_SECONDS[self]
        except KeyError:
            raise UnknownUnitError(self.value) from None


_UNIT_SECONDS: dict[Unit, int] = {
    Unit.YEAR: YEAR_IN_SECONDS,
    Unit.MONTH: MONTH_IN_SECONDS,
    Unit.WEEK: WEEK_IN_SECONDS,
    Unit.DAY: DAY_IN_SECONDS,
    Unit.HOUR: HOUR_IN_SECONDS,
    Unit.MINUTE: MINUTE_IN_SECONDS,
    Unit.SECOND: SECOND,
}

# Markers accepted as a fallback unit; "\0" means no fallback
VALID_MARKERS: frozenset[str] = frozenset(unit.value for unit in Unit)

# Duration type alias
Duration = str | int  # "2d5m" or seconds
