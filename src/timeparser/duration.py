"""Duration parsing utilities."""

from dataclasses import dataclass, field
from datetime import timedelta

from timeparser.errors import (
    BareNumberError,
    DanglingNumberError,
    DuplicateUnitError,
    EmptyInputError,
    MalformedNumberError,
)
from timeparser.types import Duration, Unit

_DIGITS = frozenset("0123456789")


def parse_unit(unit: Unit | str, number: str) -> int:
    """Convert one magnitude and unit pair to seconds. Empty magnitude means 1."""
    factor = Unit.from_marker(unit).seconds
    if not number:
        return factor
    if not _DIGITS.issuperset(number):
        raise MalformedNumberError(number)
    return int(number) * factor


def parse_with_fallback(text: str, fallback_unit: Unit | str | None) -> int:
    """
    Parse a duration string such as "3y7M3w50d2h7m100s" to seconds.

    Each unit marker may appear once, in any order, optionally preceded by
    a magnitude ("h" is one hour). If the whole string is a bare number,
    fallback_unit is applied to it; Unit.NONE (or "\\0") forbids that.

    Example:
        parse_with_fallback("5m30s", Unit.NONE)  # 330
        parse_with_fallback("yh", Unit.NONE)     # 31539600
        parse_with_fallback("500", "m")          # 30000
        parse_with_fallback("123d60", "m")       # DanglingNumberError
    """
    fallback = Unit.from_marker(fallback_unit)
    if not text:
        raise EmptyInputError()

    total = 0
    buffer = ""
    seen: set[str] = set()
    for char in text:
        if char in _DIGITS:
            buffer += char
            continue
        if char in seen:
            raise DuplicateUnitError(char, text)
        seen.add(char)
        total += parse_unit(char, buffer)
        buffer = ""

    if buffer:
        if seen:
            raise DanglingNumberError(buffer, text)
        if fallback is Unit.NONE:
            raise BareNumberError(buffer)
        total += parse_unit(fallback, buffer)

    return total


def parse(text: str) -> int:
    """Parse a duration string to seconds. Bare numbers are rejected."""
    return parse_with_fallback(text, Unit.NONE)


def parse_timedelta(
    text: str, fallback_unit: Unit | str | None = Unit.NONE
) -> timedelta:
    """Parse a duration string to a timedelta."""
    return timedelta(seconds=parse_with_fallback(text, fallback_unit))


def parse_duration(
    duration: Duration, *, fallback_unit: Unit | str | None = Unit.NONE
) -> int:
    """Parse duration string to seconds. Passthrough if already int."""
    if isinstance(duration, int):
        if duration < 0:
            raise MalformedNumberError(duration)
        return duration
    return parse_with_fallback(duration, fallback_unit)


@dataclass(frozen=True, slots=True)
class DurationParser:
    """Duration parser bound to a fallback unit for bare numbers."""

    fallback_unit: Unit | str | None = field(default=Unit.NONE, kw_only=True)

    def __post_init__(self) -> None:
        # Invalid fallback markers fail here rather than on first parse
        object.__setattr__(self, "fallback_unit", Unit.from_marker(self.fallback_unit))

    def parse(self, text: str) -> int:
        """Parse text to seconds, applying the configured fallback unit."""
        return parse_with_fallback(text, self.fallback_unit)

    def parse_timedelta(self, text: str) -> timedelta:
        """Parse text to a timedelta, applying the configured fallback unit."""
        return parse_timedelta(text, self.fallback_unit)

    def parse_duration(self, duration: Duration) -> int:
        """Parse a string or pass an int of seconds through."""
        return parse_duration(duration, fallback_unit=self.fallback_unit)
