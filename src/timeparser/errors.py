"""Exceptions raised while parsing duration strings."""


class DurationError(ValueError):
    """Base class for all duration parsing failures."""


class UnknownUnitError(DurationError):
    """A unit marker outside the recognized set, or no unit where one is required."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        if unit == "\0":
            message = "a unit is required here, got none"
        else:
            message = f"{unit!r} is not a known duration unit"
        super().__init__(message)


class MalformedNumberError(DurationError):
    """The magnitude in front of a unit is not a non-negative integer."""

    def __init__(self, number: object) -> None:
        self.number = number
        super().__init__(f"Invalid duration magnitude: {number!r}")


class DuplicateUnitError(DurationError):
    """A unit marker appears more than once in the same input."""

    def __init__(self, unit: str, text: str) -> None:
        self.unit = unit
        self.text = text
        super().__init__(f"Duration unit {unit!r} used more than once in {text!r}")


class DanglingNumberError(DurationError):
    """A trailing number has no unit after unit-qualified components."""

    def __init__(self, number: str, text: str) -> None:
        self.number = number
        self.text = text
        super().__init__(f"Number without unit in {text!r}: {number}")


class BareNumberError(DurationError):
    """The input is a bare number and no fallback unit was given."""

    def __init__(self, number: str) -> None:
        self.number = number
        super().__init__(
            f"Bare number requires a unit, no fallback unit given: {number}"
        )


class EmptyInputError(DurationError):
    """The input string is empty."""

    def __init__(self) -> None:
        super().__init__("Duration string can't be empty")
