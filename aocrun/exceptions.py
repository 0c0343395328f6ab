class AocrunError(Exception):
    """base exception for this package"""


class ConfigError(AocrunError):
    """the run configuration is contradictory or out of bounds"""


class RegistryError(AocrunError):
    """a day implementation can not be registered"""


class SelectionError(AocrunError):
    """unable to work out which day(s) to run"""


class DayOutOfRangeError(SelectionError):
    """day number is not a valid puzzle day for the year"""


class UnknownDayError(SelectionError):
    """no implementation is registered for the day"""


class CannotInferDayError(SelectionError):
    """no day was given and today is not a puzzle day"""


class CredentialError(AocrunError):
    """the session token is missing or unreadable"""


class FetchError(AocrunError):
    """retrieving puzzle input from the server failed"""


class PuzzleLockedError(FetchError):
    """trying to access input before the unlock"""


class CacheError(AocrunError):
    """reading or writing the local input cache failed"""


class ExecutionError(AocrunError):
    """the day's own solver code raised"""

    def __init__(self, day, phase, msg=None):
        self.day = day
        self.phase = phase
        if msg is None:
            msg = f"day {day} failed during {phase}"
        super().__init__(msg)


class ComparisonMismatch(AocrunError):
    """example output disagrees with the expected answer"""

    def __init__(self, day, part, expected, actual):
        self.day = day
        self.part = part
        self.expected = expected
        self.actual = actual
        msg = f"day {day} part {part}: expected {expected!r}, got {actual!r}"
        super().__init__(msg)
