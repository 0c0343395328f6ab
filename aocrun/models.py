from __future__ import annotations

import enum
from dataclasses import dataclass
from dataclasses import field

from .exceptions import ComparisonMismatch
from .stats import RunStats
from .types import Output
from .types import PuzzlePart


class State(enum.Enum):
    """Where a day's run got to. FAILED can be reached from any other state."""

    PENDING = "pending"
    EXAMPLE_CHECKED = "example checked"
    INPUT_ACQUIRED = "input acquired"
    PART1_DONE = "part 1 done"
    PART2_DONE = "part 2 done"
    REPORTED = "reported"
    FAILED = "failed"


class _Skipped:
    # singleton marker: the day has no example to check
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "SKIPPED"

    def __bool__(self):
        return False


SKIPPED = _Skipped()


@dataclass
class PartOutcome:
    """
    Result of running one part once (or several times, when timing statistics
    were requested). `passed` is None when there was no expected answer to check.
    """

    part: PuzzlePart
    output: Output
    stats: RunStats
    expected: Output = None
    passed: bool | None = None

    @classmethod
    def checked(cls, part, output, stats, expected=None):
        passed = None if expected is None else output == expected
        return cls(part=part, output=output, stats=stats, expected=expected, passed=passed)

    @property
    def elapsed(self) -> float:
        """Walltime of the (last) run, in seconds."""
        return self.stats.samples[-1]

    @property
    def answer(self) -> str:
        # answers are type-erased to text at the reporting boundary
        return str(self.output)


@dataclass
class ExampleOutcome:
    day: int
    part_1: PartOutcome
    part_2: PartOutcome

    @property
    def parts(self) -> tuple[PartOutcome, PartOutcome]:
        return self.part_1, self.part_2

    @property
    def passed(self) -> bool:
        """False if any checked part disagreed. Unchecked parts don't count."""
        return all(p.passed is not False for p in self.parts)

    @property
    def mismatches(self) -> list[ComparisonMismatch]:
        return [
            ComparisonMismatch(self.day, p.part, p.expected, p.output)
            for p in self.parts
            if p.passed is False
        ]

    def raise_for_mismatch(self) -> None:
        for err in self.mismatches:
            raise err


@dataclass
class DayReport:
    """Everything that happened for one selected day, whichever state it ended in."""

    day: int
    state: State = State.PENDING
    example: ExampleOutcome | _Skipped | None = None
    part_1: PartOutcome | None = None
    part_2: PartOutcome | None = None
    phase: str | None = None
    error: BaseException | None = None
    history: list[State] = field(default_factory=list)

    def advance(self, state: State, phase: str | None = None) -> None:
        self.history.append(self.state)
        self.state = state
        if phase is not None:
            self.phase = phase

    def fail(self, phase: str, error: BaseException) -> None:
        self.advance(State.FAILED, phase)
        self.error = error

    @property
    def failed(self) -> bool:
        return self.state is State.FAILED

    @property
    def reason(self) -> str | None:
        if self.error is None:
            return None
        return f"{type(self.error).__name__}: {self.error}"

    @property
    def outcomes(self) -> list[PartOutcome]:
        return [p for p in (self.part_1, self.part_2) if p is not None]
