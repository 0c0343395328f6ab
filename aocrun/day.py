from __future__ import annotations

import abc
import logging
import typing as t

from .exceptions import ExecutionError
from .exceptions import RegistryError
from .types import Context
from .types import Output
from .types import Part1Result


log: logging.Logger = logging.getLogger(__name__)


class Day(abc.ABC):
    """
    One puzzle day. Subclass this once per day and set the class attribute `day`.

    Part 1 returns a 2-tuple of (answer, context). The context is anything part 2
    wants to reuse from part 1 (a parsed grid, say) and is handed straight to
    `execute_part_2` for the same input, then dropped. Return None as the context
    if there is nothing worth sharing.

    Set `example_input` to the worked example from the puzzle text to get a
    self-test before the real input is used. The expected answers are optional,
    a part with no expected answer is still executed and timed, just not checked.
    """

    day: int
    example_input: str | None = None
    example_part_1: Output = None
    example_part_2: Output = None

    @abc.abstractmethod
    def execute_part_1(self, data: str) -> Part1Result:
        ...

    @abc.abstractmethod
    def execute_part_2(self, data: str, context: Context) -> Output:
        ...

    @property
    def has_example(self) -> bool:
        return self.example_input is not None

    def __repr__(self) -> str:
        return f"<{type(self).__name__} day={getattr(self, 'day', '?')}>"


def execute(impl: Day, part: int, data: str, context: Context = None, phase: str = "") -> t.Any:
    """
    Call into the user's solver for one part. Anything the solver raises is
    re-raised as an ExecutionError naming the day and phase, with the original
    exception chained as the cause.
    """
    phase = phase or f"part {part}"
    log.debug("starting %s for day %s", phase, impl.day)
    try:
        if part == 1:
            result = impl.execute_part_1(data)
            try:
                output, context = result
            except (TypeError, ValueError):
                msg = f"day {impl.day} part 1 must return (output, context), got {result!r}"
                raise TypeError(msg) from None
            return output, context
        return impl.execute_part_2(data, context)
    except Exception as err:
        log.debug("day %s raised during %s", impl.day, phase, exc_info=True)
        raise ExecutionError(impl.day, phase, f"day {impl.day} {phase} raised {err!r}") from err


class Registry:
    """
    Ordered, read-only collection of Day instances keyed by day number.
    Iteration is always in ascending day order, regardless of registration order.
    """

    def __init__(self, days: t.Iterable[Day] = ()) -> None:
        self._days: dict[int, Day] = {}
        for impl in days:
            self._add(impl)
        self._days = dict(sorted(self._days.items()))

    def _add(self, impl: Day) -> None:
        if not isinstance(impl, Day):
            raise RegistryError(f"{impl!r} is not a Day implementation")
        n = getattr(impl, "day", None)
        if not isinstance(n, int) or isinstance(n, bool):
            raise RegistryError(f"{impl!r} does not declare an integer day number")
        if n in self._days:
            prev = self._days[n]
            raise RegistryError(f"day {n} registered twice ({prev!r} and {impl!r})")
        log.debug("registered %r", impl)
        self._days[n] = impl

    def __getitem__(self, day: int) -> Day:
        return self._days[day]

    def __contains__(self, day: object) -> bool:
        return day in self._days

    def __iter__(self) -> t.Iterator[Day]:
        return iter(self._days.values())

    def __len__(self) -> int:
        return len(self._days)

    @property
    def day_numbers(self) -> list[int]:
        return list(self._days)
