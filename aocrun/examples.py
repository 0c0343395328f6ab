import logging

from .day import Day
from .day import execute
from .models import ExampleOutcome
from .models import PartOutcome
from .models import SKIPPED
from .stats import RunStats
from .stats import timed


log = logging.getLogger(__name__)


def run_example(impl: Day):
    """
    Self-test a day against the worked example from the puzzle text.

    Returns SKIPPED if the day has no example input. Otherwise both parts are run,
    in order, and each is compared to its expected answer if the day provides one.
    Part 2 runs even when part 1 came out wrong, so that its own errors surface
    too. A solver crash raises ExecutionError, a wrong answer does not raise.
    """
    if not impl.has_example:
        log.info("no example for day %s, skipping test", impl.day)
        return SKIPPED
    log.info("running example for day %s", impl.day)
    data = impl.example_input
    (output_1, context), t1 = timed(execute, impl, 1, data, None, "example part 1")
    part_1 = PartOutcome.checked(1, output_1, RunStats((t1,), output_1), impl.example_part_1)
    output_2, t2 = timed(execute, impl, 2, data, context, "example part 2")
    del context
    part_2 = PartOutcome.checked(2, output_2, RunStats((t2,), output_2), impl.example_part_2)
    outcome = ExampleOutcome(day=impl.day, part_1=part_1, part_2=part_2)
    for err in outcome.mismatches:
        log.warning("example mismatch - %s", err)
    return outcome
