from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
import typing as t
from datetime import datetime
from functools import partial
from importlib.metadata import version

from .config import FIRST_YEAR
from .config import RunConfig
from .day import Day
from .day import execute
from .day import Registry
from .examples import run_example
from .exceptions import AocrunError
from .exceptions import ConfigError
from .exceptions import RegistryError
from .models import DayReport
from .models import PartOutcome
from .models import SKIPPED
from .models import State
from .selection import most_recent_year
from .selection import resolve_days
from .selection import valid_days
from .stats import collect
from .store import InputStore
from .types import Clock
from .utils import AOC_TZ
from .utils import colored
from .utils import get_plugins


# from https://adventofcode.com/about
# every problem has a solution that completes in at most 15 seconds on ten-year-old hardware


DEFAULT_BUDGET = 15.0
log = logging.getLogger(__name__)


class Runner:
    """
    Drives the selected days one at a time: example self-test, puzzle input,
    part 1, part 2, then a one-line report per day on stdout.

    A failure in one day is logged and reported, and the remaining days still run.
    """

    def __init__(
        self,
        year: int,
        days: t.Iterable[Day] | Registry,
        store: InputStore | None = None,
    ) -> None:
        self.year = year
        self.registry = days if isinstance(days, Registry) else Registry(days)
        allowed = valid_days(year)
        invalid = [n for n in self.registry.day_numbers if n not in allowed]
        if invalid:
            msg = f"day(s) {invalid} are not puzzle days in {year} (valid: 1-{allowed[-1]})"
            raise RegistryError(msg)
        self._store = store
        self.reports: list[DayReport] = []

    @property
    def store(self) -> InputStore:
        # created on first use, so that tests-only runs never touch it
        if self._store is None:
            self._store = InputStore()
        return self._store

    def run(
        self,
        config: RunConfig,
        today: datetime | None = None,
        clock: Clock | None = None,
    ) -> int:
        """
        Run every selected day, in ascending order. Returns the number of days which
        failed, so 0 means success. Raises SelectionError if no day can be selected.
        """
        days = resolve_days(config, self.year, self.registry, today=today, clock=clock)
        if not days:
            log.warning("no days to run for %s", self.year)
        self.reports = [self.run_day(self.registry[n], config) for n in days]
        n_failed = sum(report.failed for report in self.reports)
        if n_failed:
            log.warning("%d of %d day(s) failed", n_failed, len(self.reports))
        return n_failed

    def run_day(self, impl: Day, config: RunConfig) -> DayReport:
        report = DayReport(day=impl.day)
        try:
            self._run_day(impl, config, report)
        except AocrunError as err:
            log.error("day %s failed during %s - %s", impl.day, report.phase, err)
            report.fail(report.phase, err)
        print(format_report(report, self.year))
        if not report.failed:
            report.advance(State.REPORTED)
        return report

    def _run_day(self, impl: Day, config: RunConfig, report: DayReport) -> None:
        if not config.skip_tests:
            report.phase = "example"
            report.example = run_example(impl)
            report.advance(State.EXAMPLE_CHECKED)
            if config.tests_only:
                return

        report.phase = "input"
        data = self.store.get_input(self.year, impl.day)
        report.advance(State.INPUT_ACQUIRED)

        report.phase = "part 1"
        stats = collect(partial(execute, impl, 1, data), config.stats)
        output, context = stats.result
        # the context must not outlive this day's part 2, so keep only the answer
        report.part_1 = PartOutcome(1, output, dataclasses.replace(stats, result=output))
        report.advance(State.PART1_DONE)

        report.phase = "part 2"
        contexts = _contexts(impl, data, context)
        del context
        try:
            stats = collect(
                partial(_execute_part_2, impl, data),
                config.stats,
                setup=partial(next, contexts),
            )
        finally:
            contexts.close()
        report.part_2 = PartOutcome(2, stats.result, stats)
        report.advance(State.PART2_DONE)


def _contexts(impl, data, context):
    # part 2 consumes the context from part 1. the first part 2 run gets the one
    # already computed, further stats runs get a fresh one from an untimed part 1
    yield context
    del context
    while True:
        _, context = execute(impl, 1, data, phase="part 1 (stats setup)")
        yield context


def _execute_part_2(impl, data, context):
    return execute(impl, 2, data, context)


def format_time(t, budget=DEFAULT_BUDGET):
    """
    Used for rendering the puzzle solve time in color:
    - green, if you're under a quarter of the budget (3.75s default)
    - yellow, if you're over a quarter but under the whole budget
    - red, if you're really slow (>15s by default)
    """
    if t < budget / 4:
        color = "green"
    elif t < budget:
        color = "yellow"
    else:
        color = "red"
    if t < 1:
        txt = f"{t * 1000: 8.2f}ms"
    else:
        txt = f"{t: 8.2f}s "
    return colored(txt, color)


def format_stats(stats):
    if stats.runs == 1:
        return ""
    vals = [stats.min, stats.median, stats.mean, stats.max]
    txt = "/".join(format_time(v).strip() for v in vals)
    return f" [min/median/mean/max {txt} over {stats.runs} runs]"


def _format_example(example):
    if example is None:
        return ""
    if example is SKIPPED:
        return f"   {colored('?', 'magenta')} no example"
    if example.passed:
        return f"   {colored('✔', 'green')} example"
    wrong = ", ".join(
        f"part {err.part} expected {err.expected} got {err.actual}"
        for err in example.mismatches
    )
    return f"   {colored('✖', 'red')} example ({wrong})"


def format_report(report: DayReport, year: int) -> str:
    """One line summarising a day: total runtime, example result, answers."""
    walltime = sum(p.stats.median for p in report.outcomes)
    line = f"{format_time(walltime)}   {year}/{report.day:<2d}"
    line += _format_example(report.example)
    if report.failed:
        icon = colored("✖", "red")
        line += f"   {icon} {report.phase}: {report.reason[:100]}"
        return line
    for outcome in report.outcomes:
        answer = outcome.answer[:60]
        if outcome.part == 1:
            answer = answer.ljust(24)
        line += f"   part {outcome.part}: {answer}{format_stats(outcome.stats)}"
    return line


def _positive_int(txt):
    try:
        n = int(txt)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {txt!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1 (got {n})")
    return n


def _load_plugin(entry_point):
    # a plugin is either an iterable of Day instances (a Registry, a list) or a
    # zero-argument callable returning one
    obj = entry_point.load()
    if callable(obj) and not isinstance(obj, Registry):
        obj = obj()
    return obj


def main(year=None, days=None, argv=None):
    """
    Run your solutions for a day (or all days) and render the results.

    Call this from your own script with the year and your Day instances, or use the
    `aocrun` console script, which finds days registered by installed packages under
    the "aocrun.days" entry-point group.
    """
    aoc_now = datetime.now(tz=AOC_TZ)
    years = range(FIRST_YEAR, aoc_now.year + int(aoc_now.month == 12))
    plugins = {} if days is not None else {ep.name: ep for ep in get_plugins()}
    parser = argparse.ArgumentParser(
        description=f"AoC runner v{version('advent-of-code-runner')}"
    )
    if days is None:
        parser.add_argument(
            "-p",
            "--plugin",
            choices=plugins,
            help="Which installed solutions package to run (default: the first one).",
        )
    if year is None:
        parser.add_argument(
            "-y",
            "--year",
            metavar=f"({years[0]}-{years[-1]})",
            type=int,
            choices=years,
            default=most_recent_year(),
            help="AoC year (default: %(default)s).",
        )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-d",
        "--day",
        metavar="DAY",
        type=int,
        help="Run only this day. By default, today's puzzle is run during December.",
    )
    group.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Run every day that has an implementation.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "-s",
        "--skip-tests",
        action="store_true",
        help="Don't self-test against the example input first.",
    )
    group.add_argument(
        "-t",
        "--tests-only",
        action="store_true",
        help="Only self-test against the example input, don't run the real input.",
    )
    parser.add_argument(
        "-n",
        "--stats",
        metavar="N",
        type=_positive_int,
        default=1,
        help=(
            "Run each part N times against the real input and report timing "
            "statistics (default: %(default)s)."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        help=(
            "Increased logging (-v INFO, -vv DEBUG). "
            "Default level is logging.WARNING."
        ),
    )
    args = parser.parse_args(argv)

    if args.verbose is None:
        log_level = logging.WARNING
    elif args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG
    logging.basicConfig(level=log_level)

    if days is None:
        if not plugins:
            print(
                "There are no solutions available. Install some package(s) "
                "with a registered 'aocrun.days' entry-point, or call "
                "aocrun.runner.main(year, days) from your own script.",
                file=sys.stderr,
            )
            sys.exit(1)
        name = args.plugin or next(iter(plugins))
        days = _load_plugin(plugins[name])
    if year is None:
        year = args.year
    try:
        config = RunConfig(
            day=args.day,
            all=args.all,
            skip_tests=args.skip_tests,
            tests_only=args.tests_only,
            stats=args.stats,
        )
    except ConfigError as err:
        parser.error(str(err))
    try:
        runner = Runner(year=year, days=days)
        rc = runner.run(config)
    except AocrunError as err:
        print(colored(f"ERROR: {err}", "red"), file=sys.stderr)
        sys.exit(1)
    sys.exit(rc)
