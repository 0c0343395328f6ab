from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .exceptions import ConfigError


# both paths are relative to the working directory unless overridden
INPUTS_DIR = Path(os.environ.get("AOCRUN_INPUTS_DIR", "inputs")).expanduser()
SESSION_FILE = Path(os.environ.get("AOCRUN_SESSION_FILE", "session")).expanduser()
URL = "https://adventofcode.com/{year}/day/{day}"
FIRST_YEAR = 2015


@dataclass(frozen=True)
class RunConfig:
    """
    What the user asked for on the command line, already parsed.

    `day` and `all` pick the days (neither means "today"), `skip_tests` and
    `tests_only` control the example self-test, and `stats` is how many times
    each part gets executed against the real input for timing purposes.
    """

    day: int | None = None
    all: bool = False
    skip_tests: bool = False
    tests_only: bool = False
    stats: int = 1

    def __post_init__(self):
        if self.day is not None and self.all:
            raise ConfigError("a single day and all days are mutually exclusive")
        if self.skip_tests and self.tests_only:
            raise ConfigError("skip-tests and tests-only are mutually exclusive")
        if not isinstance(self.stats, int) or self.stats < 1:
            raise ConfigError(f"stats run count must be at least 1 (got {self.stats!r})")
