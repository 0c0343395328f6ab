from __future__ import annotations

from datetime import datetime
from typing import Any
from typing import Callable
from typing import Literal
from typing import Tuple


Output = Any
"""A part's answer. Anything with a meaningful ``==`` and ``str()``"""
Context = Any
"""Opaque value handed from part 1 to part 2 of the same day"""
PuzzlePart = Literal[1, 2]
"""The part of a given puzzle, 1 or 2"""
Part1Result = Tuple[Output, Context]
"""What ``Day.execute_part_1`` returns"""
Clock = Callable[[], datetime]
"""Zero-argument callable returning an aware datetime, used for date inference"""
