from __future__ import annotations

from typing import Callable, Sequence

from extended_fizzbuzz.core.matcher import Matcher
from extended_fizzbuzz.core.render.render_line import render_line, validate_range


def run(
    start: int,
    end: int,
    matchers: Sequence[Matcher],
    emit: Callable[[str], object] = print,
) -> None:
    """Emit one rendered line per number in [start, end], ascending.

    Both bounds are inclusive: run(1, 10, ...) emits lines for 1..10.
    The range is validated before the first line is emitted, so a RangeError
    means nothing was written. `emit` defaults to print (stdout, one line each).
    """

    validate_range(start, end)

    for i in range(start, end + 1):
        emit(render_line(i, matchers))
