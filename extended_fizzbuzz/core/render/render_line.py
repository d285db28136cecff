from __future__ import annotations

from typing import Any, Sequence

from extended_fizzbuzz.core.errors import RangeError, from_greater_than_to
from extended_fizzbuzz.core.matcher import Matcher


def render_line(number: int, matchers: Sequence[Matcher]) -> str:
    """Render a single number.

    Every matcher is tested in order and the words of all matching ones are
    concatenated. When nothing matches, the number itself is returned as text.
    An empty `matchers` sequence therefore always yields `str(number)`.
    """

    out = "".join(m.text(number) for m in matchers)
    if not out:
        out = str(number)
    return out


def validate_range(start: Any, end: Any) -> None:
    """Check inclusive bounds before anything is rendered or emitted.

    Raises RangeError; an inverted range is reported, never swapped.
    """

    for name, value in (("from", start), ("to", end)):
        if not isinstance(value, int) or isinstance(value, bool):
            raise RangeError(
                code="E_BOUND_NOT_INTEGER",
                message=f"`{name}` must be an integer, got {type(value).__name__}",
                path=name,
            )
        if value < 0:
            raise RangeError(
                code="E_NEGATIVE_BOUND",
                message=f"`{name}` must be non-negative, got {value}",
                path=name,
                start=start,
                end=end,
            )

    if start > end:
        raise from_greater_than_to(start, end)


def render_lines(start: int, end: int, matchers: Sequence[Matcher]) -> list[str]:
    """Render every number in the inclusive range [start, end], ascending."""
    validate_range(start, end)
    return [render_line(i, matchers) for i in range(start, end + 1)]
