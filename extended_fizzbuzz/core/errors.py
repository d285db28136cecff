from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class FizzBuzzError(Exception):
    """Base error envelope. Catch this to handle any current or future error kind.

    The set of codes is open-ended; callers should branch on `code` and keep a
    default arm for codes they do not know.
    """

    code: str
    message: str
    path: Optional[str] = None

    def __str__(self) -> str:
        loc = self.path if self.path else "<fizzbuzz>"
        return f"{loc}: {self.code}: {self.message}"


@dataclass(frozen=True)
class MatcherError(FizzBuzzError):
    pass


@dataclass(frozen=True)
class RangeError(FizzBuzzError):
    start: Optional[int] = None
    end: Optional[int] = None


def number_is_zero(path: Optional[str] = None) -> MatcherError:
    return MatcherError(
        code="E_NUMBER_IS_ZERO",
        message="divisor is 0, but division by 0 is impossible",
        path=path,
    )


def from_greater_than_to(start: int, end: int) -> RangeError:
    return RangeError(
        code="E_FROM_GREATER_THAN_TO",
        message=f"`from` value ({start}) is bigger than `to` value ({end})",
        path="from",
        start=start,
        end=end,
    )
