from __future__ import annotations

from dataclasses import dataclass

from extended_fizzbuzz.core.errors import MatcherError, number_is_zero


@dataclass(frozen=True)
class Matcher:
    """A divisor/word pairing.

    A number is substituted by `word` when it is evenly divisible by
    `divisor`. The divisor is checked once, at construction; instances are
    immutable afterward.

    Numbers passed to `matches`/`text` are expected to be non-negative.
    """

    divisor: int
    word: str

    def __post_init__(self) -> None:
        # bool is an int subclass; True=Fizz is almost certainly a mistake
        if not isinstance(self.divisor, int) or isinstance(self.divisor, bool):
            raise MatcherError(
                code="E_NUMBER_NOT_INTEGER",
                message=f"divisor must be an integer, got {type(self.divisor).__name__}",
            )
        if self.divisor == 0:
            raise number_is_zero()
        if self.divisor < 0:
            raise MatcherError(
                code="E_NUMBER_IS_NEGATIVE",
                message=f"divisor must be positive, got {self.divisor}",
            )
        if not isinstance(self.word, str):
            raise MatcherError(
                code="E_WORD_NOT_TEXT",
                message=f"word must be a string, got {type(self.word).__name__}",
            )

    @classmethod
    def new(cls, divisor: int, word: str) -> Matcher:
        return cls(divisor=divisor, word=word)

    def matches(self, number: int) -> bool:
        """Return True if `number` should be substituted by this matcher's word."""
        return number % self.divisor == 0

    def text(self, number: int) -> str:
        """Return the word when `number` matches, otherwise an empty string."""
        if self.matches(number):
            return self.word
        return ""

    def __str__(self) -> str:
        return f"{self.divisor}={self.word}"
