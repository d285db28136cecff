from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from extended_fizzbuzz.core.errors import MatcherError
from extended_fizzbuzz.core.matcher import Matcher


DEFAULT_PRESET = "fizzbuzz"

DEFAULT_PRESETS: Mapping[str, tuple[tuple[int, str], ...]] = MappingProxyType(
    {
        # The classic game; also used when nothing else is configured.
        "fizzbuzz": ((3, "Fizz"), (5, "Buzz")),
        "fizzbuzzbazz": ((3, "Fizz"), (5, "Buzz"), (7, "Bazz")),
        # No substitutions: every line is the number itself.
        "plain": (),
    }
)


def parse_matcher(text: str, index: Optional[int] = None) -> Matcher:
    """Parse a `DIVISOR=WORD` option value.

    Splits at the first `=`, so the word may itself contain `=` or be empty.
    """

    path = f"matchers[{index}]" if index is not None else None

    divisor_text, sep, word = text.partition("=")
    if not sep:
        raise MatcherError(
            code="E_MATCHER_SPEC_INVALID",
            message=f"expected DIVISOR=WORD, got {text!r}",
            path=path,
        )
    try:
        divisor = int(divisor_text.strip())
    except ValueError:
        raise MatcherError(
            code="E_MATCHER_SPEC_INVALID",
            message=f"divisor must be an integer, got {divisor_text.strip()!r}",
            path=path,
        ) from None

    try:
        return Matcher(divisor, word)
    except MatcherError as e:
        if path is None:
            raise
        raise MatcherError(code=e.code, message=e.message, path=path) from e


def parse_matchers(texts: Iterable[str]) -> list[Matcher]:
    return [parse_matcher(t, index=i) for i, t in enumerate(texts)]


def preset_matchers(name: str) -> list[Matcher]:
    if name not in DEFAULT_PRESETS:
        raise MatcherError(
            code="E_UNKNOWN_PRESET",
            message=f"unknown preset: {name} (choose one of: {', '.join(sorted(DEFAULT_PRESETS))})",
            path="preset",
        )
    return [Matcher(divisor, word) for divisor, word in DEFAULT_PRESETS[name]]


def build_matchers(preset: Optional[str] = None, specs: Iterable[str] = ()) -> list[Matcher]:
    """Resolve CLI configuration into an ordered matcher list.

    Preset matchers come first, followed by `specs` in the order given.
    With neither a preset nor specs, the default preset is used.
    """

    specs = list(specs)
    if preset is None and not specs:
        preset = DEFAULT_PRESET

    matchers: list[Matcher] = []
    if preset is not None:
        matchers.extend(preset_matchers(preset))
    matchers.extend(parse_matchers(specs))
    return matchers
