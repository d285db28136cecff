"""Configurable FizzBuzz: substitute numbers with words by divisibility."""

from extended_fizzbuzz.core.errors import FizzBuzzError, MatcherError, RangeError
from extended_fizzbuzz.core.matcher import Matcher
from extended_fizzbuzz.core.render.render_line import render_line, render_lines
from extended_fizzbuzz.core.render.run_range import run

__all__ = [
    "FizzBuzzError",
    "Matcher",
    "MatcherError",
    "RangeError",
    "render_line",
    "render_lines",
    "run",
]
