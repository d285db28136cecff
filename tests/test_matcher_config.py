from extended_fizzbuzz.core.config.matcher_config import (
    DEFAULT_PRESETS,
    build_matchers,
    parse_matcher,
    parse_matchers,
    preset_matchers,
)
from extended_fizzbuzz.core.errors import MatcherError
from extended_fizzbuzz.core.matcher import Matcher


def test_parse_matcher_happy():
    assert parse_matcher("3=Fizz") == Matcher(3, "Fizz")
    assert parse_matcher(" 5 =Buzz") == Matcher(5, "Buzz")
    assert parse_matcher("7=") == Matcher(7, "")
    assert parse_matcher("2=a=b") == Matcher(2, "a=b")


def test_parse_matcher_invalid_spec():
    for text in ["3", "Fizz=3", "=Fizz"]:
        try:
            parse_matcher(text, index=1)
            assert False, f"expected MatcherError for {text!r}"
        except MatcherError as e:
            assert e.code == "E_MATCHER_SPEC_INVALID"
            assert e.path == "matchers[1]"


def test_parse_matcher_zero_keeps_code_and_adds_path():
    try:
        parse_matcher("0=Zero", index=4)
        assert False, "expected MatcherError"
    except MatcherError as e:
        assert e.code == "E_NUMBER_IS_ZERO"
        assert e.path == "matchers[4]"


def test_parse_matcher_zero_without_index():
    try:
        parse_matcher("0=Zero")
        assert False, "expected MatcherError"
    except MatcherError as e:
        assert e.code == "E_NUMBER_IS_ZERO"
        assert e.path is None


def test_parse_matchers_reports_first_bad_entry():
    assert parse_matchers(["3=Fizz", "5=Buzz"]) == [Matcher(3, "Fizz"), Matcher(5, "Buzz")]
    try:
        parse_matchers(["3=Fizz", "nope", "0=x"])
        assert False, "expected MatcherError"
    except MatcherError as e:
        assert e.path == "matchers[1]"


def test_presets():
    assert set(DEFAULT_PRESETS) == {"fizzbuzz", "fizzbuzzbazz", "plain"}
    assert preset_matchers("fizzbuzz") == [Matcher(3, "Fizz"), Matcher(5, "Buzz")]
    assert preset_matchers("plain") == []


def test_unknown_preset():
    try:
        preset_matchers("nope")
        assert False, "expected MatcherError"
    except MatcherError as e:
        assert e.code == "E_UNKNOWN_PRESET"
        assert "fizzbuzz" in e.message


def test_build_matchers_defaults_and_ordering():
    assert build_matchers() == preset_matchers("fizzbuzz")
    assert build_matchers(specs=["2=Two"]) == [Matcher(2, "Two")]
    assert build_matchers("fizzbuzz", ["7=Bazz"]) == [
        Matcher(3, "Fizz"),
        Matcher(5, "Buzz"),
        Matcher(7, "Bazz"),
    ]
    assert build_matchers("plain") == []
