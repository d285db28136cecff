from __future__ import annotations

import json
from typing import Any

import typer
import yaml

from extended_fizzbuzz.core.config.matcher_config import DEFAULT_PRESETS, build_matchers
from extended_fizzbuzz.core.errors import FizzBuzzError, MatcherError, RangeError
from extended_fizzbuzz.core.matcher import Matcher
from extended_fizzbuzz.core.render.render_line import render_line, render_lines
from extended_fizzbuzz.core.render.run_range import run

app = typer.Typer(add_completion=False, no_args_is_help=True)

FORMATS = ("text", "json", "yaml")

_PRESET_HELP = f"Built-in matcher preset: {'|'.join(DEFAULT_PRESETS)} (default: fizzbuzz)"
_MATCHER_HELP = "Matcher as DIVISOR=WORD (repeatable): -m 3=Fizz -m 5=Buzz"


@app.callback()
def _callback() -> None:
    """FizzBuzz CLI."""
    return


@app.command("run")
def run_cmd(
    start: int = typer.Argument(..., metavar="FROM", min=0, help="First number (inclusive)"),
    end: int = typer.Argument(..., metavar="TO", min=0, help="Last number (inclusive)"),
    preset: str | None = typer.Option(None, "--preset", help=_PRESET_HELP),
    matcher: list[str] | None = typer.Option(None, "--matcher", "-m", help=_MATCHER_HELP),
    format: str = typer.Option("text", "--format", help="Output format: text|json|yaml"),
) -> None:
    """Print one line per number from FROM to TO."""
    if format not in FORMATS:
        _print_errors([_unknown_format(format)])
        raise typer.Exit(code=2)

    def _emit_payload(
        ok: bool,
        *,
        exit_code: int,
        matchers: list[Matcher],
        lines: list[str],
        errors: list[FizzBuzzError],
    ) -> None:
        payload = {
            "tool": "fizzbuzz",
            "command": "run",
            "ok": ok,
            "from": start,
            "to": end,
            "matchers": [str(m) for m in matchers],
            "lines": lines,
            "error_count": len(errors),
            "errors": [_to_item(e) for e in errors],
        }
        _echo_structured(payload, format)
        raise typer.Exit(code=exit_code)

    matchers: list[Matcher] = []
    try:
        matchers = build_matchers(preset, matcher or [])
        if format == "text":
            run(start, end, matchers, emit=typer.echo)
            return
        lines = render_lines(start, end, matchers)
    except FizzBuzzError as e:
        if format == "text":
            _print_errors([e])
            raise typer.Exit(code=2)
        _emit_payload(False, exit_code=2, matchers=matchers, lines=[], errors=[e])

    _emit_payload(True, exit_code=0, matchers=matchers, lines=lines, errors=[])


@app.command("line")
def line_cmd(
    number: int = typer.Argument(..., min=0, help="Number to render"),
    preset: str | None = typer.Option(None, "--preset", help=_PRESET_HELP),
    matcher: list[str] | None = typer.Option(None, "--matcher", "-m", help=_MATCHER_HELP),
) -> None:
    """Print the rendered line for a single number."""
    try:
        matchers = build_matchers(preset, matcher or [])
    except MatcherError as e:
        _print_errors([e])
        raise typer.Exit(code=2)

    typer.echo(render_line(number, matchers))


@app.command("presets")
def presets() -> None:
    """List built-in matcher presets."""
    typer.echo("Presets:")
    for name in sorted(DEFAULT_PRESETS.keys()):
        pairs = DEFAULT_PRESETS[name]
        listed = ", ".join(f"{d}={w}" for d, w in pairs) if pairs else "(none)"
        typer.echo(f"- {name}: {listed}")


def _unknown_format(format: str) -> FizzBuzzError:
    return FizzBuzzError(
        code="E_RUN_UNKNOWN_FORMAT",
        message=f"unknown format: {format} (choose one of: {', '.join(FORMATS)})",
        path="format",
    )


def _to_item(e: FizzBuzzError) -> dict[str, Any]:
    if isinstance(e, MatcherError):
        source = "matcher"
    elif isinstance(e, RangeError):
        source = "range"
    else:
        source = "unknown"
    item: dict[str, Any] = {
        "code": e.code,
        "message": e.message,
        "path": e.path,
        "severity": "error",
        "source": source,
    }
    if isinstance(e, RangeError):
        item["from"] = e.start
        item["to"] = e.end
    return item


def _echo_structured(payload: dict[str, Any], format: str) -> None:
    if format == "json":
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return
    text = yaml.safe_dump(payload, sort_keys=False, default_flow_style=False, allow_unicode=True)
    typer.echo(text, nl=False)


def _print_errors(errors: list[FizzBuzzError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="fizzbuzz")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
