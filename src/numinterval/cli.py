import math
from collections.abc import Iterator
from pathlib import Path
from typing import Annotated, Any

import srsly
import typer
from pydantic import ValidationError

from numinterval.errors import IntervalError
from numinterval.models import Interval
from numinterval.parse import parse_interval, parse_number
from numinterval.render import ERROR_MARKER, format_number
from numinterval.shape import Number

app = typer.Typer(help="Inspect and intersect numeric intervals.")


class _IntervalRowError(Exception):
    def __init__(self, *, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(reason)


def _parse_interval_option(value: str) -> Interval:
    """Parse interval text. Raises typer.BadParameter on invalid input."""
    try:
        return parse_interval(value)
    except ValueError as err:
        raise typer.BadParameter(str(err)) from err


def _parse_value_option(value: str) -> Number:
    try:
        return parse_number(value)
    except ValueError as err:
        raise typer.BadParameter(
            f"Invalid value '{value}': expected a number"
        ) from err


def _json_number(value: Number | None) -> Number | str | None:
    # JSON has no infinities; write them the way the text form does.
    if isinstance(value, float) and math.isinf(value):
        return format_number(value)
    return value


def _interval_summary(interval: Interval) -> dict[str, Any]:
    summary = {
        "text": str(interval),
        "shape": interval.shape().value,
        "size": interval.size(),
        **interval.model_dump(),
    }
    for key in ("size", "min", "max"):
        summary[key] = _json_number(summary[key])
    return summary


def _echo_interval(interval: Interval, as_json: bool) -> None:
    summary = _interval_summary(interval)
    if as_json:
        typer.echo(srsly.json_dumps(summary))
        return
    typer.echo(summary["text"])


def _interval_from_row(line_number: int, row: Any) -> Interval:
    if not isinstance(row, dict):
        raise _IntervalRowError(
            line_number=line_number,
            reason=f"expected a JSON object, got {type(row).__name__}",
        )
    try:
        return Interval(**row)
    except ValidationError as err:
        first_error = err.errors(include_url=False)[0]
        loc = ".".join(str(item) for item in first_error["loc"])
        message = first_error["msg"]
        raise _IntervalRowError(
            line_number=line_number,
            reason=f"invalid interval row at '{loc}': {message}",
        ) from err


def _iter_interval_rows(input_file: Path) -> Iterator[tuple[int, Interval]]:
    line_number = 0
    rows = srsly.read_jsonl(input_file)
    while True:
        line_number += 1
        try:
            row = next(rows)
        except StopIteration:
            return
        except ValueError as err:
            raise _IntervalRowError(
                line_number=line_number, reason=str(err)
            ) from err
        yield line_number, _interval_from_row(line_number, row)


def _render_row_error(input_file: Path, error: _IntervalRowError) -> str:
    return (
        f"Error: invalid JSONL row in {input_file} at row "
        f"{error.line_number}: {error.reason}"
    )


@app.command()
def describe(
    text: Annotated[str, typer.Argument(help="Interval, e.g. '[5,10)'")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Emit JSON instead of text")
    ] = False,
) -> None:
    """Show the shape, canonical form and size of an interval."""
    interval = _parse_interval_option(text)
    if as_json:
        _echo_interval(interval, as_json=True)
        return

    size = interval.size()
    typer.echo(f"text: {interval}")
    typer.echo(f"shape: {interval.shape().value}")
    typer.echo(f"size: {'unbounded' if size is None else size}")


@app.command()
def contains(
    text: Annotated[str, typer.Argument(help="Interval, e.g. '[5,10)'")],
    value: Annotated[str, typer.Argument(help="Value to test")],
) -> None:
    """Print whether VALUE lies within the interval."""
    interval = _parse_interval_option(text)
    number = _parse_value_option(value)
    typer.echo("true" if interval.contains(number) else "false")


@app.command()
def intersect(
    first: Annotated[str, typer.Argument(help="First interval")],
    second: Annotated[str, typer.Argument(help="Second interval")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Emit JSON instead of text")
    ] = False,
) -> None:
    """Intersect two intervals."""
    result = _parse_interval_option(first)
    other = _parse_interval_option(second)
    try:
        found = result.intersection(other)
    except IntervalError as err:
        typer.echo(f"Error: {err}", err=True)
        raise typer.Exit(1) from err

    if not found:
        typer.echo("No intersection")
        return
    _echo_interval(result, as_json)


@app.command()
def reduce(
    input_file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            dir_okay=False,
            help="JSONL file of interval objects",
        ),
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Emit JSON instead of text")
    ] = False,
) -> None:
    """Intersect every interval in a JSONL file, in order."""
    result: Interval | None = None
    try:
        for line_number, interval in _iter_interval_rows(input_file):
            if result is None:
                result = interval
                continue
            try:
                found = result.intersection(interval)
            except IntervalError as err:
                typer.echo(f"Error: row {line_number}: {err}", err=True)
                raise typer.Exit(1) from err
            if not found:
                typer.echo(f"No intersection (at row {line_number})")
                return
    except _IntervalRowError as err:
        typer.echo(_render_row_error(input_file, err), err=True)
        raise typer.Exit(1) from err

    if result is None:
        typer.echo(f"Error: no intervals in {input_file}", err=True)
        raise typer.Exit(1)
    if not as_json and str(result) == ERROR_MARKER:
        typer.echo("unbounded")
        return
    _echo_interval(result, as_json)
