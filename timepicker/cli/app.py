"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Optional, Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig, ConstraintConfig
from ..domain.availability import is_time_available, iter_available_times
from ..domain.exceptions import MinutesGapError, TimepickerError
from ..domain.formatter import format_hour, from_datetime_to_string, is_twenty_four
from ..domain.models import Granularity, Period, TimeFormat
from ..domain.normalizer import normalize
from ..domain.time_model import parse

app = typer.Typer(
    name="timepicker",
    help="Parse, format and validate times of day",
    add_completion=False
)

console = Console()


def _load_config(config_file: Optional[Path]) -> AppConfig:
    try:
        return AppConfig.load_or_default(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


def _resolve_format(format_option: Optional[int], config: AppConfig) -> TimeFormat:
    if format_option is None:
        return config.options.format
    try:
        return TimeFormat(format_option)
    except ValueError:
        console.print(f"[red]Error: --format must be 12 or 24, got {format_option}[/red]")
        raise typer.Exit(1)


def _resolve_constraints(
    config: AppConfig,
    min_time: Optional[str],
    max_time: Optional[str],
    granularity: Optional[Granularity],
    gap: Optional[int]
) -> ConstraintConfig:
    """
    Merge command line bounds over the configured ones.
    """
    base = config.constraints
    overrides = {
        "min_time": min_time if min_time is not None else base.min_time,
        "max_time": max_time if max_time is not None else base.max_time,
        "granularity": granularity if granularity is not None else base.granularity,
        "minutes_gap": gap if gap is not None else base.minutes_gap,
    }
    try:
        return ConstraintConfig(**overrides)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False
):
    """
    Time-of-day helpers for picker widgets.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )


@app.command(name="normalize")
def normalize_command(
    time: Annotated[str, typer.Argument(help="Time text, e.g. '6:30 pm' or '1815'")],
):
    """
    Print the canonical HH:mm form of a time.
    """
    canonical = normalize(time)
    if canonical is None:
        console.print(f"[red]✗ Cannot parse time:[/red] {time!r}")
        raise typer.Exit(1)

    console.print(canonical)


@app.command()
def show(
    time: Annotated[str, typer.Argument(help="Time text to render")],
    format_option: Annotated[Optional[int], typer.Option("--format", "-f", help="Clock: 12 or 24")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./timepicker.yaml")] = None,
):
    """
    Render a time the way the picker shows it in its input field.
    """
    config = _load_config(config_file)
    clock = _resolve_format(format_option, config)

    value = parse(time, config.options, timezone=config.timezone)
    if value is None or not value.is_valid:
        console.print(f"[red]✗ Invalid Time:[/red] {time!r}")
        raise typer.Exit(1)

    console.print(from_datetime_to_string(value, clock))


@app.command()
def check(
    time: Annotated[str, typer.Argument(help="Candidate time")],
    min_time: Annotated[Optional[str], typer.Option("--min", help="Earliest selectable time")] = None,
    max_time: Annotated[Optional[str], typer.Option("--max", help="Latest selectable time")] = None,
    granularity: Annotated[Optional[Granularity], typer.Option("--granularity", "-g", help="Compare by hours or minutes")] = None,
    gap: Annotated[Optional[int], typer.Option("--gap", help="Minutes step selectable times are aligned to")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./timepicker.yaml")] = None,
):
    """
    Check whether a time is selectable under the given bounds.

    Examples:

        timepicker check "14:30" --min 14:00 --max 16:00

        timepicker check "2:15 pm" --gap 15
    """
    config = _load_config(config_file)
    constraints = _resolve_constraints(config, min_time, max_time, granularity, gap)
    constraint = constraints.to_constraint(timezone=config.timezone)

    try:
        available = is_time_available(
            time,
            min=constraint.min,
            max=constraint.max,
            granularity=constraint.granularity,
            minutes_gap=constraint.minutes_gap,
            format=config.options.format,
            options=config.options
        )
    except MinutesGapError as e:
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(2)

    if available is None:
        console.print("[yellow]⚠ No time entered[/yellow]")
        raise typer.Exit(1)

    if available:
        console.print(f"[green]✓ {time} is available[/green]")
    else:
        console.print(f"[red]✗ {time} is not available[/red]")
        raise typer.Exit(1)


@app.command()
def slots(
    min_time: Annotated[Optional[str], typer.Option("--min", help="Earliest selectable time")] = None,
    max_time: Annotated[Optional[str], typer.Option("--max", help="Latest selectable time")] = None,
    granularity: Annotated[Optional[Granularity], typer.Option("--granularity", "-g", help="Compare by hours or minutes")] = None,
    gap: Annotated[Optional[int], typer.Option("--gap", help="Minutes step selectable times are aligned to")] = None,
    format_option: Annotated[Optional[int], typer.Option("--format", "-f", help="Clock: 12 or 24")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./timepicker.yaml")] = None,
):
    """
    List every time the picker would offer.
    """
    config = _load_config(config_file)
    clock = _resolve_format(format_option, config)
    constraints = _resolve_constraints(config, min_time, max_time, granularity, gap)
    constraint = constraints.to_constraint(timezone=config.timezone)

    try:
        times = list(iter_available_times(constraint, options=config.options))
    except TimepickerError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not times:
        console.print("[yellow]⚠ No selectable times for these bounds.[/yellow]")
        return

    table = Table(
        title=f"Selectable times ({len(times)})",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Canonical", style="bold yellow")
    table.add_column("Display", style="dim")

    for canonical in times:
        value = parse(canonical, config.options, timezone=config.timezone)
        table.add_row(canonical, from_datetime_to_string(value, clock))

    console.print()
    console.print(table)
    console.print()


@app.command()
def hour(
    hour_value: Annotated[int, typer.Argument(metavar="HOUR", help="Hour shown on the wheel")],
    format_option: Annotated[int, typer.Option("--format", "-f", help="Clock: 12 or 24")] = 12,
    period: Annotated[Period, typer.Option("--period", "-p", help="AM or PM")] = Period.AM,
):
    """
    Convert an hour wheel selection to a 24-hour hour.
    """
    try:
        clock = TimeFormat(format_option)
    except ValueError:
        console.print(f"[red]Error: --format must be 12 or 24, got {format_option}[/red]")
        raise typer.Exit(1)

    result = format_hour(hour_value, clock, period)
    suffix = "" if is_twenty_four(clock) else f" ({hour_value} {period.value})"
    console.print(f"{result}{suffix}")


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]timepicker[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
