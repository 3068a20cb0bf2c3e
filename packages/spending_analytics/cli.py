# ruff: noqa: I001
"""CLI for the ``spending_analytics`` package.

Command handlers (``cmd_trends``, ``cmd_breakdown``, ``cmd_shades``) are plain
callables returning an exit code; the Typer app wraps them. A local ``.env`` is
loaded with ``python-dotenv`` before settings are read, so
``SPENDING_ANALYTICS_THEME`` / ``SPENDING_ANALYTICS_LANGUAGE`` /
``SPENDING_ANALYTICS_LOG_LEVEL`` can live there. Chart logic lives in
``spending_analytics.api`` and related modules; this module only loads input,
picks the window and prints JSON.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .logging_setup import configure_logging, get_logger

app = typer.Typer(help="Chart data for income/spending trends and category breakdowns.")

_logger = get_logger("spending_analytics.cli")

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def _print_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _load_settings():
    from .config import Settings

    return Settings.from_env()


def _resolve_window(
    transactions: list,
    range_: str,
    *,
    start: datetime | None,
    end: datetime | None,
    at: datetime | None,
) -> tuple[datetime, datetime]:
    """Pick the aggregation window: explicit bounds win, else the range around ``at``."""

    from .date_ranges import filter_by_range, get_date_range, resolve_all_window

    current = at or datetime.now()
    if start is not None and end is not None:
        return start, end

    default_start, default_end = get_date_range(range_, current)  # type: ignore[arg-type]
    if default_start is None:
        default_start, default_end = resolve_all_window(
            filter_by_range(transactions, "all", current), current
        )
    return start or default_start, end or default_end


def cmd_trends(
    input_path: str,
    *,
    range_: str,
    mode: str = "all",
    start: datetime | None = None,
    end: datetime | None = None,
    at: datetime | None = None,
) -> int:
    from .aggregation import has_data
    from .api import trend_buckets
    from .axis import chart_kind, nice_max
    from .charts import build_chart_series
    from .date_ranges import filter_by_date_range
    from .labels import get_label_resolver
    from .loaders import load_transactions
    from .models import ensure_range, ensure_series_mode

    try:
        ensure_range(range_)
        ensure_series_mode(mode)
        settings = _load_settings()
        transactions = load_transactions(input_path)
    except FileNotFoundError:
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    win_start, win_end = _resolve_window(transactions, range_, start=start, end=end, at=at)
    in_window = filter_by_date_range(transactions, win_start, win_end)
    _logger.debug(
        "trends: %d of %d transactions in %s..%s",
        len(in_window),
        len(transactions),
        win_start.date().isoformat(),
        win_end.date().isoformat(),
    )

    labels = get_label_resolver(settings.language)
    buckets = trend_buckets(
        in_window, win_start, win_end, range_, settings=settings, labels=labels  # type: ignore[arg-type]
    )
    series = build_chart_series(
        buckets, mode, range_, labels=labels, theme=settings.colors  # type: ignore[arg-type]
    )
    _print_json(
        {
            "chart": chart_kind(mode),  # type: ignore[arg-type]
            "hasData": has_data(buckets),
            "niceMax": nice_max(series.max_value),
            **series.to_dict(),
        }
    )
    return 0


def cmd_breakdown(
    input_path: str,
    *,
    kind: str,
    start: datetime | None = None,
    end: datetime | None = None,
    shade_seed: str | None = None,
) -> int:
    from .api import category_breakdown
    from .date_ranges import filter_by_date_range
    from .loaders import load_transactions
    from .models import ensure_category_kind

    try:
        ensure_category_kind(kind)
        settings = _load_settings()
        transactions = load_transactions(input_path)
    except FileNotFoundError:
        print(f"Error: File not found: {input_path}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if start is not None or end is not None:
        transactions = filter_by_date_range(
            transactions, start or datetime.min, end or datetime.max
        )

    slices = category_breakdown(
        transactions, kind, settings=settings, shade_seed=shade_seed  # type: ignore[arg-type]
    )
    _print_json([s.to_dict() for s in slices])
    return 0


def cmd_shades(seed: str, count: int, *, dark: bool = False) -> int:
    from .colors import generate_color_shades

    try:
        shades = generate_color_shades(seed, count, dark)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for shade in shades:
        typer.echo(shade)
    return 0


# Module-level option objects (ruff B008: no calls in parameter defaults).
INPUT_OPTION: OptionInfo = typer.Option(
    ...,
    "--input",
    "-i",
    help="Path to a .json or .csv transaction export",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)
START_OPTION: OptionInfo = typer.Option(
    None, "--start", formats=_DATE_FORMATS, help="Window start (defaults from --range/--at)."
)
END_OPTION: OptionInfo = typer.Option(
    None, "--end", formats=_DATE_FORMATS, help="Window end (defaults from --range/--at)."
)


def _exit(code: int) -> None:
    if code:
        raise typer.Exit(code)


@app.command("trends")
def trends_cmd(
    input_path: Annotated[Path, INPUT_OPTION],
    *,
    range_: str = typer.Option("month", "--range", help="day | week | month | year | all"),
    mode: str = typer.Option("all", "--mode", help="income | spent | all"),
    start: datetime | None = START_OPTION,
    end: datetime | None = END_OPTION,
    at: datetime | None = typer.Option(
        None, "--at", formats=_DATE_FORMATS, help="Reference date (defaults to now)."
    ),
) -> None:
    """Print the trend chart series for a range as JSON."""

    _exit(cmd_trends(str(input_path), range_=range_, mode=mode, start=start, end=end, at=at))


@app.command("breakdown")
def breakdown_cmd(
    input_path: Annotated[Path, INPUT_OPTION],
    *,
    kind: str = typer.Option("spent", "--kind", help="income | spent"),
    start: datetime | None = START_OPTION,
    end: datetime | None = END_OPTION,
    shade_seed: str | None = typer.Option(
        None, "--shade-seed", help="Color slices with shades of this hex color."
    ),
) -> None:
    """Print the category breakdown slices as JSON (empty list when no data)."""

    _exit(cmd_breakdown(str(input_path), kind=kind, start=start, end=end, shade_seed=shade_seed))


@app.command("shades")
def shades_cmd(
    seed: str = typer.Argument(..., help="Seed color, e.g. '#2f95dc' or 'fff'"),
    count: int = typer.Argument(..., help="Number of shades"),
    dark: bool = typer.Option(False, "--dark", help="Use the dark-theme lightness range."),
) -> None:
    """Print COUNT shades of SEED, one per line."""

    _exit(cmd_shades(seed, count, dark=dark))


@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables) and configures package logging.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()

    if ctx.invoked_subcommand is None:
        typer.echo("No subcommand provided. Use --help to see available commands.")
        raise typer.Exit(1)


if __name__ == "__main__":  # pragma: no cover
    app()
