"""Daily Roast CLI - record and browse your daily mood roasts."""

import json
import logging
import re
import sys
from datetime import datetime, tzinfo

import click

from .bootstrap import get_service
from .config import load_config
from .core.entries import EntrySummary, EntryUpdate, Mood, calendar_to_dict, now_ms
from .errors import ConfigurationError, DailyRoastError
from .service import EntryService

YEAR_RE = re.compile(r"^\d{4}$")
MONTH_RE = re.compile(r"^(0[1-9]|1[0-2])$")

MOOD_CHOICE = click.Choice([m.value for m in Mood])


def normalize_month(month: str) -> str:
    """Zero-pad a single-digit month ("3" -> "03")."""
    return month.zfill(2) if month.isdigit() and len(month) == 1 else month


def validate_year_month(year: str, month: str) -> tuple[str, str]:
    """Check calendar query parameters. Raises click.BadParameter."""
    month = normalize_month(month)
    if not YEAR_RE.match(year):
        raise click.BadParameter('year must be a 4-digit string (e.g., "2025")', param_hint="YEAR")
    if not MONTH_RE.match(month):
        raise click.BadParameter(
            'month must be a zero-padded 2-digit string from "01" to "12"', param_hint="MONTH"
        )
    return year, month


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


def _owner(ctx: click.Context) -> str:
    owner = ctx.obj["user"] or ctx.obj["config"].default_user
    if not owner:
        raise click.UsageError("No user given. Pass --user, set DAILYROAST_USER, or set DEFAULT_USER in dailyroast.conf.")
    return owner


def _service(ctx: click.Context) -> EntryService:
    try:
        return get_service(ctx.obj["config"])
    except ConfigurationError as e:
        _fail(e)


def _format_when(occurred_at: int, tz: tzinfo | None) -> str:
    return datetime.fromtimestamp(occurred_at / 1000, tz=tz).strftime("%a %b %d %H:%M")


def _show_summary(summary: EntrySummary, as_json: bool, tz: tzinfo | None = None) -> None:
    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
        return
    note = f" - {summary.note}" if summary.note else ""
    click.echo(f"{_format_when(summary.occurred_at, tz)}  [{summary.mood.value:7}] {summary.id}{note}")


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--user", default=None, help="Owner id to act as")
@click.pass_context
def main(ctx, debug: bool, user: str | None):
    """Daily Roast - one mood per day."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = {"user": user, "config": load_config()}


@main.command()
@click.argument("year")
@click.argument("month")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def calendar(ctx, year: str, month: str, as_json: bool):
    """Show the roasts recorded in a month."""
    year, month = validate_year_month(year, month)
    owner = _owner(ctx)
    service = _service(ctx)
    view = service.get_calendar(owner, year, month)

    if as_json:
        click.echo(json.dumps(calendar_to_dict(view), indent=2))
        return

    summaries = view[year][month]
    if not summaries:
        click.echo(f"No roasts for {year}-{month}.")
        return

    click.echo(f"### {year}-{month}")
    for summary in summaries:
        _show_summary(summary, as_json=False, tz=service.tz)


@main.command()
@click.argument("mood", type=MOOD_CHOICE)
@click.option("--note", default=None, help="Free text note")
@click.option("--at", "occurred_at", type=int, default=None, help="Epoch milliseconds (default: now)")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def add(ctx, mood: str, note: str | None, occurred_at: int | None, as_json: bool):
    """Record a roast."""
    owner = _owner(ctx)
    service = _service(ctx)
    summary = service.create_entry(
        owner, Mood(mood), occurred_at if occurred_at is not None else now_ms(), note=note
    )
    _show_summary(summary, as_json, tz=service.tz)


@main.command()
@click.argument("entry_id")
@click.option("--mood", type=MOOD_CHOICE, default=None, help="New mood")
@click.option("--note", default=None, help="New note")
@click.option("--at", "occurred_at", type=int, default=None, help="New time in epoch milliseconds")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def edit(ctx, entry_id: str, mood: str | None, note: str | None, occurred_at: int | None, as_json: bool):
    """Change a roast you own."""
    owner = _owner(ctx)
    changes = EntryUpdate(
        mood=Mood(mood) if mood else None,
        note=note,
        occurred_at=occurred_at,
    )
    try:
        service = _service(ctx)
        summary = service.update_entry(owner, entry_id, changes)
    except DailyRoastError as e:
        _fail(e)
    _show_summary(summary, as_json, tz=service.tz)


@main.command()
@click.argument("entry_id")
@click.pass_context
def delete(ctx, entry_id: str):
    """Delete a roast you own."""
    owner = _owner(ctx)
    try:
        _service(ctx).delete_entry(owner, entry_id)
    except DailyRoastError as e:
        _fail(e)
    click.echo(f"Deleted {entry_id}.")


@main.command()
@click.pass_context
def check(ctx):
    """Verify the storage backend can be set up."""
    service = _service(ctx)
    tz = service.tz or "local time"
    click.echo(f"Storage: {type(service.store).__name__}")
    click.echo(f"Timezone: {tz}")
