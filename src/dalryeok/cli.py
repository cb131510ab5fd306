"""dalryeok CLI - calendar views, search, events and reminders."""

import json
import logging
import sys
from datetime import date, datetime

import click

from .adapters.file_events import EventStoreError
from .config import load_config
from .core.dates import format_week
from .core.events import Event, EventForm, RepeatInfo, RepeatType
from .core.notifications import create_notification_message, get_upcoming_events
from .core.search import View
from .core.views import DayCell, MonthView
from .notifier import run_watcher
from .workflows import InvalidEventError, compile_month, compile_week, get_event_store, save_event, search

WEEKDAY_HEADER = ["일", "월", "화", "수", "목", "금", "토"]


@click.group()
@click.version_option(package_name="dalryeok")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """dalryeok - calendar assistant CLI."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
    )


def _parse_date_option(value: str | None) -> date:
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}")


def _event_line(event: Event) -> str:
    loc = f" @ {event.location}" if event.location else ""
    return f"{event.start_time}-{event.end_time} {event.title}{loc}"


def _events_json(events: list[Event]) -> str:
    return json.dumps([e.to_dict() for e in events], ensure_ascii=False, indent=2)


def _cell_text(cell: DayCell | None) -> str:
    if cell is None:
        return ""
    marker = ("*" if cell.holiday else "") + ("+" if cell.events else "")
    return f"{cell.day:2d}{marker:<2}"


def _show_month(view: MonthView) -> None:
    click.echo(view.label)
    click.echo(" ".join(f"{d:<4}" for d in WEEKDAY_HEADER))
    for week in view.weeks:
        click.echo(" ".join(f"{_cell_text(c):<4}" for c in week))

    for cell in view.days():
        if not cell.holiday and not cell.events:
            continue
        click.echo()
        holiday = f" ({cell.holiday})" if cell.holiday else ""
        click.echo(f"### {cell.date_str}{holiday}")
        for event in cell.events:
            click.echo(f"  {_event_line(event)}")


@main.command()
@click.option("--date", "date_str", help="Any date in the month (YYYY-MM-DD)")
@click.option("--search", "search_term", default="", help="Only show matching events")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def month(date_str: str | None, search_term: str, as_json: bool):
    """Show a month calendar with holidays and events."""
    config = load_config()
    try:
        view = compile_month(config, _parse_date_option(date_str), search_term)
    except EventStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(_events_json([e for cell in view.days() for e in cell.events]))
        return
    _show_month(view)


@main.command()
@click.option("--date", "date_str", help="Any date in the week (YYYY-MM-DD)")
@click.option("--search", "search_term", default="", help="Only show matching events")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def week(date_str: str | None, search_term: str, as_json: bool):
    """Show the Sunday-start week with holidays and events."""
    config = load_config()
    try:
        view = compile_week(config, _parse_date_option(date_str), search_term)
    except EventStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(_events_json([e for cell in view.days for e in cell.events]))
        return

    click.echo(view.label)
    for weekday, cell in zip(WEEKDAY_HEADER, view.days):
        holiday = f" ({cell.holiday})" if cell.holiday else ""
        click.echo(f"{weekday} {cell.date_str}{holiday}")
        for event in cell.events:
            click.echo(f"    {_event_line(event)}")


@main.command("search")
@click.argument("term")
@click.option("--date", "date_str", help="Anchor date (YYYY-MM-DD)")
@click.option("--view", type=click.Choice(["week", "month"]), default=None, help="Range to search")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def search_cmd(term: str, date_str: str | None, view: str | None, as_json: bool):
    """Search events by title, description or location."""
    config = load_config()
    current = _parse_date_option(date_str)
    try:
        events = search(config, term, current, View(view or config.default_view))
    except EventStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(_events_json(events))
        return
    if not events:
        click.echo("검색 결과가 없습니다.")
        return
    for event in events:
        click.echo(f"{event.date} {_event_line(event)}")


@main.command()
@click.option("--title", required=True)
@click.option("--date", "date_str", required=True, help="YYYY-MM-DD")
@click.option("--start", "start_time", required=True, help="HH:MM")
@click.option("--end", "end_time", required=True, help="HH:MM")
@click.option("--description", default="")
@click.option("--location", default="")
@click.option("--category", default="")
@click.option("--repeat", "repeat_type", type=click.Choice([r.value for r in RepeatType]), default="none")
@click.option("--interval", default=0, type=int)
@click.option("--notify", "notification_time", default=10, type=int, help="Minutes before start")
@click.option("--force", is_flag=True, help="Save even if it overlaps other events")
def add(
    title: str,
    date_str: str,
    start_time: str,
    end_time: str,
    description: str,
    location: str,
    category: str,
    repeat_type: str,
    interval: int,
    notification_time: int,
    force: bool,
):
    """Add an event, warning about overlapping ones."""
    config = load_config()
    form = EventForm(
        title=title,
        date=date_str,
        start_time=start_time,
        end_time=end_time,
        description=description,
        location=location,
        category=category,
        repeat=RepeatInfo(type=RepeatType(repeat_type), interval=interval),
        notification_time=notification_time,
    )
    try:
        result = save_event(config, form, force=force)
    except InvalidEventError as e:
        raise click.BadParameter(str(e))
    except EventStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if result.overlaps:
        click.echo("일정 겹침 경고: 다음 일정과 겹칩니다:", err=True)
        for event in result.overlaps:
            click.echo(f"  {event.date} {_event_line(event)}", err=True)
    if not result.saved:
        click.echo("Not saved. Use --force to save anyway.", err=True)
        sys.exit(1)
    click.echo(f"Saved {result.event.id}")


@main.command()
@click.argument("event_id")
def delete(event_id: str):
    """Delete an event by id."""
    config = load_config()
    try:
        get_event_store(config).delete(event_id)
    except EventStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    click.echo(f"Deleted {event_id}")


@main.command()
@click.option("--now", "now_str", help="Check as of this time (YYYY-MM-DDTHH:MM, offsets are converted to TIMEZONE)")
def notify(now_str: str | None):
    """Print reminders for events whose notification time has arrived."""
    config = load_config()
    try:
        now = config.to_local(datetime.fromisoformat(now_str)) if now_str else config.local_now()
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DDTHH:MM, got {now_str!r}", param_hint="--now")
    try:
        events = get_event_store(config).fetch_all()
    except EventStoreError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for event in get_upcoming_events(events, now, set()):
        click.echo(create_notification_message(event))


@main.command()
def watch():
    """Keep running and print reminders as events come due."""
    config = load_config()
    logging.getLogger().setLevel(logging.INFO)
    click.echo(f"{format_week(date.today())} - watching for reminders (Ctrl+C to stop)")
    run_watcher(config, emit=click.echo)
