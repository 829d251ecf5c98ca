"""
habitctl CLI - Track habits from the terminal with a plain-text log
"""
from contextlib import contextmanager
from datetime import date
from typing import Iterator, List, Optional
import logging

import pytz
import typer

from habitctl.core.config import Settings, get_settings
from habitctl.core.dependencies import get_session
from habitctl.core.exceptions import (
    HabitCtlException,
    MissingPreconditionError
)
from habitctl.services.bootstrap import ensure_data_files
from habitctl.services.editor import open_in_editor
from habitctl.services.habits.backfill import BackfillLoop
from habitctl.services.habits.report import ReportRenderer
from habitctl.services.habits.session import HabitSession
from habitctl.services.habits.todo import due_today
from habitctl.utils.dates import days_before, get_today

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="habitctl",
    help="Minimalist habit tracker: asks about missing days, shows your history.",
    add_completion=False,
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@contextmanager
def handle_errors() -> Iterator[None]:
    """Turn domain errors into messages and exit codes"""
    try:
        yield
    except MissingPreconditionError as e:
        typer.echo(str(e))
        raise typer.Exit(1)
    except HabitCtlException as e:
        logger.debug("Command failed", exc_info=True)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except pytz.UnknownTimeZoneError as e:
        typer.echo(f"Error: unknown timezone {e}", err=True)
        raise typer.Exit(1)
    except (EOFError, KeyboardInterrupt):
        typer.echo()
        raise typer.Exit(1)


def _today(settings: Settings) -> date:
    return get_today(settings.HABITCTL_TIMEZONE)


def _print_report(session: HabitSession, settings: Settings, today: date,
                  filters: Optional[List[str]] = None) -> None:
    renderer = ReportRenderer(session.engine)
    typer.echo(renderer.render(today, filters or [], days=settings.HABITCTL_HISTORY_DAYS))


def _ask_and_report(settings: Settings, days_ago: Optional[int]) -> None:
    session = get_session(settings)
    session.assert_habits()
    today = _today(settings)
    if days_ago is None:
        days_ago = session.default_lookback(today)

    loop = BackfillLoop(session, context_days=settings.HABITCTL_CONTEXT_DAYS)
    loop.run(days_before(today, days_ago), today)
    _print_report(session, settings, today)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
):
    """
    Ask about the last days without entries, then print the habit log.
    """
    with handle_errors():
        settings = get_settings()
    configure_logging("DEBUG" if verbose else settings.HABITCTL_LOG_LEVEL)
    ctx.obj = settings

    if ctx.invoked_subcommand is not None:
        return

    with handle_errors():
        _ask_and_report(settings, None)


@app.command()
def ask(
    ctx: typer.Context,
    days_ago: Optional[int] = typer.Argument(None, min=0, help="How many days back to start asking."),
):
    """
    Ask for status of all habits for a day.
    """
    with handle_errors():
        _ask_and_report(ctx.obj, days_ago)


@app.command()
def log(
    ctx: typer.Context,
    filters: Optional[List[str]] = typer.Argument(None, help="Only show habits containing any of these."),
):
    """
    Print habit log.
    """
    settings: Settings = ctx.obj
    with handle_errors():
        session = get_session(settings)
        session.assert_habits()
        session.assert_entries()
        _print_report(session, settings, _today(settings), filters)


@app.command()
def todo(ctx: typer.Context):
    """
    Print unresolved tasks for today.
    """
    settings: Settings = ctx.obj
    with handle_errors():
        session = get_session(settings)
        session.assert_habits()
        for habit in due_today(_today(settings), session.habits, session.index):
            typer.echo(habit.name)


@app.command()
def edit(ctx: typer.Context):
    """
    Edit habit log file.
    """
    settings: Settings = ctx.obj
    with handle_errors():
        ensure_data_files(settings)
        open_in_editor(settings.log_file, settings.editor_command)


@app.command()
def edith(ctx: typer.Context):
    """
    Edit list of current habits.
    """
    settings: Settings = ctx.obj
    with handle_errors():
        ensure_data_files(settings)
        open_in_editor(settings.habits_file, settings.editor_command)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
