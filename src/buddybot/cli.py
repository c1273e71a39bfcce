"""CLI for buddybot - all commands in one module.

Provides commands: check, watch, panel, rules.

buddybot/src/buddybot/cli.py
"""

from __future__ import annotations

import logging
import sys
import time
from dataclasses import dataclass, field
from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from .console_utils import console, emotion_style

logger = logging.getLogger(__name__)


@dataclass
class BuddyContext:
    """Shared context for CLI commands."""

    project_root: Path | None = None
    verbose: bool = False
    config: object = field(default=None)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """buddybot: a coding buddy that reacts to your Python code."""
    from .config import load_config

    config = load_config(Path.cwd())
    ctx.obj = BuddyContext(project_root=config.project_root, verbose=verbose, config=config)

    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)


@cli.command("check")
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--format", "-f", "output_format", type=click.Choice(["human", "json"]), default="human", help="Output format"
)
@click.pass_context
def check(ctx: click.Context, files: tuple[Path, ...], output_format: str) -> None:
    """Analyze Python files once and report how the bot feels about them."""
    from .api import analyze_files, build_analyzer
    from .events import is_python_document
    from .reporting import BUILTIN_FORMATTERS

    buddy_ctx: BuddyContext = ctx.obj
    targets = [path for path in files if is_python_document(str(path))]
    skipped = len(files) - len(targets)
    if skipped and output_format == "human":
        console.print(f"[yellow]Skipped {skipped} non-Python file(s)[/yellow]")

    results = analyze_files(targets, build_analyzer(buddy_ctx.config))
    formatter = BUILTIN_FORMATTERS[output_format]()
    click.echo(formatter.format_results(results, buddy_ctx.config))

    ctx.exit(1 if any(result.has_errors for result in results.values()) else 0)


@cli.command("panel")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output", "-o", type=click.Path(path_type=Path), default="buddybot_panel.html", help="Output HTML file path"
)
@click.pass_context
def panel(ctx: click.Context, file: Path, output: Path) -> None:
    """Analyze FILE once and write the bot panel as HTML."""
    from .api import build_session
    from .events import DocumentEvent, EventKind

    buddy_ctx: BuddyContext = ctx.obj
    session = build_session(buddy_ctx.config, panel_path=output)
    session.panel.show()

    event = DocumentEvent(
        kind=EventKind.ACTIVATED,
        identity=str(file),
        text=file.read_bytes().decode("utf-8", errors="replace"),
    )
    if session.handle_event(event) is None:
        console.print(f"[yellow]{file} is not a Python file; panel shows the idle bot[/yellow]")
    session.dispose()
    console.print(f"[green]Panel written to {output}[/green]")


@cli.command("watch")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--interval", type=float, default=1.0, show_default=True, help="Seconds between polls")
@click.option("--hydration-minutes", type=float, default=None, help="Minutes between hydration reminders")
@click.option("--panel", "panel_path", type=click.Path(path_type=Path), default=None, help="Keep an HTML panel here")
@click.option("--max-polls", type=int, default=0, hidden=True)
@click.pass_context
def watch(
    ctx: click.Context,
    file: Path,
    interval: float,
    hydration_minutes: float | None,
    panel_path: Path | None,
    max_polls: int,
) -> None:
    """Watch FILE and react every time it is saved."""
    from .api import build_session
    from .watcher import FileWatcher

    buddy_ctx: BuddyContext = ctx.obj

    def notify(message: str) -> None:
        console.print(f"[cyan]{escape(message)}[/cyan]")

    session = build_session(
        buddy_ctx.config, notify=notify, panel_path=panel_path, hydration_minutes=hydration_minutes
    )
    show_emotion = session.panel.update_emotion

    def announce(emotion: str, reason: str) -> None:
        show_emotion(emotion, reason)
        console.print(f"[{emotion_style(emotion)}]{session.panel.bot_emoji()} {emotion}: {escape(reason)}[/]")

    session.analyzer.set_emotion_listener(announce)
    watcher = FileWatcher(file)
    session.start()
    console.print(f"[blue]Watching {file} (Ctrl+C to stop)[/blue]")

    polls = 0
    try:
        while True:
            event = watcher.poll()
            if event is not None:
                session.handle_event(event)
            polls += 1
            if max_polls and polls >= max_polls:
                break
            time.sleep(interval)
    except KeyboardInterrupt:
        pass
    finally:
        session.dispose()


@cli.command("rules")
@click.pass_context
def rules(ctx: click.Context) -> None:
    """List the line heuristics and their effective severity."""
    from .rules import RuleEngine
    from .validators import get_all_validators

    buddy_ctx: BuddyContext = ctx.obj
    engine = RuleEngine(buddy_ctx.config)

    table = Table(title="buddybot rules")
    table.add_column("Rule", no_wrap=True)
    table.add_column("Severity")
    table.add_column("Description")
    for rule_id, validator_class in get_all_validators().items():
        severity = engine.get_rule_severity(rule_id, validator_class.default_severity)
        table.add_row(rule_id, severity.value, validator_class.description)
    console.print(table)

    summary = engine.get_rule_summary()
    console.print(
        f"{summary['enabled_rules']} of {summary['total_rules']} rules enabled, "
        f"{summary['overrides']} override(s) from config"
    )


def main() -> None:
    """Entry point for buddybot CLI."""
    try:
        cli(obj=BuddyContext(), prog_name="buddybot")
    except SystemExit as e:
        sys.exit(e.code)
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        logger.error("CLI error", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
