"""CLI interface for Log Viewer."""

import json
import sys
from typing import Dict, Optional, TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from shared.cli import create_table, handle_errors, info, print_table, success, warning
from shared.logger import setup_logger

from .collection import LogEntryCollection
from .config import OutputFormat, ViewerConfig
from .levels import ALL_LEVELS, LevelStyler, LogLevel, default_styler
from .splitter import parse_records

console = Console()


def display_entries(
    entries: LogEntryCollection,
    styler: LevelStyler = default_styler,
    limit: Optional[int] = None,
) -> None:
    """Display log entries in a table."""
    if not entries:
        info("No log entries found")
        return

    display_count = len(entries) if limit is None else min(limit, len(entries))

    table = create_table(title=f"Log Entries ({display_count} of {len(entries)})")
    table.add_column("Time", style="cyan", width=20)
    table.add_column("Env", style="dim", width=12)
    table.add_column("Level", width=14)
    table.add_column("Header", no_wrap=False)
    table.add_column("Stack", justify="center", width=5)

    for entry in entries[:display_count]:
        label = escape(entry.label(styler.icon_for, styler.name_for).strip()) or "-"
        style = styler.style_for(entry.level)
        level_str = f"[{style}]{label}[/{style}]" if style else label

        table.add_row(
            entry.datetime.strftime("%Y-%m-%d %H:%M:%S"),
            escape(entry.env) or "-",
            level_str,
            escape(entry.header[:120]),
            "✓" if entry.has_stack() else "",
        )

    print_table(table)


def display_statistics(counts: Dict[str, int], styler: LevelStyler = default_styler) -> None:
    """Display per-level counts."""
    console.print(Panel("[bold cyan]Log Statistics[/bold cyan]"))
    console.print(f"  Total Entries: {counts.get(ALL_LEVELS, 0):,}")

    table = create_table(title=None)
    table.add_column("Level", style="bold")
    table.add_column("Count", justify="right", style="cyan")

    for level, count in counts.items():
        if level == ALL_LEVELS:
            continue
        table.add_row(escape(styler.name_for(level)), f"{count:,}")

    print_table(table)


@click.command()
@click.argument("log_file", type=click.File("r", encoding="utf-8", errors="replace"), default="-")
@click.option(
    "--level",
    "-l",
    multiple=True,
    help="Only show this level (repeatable, e.g. error, warning)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on the first record with a malformed timestamp",
)
@click.option(
    "--stats",
    "-s",
    is_flag=True,
    help="Show per-level statistics",
)
@click.option(
    "--limit",
    type=click.IntRange(min=1),
    default=50,
    help="Limit number of entries shown",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.TABLE.value,
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    log_file: TextIO,
    level: tuple,
    strict: bool,
    stats: bool,
    limit: int,
    output: str,
    verbose: bool,
):
    """
    Log Viewer - Browse Laravel-style application logs.

    Reads LOG_FILE (or stdin) and shows each record's time, environment,
    level and message.

    Examples:

        \b
        # Show the latest records of a log
        log-viewer storage/logs/laravel.log

        \b
        # Only errors and criticals, with statistics
        log-viewer laravel.log --level error --level critical --stats

        \b
        # JSON export
        cat laravel.log | log-viewer --output json > entries.json
    """
    log_level = "DEBUG" if verbose else "WARNING"
    setup_logger("tools.log_viewer", level=log_level)

    config = ViewerConfig(
        strict=strict,
        levels=[l.lower() for l in level],
        limit=limit,
        output=output.lower(),
        show_stats=stats,
    )

    known = {l.value for l in LogLevel}
    for unknown in sorted(set(config.levels) - known):
        warning(f"Unknown level '{unknown}'")

    entries = parse_records(log_file.read(), strict=config.strict)

    filtered = entries.filter_by_level(config.levels) if config.levels else entries

    # JSON goes to stdout untouched by status lines
    if config.output == OutputFormat.JSON:
        data = {"total": len(filtered), "entries": filtered.to_list()}
        if config.show_stats:
            data["statistics"] = entries.count_by_level()
        click.echo(json.dumps(data, indent=2))
        sys.exit(0)

    if not entries:
        warning("No log entries found")
        sys.exit(0)

    success(f"Parsed {len(entries)} entries")
    if config.levels:
        info(f"Filtered to {len(filtered)} entries with levels: {', '.join(config.levels)}")

    if config.show_stats:
        display_statistics(entries.count_by_level())

    display_entries(filtered, limit=config.limit)

    if config.limit is not None and len(filtered) > config.limit:
        info(f"Showing {config.limit} of {len(filtered)} entries. Use --limit to show more.")

    sys.exit(0)


if __name__ == "__main__":
    main()
