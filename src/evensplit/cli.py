"""Click CLI entrypoint for evensplit."""

import sys

import click

from . import __version__, audit, ledger, templates
from .export import write_csv
from .models import ParseError, Roster
from .parser import build_roster, load_roster_file, parse_entries, parse_entry
from .samples import list_samples, load_sample


@click.group()
@click.version_option(version=__version__)
def cli() -> None:
    """evensplit - Settle a shared pool of expenses."""
    pass


def _load_roster(
    entries: tuple[str, ...],
    file: str | None,
    example: str | None,
) -> Roster:
    """Build the roster from whichever single source was given."""
    sources = sum(1 for s in (entries, file, example) if s)
    if sources > 1:
        raise click.UsageError("Give entries, --file, or --example, not more than one.")

    if example:
        return load_sample(example)
    if file:
        return load_roster_file(file)

    parsed = parse_entries(entries)
    if isinstance(parsed, ParseError):
        click.echo(templates.format_parse_error(parsed))
        sys.exit(1)
    return build_roster(parsed)


@cli.command()
@click.argument("entries", nargs=-1)
@click.option("--file", "file", default=None, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--example",
    default=None,
    type=click.Choice(list_samples()),
    help="Use a built-in example group",
)
@click.option("--csv", "csv_path", default=None, help="Also write transfers to this CSV file")
@click.option("--symbol", default=templates.DEFAULT_SYMBOL, help="Currency symbol for display")
@click.option("--log-path", default=None, help="Run log (default: $EVENSPLIT_LOG_PATH)")
@click.option("--no-log", is_flag=True, help="Don't record this run")
def settle(
    entries: tuple[str, ...],
    file: str | None,
    example: str | None,
    csv_path: str | None,
    symbol: str,
    log_path: str | None,
    no_log: bool,
) -> None:
    """
    Work out who pays whom.

    ENTRIES are name=amount pairs, e.g. Dan=30 Sara=90 Avi=0.
    """
    try:
        roster = _load_roster(entries, file, example)
        summary = ledger.summarize(roster.participants)
    except ValueError as e:
        if not no_log:
            audit.log_run([], "error", error_msg=str(e), log_path=log_path)
        click.echo(templates.ERROR_VALIDATION.format(message=e))
        sys.exit(1)

    if not no_log:
        audit.log_run(roster.participants, "ok", summary.transfers, log_path=log_path)

    click.echo(templates.format_summary(summary, symbol))

    if csv_path:
        try:
            written = write_csv(summary.transfers, csv_path)
        except OSError as e:
            click.echo(templates.ERROR_CSV.format(path=csv_path, error=e))
            sys.exit(1)
        click.echo(templates.CSV_WRITTEN.format(count=len(summary.transfers), path=written))


@cli.command()
@click.argument("entry")
def parse(entry: str) -> None:
    """
    Parse a name=amount entry without settling.

    Useful for debugging the parser.
    """
    result = parse_entry(entry)

    if isinstance(result, ParseError):
        click.echo(f"❌ Parse Error: {result.message}")
        click.echo(f"   Raw: {result.raw_text}")
        if result.suggestions:
            click.echo("   Suggestions:")
            for s in result.suggestions:
                click.echo(f"   • {s}")
        sys.exit(1)

    name, amount = result
    click.echo(f"✅ Parsed: {name} paid {amount}")


@cli.command()
def examples() -> None:
    """List built-in example groups."""
    for name in list_samples():
        roster = load_sample(name)
        people = ", ".join(f"{p.name}={p.paid}" for p in roster.participants)
        click.echo(f"  • {name}: {people}")


@cli.command()
@click.option("--limit", default=10, show_default=True, help="Number of runs to show")
@click.option("--log-path", default=None, help="Run log (default: $EVENSPLIT_LOG_PATH)")
def history(limit: int, log_path: str | None) -> None:
    """Show recent settlement runs."""
    records = audit.read_log(log_path, limit=limit)

    if not records:
        click.echo(templates.LOG_EMPTY)
        return

    for record in records:
        click.echo(templates.format_run(record))


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
