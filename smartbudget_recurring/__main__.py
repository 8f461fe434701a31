"""Command line entry point for recurring detection."""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Optional

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.table import Table

from smartbudget_recurring.config.settings import Settings, get_settings
from smartbudget_recurring.data_models import DetectedSeries, TransactionRecord
from smartbudget_recurring.inference import RecurringDetectionOrchestrator

app = typer.Typer(
    name="smartbudget-recurring",
    help="Detect auto-pay charges and recurring deposits in a transaction history.",
    no_args_is_help=True,
)
console = Console()

_RECORDS = TypeAdapter(list[TransactionRecord])


def configure_logging(settings: Settings) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("smartbudget_recurring").setLevel(log_level)


def load_transactions(path: Path) -> list[TransactionRecord]:
    """Load a JSON array of transaction records."""
    return _RECORDS.validate_json(path.read_bytes())


def _series_table(title: str, key_label: str, rows: list[DetectedSeries], keys: list[str]) -> Table:
    table = Table(title=title)
    table.add_column("Name", style="cyan")
    table.add_column(key_label, style="dim")
    table.add_column("Cadence")
    table.add_column("Count", justify="right")
    table.add_column("Avg Amount", justify="right")
    table.add_column("Confidence", justify="right")
    table.add_column("First Seen")
    table.add_column("Last Seen")

    for row, key in zip(rows, keys, strict=True):
        table.add_row(
            row.display_name,
            key,
            row.cadence,
            str(row.count),
            f"{row.avg_amount:,.2f}",
            f"{row.confidence:.3f}",
            row.first_seen.isoformat(),
            row.last_seen.isoformat(),
        )
    return table


@app.callback()
def main() -> None:
    """Recurring series detection tools."""


@app.command()
def detect(
    path: Path = typer.Argument(..., help="JSON file with an array of transaction records"),
    account_id: Optional[int] = typer.Option(None, "--account-id", "-a", help="Only this account"),
    as_of: Optional[datetime] = typer.Option(
        None, "--as-of", formats=["%Y-%m-%d"], help="End of the lookback window"
    ),
    min_occurrences: Optional[int] = typer.Option(None, "--min-occurrences", "-n"),
    min_confidence: Optional[float] = typer.Option(None, "--min-confidence", "-c"),
) -> None:
    """Detect recurring series in a transaction file."""
    settings = get_settings()
    overrides = {
        k: v
        for k, v in {"min_occurrences": min_occurrences, "min_confidence": min_confidence}.items()
        if v is not None
    }
    if overrides:
        try:
            settings = Settings.model_validate({**settings.model_dump(), **overrides})
        except ValidationError as exc:
            console.print(f"[red]Invalid threshold: {exc.errors()[0]['msg']}[/red]")
            raise typer.Exit(1) from exc

    configure_logging(settings)

    if not path.exists():
        console.print(f"[red]Error: File not found: {path}[/red]")
        raise typer.Exit(1)

    try:
        transactions = load_transactions(path)
    except ValidationError as exc:
        console.print(f"[red]Invalid transaction file: {exc.error_count()} error(s)[/red]")
        raise typer.Exit(1) from exc

    as_of_date: date | None = as_of.date() if as_of else None
    report = RecurringDetectionOrchestrator(settings).detect(transactions, account_id, as_of_date)

    console.print(
        f"[dim]Analyzed {report.transaction_count} of {len(transactions)} transactions[/dim]\n"
    )
    console.print(
        _series_table(
            "Auto-Pays",
            "Series Key",
            list(report.autopays),
            [r.series_key for r in report.autopays],
        )
    )
    console.print(
        _series_table(
            "Recurring Deposits",
            "Employer",
            list(report.deposits),
            [r.employer_key for r in report.deposits],
        )
    )


if __name__ == "__main__":
    app()
