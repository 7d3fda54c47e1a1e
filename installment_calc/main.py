"""Command‑line interface for the installment calculator.

This module uses the ``click`` library to implement a multi‑command
interface. Users can print the payment summary, the full amortization
schedule or a printable HTML report. Results can be printed to the terminal
or exported to JSON/CSV/HTML files.
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import click

from .currencies import CURRENCIES, DEFAULT_CURRENCY, Currency, get_currency
from .data_models import ScheduleEntry
from .formatter import print_schedule, print_summary, schedule_rows, summary_dict
from .shell import CalculatorState, calculate, export_report

MAX_PRINTED_ROWS = 120


def run_calculation(principal: str, years: str, rate: str, currency: str) -> CalculatorState:
    """Calculate from raw option values, turning errors into ``BadParameter``."""
    state = calculate(CalculatorState.from_fields(principal, years, rate, currency))
    if state.error:
        raise click.BadParameter(state.error)
    return state


def export_to_json(path: Path, summary: Dict[str, Any], schedule: Optional[List[ScheduleEntry]] = None) -> None:
    """Export the summary and, optionally, the schedule to a JSON file."""
    data: Dict[str, Any] = {"summary": summary}
    if schedule is not None:
        data["schedule"] = schedule_rows(schedule)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, schedule: List[ScheduleEntry]) -> None:
    """Export schedule to a CSV file."""
    header = ["Month", "Payment", "Principal", "Interest", "Balance"]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for row in schedule_rows(schedule):
            writer.writerow([row["month"], row["payment"], row["principal"], row["interest"], row["balance"]])


def loan_options(func: Callable) -> Callable:
    """Attach the options shared by every calculation command."""
    options = [
        click.option("--principal", "-p", "principal", required=True, help="Total loan amount (e.g. 250000 or 250k)"),
        click.option("--years", "-y", "years", required=True, help="Loan term in years (fractions allowed)"),
        click.option("--rate", "-r", "rate", required=True, help="Annual percentage rate (percent)"),
        click.option(
            "--currency",
            "-c",
            "currency",
            type=click.Choice(sorted(CURRENCIES), case_sensitive=False),
            default=DEFAULT_CURRENCY,
            show_default=True,
            help="Currency used for labels only",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """A command‑line calculator for fixed monthly installments."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(principal: str, years: str, rate: str, currency: str, output: Optional[str]) -> None:
    """Compute and print the monthly payment, total payment and interest."""
    state = run_calculation(principal, years, rate, currency)
    currency_info = get_currency(state.currency)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension")
        export_to_json(path, summary_dict(state.loan, state.result, currency_info))
        click.echo(f"Summary exported to {path}")
    else:
        print_summary(state.loan, state.result, currency_info)


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json, .csv or .html)")
def schedule(principal: str, years: str, rate: str, currency: str, output: Optional[str]) -> None:
    """Compute and print the full amortization schedule."""
    state = run_calculation(principal, years, rate, currency)
    currency_info: Currency = get_currency(state.currency)
    entries = list(state.schedule)
    if output:
        path = Path(output)
        suffix = path.suffix.lower()
        if suffix == ".json":
            export_to_json(path, summary_dict(state.loan, state.result, currency_info), entries)
        elif suffix == ".csv":
            export_to_csv(path, entries)
        elif suffix in (".html", ".htm"):
            path.write_text(export_report(state), encoding="utf-8")
        else:
            raise click.BadParameter("Unsupported output format; use .json, .csv or .html")
        click.echo(f"Schedule exported to {path}")
        return

    print_summary(state.loan, state.result, currency_info)
    # Limit schedule length printed to avoid flooding the terminal
    if len(entries) > MAX_PRINTED_ROWS:
        click.echo(f"Schedule has {len(entries)} rows; showing first {MAX_PRINTED_ROWS} rows.")
        print_schedule(entries[:MAX_PRINTED_ROWS], currency_info)
    else:
        print_schedule(entries, currency_info)


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.html); prints to stdout when omitted")
def report(principal: str, years: str, rate: str, currency: str, output: Optional[str]) -> None:
    """Render the printable HTML report."""
    state = run_calculation(principal, years, rate, currency)
    content = export_report(state)
    if output:
        path = Path(output)
        path.write_text(content, encoding="utf-8")
        click.echo(f"Report written to {path}")
    else:
        click.echo(content)


if __name__ == "__main__":
    cli()
