import typer
from typing import Iterable

from features.checksums.models import (
    Match,
    Mismatch,
    OverallResult,
    VerificationOutcome,
    VerificationSummary,
)
from features.checksums.report import (
    format_outcome,
    format_summary,
)


def progress_prefix(position: int, total: int) -> str:
    """Progress marker shown in front of each manifest outcome, e.g. ``(3/8 37.50%)``."""
    percent_done = position / total * 100 if total else 100.0
    return f"({position}/{total} {percent_done:.2f}%)"


def echo_outcome(outcome: VerificationOutcome, prefix: str = "", quiet: bool = False) -> None:
    """
    Print one outcome line. Matches go to stdout in green, failures to stderr
    (yellow for mismatches, red for read errors). *quiet* hides matches.
    """
    line = f"{prefix} {format_outcome(outcome)}" if prefix else format_outcome(outcome)

    if isinstance(outcome, Match):
        if not quiet:
            typer.secho(line, fg=typer.colors.GREEN)
    elif isinstance(outcome, Mismatch):
        typer.secho(line, fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(line, fg=typer.colors.RED, err=True)


def echo_outcomes(
        outcomes: Iterable[VerificationOutcome],
        total: int,
        quiet: bool = False,
    ) -> list[VerificationOutcome]:
    """
    Print outcomes as they are produced and return them all, in order.
    """
    collected: list[VerificationOutcome] = []
    for position, outcome in enumerate(outcomes, start=1):
        echo_outcome(outcome, prefix= progress_prefix(position, total), quiet= quiet)
        collected.append(outcome)

    return collected


def echo_summary(summary: VerificationSummary) -> None:
    msg = format_summary(summary)
    if summary.result is OverallResult.ALL_MATCH:
        typer.secho(f"✅ {msg}")
    else:
        typer.secho(f"❌ {msg}", err=True)
