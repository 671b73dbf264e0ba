from typing import Iterable

from features.checksums.models import (
    Match,
    Mismatch,
    OverallResult,
    ReadError,
    VerificationOutcome,
    VerificationSummary,
)


def overall_result(outcomes: Iterable[VerificationOutcome]) -> OverallResult:
    """
    Reduces outcomes to a single verdict.

    Any ReadError wins over any Mismatch; no outcomes at all counts as ALL_MATCH.
    """
    return summarize(outcomes).result


def summarize(outcomes: Iterable[VerificationOutcome]) -> VerificationSummary:
    total = matched = mismatched = errors = 0
    for outcome in outcomes:
        total += 1
        if isinstance(outcome, ReadError):
            errors += 1
        elif isinstance(outcome, Mismatch):
            mismatched += 1
        else:
            matched += 1

    if errors:
        result = OverallResult.ANY_ERROR
    elif mismatched:
        result = OverallResult.ANY_MISMATCH
    else:
        result = OverallResult.ALL_MATCH

    return VerificationSummary(
        total= total,
        matched= matched,
        mismatched= mismatched,
        errors= errors,
        result= result,
    )


def format_outcome(outcome: VerificationOutcome) -> str:
    """One human-readable line identifying the file and its status."""
    if isinstance(outcome, Match):
        return f"{outcome.file_path}: OK"
    if isinstance(outcome, Mismatch):
        return f"{outcome.file_path}: FAILED (expected {outcome.expected}, got {outcome.actual})"
    return f"{outcome.file_path}: ERROR ({outcome.cause})"


def format_summary(summary: VerificationSummary) -> str:
    if summary.result is OverallResult.ALL_MATCH:
        return f"All {summary.total} checksum(s) matched"

    parts = []
    if summary.mismatched:
        parts.append(f"{summary.mismatched} checksum(s) did NOT match")
    if summary.errors:
        parts.append(f"{summary.errors} file(s) could NOT be read")

    return f"{', '.join(parts)} ({summary.matched}/{summary.total} OK)"


def build_json_report(
        outcomes: list[VerificationOutcome],
        manifest_path: str | None = None,
    ) -> dict:
    """Serializable report: the verdict, its exit code, the counts and every outcome."""
    summary = summarize(outcomes)

    return {
        "manifest": manifest_path,
        "result": summary.result.value,
        "exit_code": int(summary.result.exit_code),
        "total": summary.total,
        "matched": summary.matched,
        "mismatched": summary.mismatched,
        "errors": summary.errors,
        "outcomes": [outcome.model_dump(mode="json") for outcome in outcomes],
    }
