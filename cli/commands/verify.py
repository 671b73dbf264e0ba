import logging
import typer
from typing import Optional

import utils
from log_utils import log_error, log_info, log_warning
from features.ops import checksums_ops
from features.checksums.digest import is_md5_hexdigest
from features.checksums.exceptions import ManifestParseError, ManifestReadError
from features.checksums.models import ExitCode, ReadError
from features.checksums.report import build_json_report, summarize

from cli.console_ui import (
    checksum_validation,
    usage_hints,
)

logger = logging.getLogger(__name__)


def _validate_expected_checksum(value: str) -> str:
    if not is_md5_hexdigest(value):
        raise typer.BadParameter(
            f"{value!r} is not an MD5 checksum (32 hexadecimal characters expected)."
        )
    return value


def verify_file_command(
    file_path: str = typer.Argument(..., help="File to verify."),
    expected_checksum: str = typer.Argument(
        ...,
        help="Expected MD5 checksum (32 hexadecimal characters, any case).",
        callback=_validate_expected_checksum,
    ),
) -> None:
    """
    Verify a single file against an expected MD5 checksum.
    """
    outcome = checksums_ops.verify_single_file(
        file_path= file_path,
        expected_checksum= expected_checksum,
    )
    checksum_validation.echo_outcome(outcome)

    if isinstance(outcome, ReadError):
        usage_hints.hint_check_file_permissions()

    raise typer.Exit(code=int(summarize([outcome]).result.exit_code))


def verify_manifest_command(
    checksum_path: str = typer.Argument(..., help="Manifest file listing '<md5>  <path>' lines."),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print files that failed and the summary."),
    json_report: Optional[str] = typer.Option(
        None,
        "--json-report",
        help="Also write the full verification report to this JSON file.",
    ),
) -> None:
    """
    Verify every file listed in a manifest. Relative paths are resolved
    against the manifest's directory.
    """
    try:
        entries, base_dir = checksums_ops.load_manifest(checksum_path)
    except ManifestReadError as e:
        log_error(f"{e}", logger)
        usage_hints.hint_generate_manifest()
        raise typer.Exit(code=ExitCode.ERROR)
    except ManifestParseError as e:
        log_error(f"{e}", logger)
        usage_hints.hint_manifest_format()
        raise typer.Exit(code=ExitCode.ERROR)

    if not entries:
        log_warning(f"{checksum_path} does not list any file", logger)

    outcomes = checksum_validation.echo_outcomes(
        checksums_ops.stream_manifest_outcomes(entries= entries, base_dir= base_dir),
        total= len(entries),
        quiet= quiet,
    )
    summary = summarize(outcomes)
    checksum_validation.echo_summary(summary)

    if json_report:
        try:
            utils.write_json_file(
                filepath= json_report,
                data= build_json_report(outcomes, manifest_path= checksum_path),
            )
        except OSError as e:
            log_error(f"Could not write JSON report {json_report}: {e}", logger)
            raise typer.Exit(code=ExitCode.ERROR)

    raise typer.Exit(code=int(summary.result.exit_code))


def generate_manifest_command(
    paths: list[str] = typer.Argument(..., help="Files or directories to checksum."),
    output: str = typer.Option(..., "--output", "-o", help="Manifest file to write."),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Descend into subdirectories."),
    include: list[str] = typer.Option(
        None,
        "--include",
        "-i",
        help="Only checksum directory files matching this glob pattern (repeatable).",
    ),
) -> None:
    """
    Write an MD5 manifest for the given files and directories.
    """
    try:
        entries = checksums_ops.generate_manifest(
            paths= paths,
            output_file= output,
            recursive= recursive,
            include_patterns= include or (),
        )
    except OSError as e:
        log_error(f"{e}", logger)
        raise typer.Exit(code=ExitCode.ERROR)

    if not entries:
        log_error(f"No files to checksum, {output} was NOT created", logger)
        raise typer.Exit(code=ExitCode.ERROR)

    log_info(f"✅ Wrote {len(entries)} checksum(s) to {output}", logger)
