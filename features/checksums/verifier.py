import logging
from typing import Iterable, Iterator

from features.checksums.digest import file_md5sum, normalize_checksum
from features.checksums.manifest import (
    manifest_base_dir,
    parse_manifest,
    resolve_entry_path,
)
from features.checksums.models import (
    ChecksumEntry,
    Match,
    Mismatch,
    ReadError,
    VerificationOutcome,
)

logger = logging.getLogger(__name__)


def verify_file(
        file_path: str,
        expected_checksum: str,
        display_path: str | None = None,
    ) -> VerificationOutcome:
    """
    Compares the MD5 checksum of a file against an expected value, ignoring letter case.

    Args:
        file_path (str): Path of the file to hash.
        expected_checksum (str): Expected hexadecimal MD5 checksum.
        display_path (str | None): Path to report in the outcome; defaults to *file_path*.

    Returns:
        VerificationOutcome: Match, Mismatch, or ReadError when the file could not be read.
    """
    reported_path = display_path if display_path is not None else file_path

    try:
        actual_checksum = file_md5sum(file_path)
    except (OSError, ValueError) as e:
        # ValueError: the path itself can not be opened, e.g. an embedded NUL byte
        logger.error(f"{reported_path}: could not be read: {e}")
        return ReadError(file_path= reported_path, cause= _describe_read_error(e))

    if actual_checksum == normalize_checksum(expected_checksum):
        logger.info(f"{reported_path}: OK")
        return Match(file_path= reported_path)

    logger.warning(f"{reported_path}: FAILED (expected {expected_checksum}, got {actual_checksum})")
    return Mismatch(
        file_path= reported_path,
        expected= expected_checksum,
        actual= actual_checksum,
    )


def iter_verify_entries(
        entries: Iterable[ChecksumEntry],
        base_dir: str,
    ) -> Iterator[VerificationOutcome]:
    """
    Lazily verifies manifest entries in order, yielding one outcome per entry.

    A mismatched or unreadable file never stops the remaining entries from being checked.
    """
    for entry in entries:
        yield verify_file(
            file_path= resolve_entry_path(entry.file_path, base_dir),
            expected_checksum= entry.expected_checksum,
            display_path= entry.file_path,
        )


def verify_entries(
        entries: Iterable[ChecksumEntry],
        base_dir: str,
    ) -> list[VerificationOutcome]:
    return list(iter_verify_entries(entries, base_dir))


def verify_manifest(manifest_path: str) -> list[VerificationOutcome]:
    """
    Verifies every file listed in a manifest.

    The manifest is parsed completely before any listed file is read, so a
    malformed manifest produces no outcomes at all. Relative paths are
    resolved against the manifest's directory.

    Args:
        manifest_path (str): Path to the manifest file.

    Returns:
        list[VerificationOutcome]: One outcome per entry, in manifest order.

    Raises:
        ManifestParseError: If the manifest is unreadable or malformed.
    """
    entries = parse_manifest(manifest_path)

    return verify_entries(entries, base_dir= manifest_base_dir(manifest_path))


def _describe_read_error(error: OSError | ValueError) -> str:
    if getattr(error, "strerror", None):
        return f"{type(error).__name__}: {error.strerror}"
    return f"{type(error).__name__}: {error}"
