import os
import re
import logging
from typing import Iterable
from pydantic import ValidationError

from settings import (
    MANIFEST_BINARY_MARKER,
    MANIFEST_COMMENT_MARKER,
    MANIFEST_ENCODING,
    MANIFEST_FIELD_WHITESPACE,
)
from features.checksums.digest import file_md5sum
from features.checksums.models import ChecksumEntry
from features.checksums.exceptions import (
    ManifestParseError,
    ManifestReadError,
)

logger = logging.getLogger(__name__)

_FIELD_SEPARATOR = re.compile(f"[{re.escape(MANIFEST_FIELD_WHITESPACE)}]+")


def manifest_base_dir(manifest_path: str) -> str:
    """
    Directory that relative paths inside *manifest_path* are resolved against:
    the (symlink-resolved) directory holding the manifest.
    """
    return os.path.dirname(os.path.realpath(manifest_path))


def resolve_entry_path(file_path: str, base_dir: str) -> str:
    """Join a manifest path onto *base_dir*; absolute paths are returned unchanged."""
    return os.path.join(base_dir, file_path)


def parse_manifest_line(
        line: str,
        line_number: int,
        manifest_path: str = "<manifest>",
    ) -> ChecksumEntry | None:
    """
    Parses one manifest line of the form ``<checksum><whitespace><filepath>``.

    Args:
        line (str): The line, with or without its terminator.
        line_number (int): 1-based line number, used in errors and kept on the entry.
        manifest_path (str): Manifest path, used in errors only.

    Returns:
        ChecksumEntry | None: The entry, or None for blank and comment lines.

    Raises:
        ManifestParseError: If the line does not hold exactly a valid MD5 checksum and a path.
    """
    content = line.strip(MANIFEST_FIELD_WHITESPACE)
    if not content or content.startswith(MANIFEST_COMMENT_MARKER):
        return None

    tokens = _FIELD_SEPARATOR.split(content)
    if len(tokens) != 2:
        raise ManifestParseError(
            f"expected 2 whitespace-separated fields (checksum and file path), found {len(tokens)}",
            manifest_path= manifest_path,
            line_number= line_number,
            line= line.rstrip("\r\n"),
        )

    checksum, file_path = tokens
    if file_path.startswith(MANIFEST_BINARY_MARKER):
        file_path = file_path[len(MANIFEST_BINARY_MARKER):]

    try:
        return ChecksumEntry(
            file_path= file_path,
            expected_checksum= checksum,
            line_number= line_number,
        )
    except ValidationError as e:
        reason = "; ".join(err["msg"] for err in e.errors())
        raise ManifestParseError(
            reason,
            manifest_path= manifest_path,
            line_number= line_number,
            line= line.rstrip("\r\n"),
        ) from e


def parse_manifest(manifest_path: str) -> list[ChecksumEntry]:
    """
    Reads a checksum manifest and returns its entries in manifest order.

    Blank lines and lines starting with '#' are ignored. Any other line that
    is not ``<32 hex chars><whitespace><filepath>`` fails the whole parse.

    Args:
        manifest_path (str): Path to the manifest file.

    Returns:
        list[ChecksumEntry]: Parsed entries; empty if the manifest holds none.

    Raises:
        ManifestReadError: If the manifest can not be opened, read or decoded.
        ManifestParseError: If a line is malformed.
    """
    entries: list[ChecksumEntry] = []

    try:
        with open(manifest_path, "r", encoding=MANIFEST_ENCODING, newline="") as f:
            for line_number, line in enumerate(f, start=1):
                entry = parse_manifest_line(
                    line= line,
                    line_number= line_number,
                    manifest_path= manifest_path,
                )
                if entry is not None:
                    entries.append(entry)

    except UnicodeDecodeError as e:
        raise ManifestReadError(
            f"manifest is not valid {MANIFEST_ENCODING} text ({e.reason})",
            manifest_path= manifest_path,
        ) from e
    except OSError as e:
        raise ManifestReadError(
            f"could not read manifest: {e.strerror or e}",
            manifest_path= manifest_path,
        ) from e

    logger.debug(f"Parsed {len(entries)} entries from {manifest_path}")

    return entries


def write_manifest(
        file_list: Iterable[str],
        output_file: str,
    ) -> list[ChecksumEntry]:
    """
    Generates an MD5 manifest for a list of files.

    Each line in the output file is formatted as: <hash><space><space><filepath>,
    with <filepath> relative to the manifest's directory so that parse_manifest
    resolves it back to the same file.

    Args:
        file_list (Iterable[str]): File paths to hash.
        output_file (str): Path of the manifest to write.

    Returns:
        list[ChecksumEntry]: The entries written, in input order.

    Raises:
        OSError: If a listed file can not be read or the manifest can not be written.

    Notes:
        Non-regular files, the manifest itself, and paths containing
        whitespace are skipped with a warning. When nothing is left to hash
        the manifest is not created.
    """
    base_dir = manifest_base_dir(output_file)
    output_realpath = os.path.realpath(output_file)

    entries: list[ChecksumEntry] = []
    for filename in file_list:
        if not os.path.isfile(filename):
            logger.warning(f"'{filename}' is not a valid file and will be skipped.")
            continue

        real_path = os.path.realpath(filename)
        if real_path == output_realpath:
            continue

        try:
            manifest_path = os.path.relpath(real_path, base_dir)
        except ValueError:
            # different drive on Windows
            manifest_path = real_path

        if any(c in MANIFEST_FIELD_WHITESPACE for c in manifest_path):
            logger.warning(f"'{filename}' contains whitespace and can not be listed in a manifest, skipped.")
            continue

        entries.append(
            ChecksumEntry(
                file_path= manifest_path,
                expected_checksum= file_md5sum(filename),
                line_number= len(entries) + 1,
            )
        )

    if not entries:
        logger.warning("No files to hash. MD5 manifest file will not be created.")
        return entries

    with open(output_file, "w", encoding="utf-8") as out:
        for entry in entries:
            # Format: <hash><space><space><filepath>
            out.write(f"{entry.expected_checksum}  {entry.file_path}\n")

    logger.info(f"Wrote {len(entries)} entries to {output_file}")

    return entries
