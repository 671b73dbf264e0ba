import os
from typing import Iterable, Iterator

import utils
from settings import DEFAULT_MANIFEST_NAME

from features.checksums.manifest import (
    manifest_base_dir,
    parse_manifest,
    write_manifest,
)
from features.checksums.models import ChecksumEntry, VerificationOutcome
from features.checksums.verifier import iter_verify_entries, verify_file


def verify_single_file(file_path: str, expected_checksum: str) -> VerificationOutcome:
    return verify_file(file_path= file_path, expected_checksum= expected_checksum)


def load_manifest(manifest_path: str) -> tuple[list[ChecksumEntry], str]:
    """
    Parses a manifest and returns its entries together with the directory
    their relative paths resolve against.
    """
    entries = parse_manifest(manifest_path)
    return entries, manifest_base_dir(manifest_path)


def stream_manifest_outcomes(
        entries: list[ChecksumEntry],
        base_dir: str,
    ) -> Iterator[VerificationOutcome]:
    return iter_verify_entries(entries= entries, base_dir= base_dir)


def collect_files(
        paths: Iterable[str],
        recursive: bool = False,
        include_patterns: Iterable[str] = (),
    ) -> list[str]:
    """
    Expands directories in *paths* into the files they contain. Plain files are kept as given.
    """
    files: list[str] = []
    for path in paths:
        if os.path.isdir(path):
            files.extend(
                utils.list_directory(
                    directory= path,
                    include_patterns= include_patterns,
                    exclude_patterns= (DEFAULT_MANIFEST_NAME,),
                    recursive= recursive,
                )
            )
        else:
            files.append(path)

    return files


def generate_manifest(
        paths: Iterable[str],
        output_file: str,
        recursive: bool = False,
        include_patterns: Iterable[str] = (),
    ) -> list[ChecksumEntry]:
    files = collect_files(paths, recursive= recursive, include_patterns= include_patterns)
    return write_manifest(file_list= files, output_file= output_file)
