import fnmatch
import json
from pathlib import Path
from typing import Iterable


## ────────── Report Utilities ────────── ##

def write_json_file(filepath: str, data: dict, indent: int | None = 2) -> None:
    """
    Saves a verification report (or any dict) as UTF-8 JSON.

    Non-ASCII file names listed in a manifest are written as-is rather than escaped.

    Args:
        filepath (str): Report destination, e.g. the value of ``--json-report``.
        data (dict): Report produced by ``build_json_report``.
        indent (int | None): Indentation for pretty-printing; None writes a single line.
    """
    with open(filepath, "w", encoding="utf-8") as report:
        json.dump(data, report, ensure_ascii= False, indent= indent)
        report.write("\n")


## ────────── File Collection ────────── ##

def list_directory(
        directory: str,
        include_patterns: Iterable[str] = (),
        exclude_patterns: Iterable[str] = (),
        full_path: bool = True,
        recursive: bool = False,
        include_hidden: bool = False,
    ) -> list[str]:
    """
    Collects the files of a directory that ``chkr generate`` should checksum.

    Args:
        directory (str): Directory passed to ``generate``.
        include_patterns (Iterable[str]): File name globs to keep (``--include``, e.g. ['*.iso']).
            Every file is kept when empty.
        exclude_patterns (Iterable[str]): File name globs to drop, e.g. an existing 'md5sum.txt'.
        full_path (bool): Return paths joined onto *directory* instead of bare file names.
        recursive (bool): Descend into subdirectories (``--recursive``).
        include_hidden (bool): Keep dot-files.

    Returns:
        list[str]: Matching files in sorted order, so generated manifests are stable.

    Raises:
        NotADirectoryError: If *directory* is not a directory.
    """
    base = Path(directory)
    if not base.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {directory}")

    candidates = base.rglob("*") if recursive else base.glob("*")

    selected = []
    for path in candidates:
        if not path.is_file():
            continue
        if not include_hidden and path.name.startswith("."):
            continue
        if include_patterns and not any(fnmatch.fnmatch(path.name, pat) for pat in include_patterns):
            continue
        if any(fnmatch.fnmatch(path.name, pat) for pat in exclude_patterns):
            continue

        selected.append(str(path) if full_path else path.name)

    return sorted(selected)
