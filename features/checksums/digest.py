import hashlib
import re

from settings import MD5_HEX_LENGTH

_MD5_HEX_PATTERN = re.compile(rf"[0-9a-fA-F]{{{MD5_HEX_LENGTH}}}")


def file_md5sum(filepath: str) -> str:
    """
    Calculates the MD5 checksum of a file.

    The file is streamed through the hash, so memory use does not depend on its size.

    Args:
        filepath (str): Path to the file.

    Returns:
        str: Lowercase hexadecimal MD5 checksum string.

    Raises:
        OSError: If the file can not be opened or a read fails midway
            (FileNotFoundError, PermissionError, IsADirectoryError, ...).
    """
    with open(filepath, "rb") as f:
        digest = hashlib.file_digest(f, "md5")

    return digest.hexdigest()


def is_md5_hexdigest(value: str) -> bool:
    """True when *value* is exactly 32 hexadecimal characters, in either case."""
    return _MD5_HEX_PATTERN.fullmatch(value) is not None


def normalize_checksum(value: str) -> str:
    return value.strip().lower()
