import os
from pathlib import Path

import pytest

# Keep test runs from writing chkr.log into the working directory.
os.environ["CHKR_LOG_FILE"] = ""

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"
HELLO_MD5 = "5eb63bbbe01eeed093cb22bb8f5acdc3"  # b"hello world"
ABC_MD5 = "900150983cd24fb0d6963f7d28e17f72"  # b"abc"


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """A directory with three files of known MD5 and a manifest describing them."""
    (tmp_path / "a.txt").write_bytes(b"")
    (tmp_path / "hello.txt").write_bytes(b"hello world")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "abc.bin").write_bytes(b"abc")

    (tmp_path / "md5sum.txt").write_text(
        "# release artifacts\n"
        f"{EMPTY_MD5}  a.txt\n"
        "\n"
        f"{HELLO_MD5.upper()}  hello.txt\n"
        f"{ABC_MD5} *sub/abc.bin\n"
    )
    return tmp_path
