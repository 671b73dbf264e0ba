import json
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

import main
from cli.app import app
from settings import VERSION

from conftest import EMPTY_MD5, HELLO_MD5

runner = CliRunner()


def _run_main(monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
    monkeypatch.setattr(sys, "argv", ["chkr", *args])
    with pytest.raises(SystemExit) as exc_info:
        main.main()
    return exc_info.value.code


def test_file_returns_zero_for_match(sample_dir: Path) -> None:
    result = runner.invoke(app, ["file", str(sample_dir / "a.txt"), EMPTY_MD5])

    assert result.exit_code == 0
    assert "a.txt: OK" in result.output


def test_file_returns_one_for_mismatch(sample_dir: Path) -> None:
    result = runner.invoke(app, ["file", str(sample_dir / "a.txt"), "f" * 32])

    assert result.exit_code == 1
    assert f"got {EMPTY_MD5}" in result.output


def test_file_returns_sixteen_for_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["file", str(tmp_path / "does-not-exist.csv"), EMPTY_MD5])

    assert result.exit_code == 0x10
    assert "FileNotFoundError" in result.output


def test_manifest_with_mismatch_and_missing_file(sample_dir: Path) -> None:
    (sample_dir / "hello.txt").write_bytes(b"changed")
    (sample_dir / "a.txt").unlink()

    result = runner.invoke(app, ["manifest", str(sample_dir / "md5sum.txt")])

    assert result.exit_code == 0x10
    assert "(1/3 33.33%) a.txt: ERROR" in result.output
    assert "(2/3 66.67%) hello.txt: FAILED" in result.output
    assert "(3/3 100.00%) sub/abc.bin: OK" in result.output


def test_manifest_all_match_quiet(sample_dir: Path) -> None:
    result = runner.invoke(app, ["manifest", "--quiet", str(sample_dir / "md5sum.txt")])

    assert result.exit_code == 0
    assert ": OK" not in result.output
    assert "All 3 checksum(s) matched" in result.output


def test_manifest_mismatch_only_returns_one(sample_dir: Path) -> None:
    (sample_dir / "hello.txt").write_bytes(b"changed")

    result = runner.invoke(app, ["manifest", str(sample_dir / "md5sum.txt")])

    assert result.exit_code == 1


def test_manifest_parse_error_returns_sixteen(tmp_path: Path) -> None:
    manifest = tmp_path / "md5sum.txt"
    manifest.write_text(f"{EMPTY_MD5[:31]}  a.txt\n")

    result = runner.invoke(app, ["manifest", str(manifest)])

    assert result.exit_code == 0x10
    assert "line 1" in result.output
    assert "a.txt: " not in result.output


def test_manifest_missing_returns_sixteen(tmp_path: Path) -> None:
    result = runner.invoke(app, ["manifest", str(tmp_path / "missing.md5")])

    assert result.exit_code == 0x10
    assert "could not read manifest" in result.output


def test_manifest_with_unopenable_path_returns_sixteen(sample_dir: Path) -> None:
    manifest = sample_dir / "md5sum.txt"
    with manifest.open("a") as f:
        f.write(f"{EMPTY_MD5}  bad\x00name\n")

    result = runner.invoke(app, ["manifest", str(manifest)])

    assert result.exit_code == 0x10
    assert "(3/4 75.00%) sub/abc.bin: OK" in result.output
    assert "1 file(s) could NOT be read" in result.output


def test_manifest_writes_json_report(sample_dir: Path, tmp_path: Path) -> None:
    report_path = tmp_path / "report.json"

    result = runner.invoke(
        app,
        ["manifest", str(sample_dir / "md5sum.txt"), "--json-report", str(report_path)],
    )

    assert result.exit_code == 0
    report = json.loads(report_path.read_text(encoding="utf-8"))
    assert report["result"] == "all_match"
    assert [o["file_path"] for o in report["outcomes"]] == ["a.txt", "hello.txt", "sub/abc.bin"]


def test_generate_then_verify(tmp_path: Path) -> None:
    data = tmp_path / "data"
    data.mkdir()
    (data / "hello.txt").write_bytes(b"hello world")
    (data / "notes.md").write_bytes(b"skip me")
    output = data / "md5sum.txt"

    result = runner.invoke(
        app,
        ["generate", str(data), "--output", str(output), "--include", "*.txt"],
    )

    assert result.exit_code == 0
    assert output.read_text() == f"{HELLO_MD5}  hello.txt\n"

    result = runner.invoke(app, ["manifest", str(output)])
    assert result.exit_code == 0


def test_generate_without_files_returns_sixteen(tmp_path: Path) -> None:
    output = tmp_path / "md5sum.txt"

    result = runner.invoke(app, ["generate", str(tmp_path / "missing"), "-o", str(output)])

    assert result.exit_code == 0x10
    assert not output.exists()


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert VERSION in result.output


def test_about_banner() -> None:
    result = runner.invoke(app, ["about"])

    assert result.exit_code == 0
    assert VERSION in result.output


def test_main_exit_codes(sample_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run_main(monkeypatch, "file", str(sample_dir / "a.txt"), EMPTY_MD5) == 0
    assert _run_main(monkeypatch, "file", str(sample_dir / "a.txt"), "f" * 32) == 1
    assert _run_main(monkeypatch, "file", str(sample_dir / "nope.txt"), EMPTY_MD5) == 0x10


def test_main_usage_errors_return_sixteen(sample_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert _run_main(monkeypatch, "file", str(sample_dir / "a.txt"), "not-a-checksum") == 0x10
    assert _run_main(monkeypatch, "file", str(sample_dir / "a.txt")) == 0x10
    assert _run_main(monkeypatch, "bogus-command") == 0x10


def test_main_help_returns_zero(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture) -> None:
    assert _run_main(monkeypatch, "-h") == 0
    assert "manifest" in capsys.readouterr().out
