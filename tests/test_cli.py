from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from scaffold_package.cli import main


@pytest.fixture(autouse=True)
def reset_package_log_level():
    yield
    logging.getLogger("scaffold_package").setLevel(logging.NOTSET)


def test_cli_package_creates_package_and_tests(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    package_dir = tmp_path / "hello"
    exit_code = main(["package", str(package_dir), "--name", "acme/hello"])

    assert exit_code == 0
    assert json.loads((package_dir / "composer.json").read_text(encoding="utf-8"))["name"] == "acme/hello"
    assert (package_dir / "bin" / "install-package-tests.sh").exists()
    out = capsys.readouterr().out
    assert out.index("Success: Created package files.") < out.index("Success: Created package test files.")


def test_cli_package_skip_tests(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["package", str(tmp_path), "--skip-tests"])

    assert exit_code == 0
    assert not (tmp_path / "features").exists()
    assert "package test" not in capsys.readouterr().out


def test_cli_reports_all_skipped(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
):
    assert main(["package", str(tmp_path), "--skip-tests"]) == 0
    capsys.readouterr()
    answers = iter(["?", "s", "s", "s", "s", "s"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    assert main(["package", str(tmp_path), "--skip-tests"]) == 0

    assert "All package files were skipped." in capsys.readouterr().out


def test_cli_force_overwrites(tmp_path: Path):
    assert main(["package", str(tmp_path), "--skip-tests"]) == 0
    (tmp_path / "wp-cli.yml").write_text("custom\n", encoding="utf-8")

    assert main(["package", str(tmp_path), "--skip-tests", "--force"]) == 0

    assert "command.php" in (tmp_path / "wp-cli.yml").read_text(encoding="utf-8")


def test_cli_package_tests_requires_composer_json(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    exit_code = main(["package-tests", str(tmp_path)])

    assert exit_code == 1
    assert "Error: Invalid package directory" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_package_tests(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    (tmp_path / "composer.json").write_text("{}", encoding="utf-8")

    assert main(["package-tests", str(tmp_path)]) == 0

    assert (tmp_path / "features" / "load-wp-cli.feature").exists()
    assert "Success: Created package test files." in capsys.readouterr().out


def test_cli_rejects_empty_license(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["package", str(tmp_path), "--license", ""]) == 1
    assert "license" in capsys.readouterr().err


def test_cli_write_failure_exits_non_zero(
    tmp_path: Path, wp_cli_root: Path, capsys: pytest.CaptureFixture[str]
):
    (tmp_path / "composer.json").write_text("{}", encoding="utf-8")
    (wp_cli_root / "php" / "utils.php").unlink()

    exit_code = main(["package-tests", str(tmp_path), "--wp-cli-root", str(wp_cli_root)])

    assert exit_code == 1
    assert "Error: Error reading contents for:" in capsys.readouterr().err


def test_cli_requires_a_wp_cli_root(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
):
    monkeypatch.delenv("WP_CLI_ROOT")

    assert main(["package", str(tmp_path)]) == 1

    assert "Error: No WP-CLI installation configured" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cli_closed_input_reports_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
):
    assert main(["package", str(tmp_path), "--skip-tests"]) == 0
    capsys.readouterr()

    def closed_input(prompt: str) -> str:
        raise EOFError

    monkeypatch.setattr("builtins.input", closed_input)

    assert main(["package", str(tmp_path), "--skip-tests"]) == 1
    assert "Error: No answer for" in capsys.readouterr().err


@pytest.mark.parametrize("flags, skipping_logged", [([], True), (["-q"], False)])
def test_cli_quiet_hides_skipping(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
    monkeypatch: pytest.MonkeyPatch,
    flags: list[str],
    skipping_logged: bool,
):
    assert main(["package", str(tmp_path), "--skip-tests"]) == 0
    monkeypatch.setattr("builtins.input", lambda prompt: "s")
    caplog.clear()

    assert main([*flags, "package", str(tmp_path), "--skip-tests"]) == 0

    messages = [record.getMessage() for record in caplog.records]
    assert f"File already exists: {tmp_path / 'composer.json'}" in messages
    assert (f"Skipping {tmp_path / 'composer.json'}" in messages) is skipping_logged


def test_cli_verbose_logs_each_write(tmp_path: Path, caplog: pytest.LogCaptureFixture):
    assert main(["-v", "package", str(tmp_path), "--skip-tests"]) == 0

    debug = [record.getMessage() for record in caplog.records if record.levelno == logging.DEBUG]
    assert any(message.endswith(str(tmp_path / "composer.json")) for message in debug)


def test_cli_requires_directory():
    with pytest.raises(SystemExit):
        main(["package"])
