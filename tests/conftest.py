from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from scaffold_package.materialize import OverwriteChoice  # noqa: E402


WP_CLI_FILES = (
    "features/bootstrap/FeatureContext.php",
    "features/bootstrap/support.php",
    "php/WP_CLI/Process.php",
    "php/utils.php",
    "ci/behat-tags.php",
    "features/steps/given.php",
    "features/steps/when.php",
    "features/steps/then.php",
    "features/extra/no-mail.php",
)


@pytest.fixture()
def wp_cli_root(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """A WP-CLI installation holding only the Behat support files."""

    root = tmp_path_factory.mktemp("wp-cli")
    for relative in WP_CLI_FILES:
        target = root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(f"<?php // {relative}\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def configured_wp_cli_root(monkeypatch: pytest.MonkeyPatch, wp_cli_root: Path) -> Path:
    monkeypatch.setenv("WP_CLI_ROOT", str(wp_cli_root))
    return wp_cli_root


class ScriptedResponder:
    """Confirmation callback answering from a fixed list of choices."""

    def __init__(self, answers: Iterable[OverwriteChoice]) -> None:
        self._answers = list(answers)
        self.asked: list[Path] = []

    def __call__(self, path: Path) -> OverwriteChoice:
        self.asked.append(path)
        if not self._answers:
            raise AssertionError(f"unexpected overwrite prompt for {path}")
        return self._answers.pop(0)


@pytest.fixture()
def responder() -> Callable[..., ScriptedResponder]:
    def factory(*answers: OverwriteChoice) -> ScriptedResponder:
        return ScriptedResponder(answers)

    return factory
