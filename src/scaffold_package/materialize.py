"""Write scaffolding files to disk, confirming before anything is replaced."""

from __future__ import annotations

import logging
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from .errors import ValidationError, WriteError

__all__ = [
    "Materializer",
    "OverwriteChoice",
    "ScaffoldReport",
    "WriteOutcome",
    "WriteRequest",
    "WriteResult",
    "materialize",
    "prompt_overwrite",
]


LOGGER = logging.getLogger(__name__)

PROMPT = "Skip {path}, or replace it with scaffolding? [s/r]: "

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class WriteOutcome(str, Enum):
    """What happened to a single destination."""

    WRITTEN = "written"
    SKIPPED = "skipped"


class OverwriteChoice(str, Enum):
    """Operator decision for a destination that already exists."""

    SKIP = "skip"
    REPLACE = "replace"


ConfirmOverwrite = Callable[[Path], OverwriteChoice]


@dataclass(frozen=True, slots=True)
class WriteRequest:
    """A destination and a callable producing its content.

    The producer is only invoked when the file is actually written.
    """

    destination: Path
    content_producer: Callable[[], bytes]
    executable: bool = False


class WriteResult(BaseModel):
    """Outcome recorded for one :class:`WriteRequest`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: Path = Field(..., description="Destination that was considered.")
    outcome: WriteOutcome = Field(..., description="Whether the destination was written or skipped.")


class ScaffoldReport(BaseModel):
    """Results of one scaffolding command, in request order."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    results: list[WriteResult] = Field(default_factory=list)
    tests: ScaffoldReport | None = Field(None, description="Report of the test-harness step, when it ran.")

    @property
    def written(self) -> list[Path]:
        return [result.path for result in self.results if result.outcome is WriteOutcome.WRITTEN]

    @property
    def skipped(self) -> list[Path]:
        return [result.path for result in self.results if result.outcome is WriteOutcome.SKIPPED]

    @property
    def all_skipped(self) -> bool:
        """``True`` when nothing was written."""

        return not self.written


def prompt_overwrite(
    path: Path,
    *,
    input_func: Callable[[str], str] | None = None,
) -> OverwriteChoice:
    """Ask the operator whether ``path`` should be skipped or replaced.

    Re-prompts until the answer is ``s``/``skip`` or ``r``/``replace``. Raises
    :class:`ValidationError` when input ends before a valid answer.
    """

    ask = input_func or input
    while True:
        try:
            answer = ask(PROMPT.format(path=path)).strip().lower()
        except EOFError as exc:
            raise ValidationError(f"No answer for {path}; use --force to overwrite.") from exc
        if answer in {"s", "skip"}:
            return OverwriteChoice.SKIP
        if answer in {"r", "replace"}:
            return OverwriteChoice.REPLACE


class Materializer:
    """Create files from :class:`WriteRequest` objects."""

    def __init__(self, confirm_overwrite: ConfirmOverwrite | None = None) -> None:
        self._confirm_overwrite = confirm_overwrite or prompt_overwrite

    def materialize(self, requests: Iterable[WriteRequest], *, force: bool = False) -> list[WriteResult]:
        """Write every request in order and return one result per request.

        Existing destinations are replaced without asking when ``force`` is set.
        The first failure raises :class:`WriteError`; later requests are not
        attempted and earlier writes are kept.
        """

        results: list[WriteResult] = []
        for request in requests:
            outcome = self._materialize_one(request, force=force)
            results.append(WriteResult(path=request.destination, outcome=outcome))
        return results

    def ensure_directory(self, directory: Path) -> None:
        """Create ``directory`` and any missing ancestors."""

        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError(f"Error creating directory: {directory}") from exc

    def _materialize_one(self, request: WriteRequest, *, force: bool) -> WriteOutcome:
        destination = request.destination
        self.ensure_directory(destination.parent)

        if destination.exists():
            LOGGER.warning("File already exists: %s", destination)
            if not force and self._confirm_overwrite(destination) is not OverwriteChoice.REPLACE:
                LOGGER.info("Skipping %s", destination)
                return WriteOutcome.SKIPPED
            LOGGER.info("Replacing %s", destination)

        try:
            contents = request.content_producer()
        except OSError as exc:
            raise WriteError(f"Error reading contents for: {destination}") from exc

        try:
            destination.write_bytes(contents)
            if request.executable:
                mode = destination.stat().st_mode
                destination.chmod(mode | _EXECUTABLE_BITS)
        except OSError as exc:
            raise WriteError(f"Error creating file: {destination}") from exc

        LOGGER.debug("Wrote %d bytes to %s", len(contents), destination)
        return WriteOutcome.WRITTEN


def materialize(
    requests: Sequence[WriteRequest],
    force: bool = False,
    *,
    confirm_overwrite: ConfirmOverwrite | None = None,
) -> list[WriteResult]:
    """Functional shortcut for :meth:`Materializer.materialize`."""

    return Materializer(confirm_overwrite).materialize(requests, force=force)
