"""Placeholder rendering for the bundled package templates."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Mapping, MutableMapping

from .errors import ScaffoldError, WriteError
from .naming import command_name

__all__ = [
    "TEMPLATE_DIR",
    "TemplateRenderer",
    "TemplateRenderingError",
]


TEMPLATE_DIR = Path(__file__).resolve().parent / "resources" / "package" / "templates"

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*(?P<expression>[^{}]+?)\s*}}")


class TemplateRenderingError(ScaffoldError):
    """Raised when the renderer cannot evaluate a placeholder."""


def _apply_filter(value: Any, filter_name: str, filters: Mapping[str, Callable[[Any], Any]]) -> Any:
    try:
        filter_func = filters[filter_name]
    except KeyError as exc:
        raise TemplateRenderingError(f"unknown filter '{filter_name}'") from exc

    return filter_func(value)


@dataclass(slots=True)
class TemplateRenderer:
    """Render ``{{ placeholder|filters }}`` templates from ``template_dir``."""

    template_dir: Path = TEMPLATE_DIR
    filters: MutableMapping[str, Callable[[Any], Any]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.template_dir = Path(self.template_dir)
        if not self.filters:
            self.filters.update(
                {
                    "json": lambda value: json.dumps(value, ensure_ascii=False),
                    "command": lambda value: command_name(str(value)),
                }
            )

    def render_string(self, template: str, context: Mapping[str, Any]) -> str:
        """Render ``template`` using ``context``.

        Every placeholder must have a value in ``context``; a missing value or
        an unknown filter raises :class:`TemplateRenderingError`.
        """

        def substitute(match: re.Match[str]) -> str:
            expression = match.group("expression")
            parts = [part.strip() for part in expression.split("|") if part.strip()]
            if not parts:
                return match.group(0)

            key, *filters = parts
            if key not in context:
                raise TemplateRenderingError(f"missing value for '{key}'")

            value = context[key]
            for filter_name in filters:
                value = _apply_filter(value, filter_name, self.filters)

            return str(value)

        return _PLACEHOLDER_PATTERN.sub(substitute, template)

    def render_template(self, name: str, context: Mapping[str, Any]) -> bytes:
        """Render the template file called ``name`` and return UTF-8 bytes."""

        template_path = self.template_dir / name
        try:
            text = template_path.read_text(encoding="utf-8")
        except OSError as exc:
            raise WriteError(f"Error reading template: {template_path}") from exc

        return self.render_string(text, context).encode("utf-8")
