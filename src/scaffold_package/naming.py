"""String normalisation helpers for package and command names."""

from __future__ import annotations

import re
import unicodedata
from typing import Iterable

__all__ = ["DEFAULT_COMMAND_NAME", "command_name", "slugify"]


DEFAULT_COMMAND_NAME = "hello-world"

_SEPARATORS = re.compile(r"[\s\-_]+")


def slugify(value: str | Iterable[str], *, separator: str = "-") -> str:
    """Create a lowercase ASCII slug from ``value``.

    Parameters
    ----------
    value:
        The text to normalise. When an iterable of strings is provided the values
        are joined with spaces before slugification.
    separator:
        The character used to join individual words.
    """

    if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
        value = " ".join(str(part) for part in value)

    text = unicodedata.normalize("NFKD", str(value))
    text = text.encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^\w\- ]", "", text)
    text = text.strip().lower()

    if not text:
        return ""

    collapsed = _SEPARATORS.sub(separator, text)
    collapsed = re.sub(rf"{re.escape(separator)}+", separator, collapsed)
    return collapsed.strip(separator)


def command_name(package_name: str) -> str:
    """Return the WP-CLI command registered by a package called ``package_name``.

    Composer names look like ``vendor/package``; only the package part is
    used. An empty name yields :data:`DEFAULT_COMMAND_NAME`.
    """

    _, _, package = package_name.strip().rpartition("/")
    return slugify(package) or DEFAULT_COMMAND_NAME
