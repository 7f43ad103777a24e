"""Template context and runtime settings shared by the commands and CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as SchemaValidationError

from .errors import ValidationError

__all__ = [
    "DEFAULT_LICENSE",
    "PACKAGE_ROOT",
    "WP_CLI_ROOT_ENV",
    "PackageMetadata",
    "ScaffoldSettings",
]


RESOURCES = Path(__file__).resolve().parent / "resources"
PACKAGE_ROOT = RESOURCES / "package"
WP_CLI_ROOT_ENV = "WP_CLI_ROOT"

DEFAULT_LICENSE = "MIT"


class PackageMetadata(BaseModel):
    """Values written into ``composer.json`` and the other package templates."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    name: str = Field("", description="Composer package name, e.g. ``vendor/hello-world``.")
    description: str = Field("", description="Human-readable description for the package.")
    license: str = Field(DEFAULT_LICENSE, min_length=1, description="License identifier for the package.")

    @classmethod
    def from_options(
        cls,
        *,
        name: str | None = None,
        description: str | None = None,
        license: str | None = None,
    ) -> "PackageMetadata":
        """Merge user supplied overrides onto the defaults.

        ``None`` means "not supplied"; an explicitly empty license is rejected.
        """

        overrides = {
            key: value
            for key, value in {"name": name, "description": description, "license": license}.items()
            if value is not None
        }
        try:
            return cls(**overrides)
        except SchemaValidationError as exc:
            fields = ", ".join(str(error["loc"][0]) for error in exc.errors())
            raise ValidationError(f"Invalid package metadata: {fields}.") from exc

    def context(self) -> Mapping[str, str]:
        """Return a dictionary compatible with the templating helpers."""

        return {
            "name": self.name,
            "description": self.description,
            "license": self.license,
        }


@dataclass(slots=True)
class ScaffoldSettings:
    """Locations of the files copied into a package's test harness.

    Attributes
    ----------
    wp_cli_root:
        Root of the WP-CLI installation providing the Behat bootstrap and step
        definitions. ``None`` when no installation was configured.
    package_root:
        Root of this project's own resources (CI config, install script and
        the smoke-test feature).
    """

    wp_cli_root: Path | None = None
    package_root: Path = PACKAGE_ROOT

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        wp_cli_root: str | Path | None = None,
    ) -> "ScaffoldSettings":
        """Resolve the WP-CLI root from an explicit value, then the environment."""

        environ = os.environ if environ is None else environ
        root = wp_cli_root or environ.get(WP_CLI_ROOT_ENV)
        return cls(wp_cli_root=Path(root).expanduser() if root else None)

    def require_wp_cli_root(self) -> Path:
        """Return the WP-CLI root, raising :class:`ValidationError` when unusable."""

        if self.wp_cli_root is None:
            raise ValidationError(
                f"No WP-CLI installation configured. Use --wp-cli-root or set {WP_CLI_ROOT_ENV}."
            )
        if not (self.wp_cli_root / "features" / "bootstrap").is_dir():
            raise ValidationError(f"Invalid WP-CLI installation: {self.wp_cli_root}")
        return self.wp_cli_root
