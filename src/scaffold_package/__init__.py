"""Scaffolding for WP-CLI command packages.

The package renders the boilerplate files of a new WP-CLI package from small
placeholder templates and copies the Behat integration-test harness into it,
asking before any existing file is replaced. Everything is usable
programmatically as well as through the ``scaffold`` command line interface.
"""

from __future__ import annotations

from .config import PackageMetadata, ScaffoldSettings
from .errors import ScaffoldError, ValidationError, WriteError
from .materialize import (
    Materializer,
    OverwriteChoice,
    ScaffoldReport,
    WriteOutcome,
    WriteRequest,
    WriteResult,
    materialize,
)
from .package import scaffold_package
from .package_tests import CopySpec, build_copy_specs, scaffold_package_tests
from .template import TemplateRenderer, TemplateRenderingError

__all__ = [
    "CopySpec",
    "Materializer",
    "OverwriteChoice",
    "PackageMetadata",
    "ScaffoldError",
    "ScaffoldReport",
    "ScaffoldSettings",
    "TemplateRenderer",
    "TemplateRenderingError",
    "ValidationError",
    "WriteError",
    "WriteOutcome",
    "WriteRequest",
    "WriteResult",
    "build_copy_specs",
    "materialize",
    "scaffold_package",
    "scaffold_package_tests",
]

__version__ = "0.1.0"
