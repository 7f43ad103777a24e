"""Generate the files for a new WP-CLI command package."""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Callable, Mapping

from .config import PackageMetadata, ScaffoldSettings
from .errors import ValidationError
from .materialize import Materializer, ScaffoldReport, WriteRequest
from .package_tests import scaffold_package_tests
from .template import TemplateRenderer

__all__ = ["PACKAGE_FILES", "package_requests", "scaffold_package"]


# destination relative to the package directory -> template name
PACKAGE_FILES: tuple[tuple[str, str], ...] = (
    (".gitignore", "gitignore.mustache"),
    (".editorconfig", "editorconfig.mustache"),
    ("wp-cli.yml", "wp-cli.mustache"),
    ("command.php", "command.mustache"),
    ("composer.json", "composer.mustache"),
)


def package_requests(
    package_dir: Path,
    context: Mapping[str, str],
    renderer: TemplateRenderer,
) -> list[WriteRequest]:
    return [
        WriteRequest(
            destination=package_dir / relative_path,
            content_producer=partial(renderer.render_template, template, context),
        )
        for relative_path, template in PACKAGE_FILES
    ]


def scaffold_package(
    package_dir: str | Path,
    *,
    name: str | None = None,
    description: str | None = None,
    license: str | None = None,
    skip_tests: bool = False,
    force: bool = False,
    renderer: TemplateRenderer | None = None,
    settings: ScaffoldSettings | None = None,
    materializer: Materializer | None = None,
    announce: Callable[[ScaffoldReport], None] | None = None,
) -> ScaffoldReport:
    """Render the package templates into ``package_dir``.

    ``announce`` receives the report for the package files before the test
    harness is generated. Unless ``skip_tests`` is set the Behat harness is
    generated afterwards with the same ``force`` flag and its report is
    attached as ``tests``.
    """

    if package_dir is None or not str(package_dir):
        raise ValidationError("A package directory is required.")

    metadata = PackageMetadata.from_options(name=name, description=description, license=license)
    if not skip_tests:
        settings = settings or ScaffoldSettings.from_env()
        settings.require_wp_cli_root()
    renderer = renderer or TemplateRenderer()
    materializer = materializer or Materializer()

    package_path = Path(package_dir).expanduser()
    requests = package_requests(package_path, metadata.context(), renderer)
    results = materializer.materialize(requests, force=force)
    if announce is not None:
        announce(ScaffoldReport(results=results))

    tests_report = None
    if not skip_tests:
        tests_report = scaffold_package_tests(
            package_path,
            force=force,
            settings=settings,
            materializer=materializer,
        )

    return ScaffoldReport(results=results, tests=tests_report)
