"""Cyclopts CLI entrypoint for generating the course website.

The ``course-pages`` console script defined here renders every notebook and
markdown page under the configured content directory into static HTML, writes
the course index page, and can print the sidebar outline computed for a
single page. Typical usage involves running ``course-pages generate`` locally
or in CI before publishing the output directory.

Examples
--------
Generate the site for the default configuration:

>>> from course_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a preview folder under a different root URL:

>>> from course_pages.cli import app
>>> app(
...     ["generate", "--output-dir", "preview", "--root-url", "/previews/PR12"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_PATH
from .config import load_course_config
from .content import collect_sections, discover_pages
from .generator import CourseSiteGenerator
from .index_page import CourseIndexBuilder
from .navigation import build_sidebar

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_PATH)

app = App(
    name="course-pages",
    config=cyclopts.config.Env("COURSE_PAGES_", command=False),  # type: ignore[unknown-argument]
)


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Render the course pages and index into a static site.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to course config", env_var="COURSE_PAGES_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="COURSE_PAGES_OUTPUT_DIR"),
    ] = None,
    root_url: typ.Annotated[
        str | None,
        Parameter(help="Override the root URL prefix", env_var="COURSE_PAGES_ROOT_URL"),
    ] = None,
) -> None:
    """Generate the course site for the requested configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``course.yaml`` configuration file (overridable via
        ``COURSE_PAGES_CONFIG``).
    output_dir : Path or None, optional
        Override the output directory; the index page moves along with it.
    root_url : str or None, optional
        Override the URL prefix used for links and stylesheets, for example
        when publishing a preview under a sub-path.

    Returns
    -------
    None
        Writes the site and prints every written path, index page last.
    """
    course = load_course_config(config)
    if root_url is not None:
        course = dc.replace(course, root_url=root_url.rstrip("/"))
    if output_dir is not None:
        course = dc.replace(
            course, output_dir=output_dir, index_output=output_dir / "index.html"
        )

    generator = CourseSiteGenerator(course)
    written = generator.run()
    written.append(CourseIndexBuilder(course, generator.pages).run())
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the sidebar outline computed for one page.")
def sidebar(
    page: typ.Annotated[str, Parameter(help="Page identifier (relative source path)")],
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to course config", env_var="COURSE_PAGES_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Print each section and its entries, marking the active page with ``*``.

    Raises
    ------
    KeyError
        If ``page`` does not name a page under the content directory.
    """
    course = load_course_config(config)
    pages = discover_pages(course.content_dir)
    known = {entry.identifier for entry in pages}
    if page not in known:
        available = ", ".join(sorted(known))
        msg = f"Unknown page '{page}'. Known pages: {available}"
        raise KeyError(msg)
    lookup = collect_sections(course.sections, pages)
    for section in build_sidebar(
        course.section_pairs, lookup, page, root_url=course.root_url
    ):
        print(section.name)
        for entry in section.entries:
            marker = "*" if entry.active else " "
            label = f"{entry.display_label} " if entry.display_label else ""
            print(f"  {marker} {label}{entry.title} [{entry.category}] {entry.href}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `course-pages` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
