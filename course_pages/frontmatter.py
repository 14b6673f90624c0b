r"""Parse page front-matter into immutable page records.

Course content comes in two shapes: Pluto notebooks (``.jl``) whose metadata
lives in a leading ``#>`` comment block holding TOML, and markdown pages
(``.md``) with a ``---``-fenced YAML header. Both are normalised into a
:class:`Page` whose optional fields default to ``None`` so downstream
navigation code never has to guess at missing keys.

Example
-------
>>> from course_pages.frontmatter import parse_frontmatter
>>> meta, body = parse_frontmatter("---\ntitle: Debugging\n---\nBody", ".md")
>>> meta["title"], body
('Debugging', 'Body')
"""

from __future__ import annotations

import dataclasses as dc
import re
import tomllib
import typing as typ
from pathlib import Path, PurePosixPath

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import PLUTO_FRONTMATTER_PREFIX
from .config.helpers import _build_authors, _normalize_tags, _optional_str

if typ.TYPE_CHECKING:
    from .config import AuthorConfig

YAML_FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n(?:---|\.\.\.)[ \t]*(?:\r?\n|\Z)", re.DOTALL
)


class FrontmatterError(ValueError):
    """Raised when a page's front-matter block cannot be parsed."""


@dc.dataclass(slots=True, frozen=True)
class Page:
    """A content page and its front-matter, immutable once loaded.

    Attributes
    ----------
    identifier : str
        Relative POSIX path of the source file; unique within a build.
    url : str
        Output path relative to the site root (``mod1/intro.html``). Derived
        from ``identifier`` when left empty.
    body : str
        Source text following the front-matter block.
    """

    identifier: str
    title: str | None = None
    description: str | None = None
    tags: tuple[str, ...] = ()
    date: str | None = None
    chapter: str | None = None
    section: str | None = None
    exercise_number: str | None = None
    indepth_number: str | None = None
    youtube_id: str | None = None
    order: str | None = None
    layout: str | None = None
    authors: tuple[AuthorConfig, ...] = ()
    url: str = ""
    body: str = ""

    @property
    def stem(self) -> str:
        """Return the source filename without its extension."""
        return PurePosixPath(self.identifier).stem

    @property
    def suffix(self) -> str:
        """Return the lowercase source file extension (``.jl``/``.md``)."""
        return PurePosixPath(self.identifier).suffix.lower()

    @property
    def output_path(self) -> str:
        """Return the site-relative output path for this page."""
        return self.url or output_url(self.identifier)


def output_url(identifier: str) -> str:
    """Return the site-relative HTML path for a source identifier."""
    path = PurePosixPath(identifier)
    if path.suffix:
        return path.with_suffix(".html").as_posix()
    return f"{path.as_posix()}.html"


def parse_frontmatter(
    text: str, suffix: str, *, source: str = "<string>"
) -> tuple[dict[str, typ.Any], str]:
    """Split ``text`` into its front-matter mapping and remaining body.

    Parameters
    ----------
    text : str
        Full source file contents.
    suffix : str
        File extension selecting the front-matter dialect (``.jl`` for Pluto
        TOML blocks, anything else for YAML headers).
    source : str, optional
        Name used in error messages.

    Returns
    -------
    tuple[dict[str, Any], str]
        The front-matter mapping (empty when absent) and the body text.

    Raises
    ------
    FrontmatterError
        If a front-matter block exists but is not valid TOML/YAML or does not
        describe a mapping.
    """
    if suffix.lower() == ".jl":
        return _parse_pluto_frontmatter(text, source), text
    return _parse_yaml_frontmatter(text, source)


def _parse_pluto_frontmatter(text: str, source: str) -> dict[str, typ.Any]:
    """Return the ``[frontmatter]`` table from a notebook's ``#>`` block."""
    block: list[str] = []
    for line in text.splitlines():
        if line.startswith(PLUTO_FRONTMATTER_PREFIX):
            content = line[len(PLUTO_FRONTMATTER_PREFIX) :]
            block.append(content[1:] if content.startswith(" ") else content)
        elif block:
            break
    if not block:
        return {}
    try:
        data = tomllib.loads("\n".join(block))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid notebook front-matter in '{source}': {exc}"
        raise FrontmatterError(msg) from exc
    frontmatter = data.get("frontmatter", {})
    if not isinstance(frontmatter, dict):
        msg = f"Notebook front-matter in '{source}' must be a table."
        raise FrontmatterError(msg)
    return frontmatter


def _parse_yaml_frontmatter(text: str, source: str) -> tuple[dict[str, typ.Any], str]:
    """Return the YAML header mapping and the markdown body."""
    match = YAML_FRONTMATTER_PATTERN.match(text)
    if not match:
        return {}, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group(1)) or {}
    except YAMLError as exc:
        msg = f"Invalid YAML front-matter in '{source}': {exc}"
        raise FrontmatterError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"YAML front-matter in '{source}' must be a mapping."
        raise FrontmatterError(msg)
    return dict(loaded), text[match.end() :]


def build_page(
    identifier: str, metadata: typ.Mapping[str, typ.Any], body: str = ""
) -> Page:
    """Build a :class:`Page` from a raw front-matter mapping.

    Scalar values are normalised to stripped strings (numbers included), so
    ``exercise_number = 3`` and ``exercise_number = "3"`` behave the same.
    Blank values collapse to ``None``.
    """
    authors = _build_authors(metadata.get("author") or metadata.get("authors"))
    return Page(
        identifier=identifier,
        title=_optional_str(metadata.get("title")),
        description=_optional_str(metadata.get("description")),
        tags=tuple(_normalize_tags(metadata.get("tags"))),
        date=_optional_str(metadata.get("date")),
        chapter=_optional_str(metadata.get("chapter")),
        section=_optional_str(metadata.get("section")),
        exercise_number=_optional_str(metadata.get("exercise_number")),
        indepth_number=_optional_str(metadata.get("indepth_number")),
        youtube_id=_optional_str(metadata.get("youtube_id")),
        order=_optional_str(metadata.get("order")),
        layout=_optional_str(metadata.get("layout")),
        authors=tuple(authors),
        url=output_url(identifier),
        body=body,
    )


def load_page(path: Path, content_dir: Path) -> Page:
    """Read ``path`` and return its :class:`Page`, keyed relative to ``content_dir``."""
    identifier = path.relative_to(content_dir).as_posix()
    text = path.read_text(encoding="utf-8")
    metadata, body = parse_frontmatter(text, path.suffix, source=identifier)
    return build_page(identifier, metadata, body)


__all__ = [
    "FrontmatterError",
    "Page",
    "build_page",
    "load_page",
    "output_url",
    "parse_frontmatter",
]
