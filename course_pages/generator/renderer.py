"""Render course page bodies: markdown, notebook cells and highlighted code.

Every highlighted block is a ``<div class="codehilite">`` carrying a
``data-language`` attribute, whether it came from a fenced block in markdown
or from a notebook code cell, so the stylesheet can label blocks uniformly.
"""

from __future__ import annotations

import re
import typing as typ
from html import escape

from markdown import Markdown
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from course_pages.notebook import parse_notebook

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown.extensions import Extension

    from course_pages.frontmatter import Page
    from course_pages.notebook import NotebookCell
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

FENCED_BLOCK_PATTERN = re.compile(
    r"^(?P<fence>`{3,}|~{3,})[ \t]*(?P<lang>[\w+#.-]*)[^\n]*\n.*?^(?P=fence)[ \t]*$",
    re.MULTILINE | re.DOTALL,
)
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')
MARKDOWN_EXTENSIONS = (
    "fenced_code",
    "codehilite",
    "tables",
    "sane_lists",
    "admonition",
)
NOTEBOOK_LANGUAGE = "julia"
FALLBACK_LANGUAGE = "text"


def fenced_languages(text: str) -> list[str]:
    """Return the language of each fenced code block in ``text``, in order.

    >>> fenced_languages("```julia\\nx = 1\\n```\\n\\n~~~\\nplain\\n~~~\\n")
    ['julia', 'text']
    """
    return [
        match.group("lang") or FALLBACK_LANGUAGE
        for match in FENCED_BLOCK_PATTERN.finditer(text)
    ]


def label_code_blocks(html: str, languages: cabc.Sequence[str]) -> str:
    """Add ``data-language`` to the first ``len(languages)`` highlighted blocks."""
    if not languages:
        return html
    labels = iter(languages)

    def _open_tag(_match: re.Match[str]) -> str:
        language = escape(next(labels), quote=True)
        return f'<div class="codehilite" data-language="{language}">'

    return CODEHILITE_OPEN_TAG.sub(_open_tag, html, count=len(languages))


class HtmlContentRenderer:
    """Render page bodies with one Pygments style and optional link rewriting."""

    def __init__(
        self, pygments_style: str = "friendly", link_extension: Extension | None = None
    ) -> None:
        """Initialize the renderer.

        Parameters
        ----------
        pygments_style : str, optional
            Pygments style used for every highlighted block.
        link_extension : Extension, optional
            Markdown extension rewriting links between course pages; ``None``
            leaves links as written.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._link_extension = link_extension

    @property
    def stylesheet(self) -> str:
        """Return the CSS rules for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render_page(self, page: Page) -> str:
        """Render a notebook page cell by cell, any other page as markdown."""
        if page.suffix == ".jl":
            return self.notebook(parse_notebook(page.body))
        return self.markdown(page.body)

    def notebook(self, cells: cabc.Iterable[NotebookCell]) -> str:
        """Render notebook cells into a sequence of ``notebook-cell`` blocks.

        Markdown cells render as markdown and html cells pass through. Code
        cells are shown as highlighted Julia unless the notebook folds them.
        Disabled and blank cells are skipped.
        """
        blocks: list[str] = []
        for cell in cells:
            if cell.disabled or not cell.source.strip():
                continue
            if cell.kind == "markdown":
                html = self.markdown(cell.source)
            elif cell.kind == "html":
                html = cell.source
            elif cell.folded:
                continue
            else:
                html = self.code_block(cell.source, NOTEBOOK_LANGUAGE)
            blocks.append(
                f'<div class="notebook-cell notebook-cell--{cell.kind}">{html}</div>'
            )
        return "\n".join(blocks)

    def markdown(self, text: str) -> str:
        """Convert markdown to HTML, labelling fenced code with its language."""
        if not text.strip():
            return ""
        html = self._markdown_converter().convert(text)
        return label_code_blocks(html, fenced_languages(text))

    def code_block(self, code: str, language: str | None = None) -> str:
        """Highlight ``code``, falling back to plain text for unknown lexers."""
        lang = language or FALLBACK_LANGUAGE
        try:
            lexer = get_lexer_by_name(lang)
        except ClassNotFound:
            lexer = get_lexer_by_name(FALLBACK_LANGUAGE)
        return label_code_blocks(highlight(code, lexer, self._formatter), [lang])

    def _markdown_converter(self) -> Markdown:
        extensions: list[Extension | str] = list(MARKDOWN_EXTENSIONS)
        if self._link_extension:
            extensions.append(self._link_extension)
        return Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )


__all__ = [
    "NOTEBOOK_LANGUAGE",
    "HtmlContentRenderer",
    "fenced_languages",
    "label_code_blocks",
]
