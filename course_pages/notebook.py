r"""Split Pluto notebook sources into ordered cells.

Pluto stores a notebook as a plain Julia file: each cell starts with a
``# ╔═╡ <uuid>`` marker, optional ``# ╠═╡ key = value`` metadata lines follow
the marker, and a trailing ``# ╔═╡ Cell order:`` block lists the cells in
display order (``# ╠═`` for shown code, ``# ╟─`` for folded code). The two
package-environment cells are not course content and are dropped.

Example
-------
>>> from course_pages.notebook import parse_notebook
>>> text = (
...     "# ╔═╡ 0be73b29-7780-4be0-bf07-9b62c99fc4b4\n"
...     'md"# Git & Github"\n'
... )
>>> [(cell.kind, cell.source) for cell in parse_notebook(text)]
[('markdown', '# Git & Github')]
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

CELL_MARKER_PATTERN = re.compile(
    r"^# ╔═╡ ([0-9a-f]{8}-[0-9a-f-]{27})[ \t]*$", re.MULTILINE
)
CELL_ORDER_MARKER = "# ╔═╡ Cell order:"
CELL_ORDER_PATTERN = re.compile(r"^# (╠═|╟─)([0-9a-f]{8}-[0-9a-f-]{27})", re.MULTILINE)
CELL_METADATA_PREFIX = "# ╠═╡ "
DISABLED_BLOCK_PATTERN = re.compile(r"^#=╠═╡\n?|\n?╠═╡ =#$")
STRING_MACRO_PATTERN = re.compile(r'\A(md|html)(?:"""(.*)"""|"(.*)")\Z', re.DOTALL)
ENVIRONMENT_CELLS = frozenset(
    {
        "00000000-0000-0000-0000-000000000001",
        "00000000-0000-0000-0000-000000000002",
    }
)

CellKind = typ.Literal["markdown", "html", "code"]


@dc.dataclass(slots=True, frozen=True)
class NotebookCell:
    """One notebook cell.

    Attributes
    ----------
    cell_id : str
        Pluto cell UUID.
    kind : str
        ``"markdown"`` for ``md`` string cells, ``"html"`` for ``html``
        string cells, ``"code"`` otherwise.
    source : str
        Cell body; for markdown/html cells the string literal contents.
    folded : bool
        True when the notebook hides the cell's code.
    disabled : bool
        True when the cell is disabled in the notebook.
    """

    cell_id: str
    kind: CellKind
    source: str
    folded: bool = False
    disabled: bool = False


def _classify(source: str) -> tuple[CellKind, str]:
    """Return the cell kind and unwrapped body for a cell's source."""
    match = STRING_MACRO_PATTERN.match(source)
    if match is None:
        return "code", source
    macro, triple, single = match.groups()
    body = triple if triple is not None else single
    kind: CellKind = "markdown" if macro == "md" else "html"
    return kind, body.strip("\n")


def _split_metadata(chunk: str) -> tuple[dict[str, str], str]:
    """Strip ``# ╠═╡`` metadata lines and return them with the remaining code."""
    metadata: dict[str, str] = {}
    lines = chunk.strip("\n").splitlines()
    while lines and lines[0].startswith(CELL_METADATA_PREFIX):
        key, _, value = lines.pop(0)[len(CELL_METADATA_PREFIX) :].partition("=")
        metadata[key.strip()] = value.strip()
    body = "\n".join(lines).strip()
    return metadata, DISABLED_BLOCK_PATTERN.sub("", body).strip()


def _cell_order(text: str) -> list[tuple[str, bool]]:
    """Return ``(cell_id, folded)`` pairs from the trailing cell-order block."""
    _, marker, tail = text.partition(CELL_ORDER_MARKER)
    if not marker:
        return []
    return [
        (cell_id, glyph == "╟─") for glyph, cell_id in CELL_ORDER_PATTERN.findall(tail)
    ]


def parse_notebook(text: str) -> list[NotebookCell]:
    """Split a Pluto notebook into content cells in display order.

    Parameters
    ----------
    text : str
        Full notebook source.

    Returns
    -------
    list[NotebookCell]
        Cells ordered by the notebook's cell-order block (file order when
        the block is missing), excluding package-environment cells. Returns
        an empty list when ``text`` contains no cell markers.
    """
    body_text = text.split(CELL_ORDER_MARKER, 1)[0]
    markers = list(CELL_MARKER_PATTERN.finditer(body_text))
    if not markers:
        return []

    cells: dict[str, NotebookCell] = {}
    for idx, match in enumerate(markers):
        cell_id = match.group(1)
        if cell_id in ENVIRONMENT_CELLS:
            continue
        end = markers[idx + 1].start() if idx + 1 < len(markers) else len(body_text)
        metadata, source = _split_metadata(body_text[match.end() : end])
        kind, source = _classify(source)
        cells[cell_id] = NotebookCell(
            cell_id=cell_id,
            kind=kind,
            source=source,
            disabled=metadata.get("disabled") == "true",
        )

    order = _cell_order(text)
    if not order:
        return list(cells.values())

    ordered: list[NotebookCell] = []
    for cell_id, folded in order:
        cell = cells.pop(cell_id, None)
        if cell is not None:
            ordered.append(dc.replace(cell, folded=folded))
    ordered.extend(cells.values())
    return ordered


__all__ = ["CellKind", "NotebookCell", "parse_notebook"]
