"""Utility helpers shared by the course configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from .models import AuthorConfig, CourseConfigError, SectionConfig, TrackConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _normalize_tags(value: str | list[object] | None) -> list[str]:
    """Normalize tag definitions into a list of non-empty strings."""
    if isinstance(value, str):
        text = value.strip()
        return [text] if text else []
    if isinstance(value, list | tuple):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text and text not in normalized:
                normalized.append(text)
        return normalized
    return []


def _build_authors(value: object | None) -> list[AuthorConfig]:
    """Build author entries from a name, a mapping, or a list of either."""
    match value:
        case None:
            return []
        case str() | dict():
            entries: list[object] = [value]
        case list() | tuple():
            entries = list(value)
        case _:
            return []
    authors: list[AuthorConfig] = []
    for entry in entries:
        match entry:
            case str() as name if name.strip():
                authors.append(AuthorConfig(name=name.strip()))
            case {"name": name, **rest} if _optional_str(name):
                authors.append(
                    AuthorConfig(
                        name=str(name).strip(),
                        url=_optional_str(rest.get("url")),
                        image=_optional_str(rest.get("image")),
                    )
                )
            case _:
                continue
    return authors


def _pair_items(value: object | None, kind: str) -> list[tuple[str, str, dict]]:
    """Return ``(id, name, extra)`` triples from a list or mapping payload.

    Both ``[{id: mod1, name: Module 1}]`` and ``{mod1: Module 1}`` layouts are
    accepted; mapping values may themselves be mappings carrying ``name``.
    """
    items: list[tuple[str, str, dict]] = []
    match value:
        case None:
            return items
        case dict():
            for key, payload in value.items():
                if isinstance(payload, dict):
                    name = payload.get("name") or key
                    items.append((str(key), str(name), payload))
                else:
                    items.append((str(key), str(payload or key), {}))
        case list():
            for entry in value:
                match entry:
                    case {"id": ident, **rest} if _optional_str(ident):
                        name = rest.get("name") or ident
                        items.append((str(ident).strip(), str(name), rest))
                    case [ident, name]:
                        items.append((str(ident), str(name), {}))
                    case _:
                        msg = f"Each {kind} entry requires an 'id'."
                        raise CourseConfigError(msg)
        case _:
            msg = f"The '{kind}s' block must be a list or a mapping."
            raise CourseConfigError(msg)
    return items


def _build_sections(value: object | None) -> list[SectionConfig]:
    """Build ordered section configs, rejecting duplicate identifiers."""
    sections: list[SectionConfig] = []
    seen: set[str] = set()
    for ident, name, extra in _pair_items(value, "section"):
        if ident in seen:
            msg = f"Section '{ident}' is declared more than once."
            raise CourseConfigError(msg)
        seen.add(ident)
        pages = tuple(str(page).strip() for page in extra.get("pages") or [] if page)
        sections.append(SectionConfig(id=ident, name=name, pages=pages))
    return sections


def _build_tracks(value: object | None) -> list[TrackConfig]:
    """Build track configs in declared order."""
    return [
        TrackConfig(id=ident, name=name)
        for ident, name, _extra in _pair_items(value, "track")
    ]


def _resolve_path(value: object | None, base_dir: Path, default: Path) -> Path:
    """Resolve ``value`` relative to ``base_dir``, falling back to ``default``."""
    text = _optional_str(value)
    path = Path(text) if text else default
    if path.is_absolute():
        return path
    return base_dir / path


def _string_list(value: object | None) -> list[str]:
    """Return a list of stripped strings from a scalar or list payload."""
    if isinstance(value, str):
        return [value.strip()] if value.strip() else []
    if isinstance(value, list):
        return [text for item in value if (text := _optional_str(item))]
    return []


def _mapping(value: object | None, key: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, raising for other non-empty types."""
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"The '{key}' block must be a mapping."
        raise CourseConfigError(msg)
    return value


__all__ = [
    "_build_authors",
    "_build_sections",
    "_build_tracks",
    "_mapping",
    "_normalize_tags",
    "_optional_str",
    "_pair_items",
    "_resolve_path",
    "_string_list",
]
