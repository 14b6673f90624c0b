"""Typed dataclasses describing course site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class CourseConfigError(ValueError):
    """Raised when the course configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class AuthorConfig:
    """Course or page author shown in page chrome."""

    name: str
    url: str | None = None
    image: str | None = None


@dc.dataclass(slots=True, frozen=True)
class TrackConfig:
    """Thematic track that cuts across sections (matched against page tags)."""

    id: str
    name: str


@dc.dataclass(slots=True, frozen=True)
class SectionConfig:
    """A sidebar section and the optional explicit order of its pages."""

    id: str
    name: str
    pages: tuple[str, ...] = ()


@dc.dataclass(slots=True)
class CourseConfig:
    """Course-wide metadata and build settings sourced from YAML config."""

    name: str
    sections: list[SectionConfig]
    subtitle: str | None = None
    authors: list[AuthorConfig] = dc.field(default_factory=list)
    institution: str | None = None
    tracks: list[TrackConfig] = dc.field(default_factory=list)
    root_url: str = ""
    content_dir: Path = Path("src")
    output_dir: Path = Path("_site")
    index_output: Path = Path("_site/index.html")
    pygments_style: str = "friendly"
    stylesheets: list[str] = dc.field(default_factory=list)
    static_dirs: list[Path] = dc.field(default_factory=list)
    footer_note: str = ""
    language: str = "en"

    @property
    def section_pairs(self) -> list[tuple[str, str]]:
        """Return ``(id, name)`` tuples in declared course order."""
        return [(section.id, section.name) for section in self.sections]

    def get_section(self, section_id: str) -> SectionConfig:
        """Return the section declared under ``section_id``."""
        for section in self.sections:
            if section.id == section_id:
                return section
        known = ", ".join(section.id for section in self.sections)
        msg = f"Unknown section '{section_id}'. Known sections: {known}"
        raise KeyError(msg)


__all__ = [
    "AuthorConfig",
    "CourseConfig",
    "CourseConfigError",
    "SectionConfig",
    "TrackConfig",
]
