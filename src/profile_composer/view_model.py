from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from profile_composer.config import ThemeConfig
from profile_composer.core import Education, ProfileHeader
from profile_composer.grouping import SkillGroup
from profile_composer.pages import NavItem


@dataclass(frozen=True)
class MetricTile:
    label: str
    value: str
    icon_tag: str
    tone: str

    def as_json(self) -> dict:
        return {"label": self.label, "value": self.value, "icon": self.icon_tag, "tone": self.tone}


@dataclass(frozen=True)
class EntryView:
    """
    One card in an ordered entry list (experience, project or timeline entry).

    Empty ``achievements``/``technologies``/``metrics`` mean the section is not
    rendered at all.
    """

    kind: str
    title: str
    description: str
    icon_tag: Optional[str]
    subtitle: Optional[str]
    meta: Optional[str]
    metrics: Tuple[MetricTile, ...]
    achievements: Tuple[str, ...]
    technologies: Tuple[str, ...]
    divider_after: bool

    def as_json(self) -> dict:
        return {
            "kind": self.kind,
            "title": self.title,
            "subtitle": self.subtitle,
            "meta": self.meta,
            "icon": self.icon_tag,
            "description": self.description,
            "metrics": [m.as_json() for m in self.metrics],
            "achievements": list(self.achievements),
            "technologies": list(self.technologies),
            "divider_after": self.divider_after,
        }


@dataclass(frozen=True)
class SpotlightView:
    title: str
    description: str
    metrics: Tuple[MetricTile, ...]

    def as_json(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "metrics": [m.as_json() for m in self.metrics],
        }


def _header_json(header: ProfileHeader) -> dict:
    return {
        "name": header.name,
        "initials": header.initials,
        "headline": header.headline,
        "organization": header.organization,
        "tagline": header.tagline,
        "contacts": [{"label": c.label, "icon": c.icon_tag, "url": c.url} for c in header.contacts],
    }


def _education_json(edu: Education) -> dict:
    return {"degree": edu.degree, "institution": edu.institution, "location": edu.location, "year": edu.year}


@dataclass(frozen=True)
class PageView:
    """
    Fully resolved view-model of one page.

    ``groups``, ``entries`` and ``metrics`` are always present (possibly empty);
    the presentation layer renders them in the given order and never re-sorts.
    """

    page: str
    title: str
    subtitle: str
    theme: ThemeConfig
    navigation: Tuple[NavItem, ...]
    groups: Tuple[SkillGroup, ...] = ()
    entries: Tuple[EntryView, ...] = ()
    metrics: Tuple[MetricTile, ...] = ()
    header: Optional[ProfileHeader] = None
    summary: Optional[str] = None
    education: Optional[Education] = None
    spotlight: Optional[SpotlightView] = None

    def as_json(self) -> dict:
        out = {
            "page": self.page,
            "title": self.title,
            "subtitle": self.subtitle,
            "theme": self.theme.as_json(),
            "navigation": [n.as_json() for n in self.navigation],
            "groups": [g.as_json() for g in self.groups],
            "entries": [e.as_json() for e in self.entries],
            "metrics": [m.as_json() for m in self.metrics],
        }
        if self.header is not None:
            out["header"] = _header_json(self.header)
        if self.summary is not None:
            out["summary"] = self.summary
        if self.education is not None:
            out["education"] = _education_json(self.education)
        if self.spotlight is not None:
            out["spotlight"] = self.spotlight.as_json()
        return out
