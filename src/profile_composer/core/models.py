from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Literal, Optional, Tuple

from profile_composer.core.errors import ValidationError


SkillCategory = Literal["Frontend", "Backend", "Cloud", "Data"]

# Closed set; taxonomy.py decides order, icons and labels.
SKILL_CATEGORIES: Tuple[str, ...] = ("Frontend", "Backend", "Cloud", "Data")


def _require_text(record: str, name: str, value: object) -> str:
    if not isinstance(value, str):
        raise ValidationError(record, name, "required field missing", context=f"got {value!r}")
    if not value.strip():
        raise ValidationError(record, name, "must not be blank")
    return value


def _as_text_tuple(record: str, name: str, values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if values is None:
        raise ValidationError(record, name, "must be a sequence (use an empty one for none)")
    if isinstance(values, str):
        raise ValidationError(record, name, "expected a sequence of strings, got a single string")
    out = tuple(values)
    for item in out:
        _require_text(record, name, item)
    return out


def _unique_in_order(values: Iterable[str]) -> Tuple[str, ...]:
    seen = set()
    out = []
    for v in values:
        if v in seen:
            continue
        seen.add(v)
        out.append(v)
    return tuple(out)


@dataclass(frozen=True)
class Skill:
    """A named skill in one of the closed skill categories."""

    name: str
    category: SkillCategory

    def __post_init__(self) -> None:
        _require_text("Skill", "name", self.name)
        if self.category not in SKILL_CATEGORIES:
            raise ValidationError(
                "Skill",
                "category",
                f"unknown category {self.category!r}",
                context=f"skill={self.name}, allowed={list(SKILL_CATEGORIES)}",
            )


@dataclass(frozen=True)
class ImpactMetric:
    """Headline number shown on a metric tile.

    ``value`` is display text ("$25K+/month"), never parsed.
    """

    label: str
    value: str
    icon_tag: str

    def __post_init__(self) -> None:
        _require_text("ImpactMetric", "label", self.label)
        _require_text("ImpactMetric", "value", self.value)
        _require_text("ImpactMetric", "icon_tag", self.icon_tag)


def _impact_tuple(record: str, impact: Optional[Iterable[ImpactMetric]]) -> Tuple[ImpactMetric, ...]:
    if impact is None:
        raise ValidationError(record, "impact", "must be a sequence (use an empty one for none)")
    out = tuple(impact)
    for m in out:
        if not isinstance(m, ImpactMetric):
            raise ValidationError(record, "impact", f"expected ImpactMetric, got {type(m).__name__}")
    return out


@dataclass(frozen=True)
class Experience:
    # Required text fields default to None so a missing one fails validation, not __init__.
    title: Optional[str] = None
    organization: Optional[str] = None
    period: str = ""
    location: str = ""
    description: Optional[str] = None
    achievements: Tuple[str, ...] = ()
    technologies: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        _require_text("Experience", "title", self.title)
        _require_text("Experience", "organization", self.organization)
        _require_text("Experience", "description", self.description)
        for name in ("period", "location"):
            if not isinstance(getattr(self, name), str):
                raise ValidationError("Experience", name, "must be a string")
        object.__setattr__(self, "achievements", _as_text_tuple("Experience", "achievements", self.achievements))
        techs = _as_text_tuple("Experience", "technologies", self.technologies)
        object.__setattr__(self, "technologies", _unique_in_order(techs))


@dataclass(frozen=True)
class Project:
    """Project card: description, metric tiles, achievements, technology chips."""

    title: Optional[str] = None
    description: Optional[str] = None
    timeline_label: Optional[str] = None
    impact: Tuple[ImpactMetric, ...] = ()
    achievements: Tuple[str, ...] = ()
    technologies: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        record = type(self).__name__
        _require_text(record, "title", self.title)
        _require_text(record, "description", self.description)
        if self.timeline_label is not None:
            _require_text(record, "timeline_label", self.timeline_label)
        object.__setattr__(self, "impact", _impact_tuple(record, self.impact))
        object.__setattr__(self, "achievements", _as_text_tuple(record, "achievements", self.achievements))
        techs = _as_text_tuple(record, "technologies", self.technologies)
        object.__setattr__(self, "technologies", _unique_in_order(techs))


@dataclass(frozen=True)
class TimelineEntry(Project):
    """Project placed on the timeline; the period label is mandatory."""

    def __post_init__(self) -> None:
        if self.timeline_label is None:
            raise ValidationError("TimelineEntry", "timeline_label", "required field missing", context=f"title={self.title!r}")
        super().__post_init__()


@dataclass(frozen=True)
class Education:
    degree: str
    institution: str
    location: str = ""
    year: str = ""

    def __post_init__(self) -> None:
        _require_text("Education", "degree", self.degree)
        _require_text("Education", "institution", self.institution)


@dataclass(frozen=True)
class ContactLink:
    label: str
    icon_tag: str
    url: Optional[str] = None

    def __post_init__(self) -> None:
        _require_text("ContactLink", "label", self.label)
        _require_text("ContactLink", "icon_tag", self.icon_tag)


def initials_for(name: str) -> str:
    return "".join(part[0].upper() for part in name.split() if part)[:3]


@dataclass(frozen=True)
class ProfileHeader:
    name: str
    headline: str
    organization: str = ""
    tagline: str = ""
    contacts: Tuple[ContactLink, ...] = ()
    initials: str = ""

    def __post_init__(self) -> None:
        _require_text("ProfileHeader", "name", self.name)
        _require_text("ProfileHeader", "headline", self.headline)
        object.__setattr__(self, "contacts", tuple(self.contacts))
        if not self.initials:
            object.__setattr__(self, "initials", initials_for(self.name))


@dataclass(frozen=True)
class Spotlight:
    """Featured project on the profile page."""

    title: str
    description: str
    impact: Tuple[ImpactMetric, ...] = field(default=())

    def __post_init__(self) -> None:
        _require_text("Spotlight", "title", self.title)
        _require_text("Spotlight", "description", self.description)
        object.__setattr__(self, "impact", _impact_tuple("Spotlight", self.impact))
