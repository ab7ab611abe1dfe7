from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple, Union

from profile_composer.config import AppConfig
from profile_composer.core import (
    Education,
    Experience,
    ImpactMetric,
    ProfileHeader,
    Project,
    Skill,
    Spotlight,
    TimelineEntry,
    ValidationError,
)
from profile_composer.grouping import group_skills, mark_dividers
from profile_composer.pages import PAGE_KEYS, PageKind, navigation
from profile_composer.taxonomy import require_metric_icon, validate_mappings
from profile_composer.view_model import EntryView, MetricTile, PageView, SpotlightView

Logger = Callable[[str], None]

EXPERIENCE_ICON = "work"


@dataclass(frozen=True)
class ProfileContent:
    """Records owned by the profile page."""

    header: ProfileHeader
    summary: str
    skills: Tuple[Skill, ...]
    education: Education
    experiences: Tuple[Experience, ...]
    spotlight: Optional[Spotlight] = None
    title: str = "Profile"

    def __post_init__(self) -> None:
        if not isinstance(self.summary, str) or not self.summary.strip():
            raise ValidationError("ProfileContent", "summary", "must not be blank")
        object.__setattr__(self, "skills", tuple(self.skills))
        object.__setattr__(self, "experiences", tuple(self.experiences))


@dataclass(frozen=True)
class EntriesContent:
    """Records owned by a projects-style page (header text plus ordered entries)."""

    title: str
    subtitle: str
    entries: Tuple[Project, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.title, str) or not self.title.strip():
            raise ValidationError("EntriesContent", "title", "must not be blank")
        object.__setattr__(self, "entries", tuple(self.entries))


PageContent = Union[ProfileContent, EntriesContent]


def _log(logger: Optional[Logger], msg: str) -> None:
    if logger:
        logger(msg)


def _tiles(impact: Sequence[ImpactMetric], tones: Sequence[str]) -> Tuple[MetricTile, ...]:
    # Tiles past the end of the tone cycle reuse its last tone.
    last = len(tones) - 1
    return tuple(
        MetricTile(
            label=m.label,
            value=m.value,
            icon_tag=require_metric_icon(m.icon_tag),
            tone=tones[min(i, last)],
        )
        for i, m in enumerate(impact)
    )


def _experience_meta(exp: Experience) -> Optional[str]:
    parts = [p for p in (exp.location, exp.period) if p and p.strip()]
    return " • ".join(parts) or None


def _experience_entries(experiences: Sequence[Experience]) -> Tuple[EntryView, ...]:
    return tuple(
        EntryView(
            kind="experience",
            title=exp.title,
            description=exp.description,
            icon_tag=EXPERIENCE_ICON,
            subtitle=exp.organization,
            meta=_experience_meta(exp),
            metrics=(),
            achievements=exp.achievements,
            technologies=exp.technologies,
            divider_after=divider,
        )
        for exp, divider in zip(experiences, mark_dividers(len(experiences)))
    )


def _project_entries(kind: str, projects: Sequence[Project], tones: Sequence[str]) -> Tuple[EntryView, ...]:
    return tuple(
        EntryView(
            kind=kind,
            title=p.title,
            description=p.description,
            icon_tag=None,
            subtitle=None,
            meta=p.timeline_label,
            metrics=_tiles(p.impact, tones),
            achievements=p.achievements,
            technologies=p.technologies,
            divider_after=divider,
        )
        for p, divider in zip(projects, mark_dividers(len(projects)))
    )


def _assemble_profile(content: ProfileContent, cfg: AppConfig, logger: Optional[Logger]) -> PageView:
    groups = group_skills(content.skills, taxonomy=cfg.taxonomy)
    _log(logger, f"profile: {len(groups)} skill groups from {len(content.skills)} skills")

    entries = _experience_entries(content.experiences)
    _log(logger, f"profile: {len(entries)} experience entries")

    spotlight = None
    metrics: Tuple[MetricTile, ...] = ()
    if content.spotlight is not None:
        metrics = _tiles(content.spotlight.impact, cfg.metric_tones)
        spotlight = SpotlightView(
            title=content.spotlight.title,
            description=content.spotlight.description,
            metrics=metrics,
        )
        _log(logger, f"profile: spotlight with {len(metrics)} metric tiles")

    return PageView(
        page="profile",
        title=content.title,
        subtitle=content.header.headline,
        theme=cfg.theme,
        navigation=navigation(),
        groups=groups,
        entries=entries,
        metrics=metrics,
        header=content.header,
        summary=content.summary,
        education=content.education,
        spotlight=spotlight,
    )


def _assemble_entries(page: str, content: EntriesContent, cfg: AppConfig, logger: Optional[Logger]) -> PageView:
    expected = TimelineEntry if page == "timeline" else Project
    for entry in content.entries:
        if not isinstance(entry, expected):
            raise ValidationError(
                "EntriesContent",
                "entries",
                f"{page} page expects {expected.__name__} records",
                context=f"got {type(entry).__name__}",
            )

    kind = "timeline" if page == "timeline" else "project"
    entries = _project_entries(kind, content.entries, cfg.metric_tones)
    _log(logger, f"{page}: {len(entries)} entries, {sum(len(e.metrics) for e in entries)} metric tiles")

    return PageView(
        page=page,
        title=content.title,
        subtitle=content.subtitle,
        theme=cfg.theme,
        navigation=navigation(),
        entries=entries,
    )


def assemble(
    page_kind: PageKind,
    records: PageContent,
    *,
    config: Optional[AppConfig] = None,
    logger: Optional[Logger] = None,
) -> PageView:
    """
    Build the view-model of one page from that page's records.

    Pure: the same records and config always produce an equal PageView.
    """
    if page_kind not in PAGE_KEYS:
        raise ValueError(f"Unknown page '{page_kind}' (known: {list(PAGE_KEYS)})")

    cfg = config or AppConfig()

    # Surface taxonomy gaps before anything is built.
    validate_mappings(taxonomy=cfg.taxonomy, strict=True)

    if page_kind == "profile":
        if not isinstance(records, ProfileContent):
            raise ValidationError("PageContent", "profile", f"expected ProfileContent, got {type(records).__name__}")
        return _assemble_profile(records, cfg, logger)

    if not isinstance(records, EntriesContent):
        raise ValidationError("PageContent", page_kind, f"expected EntriesContent, got {type(records).__name__}")
    return _assemble_entries(page_kind, records, cfg, logger)
