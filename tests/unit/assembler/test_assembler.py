from __future__ import annotations

from dataclasses import replace

import pytest

from profile_composer.assembler import EntriesContent, ProfileContent, assemble
from profile_composer.config import AppConfig
from profile_composer.core import (
    ConfigurationError,
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
from profile_composer.grouping import count_dividers


def _experience(title: str) -> Experience:
    return Experience(
        title=title,
        organization="Microsoft",
        period="Nov 2021 - Present",
        location="Redmond, WA",
        description="Compliance tooling.",
        achievements=["Shipped things"],
        technologies=["React.js"],
    )


@pytest.fixture()
def profile_content(sample_skills) -> ProfileContent:
    return ProfileContent(
        header=ProfileHeader(name="Andrew Li", headline="Software Engineer 2"),
        summary="Software engineer.",
        skills=sample_skills,
        education=Education(degree="B.S.", institution="UCSD", location="La Jolla, CA", year="2019"),
        experiences=[_experience("SWE 2"), _experience("SWE 1"), _experience("Intern")],
        spotlight=Spotlight(
            title="Spotlight",
            description="Featured.",
            impact=[
                ImpactMetric("Monthly Cost Reduction", "$25K+", "attach-money"),
                ImpactMetric("Hours Saved Monthly", "120+", "security"),
                ImpactMetric("Performance Improvement", "95%", "trending-up"),
            ],
        ),
    )


def test_profile_page_groups_skills_and_divides_experiences(profile_content):
    view = assemble("profile", profile_content)

    assert view.page == "profile"
    assert [g.key for g in view.groups] == ["Frontend", "Backend"]
    assert count_dividers(view.groups) == 1
    assert [e.title for e in view.entries] == ["SWE 2", "SWE 1", "Intern"]
    assert count_dividers(view.entries) == 2
    assert view.entries[0].meta == "Redmond, WA • Nov 2021 - Present"
    assert view.entries[0].subtitle == "Microsoft"
    assert view.education.institution == "UCSD"
    assert view.summary == "Software engineer."


def test_profile_metrics_take_tones_by_position(profile_content):
    view = assemble("profile", profile_content)
    assert [m.tone for m in view.metrics] == ["success", "primary", "secondary"]
    assert view.spotlight.metrics == view.metrics


def test_project_with_no_impact_has_no_tiles():
    content = EntriesContent(
        title="Projects",
        subtitle="",
        entries=[Project(title="Personnel", description="Personnel systems.", impact=[])],
    )
    view = assemble("projects", content)

    assert len(view.entries) == 1
    assert view.entries[0].metrics == ()
    assert count_dividers(view.entries) == 0


def test_entry_metrics_keep_declared_order_and_reuse_last_tone():
    impact = [
        ImpactMetric("Speed", "10hrs => 2.5hrs", "trending-down"),
        ImpactMetric("Cost Savings", "$25K+/month", "attach-money"),
        ImpactMetric("Time Saved", "120+ hours/month", "speed"),
        ImpactMetric("Reliability", "85% Decrease", "trending-down"),
    ]
    content = EntriesContent(
        title="Timeline",
        subtitle="",
        entries=[
            TimelineEntry(title="ConMon", description="x", timeline_label="2023 - 2024", impact=impact),
            TimelineEntry(title="Personnel", description="y", timeline_label="2021 - 2023"),
        ],
    )
    view = assemble("timeline", content)

    tiles = view.entries[0].metrics
    assert [t.label for t in tiles] == ["Speed", "Cost Savings", "Time Saved", "Reliability"]
    assert [t.tone for t in tiles] == ["success", "primary", "secondary", "secondary"]
    assert view.entries[0].meta == "2023 - 2024"
    assert view.entries[0].kind == "timeline"
    assert [e.divider_after for e in view.entries] == [True, False]


def test_timeline_page_rejects_plain_projects():
    content = EntriesContent(title="Timeline", subtitle="", entries=[Project(title="A", description="B")])
    with pytest.raises(ValidationError):
        assemble("timeline", content)


def test_wrong_bundle_for_page_is_rejected(profile_content):
    with pytest.raises(ValidationError):
        assemble("projects", profile_content)


def test_unknown_page_kind():
    with pytest.raises(ValueError):
        assemble("contact", EntriesContent(title="x", subtitle="", entries=[]))


def test_unknown_metric_icon_fails_assembly():
    content = EntriesContent(
        title="Projects",
        subtitle="",
        entries=[Project(title="A", description="B", impact=[ImpactMetric("Rockets", "3", "rocket")])],
    )
    with pytest.raises(ConfigurationError):
        assemble("projects", content)


def test_assembly_is_deterministic(profile_content):
    first = assemble("profile", profile_content)
    second = assemble("profile", profile_content)
    assert first == second
    assert first.as_json() == second.as_json()


def test_theme_is_passed_through(profile_content):
    cfg = AppConfig()
    cfg = replace(cfg, theme=replace(cfg.theme, primary="#111111"))
    view = assemble("profile", profile_content, config=cfg)
    assert view.theme.primary == "#111111"


def test_logger_receives_steps(profile_content):
    seen = []
    assemble("profile", profile_content, logger=seen.append)
    assert seen[0] == "profile: 2 skill groups from 3 skills"
    assert any("experience entries" in m for m in seen)


def test_blank_summary_is_rejected(sample_skills):
    with pytest.raises(ValidationError):
        ProfileContent(
            header=ProfileHeader(name="A B", headline="SWE"),
            summary=" ",
            skills=sample_skills,
            education=Education(degree="B.S.", institution="UCSD"),
            experiences=[],
        )


def test_unknown_skill_never_reaches_assembler():
    with pytest.raises(ValidationError):
        Skill("Kubernetes", "DevOps")
