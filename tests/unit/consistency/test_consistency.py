from __future__ import annotations

from profile_composer.assembler import EntriesContent
from profile_composer.consistency import audit_pages
from profile_composer.content import load_page_content
from profile_composer.core import ImpactMetric, Project, TimelineEntry


def _page(*entries):
    return EntriesContent(title="Page", subtitle="", entries=entries)


def test_metric_drift_between_pages():
    a = Project(title="ConMon", description="x", impact=[ImpactMetric("Performance", "95% improvement", "trending-up")])
    b = TimelineEntry(
        title="ConMon",
        description="x",
        timeline_label="2023",
        impact=[ImpactMetric("Performance", "2 Billion Records Processed Daily", "storage")],
    )

    assert audit_pages({"projects": _page(a), "timeline": _page(b)}) == ("METRIC_DRIFT:ConMon:Performance",)


def test_description_drift_and_duplicate_achievement():
    a = Project(title="Personnel", description="Old text.", achievements=["Did X", "did x "])
    b = Project(title="Personnel", description="New text.")

    warnings = audit_pages({"projects": _page(a), "timeline": _page(b)})
    assert warnings == (
        "DESCRIPTION_DRIFT:Personnel",
        "DUPLICATE_ACHIEVEMENT:projects:Personnel",
    )


def test_identical_restatements_are_clean():
    a = Project(title="Personnel", description="Same.", impact=[ImpactMetric("Cost", "$1", "attach-money")])
    assert audit_pages({"projects": _page(a), "timeline": _page(a)}) == ()


def test_built_in_content_warnings():
    contents = {key: load_page_content(key) for key in ("profile", "projects", "timeline")}
    warnings = audit_pages(contents)

    assert "METRIC_DRIFT:Azure ConMon Modernization:Performance" in warnings
    assert "METRIC_DRIFT:Azure ConMon Modernization:Reliability" in warnings
    assert any(w.startswith("DUPLICATE_ACHIEVEMENT:timeline:Tech Lead") for w in warnings)
    assert not any(w.startswith("DESCRIPTION_DRIFT") for w in warnings)
