from __future__ import annotations

import pytest

from profile_composer.pages import PAGE_KEYS, navigation, resolve_page


def test_page_keys():
    assert PAGE_KEYS == ("profile", "projects", "timeline")


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/", "profile"),
        ("", "profile"),
        ("/about", "profile"),
        ("/projects", "projects"),
        ("/Projects/", "projects"),
        ("timeline", "timeline"),
        ("/timeline?year=2024", "timeline"),
        ("/contact", "profile"),
        ("/no/such/page", "profile"),
    ],
)
def test_resolve_page(path, expected):
    assert resolve_page(path) == expected


def test_resolve_page_uses_given_default():
    assert resolve_page("/missing", default="timeline") == "timeline"


def test_resolve_page_rejects_unknown_default():
    with pytest.raises(ValueError):
        resolve_page("/", default="contact")


def test_navigation_targets_known_pages():
    items = navigation()
    assert [n.label for n in items] == ["About", "Projects", "Timeline"]
    assert all(resolve_page(n.path) == n.page for n in items)
