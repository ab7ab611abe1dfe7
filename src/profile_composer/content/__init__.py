"""Static page content. Each page owns its own records; nothing is shared by reference."""

from __future__ import annotations

from typing import Dict

from profile_composer.assembler import PageContent
from profile_composer.content import profile, projects, timeline

_CONTENT: Dict[str, PageContent] = {
    "profile": profile.CONTENT,
    "projects": projects.CONTENT,
    "timeline": timeline.CONTENT,
}


def load_page_content(page_key: str) -> PageContent:
    try:
        return _CONTENT[page_key]
    except KeyError:
        raise KeyError(f"No content for page '{page_key}'") from None


__all__ = ["load_page_content"]
