from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Mapping, Tuple

PageKind = Literal["profile", "projects", "timeline"]

PAGE_KEYS: Tuple[str, ...] = ("profile", "projects", "timeline")
DEFAULT_PAGE = "profile"

ROUTES: Mapping[str, str] = {
    "/": "profile",
    "/profile": "profile",
    "/about": "profile",
    "/projects": "projects",
    "/timeline": "timeline",
}


@dataclass(frozen=True)
class NavItem:
    label: str
    page: str
    path: str

    def as_json(self) -> dict:
        return {"label": self.label, "page": self.page, "path": self.path}


NAVIGATION: Tuple[NavItem, ...] = (
    NavItem(label="About", page="profile", path="/about"),
    NavItem(label="Projects", page="projects", path="/projects"),
    NavItem(label="Timeline", page="timeline", path="/timeline"),
)


def _normalize(path: str) -> str:
    p = (path or "").strip().split("?", 1)[0].split("#", 1)[0].lower()
    if not p.startswith("/"):
        p = "/" + p
    if len(p) > 1:
        p = p.rstrip("/") or "/"
    return p


def resolve_page(path: str, *, default: str = DEFAULT_PAGE) -> str:
    """Map a requested path to a page key; unknown paths land on ``default``."""
    if default not in PAGE_KEYS:
        raise ValueError(f"Unknown default page '{default}'")
    return ROUTES.get(_normalize(path), default)


def navigation() -> Tuple[NavItem, ...]:
    return NAVIGATION
