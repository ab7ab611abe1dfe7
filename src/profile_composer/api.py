from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Tuple

from profile_composer.assembler import PageContent, assemble
from profile_composer.config import AppConfig, load_app_config
from profile_composer.consistency import audit_pages
from profile_composer.content import load_page_content
from profile_composer.core import ValidationError
from profile_composer.pages import PAGE_KEYS, resolve_page
from profile_composer.view_model import PageView

Logger = Callable[[str], None]


@dataclass(frozen=True)
class SiteView:
    pages: Mapping[str, PageView]
    warnings: Tuple[str, ...] = ()

    def as_json(self) -> dict:
        return {
            "pages": {key: view.as_json() for key, view in self.pages.items()},
            "warnings": list(self.warnings),
        }


def _resolve_config(app_config: Optional[AppConfig], config_path: Optional[Path]) -> AppConfig:
    cfg = app_config or load_app_config(override_path=Path(config_path) if config_path else None)
    cfg.validate()
    return cfg


def assemble_page(
    page_key: str,
    *,
    app_config: Optional[AppConfig] = None,
    config_path: Optional[Path] = None,
    logger: Optional[Logger] = None,
) -> PageView:
    cfg = _resolve_config(app_config, config_path)
    return assemble(page_key, load_page_content(page_key), config=cfg, logger=logger)


def render_path(
    path: str,
    *,
    app_config: Optional[AppConfig] = None,
    config_path: Optional[Path] = None,
    logger: Optional[Logger] = None,
) -> PageView:
    cfg = _resolve_config(app_config, config_path)
    page_key = resolve_page(path, default=cfg.default_page)
    if logger:
        logger(f"route: {path!r} -> {page_key}")
    return assemble(page_key, load_page_content(page_key), config=cfg, logger=logger)


def build_site(
    app_config: Optional[AppConfig] = None,
    *,
    config_path: Optional[Path] = None,
    logger: Optional[Logger] = None,
) -> SiteView:
    """Assemble every page and audit cross-page consistency."""
    cfg = _resolve_config(app_config, config_path)

    contents: Dict[str, PageContent] = {key: load_page_content(key) for key in PAGE_KEYS}
    pages = {key: assemble(key, content, config=cfg, logger=logger) for key, content in contents.items()}

    warnings = audit_pages(contents)
    if logger:
        for w in warnings:
            logger(f"warning: {w}")

    if cfg.strict_consistency and warnings:
        raise ValidationError("Site", "content", "consistency audit failed", context=", ".join(warnings))

    return SiteView(pages=pages, warnings=warnings)
