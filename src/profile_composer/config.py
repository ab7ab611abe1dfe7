from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple

try:  # Python <3.11 fallback
    import tomllib  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - fallback path
    import tomli as tomllib  # type: ignore

import yaml

from profile_composer.core import ConfigurationError
from profile_composer.pages import DEFAULT_PAGE, PAGE_KEYS
from profile_composer.taxonomy import DEFAULT_TAXONOMY, SkillTaxonomy, validate_mappings


DEFAULT_METRIC_TONES: Tuple[str, ...] = ("success", "primary", "secondary")
DEFAULT_PRIMARY = "#0078d4"
DEFAULT_SECONDARY = "#005a9e"

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _load_pyproject_config(project_root: Path) -> Dict[str, Any]:
    pyproject_path = project_root / "pyproject.toml"
    if not pyproject_path.exists():
        return {}

    with pyproject_path.open("rb") as f:
        data = tomllib.load(f)
    return data.get("tool", {}).get("profile_composer", {}) or {}


def _ensure_mapping(obj: Any, ctx: str) -> Dict[str, Any]:
    if obj is None:
        return {}
    if not isinstance(obj, dict):
        raise ConfigurationError(f"{ctx} must be a mapping/object")
    return obj


def _load_override_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Config override not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".json":
        return _ensure_mapping(json.loads(path.read_text(encoding="utf-8")), "JSON config")
    if suffix in {".yaml", ".yml"}:
        return _ensure_mapping(yaml.safe_load(path.read_text(encoding="utf-8")), "YAML config")
    if suffix == ".toml":
        with path.open("rb") as f:
            return _ensure_mapping(tomllib.load(f), "TOML config")

    raise ConfigurationError(f"Unsupported config override format: {path}")


def _merge_section(base: Mapping[str, Any], override: Mapping[str, Any], key: str) -> Dict[str, Any]:
    merged = dict(_ensure_mapping(base.get(key), f"{key} section"))
    merged.update(_ensure_mapping(override.get(key), f"{key} section"))
    return merged


def _as_tuple(value: Any) -> Any:
    return tuple(value) if isinstance(value, list) else value


def _merge_top(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    merged.update(override)
    merged.pop("theme", None)
    return merged


@dataclass(frozen=True)
class ThemeConfig:
    """Palette handed to the presentation layer with every page."""

    primary: str = DEFAULT_PRIMARY
    secondary: str = DEFAULT_SECONDARY
    header_gradient: Tuple[str, str] = (DEFAULT_PRIMARY, DEFAULT_SECONDARY)

    def as_json(self) -> dict:
        return {
            "primary": self.primary,
            "secondary": self.secondary,
            "header_gradient": list(self.header_gradient),
        }


@dataclass(frozen=True)
class AppConfig:
    default_page: str = DEFAULT_PAGE
    metric_tones: Tuple[str, ...] = DEFAULT_METRIC_TONES
    fallback_icon_tag: Optional[str] = None
    strict_consistency: bool = False
    theme: ThemeConfig = field(default_factory=ThemeConfig)

    @property
    def taxonomy(self) -> SkillTaxonomy:
        return DEFAULT_TAXONOMY.with_fallback(self.fallback_icon_tag)

    def validate(self, *, strict: bool = True) -> Dict[str, str]:
        issues: Dict[str, str] = {}

        if self.default_page not in PAGE_KEYS:
            issues["default_page"] = f"unknown page '{self.default_page}' (known: {list(PAGE_KEYS)})"

        tones = self.metric_tones
        if not isinstance(tones, (list, tuple)):
            issues["metric_tones"] = f"expected a list of tones, got {tones!r}"
        elif not tones:
            issues["metric_tones"] = "at least one tone is required"
        elif not all(isinstance(t, str) and t.strip() for t in tones):
            issues["metric_tones"] = "tones must be non-empty strings"

        if self.fallback_icon_tag is not None and (
            not isinstance(self.fallback_icon_tag, str) or not self.fallback_icon_tag.strip()
        ):
            issues["fallback_icon_tag"] = "fallback icon tag must be a non-blank string when set"

        if not isinstance(self.strict_consistency, bool):
            issues["strict_consistency"] = f"strict_consistency must be a bool, got {self.strict_consistency!r}"

        colors = [("theme.primary", self.theme.primary), ("theme.secondary", self.theme.secondary)]
        gradient = self.theme.header_gradient
        if not isinstance(gradient, (list, tuple)) or len(gradient) != 2:
            issues["theme.header_gradient"] = f"expected exactly two colors, got {gradient!r}"
        else:
            colors += [(f"theme.header_gradient[{i}]", c) for i, c in enumerate(gradient)]
        for label, color in colors:
            if not isinstance(color, str) or not _HEX_COLOR.match(color):
                issues[label] = f"not a hex color: {color!r}"

        for idx, msg in enumerate(validate_mappings(taxonomy=self.taxonomy, strict=False)):
            issues[f"taxonomy_{idx}"] = msg

        if strict and issues:
            details = "\n- ".join(f"{k}: {v}" for k, v in issues.items())
            raise ConfigurationError("Config validation failed:\n- " + details)
        return issues

    @classmethod
    def _from_maps(cls, *, top: Mapping[str, Any], theme: Mapping[str, Any]) -> "AppConfig":
        # Values pass through as loaded; validate() reports wrong types.
        primary = theme.get("primary", DEFAULT_PRIMARY)
        secondary = theme.get("secondary", DEFAULT_SECONDARY)
        gradient = theme.get("header_gradient")
        if gradient is None:
            gradient = (primary, secondary)

        default_page = top.get("default_page", DEFAULT_PAGE)
        tones = top.get("metric_tones")
        strict_consistency = top.get("strict_consistency")

        return cls(
            default_page=default_page.lower() if isinstance(default_page, str) else default_page,
            metric_tones=_as_tuple(tones) if tones is not None else DEFAULT_METRIC_TONES,
            fallback_icon_tag=top.get("fallback_icon_tag"),
            strict_consistency=False if strict_consistency is None else strict_consistency,
            theme=ThemeConfig(primary=primary, secondary=secondary, header_gradient=_as_tuple(gradient)),
        )


def load_app_config(*, project_root: Optional[Path] = None, override_path: Optional[Path] = None) -> AppConfig:
    root = Path(project_root) if project_root else Path.cwd()

    base = _load_pyproject_config(root)
    override = _load_override_file(override_path) if override_path else {}

    top = _merge_top(base, override)
    theme = _merge_section(base, override, "theme")

    return AppConfig._from_maps(top=top, theme=theme)
