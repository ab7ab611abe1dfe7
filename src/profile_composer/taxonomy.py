from __future__ import annotations

from dataclasses import dataclass, replace
from typing import FrozenSet, List, Mapping, Optional, Sequence, Set

from profile_composer.core import SKILL_CATEGORIES, ConfigurationError


# ---------------------------------------------------------------------------
# Canonical skill taxonomy (single source of truth)
#
# Every category in SKILL_CATEGORIES must resolve to exactly one icon tag.
# Group order on the page is CATEGORY_ORDER, never skill insertion order.
# ---------------------------------------------------------------------------

CATEGORY_ORDER: List[str] = [
    "Frontend",
    "Backend",
    "Cloud",
    "Data",
]

CATEGORY_ICONS: Mapping[str, str] = {
    "Frontend": "web",
    "Backend": "code",
    "Cloud": "cloud",
    "Data": "storage",
}

# Labels default to the category name itself.
CATEGORY_LABELS: Mapping[str, str] = {}

# Icons a metric tile may use. Keys MUST match the tags the content modules use.
METRIC_ICON_TAGS: FrozenSet[str] = frozenset(
    {
        "attach-money",
        "people",
        "security",
        "speed",
        "storage",
        "swap-horiz",
        "trending-down",
        "trending-up",
    }
)


@dataclass(frozen=True)
class Classification:
    group_key: str
    display_label: str
    icon_tag: str


@dataclass(frozen=True)
class SkillTaxonomy:
    name: str
    category_order: Sequence[str]
    category_icons: Mapping[str, str]
    category_labels: Mapping[str, str]
    fallback_icon_tag: Optional[str] = None  # explicit opt-in only
    known_categories: Sequence[str] = SKILL_CATEGORIES

    def with_fallback(self, icon_tag: Optional[str]) -> "SkillTaxonomy":
        return replace(self, fallback_icon_tag=icon_tag)

    def icon_for(self, category: str) -> str:
        icon = self.category_icons.get(category)
        if icon:
            return icon
        if self.fallback_icon_tag:
            return self.fallback_icon_tag
        raise ConfigurationError(f"No icon mapped for skill category '{category}' (taxonomy {self.name})")

    def label_for(self, category: str) -> str:
        return self.category_labels.get(category, category)


DEFAULT_TAXONOMY = SkillTaxonomy(
    name="default",
    category_order=CATEGORY_ORDER,
    category_icons=CATEGORY_ICONS,
    category_labels=CATEGORY_LABELS,
)


# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def classify(record: object, *, taxonomy: SkillTaxonomy = DEFAULT_TAXONOMY) -> Optional[Classification]:
    """
    Return the display grouping of a record exposing ``category``.

    Records without a category (experiences, projects, timeline entries)
    are not grouped: None is returned and they pass through as-is.
    """
    category = getattr(record, "category", None)
    if category is None:
        return None
    if category not in taxonomy.category_order:
        raise ConfigurationError(
            f"Skill category '{category}' is not in the category order of taxonomy {taxonomy.name}"
        )
    return Classification(
        group_key=category,
        display_label=taxonomy.label_for(category),
        icon_tag=taxonomy.icon_for(category),
    )


def require_metric_icon(icon_tag: str) -> str:
    if icon_tag not in METRIC_ICON_TAGS:
        raise ConfigurationError(f"Unknown metric icon tag '{icon_tag}' (known: {sorted(METRIC_ICON_TAGS)})")
    return icon_tag


# ---------------------------------------------------------------------------
# Validation (run at startup, before any page is assembled)
# ---------------------------------------------------------------------------

def validate_mappings(*, taxonomy: SkillTaxonomy = DEFAULT_TAXONOMY, strict: bool = True) -> List[str]:
    """
    Validate that:
      - every known category appears once in the category order
      - every category resolves to an icon (or an explicit fallback exists)
      - icons/labels are only declared for known categories
    Returns a list of human-readable issues. If strict=True and issues exist, raises ConfigurationError.
    """
    issues: List[str] = []

    known: Set[str] = set(taxonomy.known_categories)
    order = list(taxonomy.category_order)

    dupes = sorted({c for c in order if order.count(c) > 1})
    if dupes:
        issues.append(f"category order lists categories more than once: {dupes}")

    missing_order = [c for c in taxonomy.known_categories if c not in order]
    if missing_order:
        issues.append(f"categories missing from category order: {missing_order}")

    unknown_order = sorted(set(order) - known)
    if unknown_order:
        issues.append(f"category order uses unknown categories: {unknown_order}")

    if not taxonomy.fallback_icon_tag:
        unmapped = [c for c in taxonomy.known_categories if not taxonomy.category_icons.get(c)]
        if unmapped:
            issues.append(f"categories without an icon mapping: {unmapped}")

    stray_icons = sorted(set(taxonomy.category_icons) - known)
    if stray_icons:
        issues.append(f"icons declared for unknown categories: {stray_icons}")

    stray_labels = sorted(set(taxonomy.category_labels) - known)
    if stray_labels:
        issues.append(f"labels declared for unknown categories: {stray_labels}")

    if strict and issues:
        raise ConfigurationError(
            f"Category mapping validation failed ({taxonomy.name}):\n- " + "\n- ".join(issues)
        )
    return issues
