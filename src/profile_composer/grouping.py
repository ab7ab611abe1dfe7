from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Tuple

from profile_composer.core import Skill
from profile_composer.taxonomy import DEFAULT_TAXONOMY, SkillTaxonomy, classify


@dataclass(frozen=True)
class SkillGroup:
    """One rendered skill section.

    Invariants
    ----------
    * ``items`` is never empty; empty categories produce no group.
    * ``divider_after`` is False only on the last group.
    """

    key: str
    label: str
    icon_tag: str
    items: Tuple[Skill, ...]
    divider_after: bool

    def as_json(self) -> dict:
        return {
            "key": self.key,
            "label": self.label,
            "icon": self.icon_tag,
            "items": [s.name for s in self.items],
            "divider_after": self.divider_after,
        }


def mark_dividers(count: int) -> List[bool]:
    """Divider flags for ``count`` adjacent items: one after each but the last."""
    return [i < count - 1 for i in range(max(count, 0))]


def count_dividers(items: Iterable[object]) -> int:
    return sum(1 for item in items if getattr(item, "divider_after", False))


def group_skills(skills: Sequence[Skill], *, taxonomy: SkillTaxonomy = DEFAULT_TAXONOMY) -> Tuple[SkillGroup, ...]:
    """
    Partition skills into display groups.

    Group order = taxonomy category order.
    Item order  = input order within each category.
    """
    buckets: Dict[str, List[Skill]] = {}
    labels: Dict[str, Tuple[str, str]] = {}

    for skill in skills:
        cls = classify(skill, taxonomy=taxonomy)
        if cls is None:
            raise TypeError(f"group_skills expects skills, got {type(skill).__name__}")
        buckets.setdefault(cls.group_key, []).append(skill)
        labels[cls.group_key] = (cls.display_label, cls.icon_tag)

    keys = [c for c in taxonomy.category_order if buckets.get(c)]
    dividers = mark_dividers(len(keys))

    return tuple(
        SkillGroup(
            key=key,
            label=labels[key][0],
            icon_tag=labels[key][1],
            items=tuple(buckets[key]),
            divider_after=divider,
        )
        for key, divider in zip(keys, dividers)
    )


def flatten_groups(groups: Iterable[SkillGroup]) -> List[Skill]:
    out: List[Skill] = []
    for g in groups:
        out.extend(g.items)
    return out
