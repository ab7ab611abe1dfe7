from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Sequence, Set, Tuple, Union

from profile_composer.assembler import EntriesContent, PageContent, ProfileContent
from profile_composer.core import Experience, Project

Entry = Union[Experience, Project]


def _entries_of(content: PageContent) -> Sequence[Entry]:
    if isinstance(content, ProfileContent):
        return content.experiences
    if isinstance(content, EntriesContent):
        return content.entries
    raise TypeError(f"Unsupported page content: {type(content).__name__}")


def _duplicate_achievements(page: str, entries: Iterable[Entry]) -> List[str]:
    warnings: List[str] = []
    for entry in entries:
        seen: Set[str] = set()
        for achievement in entry.achievements:
            key = achievement.strip().casefold()
            if key in seen:
                warnings.append(f"DUPLICATE_ACHIEVEMENT:{page}:{entry.title}")
                break
            seen.add(key)
    return warnings


def _drift(by_title: Mapping[str, List[Tuple[str, Project]]]) -> List[str]:
    warnings: List[str] = []
    for title, occurrences in by_title.items():
        if len(occurrences) < 2:
            continue

        descriptions = {p.description.strip() for _, p in occurrences}
        if len(descriptions) > 1:
            warnings.append(f"DESCRIPTION_DRIFT:{title}")

        values: Dict[str, Set[str]] = {}
        for _, project in occurrences:
            for metric in project.impact:
                values.setdefault(metric.label, set()).add(metric.value)
        for label, vals in values.items():
            if len(vals) > 1:
                warnings.append(f"METRIC_DRIFT:{title}:{label}")
    return warnings


def audit_pages(contents: Mapping[str, PageContent]) -> Tuple[str, ...]:
    """
    Report content that disagrees with itself, within or across pages.

    Pages restate overlapping entries on purpose, so nothing here is fatal:
    the caller decides whether warnings fail the build.
    """
    warnings: List[str] = []
    by_title: Dict[str, List[Tuple[str, Project]]] = {}

    for page, content in contents.items():
        entries = _entries_of(content)
        warnings.extend(_duplicate_achievements(page, entries))
        for entry in entries:
            if isinstance(entry, Project):
                by_title.setdefault(entry.title, []).append((page, entry))

    warnings.extend(_drift(by_title))
    return tuple(sorted(set(warnings)))
