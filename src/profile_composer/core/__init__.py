from profile_composer.core.errors import ConfigurationError, ValidationError  # noqa: F401
from profile_composer.core.models import (  # noqa: F401
    SKILL_CATEGORIES,
    ContactLink,
    Education,
    Experience,
    ImpactMetric,
    ProfileHeader,
    Project,
    Skill,
    SkillCategory,
    Spotlight,
    TimelineEntry,
)

__all__ = [
    "ConfigurationError",
    "ContactLink",
    "Education",
    "Experience",
    "ImpactMetric",
    "ProfileHeader",
    "Project",
    "SKILL_CATEGORIES",
    "Skill",
    "SkillCategory",
    "Spotlight",
    "TimelineEntry",
    "ValidationError",
]
