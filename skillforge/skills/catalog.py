"""
Default skill catalog

Builds the process-wide registry from the backend and frontend skill lists.
"""

import logging
from collections.abc import Iterable

from skillforge.skills.backend import BACKEND_SKILLS
from skillforge.skills.base import BaseSkill
from skillforge.skills.frontend import FRONTEND_SKILLS
from skillforge.skills.registry import SkillRegistry

logger = logging.getLogger(__name__)

ALL_SKILLS: list[type[BaseSkill]] = [*BACKEND_SKILLS, *FRONTEND_SKILLS]


def build_default_registry(disabled: Iterable[str] = ()) -> SkillRegistry:
    """
    Instantiate every catalog skill and return a frozen registry

    Args:
        disabled: Skill names to leave out of the registry

    Returns:
        Frozen SkillRegistry
    """
    disabled = set(disabled)
    skills = [skill_cls() for skill_cls in ALL_SKILLS]

    unknown = disabled - {skill.name for skill in skills}
    if unknown:
        logger.warning(f"Ignoring unknown disabled skills: {sorted(unknown)}")

    registry = SkillRegistry.from_skills([s for s in skills if s.name not in disabled])
    logger.info(f"Skill registry ready: {len(registry)} skills, {len(disabled - unknown)} disabled")
    return registry
