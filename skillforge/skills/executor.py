"""
Skill Executor for executing skills from the registry

Handles skill lookup, invocation, error handling, and logging.
"""

import logging
from typing import Any

from skillforge.skills.base import SkillResult
from skillforge.skills.registry import SkillRegistry

logger = logging.getLogger(__name__)


class SkillExecutionError(Exception):
    """Raised when a skill cannot be dispatched"""

    pass


class SkillExecutor:
    """
    Executes skills from the registry

    Provides a safe interface for executing skills with:
    - Error handling
    - Logging
    """

    def __init__(self, registry: SkillRegistry) -> None:
        """
        Initialize executor with a skill registry

        Args:
            registry: The skill registry to use for skill lookup
        """
        self.registry = registry

    async def execute(self, skill_name: str, args: dict[str, Any]) -> SkillResult:
        """
        Execute a skill by name with the given arguments

        Args:
            skill_name: Name of the skill to execute
            args: Dictionary of arguments to pass to the skill

        Returns:
            SkillResult with success status, data, and/or error message

        Raises:
            SkillExecutionError: If the skill is not found in the registry
        """
        skill = self.registry.get_skill(skill_name)
        if skill is None:
            error_msg = f"Skill '{skill_name}' not found in registry"
            logger.error(error_msg)
            raise SkillExecutionError(error_msg)

        try:
            logger.info(f"Executing skill: {skill_name} with args: {sorted(args)}")
            result = await skill.execute(args)
        except Exception as e:
            # A crashing template is a defect in the skill, not in the caller's input
            error_msg = f"{type(e).__name__}: {str(e)}"
            logger.error(f"Skill {skill_name} failed: {error_msg}", exc_info=True)
            return SkillResult(success=False, data=None, error=error_msg)

        if result.errors:
            logger.warning(f"Skill {skill_name} rejected arguments: {result.error}")
        else:
            logger.info(f"Skill {skill_name} completed: success={result.success}")
        return result
