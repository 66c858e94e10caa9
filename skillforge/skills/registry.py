"""
Skill Registry for managing and discovering skills

The registry maintains a collection of available skills and provides
methods for registration, discovery, and metadata access. It is built once
at startup and frozen; dispatchers receive it explicitly.
"""

from collections.abc import Awaitable, Callable, Iterator
from typing import Any

from skillforge.skills.base import BaseSkill, SkillResult

SkillHandler = Callable[[dict[str, Any]], Awaitable[SkillResult]]


class SkillRegistry:
    """
    Registry for managing skills

    Maintains a collection of skills and provides methods for:
    - Registering new skills (until the registry is frozen)
    - Retrieving skills by name
    - Listing all available skills, optionally by category
    - Exposing a name -> handler mapping for dispatch
    """

    def __init__(self) -> None:
        """Initialize empty skill registry"""
        self._skills: dict[str, BaseSkill] = {}
        self._frozen = False

    @classmethod
    def from_skills(cls, skills: list[BaseSkill]) -> "SkillRegistry":
        """Build and freeze a registry from an explicit list of skills"""
        registry = cls()
        for skill in skills:
            registry.register(skill)
        registry.freeze()
        return registry

    def register(self, skill: BaseSkill) -> None:
        """
        Register a skill in the registry

        Args:
            skill: The skill to register

        Raises:
            ValueError: If a skill with the same name is already registered
            RuntimeError: If the registry has been frozen
        """
        if self._frozen:
            raise RuntimeError(f"Cannot register '{skill.name}': registry is frozen")

        if skill.name in self._skills:
            raise ValueError(f"Skill '{skill.name}' is already registered.")

        self._skills[skill.name] = skill

    def freeze(self) -> None:
        """Reject any further registration"""
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def get_skill(self, skill_name: str) -> BaseSkill | None:
        """
        Retrieve a skill by name

        Args:
            skill_name: Name of the skill to retrieve

        Returns:
            The skill instance, or None if not found
        """
        return self._skills.get(skill_name)

    def list_skills(self, category: str | None = None) -> list[dict[str, Any]]:
        """
        List registered skills with their metadata

        Args:
            category: Optional category or category prefix ("backend",
                "frontend.ui") to filter by

        Returns:
            List of skill metadata dictionaries containing:
            - name: Skill name
            - description: Skill description
            - category: Catalog section
            - parameters: Parameter schema
        """
        return [
            {
                "name": skill.name,
                "description": skill.description,
                "category": skill.category,
                "parameters": skill.parameters,
            }
            for skill in self._skills.values()
            if category is None or _in_category(skill.category, category)
        ]

    def categories(self) -> list[str]:
        """Sorted list of distinct skill categories"""
        return sorted({skill.category for skill in self._skills.values()})

    def get_tool_definitions(self) -> list[dict[str, Any]]:
        """
        Get all skills as LLM tool definitions

        Returns:
            List of tool definitions for function calling
        """
        return [skill.to_tool_definition() for skill in self._skills.values()]

    def handlers(self) -> dict[str, SkillHandler]:
        """Mapping of skill name to its execute coroutine function"""
        return {name: skill.execute for name, skill in self._skills.items()}

    def __len__(self) -> int:
        """Return number of registered skills"""
        return len(self._skills)

    def __contains__(self, skill_name: object) -> bool:
        """Check if skill is registered"""
        return skill_name in self._skills

    def __iter__(self) -> Iterator[BaseSkill]:
        return iter(self._skills.values())


def _in_category(skill_category: str, wanted: str) -> bool:
    return skill_category == wanted or skill_category.startswith(f"{wanted}.")
