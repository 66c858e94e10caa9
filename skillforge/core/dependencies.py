from fastapi import Depends, Request

from skillforge.skills.executor import SkillExecutor
from skillforge.skills.registry import SkillRegistry


def get_registry(request: Request) -> SkillRegistry:
    """Dependency returning the registry built at application startup."""
    return request.app.state.registry


def get_executor(registry: SkillRegistry = Depends(get_registry)) -> SkillExecutor:
    """Dependency returning an executor bound to the application registry."""
    return SkillExecutor(registry)
