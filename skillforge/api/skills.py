"""Skills API endpoints for catalog discovery and invocation."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, status

from skillforge.core.dependencies import get_executor, get_registry
from skillforge.core.rate_limit import invoke_rate_limit, limiter
from skillforge.schemas.skill import SkillInfo, SkillInvocationResponse, SkillList
from skillforge.skills.executor import SkillExecutionError, SkillExecutor
from skillforge.skills.registry import SkillRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=SkillList)
async def list_skills(
    category: str | None = Query(None, description="Category or category prefix, e.g. 'frontend.ui'"),
    registry: SkillRegistry = Depends(get_registry),
) -> SkillList:
    """List registered skills.

    Args:
        category: Optional category filter

    Returns:
        SkillList with the matching skills and their parameter schemas
    """
    skills = [SkillInfo(**info) for info in registry.list_skills(category)]
    return SkillList(skills=skills, total=len(skills))


@router.get("/tools")
async def list_tool_definitions(
    registry: SkillRegistry = Depends(get_registry),
) -> list[dict[str, Any]]:
    """Get every skill as an LLM function-calling tool definition."""
    return registry.get_tool_definitions()


@router.get("/{name}", response_model=SkillInfo)
async def get_skill(name: str, registry: SkillRegistry = Depends(get_registry)) -> SkillInfo:
    """Get a single skill's description and parameter schema.

    Raises:
        HTTPException 404: Skill is not registered
    """
    skill = registry.get_skill(name)
    if skill is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Skill '{name}' not found")
    return SkillInfo(
        name=skill.name,
        description=skill.description,
        category=skill.category,
        parameters=skill.parameters,
    )


@router.post("/{name}/invoke", response_model=SkillInvocationResponse)
@limiter.limit(invoke_rate_limit)
async def invoke_skill(
    request: Request,
    name: str,
    args: dict[str, Any] | None = Body(None),
    executor: SkillExecutor = Depends(get_executor),
) -> SkillInvocationResponse:
    """Invoke a skill with the given arguments.

    Args:
        name: Registered skill name
        args: Skill arguments in camelCase; omitted means all defaults

    Returns:
        SkillInvocationResponse with the generated output and metadata

    Raises:
        HTTPException 404: Skill is not registered
        HTTPException 422: Arguments failed validation
    """
    try:
        result = await executor.execute(name, args or {})
    except SkillExecutionError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e

    if result.errors:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={
                "error": result.error,
                "errors": [error.to_dict() for error in result.errors],
            },
        )

    return SkillInvocationResponse.from_result(name, result)
