"""
ComponentOptimizer Skill

Inspects React component source and recommends rendering it as a Next.js
Server or Client Component, flagging a missing or unnecessary
``'use client'`` directive.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult

CLIENT_HOOKS = ("useState", "useEffect", "useCallback", "useContext", "useRef", "useReducer")
EVENT_HANDLERS = ("onClick", "onChange", "onSubmit", "onMouseEnter")
BROWSER_APIS = ("window.", "document.", "localStorage", "sessionStorage")


class ComponentOptimizerParams(SkillParams):
    code: str = Field(description="The source code of the component to analyze")
    file_name: str = Field(description="The filename of the component")


def _has_any(code: str, needles: tuple[str, ...]) -> bool:
    return any(needle in code for needle in needles)


def has_use_client(code: str) -> bool:
    stripped = code.strip()
    return stripped.startswith("'use client'") or stripped.startswith('"use client"')


class ComponentOptimizerSkill(BaseSkill[ComponentOptimizerParams]):
    name = "component_optimizer"
    description = (
        "Analyzes React components to recommend Server vs Client rendering strategies "
        "for Next.js optimization."
    )
    category = "frontend.infrastructure"
    params_model = ComponentOptimizerParams

    async def handle(self, params: ComponentOptimizerParams) -> SkillResult:
        code = params.code
        uses_hooks = _has_any(code, CLIENT_HOOKS)
        uses_events = _has_any(code, EVENT_HANDLERS)
        uses_browser = _has_any(code, BROWSER_APIS)

        reasoning: list[str] = []
        recommended: Literal["server", "client"] = "server"
        if uses_hooks or uses_events or uses_browser:
            recommended = "client"
            if uses_hooks:
                reasoning.append("Uses React hooks (state/effect)")
            if uses_events:
                reasoning.append("Uses event handlers (interactions)")
            if uses_browser:
                reasoning.append("Uses Browser APIs")
        else:
            reasoning.append("No interactive logic or state detected; safe for Server Component")

        issues: list[str] = []
        marked_client = has_use_client(code)
        if recommended == "server" and marked_client:
            issues.append(
                "Component is marked 'use client' but appears to be static. "
                "Consider removing directive for better performance."
            )
        elif recommended == "client" and not marked_client:
            issues.append(
                "Component uses interactive features but is missing 'use client' directive."
            )

        return SkillResult.ok(
            {
                "fileName": params.file_name,
                "recommendedType": recommended,
                "reasoning": reasoning,
                "issues": issues,
            },
            {"optimization_level": "high"},
        )
