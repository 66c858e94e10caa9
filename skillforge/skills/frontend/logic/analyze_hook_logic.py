"""
AnalyzeHookLogic Skill

Audits a custom React hook with lightweight source heuristics: naming
convention, hooks missing a dependency array, unmemoized chained array
operations and a missing return value.

The audit itself always succeeds; whether the hook passed is reported in
``data["passed"]``.
"""

import re

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult

HOOK_EXPORT = re.compile(r"export\s+(?:const|function)\s+(use[A-Z][a-zA-Z0-9]*)")
# useEffect(() => { ... }) with no second argument
MISSING_DEPS = re.compile(r"\b(useEffect|useCallback|useMemo)\s*\(\s*\(\s*\)\s*=>\s*\{[^}]*\}\s*\)")


class AnalyzeHookLogicParams(SkillParams):
    code: str = Field(description="The source code of the custom hook to analyze")
    file_name: str = Field(description="The filename, used for convention checks")
    strict: bool = Field(
        default=True,
        description="Enable strict mode for dependency checks (accepted, currently has no effect)",
    )


class AnalyzeHookLogicSkill(BaseSkill[AnalyzeHookLogicParams]):
    name = "analyze_hook_logic"
    description = (
        "Audits custom React hooks for common pitfalls, naming conventions, and "
        "performance optimizations."
    )
    category = "frontend.logic"
    params_model = AnalyzeHookLogicParams

    async def handle(self, params: AnalyzeHookLogicParams) -> SkillResult:
        code = params.code
        issues: list[str] = []
        suggestions: list[str] = []

        match = HOOK_EXPORT.search(code)
        hook_name = match.group(1) if match else None

        if "use" not in params.file_name and not hook_name:
            issues.append(
                'Could not detect a valid hook definition starting with "use" exported from this file.'
            )

        if MISSING_DEPS.search(code):
            issues.append(
                "Found useEffect/useCallback/useMemo without a dependency array. "
                "This can cause infinite loops or stale closures."
            )

        if ".filter(" in code and ".map(" in code and "useMemo" not in code:
            suggestions.append(
                "Chained array operations (.filter.map) found. "
                "Consider wrapping heavy computations in useMemo()."
            )

        if "return" not in code:
            issues.append(
                "Hook does not seem to return any value or controls. "
                "Ensure it returns the necessary state or handlers."
            )

        return SkillResult.ok(
            {
                "hookName": hook_name,
                "validConvention": hook_name is not None,
                "issues": issues,
                "suggestions": suggestions,
                "passed": not issues,
            },
            {"analyzed_lines": len(code.split("\n"))},
        )
