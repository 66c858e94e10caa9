"""
UiPolish Skill

Applies cosmetic upgrades to component source: a lucide-react icon import
and hover transitions on class names.
"""

import re

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult

LUCIDE_IMPORT = "import { Sparkles, ArrowRight } from 'lucide-react';\n"
CLASS_NAME = re.compile(r'className="([^"]+)"')
HOVER_CLASSES = "hover:opacity-90 transition-opacity"


class UiPolishParams(SkillParams):
    component_code: str = Field(description="The raw component code to polish")
    context: str = Field(
        description='Context of the component (e.g., "Submit Button", "Pricing Card")'
    )


def polish(code: str) -> tuple[str, list[str]]:
    """Return the polished code and the list of improvements applied."""
    improvements: list[str] = []

    if "lucide-react" not in code:
        code = LUCIDE_IMPORT + code
        improvements.append("Added Lucide React icons import")

    # skipped entirely once any hover: utility is present
    if 'className="' in code and "hover:" not in code:
        code = CLASS_NAME.sub(rf'className="\1 {HOVER_CLASSES}"', code)
        improvements.append("Added hover transition effects to elements")

    return code, improvements


class UiPolishSkill(BaseSkill[UiPolishParams]):
    name = "ui_polish"
    description = (
        "Enhances UI components with Lucide icons, hover states, and micro-interactions "
        "for a premium feel."
    )
    category = "frontend.ui"
    params_model = UiPolishParams

    async def handle(self, params: UiPolishParams) -> SkillResult:
        code, improvements = polish(params.component_code)
        return SkillResult.ok(code, {"context": params.context, "improvements": improvements})
