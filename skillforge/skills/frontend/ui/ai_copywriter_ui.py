"""
AiCopywriter Skill

Produces title, description and call-to-action copy for UI placeholders from
the component context and audience tone, using fixed heuristics rather than
a language model.
"""

from typing import NamedTuple

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class Copy(NamedTuple):
    title: str
    description: str
    cta: str


DEFAULT_COPY = Copy("Welcome", "Please interact with the application.", "Click here")

EMPTY_STATE_GEN_Z = Copy(
    "Nothing to see here... yet! 👀",
    "Start your journey by adding your first item. It's gonna be epic.",
    "Let's Go 🚀",
)
EMPTY_STATE = Copy(
    "No Data Available",
    "It looks like you haven't created any records yet. "
    "Get started by clicking the button below.",
    "Create New",
)
HERO_MEDICAL = Copy(
    "Advanced Care for Modern Practice",
    "Streamline your veterinary operations with our state-of-the-art management suite.",
    "Book Demo",
)
HERO = Copy(
    "Supercharge Your Workflow",
    "The all-in-one platform to manage your business efficiently and effectively.",
    "Start Free Trial",
)


class AiCopywriterParams(SkillParams):
    component_context: str = Field(
        description='The UI component context (e.g. "Empty State for Orders", "Hero Section for SaaS")'
    )
    target_audience: str = Field(
        default="General",
        description='Target audience tone (e.g. "Professional", "Gen Z", "Medical")',
    )


def pick_copy(context: str, audience: str) -> Copy:
    # context match is case-insensitive, audience match is not
    context = context.lower()
    if "empty" in context:
        return EMPTY_STATE_GEN_Z if "Gen Z" in audience else EMPTY_STATE
    if "hero" in context:
        return HERO_MEDICAL if "Medical" in audience else HERO
    return DEFAULT_COPY


class AiCopywriterSkill(BaseSkill[AiCopywriterParams]):
    name = "ai_copywriter"
    description = (
        "Generates engaging, audience-tailored UI copy for placeholders and empty states."
    )
    category = "frontend.ui"
    params_model = AiCopywriterParams

    async def handle(self, params: AiCopywriterParams) -> SkillResult:
        copy = pick_copy(params.component_context, params.target_audience)
        return SkillResult.ok(
            copy._asdict(),
            {"tone": params.target_audience, "context": params.component_context},
        )
