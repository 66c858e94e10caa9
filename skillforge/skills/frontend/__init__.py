"""
Frontend skills

Code generators and analyzers targeting Next.js / React. ``FRONTEND_SKILLS``
lists them in catalog order.
"""

from skillforge.skills.base import BaseSkill
from skillforge.skills.frontend.infrastructure import (
    AuthGuardSkill,
    AuthSessionManagerSkill,
    ComponentOptimizerSkill,
    ThemeSwitcherSkill,
)
from skillforge.skills.frontend.logic import (
    AnalyzeHookLogicSkill,
    DataFetchingSkill,
    FormFactorySkill,
    InfiniteScrollSkill,
)
from skillforge.skills.frontend.routing import (
    RoutingMasterSkill,
    SearchParamsManagerSkill,
    SitemapGeneratorSkill,
)
from skillforge.skills.frontend.testing import (
    ComponentTestBuilderSkill,
    E2EFrontendBuilderSkill,
    HookTestGeneratorSkill,
)
from skillforge.skills.frontend.ui import (
    AiCopywriterSkill,
    FeedbackSystemSkill,
    ResponsiveLayoutSkill,
    ShadcnExpertSkill,
    SkeletonLoaderSkill,
    TableGeneratorSkill,
    ToastNotificationSkill,
    UiPolishSkill,
)

FRONTEND_SKILLS: list[type[BaseSkill]] = [
    AuthGuardSkill,
    AuthSessionManagerSkill,
    ComponentOptimizerSkill,
    ThemeSwitcherSkill,
    AnalyzeHookLogicSkill,
    DataFetchingSkill,
    FormFactorySkill,
    InfiniteScrollSkill,
    RoutingMasterSkill,
    SearchParamsManagerSkill,
    SitemapGeneratorSkill,
    ComponentTestBuilderSkill,
    E2EFrontendBuilderSkill,
    HookTestGeneratorSkill,
    AiCopywriterSkill,
    FeedbackSystemSkill,
    ResponsiveLayoutSkill,
    ShadcnExpertSkill,
    SkeletonLoaderSkill,
    TableGeneratorSkill,
    ToastNotificationSkill,
    UiPolishSkill,
]

__all__ = ["FRONTEND_SKILLS"]
