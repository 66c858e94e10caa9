"""Frontend test scaffolding skills"""

from skillforge.skills.frontend.testing.component_test_builder import ComponentTestBuilderSkill
from skillforge.skills.frontend.testing.e2e_frontend_builder import E2EFrontendBuilderSkill
from skillforge.skills.frontend.testing.hook_test_generator import HookTestGeneratorSkill

__all__ = [
    "ComponentTestBuilderSkill",
    "E2EFrontendBuilderSkill",
    "HookTestGeneratorSkill",
]
