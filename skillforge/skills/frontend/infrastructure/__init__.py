"""Auth, rendering strategy and theming skills for Next.js"""

from skillforge.skills.frontend.infrastructure.auth_guard import AuthGuardSkill
from skillforge.skills.frontend.infrastructure.auth_session_manager import AuthSessionManagerSkill
from skillforge.skills.frontend.infrastructure.component_optimizer import ComponentOptimizerSkill
from skillforge.skills.frontend.infrastructure.theme_switcher import ThemeSwitcherSkill

__all__ = [
    "AuthGuardSkill",
    "AuthSessionManagerSkill",
    "ComponentOptimizerSkill",
    "ThemeSwitcherSkill",
]
