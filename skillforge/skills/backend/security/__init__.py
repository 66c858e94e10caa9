"""Access control skills"""

from skillforge.skills.backend.security.access_list_manager import AccessListManagerSkill
from skillforge.skills.backend.security.role_guard_generator import RoleGuardGeneratorSkill
from skillforge.skills.backend.security.token_blacklist import TokenBlacklistSkill

__all__ = [
    "AccessListManagerSkill",
    "RoleGuardGeneratorSkill",
    "TokenBlacklistSkill",
]
