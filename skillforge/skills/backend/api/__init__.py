"""NestJS API scaffolding skills"""

from skillforge.skills.backend.api.generate_nest_resource import GenerateNestResourceSkill
from skillforge.skills.backend.api.rate_limit_setup import RateLimitSetupSkill
from skillforge.skills.backend.api.swagger_doc_helper import SwaggerDocHelperSkill
from skillforge.skills.backend.api.versioning_manager import VersioningManagerSkill

__all__ = [
    "GenerateNestResourceSkill",
    "RateLimitSetupSkill",
    "SwaggerDocHelperSkill",
    "VersioningManagerSkill",
]
