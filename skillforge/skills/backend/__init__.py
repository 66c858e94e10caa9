"""
Backend skills

Code generators targeting NestJS services. ``BACKEND_SKILLS`` lists them in
catalog order.
"""

from skillforge.skills.backend.api import (
    GenerateNestResourceSkill,
    RateLimitSetupSkill,
    SwaggerDocHelperSkill,
    VersioningManagerSkill,
)
from skillforge.skills.backend.database import EntityCreatorSkill, MigrationExpertSkill
from skillforge.skills.backend.infrastructure import (
    CacheManagerSkill,
    EmailServiceSkill,
    HealthCheckBuilderSkill,
    LoggerProviderSkill,
    WebSocketGatewaySkill,
)
from skillforge.skills.backend.integrations import GoogleOAuthSkill, S3UploadSkill
from skillforge.skills.backend.logic import (
    FileUploadManagerSkill,
    GeminiIntegrationSkill,
    MercadoPagoIntegrationSkill,
)
from skillforge.skills.backend.scheduling import CronJobSchedulerSkill
from skillforge.skills.backend.security import (
    AccessListManagerSkill,
    RoleGuardGeneratorSkill,
    TokenBlacklistSkill,
)
from skillforge.skills.backend.testing import (
    E2ETestBuilderSkill,
    LoadTestConfigSkill,
    UnitTestGeneratorSkill,
)
from skillforge.skills.base import BaseSkill

BACKEND_SKILLS: list[type[BaseSkill]] = [
    GenerateNestResourceSkill,
    RateLimitSetupSkill,
    SwaggerDocHelperSkill,
    VersioningManagerSkill,
    EntityCreatorSkill,
    MigrationExpertSkill,
    CacheManagerSkill,
    EmailServiceSkill,
    HealthCheckBuilderSkill,
    LoggerProviderSkill,
    WebSocketGatewaySkill,
    GoogleOAuthSkill,
    S3UploadSkill,
    FileUploadManagerSkill,
    GeminiIntegrationSkill,
    MercadoPagoIntegrationSkill,
    CronJobSchedulerSkill,
    AccessListManagerSkill,
    RoleGuardGeneratorSkill,
    TokenBlacklistSkill,
    E2ETestBuilderSkill,
    LoadTestConfigSkill,
    UnitTestGeneratorSkill,
]

__all__ = ["BACKEND_SKILLS"]
