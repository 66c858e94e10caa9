"""
RateLimitSetup Skill

Generates a global RateLimiterModule using @nestjs/throttler.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class RateLimitSetupParams(SkillParams):
    ttl: int = Field(default=60, ge=1, description="Time to live (seconds)")
    limit: int = Field(default=10, ge=1, description="Max number of requests within TTL")


class RateLimitSetupSkill(BaseSkill[RateLimitSetupParams]):
    name = "rate_limit_setup"
    description = "Generates RateLimiterModule configuration using @nestjs/throttler."
    category = "backend.api"
    params_model = RateLimitSetupParams

    async def handle(self, params: RateLimitSetupParams) -> SkillResult:
        code = f"""import {{ Module }} from '@nestjs/common';
import {{ APP_GUARD }} from '@nestjs/core';
import {{ ThrottlerModule, ThrottlerGuard }} from '@nestjs/throttler';

@Module({{
  imports: [
    ThrottlerModule.forRoot([{{
      ttl: {params.ttl},
      limit: {params.limit},
    }}]),
  ],
  providers: [
    {{
      provide: APP_GUARD,
      useClass: ThrottlerGuard,
    }},
  ],
}})
export class RateLimiterModule {{}}

// To override on specific controllers/methods:
// @SkipThrottle()
// @Throttle({{ default: {{ limit: 3, ttl: 60 }} }})
"""
        return SkillResult.ok(
            code,
            {
                "dependencies": ["@nestjs/throttler"],
                "default_config": {"ttl": params.ttl, "limit": params.limit},
            },
        )
