"""
TokenBlacklist Skill

Generates JWT revocation on top of ``@nestjs/cache-manager``: a service that
blacklists tokens on logout, a guard that rejects them, and the Redis cache
module setup to paste into the auth module.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class TokenBlacklistParams(SkillParams):
    redis_host: str = Field(default="localhost", description="Redis host address")
    redis_port: int = Field(default=6379, ge=1, le=65535, description="Redis port")
    token_expiry_seconds: int = Field(
        default=3600,
        ge=1,
        description="Default expiry for blacklisted tokens (should match JWT expiry)",
    )


JWT_BLACKLIST_GUARD = """import { Injectable, CanActivate, ExecutionContext, UnauthorizedException } from '@nestjs/common';
import { AuthService } from './auth.service';

@Injectable()
export class JwtBlacklistGuard implements CanActivate {
  constructor(private authService: AuthService) {}

  async canActivate(context: ExecutionContext): Promise<boolean> {
    const request = context.switchToHttp().getRequest();
    const token = request.headers.authorization?.split(' ')[1];

    if (token) {
      const isBlacklisted = await this.authService.isBlacklisted(token);
      if (isBlacklisted) {
        throw new UnauthorizedException('Token has been revoked');
      }
    }

    // Continue to standard JWT signature check (usually handled by Passport strategy or subsequent guard)
    return true;
  }
}
"""


def _service(expiry_seconds: int) -> str:
    return f"""import {{ Injectable, Inject, UnauthorizedException }} from '@nestjs/common';
import {{ CACHE_MANAGER }} from '@nestjs/cache-manager';
import {{ Cache }} from 'cache-manager';

@Injectable()
export class AuthService {{
  constructor(@Inject(CACHE_MANAGER) private cacheManager: Cache) {{}}

  async logout(token: string) {{
    // Add token to blacklist with expiry
    // Key prefix: blacklist:token_signature
    await this.cacheManager.set(`blacklist:${{token}}`, true, {expiry_seconds} * 1000); // cache-manager v5 uses milliseconds usually, check version
  }}

  async isBlacklisted(token: string): Promise<boolean> {{
    const isListed = await this.cacheManager.get(`blacklist:${{token}}`);
    return !!isListed;
  }}
}}
"""


def _setup_instructions(host: str, port: int) -> str:
    return f"""
// In your AuthModule or AppModule, ensure you import CacheModule with Redis store
/*
import {{ CacheModule }} from '@nestjs/cache-manager';
import * as redisStore from 'cache-manager-redis-store';

@Module({{
  imports: [
    CacheModule.register({{
      store: redisStore,
      host: '{host}',
      port: {port},
    }}),
  ],
  providers: [AuthService, JwtBlacklistGuard],
  exports: [AuthService, JwtBlacklistGuard]
}})
*/
"""


class TokenBlacklistSkill(BaseSkill[TokenBlacklistParams]):
    name = "token_blacklist"
    description = "Generates logic for JWT revocation using Redis blacklist."
    category = "backend.security"
    params_model = TokenBlacklistParams

    async def handle(self, params: TokenBlacklistParams) -> SkillResult:
        files = {
            "auth.service.ts": _service(params.token_expiry_seconds),
            "jwt-blacklist.guard.ts": JWT_BLACKLIST_GUARD,
            "setup-instructions.txt": _setup_instructions(params.redis_host, params.redis_port),
        }
        return SkillResult.ok(
            files, {"integration": "Redis", "cache_manager": "nestjs/cache-manager"}
        )
