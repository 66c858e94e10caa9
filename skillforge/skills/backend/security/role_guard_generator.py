"""
RoleGuardGenerator Skill

Generates role-based access control for NestJS: a string enum of roles, a
``@Roles`` decorator and a ``RolesGuard`` reading the decorator metadata.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class RoleGuardGeneratorParams(SkillParams):
    roles_enum_name: str = Field(
        default="UserRole", description="Name of the role enum, e.g. UserRole, AppRoles"
    )
    default_roles: list[str] = Field(
        default_factory=lambda: ["admin", "user"],
        description="List of roles to include in the enum",
    )
    jwt_payload_type: str = Field(
        default="JwtPayload", description="The interface name for JWT payload"
    )


def _enum(enum_name: str, roles: list[str]) -> str:
    members = "\n".join(f"  {role.upper()} = '{role}'," for role in roles)
    return f"""export enum {enum_name} {{
{members}
}}
"""


def _decorator(enum_name: str) -> str:
    return f"""import {{ SetMetadata }} from '@nestjs/common';
import {{ {enum_name} }} from './roles.enum';

export const ROLES_KEY = 'roles';
export const Roles = (...roles: {enum_name}[]) => SetMetadata(ROLES_KEY, roles);
"""


def _guard(enum_name: str, payload_type: str) -> str:
    return f"""import {{ Injectable, CanActivate, ExecutionContext, ForbiddenException }} from '@nestjs/common';
import {{ Reflector }} from '@nestjs/core';
import {{ ROLES_KEY, {enum_name} }} from './roles.decorator';
import {{ {payload_type} }} from '../auth/interfaces/jwt-payload.interface'; // Adjust path as needed

@Injectable()
export class RolesGuard implements CanActivate {{
  constructor(private reflector: Reflector) {{}}

  canActivate(context: ExecutionContext): boolean {{
    const requiredRoles = this.reflector.getAllAndOverride<{enum_name}[]>(ROLES_KEY, [
      context.getHandler(),
      context.getClass(),
    ]);

    if (!requiredRoles) {{
      return true; // No roles required, access granted (or rely on jwt guard)
    }}

    const {{ user }} = context.switchToHttp().getRequest();
    if (!user) {{
        throw new ForbiddenException('No user attached to request. Ensure JwtAuthGuard is running before RolesGuard.');
    }}

    // Logic: User must have at least one of the required roles
    // Adjust 'user.role' based on your actual JWT structure
    const hasRole = requiredRoles.some((role) => user.role === role);

    return hasRole;
  }}
}}
"""


class RoleGuardGeneratorSkill(BaseSkill[RoleGuardGeneratorParams]):
    name = "role_guard_generator"
    description = "Generates NestJS RolesGuard, Decorator, and Enum for RBAC."
    category = "backend.security"
    params_model = RoleGuardGeneratorParams

    async def handle(self, params: RoleGuardGeneratorParams) -> SkillResult:
        files = {
            "roles.enum.ts": _enum(params.roles_enum_name, params.default_roles),
            "roles.decorator.ts": _decorator(params.roles_enum_name),
            "roles.guard.ts": _guard(params.roles_enum_name, params.jwt_payload_type),
        }
        return SkillResult.ok(
            files, {"guard_name": "RolesGuard", "strategies": ["jwt", "reflector"]}
        )
