"""
AuthGuard Skill

Generates next-auth middleware that redirects anonymous users to the login
page and users lacking a role to ``/unauthorized``.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import js_json


class AuthGuardParams(SkillParams):
    protected_routes: dict[str, list[str]] = Field(
        description=(
            "Map of path prefixes to allowed roles. Key is folder/path, Value is array of roles."
        )
    )


def _route_check(path: str, roles: list[str]) -> str:
    return f"""
    if (req.nextUrl.pathname.startsWith('{path}')) {{
      if (!token || !{js_json(roles)}.includes(token.role as string)) {{
         return NextResponse.redirect(new URL('/unauthorized', req.url));
      }}
    }}"""


class AuthGuardSkill(BaseSkill[AuthGuardParams]):
    name = "generate_auth_guard"
    description = "Generates secure Next.js middleware for role-based route protection."
    category = "frontend.infrastructure"
    params_model = AuthGuardParams

    async def handle(self, params: AuthGuardParams) -> SkillResult:
        routes = params.protected_routes
        checks = "\n".join(_route_check(path, roles) for path, roles in routes.items())
        matcher = ", ".join(f"'{path}/:path*'" for path in routes)

        code = f"""
import {{ withAuth }} from "next-auth/middleware";
import {{ NextResponse }} from "next/server";

export default withAuth(
  function middleware(req) {{
    const token = req.nextauth.token;
    const isAuth = !!token;

    if (!isAuth) {{
        return NextResponse.redirect(new URL('/login', req.url));
    }}

{checks}

    return NextResponse.next();
  }},
  {{
    callbacks: {{
      authorized: ({{ token }}) => !!token,
    }},
  }}
);

export const config = {{
  matcher: [{matcher}],
}};
"""

        return SkillResult.ok(
            code, {"security_level": "role-based", "framework": "next-auth-v4-middleware"}
        )
