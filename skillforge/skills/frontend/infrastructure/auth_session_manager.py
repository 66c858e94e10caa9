"""
AuthSessionManager Skill

Generates a persisted Zustand auth store whose logout follows a "clean
slate" strategy: reset state, clear storage, drop the axios auth header and
force a full-page redirect.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class AuthSessionManagerParams(SkillParams):
    store_name: str = Field(default="useAuthStore", description="Name of the Zustand store hook")
    login_path: str = Field(default="/login", description="Path to redirect after logout")
    axios_instance_path: str | None = Field(
        default=None,
        description="Import path for the axios instance (e.g., @/lib/axios) to clear headers",
    )
    user_type_import: str | None = Field(
        default=None, description="Import path for the User type (e.g., @/types/user)"
    )


class AuthSessionManagerSkill(BaseSkill[AuthSessionManagerParams]):
    name = "generate_auth_session_manager"
    description = (
        'Generates a robust Zustand Auth Store implementing the "Clean Slate" logout strategy '
        "(localStorage.clear, state reset, axios cleanup, and forced redirect)."
    )
    category = "frontend.infrastructure"
    params_model = AuthSessionManagerParams

    async def handle(self, params: AuthSessionManagerParams) -> SkillResult:
        axios_path = params.axios_instance_path
        if axios_path:
            axios_import = f"import api from '{axios_path}';"
            set_header = "api.defaults.headers.common['Authorization'] = `Bearer ${token}`;"
            clear_header = "delete api.defaults.headers.common['Authorization'];"
        else:
            axios_import = ""
            set_header = "// NOTE: Remember to set your axios default authorization header here"
            clear_header = "// NOTE: Remember to clear your axios default authorization header here"

        if params.user_type_import:
            user_type = f"import {{ User }} from '{params.user_type_import}';"
        else:
            user_type = "type User = any;"

        code = f"""
import {{ create }} from 'zustand';
import {{ persist, createJSONStorage }} from 'zustand/middleware';
{user_type}
{axios_import}

interface AuthState {{
  user: User | null;
  token: string | null;
  isAuthenticated: boolean;
  login: (user: User, token: string) => void;
  logout: () => void;
}}

export const {params.store_name} = create<AuthState>()(
  persist(
    (set) => ({{
      user: null,
      token: null,
      isAuthenticated: false,

      login: (user, token) => {{
        set({{ user, token, isAuthenticated: true }});
        // Set Axios Header
        {set_header}
      }},

      logout: () => {{
        // "Clean Slate" Strategy

        // 1. Clear Internal State
        set({{ user: null, token: null, isAuthenticated: false }});

        // 2. Clear Storage (Aggressive)
        // This ensures no stale keys (like 'auth-storage' or others) remain.
        localStorage.clear();

        // 3. Clear Axios Headers (Prevent stale token usage)
        {clear_header}

        // 4. Force Redirect
        // Using window.location.href ensures a full page refresh, clearing any in-memory react state variables.
        window.location.href = '{params.login_path}';
      }}
    }}),
    {{
      name: 'auth-storage', // key in localStorage
      storage: createJSONStorage(() => localStorage),
    }}
  )
);
"""

        return SkillResult.ok(
            code.strip(),
            {
                "description": "Robust Auth Store with Clean Slate Logout Strategy",
                "technologies": ["zustand", "localstorage"],
                "strategy": "clean-slate",
            },
        )
