"""
SearchParamsManager Skill

Generates ``useUpdateSearchParams``, a hook for reading and updating URL
search parameters in Next.js without a reload.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class SearchParamsManagerParams(SkillParams):
    # accepted as usage context, not rendered
    params_to_update: dict[str, str] | None = Field(
        default=None,
        description="Example params to demonstrate usage or initial filtering values.",
    )
    behavior: Literal["push", "replace"] = Field(
        default="replace",
        description="Navigation behavior: push to history or replace current entry.",
    )


class SearchParamsManagerSkill(BaseSkill[SearchParamsManagerParams]):
    name = "search_params_manager"
    description = (
        "Generates a secure custom hook for managing URL search parameters "
        "(filtering, sorting) in Next.js."
    )
    category = "frontend.routing"
    params_model = SearchParamsManagerParams

    async def handle(self, params: SearchParamsManagerParams) -> SkillResult:
        behavior = params.behavior

        code = f"""import {{ useSearchParams, usePathname, useRouter }} from 'next/navigation';
import {{ useCallback }} from 'react';

export function useUpdateSearchParams() {{
  const router = useRouter();
  const pathname = usePathname();
  const searchParams = useSearchParams();

  // Get a specific param
  const getQuery = useCallback((name: string) => {{
    return searchParams.get(name);
  }}, [searchParams]);

  // Update URL params without reloading
  const setQuery = useCallback((name: string, value: string | null) => {{
    const params = new URLSearchParams(searchParams.toString());

    if (value === null || value === '') {{
      params.delete(name);
    }} else {{
      params.set(name, value);
    }}

    const queryString = params.toString();
    const newUrl = queryString ? `${{pathname}}?${{queryString}}` : pathname;

    router.{behavior}(newUrl, {{ scroll: false }});
  }}, [searchParams, pathname, router]);

  // Batch update multiple params
  const setQueries = useCallback((updates: Record<string, string | null>) => {{
    const params = new URLSearchParams(searchParams.toString());

    Object.entries(updates).forEach(([name, value]) => {{
      if (value === null || value === '') {{
        params.delete(name);
      }} else {{
        params.set(name, value);
      }}
    }});

    const queryString = params.toString();
    const newUrl = queryString ? `${{pathname}}?${{queryString}}` : pathname;

    router.{behavior}(newUrl, {{ scroll: false }});
  }}, [searchParams, pathname, router]);

  return {{ getQuery, setQuery, setQueries, searchParams }};
}}
"""

        return SkillResult.ok(
            code, {"behavior": behavior, "hook_name": "useUpdateSearchParams"}
        )
