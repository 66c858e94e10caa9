"""
RoutingMaster Skill

Generates the App Router files for one Next.js route segment: page, loading
and error boundaries, plus an optional layout.
"""

import re

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import capitalize

_SEGMENT_PUNCTUATION = re.compile(r"[/\[\]()]")


class RoutingMasterParams(SkillParams):
    route_path: str = Field(
        description="The route path, e.g., /dashboard/settings, (auth)/login, or [id]"
    )
    is_dynamic: bool = Field(description="Whether this is a dynamic route segment")
    has_layout: bool = Field(description="Whether to include a layout.tsx file")


LOADING_PAGE = """export default function Loading() {
  return (
    <div className="flex items-center justify-center p-8">
      <div className="animate-spin rounded-full h-8 w-8 border-b-2 border-gray-900"></div>
    </div>
  );
}
"""

ERROR_PAGE = """'use client';

import { useEffect } from 'react';

export default function Error({
  error,
  reset,
}: {
  error: Error & { digest?: string };
  reset: () => void;
}) {
  useEffect(() => {
    console.error(error);
  }, [error]);

  return (
    <div className="p-4 border border-red-200 bg-red-50 rounded">
      <h2 className="text-red-700 font-bold">Something went wrong!</h2>
      <button
        onClick={() => reset()}
        className="mt-4 px-4 py-2 bg-red-600 text-white rounded hover:bg-red-700"
      >
        Try again
      </button>
    </div>
  );
}
"""


def component_name(route_path: str) -> str:
    """
    Derive the React component name from a route path

    "/dashboard/settings" -> "Settings", "[id]" -> "Id", "/" -> "Home"
    """
    parts = _SEGMENT_PUNCTUATION.sub(" ", route_path).strip().split(" ")
    return capitalize(parts[-1] or "Home")


def _page(name: str, route_path: str) -> str:
    return f"""export default function {name}Page({{ params }}: {{ params: {{ [key: string]: string }} }}) {{
  return (
    <div className="container mx-auto p-4">
      <h1 className="text-2xl font-bold mb-4">{name}</h1>
      <p>Welcome to the {route_path} page.</p>
    </div>
  );
}}
"""


def _layout(name: str) -> str:
    return f"""export default function {name}Layout({{
  children,
}}: {{
  children: React.ReactNode;
}}) {{
  return (
    <section className="dashboard-section">
      {{/* Add sidebar or header here if needed */}}
      {{children}}
    </section>
  );
}}
"""


class RoutingMasterSkill(BaseSkill[RoutingMasterParams]):
    name = "routing_master"
    description = (
        "Generates directory structure and essential files (page, layout, loading, error) "
        "for Next.js App Router."
    )
    category = "frontend.routing"
    params_model = RoutingMasterParams

    async def handle(self, params: RoutingMasterParams) -> SkillResult:
        name = component_name(params.route_path)

        files = {
            "page.tsx": _page(name, params.route_path),
            "loading.tsx": LOADING_PAGE,
            "error.tsx": ERROR_PAGE,
        }
        if params.has_layout:
            files["layout.tsx"] = _layout(name)

        return SkillResult.ok(
            files,
            {
                "route_structure": params.route_path,
                "is_dynamic": params.is_dynamic,
                "files_generated": list(files),
            },
        )
