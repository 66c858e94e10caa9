"""
DataFetching Skill

Generates a TanStack Query hook: ``useQuery`` for reads, or ``useMutation``
invalidating the same key for writes.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import capitalize, quoted


class DataFetchingParams(SkillParams):
    query_key: list[str] = Field(
        description='The unique key for the query cache (e.g. ["users", "list"])'
    )
    fetcher_function: str = Field(
        description='Name of the async function handling the request (e.g. "fetchUsers")'
    )
    type: Literal["query", "mutation"] = Field(
        description='Type of hook: "query" for fetching, "mutation" for modifying data'
    )


class DataFetchingSkill(BaseSkill[DataFetchingParams]):
    name = "generate_react_query_hook"
    description = "Generates robust TanStack Query hooks for state management and caching."
    category = "frontend.logic"
    params_model = DataFetchingParams

    async def handle(self, params: DataFetchingParams) -> SkillResult:
        fetcher = params.fetcher_function
        hook = f"use{capitalize(fetcher)}"
        key = quoted(params.query_key)

        if params.type == "query":
            code = f"""
import {{ useQuery }} from '@tanstack/react-query';
import {{ {fetcher} }} from '@/services/api';

export const {hook} = () => {{
  return useQuery({{
    queryKey: [{key}],
    queryFn: {fetcher},
    staleTime: 5 * 60 * 1000, // 5 minutes
  }});
}};
"""
            strategy = "stale-while-revalidate"
        else:
            code = f"""
import {{ useMutation, useQueryClient }} from '@tanstack/react-query';
import {{ {fetcher} }} from '@/services/api';

export const {hook}Mutation = () => {{
  const queryClient = useQueryClient();

  return useMutation({{
    mutationFn: {fetcher},
    onSuccess: () => {{
      // Invalidate relevant queries to refetch fresh data
      queryClient.invalidateQueries({{ queryKey: [{key}] }});
    }},
  }});
}};
"""
            strategy = "optimistic-ui-ready"

        return SkillResult.ok(
            code, {"cache_strategy": strategy, "dependencies": ["@tanstack/react-query"]}
        )
