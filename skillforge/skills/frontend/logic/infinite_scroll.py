"""
InfiniteScroll Skill

Generates a ``useInfiniteQuery`` hook that loads the next page when a
sentinel element enters the viewport, plus an example list component.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import quoted


class InfiniteScrollParams(SkillParams):
    hook_name: str = Field(default="useInfiniteData")
    query_key: list[str]
    fetcher_path: str = Field(description="Import path for fetcher function")
    page_param_name: str = Field(default="page")


class InfiniteScrollSkill(BaseSkill[InfiniteScrollParams]):
    name = "infinite_scroll_builder"
    description = "Generates infinite scroll hook with React Query and Intersection Observer."
    category = "frontend.logic"
    params_model = InfiniteScrollParams

    async def handle(self, params: InfiniteScrollParams) -> SkillResult:
        hook = params.hook_name

        code = f"""import {{ useInfiniteQuery }} from "@tanstack/react-query";
import {{ useEffect, useRef, useCallback }} from "react";
import {{ fetchData }} from "{params.fetcher_path}";

interface UseInfiniteOptions {{
  enabled?: boolean;
}}

export function {hook}(options: UseInfiniteOptions = {{}}) {{
  const observerRef = useRef<IntersectionObserver | null>(null);
  const loadMoreRef = useRef<HTMLDivElement | null>(null);

  const query = useInfiniteQuery({{
    queryKey: [{quoted(params.query_key, quote='"')}],
    queryFn: ({{ pageParam = 1 }}) => fetchData({{ {params.page_param_name}: pageParam }}),
    getNextPageParam: (lastPage, pages) => {{
      if (lastPage.hasMore) return pages.length + 1;
      return undefined;
    }},
    initialPageParam: 1,
    enabled: options.enabled ?? true,
  }});

  const {{ fetchNextPage, hasNextPage, isFetchingNextPage }} = query;

  const handleObserver = useCallback(
    (entries: IntersectionObserverEntry[]) => {{
      const [target] = entries;
      if (target.isIntersecting && hasNextPage && !isFetchingNextPage) {{
        fetchNextPage();
      }}
    }},
    [fetchNextPage, hasNextPage, isFetchingNextPage]
  );

  useEffect(() => {{
    const element = loadMoreRef.current;
    if (!element) return;

    observerRef.current = new IntersectionObserver(handleObserver, {{
      root: null,
      rootMargin: "100px",
      threshold: 0.1,
    }});

    observerRef.current.observe(element);

    return () => {{
      if (observerRef.current) {{
        observerRef.current.disconnect();
      }}
    }};
  }}, [handleObserver]);

  const data = query.data?.pages.flatMap((page) => page.items) ?? [];

  return {{
    ...query,
    data,
    loadMoreRef,
    hasNextPage,
    isFetchingNextPage,
  }};
}}

// Usage example component
export function InfiniteList() {{
  const {{ data, isLoading, loadMoreRef, isFetchingNextPage }} = {hook}();

  if (isLoading) return <div>Loading...</div>;

  return (
    <div className="space-y-4">
      {{data.map((item) => (
        <div key={{item.id}}>{{item.name}}</div>
      ))}}

      <div ref={{loadMoreRef}} className="py-4 text-center">
        {{isFetchingNextPage && <span>Loading more...</span>}}
      </div>
    </div>
  );
}}
"""

        return SkillResult.ok(code, {"hook_name": hook, "query_key": list(params.query_key)})
