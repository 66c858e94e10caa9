"""Tests for the frontend infrastructure, logic and routing skills."""

import pytest

from skillforge.skills.frontend.infrastructure import (
    AuthGuardSkill,
    AuthSessionManagerSkill,
    ComponentOptimizerSkill,
    ThemeSwitcherSkill,
)
from skillforge.skills.frontend.logic import (
    AnalyzeHookLogicSkill,
    DataFetchingSkill,
    FormFactorySkill,
    InfiniteScrollSkill,
)
from skillforge.skills.frontend.routing import (
    RoutingMasterSkill,
    SearchParamsManagerSkill,
    SitemapGeneratorSkill,
)
from skillforge.skills.frontend.routing.routing_master import component_name


class TestAuthGuard:
    @pytest.mark.asyncio
    async def test_route_checks_and_matcher(self):
        result = await AuthGuardSkill().execute(
            {"protectedRoutes": {"/admin": ["admin"], "/reports": ["admin", "analyst"]}}
        )

        assert "if (req.nextUrl.pathname.startsWith('/admin'))" in result.data
        assert '!["admin","analyst"].includes(token.role as string)' in result.data
        assert "matcher: ['/admin/:path*', '/reports/:path*']," in result.data


class TestAuthSessionManager:
    def setup_method(self):
        self.skill = AuthSessionManagerSkill()

    @pytest.mark.asyncio
    async def test_defaults_use_placeholders(self):
        result = await self.skill.execute({})

        assert result.data.startswith("import { create } from 'zustand';")
        assert "type User = any;" in result.data
        assert "// NOTE: Remember to clear your axios default authorization header here" in result.data
        assert "window.location.href = '/login';" in result.data

    @pytest.mark.asyncio
    async def test_axios_and_user_type_imports(self):
        result = await self.skill.execute(
            {"axiosInstancePath": "@/lib/axios", "userTypeImport": "@/types/user", "storeName": "useSession"}
        )

        assert "import api from '@/lib/axios';" in result.data
        assert "import { User } from '@/types/user';" in result.data
        assert "delete api.defaults.headers.common['Authorization'];" in result.data
        assert "export const useSession = create<AuthState>()" in result.data


class TestComponentOptimizer:
    def setup_method(self):
        self.skill = ComponentOptimizerSkill()

    @pytest.mark.asyncio
    async def test_static_component_is_server(self):
        result = await self.skill.execute(
            {"code": "export const Title = () => <h1>Hi</h1>;", "fileName": "Title.tsx"}
        )

        assert result.data["recommendedType"] == "server"
        assert result.data["issues"] == []

    @pytest.mark.asyncio
    async def test_interactive_component_without_directive(self):
        code = "export function Counter() { const [n, setN] = useState(0); return <button onClick={() => setN(n + 1)} />; }"
        result = await self.skill.execute({"code": code, "fileName": "Counter.tsx"})

        assert result.data["recommendedType"] == "client"
        assert result.data["reasoning"] == [
            "Uses React hooks (state/effect)",
            "Uses event handlers (interactions)",
        ]
        assert len(result.data["issues"]) == 1

    @pytest.mark.asyncio
    async def test_static_component_marked_client(self):
        result = await self.skill.execute(
            {"code": "'use client'\nexport const Title = () => <h1>Hi</h1>;", "fileName": "Title.tsx"}
        )

        assert "appears to be static" in result.data["issues"][0]


class TestThemeSwitcher:
    @pytest.mark.asyncio
    async def test_toggle_is_optional(self):
        result = await ThemeSwitcherSkill().execute({"generateToggle": False, "storageKey": "ui-theme"})

        assert list(result.data) == ["theme-provider.tsx"]
        assert 'localStorage.getItem("ui-theme")' in result.data["theme-provider.tsx"]
        assert 'useState<Theme>("system")' in result.data["theme-provider.tsx"]


class TestAnalyzeHookLogic:
    def setup_method(self):
        self.skill = AnalyzeHookLogicSkill()

    @pytest.mark.asyncio
    async def test_clean_hook_passes(self):
        code = "export function useCounter() {\n  const [n, setN] = useState(0);\n  return { n, setN };\n}"
        result = await self.skill.execute({"code": code, "fileName": "useCounter.ts"})

        assert result.success is True
        assert result.data == {
            "hookName": "useCounter",
            "validConvention": True,
            "issues": [],
            "suggestions": [],
            "passed": True,
        }
        assert result.metadata == {"analyzed_lines": 4}

    @pytest.mark.asyncio
    async def test_problems_are_reported_not_failed(self):
        code = "function helper() {\n  useEffect(() => { load() });\n  items.filter(Boolean).map(String);\n}"
        result = await self.skill.execute({"code": code, "fileName": "helper.ts"})

        assert result.success is True
        assert result.data["hookName"] is None
        assert result.data["validConvention"] is False
        assert result.data["passed"] is False
        assert len(result.data["issues"]) == 3
        assert len(result.data["suggestions"]) == 1


class TestDataFetching:
    def setup_method(self):
        self.skill = DataFetchingSkill()

    @pytest.mark.asyncio
    async def test_query_hook(self):
        result = await self.skill.execute(
            {"queryKey": ["users", "list"], "fetcherFunction": "fetchUsers", "type": "query"}
        )

        assert "export const useFetchUsers = () => {" in result.data
        assert "queryKey: ['users', 'list']," in result.data
        assert result.metadata["cache_strategy"] == "stale-while-revalidate"

    @pytest.mark.asyncio
    async def test_mutation_hook(self):
        result = await self.skill.execute(
            {"queryKey": ["users"], "fetcherFunction": "createUser", "type": "mutation"}
        )

        assert "export const useCreateUserMutation = () => {" in result.data
        assert "queryClient.invalidateQueries({ queryKey: ['users'] });" in result.data
        assert result.metadata["cache_strategy"] == "optimistic-ui-ready"

    @pytest.mark.asyncio
    async def test_type_is_required(self):
        result = await self.skill.execute({"queryKey": ["users"], "fetcherFunction": "f"})

        assert [e.loc for e in result.errors] == ["type"]


class TestFormFactory:
    @pytest.mark.asyncio
    async def test_fields_alias_and_rules(self):
        skill = FormFactorySkill()
        assert "fields" in skill.parameters["required"]

        result = await skill.execute(
            {
                "fields": [
                    {"name": "email", "type": "email", "label": "Email"},
                    {"name": "age", "type": "number", "label": "Age"},
                    {"name": "name", "type": "text", "label": "Name"},
                ],
                "submitEndpoint": "/api/users",
            }
        )

        code = result.data
        assert 'email: z.string().email({ message: "Invalid email address" }),' in code
        assert 'age: z.coerce.number().min(0, { message: "Age must be positive" }),' in code
        assert 'name: z.string().min(2, { message: "Name must be at least 2 characters" }),' in code
        assert 'console.log("Submitting to /api/users", values)' in code
        assert result.metadata == {"generated_fields": 3, "validation": "zod"}


class TestInfiniteScroll:
    @pytest.mark.asyncio
    async def test_hook_rendering(self):
        result = await InfiniteScrollSkill().execute(
            {"hookName": "useFeed", "queryKey": ["feed", "home"], "fetcherPath": "@/api/feed", "pageParamName": "cursor"}
        )

        assert "export function useFeed(options" in result.data
        assert 'queryKey: ["feed", "home"],' in result.data
        assert "fetchData({ cursor: pageParam })" in result.data
        assert result.metadata == {"hook_name": "useFeed", "query_key": ["feed", "home"]}


class TestRoutingMaster:
    @pytest.mark.parametrize(
        "route_path, expected",
        [
            ("/dashboard/settings", "Settings"),
            ("[id]", "Id"),
            ("(auth)/login", "Login"),
            ("/", "Home"),
            ("/blog/[slug]", "Slug"),
        ],
    )
    def test_component_name(self, route_path: str, expected: str):
        assert component_name(route_path) == expected

    @pytest.mark.asyncio
    async def test_layout_is_optional(self):
        skill = RoutingMasterSkill()
        with_layout = await skill.execute({"routePath": "/shop", "isDynamic": False, "hasLayout": True})
        without_layout = await skill.execute({"routePath": "/shop", "isDynamic": False, "hasLayout": False})

        assert list(with_layout.data) == ["page.tsx", "loading.tsx", "error.tsx", "layout.tsx"]
        assert "layout.tsx" not in without_layout.data
        assert "export default function ShopPage(" in with_layout.data["page.tsx"]
        assert with_layout.metadata["files_generated"] == list(with_layout.data)


class TestSearchParamsManager:
    @pytest.mark.asyncio
    async def test_behavior(self):
        replace = await SearchParamsManagerSkill().execute({})
        push = await SearchParamsManagerSkill().execute({"behavior": "push"})

        assert "router.replace(newUrl, { scroll: false });" in replace.data
        assert "router.push(newUrl, { scroll: false });" in push.data
        assert push.metadata == {"behavior": "push", "hook_name": "useUpdateSearchParams"}


class TestSitemapGenerator:
    def setup_method(self):
        self.skill = SitemapGeneratorSkill()

    @pytest.mark.asyncio
    async def test_trailing_slash_is_stripped(self):
        result = await self.skill.execute(
            {"baseUrl": "https://mysite.com/", "dynamicRoutes": ["/blog", "/products"]}
        )

        sitemap = result.data["app/sitemap.ts"]
        assert "const baseUrl = 'https://mysite.com';" in sitemap
        assert '["/blog","/products"].flatMap' in sitemap
        assert "const baseUrl = 'https://mysite.com';" in result.data["app/robots.ts"]
        assert result.metadata == {"base_url": "https://mysite.com/", "sitemap_type": "dynamic"}

    @pytest.mark.asyncio
    async def test_invalid_base_url(self):
        result = await self.skill.execute({"baseUrl": "mysite", "dynamicRoutes": []})

        assert result.success is False
        assert result.errors[0].loc == "baseUrl"
        assert "Invalid URL: mysite" in result.errors[0].message
