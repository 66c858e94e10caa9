"""Tests for the frontend UI and testing skills."""

import pytest

from skillforge.skills.frontend.testing import (
    ComponentTestBuilderSkill,
    E2EFrontendBuilderSkill,
    HookTestGeneratorSkill,
)
from skillforge.skills.frontend.testing.component_test_builder import format_props
from skillforge.skills.frontend.ui import (
    AiCopywriterSkill,
    FeedbackSystemSkill,
    ResponsiveLayoutSkill,
    ShadcnExpertSkill,
    SkeletonLoaderSkill,
    TableGeneratorSkill,
    ToastNotificationSkill,
    UiPolishSkill,
)
from skillforge.skills.frontend.ui.ai_copywriter_ui import (
    DEFAULT_COPY,
    EMPTY_STATE,
    EMPTY_STATE_GEN_Z,
    HERO_MEDICAL,
    pick_copy,
)
from skillforge.skills.frontend.ui.ui_polish import polish


class TestComponentTestBuilder:
    def test_format_props(self):
        assert format_props({"label": "Save", "primary": True, "size": 2, "off": False}) == (
            'label="Save" primary size={2} off={false}'
        )

    @pytest.mark.asyncio
    async def test_accessibility_uses_label(self):
        result = await ComponentTestBuilderSkill().execute(
            {"componentName": "Button", "props": {"label": "Save"}, "testScenarios": ["accessibility"]}
        )

        assert "screen.getByRole('button', { name: /Save/i })" in result.data
        assert "import { Button } from './Button';" in result.data

    @pytest.mark.asyncio
    async def test_accessibility_falls_back_to_component_name(self):
        result = await ComponentTestBuilderSkill().execute(
            {"componentName": "Toggle", "props": {"label": ""}, "testScenarios": ["accessibility"]}
        )

        assert "{ name: /Toggle/i }" in result.data

    @pytest.mark.asyncio
    async def test_all_scenarios(self):
        result = await ComponentTestBuilderSkill().execute(
            {"componentName": "Button", "testScenarios": ["render", "click", "disabled"]}
        )

        assert "it('renders correctly'" in result.data
        assert "it('handles click events'" in result.data
        assert "it('is disabled when prop is passed'" in result.data
        assert "has accessible name" not in result.data


class TestE2EFrontendBuilder:
    @pytest.mark.asyncio
    async def test_steps_rendered_in_order(self):
        result = await E2EFrontendBuilderSkill().execute(
            {
                "testName": "checkout",
                "startUrl": "/cart",
                "steps": [
                    {"action": "click", "selector": "#buy"},
                    {"action": "assert_url", "value": "success"},
                    {"action": "assert_text", "selector": "h1", "value": "Thanks"},
                ],
            }
        )

        code = result.data
        assert "test('checkout', async ({ page }) => {" in code
        assert "await page.goto('/cart');" in code
        assert code.index("page.click('#buy')") < code.index("toHaveURL(/success/)")
        assert "await expect(page.locator('h1')).toContainText('Thanks');" in code

    @pytest.mark.asyncio
    async def test_missing_value_renders_undefined(self):
        result = await E2EFrontendBuilderSkill().execute(
            {"testName": "t", "startUrl": "/", "steps": [{"action": "fill", "selector": "#q"}]}
        )

        assert "await page.fill('#q', 'undefined');" in result.data

    @pytest.mark.asyncio
    async def test_unknown_action_is_rejected(self):
        result = await E2EFrontendBuilderSkill().execute(
            {"testName": "t", "startUrl": "/", "steps": [{"action": "hover"}]}
        )

        assert result.success is False
        assert result.errors[0].loc == "steps.0.action"


class TestHookTestGenerator:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "initial_props, expected_call",
        [
            (None, "useCounter()"),
            (0, "useCounter()"),
            ("", "useCounter()"),
            (5, "useCounter(5)"),
            ({"start": 1}, 'useCounter({"start":1})'),
            ([], "useCounter([])"),
        ],
    )
    async def test_initial_props(self, initial_props, expected_call: str):
        result = await HookTestGeneratorSkill().execute(
            {"hookName": "useCounter", "initialProps": initial_props}
        )

        assert f"renderHook(() => {expected_call})" in result.data

    @pytest.mark.asyncio
    async def test_action_tests(self):
        result = await HookTestGeneratorSkill().execute(
            {"hookName": "useCounter", "actions": ["increment", "reset"]}
        )

        assert "it('should handle increment correctly'" in result.data
        assert "result.current.reset();" in result.data


class TestAiCopywriter:
    @pytest.mark.parametrize(
        "context, audience, expected",
        [
            ("Empty State for Orders", "General", EMPTY_STATE),
            ("EMPTY cart", "Gen Z users", EMPTY_STATE_GEN_Z),
            ("empty cart", "gen z", EMPTY_STATE),
            ("Hero Section", "Medical", HERO_MEDICAL),
            ("Footer", "Medical", DEFAULT_COPY),
        ],
    )
    def test_pick_copy(self, context, audience, expected):
        assert pick_copy(context, audience) == expected

    @pytest.mark.asyncio
    async def test_returns_copy_fields(self):
        result = await AiCopywriterSkill().execute({"componentContext": "Hero Section for SaaS"})

        assert set(result.data) == {"title", "description", "cta"}
        assert result.metadata == {"tone": "General", "context": "Hero Section for SaaS"}


class TestFeedbackSystem:
    @pytest.mark.asyncio
    async def test_handler_and_skeleton(self):
        result = await FeedbackSystemSkill().execute(
            {"triggerAction": "handleSave", "successMessage": "Saved!", "errorMessage": "Oops"}
        )

        assert "const handleSave = async () => {" in result.data["handler"]
        assert 'toast.success("Saved!");' in result.data["handler"]
        assert 'toast.error("Oops", {' in result.data["handler"]
        assert "export function LoadingSave()" in result.data["skeleton"]


class TestResponsiveLayout:
    @pytest.mark.asyncio
    async def test_constraints_line(self):
        without = await ResponsiveLayoutSkill().execute({"componentDescription": "Panel"})
        with_constraints = await ResponsiveLayoutSkill().execute(
            {"componentDescription": "Panel", "constraints": ["sin scroll horizontal", "touch"]}
        )

        assert len(without.data.splitlines()) == 3
        assert with_constraints.data.endswith("Restricciones respetadas: sin scroll horizontal, touch")


class TestShadcnExpert:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("component_type", ["card", "form", "data-table", "modal"])
    async def test_component_types(self, component_type: str):
        result = await ShadcnExpertSkill().execute(
            {"componentType": component_type, "dataFields": ["name", "email"]}
        )

        assert result.data.startswith(f"// Shadcn {component_type} component\n// Fields: name, email\n")
        assert "Email" in result.data
        assert result.metadata == {"style": "shadcn/ui", "component": component_type}


class TestSkeletonLoader:
    @pytest.mark.asyncio
    async def test_table_rows_and_animation(self):
        result = await SkeletonLoaderSkill().execute(
            {"componentName": "OrdersSkeleton", "layout": "table", "itemCount": 4, "animated": False}
        )

        assert "export function OrdersSkeleton(" in result.data
        assert "count = 4" in result.data
        assert result.data.count('bg-muted/50 rounded') == 4
        assert "animate-pulse" not in result.data

    @pytest.mark.asyncio
    async def test_negative_count_is_rejected(self):
        result = await SkeletonLoaderSkill().execute({"componentName": "X", "itemCount": -1})

        assert result.success is False


class TestTableGenerator:
    @pytest.mark.asyncio
    async def test_zero_columns_renders(self):
        """An empty column list still produces a valid component with the id field"""
        result = await TableGeneratorSkill().execute({"tableName": "Empty", "columns": []})

        assert result.success is True
        assert "export function Empty({ data }: EmptyProps)" in result.data
        assert "accessorKey" not in result.data
        assert result.metadata["columns"] == 0

    @pytest.mark.asyncio
    async def test_sortable_and_plain_columns(self):
        result = await TableGeneratorSkill().execute(
            {
                "tableName": "Users",
                "columns": [
                    {"key": "email", "label": "Email"},
                    {"key": "role", "label": "Role", "sortable": False},
                ],
                "withRowActions": False,
                "withPagination": False,
            }
        )

        code = result.data
        assert 'accessorKey: "email",' in code
        assert 'header: "Role",' in code
        assert "column.toggleSorting" in code
        assert 'id: "actions"' not in code
        assert "getPaginationRowModel()" not in code
        assert result.metadata["features"] == {
            "with_pagination": False,
            "with_search": True,
            "with_row_actions": False,
        }


class TestToastNotification:
    @pytest.mark.asyncio
    async def test_usage_example_is_always_generated(self):
        result = await ToastNotificationSkill().execute({"generateHook": False})

        assert list(result.data) == ["toast-provider.tsx", "usage-example.tsx"]

    @pytest.mark.asyncio
    async def test_hot_toast_provider(self):
        result = await ToastNotificationSkill().execute({"provider": "react-hot-toast"})

        assert "react-hot-toast" in result.data["toast-provider.tsx"]
        assert result.metadata["generated_files"] == list(result.data)


class TestUiPolish:
    def test_polish_adds_import_and_hover(self):
        code, improvements = polish('<button className="btn">Go</button>')

        assert code.startswith("import { Sparkles, ArrowRight } from 'lucide-react';\n")
        assert 'className="btn hover:opacity-90 transition-opacity"' in code
        assert len(improvements) == 2

    def test_polish_keeps_existing_hover(self):
        source = "import { X } from 'lucide-react';\n<a className=\"hover:underline\" />"
        code, improvements = polish(source)

        assert code == source
        assert improvements == []

    @pytest.mark.asyncio
    async def test_skill_metadata(self):
        result = await UiPolishSkill().execute({"componentCode": "<div />", "context": "Card"})

        assert result.metadata == {
            "context": "Card",
            "improvements": ["Added Lucide React icons import"],
        }
