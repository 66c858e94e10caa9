"""
E2EFrontendBuilder Skill

Generates a Playwright test that visits a start URL and replays a list of
user interactions and assertions.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class E2EStep(SkillParams):
    action: Literal["click", "fill", "check", "assert_url", "assert_text"]
    selector: str | None = Field(default=None, description="CSS selector or role locator")
    value: str | None = Field(default=None, description="Value to fill or text to assert")


class E2EFrontendBuilderParams(SkillParams):
    test_name: str = Field(description="Name of the E2E test suite")
    start_url: str = Field(description="Initial URL to visit")
    steps: list[E2EStep] = Field(description="List of user interactions")


def _text(value: str | None) -> str:
    # a missing selector/value interpolates as "undefined"
    return "undefined" if value is None else value


def render_step(step: E2EStep) -> str:
    selector = _text(step.selector)
    value = _text(step.value)
    if step.action == "click":
        return f"    await page.click('{selector}');"
    if step.action == "fill":
        return f"    await page.fill('{selector}', '{value}');"
    if step.action == "check":
        return f"    await page.check('{selector}');"
    if step.action == "assert_url":
        return f"    await expect(page).toHaveURL(/{value}/);"
    return f"    await expect(page.locator('{selector}')).toContainText('{value}');"


class E2EFrontendBuilderSkill(BaseSkill[E2EFrontendBuilderParams]):
    name = "e2e_frontend_builder"
    description = "Generates Playwright E2E test scripts for user flows."
    category = "frontend.testing"
    params_model = E2EFrontendBuilderParams

    async def handle(self, params: E2EFrontendBuilderParams) -> SkillResult:
        steps = "\n".join(render_step(step) for step in params.steps)

        code = f"""import {{ test, expect }} from '@playwright/test';

test('{params.test_name}', async ({{ page }}) => {{
  await page.goto('{params.start_url}');

{steps}
}});
"""

        return SkillResult.ok(
            code, {"framework": "playwright", "browsers": ["chromium", "firefox", "webkit"]}
        )
