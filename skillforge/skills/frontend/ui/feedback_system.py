"""
FeedbackSystem Skill

Wraps an async UI action with sonner success/error toasts and pairs it with
a shadcn/ui skeleton for the loading state.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class FeedbackSystemParams(SkillParams):
    trigger_action: str = Field(
        description='The action triggering the feedback (e.g., "handleSave")'
    )
    success_message: str = Field(description="Message to show on success")
    error_message: str = Field(description="Message to show on error")


def _handler(action: str, success_message: str, error_message: str) -> str:
    return f"""
import {{ toast }} from "sonner";

const {action} = async () => {{
  try {{
    // ... await action()
    toast.success("{success_message}");
  }} catch (error) {{
    console.error(error);
    toast.error("{error_message}", {{
      description: "Please check your connection and try again.",
    }});
  }}
}};
"""


def _skeleton(action: str) -> str:
    # only the first "handle" is dropped: handleSave -> LoadingSave
    name = action.replace("handle", "", 1)
    return f"""
import {{ Skeleton }} from "@/components/ui/skeleton";

export function Loading{name}() {{
  return (
    <div className="flex flex-col space-y-3">
      <Skeleton className="h-[125px] w-[250px] rounded-xl" />
      <div className="space-y-2">
        <Skeleton className="h-4 w-[250px]" />
        <Skeleton className="h-4 w-[200px]" />
      </div>
    </div>
  )
}}
"""


class FeedbackSystemSkill(BaseSkill[FeedbackSystemParams]):
    name = "generate_feedback_system"
    description = (
        "Integrates feedback loops (Toasts) and loading states (Skeletons) for better UX."
    )
    category = "frontend.ui"
    params_model = FeedbackSystemParams

    async def handle(self, params: FeedbackSystemParams) -> SkillResult:
        data = {
            "handler": _handler(
                params.trigger_action, params.success_message, params.error_message
            ),
            "skeleton": _skeleton(params.trigger_action),
        }
        return SkillResult.ok(
            data,
            {
                "library": "sonner + shadcn/skeleton",
                "ux_optimizations": ["error-handling", "loading-state"],
            },
        )
