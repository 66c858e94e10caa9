"""
SkeletonLoader Skill

Generates a Tailwind skeleton component for a card, table, list, profile or
form layout, plus reusable line/circle/box primitives.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult

Layout = Literal["card", "table", "list", "profile", "form"]

ROW_SEPARATOR = "\n      "


class SkeletonLoaderParams(SkillParams):
    component_name: str = Field(description="Skeleton component name")
    layout: Layout = Field(default="card")
    item_count: int = Field(default=3, ge=0, description="Number of skeleton items")
    animated: bool = Field(default=True)


def _repeat(block: str, count: int) -> str:
    return ROW_SEPARATOR.join([block] * count)


def render_layout(layout: Layout, count: int, pulse: str) -> str:
    if layout == "card":
        return f"""<div className="rounded-lg border p-4 space-y-3">
      <div className="h-4 w-3/4 bg-muted rounded {pulse}" />
      <div className="h-3 w-1/2 bg-muted rounded {pulse}" />
      <div className="h-20 bg-muted rounded {pulse}" />
    </div>"""
    if layout == "table":
        row = f'<div className="h-12 bg-muted/50 rounded {pulse}" />'
        return f"""<div className="space-y-2">
      <div className="h-10 bg-muted rounded {pulse}" />
      {_repeat(row, count)}
    </div>"""
    if layout == "list":
        item = f"""<div className="flex gap-3">
        <div className="h-10 w-10 rounded-full bg-muted {pulse}" />
        <div className="flex-1 space-y-2">
          <div className="h-4 w-3/4 bg-muted rounded {pulse}" />
          <div className="h-3 w-1/2 bg-muted rounded {pulse}" />
        </div>
      </div>"""
        return f"""<div className="space-y-3">
      {_repeat(item, count)}
    </div>"""
    if layout == "profile":
        return f"""<div className="flex flex-col items-center gap-4">
      <div className="h-24 w-24 rounded-full bg-muted {pulse}" />
      <div className="h-5 w-32 bg-muted rounded {pulse}" />
      <div className="h-3 w-48 bg-muted rounded {pulse}" />
    </div>"""
    field = f"""<div className="space-y-2">
        <div className="h-4 w-20 bg-muted rounded {pulse}" />
        <div className="h-10 w-full bg-muted rounded {pulse}" />
      </div>"""
    return f"""<div className="space-y-4">
      {_repeat(field, count)}
      <div className="h-10 w-24 bg-muted rounded {pulse}" />
    </div>"""


class SkeletonLoaderSkill(BaseSkill[SkeletonLoaderParams]):
    name = "skeleton_loader_builder"
    description = "Generates skeleton loading states for various layouts."
    category = "frontend.ui"
    params_model = SkeletonLoaderParams

    async def handle(self, params: SkeletonLoaderParams) -> SkillResult:
        name = params.component_name
        pulse = "animate-pulse" if params.animated else ""
        body = render_layout(params.layout, params.item_count, pulse)

        code = f"""import {{ cn }} from "@/lib/utils";

interface {name}Props {{
  className?: string;
  count?: number;
}}

export function {name}({{ className, count = {params.item_count} }}: {name}Props) {{
  return (
    <div className={{cn("w-full", className)}}>
      {body}
    </div>
  );
}}

// Reusable skeleton primitives
export function SkeletonLine({{ className }}: {{ className?: string }}) {{
  return <div className={{cn("h-4 bg-muted rounded {pulse}", className)}} />;
}}

export function SkeletonCircle({{ className }}: {{ className?: string }}) {{
  return <div className={{cn("h-10 w-10 rounded-full bg-muted {pulse}", className)}} />;
}}

export function SkeletonBox({{ className }}: {{ className?: string }}) {{
  return <div className={{cn("h-20 bg-muted rounded {pulse}", className)}} />;
}}
"""

        return SkillResult.ok(
            code,
            {"component_name": name, "layout": params.layout, "animated": params.animated},
        )
