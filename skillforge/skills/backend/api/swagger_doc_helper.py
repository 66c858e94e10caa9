"""
SwaggerDocHelper Skill

Generates a DTO class whose properties carry @ApiProperty decorators.
"""

from typing import Any

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import js_json


class DtoProperty(SkillParams):
    name: str
    type: str = Field(description="e.g., string, number, boolean")
    description: str | None = None
    example: Any = None
    required: bool = True


class SwaggerDocHelperParams(SkillParams):
    properties: list[DtoProperty] = Field(description="List of properties to decorate")
    class_name: str = Field(default="GeneratedDto", description="Name of the class")


def _render_property(prop: DtoProperty) -> str:
    options: list[str] = []
    if prop.description:
        options.append(f"description: '{prop.description}'")
    if prop.example is not None:
        options.append(f"example: {js_json(prop.example)}")
    if not prop.required:
        options.append("required: false")

    options_str = f"{{ {', '.join(options)} }}" if options else ""
    optional_mark = "" if prop.required else "?"

    return f"""
  @ApiProperty({options_str})
  {prop.name}{optional_mark}: {prop.type};"""


class SwaggerDocHelperSkill(BaseSkill[SwaggerDocHelperParams]):
    name = "swagger_doc_helper"
    description = "Generates a DTO class with @ApiProperty decorators for Swagger documentation."
    category = "backend.api"
    params_model = SwaggerDocHelperParams

    async def handle(self, params: SwaggerDocHelperParams) -> SkillResult:
        property_code = "\n".join(_render_property(prop) for prop in params.properties)

        code = f"""import {{ ApiProperty }} from '@nestjs/swagger';

export class {params.class_name} {{
{property_code}
}}
"""
        return SkillResult.ok(
            code,
            {
                "documentation": "NestJS Swagger DTO",
                "decorated_properties": [prop.name for prop in params.properties],
            },
        )
