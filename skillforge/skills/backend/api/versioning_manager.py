"""
VersioningManager Skill

Generates a main.ts bootstrap that enables global API versioning.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class VersioningManagerParams(SkillParams):
    type: Literal["URI", "HEADER", "MEDIA_TYPE"] = Field(
        default="URI", description="Versioning type"
    )
    default_version: str = Field(default="1", description="Default API version")
    # Informational only: NestJS derives the URI prefix itself
    prefix: str = Field(default="api/v", description="Prefix for URI versioning")


class VersioningManagerSkill(BaseSkill[VersioningManagerParams]):
    name = "versioning_manager"
    description = "Generates bootstrap code for enabling global API versioning in NestJS."
    category = "backend.api"
    params_model = VersioningManagerParams

    async def handle(self, params: VersioningManagerParams) -> SkillResult:
        code = f"""import {{ VersioningType }} from '@nestjs/common';
import {{ NestFactory }} from '@nestjs/core';
import {{ AppModule }} from './app.module';

async function bootstrap() {{
  const app = await NestFactory.create(AppModule);

  // Enable Versioning
  app.enableVersioning({{
    type: VersioningType.{params.type},
    defaultVersion: '{params.default_version}',
  }});

  await app.listen(3000);
}}
bootstrap();
"""
        return SkillResult.ok(
            code,
            {"versioning_type": params.type, "default_version": params.default_version},
        )
