"""
HealthCheckBuilder Skill

Generates a NestJS Terminus HealthController with optional database and
heap checks.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class HealthCheckBuilderParams(SkillParams):
    check_database: bool = Field(default=True, description="Include database ping check (TypeORM)")
    check_memory: bool = Field(default=True, description="Include memory usage check")
    memory_threshold_mb: int = Field(
        default=150,
        ge=1,
        alias="memoryThresholdMB",
        description="Memory threshold in MB for health warning",
    )


class HealthCheckBuilderSkill(BaseSkill[HealthCheckBuilderParams]):
    name = "health_check_builder"
    description = "Generates a HealthController using NestJS Terminus for DB and Memory checks."
    category = "backend.infrastructure"
    params_model = HealthCheckBuilderParams

    async def handle(self, params: HealthCheckBuilderParams) -> SkillResult:
        imports = [
            "import { Controller, Get } from '@nestjs/common';",
            "import { HealthCheck, HealthCheckService, HealthCheckResult } from '@nestjs/terminus';",
        ]
        constructor_args = ["private health: HealthCheckService"]
        checks: list[str] = []

        if params.check_database:
            imports.append("import { TypeOrmHealthIndicator } from '@nestjs/terminus';")
            constructor_args.append("private db: TypeOrmHealthIndicator")
            checks.append("() => this.db.pingCheck('database')")

        if params.check_memory:
            imports.append("import { MemoryHealthIndicator } from '@nestjs/terminus';")
            constructor_args.append("private memory: MemoryHealthIndicator")
            checks.append(
                f"() => this.memory.checkHeap('memory_heap', {params.memory_threshold_mb} * 1024 * 1024)"
            )

        import_block = "\n".join(imports)
        constructor_block = ",\n    ".join(constructor_args)
        check_block = ",\n      ".join(checks)

        code = f"""{import_block}

@Controller('health')
export class HealthController {{
  constructor(
    {constructor_block}
  ) {{}}

  @Get()
  @HealthCheck()
  check(): Promise<HealthCheckResult> {{
    return this.health.check([
      {check_block}
    ]);
  }}
}}
"""
        return SkillResult.ok(
            code,
            {
                # terminus pulls in @nestjs/axios for its HTTP indicator
                "dependencies": ["@nestjs/terminus", "@nestjs/axios"],
                "endpoint": "/health",
            },
        )
