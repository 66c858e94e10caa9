"""
CronJobScheduler Skill

Generates a NestJS service with one ``@Cron`` method per job, and the module
that registers ``ScheduleModule``.
"""

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class CronJob(SkillParams):
    name: str
    cron: str
    description: str | None = None


class CronJobSchedulerParams(SkillParams):
    service_name: str = Field(default="Tasks", description="Service name (PascalCase)")
    jobs: list[CronJob] = Field(
        default_factory=lambda: [
            CronJob(name="cleanupExpired", cron="0 0 * * *", description="Daily cleanup")
        ]
    )
    # accepted, no distributed lock is rendered yet
    with_locking: bool = Field(default=True)


def _job_method(job: CronJob) -> str:
    return f"""
  @Cron('{job.cron}')
  async {job.name}() {{
    this.logger.log('{job.name}: Started');
    // TODO: Implement job logic
  }}"""


class CronJobSchedulerSkill(BaseSkill[CronJobSchedulerParams]):
    name = "cron_job_scheduler"
    description = "Generates NestJS scheduled tasks with @nestjs/schedule."
    category = "backend.scheduling"
    params_model = CronJobSchedulerParams

    async def handle(self, params: CronJobSchedulerParams) -> SkillResult:
        name = params.service_name
        lower = name.lower()
        methods = "\n".join(_job_method(job) for job in params.jobs)

        files = {
            f"{lower}.service.ts": f"""import {{ Injectable, Logger }} from '@nestjs/common';
import {{ Cron }} from '@nestjs/schedule';

@Injectable()
export class {name}Service {{
  private readonly logger = new Logger({name}Service.name);
{methods}
}}
""",
            f"{lower}.module.ts": f"""import {{ Module }} from '@nestjs/common';
import {{ ScheduleModule }} from '@nestjs/schedule';
import {{ {name}Service }} from './{lower}.service';

@Module({{
  imports: [ScheduleModule.forRoot()],
  providers: [{name}Service],
  exports: [{name}Service],
}})
export class {name}Module {{}}
""",
        }

        return SkillResult.ok(
            files, {"service_name": name, "jobs": [job.name for job in params.jobs]}
        )
