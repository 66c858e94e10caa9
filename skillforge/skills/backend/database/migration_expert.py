"""
MigrationExpert Skill

Generates a timestamped TypeORM migration class with empty up/down methods.
"""

import time

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult


class MigrationExpertParams(SkillParams):
    migration_name: str = Field(
        description="Descriptive name of the migration, e.g., CreateUsersTable",
        pattern=r"^[A-Za-z_$][A-Za-z0-9_$]*$",
    )
    timestamp: int | None = Field(
        default=None,
        ge=0,
        description="Milliseconds since epoch to embed; defaults to the current time",
    )


class MigrationExpertSkill(BaseSkill[MigrationExpertParams]):
    """
    Skill that generates a TypeORM migration

    The class name is the migration name followed by a millisecond timestamp,
    the convention TypeORM's CLI uses. Without an explicit ``timestamp`` the
    current time is used, which makes the output differ between calls.
    """

    name = "migration_expert"
    description = (
        "Generates a TypeORM migration class template with up/down methods and timestamping."
    )
    category = "backend.database"
    params_model = MigrationExpertParams
    deterministic = False

    async def handle(self, params: MigrationExpertParams) -> SkillResult:
        timestamp = params.timestamp if params.timestamp is not None else time.time_ns() // 1_000_000
        class_name = f"{params.migration_name}{timestamp}"

        code = f"""import {{ MigrationInterface, QueryRunner }} from "typeorm";

export class {class_name} implements MigrationInterface {{
    name = '{class_name}'

    public async up(queryRunner: QueryRunner): Promise<void> {{
        // Example: await queryRunner.query(`CREATE TABLE "user" ... `);
        // Add your schema changes here
    }}

    public async down(queryRunner: QueryRunner): Promise<void> {{
        // Example: await queryRunner.query(`DROP TABLE "user"`);
        // Revert your schema changes here
    }}
}}
"""
        return SkillResult.ok(code, {"migration_class": class_name, "timestamp": timestamp})
