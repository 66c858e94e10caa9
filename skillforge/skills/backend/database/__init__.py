"""TypeORM entity and migration skills"""

from skillforge.skills.backend.database.entity_creator import EntityCreatorSkill
from skillforge.skills.backend.database.migration_expert import MigrationExpertSkill

__all__ = [
    "EntityCreatorSkill",
    "MigrationExpertSkill",
]
