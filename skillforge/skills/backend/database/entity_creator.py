"""
EntityCreator Skill

Generates a TypeORM entity with columns, relation decorators and
timestamp columns.
"""

from typing import Literal

from pydantic import Field

from skillforge.skills.base import BaseSkill, SkillParams, SkillResult
from skillforge.skills.templating import js_scalar

RelationType = Literal["OneToMany", "ManyToOne", "OneToOne", "ManyToMany"]

_NUMBER_TYPES = {"int", "integer", "float", "decimal", "double"}
_BOOLEAN_TYPES = {"boolean", "bool"}
_DATE_TYPES = {"timestamp", "date", "datetime"}


class ColumnSpec(SkillParams):
    name: str
    type: str = Field(description="TypeORM column type, e.g., varchar, int, boolean, timestamp")
    is_primary: bool | None = None
    is_nullable: bool | None = None
    default: str | bool | int | float | None = None


class RelationSpec(SkillParams):
    type: RelationType
    target_entity: str = Field(description="The name of the related entity class")
    inverse_side: str | None = Field(
        default=None, description="Property name on the other side of the relation"
    )
    join_column: bool | None = Field(
        default=None, description="Whether to add @JoinColumn (owning side)"
    )


class EntityCreatorParams(SkillParams):
    entity_name: str = Field(
        description="Name of the entity class (PascalCase), e.g., UserProfile"
    )
    table_name: str | None = Field(
        default=None,
        description="Optional custom table name. Defaults to entityName in snake_case.",
    )
    columns: list[ColumnSpec] = Field(description="List of columns definitions")
    relations: list[RelationSpec] | None = Field(
        default=None, description="List of entity relations"
    )


def ts_type(column_type: str) -> str:
    """Map a TypeORM column type onto the TypeScript property type."""
    if column_type in _NUMBER_TYPES:
        return "number"
    if column_type in _BOOLEAN_TYPES:
        return "boolean"
    if column_type in _DATE_TYPES:
        return "Date"
    return "string"


def _render_column(column: ColumnSpec) -> str:
    if column.is_primary:
        return f"""
  @PrimaryGeneratedColumn('uuid')
  {column.name}: string;"""

    options: list[str] = []
    if column.is_nullable:
        options.append("nullable: true")
    if column.default is not None:
        if isinstance(column.default, str):
            options.append(f"default: '{column.default}'")
        else:
            options.append(f"default: {js_scalar(column.default)}")

    options_str = f"{{ {', '.join(options)} }}" if options else ""
    return f"""
  @Column('{column.type}', {options_str})
  {column.name}: {ts_type(column.type)};"""


def _render_relation(relation: RelationSpec) -> str:
    target = relation.target_entity
    decorator_args = f"() => {target}"
    if relation.inverse_side:
        decorator_args += f", (related) => related.{relation.inverse_side}"

    if relation.type == "OneToMany":
        return f"""
  @{relation.type}({decorator_args})
  {target.lower()}s: {target}[];"""

    join_column = "\n  @JoinColumn()" if relation.join_column else ""
    return f"""
  @{relation.type}({decorator_args}){join_column}
  {target.lower()}: {target};"""


class EntityCreatorSkill(BaseSkill[EntityCreatorParams]):
    """
    Skill that generates a TypeORM entity class

    Primary columns always become uuid-generated string columns. OneToMany
    relations render as array properties and never get @JoinColumn.
    """

    name = "entity_creator"
    description = "Generates a TypeORM entity with columns, decorators, and relations."
    category = "backend.database"
    params_model = EntityCreatorParams

    async def handle(self, params: EntityCreatorParams) -> SkillResult:
        relations = params.relations or []

        imports = [
            "Entity",
            "PrimaryGeneratedColumn",
            "Column",
            "CreateDateColumn",
            "UpdateDateColumn",
        ]
        for relation in relations:
            if relation.type not in imports:
                imports.append(relation.type)
        if any(relation.join_column for relation in relations):
            imports.append("JoinColumn")

        column_definitions = "\n".join(_render_column(column) for column in params.columns)
        relation_definitions = "\n".join(_render_relation(relation) for relation in relations)
        table_option = f"name: '{params.table_name}'" if params.table_name else ""

        code = f"""import {{ {', '.join(imports)} }} from 'typeorm';

@Entity({{ {table_option} }})
export class {params.entity_name} {{
{column_definitions}
{relation_definitions}

  @CreateDateColumn()
  createdAt: Date;

  @UpdateDateColumn()
  updatedAt: Date;
}}
"""
        return SkillResult.ok(
            code,
            {
                "entity": params.entity_name,
                "table": params.table_name or params.entity_name.lower(),
                "typeorm_version": "0.3.x",
            },
        )
