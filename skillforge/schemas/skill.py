from typing import Any

from pydantic import BaseModel, Field

from skillforge.skills.base import SkillResult


class SkillInfo(BaseModel):
    """Public description of a registered skill."""

    name: str
    description: str
    category: str
    parameters: dict[str, Any] = Field(description="JSONSchema of the skill arguments")


class SkillList(BaseModel):
    skills: list[SkillInfo]
    total: int


class FieldErrorSchema(BaseModel):
    loc: str = Field(description="Dotted path to the offending argument")
    message: str
    type: str


class SkillInvocationResponse(BaseModel):
    """Outcome of invoking a skill."""

    skill: str
    success: bool
    data: Any | None = None
    error: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    errors: list[FieldErrorSchema] = Field(default_factory=list)

    @classmethod
    def from_result(cls, skill_name: str, result: SkillResult) -> "SkillInvocationResponse":
        return cls(skill=skill_name, **result.to_dict())
