from skillforge.schemas.skill import (
    FieldErrorSchema,
    SkillInfo,
    SkillInvocationResponse,
    SkillList,
)

__all__ = [
    "FieldErrorSchema",
    "SkillInfo",
    "SkillInvocationResponse",
    "SkillList",
]
