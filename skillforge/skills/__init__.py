"""
Skills System

Each skill is a stateless code generator: it validates its arguments against
a parameter model and renders source text from templates. Skills are
collected into a frozen registry at startup and dispatched by name.
"""

from skillforge.skills.base import (
    BaseSkill,
    FieldError,
    SkillParams,
    SkillResult,
    SkillValidationError,
)
from skillforge.skills.catalog import build_default_registry
from skillforge.skills.executor import SkillExecutionError, SkillExecutor
from skillforge.skills.registry import SkillRegistry

__all__ = [
    "BaseSkill",
    "SkillParams",
    "SkillResult",
    "FieldError",
    "SkillValidationError",
    "SkillRegistry",
    "SkillExecutor",
    "SkillExecutionError",
    "build_default_registry",
]
