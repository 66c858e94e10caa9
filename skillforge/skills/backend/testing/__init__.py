"""Backend test scaffolding skills"""

from skillforge.skills.backend.testing.e2e_test_builder import E2ETestBuilderSkill
from skillforge.skills.backend.testing.load_test_config import LoadTestConfigSkill
from skillforge.skills.backend.testing.unit_test_generator import UnitTestGeneratorSkill

__all__ = [
    "E2ETestBuilderSkill",
    "LoadTestConfigSkill",
    "UnitTestGeneratorSkill",
]
