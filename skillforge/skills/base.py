"""
Base classes for the Skills System

Defines the interface that all code-generation skills implement: a frozen
parameter model validated before anything runs, a result container, and the
abstract skill itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel


class SkillParams(BaseModel):
    """
    Base model for skill parameters

    Fields are declared in snake_case and exposed in camelCase, which is the
    shape agents send (``resourceName``, ``isCrud``). Instances are frozen so a
    validated parameter set cannot change while a template is being rendered.
    Validation is strict: ``"no"`` is not a boolean and ``"30"`` is not an
    integer.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        strict=True,
    )


@dataclass(frozen=True)
class FieldError:
    """
    A single parameter validation failure

    Attributes:
        loc: Dotted path to the offending field, using wire (camelCase) names
        message: Human-readable reason
        type: Machine-readable error code from the validator
    """

    loc: str
    message: str
    type: str

    def to_dict(self) -> dict[str, str]:
        return {"loc": self.loc, "message": self.message, "type": self.type}


class SkillValidationError(Exception):
    """Raised when arguments do not satisfy a skill's parameter model"""

    def __init__(self, skill_name: str, errors: list[FieldError]) -> None:
        self.skill_name = skill_name
        self.errors = errors
        summary = "; ".join(
            f"{error.loc}: {error.message}" if error.loc else error.message for error in errors
        )
        super().__init__(f"Invalid parameters for skill '{skill_name}': {summary}")

    @classmethod
    def from_pydantic(cls, skill_name: str, exc: ValidationError) -> "SkillValidationError":
        errors = [
            FieldError(
                loc=".".join(str(part) for part in err["loc"]),
                message=err["msg"],
                type=err["type"],
            )
            for err in exc.errors()
        ]
        return cls(skill_name, errors)


@dataclass
class SkillResult:
    """
    Result of skill execution

    Attributes:
        success: Whether the skill executed successfully
        data: Generated source (a string, or a mapping of file path to content)
            or, for analysis skills, a JSON-serializable report
        error: Error message if execution failed
        metadata: Informational details about the generated output
        errors: Field-level validation failures (empty unless validation failed)
    """

    success: bool
    data: Any | None = None
    error: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    errors: list[FieldError] = field(default_factory=list)

    @classmethod
    def ok(cls, data: Any, metadata: dict[str, Any] | None = None) -> "SkillResult":
        return cls(success=True, data=data, error=None, metadata=metadata or {})

    @classmethod
    def invalid(cls, exc: SkillValidationError) -> "SkillResult":
        return cls(success=False, data=None, error=str(exc), errors=list(exc.errors))

    def to_dict(self) -> dict[str, Any]:
        """Convert result to dictionary for JSON serialization"""
        return {
            "success": self.success,
            "data": self.data,
            "error": self.error,
            "metadata": self.metadata,
            "errors": [error.to_dict() for error in self.errors],
        }


ParamsT = TypeVar("ParamsT", bound=SkillParams)


class BaseSkill(ABC, Generic[ParamsT]):
    """
    Abstract base class for all skills

    All skills must inherit from this class, point ``params_model`` at their
    parameter model and implement the handle method.

    Attributes:
        name: Unique identifier for the skill
        description: Human-readable description of what the skill does
        category: Catalog section, e.g. "backend.security" or "frontend.ui"
        params_model: Pydantic model that validates and defaults the arguments
        deterministic: False when the output embeds a generation timestamp
    """

    name: str
    description: str
    category: str
    params_model: type[SkillParams]
    deterministic: bool = True

    @property
    def parameters(self) -> dict[str, Any]:
        """JSONSchema definition of the skill's parameters"""
        schema = self.params_model.model_json_schema(by_alias=True)
        schema.setdefault("required", [])
        return schema

    def parse_args(self, args: Any) -> ParamsT:
        """
        Validate raw arguments against the parameter model

        Raises:
            SkillValidationError: If any field is missing, mistyped or out of range
        """
        try:
            return self.params_model.model_validate(args)  # type: ignore[return-value]
        except ValidationError as e:
            raise SkillValidationError.from_pydantic(self.name, e) from e

    async def execute(self, args: dict[str, Any]) -> SkillResult:
        """
        Execute the skill with the given arguments

        Validation happens first; the handler never sees invalid input.

        Args:
            args: Dictionary of arguments matching the parameters schema

        Returns:
            SkillResult indicating success/failure and generated output
        """
        try:
            params = self.parse_args(args)
        except SkillValidationError as e:
            return SkillResult.invalid(e)
        return await self.handle(params)

    @abstractmethod
    async def handle(self, params: ParamsT) -> SkillResult:
        """
        Render the skill's templates from validated parameters

        Implementations are pure: no I/O, no randomness, no shared state.
        """

    def to_tool_definition(self) -> dict[str, Any]:
        """
        Convert skill to LLM tool definition format

        Returns tool definition compatible with OpenAI/Anthropic function calling
        """
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            },
        }
