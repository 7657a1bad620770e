"""Pydantic schemas for guideline sources and guideline listings."""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel


# ==================== Source Schemas ====================


class ClauseDefinition(BaseModel):
    """A clause as it appears in a guideline source."""

    field: StrictStr = Field(..., min_length=1)
    operator: StrictStr
    value: Union[StrictInt, StrictFloat, StrictStr]

    model_config = ConfigDict(extra="ignore")


class RuleDefinition(BaseModel):
    """Embedded conditions and requirements of one guideline entry."""

    conditions: list[ClauseDefinition] = Field(default_factory=list)
    requirements: list[ClauseDefinition] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @field_validator("conditions", "requirements", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        """Treat explicit nulls as empty clause lists."""
        return [] if value is None else value


# ==================== Response Schemas ====================


class CamelModel(BaseModel):
    """Base schema serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FormattedGuideline(CamelModel):
    """A guideline with human-formatted conditions and requirements."""

    rule_id: Optional[str] = None
    rule: str
    conditions: list[str] = Field(default_factory=list)
    requirements: list[str] = Field(default_factory=list)
    explanation: str
    violated: Optional[bool] = None
    failed_requirements: list[str] = Field(default_factory=list)


class StateGuidelinesResponse(CamelModel):
    """Guidelines loaded for one state."""

    state: str
    rule_count: int
    guidelines: list[FormattedGuideline] = Field(default_factory=list)


class GuidelineStatesResponse(CamelModel):
    """Per-state guideline counts for the loaded snapshot."""

    state_count: int
    rule_count: int
    states: dict[str, int] = Field(default_factory=dict)


class ReloadResponse(CamelModel):
    """Outcome of a guideline reload."""

    success: bool
    states: int
    rules: int
    skipped: int = 0
    message: Optional[str] = None
