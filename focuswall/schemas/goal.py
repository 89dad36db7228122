# focuswall/schemas/goal.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import date, datetime

from focuswall.schemas.common import CURRENT_SCHEMA_VERSION, strip_optional_text, strip_text

class GoalBase(BaseModel):
    name: str = Field(..., description="What you want to achieve, e.g. Learn Spanish")
    deadline: Optional[date] = None
    why_it_matters: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return strip_text(value)

    @field_validator("deadline", "why_it_matters", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return strip_optional_text(value)

class GoalCreate(GoalBase):
    pass

class GoalUpdate(BaseModel):
    name: Optional[str] = None
    deadline: Optional[date] = None
    why_it_matters: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("name", mode="before")
    @classmethod
    def _strip_name(cls, value):
        return strip_text(value)

    @field_validator("deadline", "why_it_matters", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return strip_optional_text(value)

class Goal(GoalBase):
    """A goal record as persisted in the goals blob."""
    model_config = ConfigDict(extra="ignore")

    id: str
    created_at: datetime
    completed: bool = False
    completed_at: Optional[datetime] = None
    archived: bool = False
    archived_at: Optional[datetime] = None
    schema_version: int = CURRENT_SCHEMA_VERSION

class GoalWithCounts(Goal):
    active_task_count: int = 0
    total_task_count: int = 0
    is_overdue: bool = False
