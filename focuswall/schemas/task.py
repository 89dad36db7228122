# focuswall/schemas/task.py
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from datetime import datetime
import enum

from focuswall.schemas.common import CURRENT_SCHEMA_VERSION, strip_optional_text, strip_text

class Priority(str, enum.Enum):
    high = "High"
    medium = "Medium"
    low = "Low"

class TaskBase(BaseModel):
    title: str = Field(..., description="Task title, e.g. Lesson 1")
    goal_id: Optional[str] = None
    priority: Priority = Priority.medium
    notes: Optional[str] = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return strip_text(value)

    @field_validator("goal_id", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return strip_optional_text(value)

class TaskCreate(TaskBase):
    pass

class TaskUpdate(BaseModel):
    title: Optional[str] = None
    goal_id: Optional[str] = None
    priority: Optional[Priority] = None
    notes: Optional[str] = None
    status: Optional[str] = None
    is_top3: Optional[bool] = None
    completed: Optional[bool] = None

    @field_validator("title", mode="before")
    @classmethod
    def _strip_title(cls, value):
        return strip_text(value)

    @field_validator("goal_id", "notes", mode="before")
    @classmethod
    def _blank_to_none(cls, value):
        return strip_optional_text(value)

class Task(TaskBase):
    """A task record as persisted in the tasks blob."""
    model_config = ConfigDict(extra="ignore")

    id: str
    status: str = "active"
    is_top3: bool = False
    created_at: datetime
    completed: bool = False
    completed_at: Optional[datetime] = None
    archived: bool = False
    archived_at: Optional[datetime] = None
    schema_version: int = CURRENT_SCHEMA_VERSION
