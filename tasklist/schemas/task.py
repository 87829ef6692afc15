from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

class TaskBase(BaseModel):
    """Base task schema with common fields."""
    title: str = Field(min_length=1)
    description: Optional[str] = None
    completed: bool = False

class TaskCreate(TaskBase):
    """Schema for creating new tasks."""
    pass

class TaskUpdate(BaseModel):
    """Schema for updating existing tasks."""
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    completed: Optional[bool] = None

class TaskComplete(BaseModel):
    """Schema for completing a task."""
    completed: bool = True

class Task(TaskBase):
    """Task as returned to clients.

    The owner is deliberately absent so a read never carries the owner's
    credential hash.
    """
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
