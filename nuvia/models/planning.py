"""Pydantic models for task creation and assignment plans."""

from typing import Literal

from pydantic import BaseModel, Field

from .chat import CAMEL_CONFIG


class SmartTaskInput(BaseModel):
    """A free-text task request to break into scheduled tasks."""

    request: str = Field(
        ...,
        description="The task request from the user, e.g., 'I need to write a 10-page research paper in 7 days'",
    )
    user_profile: str | None = Field(None, description="User profile, goals, and tasks.")
    current_date: str = Field(
        ...,
        description='The current date, e.g., "June 18, 2024". This is the earliest date tasks should be scheduled for.',
    )

    model_config = CAMEL_CONFIG


class SmartTask(BaseModel):
    """One actionable task with a deadline."""

    task: str = Field(..., description="The task to be completed.")
    deadline: str = Field(..., description="The deadline for the task.")


class SmartTaskList(BaseModel):
    """Structured output wrapper for the list of tasks."""

    tasks: list[SmartTask] = Field(
        default_factory=list,
        description="Tasks in the order they should be done.",
    )


class AssignmentPlanInput(BaseModel):
    """Assignment topic and dates for a checklist plan."""

    assignment_topic: str = Field(..., description="The topic or title of the assignment.")
    deadline: str = Field(
        ...,
        description='The final deadline for the assignment (e.g., "October 26, 2024").',
    )
    current_date: str = Field(
        ...,
        description='The current date for planning context (e.g., "June 17, 2024").',
    )

    model_config = CAMEL_CONFIG


class AssignmentPlanOutput(BaseModel):
    """Markdown checklist plan."""

    plan: str = Field(
        ...,
        description="The detailed, Markdown-formatted assignment plan, styled as a checklist.",
    )


PlanItemType = Literal["h2", "h3", "bold", "task", "separator", "text"]


class PlanItem(BaseModel):
    """One line of an assignment plan, typed for display."""

    id: str
    type: PlanItemType
    text: str
    completed: bool | None = None
    original_line: str
