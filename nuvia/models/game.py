"""Pydantic models for riddles and routine templates."""

from typing import Literal

from pydantic import BaseModel, Field

from .chat import CAMEL_CONFIG

Difficulty = Literal["easy", "medium", "hard"]


class Riddle(BaseModel):
    """A riddle from the built-in bank."""

    id: str = Field(..., description="The unique identifier for the riddle.")
    question: str = Field(..., description="The riddle question.")
    answer: str = Field(
        ...,
        description="The answer, kept hidden from the player until they answer or give up.",
    )
    difficulty: Difficulty = Field(..., description="The difficulty level of the riddle.")


class GetRiddleInput(BaseModel):
    """Input for requesting a riddle."""

    exclude_ids: list[str] | None = Field(
        None,
        description="Riddle IDs to exclude from selection.",
    )

    model_config = CAMEL_CONFIG


class RoutineStep(BaseModel):
    """A step of a routine template."""

    name: str
    duration: int = Field(..., gt=0, description="Duration in seconds")


class Routine(BaseModel):
    """A named sequence of timed steps."""

    id: str
    name: str
    tasks: list[RoutineStep] = Field(default_factory=list)

    @property
    def total_duration(self) -> int:
        """Total duration of the routine in seconds."""
        return sum(step.duration for step in self.tasks)
