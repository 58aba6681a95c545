"""ExerciseProperties — descriptor metadata for one exercise."""

from typing import Literal

from pydantic import BaseModel, Field

type Difficulty = Literal[
    "Beginner", "Intermediate", "Advanced", "Challenging", "Legendary"
]


class ExerciseProperties(BaseModel, frozen=True):
    """Immutable metadata read from an exercise's descriptor file."""

    category: str = Field(min_length=1)
    prompt: str
    skeleton: str = ""
    difficulty: Difficulty | None = None
