"""Authored content schemas - events, choices, outcomes and collectibles."""

from enum import Enum

from pydantic import BaseModel, Field, PositiveInt, computed_field, field_validator

from wildtrail.core.collection import rarity_for


class SceneTag(str, Enum):
    FOREST = "forest"
    MOUNTAIN = "mountain"
    RIVER = "river"


class Outcome(BaseModel):
    """One weighted result of a choice.

    Weights are relative: a choice's outcome weights are normalized when sampled.
    """
    text: str
    weight: float = Field(default=1.0, ge=0.0)
    reward: int = 0
    next_event_id: int | None = None  # None = the path ends here
    collectible_id: PositiveInt | None = None

    model_config = {"frozen": True}


class Choice(BaseModel):
    """A selectable option. ``outcomes[0]`` is the success branch."""
    label: str
    outcomes: tuple[Outcome, ...] = Field(min_length=1, max_length=2)

    model_config = {"frozen": True}

    @property
    def success_probability(self) -> float:
        total = sum(outcome.weight for outcome in self.outcomes)
        return self.outcomes[0].weight / total if total else 1.0


class EventNode(BaseModel):
    """One authored encounter with exactly two choices."""
    id: PositiveInt
    name: str = ""
    text: str
    scene: SceneTag
    choices: tuple[Choice, ...]

    model_config = {"frozen": True}

    @field_validator("choices")
    @classmethod
    def _binary_branching(cls, choices: tuple[Choice, ...]) -> tuple[Choice, ...]:
        if len(choices) != 2:
            raise ValueError(f"an event needs exactly 2 choices, got {len(choices)}")
        return choices

    @property
    def encounter(self) -> str:
        """Label used in the journey log."""
        return self.name or self.text


class Collectible(BaseModel):
    id: PositiveInt
    name: str
    description: str = ""
    image: str | None = None

    model_config = {"frozen": True}

    @computed_field
    @property
    def rarity(self) -> str:
        return rarity_for(self.id)
