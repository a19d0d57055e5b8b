"""Session, collection and journey Pydantic schemas (persisted records included)."""

from pydantic import BaseModel, Field


class JourneyEntry(BaseModel):
    """One resolved encounter: what was met and what the player chose."""
    encounter: str
    choice: str

    model_config = {"frozen": True}


class UnlockedItem(BaseModel):
    collectible_id: int
    name: str

    model_config = {"frozen": True}


class JourneySnapshot(BaseModel):
    """Immutable copy of the journey log, handed to the review service."""
    journey_log: tuple[JourneyEntry, ...] = ()
    newly_unlocked: tuple[UnlockedItem, ...] = ()

    model_config = {"frozen": True}

    @property
    def unlocked_gallery(self) -> list[str]:
        return [item.name for item in self.newly_unlocked]


class SessionRecord(BaseModel):
    """Persisted per-run state. Stored as {stamina, currency, inventory, savedAt}."""
    stamina: int = Field(ge=0)
    currency: int = Field(default=0, ge=0)
    inventory: list[int] = Field(default_factory=list)


class CollectionRecord(BaseModel):
    """Persisted permanent collection. Stored as {unlockedIds, savedAt}."""
    unlocked_ids: list[int] = Field(default_factory=list, alias="unlockedIds")

    model_config = {"populate_by_name": True}


class Resolution(BaseModel):
    """Result of resolving one choice."""
    event_id: int
    choice_index: int
    outcome_index: int
    outcome_text: str
    reward: int  # as authored
    currency_delta: int  # as applied, after flooring at 0
    currency: int
    stamina: int
    next_event_id: int | None  # None = the path ends here
    unlocked: UnlockedItem | None = None
    session_over: bool = False
