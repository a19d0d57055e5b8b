"""Journey review request/response schemas (camelCase on the wire)."""

from pydantic import BaseModel, Field

from wildtrail.schemas.session import JourneyEntry, JourneySnapshot


class ReviewRequest(BaseModel):
    journey_log: list[JourneyEntry] = Field(default_factory=list, alias="journeyLog")
    unlocked_gallery: list[str] = Field(default_factory=list, alias="unlockedGallery")

    model_config = {"populate_by_name": True}

    @classmethod
    def from_snapshot(cls, snapshot: JourneySnapshot) -> "ReviewRequest":
        return cls(journey_log=list(snapshot.journey_log), unlocked_gallery=snapshot.unlocked_gallery)


class ReviewResponse(BaseModel):
    success: bool
    review: str = ""
    error: str | None = None
