"""Game engine exceptions."""


class GameError(Exception):
    """Base class for every error raised by the exploration engine."""


class ContentError(GameError):
    """Raised when authored event/collectible data is malformed or inconsistent."""


class InvalidReference(GameError, LookupError):
    """Raised when an event, choice or collectible reference does not resolve."""


class InvalidEventId(InvalidReference):
    def __init__(self, event_id: int):
        super().__init__(f"Unknown event id: {event_id}")
        self.event_id = event_id


class InvalidChoiceIndex(InvalidReference):
    def __init__(self, event_id: int, choice_index: int):
        super().__init__(f"Event {event_id} has no choice at index {choice_index}")
        self.event_id = event_id
        self.choice_index = choice_index


class InvalidCollectibleId(InvalidReference):
    def __init__(self, collectible_id: int):
        super().__init__(f"Unknown collectible id: {collectible_id}")
        self.collectible_id = collectible_id


class ResourceExhausted(GameError):
    """Raised when a session resource has run out. Expected, not a fault."""


class StaminaExhausted(ResourceExhausted):
    def __init__(self):
        super().__init__("No stamina left; start a new run to keep exploring")


class StorageCorrupt(GameError):
    """Raised when a persisted record cannot be parsed or validated."""


class UpstreamUnavailable(GameError):
    """Raised when the journey review service cannot produce a review."""
