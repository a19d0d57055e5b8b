"""Journey log - what happened during the current session."""

from wildtrail.schemas.session import JourneyEntry, JourneySnapshot, UnlockedItem


class JourneyLog:
    """Append-only record of encounters and of collectibles first unlocked this session."""

    def __init__(self):
        self._entries: list[JourneyEntry] = []
        self._unlocked: list[UnlockedItem] = []

    @property
    def entries(self) -> tuple[JourneyEntry, ...]:
        return tuple(self._entries)

    @property
    def newly_unlocked(self) -> tuple[UnlockedItem, ...]:
        return tuple(self._unlocked)

    def __len__(self) -> int:
        return len(self._entries)

    def record(self, encounter: str, choice: str) -> None:
        self._entries.append(JourneyEntry(encounter=encounter, choice=choice))

    def note_unlock(self, collectible_id: int, name: str) -> bool:
        if any(item.collectible_id == collectible_id for item in self._unlocked):
            return False
        self._unlocked.append(UnlockedItem(collectible_id=collectible_id, name=name))
        return True

    def clear(self) -> None:
        self._entries, self._unlocked = [], []

    def snapshot(self) -> JourneySnapshot:
        return JourneySnapshot(journey_log=tuple(self._entries), newly_unlocked=tuple(self._unlocked))
