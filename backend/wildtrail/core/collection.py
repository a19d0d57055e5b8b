"""Collection registry - permanent record of unlocked collectibles, plus rarity bands."""

from collections.abc import Iterable

from wildtrail.core.observable import Observable

# (lowest id, highest id, tier); ids outside every band are common
RARITY_BANDS = [
    (35, 42, "legendary"),
    (25, 34, "epic"),
    (15, 24, "rare"),
]
DEFAULT_RARITY = "common"


def rarity_for(collectible_id: int) -> str:
    """Derive the rarity tier of a collectible from its id."""
    for low, high, tier in RARITY_BANDS:
        if low <= collectible_id <= high:
            return tier
    return DEFAULT_RARITY


class CollectionRegistry(Observable):
    """Unlocked collectible ids, in unlock order. Survives session resets."""

    def __init__(self, unlocked_ids: Iterable[int] = ()):
        super().__init__()
        self._unlocked: list[int] = []
        for collectible_id in unlocked_ids:
            if collectible_id > 0 and collectible_id not in self._unlocked:
                self._unlocked.append(collectible_id)

    @property
    def unlocked_ids(self) -> tuple[int, ...]:
        return tuple(self._unlocked)

    def has_collected(self, collectible_id: int) -> bool:
        return collectible_id in self._unlocked

    def collect(self, collectible_id: int) -> bool:
        """Add an id to the collection. True only the first time it is added."""
        if collectible_id <= 0 or collectible_id in self._unlocked:
            return False
        self._unlocked.append(collectible_id)
        self._notify()
        return True

    def count(self) -> int:
        return len(self._unlocked)

    def erase(self) -> None:
        """Forget every unlocked collectible. Only the explicit full erase calls this."""
        self._unlocked.clear()
        self._notify()
