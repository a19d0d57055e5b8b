"""Event graph - authored events and collectibles addressed by integer id."""

import logging
from collections.abc import Iterable

from wildtrail.core.errors import ContentError, InvalidCollectibleId, InvalidEventId
from wildtrail.schemas.content import Collectible, EventNode, SceneTag

logger = logging.getLogger(__name__)


class EventGraph:
    """Read-only lookup over a validated content catalog.

    Edges are the ``next_event_id`` of each outcome; cycles are allowed, dangling
    edges are not.
    """

    def __init__(
        self,
        events: Iterable[EventNode],
        collectibles: Iterable[Collectible] = (),
        start_event_id: int | None = None,
    ):
        self._events: dict[int, EventNode] = {}
        for event in events:
            if event.id in self._events:
                raise ContentError(f"Duplicate event id: {event.id}")
            if len(event.choices) != 2:
                raise ContentError(f"Event {event.id} must have exactly 2 choices")
            self._events[event.id] = event

        self._collectibles: dict[int, Collectible] = {}
        for collectible in collectibles:
            if collectible.id in self._collectibles:
                raise ContentError(f"Duplicate collectible id: {collectible.id}")
            self._collectibles[collectible.id] = collectible

        if not self._events:
            raise ContentError("The event catalog is empty")
        self._check_references()

        if start_event_id is None:
            start_event_id = min(self._events)
        elif start_event_id not in self._events:
            raise ContentError(f"Start event {start_event_id} does not exist")
        self.start_event_id = start_event_id

        logger.info(
            "Event graph ready: %d events, %d collectibles, start at %d",
            len(self._events), len(self._collectibles), self.start_event_id,
        )

    def _check_references(self) -> None:
        for event in self._events.values():
            for choice in event.choices:
                for outcome in choice.outcomes:
                    if outcome.next_event_id is not None and outcome.next_event_id not in self._events:
                        raise ContentError(
                            f"Event {event.id} links to missing event {outcome.next_event_id}"
                        )
                    if outcome.collectible_id is not None and outcome.collectible_id not in self._collectibles:
                        raise ContentError(
                            f"Event {event.id} unlocks missing collectible {outcome.collectible_id}"
                        )

    def get_event(self, event_id: int) -> EventNode:
        try:
            return self._events[event_id]
        except KeyError:
            raise InvalidEventId(event_id) from None

    def get_collectible(self, collectible_id: int) -> Collectible:
        try:
            return self._collectibles[collectible_id]
        except KeyError:
            raise InvalidCollectibleId(collectible_id) from None

    def has_event(self, event_id: int) -> bool:
        return event_id in self._events

    def events(self) -> list[EventNode]:
        return [self._events[event_id] for event_id in sorted(self._events)]

    def collectibles(self) -> list[Collectible]:
        return [self._collectibles[cid] for cid in sorted(self._collectibles)]

    def events_in_scene(self, scene: SceneTag | str) -> list[EventNode]:
        scene = SceneTag(scene)
        return [event for event in self.events() if event.scene is scene]

    @property
    def collectible_count(self) -> int:
        return len(self._collectibles)
