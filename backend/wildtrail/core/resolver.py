"""Choice resolver - turns a player's pick into an outcome and applies it to the session.

Outcome sampling rule: a choice carries one or two weighted outcomes. The
weights are normalized to sum to 1 and laid out in order on [0, 1); a draw
``u`` from ``random.random()`` selects the first outcome with a non-zero
weight whose cumulative upper bound is >= ``u``. A draw landing exactly on a
boundary therefore goes to the earlier outcome. If every weight is zero the
first outcome is used.
"""

import random
from collections.abc import Sequence

from wildtrail.core.collection import CollectionRegistry
from wildtrail.core.errors import InvalidChoiceIndex, StaminaExhausted
from wildtrail.core.event_graph import EventGraph
from wildtrail.core.session import SessionState
from wildtrail.schemas.content import Outcome
from wildtrail.schemas.session import Resolution, UnlockedItem


def pick_outcome(outcomes: Sequence[Outcome], draw: float) -> int:
    """Return the index of the outcome selected by ``draw`` (in [0, 1))."""
    total = sum(outcome.weight for outcome in outcomes)
    if total <= 0:
        return 0
    cumulative = 0.0
    for index, outcome in enumerate(outcomes):
        if outcome.weight <= 0:
            continue
        cumulative += outcome.weight / total
        if draw <= cumulative:
            return index
    # float rounding can leave the last bound a hair under 1.0
    return max(i for i, outcome in enumerate(outcomes) if outcome.weight > 0)


class ChoiceResolver:
    def __init__(
        self,
        graph: EventGraph,
        session: SessionState,
        collection: CollectionRegistry,
        rng: random.Random | None = None,
    ):
        self.graph = graph
        self.session = session
        self.collection = collection
        self.rng = rng or random.Random()

    def resolve_choice(self, event_id: int, choice_index: int) -> Resolution:
        """Resolve ``choice_index`` of ``event_id`` against the current session.

        Raises InvalidEventId, InvalidChoiceIndex or StaminaExhausted before
        touching any state.
        """
        event = self.graph.get_event(event_id)
        if choice_index not in (0, 1):
            raise InvalidChoiceIndex(event_id, choice_index)
        if not self.session.stamina.has_stamina():
            raise StaminaExhausted()

        choice = event.choices[choice_index]
        outcome_index = pick_outcome(choice.outcomes, self.rng.random())
        outcome = choice.outcomes[outcome_index]

        # the session is saved once, after every change below is applied
        unlocked = None
        with self.session._batch():
            delta = self.session.wallet.add(outcome.reward)
            self.session.stamina.consume()
            self.session.journey.record(event.encounter, choice.label)

            if outcome.collectible_id is not None and self.collection.collect(outcome.collectible_id):
                collectible = self.graph.get_collectible(outcome.collectible_id)
                self.session.journey.note_unlock(collectible.id, collectible.name)
                unlocked = UnlockedItem(collectible_id=collectible.id, name=collectible.name)

        return Resolution(
            event_id=event.id,
            choice_index=choice_index,
            outcome_index=outcome_index,
            outcome_text=outcome.text,
            reward=outcome.reward,
            currency_delta=delta,
            currency=self.session.currency,
            stamina=self.session.stamina.value,
            next_event_id=outcome.next_event_id,
            unlocked=unlocked,
            session_over=not self.session.stamina.has_stamina() or outcome.next_event_id is None,
        )
