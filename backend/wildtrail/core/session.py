"""Session state - everything that belongs to one run and is cleared by a reset."""

from wildtrail.core.journey import JourneyLog
from wildtrail.core.observable import Observable
from wildtrail.core.resources import Inventory, StaminaGauge, Wallet
from wildtrail.schemas.session import SessionRecord


class SessionState(Observable):
    """Stamina, currency, inventory and journey log of the current run.

    Listeners are told about changes to the persisted part (stamina, currency,
    inventory); the journey log lives only in memory.
    """

    def __init__(
        self,
        max_stamina: int,
        stamina: int | None = None,
        currency: int = 0,
        inventory: tuple[int, ...] = (),
        inventory_enabled: bool = True,
    ):
        super().__init__()
        self.stamina = StaminaGauge(max_stamina, stamina)
        self.wallet = Wallet(currency)
        self.inventory = Inventory(inventory, enabled=inventory_enabled)
        self.journey = JourneyLog()
        for part in (self.stamina, self.wallet, self.inventory):
            part.subscribe(self._notify)

    @classmethod
    def from_record(
        cls, record: SessionRecord, max_stamina: int, inventory_enabled: bool = True
    ) -> "SessionState":
        return cls(
            max_stamina,
            stamina=record.stamina,
            currency=record.currency,
            inventory=tuple(record.inventory),
            inventory_enabled=inventory_enabled,
        )

    def to_record(self) -> SessionRecord:
        return SessionRecord(
            stamina=self.stamina.value,
            currency=self.wallet.balance,
            inventory=sorted(self.inventory.items),
        )

    @property
    def currency(self) -> int:
        return self.wallet.balance

    def reset(self, currency: int = 0) -> None:
        """Start a fresh run: full stamina, new balance, empty inventory and journey."""
        with self._batch():
            self.stamina.restore()
            self.wallet.reset(currency)
            self.inventory.clear()
            self.journey.clear()
