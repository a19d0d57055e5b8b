"""Session resources - stamina gate, currency wallet and the session inventory."""

from collections.abc import Iterable

from wildtrail.core.observable import Observable


class StaminaGauge(Observable):
    """Bounded stamina counter. The only gate on resolving another event."""

    def __init__(self, max_stamina: int, value: int | None = None):
        super().__init__()
        if max_stamina < 1:
            raise ValueError("max_stamina must be at least 1")
        self.max_stamina = max_stamina
        self._value = max_stamina if value is None else min(max(value, 0), max_stamina)

    @property
    def value(self) -> int:
        return self._value

    def has_stamina(self) -> bool:
        return self._value > 0

    def consume(self) -> bool:
        """Spend one unit. Returns False, leaving state untouched, when already empty."""
        if self._value <= 0:
            return False
        self._value -= 1
        self._notify()
        return True

    def restore(self) -> None:
        if self._value != self.max_stamina:
            self._value = self.max_stamina
            self._notify()


class Wallet(Observable):
    """Session currency, floored at 0."""

    def __init__(self, balance: int = 0):
        super().__init__()
        self._balance = max(0, balance)

    @property
    def balance(self) -> int:
        return self._balance

    def add(self, amount: int) -> int:
        """Apply a reward (possibly negative). Returns the delta actually applied."""
        new_balance = max(0, self._balance + amount)
        delta = new_balance - self._balance
        if delta:
            self._balance = new_balance
            self._notify()
        return delta

    def spend(self, amount: int) -> bool:
        if amount < 0:
            raise ValueError("Cannot spend a negative amount")
        if self._balance < amount:
            return False
        if amount:
            self._balance -= amount
            self._notify()
        return True

    def reset(self, balance: int) -> None:
        balance = max(0, balance)
        if balance != self._balance:
            self._balance = balance
            self._notify()


class Inventory(Observable):
    """Item ids held for the current session only.

    The product ships with this subsystem switched off; a disabled inventory
    keeps its slot and API but refuses every addition.
    """

    def __init__(self, items: Iterable[int] = (), enabled: bool = True):
        super().__init__()
        self.enabled = enabled
        self._items: set[int] = {item for item in items if item > 0}

    @property
    def items(self) -> frozenset[int]:
        return frozenset(self._items)

    def add(self, item_id: int) -> bool:
        if not self.enabled or item_id <= 0 or item_id in self._items:
            return False
        self._items.add(item_id)
        self._notify()
        return True

    def remove(self, item_id: int) -> bool:
        if item_id not in self._items:
            return False
        self._items.discard(item_id)
        self._notify()
        return True

    def has(self, item_id: int) -> bool:
        return item_id in self._items

    def count(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        if self._items:
            self._items.clear()
            self._notify()
