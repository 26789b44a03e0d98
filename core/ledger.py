"""In-memory inventory ledger with merge-or-create semantics."""

from dataclasses import replace
from typing import Iterable, Iterator, Optional

from .models import StockLine, new_id


class InventoryLedger:
    """
    Collection of StockLines keyed by (owner, device, model, category).

    Matching is exact and case-sensitive: "Camara" and "CAMARA" are
    different devices. Lines that reach zero stay in the ledger; only
    ``replace_for_owner`` removes lines.
    """

    def __init__(self, lines: Optional[Iterable[StockLine]] = None):
        self._lines: list[StockLine] = list(lines or [])

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[StockLine]:
        return iter(self._lines)

    @property
    def lines(self) -> list[StockLine]:
        return list(self._lines)

    def copy(self) -> "InventoryLedger":
        """Independent copy; mutations on it never touch this ledger."""
        return InventoryLedger(replace(line) for line in self._lines)

    def get(self, line_id: str) -> Optional[StockLine]:
        for line in self._lines:
            if line.id == line_id:
                return line
        return None

    def find_matching(
        self,
        owner: str,
        device: str,
        model: str,
        category: str,
    ) -> Optional[StockLine]:
        key = (owner, device, model, category)
        for line in self._lines:
            if line.key == key:
                return line
        return None

    def credit(
        self,
        owner: str,
        device: str,
        model: str,
        category: str,
        quantity: int,
        id_prefix: str = "stock",
    ) -> StockLine:
        """Add ``quantity`` to the matching line, creating it if needed."""
        if quantity < 0:
            raise ValueError(f"Cannot credit a negative quantity ({quantity})")

        line = self.find_matching(owner, device, model, category)
        if line is not None:
            line.quantity += quantity
            return line

        line = StockLine(
            id=new_id(id_prefix),
            category=category,
            device=device,
            model=model,
            quantity=quantity,
            owner=owner,
        )
        self._lines.append(line)
        return line

    def debit(self, line_id: str, quantity: int) -> int:
        """
        Remove up to ``quantity`` from a line.

        Returns:
            Quantity actually removed (never more than the line held).
            Callers must log this amount, not the requested one.

        Raises:
            KeyError: If no line has ``line_id``
        """
        if quantity < 0:
            raise ValueError(f"Cannot debit a negative quantity ({quantity})")

        line = self.get(line_id)
        if line is None:
            raise KeyError(line_id)

        moved = min(quantity, line.quantity)
        line.quantity -= moved
        return moved

    def replace_for_owner(self, owner: str, new_lines: Iterable[StockLine]) -> int:
        """
        Drop every line of ``owner`` and append ``new_lines`` as given.

        Other owners' lines are untouched.

        Returns:
            Number of lines removed
        """
        kept = [line for line in self._lines if line.owner != owner]
        removed = len(self._lines) - len(kept)
        self._lines = kept + list(new_lines)
        return removed

    def lines_for_owner(self, owner: str) -> list[StockLine]:
        return [line for line in self._lines if line.owner == owner]

    def available_for(self, owners: Iterable[str]) -> list[StockLine]:
        """Lines with stock left that belong to any of ``owners``."""
        wanted = set(owners)
        return [line for line in self._lines if line.quantity > 0 and line.owner in wanted]

    def owners(self) -> list[str]:
        """Distinct owners in first-seen order."""
        seen: dict[str, None] = {}
        for line in self._lines:
            seen.setdefault(line.owner, None)
        return list(seen)

    def total_quantity(
        self,
        device: Optional[str] = None,
        model: Optional[str] = None,
        owners: Optional[Iterable[str]] = None,
    ) -> int:
        """Sum of quantities, optionally filtered by device, model and owners."""
        wanted = set(owners) if owners is not None else None
        total = 0
        for line in self._lines:
            if device is not None and line.device != device:
                continue
            if model is not None and line.model != model:
                continue
            if wanted is not None and line.owner not in wanted:
                continue
            total += line.quantity
        return total

    def summary(self) -> dict:
        return {
            "total_units": sum(line.quantity for line in self._lines),
            "lines": len(self._lines),
            "owners": len(self.owners()),
            "empty_lines": sum(1 for line in self._lines if line.quantity == 0),
        }

    def to_list(self) -> list[dict]:
        return [line.to_dict() for line in self._lines]

    @classmethod
    def from_list(cls, data: Iterable[dict]) -> "InventoryLedger":
        return cls(StockLine.from_dict(item) for item in data)
