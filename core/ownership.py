"""Stock ownership overrides (junior technician -> supervisor)."""

from typing import Optional

from .config import STOCK_OVERRIDES


def resolve_owner(name: str, overrides: Optional[dict[str, str]] = None) -> str:
    """
    Effective owner for a nominal owner name.

    Stock added to, transferred to or consumed by an override key is
    tracked under its supervisor. Names without an override come back
    unchanged. Supervisors are never keys, so this is idempotent.
    """
    table = STOCK_OVERRIDES if overrides is None else overrides
    return table.get(name, name)


def has_override(name: str, overrides: Optional[dict[str, str]] = None) -> bool:
    table = STOCK_OVERRIDES if overrides is None else overrides
    return name in table


def find_override_chains(overrides: dict[str, str]) -> list[str]:
    """Keys whose supervisor is itself a key (breaks idempotence)."""
    return [name for name, supervisor in overrides.items() if supervisor in overrides]
