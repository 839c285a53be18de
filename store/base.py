"""Completion store interface.

Any backend that can replace one group's completed set idempotently, keyed
by group number, satisfies it.
"""

from abc import ABC, abstractmethod
from typing import Dict, FrozenSet, Iterable


class CompletionStore(ABC):
    """Durable per-group completion state."""

    @abstractmethod
    def fetch_all(self) -> Dict[int, FrozenSet[str]]:
        """
        Every stored group's completed activity ids.
        Groups without a row are simply absent. Raises StoreUnavailable.
        """

    @abstractmethod
    def upsert_group_completion(self, group_id: int, completed: Iterable[str]) -> None:
        """
        Replace the group's completed set (the empty set resets it).
        Repeating the same call has no further effect. Raises StoreUnavailable.
        """
