"""
Run-scoped registry of nested record names already emitted.

Deduplication is by derived name only: two differently shaped objects
under the same field name share the first-seen record.
"""

from typing import Iterator, List, Set

from ...logging_config import get_logger

logger = get_logger(__name__)


class GlobalTypeRegistry:
    """Set of record names emitted during one generation run."""

    def __init__(self):
        self._names: Set[str] = set()
        self._order: List[str] = []

    def register(self, name: str) -> bool:
        """
        Claim ``name`` for emission.

        Returns:
            True if the name was new, False if it was already registered
        """
        if name in self._names:
            logger.debug("Record %s already registered, skipping", name)
            return False
        self._names.add(name)
        self._order.append(name)
        return True

    def __contains__(self, name: str) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._order)

    def clear(self):
        """Forget all names (start of a new run)."""
        self._names.clear()
        self._order.clear()
