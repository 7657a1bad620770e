"""In-memory guideline store holding an immutable, swappable snapshot."""

import threading
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from pricing_engine.models.domain.guideline import Guideline

GuidelineSnapshot = Mapping[str, Tuple[Guideline, ...]]

EMPTY_SNAPSHOT: GuidelineSnapshot = MappingProxyType({})


class GuidelineStore:
    """
    Process-wide store of pricing guidelines keyed by uppercased state code.

    The active snapshot is a read-only mapping of tuples and is never
    mutated. ``replace`` freezes a new mapping and swaps the reference, so
    readers see either the previous or the new snapshot in full.
    """

    def __init__(self, guidelines: Optional[Mapping[str, Iterable[Guideline]]] = None):
        self._lock = threading.Lock()
        self._snapshot: GuidelineSnapshot = EMPTY_SNAPSHOT
        self.loaded_at: Optional[datetime] = None
        if guidelines is not None:
            self.replace(guidelines)

    @staticmethod
    def _freeze(guidelines: Mapping[str, Iterable[Guideline]]) -> GuidelineSnapshot:
        return MappingProxyType(
            {state.upper(): tuple(rules) for state, rules in guidelines.items()}
        )

    def snapshot(self) -> GuidelineSnapshot:
        """Return the current snapshot."""
        return self._snapshot

    def get(self, state: str) -> Tuple[Guideline, ...]:
        """Return the guidelines for a state, or an empty tuple if unknown."""
        return self._snapshot.get(state.upper(), ())

    def replace(self, guidelines: Mapping[str, Iterable[Guideline]]) -> None:
        """Replace the whole snapshot with a frozen copy of ``guidelines``."""
        frozen = self._freeze(guidelines)
        with self._lock:
            self._snapshot = frozen
            self.loaded_at = datetime.now(timezone.utc)

    def clear(self) -> None:
        self.replace({})

    @property
    def state_count(self) -> int:
        return len(self._snapshot)

    @property
    def rule_count(self) -> int:
        return sum(len(rules) for rules in self._snapshot.values())
