from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class NotifiedBirths:
    """Pig ids already surfaced as overdue for birth.

    Immutable: every change returns a new instance.
    """

    ids: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def of(cls, ids: Iterable[object]) -> NotifiedBirths:
        return cls(frozenset(str(i) for i in ids))

    def __contains__(self, pig_id: object) -> bool:
        return str(pig_id) in self.ids

    def __len__(self) -> int:
        return len(self.ids)

    def with_ids(self, ids: Iterable[object]) -> NotifiedBirths:
        added = frozenset(str(i) for i in ids)
        if added <= self.ids:
            return self
        return NotifiedBirths(self.ids | added)

    def without(self, pig_id: object) -> NotifiedBirths:
        key = str(pig_id)
        if key not in self.ids:
            return self
        return NotifiedBirths(self.ids - {key})
