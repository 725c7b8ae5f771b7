"""
Circular doubly linked ring of participants.

Participants are stored in a fixed-capacity arena owned by the ring. Links
are slot indices, and callers only ever hold ``Participant`` handles. A slot
that has been released bumps its generation, so any handle taken before the
release is rejected instead of being followed.
"""

import itertools

from dataclasses import dataclass
from typing import Iterator, List, Optional

from josephus_ring.data_models import InvalidSizeError, InvalidStartError, RingEmptyError

_NO_SLOT = -1
_ring_tokens = itertools.count(1)


@dataclass(frozen=True)
class Participant:
    """Handle to one participant of a ring"""
    identifier: int
    slot: int
    generation: int
    ring_token: int

    def __str__(self) -> str:
        return f"Participant({self.identifier})"


class Ring:
    def __init__(self, capacity: int):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidSizeError(f"Ring size must be at least 1, got: {capacity!r}",
                                   ring_size=capacity)

        self._token = next(_ring_tokens)
        self._capacity = capacity
        self._ids: List[Optional[int]] = [None] * capacity
        self._next: List[int] = [_NO_SLOT] * capacity
        self._prev: List[int] = [_NO_SLOT] * capacity
        self._generation: List[int] = [0] * capacity
        self._free: List[int] = list(range(capacity - 1, -1, -1))
        self._head_slot = _NO_SLOT
        self._live = 0
        self._next_identifier = 1

    @classmethod
    def build(cls, n: int) -> "Ring":
        ring = cls(n)
        first = ring._allocate()
        previous = first
        for _ in range(2, n + 1):
            slot = ring._allocate()
            ring._next[previous] = slot
            ring._prev[slot] = previous
            previous = slot

        ring._next[previous] = first
        ring._prev[first] = previous
        ring._head_slot = first
        return ring

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def free_slots(self) -> int:
        return len(self._free)

    @property
    def head(self) -> Participant:
        if self._live == 0:
            raise RingEmptyError("Ring has no live participants")
        return self._handle(self._head_slot)

    def __len__(self) -> int:
        return self._live

    def is_empty(self) -> bool:
        return self._live == 0

    def is_live(self, participant: Participant) -> bool:
        if not isinstance(participant, Participant):
            return False
        if participant.ring_token != self._token:
            return False
        if not 0 <= participant.slot < self._capacity:
            return False
        return (self._generation[participant.slot] == participant.generation
                and self._ids[participant.slot] == participant.identifier)

    def identifier_of(self, participant: Participant) -> int:
        return self._ids[self._checked_slot(participant)]

    def next_of(self, participant: Participant) -> Participant:
        return self._handle(self._next[self._checked_slot(participant)])

    def previous_of(self, participant: Participant) -> Participant:
        return self._handle(self._prev[self._checked_slot(participant)])

    def walk(self, start: Optional[Participant] = None) -> Iterator[Participant]:
        if self._live == 0:
            return
        slot = self._checked_slot(start) if start is not None else self._head_slot
        for _ in range(self._live):
            yield self._handle(slot)
            slot = self._next[slot]

    def identifiers(self, start: Optional[Participant] = None) -> List[int]:
        return [p.identifier for p in self.walk(start)]

    def advance(self, participant: Participant, steps: int) -> Participant:
        slot = self._checked_slot(participant)
        for _ in range(steps):
            slot = self._next[slot]
        return self._handle(slot)

    def remove(self, participant: Participant) -> Optional[Participant]:
        """
        Unlink a participant and release its slot.

        Returns the handle of the removed participant's successor, or None
        when the removed participant was the last one alive.
        """
        slot = self._checked_slot(participant)
        successor = self._next[slot]
        predecessor = self._prev[slot]

        self._next[predecessor] = successor
        self._prev[successor] = predecessor
        self._release(slot)

        if self._live == 0:
            self._head_slot = _NO_SLOT
            return None

        if self._head_slot == slot:
            self._head_slot = successor
        return self._handle(successor)

    def _allocate(self) -> int:
        slot = self._free.pop()
        self._ids[slot] = self._next_identifier
        self._next_identifier += 1
        self._live += 1
        return slot

    def _release(self, slot: int) -> None:
        self._ids[slot] = None
        self._next[slot] = _NO_SLOT
        self._prev[slot] = _NO_SLOT
        self._generation[slot] += 1
        self._free.append(slot)
        self._live -= 1

    def _handle(self, slot: int) -> Participant:
        return Participant(
            identifier=self._ids[slot],
            slot=slot,
            generation=self._generation[slot],
            ring_token=self._token
        )

    def _checked_slot(self, participant: Participant) -> int:
        if not self.is_live(participant):
            raise InvalidStartError(
                f"{participant} is not a live participant of this ring",
                participant_id=getattr(participant, 'identifier', None),
                slot=getattr(participant, 'slot', None)
            )
        return participant.slot

    def __repr__(self) -> str:
        return f"Ring(live={self._live}, capacity={self._capacity})"


def build_ring(n: int) -> Ring:
    return Ring.build(n)
