from typing import Callable, List, Optional

from josephus_ring.data_models import InvalidStartError, RingEmptyError
from josephus_ring.ring import Participant, Ring

EliminationListener = Callable[[int], None]


class EliminationEngine:
    def __init__(self, ring: Ring, listener: Optional[EliminationListener] = None):
        self._ring = ring
        self._listener = listener
        self._elimination_order: List[int] = []

    @property
    def ring(self) -> Ring:
        return self._ring

    @property
    def elimination_order(self) -> List[int]:
        return self._elimination_order.copy()

    def advance_and_eliminate(self, start: Participant, bound: int) -> Optional[Participant]:
        target = self.locate(start, bound)
        return self.eliminate(target)

    def locate(self, start: Participant, bound: int) -> Participant:
        self._check_start(start)
        if isinstance(bound, bool) or not isinstance(bound, int) or bound < 1:
            raise ValueError(f"Bound must be a positive integer, got: {bound!r}")

        # the start participant counts as position 1
        return self._ring.advance(start, bound - 1)

    def eliminate(self, target: Participant) -> Optional[Participant]:
        self._check_start(target)
        identifier = target.identifier
        next_start = self._ring.remove(target)

        self._elimination_order.append(identifier)
        if self._listener is not None:
            self._listener(identifier)
        return next_start

    def _check_start(self, participant: Participant) -> None:
        if self._ring.is_empty():
            raise RingEmptyError(
                "Cannot eliminate from an empty ring",
                participant_id=getattr(participant, 'identifier', None)
            )
        if not self._ring.is_live(participant):
            raise InvalidStartError(
                f"{participant} is not a live participant of this ring",
                participant_id=getattr(participant, 'identifier', None),
                slot=getattr(participant, 'slot', None)
            )
