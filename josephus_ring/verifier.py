from typing import List, Optional

from josephus_ring.data_models import RoundRecord, SimulationResult, VerificationResult, VerificationError
from josephus_ring.ring import build_ring
from josephus_ring.bound_generator import bound_for
from josephus_ring.elimination_engine import EliminationEngine


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class EliminationVerifier:
    """Replays a finished simulation on a fresh ring and compares every round"""

    def verify(self, result: SimulationResult) -> VerificationResult:
        try:
            self._check_ring_size(result.ring_size)
            self._check_permutation(result.ring_size, result.elimination_order)
            return self._replay(result)
        except VerificationError as e:
            return VerificationResult(
                is_valid=False,
                error_round=e.round_number,
                error_message=e.message
            )

    def _check_ring_size(self, ring_size: int) -> None:
        if not _is_int(ring_size) or ring_size < 1:
            raise VerificationError(f"Invalid ring size: {ring_size!r}")

    def _check_permutation(self, ring_size: int, order: List[int]) -> None:
        if len(order) != ring_size:
            raise VerificationError(
                f"Expected {ring_size} eliminations, got {len(order)}"
            )

        seen = set()
        for round_number, identifier in enumerate(order, 1):
            if not _is_int(identifier) or not 1 <= identifier <= ring_size:
                raise VerificationError(
                    f"Unknown participant {identifier!r}",
                    round_number=round_number
                )
            if identifier in seen:
                raise VerificationError(
                    f"Participant {identifier} eliminated twice",
                    round_number=round_number
                )
            seen.add(identifier)

    def _replay(self, result: SimulationResult) -> VerificationResult:
        ring = build_ring(result.ring_size)
        engine = EliminationEngine(ring)
        start = ring.head
        records = {record.round_number: record for record in result.rounds}

        for round_number, expected_id in enumerate(result.elimination_order, 1):
            bound = bound_for(round_number)
            start_id = start.identifier
            target = engine.locate(start, bound)
            if target.identifier != expected_id:
                return VerificationResult(
                    is_valid=False,
                    error_round=round_number,
                    error_participant=expected_id,
                    error_message=f"expected participant {target.identifier} to be eliminated",
                    rounds_checked=round_number - 1
                )

            start = engine.eliminate(target)
            next_start_id = start.identifier if start is not None else None

            record = records.get(round_number)
            if record is not None and not self._record_matches(
                    record, bound, start_id, expected_id, next_start_id, len(ring)):
                return VerificationResult(
                    is_valid=False,
                    error_round=round_number,
                    error_participant=record.eliminated_id,
                    error_message="round record does not match replay",
                    rounds_checked=round_number - 1
                )

        return VerificationResult(is_valid=True, rounds_checked=len(result.elimination_order))

    def _record_matches(self, record: RoundRecord, bound: int, start_id: int, eliminated_id: int,
                        next_start_id: Optional[int], remaining: int) -> bool:
        return (record.bound == bound
                and record.start_id == start_id
                and record.eliminated_id == eliminated_id
                and record.next_start_id == next_start_id
                and record.remaining == remaining)
