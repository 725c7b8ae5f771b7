from typing import List, Optional

from josephus_ring.data_models import (
    SimulationConfig, SimulationResult, RoundRecord, SimulationError, RingError,
    ConfigurationError
)
from josephus_ring.ring import Participant, build_ring
from josephus_ring.bound_generator import bound_for
from josephus_ring.elimination_engine import EliminationEngine, EliminationListener


class SimulationEngine:
    def __init__(self, config: SimulationConfig, listener: Optional[EliminationListener] = None):
        self._config = config
        self._listener = listener
        self._rounds: List[RoundRecord] = []
        self._current_round = 0

    def run(self) -> SimulationResult:
        self._rounds = []
        self._current_round = 0
        try:
            ring = build_ring(self._config.ring_size)
            engine = EliminationEngine(ring, self._listener)
            start: Optional[Participant] = ring.head

            for order in range(1, self._config.ring_size + 1):
                self._current_round = order
                start = self._play_round(engine, start, order)

            return self._generate_result(engine)

        except (RingError, ConfigurationError):
            raise
        except Exception as e:
            raise SimulationError(
                f"Unexpected error during simulation at round {self._current_round}: {str(e)}",
                details={
                    'round': self._current_round,
                    'error_type': type(e).__name__,
                    'original_error': str(e)
                }
            )

    def _play_round(self, engine: EliminationEngine, start: Participant, order: int) -> Optional[Participant]:
        bound = bound_for(order)
        target = engine.locate(start, bound)
        eliminated_id = target.identifier
        next_start = engine.eliminate(target)

        if self._config.record_history:
            self._rounds.append(RoundRecord(
                round_number=order,
                bound=bound,
                start_id=start.identifier,
                eliminated_id=eliminated_id,
                next_start_id=next_start.identifier if next_start is not None else None,
                remaining=len(engine.ring)
            ))
        return next_start

    def _generate_result(self, engine: EliminationEngine) -> SimulationResult:
        return SimulationResult(
            ring_size=self._config.ring_size,
            elimination_order=engine.elimination_order,
            rounds=self._rounds.copy()
        )
