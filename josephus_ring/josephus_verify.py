import sys
import traceback

from typing import Optional

from josephus_ring.simulation_engine import SimulationEngine
from josephus_ring.verifier import EliminationVerifier
from josephus_ring.output_formatter import OutputFormatter
from josephus_ring.data_models import SimulationConfig, SimulationError, VerificationResult
from josephus_ring.josephus import RING_SIZE


def verify_simulation(config: SimulationConfig, formatter: OutputFormatter) -> VerificationResult:
    try:
        result = SimulationEngine(config).run()
        for record in result.rounds:
            formatter.display_round(record)
        formatter.display_message(formatter.format_summary(result))
        return EliminationVerifier().verify(result)

    except SimulationError as e:
        return VerificationResult(
            is_valid=False,
            error_message=f"Simulation Error: {e.get_detailed_message()}"
        )
    except Exception as e:
        traceback.print_exc()
        return VerificationResult(
            is_valid=False,
            error_message=f"Unexpected error: {str(e)}"
        )


def main(formatter: Optional[OutputFormatter] = None) -> int:
    formatter = formatter or OutputFormatter()
    result = verify_simulation(SimulationConfig(ring_size=RING_SIZE), formatter)
    formatter.display_verification_result(result)
    return 0 if result.is_valid else 1


if __name__ == "__main__":
    sys.exit(main())
