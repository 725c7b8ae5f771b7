import sys
import traceback

from typing import Optional

from josephus_ring.simulation_engine import SimulationEngine
from josephus_ring.output_formatter import OutputFormatter
from josephus_ring.data_models import SimulationConfig, SimulationError

RING_SIZE = 20


def run_simulation(config: SimulationConfig, formatter: OutputFormatter) -> bool:
    try:
        result = SimulationEngine(config).run()
        formatter.display_elimination_order(result)
        return True

    except SimulationError as e:
        print(f"Simulation Error: {e.get_detailed_message()}", file=sys.stderr)
        return False
    except Exception as e:
        print(f"Unexpected error during simulation: {e}", file=sys.stderr)
        traceback.print_exc()
        return False


def main(formatter: Optional[OutputFormatter] = None) -> int:
    config = SimulationConfig(ring_size=RING_SIZE, record_history=False)
    if not run_simulation(config, formatter or OutputFormatter()):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
