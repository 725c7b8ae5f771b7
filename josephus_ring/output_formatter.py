import sys

from typing import List, Optional, TextIO

from josephus_ring.data_models import RoundRecord, SimulationResult, VerificationResult


class OutputFormatter:
    def __init__(self, output_stream: Optional[TextIO] = None, delimiter: str = " "):
        self._output_stream = output_stream or sys.stdout
        self._delimiter = delimiter

    def format_elimination_order(self, order: List[int]) -> str:
        return self._delimiter.join(str(identifier) for identifier in order)

    def format_round(self, record: RoundRecord) -> str:
        line = (f"Round {record.round_number}: bound {record.bound}, "
                f"start {record.start_id}, eliminated {record.eliminated_id}")
        if record.next_start_id is None:
            return line + ", ring empty"
        return line + f", next start {record.next_start_id} ({record.remaining} left)"

    def format_summary(self, result: SimulationResult) -> str:
        return (f"{result.total_rounds} participants eliminated from a ring of "
                f"{result.ring_size}, last one out: {result.survivor}")

    def display_elimination_order(self, result: SimulationResult) -> None:
        self.display_message(self.format_elimination_order(result.elimination_order))

    def display_round(self, record: RoundRecord) -> None:
        self.display_message(self.format_round(record))

    def display_message(self, message: str) -> None:
        self._output_stream.write(message + "\n")
        self._output_stream.flush()

    def display_verification_result(self, result: VerificationResult) -> None:
        if result.is_valid:
            output = f"Verification successful!\nRounds checked: {result.rounds_checked}"
        else:
            output = result.get_error_description()
        self.display_message(output)
