from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any


DEFAULT_RING_SIZE = 20


@dataclass
class SimulationConfig:
    ring_size: int = DEFAULT_RING_SIZE
    record_history: bool = True

    def __post_init__(self):
        if isinstance(self.ring_size, bool) or not isinstance(self.ring_size, int):
            raise InvalidSizeError(f"Ring size must be an integer, got: {self.ring_size!r}",
                                   ring_size=self.ring_size)
        if self.ring_size < 1:
            raise InvalidSizeError(f"Ring size must be at least 1, got: {self.ring_size}",
                                   ring_size=self.ring_size)


@dataclass
class RoundRecord:
    round_number: int
    bound: int
    start_id: int
    eliminated_id: int
    next_start_id: Optional[int]
    remaining: int

    def __post_init__(self):
        if self.round_number < 1:
            raise ValueError("Round number must be positive")
        if self.remaining < 0:
            raise ValueError("Remaining participant count cannot be negative")

    def __str__(self) -> str:
        return f"{self.round_number}:{self.bound}:{self.eliminated_id}"


@dataclass
class SimulationResult:
    ring_size: int
    elimination_order: List[int]
    rounds: List[RoundRecord] = field(default_factory=list)
    total_rounds: int = 0

    def __post_init__(self):
        self.total_rounds = len(self.elimination_order)

    @property
    def survivor(self) -> Optional[int]:
        return self.elimination_order[-1] if self.elimination_order else None


@dataclass
class VerificationResult:
    is_valid: bool
    error_round: Optional[int] = None
    error_participant: Optional[int] = None
    error_message: Optional[str] = None
    rounds_checked: int = 0

    def has_error(self) -> bool:
        return not self.is_valid

    def get_error_description(self) -> str:
        if self.is_valid:
            return "Verification successful"

        error_parts = []
        if self.error_round is not None:
            error_parts.append(f"Round {self.error_round}")
        if self.error_participant is not None:
            error_parts.append(f"Participant {self.error_participant}")
        if self.error_message:
            error_parts.append(self.error_message)

        return "Error: " + ", ".join(error_parts) if error_parts else "Unknown error"


class SimulationError(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def get_detailed_message(self) -> str:
        if not self.details:
            return self.message

        detail_strs = [f"{k}: {v}" for k, v in self.details.items()]
        return f"{self.message}\nDetails: {', '.join(detail_strs)}"


class ConfigurationError(SimulationError):
    pass


class InvalidSizeError(ConfigurationError):
    def __init__(self, message: str, ring_size: Any = None):
        details = {}
        if ring_size is not None:
            details['ring_size'] = ring_size

        super().__init__(message, details)
        self.ring_size = ring_size


class RingError(SimulationError):
    def __init__(self, message: str, participant_id: Optional[int] = None,
                 slot: Optional[int] = None):
        details = {}
        if participant_id is not None:
            details['participant'] = participant_id
        if slot is not None:
            details['slot'] = slot

        super().__init__(message, details)
        self.participant_id = participant_id
        self.slot = slot


class RingEmptyError(RingError):
    pass


class InvalidStartError(RingError):
    pass


class VerificationError(SimulationError):
    def __init__(self, message: str, round_number: Optional[int] = None):
        details = {}
        if round_number is not None:
            details['round'] = round_number

        super().__init__(message, details)
        self.round_number = round_number
