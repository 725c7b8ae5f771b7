#!/usr/bin/env python3
"""Replay verification of finished simulations"""

import io

import pytest

from josephus_ring.data_models import SimulationConfig, SimulationResult, RoundRecord
from josephus_ring.simulation_engine import SimulationEngine
from josephus_ring.verifier import EliminationVerifier
from josephus_ring.output_formatter import OutputFormatter
from josephus_ring import josephus_verify


def run(n, record_history=True):
    return SimulationEngine(SimulationConfig(ring_size=n, record_history=record_history)).run()


def test_accepts_real_result():
    verification = EliminationVerifier().verify(run(20))

    assert verification.is_valid
    assert verification.rounds_checked == 20
    assert verification.get_error_description() == "Verification successful"


def test_accepts_result_without_history():
    assert EliminationVerifier().verify(run(12, record_history=False)).is_valid


def test_rejects_wrong_length():
    result = SimulationResult(ring_size=5, elimination_order=[3, 1, 2])
    verification = EliminationVerifier().verify(result)

    assert verification.has_error()
    assert "Expected 5 eliminations" in verification.error_message


def test_rejects_repeated_participant():
    result = SimulationResult(ring_size=3, elimination_order=[3, 3, 1])
    verification = EliminationVerifier().verify(result)

    assert not verification.is_valid
    assert verification.error_round == 2
    assert verification.get_error_description() == (
        "Error: Round 2, Participant 3 eliminated twice"
    )


def test_rejects_unknown_participant():
    result = SimulationResult(ring_size=3, elimination_order=[3, 1, 7])
    verification = EliminationVerifier().verify(result)

    assert not verification.is_valid
    assert verification.error_round == 3


def test_rejects_swapped_order():
    order = run(20).elimination_order
    order[4], order[5] = order[5], order[4]
    verification = EliminationVerifier().verify(SimulationResult(ring_size=20, elimination_order=order))

    assert not verification.is_valid
    assert verification.error_round == 5
    assert verification.rounds_checked == 4


def test_rejects_tampered_round_record():
    result = run(6)
    original = result.rounds[2]
    result.rounds[2] = RoundRecord(
        round_number=original.round_number,
        bound=original.bound + 1,
        start_id=original.start_id,
        eliminated_id=original.eliminated_id,
        next_start_id=original.next_start_id,
        remaining=original.remaining
    )
    verification = EliminationVerifier().verify(result)

    assert not verification.is_valid
    assert verification.error_round == 3
    assert verification.error_message == "round record does not match replay"


def test_rejects_tampered_next_start_and_remaining():
    result = run(6)
    original = result.rounds[1]
    result.rounds[1] = RoundRecord(
        round_number=original.round_number,
        bound=original.bound,
        start_id=original.start_id,
        eliminated_id=original.eliminated_id,
        next_start_id=99,
        remaining=42
    )
    verification = EliminationVerifier().verify(result)

    assert not verification.is_valid
    assert verification.error_round == 2
    assert verification.rounds_checked == 1


def test_rejects_wrong_remaining_on_last_round():
    result = run(4)
    last = result.rounds[-1]
    result.rounds[-1] = RoundRecord(
        round_number=last.round_number,
        bound=last.bound,
        start_id=last.start_id,
        eliminated_id=last.eliminated_id,
        next_start_id=None,
        remaining=1
    )
    verification = EliminationVerifier().verify(result)

    assert not verification.is_valid
    assert verification.error_round == 4


@pytest.mark.parametrize("ring_size", [0, -3, "2", True])
def test_rejects_invalid_ring_size(ring_size):
    verification = EliminationVerifier().verify(
        SimulationResult(ring_size=ring_size, elimination_order=[])
    )

    assert not verification.is_valid
    assert "Invalid ring size" in verification.error_message


@pytest.mark.parametrize("identifier", ["1", 1.0, None, True])
def test_rejects_non_integer_participant(identifier):
    verification = EliminationVerifier().verify(
        SimulationResult(ring_size=2, elimination_order=[identifier, 2])
    )

    assert not verification.is_valid
    assert verification.error_round == 1
    assert "Unknown participant" in verification.error_message


def test_display_verification_result():
    stream = io.StringIO()
    formatter = OutputFormatter(stream)
    verifier = EliminationVerifier()

    formatter.display_verification_result(verifier.verify(run(4)))
    formatter.display_verification_result(
        verifier.verify(SimulationResult(ring_size=2, elimination_order=[2, 1]))
    )

    assert stream.getvalue().splitlines() == [
        "Verification successful!",
        "Rounds checked: 4",
        "Error: Round 1, Participant 2, expected participant 1 to be eliminated",
    ]


def test_verify_entry_reports_rounds_and_result():
    stream = io.StringIO()

    exit_code = josephus_verify.main(OutputFormatter(stream))

    lines = stream.getvalue().splitlines()
    assert exit_code == 0
    assert len(lines) == 23
    assert lines[0] == "Round 1: bound 3, start 1, eliminated 3, next start 4 (19 left)"
    assert lines[19] == "Round 20: bound 13, start 9, eliminated 9, ring empty"
    assert lines[20] == "20 participants eliminated from a ring of 20, last one out: 9"
    assert lines[21:] == ["Verification successful!", "Rounds checked: 20"]
