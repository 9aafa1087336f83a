"""Tests for the seeded piece generator."""

from reserve_core.piece import IdCounter, PIECE_TYPES
from reserve_core.rng import PieceRNG


def test_rng_deterministic():
    """Test that same seed produces same sequence."""
    rng1 = PieceRNG(12345)
    rng2 = PieceRNG(12345)

    sequence1 = [rng1.next_type() for _ in range(30)]
    sequence2 = [rng2.next_type() for _ in range(30)]

    assert sequence1 == sequence2, "Same seed should produce identical sequences"


def test_rng_only_valid_shapes():
    """Test that only the 7 shape labels are drawn."""
    rng = PieceRNG(42)
    drawn = {rng.next_type() for _ in range(200)}

    assert drawn <= set(PIECE_TYPES), "Unexpected shape drawn"
    assert len(drawn) == 7, "200 draws should hit every shape"


def test_generate_ids_increase_by_one():
    """Test generated ids start at the counter and increase by exactly 1."""
    rng = PieceRNG(7)
    counter = IdCounter()

    pieces = [rng.generate(counter) for _ in range(10)]

    assert [p.id for p in pieces] == list(range(10))
    assert counter.value == 10, "Counter should advance once per piece"


def test_generate_uses_caller_counter():
    """Test two counters do not share ids."""
    rng = PieceRNG(7)
    first = IdCounter()
    second = IdCounter(100)

    assert rng.generate(first).id == 0
    assert rng.generate(second).id == 100
    assert rng.generate(first).id == 1


def test_rng_reset():
    """Test resetting with the same seed restarts the sequence."""
    rng = PieceRNG(111)
    first = [rng.next_type() for _ in range(5)]

    rng.reset(111)
    again = [rng.next_type() for _ in range(5)]

    assert first == again, "Reset should restart sequence"
    assert rng.seed == 111
