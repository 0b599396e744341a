"""Tests for the digit counter and its scheduling strategies."""

import pytest

from topogen.glp import (
    DigitCounter,
    GrayCode,
    ScanningStrategy,
    SubProcess,
    ThreadedStrategy,
    deltas,
    states,
    strategy_for,
)

STRATEGIES = ["scanning", "threaded"]


def gray_codes(n: int, strategy: str) -> list[str]:
    return [handle.value.bits() for handle in states(GrayCode(n), strategy)]


class Radix(SubProcess):
    """Mixed-radix digits: digit i makes radix[i] - 1 moves per pass."""

    def __init__(self, radix: list[int]) -> None:
        self.radix = radix
        self.moves = [0] * len(radix)

    def size(self) -> int:
        return len(self.radix)

    def execute(self, position: int) -> tuple[bool, int]:
        self.moves[position] += 1
        live = self.moves[position] % (self.radix[position] - 1) != 0
        return live, position


class TestGrayCode:
    """The reflected Gray code exercises the counter end to end."""

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_two_bits(self, strategy: str) -> None:
        assert gray_codes(2, strategy) == ["00", "01", "11", "10"]

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_three_bits(self, strategy: str) -> None:
        assert gray_codes(3, strategy) == ["000", "001", "011", "010", "110", "111", "101", "100"]

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_every_word_once(self, strategy: str) -> None:
        words = gray_codes(6, strategy)
        assert len(words) == 64
        assert len(set(words)) == 64

    @pytest.mark.parametrize("strategy", STRATEGIES)
    def test_zero_bits(self, strategy: str) -> None:
        assert gray_codes(0, strategy) == [""]

    def test_out_of_range_position(self) -> None:
        with pytest.raises(IndexError):
            GrayCode(2).execute(2)
        with pytest.raises(IndexError):
            GrayCode(2).execute(-1)


class TestStrategies:
    """Tests for the scanning and threaded schedulers."""

    def test_strategy_for(self) -> None:
        assert isinstance(strategy_for("scanning", 3), ScanningStrategy)
        assert isinstance(strategy_for("threaded", 3), ThreadedStrategy)

    def test_unknown_strategy(self) -> None:
        with pytest.raises(ValueError):
            strategy_for("random", 3)

    def test_initial_state(self) -> None:
        assert ScanningStrategy(3).eligible == [True, True, True]
        assert ThreadedStrategy(3).pointers == [0, 0, 0]

    def test_last_position_parking_sets_sentinel(self) -> None:
        s = ThreadedStrategy(2)
        s.record(0, False)
        assert s.pointers == [1, 0]
        s.record(1, False)
        assert s.pointers == [0, 2]
        s.record(0, False)
        assert s.pointers == [2, 0]
        assert s.next_position() is None

    def test_live_position_stays_first(self) -> None:
        s = ThreadedStrategy(3)
        s.record(0, True)
        assert s.next_position() == 0

    def test_empty_counter(self) -> None:
        assert ThreadedStrategy(0).next_position() is None
        assert ScanningStrategy(0).next_position() is None

    @pytest.mark.parametrize("radix", [[3, 2], [2, 4, 3], [4, 4], [3, 3, 3, 2]])
    def test_identical_sequences(self, radix: list[int]) -> None:
        scanning = list(DigitCounter(Radix(radix), "scanning"))
        threaded = list(DigitCounter(Radix(radix), "threaded"))
        assert scanning == threaded

    def test_mixed_radix_sequence(self) -> None:
        positions = [p for p, _ in DigitCounter(Radix([3, 2]), "threaded")]
        assert positions == [0, 0, 1, 0, 0]


class TestDigitCounter:
    """Tests for the counter wrapper."""

    def test_step_until_exhausted(self) -> None:
        counter = DigitCounter(GrayCode(2))
        assert counter.step() == (0, 0)
        assert counter.step() == (1, 1)
        assert counter.step() == (0, 0)
        assert counter.step() is None
        assert counter.exhausted
        assert counter.steps == 3

    def test_accepts_strategy_instance(self) -> None:
        counter = DigitCounter(GrayCode(3), ScanningStrategy(3))
        assert len(list(counter)) == 7

    def test_deltas(self) -> None:
        assert list(deltas(GrayCode(3))) == [0, 1, 0, 2, 0, 1, 0]
