"""Tests for InputAccumulator line continuation."""

import pytest

from sqlplusplus.repl.input import InputAccumulator, InputState


@pytest.fixture
def accumulator():
    return InputAccumulator()


class TestContinuation:

    def test_single_line(self, accumulator):
        result = accumulator.feed("SELECT 1")
        assert result.logical_line == "SELECT 1"
        assert not result.continuing
        assert accumulator.state is InputState.NORMAL

    def test_continued_lines_join_without_markers(self, accumulator):
        assert accumulator.feed("SELECT a,\\").logical_line is None
        assert accumulator.state is InputState.CONTINUATION
        assert accumulator.feed(" b \\").logical_line is None
        result = accumulator.feed("FROM t")
        assert result.logical_line == "SELECT a, b FROM t"
        assert accumulator.state is InputState.NORMAL
        assert accumulator.pending == []

    @pytest.mark.parametrize("fragments", [
        ["a"],
        ["a\\", "b"],
        ["x \\", "\\", " \\", "y"],
        ["\\", "z"],
    ])
    def test_logical_line_is_verbatim_concatenation(self, fragments):
        accumulator = InputAccumulator()
        produced = [accumulator.feed(f).logical_line for f in fragments]
        assert produced[:-1] == [None] * (len(fragments) - 1)
        expected = "".join(f[:-1] if f.endswith("\\") else f for f in fragments)
        assert produced[-1] == expected

    def test_continuing_flag_signals_multiline(self, accumulator):
        assert accumulator.feed("a\\").continuing
        assert accumulator.continuing
        assert not accumulator.feed("b").continuing
        assert not accumulator.continuing

    def test_only_the_last_backslash_is_stripped(self, accumulator):
        result = accumulator.feed("SELECT 1 \\\\")
        assert result.logical_line is None
        assert accumulator.pending == ["SELECT 1 \\"]


class TestEmptyInput:

    def test_empty_line_yields_empty_logical_line(self, accumulator):
        result = accumulator.feed("")
        assert result.logical_line == ""
        assert not result.continuing

    def test_reset_discards_pending(self, accumulator):
        accumulator.feed("SELECT\\")
        accumulator.reset()
        assert accumulator.state is InputState.NORMAL
        assert accumulator.feed("1").logical_line == "1"
