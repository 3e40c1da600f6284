"""Tests for pasada.profiling — conversion profiling API."""

from pasada import Pipeline, convert
from pasada.profiling import (
    ConvertAccumulator,
    get_convert_accumulator,
    profiled_convert,
)


class TestGetConvertAccumulator:
    def test_returns_none_when_disabled(self) -> None:
        assert get_convert_accumulator() is None

    def test_returns_none_outside_context(self) -> None:
        with profiled_convert():
            pass
        assert get_convert_accumulator() is None


class TestProfiledConvert:
    def test_yields_accumulator(self) -> None:
        with profiled_convert() as acc:
            assert isinstance(acc, ConvertAccumulator)
            assert get_convert_accumulator() is acc

    def test_records_convert_call(self) -> None:
        with profiled_convert() as acc:
            convert("# Hello")
        assert acc.convert_calls == 1
        assert acc.source_length == len("# Hello")

    def test_records_every_pass(self) -> None:
        with profiled_convert() as acc:
            convert("# Hello\n- a\n- b")
        assert set(acc.pass_ms) == set(Pipeline().names)
        assert acc.slowest_pass() in acc.pass_ms

    def test_records_multiple_calls(self) -> None:
        with profiled_convert() as acc:
            convert("one")
            convert("two")
            convert("three")
        assert acc.convert_calls == 3
        assert acc.source_length == 11


class TestSummary:
    def test_empty_summary(self) -> None:
        acc = ConvertAccumulator()
        summary = acc.summary()
        assert summary["convert_calls"] == 0
        assert summary["source_length"] == 0
        assert summary["passes"] == {}
        assert acc.slowest_pass() is None

    def test_summary_after_convert(self) -> None:
        with profiled_convert() as acc:
            convert("# Hello\n\nWorld")
        summary = acc.summary()
        assert summary["convert_calls"] == 1
        assert "total_ms" in summary
        assert "emoji" in summary["passes"]
