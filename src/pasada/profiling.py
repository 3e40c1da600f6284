"""Pasada ConvertAccumulator — opt-in profiling for conversions.

This module provides accumulated metrics during conversion:
- Number of convert calls
- Total source length
- Cumulative time spent in each pass

Zero overhead when disabled (get_convert_accumulator() returns None).

Example:
    from pasada import convert
    from pasada.profiling import profiled_convert

    with profiled_convert() as metrics:
        html = convert("# Hello **World**")

    print(metrics.summary())
    # {"total_ms": 0.4, "source_length": 17, "convert_calls": 1, "passes": {...}}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any

from pasada.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ConvertAccumulator:
    """Accumulated metrics during conversion.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total length of sources converted.
        convert_calls: Number of documents converted.
        pass_ms: Cumulative milliseconds per pass name.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    convert_calls: int = 0
    pass_ms: dict[str, float] = field(default_factory=dict)

    def record_convert(self, source_length: int) -> None:
        self.convert_calls += 1
        self.source_length += source_length

    def record_pass(self, name: str, elapsed_ms: float) -> None:
        self.pass_ms[name] = self.pass_ms.get(name, 0.0) + elapsed_ms
        logger.debug("pass %s took %.3f ms", name, elapsed_ms)

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def slowest_pass(self) -> str | None:
        """Name of the pass with the most accumulated time, if any ran."""
        if not self.pass_ms:
            return None
        return max(self.pass_ms, key=self.pass_ms.__getitem__)

    def summary(self) -> dict[str, Any]:
        """Get summary of conversion metrics.

        Returns:
            Dict with total_ms, source_length, convert_calls and passes
            (pass name to rounded milliseconds).

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "convert_calls": self.convert_calls,
            "passes": {name: round(ms, 3) for name, ms in self.pass_ms.items()},
        }


_accumulator: ContextVar[ConvertAccumulator | None] = ContextVar(
    "convert_accumulator",
    default=None,
)


def get_convert_accumulator() -> ConvertAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_convert() -> Iterator[ConvertAccumulator]:
    """Context manager for profiled conversion.

    Creates a ConvertAccumulator and makes it available via
    get_convert_accumulator() for the duration of the with block.

    Example:
        with profiled_convert() as metrics:
            html = convert(source)
        print(metrics.summary())

    """
    acc = ConvertAccumulator()
    token: Token[ConvertAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
