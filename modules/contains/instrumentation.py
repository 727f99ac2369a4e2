"""
Instrumentation for the membership variants.

Wraps the input so that a variant can run unchanged while every equality
comparison and every element read is counted. Used by the pipeline to report
comparison counts and by the tests to check the counting contracts.
"""

import logging
from collections.abc import Sequence as SequenceABC
from typing import Iterator, List, Sequence

from core.models import VariantRun
from modules.contains.variants import Variant

logger = logging.getLogger(__name__)


class ComparisonCounter:
    """Shared tally of comparisons and element reads for one run."""

    def __init__(self):
        self.comparisons = 0
        self.reads: List[int] = []


class CountingElement:
    """An element of the probed sequence whose == and != are counted."""

    __slots__ = ("value", "_counter")

    def __init__(self, value: int, counter: ComparisonCounter):
        self.value = value
        self._counter = counter

    def __eq__(self, other) -> bool:
        self._counter.comparisons += 1
        return self.value == _unwrap(other)

    def __ne__(self, other) -> bool:
        self._counter.comparisons += 1
        return self.value != _unwrap(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"CountingElement({self.value!r})"


class ProbedSequence(SequenceABC):
    """
    Read-only view over a list of ints that records each element read.

    Indexing at or beyond the end is recorded before IndexError is raised,
    so a variant that overruns the sequence leaves a trace.
    """

    def __init__(self, values: Sequence[int], counter: ComparisonCounter):
        self._values = tuple(values)
        self._counter = counter

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        if isinstance(index, slice):
            raise TypeError("ProbedSequence does not support slicing")
        self._counter.reads.append(index)
        if index >= len(self._values):
            raise IndexError(f"read at position {index} of a {len(self._values)}-element sequence")
        return CountingElement(self._values[index], self._counter)

    def __iter__(self) -> Iterator[CountingElement]:
        for index, value in enumerate(self._values):
            self._counter.reads.append(index)
            yield CountingElement(value, self._counter)


def _unwrap(value):
    return value.value if isinstance(value, CountingElement) else value


def run_instrumented(variant: Variant, sequence: Sequence[int], target: int) -> VariantRun:
    """
    Run a variant on a probed copy of `sequence`.

    Args:
        variant: Variant to run
        sequence: Input sequence (not modified)
        target: Value to search for

    Returns:
        VariantRun with the result, comparison count and read trace
    """
    counter = ComparisonCounter()
    probed = ProbedSequence(sequence, counter)

    result = variant(probed, target)

    logger.debug(
        f"{variant.key}({list(sequence)}, {target}) -> {result} "
        f"after {counter.comparisons} comparisons"
    )

    return VariantRun(
        variant=variant.key,
        label=variant.label,
        sequence=list(sequence),
        target=target,
        result=result,
        comparisons=counter.comparisons,
        reads=counter.reads,
        expected=target in sequence
    )
