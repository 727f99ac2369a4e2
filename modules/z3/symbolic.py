"""
Symbolic execution of the membership variants.

A variant is run on a SymbolicSequence whose elements stand for the unknown
values S[0] ... S[n-1]. Each comparison `S[i] == c` (or `!=`) is answered by a
PathOracle, so the variant's own Python control flow picks the path. Running
the variant once per decision prefix, depth first, enumerates every path it
can take on a sequence of length n.

Comparisons against the same position reuse the earlier answer, so every
enumerated path has a satisfiable path condition.
"""

import logging
from collections.abc import Sequence as SequenceABC
from typing import Callable, Dict, Iterator, List, Optional

from core.models import PathOutcome

logger = logging.getLogger(__name__)


class PathLimitExceeded(Exception):
    """Raised when a single run makes more comparisons than the oracle allows."""


class PathOracle:
    """
    Answers comparison atoms for one run.

    Replays `prefix` for the first fresh atoms and answers False afterwards.
    """

    def __init__(self, prefix: List[bool], max_comparisons: int):
        self.prefix = list(prefix)
        self.max_comparisons = max_comparisons
        self.decisions: List[bool] = []
        self.assigned: Dict[int, bool] = {}
        self.compared: List[int] = []
        self.outcomes: List[bool] = []
        self.reads: List[int] = []

    def decide(self, index: int) -> bool:
        """Return whether S[index] == c holds on the current path."""
        if len(self.compared) >= self.max_comparisons:
            raise PathLimitExceeded(
                f"more than {self.max_comparisons} comparisons on one path"
            )
        if index in self.assigned:
            outcome = self.assigned[index]
        else:
            position = len(self.decisions)
            outcome = self.prefix[position] if position < len(self.prefix) else False
            self.decisions.append(outcome)
            self.assigned[index] = outcome
        self.compared.append(index)
        self.outcomes.append(outcome)
        return outcome


class SymbolicQuery:
    """Stands for the query value c."""

    __hash__ = None

    def __eq__(self, other):
        if isinstance(other, SymbolicElement):
            return other == self
        return NotImplemented

    def __ne__(self, other):
        if isinstance(other, SymbolicElement):
            return other != self
        return NotImplemented

    def __repr__(self) -> str:
        return "c"


class SymbolicElement:
    """Stands for the element S[index]."""

    __slots__ = ("index", "_oracle")
    __hash__ = None

    def __init__(self, index: int, oracle: PathOracle):
        self.index = index
        self._oracle = oracle

    def __eq__(self, other):
        if not isinstance(other, SymbolicQuery):
            return NotImplemented
        return self._oracle.decide(self.index)

    def __ne__(self, other):
        if not isinstance(other, SymbolicQuery):
            return NotImplemented
        return not self._oracle.decide(self.index)

    def __repr__(self) -> str:
        return f"S[{self.index}]"


class SymbolicSequence(SequenceABC):
    """A length-n sequence of SymbolicElements that records every read."""

    def __init__(self, length: int, oracle: PathOracle):
        self._length = length
        self._oracle = oracle

    def __len__(self) -> int:
        return self._length

    def __getitem__(self, index):
        if isinstance(index, slice):
            raise TypeError("SymbolicSequence does not support slicing")
        self._oracle.reads.append(index)
        if index >= self._length:
            raise IndexError(f"read at position {index} of a {self._length}-element sequence")
        return SymbolicElement(index, self._oracle)

    def __iter__(self) -> Iterator[SymbolicElement]:
        for index in range(self._length):
            self._oracle.reads.append(index)
            yield SymbolicElement(index, self._oracle)


def next_prefix(decisions: List[bool]) -> Optional[List[bool]]:
    """
    Next decision prefix in depth-first order, or None when exhausted.

    Flips the last False decision to True and drops everything after it.
    """
    for position in range(len(decisions) - 1, -1, -1):
        if not decisions[position]:
            return decisions[:position] + [True]
    return None


def explore_paths(
    func: Callable,
    length: int,
    max_comparisons: Optional[int] = None
) -> Iterator[PathOutcome]:
    """
    Enumerate every execution path of `func` on sequences of `length`.

    Args:
        func: Membership function taking (sequence, query)
        length: Sequence length n
        max_comparisons: Per-path comparison limit (default 4 * (n + 1))

    Yields:
        PathOutcome per path; `error` is set when the run raised instead of
        returning a bool
    """
    limit = max_comparisons if max_comparisons is not None else 4 * (length + 1)
    prefix: Optional[List[bool]] = []

    while prefix is not None:
        oracle = PathOracle(prefix, limit)
        outcome = PathOutcome(length=length)

        try:
            result = func(SymbolicSequence(length, oracle), SymbolicQuery())
            if isinstance(result, bool):
                outcome.result = result
            else:
                outcome.error = f"returned {type(result).__name__}, expected bool"
        except (IndexError, PathLimitExceeded) as e:
            outcome.error = f"{type(e).__name__}: {e}"

        outcome.decisions = oracle.decisions
        outcome.compared = oracle.compared
        outcome.outcomes = oracle.outcomes
        outcome.reads = oracle.reads
        outcome.comparisons = len(oracle.compared)

        logger.debug(
            f"n={length} path {oracle.decisions} -> {outcome.result} "
            f"({outcome.comparisons} comparisons)"
        )
        yield outcome

        prefix = next_prefix(oracle.decisions)
