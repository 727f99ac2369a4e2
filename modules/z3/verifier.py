"""
Bounded Z3 Verification of the Membership Variants

For every sequence length n from 0 up to a bound, each execution path of a
variant is explored symbolically (see modules.z3.symbolic) and checked with
Z3:

1. Correctness: path condition ∧ (result ≠ ∃ i ∈ [0, n) : S[i] = c) is unsat
2. Bounds: no element at position >= n was read
3. Order: elements were compared in ascending positional order
4. Comparison count: n for exhaustive variants; k + 1 for first-match
   variants whose first match is at position k, n when there is none

Because S[0..n-1] and c are unconstrained Z3 terms, a verified length covers
every integer sequence of that length.
"""

import time
import logging
from typing import Dict, List, Optional, Any, Iterable

from z3 import Array, IntSort, Int, Solver, Select, Or, Not, BoolVal, sat, unsat

from core.models import (
    Discipline,
    PathOutcome,
    ProcessingStatus,
    VerificationResult
)
from modules.contains.variants import Variant, VARIANTS
from modules.z3.symbolic import explore_paths

logger = logging.getLogger(__name__)

POSTCONDITION_TEXT = "∃ i ∈ [0, n) : S[i] = c"


def membership_postcondition(array, query, length: int):
    """Z3 formula for 'query occurs among array[0 .. length-1]'."""
    if length == 0:
        return BoolVal(False)
    if length == 1:
        return Select(array, 0) == query
    return Or([Select(array, i) == query for i in range(length)])


def expected_comparisons(outcome: PathOutcome, discipline: Discipline) -> int:
    """Comparison count the variant's contract requires on this path."""
    if discipline == Discipline.EXHAUSTIVE:
        return outcome.length
    first = outcome.first_match
    return first + 1 if first is not None else outcome.length


# ============================================================================
# VERIFIER
# ============================================================================

class MembershipVerifier:
    """
    Verifies membership variants over all sequences up to a length bound.

    Each path gets its own Solver; nothing is shared between checks.
    """

    def __init__(self, max_length: int = 4, timeout_ms: int = 5000, verbose_errors: bool = True):
        """
        Initialize verifier.

        Args:
            max_length: Largest sequence length to verify
            timeout_ms: Per-check solver timeout in milliseconds
            verbose_errors: Include counterexamples in failure messages
        """
        self.max_length = max_length
        self.timeout_ms = timeout_ms
        self.verbose_errors = verbose_errors

    def verify(self, variant: Variant) -> VerificationResult:
        """
        Run every check on every path of `variant`.

        Returns:
            VerificationResult; failures are listed, never raised
        """
        start_time = time.time()
        result = VerificationResult(
            variant=variant.key,
            label=variant.label,
            max_length=self.max_length,
            status=ProcessingStatus.IN_PROGRESS
        )

        logger.info(f"Verifying {variant.key} up to length {self.max_length}")

        for length in range(self.max_length + 1):
            for outcome in explore_paths(variant.func, length):
                result.paths_explored += 1
                failures = self.check_path(outcome, variant.discipline)
                if failures:
                    result.failures.extend(
                        f"n={length} path {_format_decisions(outcome)}: {failure}"
                        for failure in failures
                    )
                else:
                    result.paths_verified += 1

        result.status = ProcessingStatus.FAILED if result.failures else ProcessingStatus.SUCCESS
        result.execution_time = time.time() - start_time

        logger.info(
            f"{variant.key}: {result.paths_verified}/{result.paths_explored} paths verified "
            f"in {result.execution_time:.3f}s"
        )
        return result

    def check_path(self, outcome: PathOutcome, discipline: Discipline) -> List[str]:
        """
        Check one explored path.

        Returns:
            List of failure messages (empty when the path is verified)
        """
        failures = []

        if outcome.error:
            failures.append(f"execution failed: {outcome.error}")

        overruns = sorted({i for i in outcome.reads if i >= outcome.length})
        if overruns:
            failures.append(f"read beyond end of sequence at {overruns}")

        if outcome.compared != sorted(outcome.compared):
            failures.append(f"elements compared out of order: {outcome.compared}")

        if outcome.result is not None:
            correctness = self._check_result(outcome)
            if correctness:
                failures.append(correctness)

        if not outcome.error:
            expected = expected_comparisons(outcome, discipline)
            if outcome.comparisons != expected:
                failures.append(
                    f"{outcome.comparisons} comparisons, {discipline.value} contract "
                    f"requires {expected}"
                )

        outcome.verified = not failures
        return failures

    def _check_result(self, outcome: PathOutcome) -> Optional[str]:
        """Prove the returned value equals the postcondition on this path."""
        S = Array('S', IntSort(), IntSort())
        c = Int('c')

        solver = Solver()
        solver.set("timeout", self.timeout_ms)
        for index, holds in zip(outcome.compared, outcome.outcomes):
            atom = Select(S, index) == c
            solver.add(atom if holds else Not(atom))

        solver.add(BoolVal(outcome.result) != membership_postcondition(S, c, outcome.length))

        verdict = solver.check()
        if verdict == unsat:
            return None
        if verdict == sat:
            outcome.counterexample = _extract_counterexample(solver.model(), S, c, outcome.length)
            message = f"returned {outcome.result} but postcondition {POSTCONDITION_TEXT} disagrees"
            if self.verbose_errors:
                message += f" (counterexample: {outcome.counterexample})"
            return message
        return f"solver returned unknown ({solver.reason_unknown()})"


def _extract_counterexample(model, S, c, length: int) -> Dict[str, Any]:
    return {
        "S": [model.eval(Select(S, i), model_completion=True).as_long() for i in range(length)],
        "c": model.eval(c, model_completion=True).as_long(),
    }


def _format_decisions(outcome: PathOutcome) -> str:
    return "[" + ", ".join("T" if d else "F" for d in outcome.decisions) + "]"


# ============================================================================
# VERIFICATION REPORTER
# ============================================================================

class VerificationReporter:
    """Formats verification results as text."""

    @staticmethod
    def format_summary(results: List[VerificationResult]) -> str:
        """
        Format results as readable text report.

        Args:
            results: Verification results, one per variant

        Returns:
            Formatted string report
        """
        lines = [
            "=" * 80,
            "BOUNDED VERIFICATION SUMMARY",
            f"Postcondition: result = {POSTCONDITION_TEXT}",
            "=" * 80,
        ]

        for result in results:
            mark = "✅" if result.passed else "❌"
            lines.append(
                f"{mark} {result.label or result.variant}: "
                f"{result.paths_verified}/{result.paths_explored} paths verified "
                f"(n ≤ {result.max_length}, {result.execution_time:.3f}s)"
            )
            for failure in result.failures[:5]:
                lines.append(f"    • {failure}")
            if len(result.failures) > 5:
                lines.append(f"    • ... {len(result.failures) - 5} more")

        passed = sum(1 for r in results if r.passed)
        lines.extend([
            "",
            f"Variants verified: {passed}/{len(results)}",
            "=" * 80
        ])

        return "\n".join(lines)


# ============================================================================
# CONVENIENCE FUNCTIONS
# ============================================================================

def verify_variant(variant: Variant, max_length: int = 4, timeout_ms: int = 5000) -> VerificationResult:
    """Verify a single variant."""
    return MembershipVerifier(max_length=max_length, timeout_ms=timeout_ms).verify(variant)


def verify_variants(
    variants: Iterable[Variant] = VARIANTS,
    max_length: int = 4,
    timeout_ms: int = 5000
) -> List[VerificationResult]:
    """
    Verify several variants with one verifier.

    Args:
        variants: Variants to verify (default: all four)
        max_length: Largest sequence length to verify
        timeout_ms: Per-check solver timeout in milliseconds

    Returns:
        List of VerificationResult in input order
    """
    verifier = MembershipVerifier(max_length=max_length, timeout_ms=timeout_ms)
    return [verifier.verify(variant) for variant in variants]
