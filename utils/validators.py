"""
Validation Utilities

Checks instrumented variant runs against the properties every membership
variant must satisfy:

- Agreement: all variants give the same answer for a query
- Correct answer: the result equals `target in sequence`
- Bounds: no element read at or beyond the end of the sequence
- Comparison count: the variant's exhaustive or first-match contract
"""

from typing import List, Tuple

from core.models import Discipline, QueryReport, VariantRun


# ============================================================================
# RUN VALIDATION
# ============================================================================

def expected_run_comparisons(run: VariantRun, discipline: Discipline) -> int:
    """
    Comparison count required by `discipline` for this run's input.

    Example:
        >>> run.sequence, run.target = [3, 8, 2, 5, 10], 5
        >>> expected_run_comparisons(run, Discipline.FIRST_MATCH)
        4
    """
    if discipline == Discipline.EXHAUSTIVE:
        return len(run.sequence)
    if run.target in run.sequence:
        return run.sequence.index(run.target) + 1
    return len(run.sequence)


def validate_run(run: VariantRun, discipline: Discipline) -> Tuple[bool, List[str]]:
    """
    Validate a single instrumented run.

    Args:
        run: VariantRun to validate
        discipline: Comparison-count contract of the variant

    Returns:
        (is_valid, list_of_errors)
    """
    errors = []

    if not run.matches_expected:
        errors.append(
            f"{run.variant}: returned {run.result} for target {run.target}, "
            f"expected {run.expected}"
        )

    if run.out_of_bounds_reads:
        errors.append(f"{run.variant}: read beyond end of sequence at {run.out_of_bounds_reads}")

    expected = expected_run_comparisons(run, discipline)
    if run.comparisons != expected:
        errors.append(
            f"{run.variant}: made {run.comparisons} comparisons, "
            f"{discipline.value} contract requires {expected}"
        )

    return len(errors) == 0, errors


# ============================================================================
# QUERY VALIDATION
# ============================================================================

def validate_agreement(report: QueryReport) -> Tuple[bool, List[str]]:
    """
    Validate that every variant gave the same answer.

    Returns:
        (is_valid, list_of_errors)
    """
    if report.agreed:
        return True, []

    answers = ", ".join(f"{run.variant}={run.result}" for run in report.runs)
    return False, [f"Variants disagree for target {report.target}: {answers}"]


def validate_query_report(report: QueryReport, disciplines: dict) -> Tuple[bool, List[str]]:
    """
    Validate all runs of a query plus their agreement.

    Args:
        report: QueryReport to validate
        disciplines: Mapping of variant key to Discipline

    Returns:
        (is_valid, list_of_errors)
    """
    _, errors = validate_agreement(report)

    for run in report.runs:
        run_valid, run_errors = validate_run(run, disciplines[run.variant])
        if not run_valid:
            errors.extend(run_errors)

    return len(errors) == 0, errors
