import pytest

from core.models import Discipline
from modules.contains.instrumentation import (
    ComparisonCounter,
    CountingElement,
    ProbedSequence,
    run_instrumented,
)
from modules.contains.variants import VARIANTS, Variant, get_variant
from utils.validators import expected_run_comparisons, validate_run

SEQUENCE = [3, 8, 2, 5, 10]


@pytest.mark.parametrize("sequence,target", [
    (SEQUENCE, 5),
    (SEQUENCE, 99),
    (SEQUENCE, 3),
    ([], 1),
    ([1, 1, 1], 1),
])
def test_flag_variant_compares_every_element(sequence, target):
    run = run_instrumented(get_variant("v1"), sequence, target)
    assert run.comparisons == len(sequence)
    assert run.reads == list(range(len(sequence)))


@pytest.mark.parametrize("key", ["v2", "v3", "v4"])
@pytest.mark.parametrize("sequence,target,count", [
    (SEQUENCE, 3, 1),
    (SEQUENCE, 5, 4),
    (SEQUENCE, 10, 5),
    (SEQUENCE, 99, 5),
    ([], 0, 0),
    ([1, 1, 1], 1, 1),
])
def test_early_exit_variants_stop_at_first_match(key, sequence, target, count):
    run = run_instrumented(get_variant(key), sequence, target)
    assert run.comparisons == count
    assert run.reads == list(range(count))


@pytest.mark.parametrize("sequence,target", [
    (SEQUENCE, 99),
    ([], 7),
    ([7], 8),
])
def test_while_variant_never_reads_past_end(sequence, target):
    run = run_instrumented(get_variant("v3"), sequence, target)
    assert run.result is False
    assert run.out_of_bounds_reads == []
    assert all(i < len(sequence) for i in run.reads)


def test_probed_sequence_records_overrun():
    counter = ComparisonCounter()
    probed = ProbedSequence([1, 2], counter)
    with pytest.raises(IndexError):
        probed[2]
    assert counter.reads == [2]


def test_counting_element_counts_both_operators():
    counter = ComparisonCounter()
    element = CountingElement(4, counter)
    assert element == 4
    assert element != 5
    assert not element == 5
    assert counter.comparisons == 3


@pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.key)
def test_runs_satisfy_their_contracts(variant):
    for target in (3, 5, 10, 99):
        run = run_instrumented(variant, SEQUENCE, target)
        is_valid, errors = validate_run(run, variant.discipline)
        assert is_valid, errors
        assert run.matches_expected


def test_validate_run_flags_wrong_discipline():
    mislabelled = Variant("early", "early", get_variant("v2").func, Discipline.EXHAUSTIVE)
    run = run_instrumented(mislabelled, SEQUENCE, 8)
    is_valid, errors = validate_run(run, mislabelled.discipline)
    assert not is_valid
    assert "requires 5" in errors[0]


def test_expected_run_comparisons():
    run = run_instrumented(get_variant("v2"), SEQUENCE, 5)
    assert expected_run_comparisons(run, Discipline.FIRST_MATCH) == 4
    assert expected_run_comparisons(run, Discipline.EXHAUSTIVE) == 5


def test_format_line():
    run = run_instrumented(get_variant("v1"), SEQUENCE, 5)
    assert run.format_line() == "Version 1 (flag + for loop): true"
    assert run.format_line(show_counts=True) == "Version 1 (flag + for loop): true (comparisons=5)"
