import pytest

from core.models import Discipline, ProcessingStatus
from modules.contains.variants import VARIANTS, Variant, contains2
from modules.z3.symbolic import explore_paths, next_prefix
from modules.z3.verifier import (
    MembershipVerifier,
    VerificationReporter,
    verify_variant,
    verify_variants,
)


def off_by_one(s, c):
    for i in range(len(s) - 1):
        if s[i] == c:
            return True
    return False


def overrun(s, c):
    i = 0
    while i <= len(s) and s[i] != c:
        i += 1
    return i < len(s)


def last_match_wins(s, c):
    found = False
    for x in s:
        found = x == c
    return found


def test_next_prefix():
    assert next_prefix([]) is None
    assert next_prefix([False]) == [True]
    assert next_prefix([False, True]) == [True]
    assert next_prefix([True, False, False]) == [True, False, True]
    assert next_prefix([True, True]) is None


@pytest.mark.parametrize("length", range(5))
def test_path_counts(length):
    by_key = {v.key: v.func for v in VARIANTS}
    assert len(list(explore_paths(by_key["v1"], length))) == 2 ** length
    for key in ("v2", "v3", "v4"):
        assert len(list(explore_paths(by_key[key], length))) == length + 1


def test_early_exit_paths():
    paths = list(explore_paths(contains2, 3))
    assert [p.decisions for p in paths] == [
        [False, False, False],
        [False, False, True],
        [False, True],
        [True],
    ]
    assert [p.result for p in paths] == [False, True, True, True]
    assert [p.comparisons for p in paths] == [3, 3, 2, 1]


@pytest.mark.parametrize("variant", VARIANTS, ids=lambda v: v.key)
def test_variants_verify(variant):
    result = MembershipVerifier(max_length=4).verify(variant)
    assert result.passed, result.failures
    assert result.status == ProcessingStatus.SUCCESS
    assert result.paths_verified == result.paths_explored


def test_off_by_one_scan_is_refuted():
    result = verify_variant(Variant("bad", "off by one", off_by_one, Discipline.FIRST_MATCH), max_length=2)
    assert not result.passed
    assert any("counterexample" in failure for failure in result.failures)


def test_overrun_is_reported():
    result = verify_variant(Variant("bad", "overrun", overrun, Discipline.FIRST_MATCH), max_length=2)
    assert not result.passed
    assert any("read beyond end" in failure for failure in result.failures)
    assert any("IndexError" in failure for failure in result.failures)


def test_wrong_answer_found_with_counterexample():
    verifier = MembershipVerifier(max_length=2)
    result = verifier.verify(Variant("bad", "last match", last_match_wins, Discipline.EXHAUSTIVE))
    assert not result.passed
    failure = next(f for f in result.failures if "counterexample" in f)
    assert "postcondition" in failure


def test_contract_mismatch_is_reported():
    result = verify_variant(Variant("v2", "early", contains2, Discipline.EXHAUSTIVE), max_length=2)
    assert not result.passed
    assert all("contract" in failure for failure in result.failures)


def test_counterexample_satisfies_refutation():
    verifier = MembershipVerifier(max_length=1)
    for outcome in explore_paths(off_by_one, 1):
        verifier.check_path(outcome, Discipline.FIRST_MATCH)
        assert outcome.counterexample is not None
        assert outcome.counterexample["S"][0] == outcome.counterexample["c"]


def test_report_lists_every_variant():
    results = verify_variants(max_length=2)
    report = VerificationReporter.format_summary(results)
    for variant in VARIANTS:
        assert variant.label in report
    assert "Variants verified: 4/4" in report
