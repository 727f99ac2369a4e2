from config.settings import Settings, VerificationConfig
from core.models import Discipline, ProcessingStatus
from modules.contains.variants import VARIANTS, Variant
from modules.pipeline.pipeline import MembershipPipeline


def always_true(s, c):
    return True


def test_default_run():
    result = MembershipPipeline(settings=Settings()).run()
    assert result.status == ProcessingStatus.SUCCESS
    assert result.errors == []
    assert [report.target for report in result.queries] == [5, 99]
    assert [run.result for run in result.queries[0].runs] == [True] * 4
    assert [run.result for run in result.queries[1].runs] == [False] * 4
    assert all(report.agreed for report in result.queries)
    assert result.verification == []


def test_explicit_inputs():
    result = MembershipPipeline(settings=Settings()).run(sequence=[-4, 0, 4], queries=[-4, 1])
    assert result.sequence == [-4, 0, 4]
    assert [run.comparisons for run in result.queries[0].runs] == [3, 1, 1, 1]
    assert [run.comparisons for run in result.queries[1].runs] == [3, 3, 3, 3]


def test_disagreement_fails_the_run():
    variants = list(VARIANTS) + [Variant("v5", "always true", always_true, Discipline.FIRST_MATCH)]
    result = MembershipPipeline(settings=Settings(), variants=variants).run(queries=[99])
    assert result.status == ProcessingStatus.FAILED
    assert any("disagree" in error for error in result.errors)
    assert not result.queries[0].agreed


def test_verification_is_attached():
    result = MembershipPipeline(settings=Settings()).run(verify=True, max_length=2)
    assert result.status == ProcessingStatus.SUCCESS
    assert [v.variant for v in result.verification] == ["v1", "v2", "v3", "v4"]
    assert result.verification_passed


def test_verification_can_be_disabled():
    settings = Settings(verification=VerificationConfig(enabled=False))
    result = MembershipPipeline(settings=settings).run(verify=True)
    assert result.verification == []
    assert result.status == ProcessingStatus.SUCCESS
