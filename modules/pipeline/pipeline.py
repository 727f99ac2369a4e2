"""
Pipeline for running the membership variants.

Runs every variant on every query, cross-checks the answers and counting
contracts, and optionally hands the variants to the bounded Z3 verifier.
"""

import logging
import uuid
from typing import List, Optional, Sequence
from datetime import datetime

from core.models import (
    PipelineResult,
    ProcessingStatus,
    QueryReport
)
from config.settings import Settings, get_settings
from modules.contains.instrumentation import run_instrumented
from modules.contains.variants import Variant, VARIANTS
from modules.z3.verifier import MembershipVerifier
from utils.validators import validate_query_report

logger = logging.getLogger(__name__)


class MembershipPipeline:
    """
    Main pipeline for the membership variants.

    Workflow:
    1. Run each variant, instrumented, for each query
    2. Validate agreement and comparison-count contracts
    3. Optionally verify every variant with Z3 up to a length bound
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        variants: Sequence[Variant] = VARIANTS
    ):
        """
        Initialize pipeline.

        Args:
            settings: Configuration settings (loads default if None)
            variants: Variants to run, in output order
        """
        self.settings = settings or get_settings()
        self.variants = list(variants)
        self.disciplines = {variant.key: variant.discipline for variant in self.variants}

        logger.info(f"Pipeline initialized with {len(self.variants)} variants")

    def run(
        self,
        sequence: Optional[Sequence[int]] = None,
        queries: Optional[List[int]] = None,
        verify: bool = False,
        max_length: Optional[int] = None
    ) -> PipelineResult:
        """
        Run the variants on `sequence` for each query.

        Args:
            sequence: Input sequence (default: settings.sequence)
            queries: Targets to look for (default: settings.queries)
            verify: Whether to run bounded Z3 verification
            max_length: Verification bound (default: settings.verification.max_length)

        Returns:
            PipelineResult with one QueryReport per query
        """
        logger.info("Starting pipeline execution")
        start_time = datetime.now()

        sequence = list(self.settings.sequence if sequence is None else sequence)
        queries = self.settings.queries if queries is None else queries

        result = PipelineResult(
            session_id=uuid.uuid4().hex[:8],
            sequence=sequence,
            started_at=start_time.isoformat(),
            status=ProcessingStatus.IN_PROGRESS
        )

        try:
            for target in queries:
                report = self._run_query(sequence, target)
                result.queries.append(report)

                is_valid, errors = validate_query_report(report, self.disciplines)
                if not is_valid:
                    for error in errors:
                        logger.error(error)
                    result.errors.extend(errors)

            if verify:
                result.verification = self._verify(max_length)
                for verification in result.verification:
                    if not verification.passed:
                        result.errors.append(
                            f"{verification.variant}: verification failed "
                            f"({len(verification.failures)} failures)"
                        )

            result.status = ProcessingStatus.FAILED if result.errors else ProcessingStatus.SUCCESS

        except Exception as e:
            logger.error(f"Pipeline execution failed: {e}", exc_info=True)
            result.status = ProcessingStatus.FAILED
            result.errors.append(f"Pipeline error: {str(e)}")

        end_time = datetime.now()
        result.total_processing_time = (end_time - start_time).total_seconds()
        result.completed_at = end_time.isoformat()

        logger.info(
            f"Pipeline completed in {result.total_processing_time:.2f}s "
            f"({len(result.queries)} queries, {len(result.errors)} errors)"
        )

        return result

    def _run_query(self, sequence: List[int], target: int) -> QueryReport:
        """Run every variant for one target."""
        logger.info(f"Querying {target} in {sequence}")
        report = QueryReport(target=target)
        for variant in self.variants:
            report.runs.append(run_instrumented(variant, sequence, target))
        return report

    def _verify(self, max_length: Optional[int]):
        config = self.settings.verification
        if not config.enabled:
            logger.warning("Verification requested but disabled in settings")
            return []

        verifier = MembershipVerifier(
            max_length=config.max_length if max_length is None else max_length,
            timeout_ms=config.timeout_ms,
            verbose_errors=config.verbose_errors
        )
        return [verifier.verify(variant) for variant in self.variants]
