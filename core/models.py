"""
Core data models for the membership predicate workbench.

Contains all Pydantic models for variant runs, query reports, verification
results, and pipeline state.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field
from enum import Enum


# ============================================================================
# ENUMS
# ============================================================================

class ProcessingStatus(str, Enum):
    """Status of processing."""
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    SUCCESS = "success"
    FAILED = "failed"


class Discipline(str, Enum):
    """Comparison-count contract of a variant."""
    EXHAUSTIVE = "exhaustive"
    FIRST_MATCH = "first_match"


# ============================================================================
# RUN MODELS
# ============================================================================

class VariantRun(BaseModel):
    """
    One instrumented call of a membership variant.

    `reads` lists element positions in the order the variant touched them;
    an attempted read at or beyond len(sequence) is recorded as well.
    """
    variant: str
    label: str
    sequence: List[int] = Field(default_factory=list)
    target: int
    result: bool
    comparisons: int = 0
    reads: List[int] = Field(default_factory=list)
    expected: bool

    @property
    def matches_expected(self) -> bool:
        return self.result == self.expected

    @property
    def out_of_bounds_reads(self) -> List[int]:
        return [i for i in self.reads if i >= len(self.sequence)]

    def format_line(self, show_counts: bool = False) -> str:
        """Render the driver line: '<label>: <true|false>'."""
        line = f"{self.label}: {str(self.result).lower()}"
        if show_counts:
            line += f" (comparisons={self.comparisons})"
        return line


class QueryReport(BaseModel):
    """All variant runs for a single query target."""
    target: int
    runs: List[VariantRun] = Field(default_factory=list)

    @property
    def agreed(self) -> bool:
        return len({run.result for run in self.runs}) <= 1


# ============================================================================
# VERIFICATION MODELS
# ============================================================================

class PathOutcome(BaseModel):
    """
    One execution path explored symbolically.

    `decisions` holds the branch outcome of each fresh comparison atom
    S[i] == c, `compared` the element position of every comparison made
    (repeats included), and `outcomes` the value of each of those atoms.
    """
    length: int
    decisions: List[bool] = Field(default_factory=list)
    compared: List[int] = Field(default_factory=list)
    outcomes: List[bool] = Field(default_factory=list)
    reads: List[int] = Field(default_factory=list)
    result: Optional[bool] = None
    comparisons: int = 0
    verified: bool = False
    counterexample: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @property
    def first_match(self) -> Optional[int]:
        """Position of the first element found equal to the query, if any."""
        for index, outcome in zip(self.compared, self.outcomes):
            if outcome:
                return index
        return None


class VerificationResult(BaseModel):
    """Result of bounded verification of one variant."""
    variant: str
    label: str = ""
    max_length: int
    status: ProcessingStatus = ProcessingStatus.PENDING
    paths_explored: int = 0
    paths_verified: int = 0
    failures: List[str] = Field(default_factory=list)
    execution_time: float = 0.0

    @property
    def passed(self) -> bool:
        return self.status == ProcessingStatus.SUCCESS and not self.failures

    class Config:
        use_enum_values = True


# ============================================================================
# PIPELINE MODELS
# ============================================================================

class PipelineResult(BaseModel):
    """
    Complete pipeline result.

    Contains every query report, optional verification results, and the
    aggregate status of the run.
    """

    # Session info
    session_id: str
    sequence: List[int] = Field(default_factory=list)
    started_at: str
    completed_at: str = ""

    queries: List[QueryReport] = Field(default_factory=list)
    verification: List[VerificationResult] = Field(default_factory=list)

    # Status
    status: ProcessingStatus = ProcessingStatus.PENDING
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)

    total_processing_time: float = 0.0

    @property
    def verification_passed(self) -> bool:
        return all(result.passed for result in self.verification)

    class Config:
        use_enum_values = True


# ============================================================================
# EXPORT ALL MODELS
# ============================================================================

__all__ = [
    'ProcessingStatus',
    'Discipline',
    'VariantRun',
    'QueryReport',
    'PathOutcome',
    'VerificationResult',
    'PipelineResult',
]
