"""
Membership Predicate Module

Main components:
- contains1 ... contains4: the four membership variants
- VARIANTS: ordered registry of Variant records
- run_instrumented: run a variant while counting comparisons and reads
"""

from modules.contains.variants import (
    Variant,
    VARIANTS,
    contains1,
    contains2,
    contains3,
    contains4,
    get_variant
)
from modules.contains.instrumentation import (
    ComparisonCounter,
    CountingElement,
    ProbedSequence,
    run_instrumented
)

__all__ = [
    'Variant',
    'VARIANTS',
    'contains1',
    'contains2',
    'contains3',
    'contains4',
    'get_variant',
    'ComparisonCounter',
    'CountingElement',
    'ProbedSequence',
    'run_instrumented',
]
