"""
Z3 Verification Module

This module proves the membership variants correct for every integer
sequence up to a length bound.

Main components:
- MembershipVerifier: per-path Z3 checks of result, bounds, order and count
- explore_paths: symbolic path enumeration of a variant
- verify_variants: convenience function for verifying several variants
"""

from modules.z3.symbolic import explore_paths
from modules.z3.verifier import (
    MembershipVerifier,
    VerificationReporter,
    membership_postcondition,
    verify_variant,
    verify_variants
)

__all__ = [
    'MembershipVerifier',
    'VerificationReporter',
    'explore_paths',
    'membership_postcondition',
    'verify_variant',
    'verify_variants',
]

__version__ = '1.0.0'
