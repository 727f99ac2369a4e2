"""
Pipeline Module

Main components:
- MembershipPipeline: runs, cross-checks and optionally verifies the variants
"""

from modules.pipeline.pipeline import MembershipPipeline

__all__ = [
    'MembershipPipeline',
]

__version__ = '1.0.0'
