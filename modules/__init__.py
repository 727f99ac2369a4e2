"""
Modules Package

This package contains the modules of the membership predicate workbench.

Submodules:
- contains: the four membership variants and their instrumentation
- z3: bounded symbolic verification with Z3
- control_flow: control-structures walkthrough
- pipeline: runs and cross-checks the variants
"""

__version__ = '1.0.0'

# Submodules are imported on-demand to avoid circular dependencies
# Use: from modules.contains import VARIANTS
# Use: from modules.z3 import MembershipVerifier
# Use: from modules.pipeline import MembershipPipeline
