"""
Utilities Package

This package contains validation helpers for the membership workbench.

Components:
- validators: agreement and counting-contract checks on variant runs

Note: Utilities are imported on-demand.
Use: from utils.validators import validate_query_report
"""

__version__ = '1.0.0'
