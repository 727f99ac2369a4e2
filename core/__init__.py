"""
Core Package

This package contains the core data models of the membership workbench.

Components:
- models: Pydantic data models
"""

__version__ = '1.0.0'

# Use: from core.models import VariantRun, PipelineResult
