"""
Configuration Package

This package contains configuration settings and environment management.

Components:
- settings: Application settings loaded from environment
"""

from config.settings import get_settings, Settings, VerificationConfig

__all__ = ['get_settings', 'Settings', 'VerificationConfig']

__version__ = '1.0.0'
