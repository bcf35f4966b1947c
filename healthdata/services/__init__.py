"""
Services that create and hold entities.

This package contains the registry, the user factory and the report builder.
"""

from .registry import Registry, get_registry, reset_registry
from .report_builder import ReportBuilder
from .user_factory import UserFactory

__all__ = [
    "Registry",
    "ReportBuilder",
    "UserFactory",
    "get_registry",
    "reset_registry",
]
