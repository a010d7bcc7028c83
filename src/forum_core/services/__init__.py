# src/forum_core/services/__init__.py
"""Business logic services for the forum core."""

from .aggregation import AggregationService
from .deletion import DeletionOutcome, DeletionResult, DeletionService
from .moderation import ModerationService
from .privacy import PrivacyService
from .roles import RoleDirectory, SqlRoleDirectory

__all__ = [
    "AggregationService",
    "DeletionOutcome",
    "DeletionResult",
    "DeletionService",
    "ModerationService",
    "PrivacyService",
    "RoleDirectory",
    "SqlRoleDirectory",
]
