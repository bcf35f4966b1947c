"""In-memory registry of health tracking entities.

Users (doctors, patients, fitness enthusiasts), health observations, reports,
reminders and advice, plus the factory and builder used to create them.
"""

from healthdata.domain.models import (
    Advice,
    ExportedFile,
    HealthObservation,
    Reminder,
    ReminderUpdate,
    Report,
    TrendAnalysis,
)
from healthdata.domain.users import (
    ContactInfo,
    Doctor,
    FitnessEnthusiast,
    Patient,
    User,
    UserProfile,
    UserRole,
)
from healthdata.exceptions import HealthDataError, InvariantViolation, UnknownVariant
from healthdata.services import Registry, ReportBuilder, UserFactory, get_registry, reset_registry

__all__ = [
    "Advice",
    "ContactInfo",
    "Doctor",
    "ExportedFile",
    "FitnessEnthusiast",
    "HealthDataError",
    "HealthObservation",
    "InvariantViolation",
    "Patient",
    "Registry",
    "Reminder",
    "ReminderUpdate",
    "Report",
    "ReportBuilder",
    "TrendAnalysis",
    "UnknownVariant",
    "User",
    "UserFactory",
    "UserProfile",
    "UserRole",
    "get_registry",
    "reset_registry",
]
