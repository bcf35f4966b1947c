"""
User hierarchy.

``User`` carries the shared contract (login, logout, profile). The three role
variants add their own fields and capabilities on top of it. ``User`` itself
cannot be instantiated; construct variants through ``UserFactory``.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, ClassVar

import structlog
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from healthdata.config import get_config
from healthdata.domain.models import HealthObservation, Report
from healthdata.exceptions import InvariantViolation

logger = structlog.get_logger(__name__)


class UserRole(str, Enum):
    """Role variants the factory can build."""

    DOCTOR = "doctor"
    PATIENT = "patient"
    FITNESS = "fitness"


class ContactInfo(BaseModel):
    email: str = ""
    phone: str = ""


class UserProfile(BaseModel):
    """Read-only snapshot returned by ``User.view_profile``."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    role: UserRole
    name: str
    age: int
    gender: str
    contact_info: ContactInfo


class User(BaseModel):
    """Abstract base for every user kind."""

    role: ClassVar[UserRole]

    user_id: str = Field(frozen=True)
    name: str
    age: int = Field(ge=0)
    gender: str
    contact_info: ContactInfo = Field(default_factory=ContactInfo)

    def model_post_init(self, context: Any, /) -> None:
        # Runs for both __init__ and model_validate.
        if type(self) is User:
            raise InvariantViolation(
                "User is abstract; create a Doctor, Patient or FitnessEnthusiast instead"
            )

    @property
    def log(self) -> Any:
        return logger.bind(user_id=self.user_id, role=self.role.value)

    def login(self) -> bool:
        self.log.info("user_login")
        return True

    def logout(self) -> None:
        self.log.info("user_logout")

    def update_profile(self, new_info: Any) -> None:
        """Replace the contact details. The value is stored as given."""
        self.contact_info = new_info
        self.log.info("profile_updated")

    def view_profile(self) -> UserProfile:
        # contact_info may hold whatever update_profile stored; don't re-validate it.
        return UserProfile.model_construct(
            user_id=self.user_id,
            role=self.role,
            name=self.name,
            age=self.age,
            gender=self.gender,
            contact_info=self.contact_info,
        )


class Doctor(User):
    """Clinician with read access to patient records and report generation."""

    role: ClassVar[UserRole] = UserRole.DOCTOR

    specialization: str = Field(frozen=True)
    license_number: str = Field(frozen=True)
    department: str = Field(frozen=True)

    def login(self) -> bool:
        """Record the doctor-specific login event, then run the shared login."""
        self.log.info("doctor_login", specialization=self.specialization)
        return super().login()

    def view_patient_records(self, patient_id: str) -> list[HealthObservation]:
        """
        Stub: always returns an empty list.

        Records are not looked up in the registry or on the patient yet.
        """
        self.log.info("patient_records_viewed", patient_id=patient_id)
        return []

    def generate_report(self, patient_id: str) -> Report:
        """
        Build a new placeholder report.

        Every call returns a fresh ``Report`` with the same placeholder values;
        it is not an aggregation of the patient's observations.
        """
        placeholders = get_config().reports
        self.log.info("report_generated", patient_id=patient_id)
        return Report(
            report_id=placeholders.placeholder_report_id,
            date_range=placeholders.placeholder_date_range,
            summary=placeholders.placeholder_summary,
            export_status=False,
        )

    def update_patient_record(self, patient_id: str, data: HealthObservation) -> None:
        # Notification only: neither the registry nor the patient is modified.
        self.log.info("patient_record_update_requested", patient_id=patient_id, data_id=data.data_id)


class Patient(User):
    """
    A patient with a medical history and their own observation list.

    Note the naming: ``view_health_records()`` returns ``medical_history``.
    The observations added through ``add_health_record`` are available from
    ``health_records``.
    """

    role: ClassVar[UserRole] = UserRole.PATIENT

    medical_history: dict[str, Any] = Field(default_factory=dict)
    conditions: list[str] = Field(default_factory=list)
    medications: list[str] = Field(default_factory=list)

    _health_records: list[HealthObservation] = PrivateAttr(default_factory=list)

    @property
    def health_records(self) -> tuple[HealthObservation, ...]:
        return tuple(self._health_records)

    def record_medical_history(self, history: Mapping[Any, Any] | None) -> None:
        """
        Shallow-merge ``history`` into the existing medical history.

        Top-level keys in ``history`` replace keys of the same name; nested
        values are replaced whole, never merged. ``None`` merges nothing.
        """
        history = history or {}
        merged = dict(self.medical_history)
        merged.update(history)
        self.medical_history = merged
        self.log.info("medical_history_recorded", keys=list(history))

    def update_conditions(self, conditions: Sequence[str]) -> None:
        self.conditions = list(conditions)
        self.log.info("conditions_updated", count=len(self.conditions))

    def update_medications(self, medications: Sequence[str]) -> None:
        self.medications = list(medications)
        self.log.info("medications_updated", count=len(self.medications))

    def view_health_records(self) -> dict[str, Any]:
        return self.medical_history

    def add_health_record(self, observation: HealthObservation) -> None:
        """Append to this patient's records. The registry is not updated."""
        self._health_records.append(observation)
        self.log.info("health_record_added", data_id=observation.data_id)


class FitnessEnthusiast(User):
    """User tracking workouts against personal fitness goals."""

    role: ClassVar[UserRole] = UserRole.FITNESS

    workout_preferences: dict[str, Any] = Field(default_factory=dict)
    fitness_goals: dict[str, Any] = Field(default_factory=dict)

    def set_workout_preferences(self, preferences: dict[str, Any]) -> None:
        self.workout_preferences = preferences
        self.log.info("workout_preferences_updated")

    def update_fitness_goals(self, goals: dict[str, Any]) -> None:
        self.fitness_goals = goals
        self.log.info("fitness_goals_updated")

    def record_workout_data(self, observation: HealthObservation) -> None:
        # Nothing is stored on the user; register the observation separately.
        self.log.info(
            "workout_recorded",
            data_id=observation.data_id,
            exercise=observation.exercise,
        )
