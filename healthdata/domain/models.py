"""
Domain models for health tracking.

These are the non-user entities held by the registry. Each one is a Pydantic
model whose identity field is frozen; every other field may be mutated
through the entity's own operations, and mutation is visible to every holder
of the reference (the registry, a patient's record list, the caller).
"""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

logger = structlog.get_logger(__name__)


class TrendAnalysis(BaseModel):
    """Result of a trend analysis over an observation."""

    model_config = ConfigDict(frozen=True)

    trend_graph: None = None
    analysis_text: str


class ExportedFile(BaseModel):
    """Description of an export artifact. No file content is produced."""

    model_config = ConfigDict(frozen=True)

    file_name: str
    format: str


class HealthObservation(BaseModel):
    """A single health reading: vitals plus exercise and sleep."""

    data_id: str = Field(frozen=True)
    date: datetime = Field(frozen=True)
    weight: float
    blood_pressure: str = Field(description='Expected as "<systolic>/<diastolic>", not validated')
    heart_rate: float
    exercise: str
    sleep: float = Field(description="Hours of sleep")
    remarks: str = ""

    def validate_data(self) -> bool:
        """Placeholder check. No validation rule exists yet, so this always succeeds."""
        logger.info("observation_validated", data_id=self.data_id)
        return True

    def update_data(self, other: "HealthObservation") -> None:
        """Copy every mutable reading from ``other``; identity and date stay as they are."""
        self.weight = other.weight
        self.blood_pressure = other.blood_pressure
        self.heart_rate = other.heart_rate
        self.exercise = other.exercise
        self.sleep = other.sleep
        self.remarks = other.remarks
        logger.info("observation_updated", data_id=self.data_id, source_data_id=other.data_id)

    def get_trend_analysis(self) -> TrendAnalysis:
        """Placeholder trend analysis; there is no real analysis behind it."""
        logger.info("trend_analysis_generated", data_id=self.data_id)
        return TrendAnalysis(analysis_text="No real analysis - placeholder.")


class Report(BaseModel):
    """A health report over a date range."""

    report_id: str = Field(frozen=True)
    date_range: str
    summary: str
    export_status: bool = False

    def generate_summary(self) -> str:
        logger.info("report_summary_generated", report_id=self.report_id)
        return self.summary

    def export_report(self, format: str) -> ExportedFile:
        """Describe the file an export would produce. Export status is left unchanged."""
        logger.info("report_exported", report_id=self.report_id, format=format)
        return ExportedFile(file_name=f"Report_{self.report_id}.{format}", format=format)

    def update_report(self, observation: HealthObservation) -> None:
        # Notification only; the report does not aggregate observations.
        logger.info("report_update_requested", report_id=self.report_id, data_id=observation.data_id)

    def display_report(self) -> None:
        logger.info(
            "report_displayed",
            report_id=self.report_id,
            date_range=self.date_range,
            summary=self.summary,
            export_status=self.export_status,
        )


class ReminderUpdate(BaseModel):
    """Partial update for a reminder. Unset fields are left alone."""

    new_content: str | None = None
    new_time: datetime | None = None


class Reminder(BaseModel):
    """
    A scheduled health reminder.

    ``status`` is False while pending and True once completed. Completion is
    one-way: no operation on the reminder sets it back to pending.
    """

    reminder_id: str = Field(frozen=True)
    type: str = Field(description='e.g. "Medication", "Exercise"')
    content: str
    time: datetime
    status: bool = False

    @property
    def is_completed(self) -> bool:
        return self.status

    def set_reminder(self, time: datetime) -> None:
        self.time = time
        logger.info("reminder_time_set", reminder_id=self.reminder_id, time=time.isoformat())

    def update_reminder(self, details: ReminderUpdate | Mapping[str, Any]) -> None:
        """Apply ``new_content`` and/or ``new_time`` when present."""
        if not isinstance(details, ReminderUpdate):
            details = ReminderUpdate.model_validate(dict(details))

        changed = []
        if details.new_content is not None:
            self.content = details.new_content
            changed.append("content")
        if details.new_time is not None:
            self.time = details.new_time
            changed.append("time")
        logger.info("reminder_updated", reminder_id=self.reminder_id, fields=changed)

    def mark_as_completed(self) -> None:
        self.status = True
        logger.info("reminder_completed", reminder_id=self.reminder_id)

    def cancel_reminder(self) -> None:
        # Signal only. Cancellation has no recorded state.
        logger.info("reminder_canceled", reminder_id=self.reminder_id)


class Advice(BaseModel):
    """A piece of health advice in a category such as "Diet"."""

    advice_id: str = Field(frozen=True)
    category: str
    content: str

    def generate_advice(self, observation: HealthObservation) -> str:
        """Placeholder advice text for an observation."""
        logger.info("advice_generated", advice_id=self.advice_id, data_id=observation.data_id)
        return (
            f"Advice for user data {observation.data_id}: "
            "Keep a balanced diet and regular exercise."
        )

    def update_advice(self, new_content: str) -> None:
        self.content = new_content
        logger.info("advice_updated", advice_id=self.advice_id)

    def display_advice(self) -> None:
        logger.info(
            "advice_displayed",
            advice_id=self.advice_id,
            category=self.category,
            content=self.content,
        )
