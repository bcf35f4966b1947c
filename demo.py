"""
End-to-end walkthrough of the health data registry.

This script exercises:
1. Creating users of every role through the factory
2. Registering observations, reports, reminders and advice
3. Patient, doctor and fitness enthusiast behaviours
4. Building reports step by step

Run with: uv run python demo.py
"""

from datetime import UTC, datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from healthdata import (
    Advice,
    ContactInfo,
    Doctor,
    FitnessEnthusiast,
    HealthObservation,
    Patient,
    Registry,
    Reminder,
    ReportBuilder,
    UserFactory,
)
from healthdata.config import get_config, print_config_summary
from healthdata.log import configure_logging

console = Console()


def _observation_table(title: str, observations: list[HealthObservation]) -> Table:
    table = Table(title=title)
    for column in ("ID", "Date", "Weight", "BP", "HR", "Exercise", "Sleep", "Remarks"):
        table.add_column(column, style="cyan" if column == "ID" else "white")
    for obs in observations:
        table.add_row(
            obs.data_id,
            obs.date.date().isoformat(),
            f"{obs.weight:g}",
            obs.blood_pressure,
            f"{obs.heart_rate:g}",
            obs.exercise,
            f"{obs.sleep:g}h",
            obs.remarks,
        )
    return table


def create_users(registry: Registry) -> None:
    console.print(Panel("Creating users", style="blue"))

    registry.add_user(
        UserFactory.create_user(
            "doctor",
            {
                "user_id": "D100",
                "name": "Dr. Chen",
                "age": 45,
                "gender": "Male",
                "contact_info": ContactInfo(email="drchen@example.com", phone="123456"),
                "specialization": "Cardiology",
                "license_number": "LIC987654",
                "department": "Cardiology Dept",
            },
        )
    )
    registry.add_user(
        UserFactory.create_user(
            "patient",
            {
                "user_id": "P100",
                "name": "Alice Patient",
                "age": 30,
                "gender": "Female",
                "contact_info": ContactInfo(email="alicep@example.com", phone="654321"),
                "medical_history": {"past_illnesses": ["Flu"]},
                "conditions": ["High Blood Pressure"],
                "medications": ["Amlodipine"],
            },
        )
    )
    registry.add_user(
        UserFactory.create_user(
            "fitness",
            {
                "user_id": "F100",
                "name": "Bob Fitness",
                "age": 25,
                "gender": "Male",
                "contact_info": ContactInfo(email="bobfit@example.com", phone="987654"),
                "workout_preferences": {"favorite_exercises": ["Running", "Cycling"]},
                "fitness_goals": {"target_weight": 68},
            },
        )
    )

    table = Table(title="Registered users")
    table.add_column("ID", style="cyan")
    table.add_column("Role", style="magenta")
    table.add_column("Name", style="white")
    table.add_column("Email", style="white")
    for user in registry.list_users():
        profile = user.view_profile()
        table.add_row(profile.user_id, profile.role.value, profile.name, profile.contact_info.email)
    console.print(table)


def add_observations(registry: Registry) -> None:
    console.print(Panel("Adding health observations", style="blue"))
    registry.add_observation(
        HealthObservation(
            data_id="HD101",
            date=datetime(2025, 1, 10, tzinfo=UTC),
            weight=70,
            blood_pressure="120/80",
            heart_rate=75,
            exercise="Running",
            sleep=7,
            remarks="Good condition",
        )
    )
    registry.add_observation(
        HealthObservation(
            data_id="HD102",
            date=datetime(2025, 1, 11, tzinfo=UTC),
            weight=71,
            blood_pressure="130/85",
            heart_rate=78,
            exercise="Swimming",
            sleep=8,
            remarks="Slightly elevated BP",
        )
    )
    console.print(_observation_table("Registry observations", registry.list_observations()))


def patient_flow(registry: Registry) -> None:
    console.print(Panel("Patient usage", style="blue"))
    patient = registry.get_user("P100")
    if not isinstance(patient, Patient):
        console.print("No patient found with ID P100", style="red")
        return

    patient.record_medical_history({"surgeries": ["Appendectomy"]})
    patient.update_conditions(["High Blood Pressure", "Seasonal Allergies"])
    patient.update_medications(["Amlodipine", "Cetirizine"])

    observation = HealthObservation(
        data_id="HD_P100_01",
        date=datetime(2025, 2, 1, tzinfo=UTC),
        weight=69,
        blood_pressure="125/85",
        heart_rate=74,
        exercise="Walking",
        sleep=6,
        remarks="Slight improvement",
    )
    # The patient's list and the registry are separate registrations.
    patient.add_health_record(observation)
    registry.add_observation(observation)

    console.print(f"Conditions: {', '.join(patient.conditions)}")
    console.print(f"Medications: {', '.join(patient.medications)}")
    console.print(f"view_health_records(): {patient.view_health_records()}")
    console.print(_observation_table("Patient observations", list(patient.health_records)))


def doctor_flow(registry: Registry) -> None:
    console.print(Panel("Doctor usage", style="blue"))
    doctor = registry.get_user("D100")
    if not isinstance(doctor, Doctor):
        console.print("No doctor found with ID D100", style="red")
        return

    doctor.login()
    records = doctor.view_patient_records("P100")
    console.print(f"Doctor sees {len(records)} records for P100 (lookup not implemented)")

    observation = registry.get_observation("HD_P100_01")
    if observation is not None:
        observation.remarks = "Doctor updated remarks: keep monitoring BP."
        doctor.update_patient_record("P100", observation)

    report = doctor.generate_report("P100")
    registry.add_report(report)
    console.print(f"Generated report {report.report_id}: {report.summary}", style="green")


def fitness_flow(registry: Registry) -> None:
    console.print(Panel("Fitness enthusiast usage", style="blue"))
    enthusiast = registry.get_user("F100")
    if not isinstance(enthusiast, FitnessEnthusiast):
        console.print("No fitness enthusiast found with ID F100", style="red")
        return

    enthusiast.set_workout_preferences(
        {"favorite_exercises": ["Running", "Cycling"], "preferred_times": ["Morning"]}
    )
    enthusiast.update_fitness_goals({"target_weight": 64, "muscle_gain": True})

    workout = HealthObservation(
        data_id="HD_F100_01",
        date=datetime.now(UTC),
        weight=70,
        blood_pressure="120/80",
        heart_rate=75,
        exercise="Running",
        sleep=7,
        remarks="Felt good today",
    )
    enthusiast.record_workout_data(workout)
    registry.add_observation(workout)

    console.print(f"Preferences: {enthusiast.workout_preferences}")
    console.print(f"Goals: {enthusiast.fitness_goals}")


def reports_reminders_advice(registry: Registry) -> None:
    console.print(Panel("Reports, reminders and advice", style="blue"))

    monthly = (
        ReportBuilder()
        .set_report_id("R100")
        .set_date_range("2025-01-01 ~ 2025-01-31")
        .set_summary("Initial monthly analysis for patient P100")
        .set_export_status(False)
        .build()
    )
    registry.add_report(monthly)
    export = monthly.export_report(get_config().reports.default_export_format)

    registry.add_reminder(
        Reminder(
            reminder_id="REM100",
            type="Medication",
            content="Take pill at 9 AM",
            time=datetime(2025, 1, 12, 9, 0, tzinfo=UTC),
        )
    )
    registry.add_advice(Advice(advice_id="ADV100", category="Diet", content="Reduce sodium intake"))

    table = Table(title="Reports")
    table.add_column("ID", style="cyan")
    table.add_column("Date range", style="white")
    table.add_column("Summary", style="white")
    table.add_column("Exported", style="white")
    for report in registry.list_reports():
        table.add_row(report.report_id, report.date_range, report.summary, str(report.export_status))
    console.print(table)
    console.print(f"Export of R100 would produce {export.file_name}")

    for reminder in registry.list_reminders():
        console.print(f"Reminder {reminder.reminder_id} [{reminder.type}]: {reminder.content}")
    for advice in registry.list_advice():
        console.print(f"Advice {advice.advice_id} [{advice.category}]: {advice.content}")


def main() -> None:
    config = get_config()
    configure_logging(config.logging)

    console.print(Panel("Health Data Registry - Demo", style="bold blue"))
    print_config_summary(console)

    registry = Registry(config.registry)
    create_users(registry)
    add_observations(registry)
    patient_flow(registry)
    doctor_flow(registry)
    fitness_flow(registry)
    reports_reminders_advice(registry)

    console.print(f"\nRegistry holds {len(registry)} entities", style="green")


if __name__ == "__main__":
    main()
