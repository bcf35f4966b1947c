"""Tests for role-based user construction."""

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from healthdata.domain.users import ContactInfo, Doctor, FitnessEnthusiast, Patient, User
from healthdata.exceptions import HealthDataError, UnknownVariant
from healthdata.services.user_factory import UserFactory

BASE_FIELDS: dict[str, Any] = {
    "name": "Alice",
    "age": 25,
    "gender": "Female",
    "contact_info": ContactInfo(email="alice@example.com", phone="123"),
}

DOCTOR_ONLY = {"view_patient_records", "generate_report", "update_patient_record"}
PATIENT_ONLY = {
    "record_medical_history",
    "update_conditions",
    "update_medications",
    "view_health_records",
    "add_health_record",
}
FITNESS_ONLY = {"set_workout_preferences", "update_fitness_goals", "record_workout_data"}
SHARED = {"login", "logout", "update_profile", "view_profile"}


class TestCreateUser:
    def test_creates_fitness_enthusiast(self) -> None:
        user = UserFactory.create_user(
            "fitness",
            {**BASE_FIELDS, "user_id": "F001", "workout_preferences": {}, "fitness_goals": {}},
        )
        assert isinstance(user, FitnessEnthusiast)
        assert user.name == "Alice"

    def test_creates_patient(self) -> None:
        user = UserFactory.create_user(
            "patient",
            {
                **BASE_FIELDS,
                "user_id": "P001",
                "name": "Bob",
                "medical_history": {"past_illnesses": ["Flu"]},
                "conditions": ["High Blood Pressure"],
                "medications": ["Amlodipine"],
            },
        )
        assert isinstance(user, Patient)
        assert user.name == "Bob"
        assert user.medical_history == {"past_illnesses": ["Flu"]}
        assert user.conditions == ["High Blood Pressure"]

    def test_creates_doctor(self) -> None:
        user = UserFactory.create_user(
            "doctor",
            {
                **BASE_FIELDS,
                "user_id": "D001",
                "name": "Dr. Wang",
                "specialization": "Cardiology",
                "license_number": "LIC123456",
                "department": "Cardiology Dept",
            },
        )
        assert isinstance(user, Doctor)
        assert user.license_number == "LIC123456"

    @pytest.mark.parametrize("tag", ["DOCTOR", "Doctor", "dOcToR"])
    def test_tag_is_case_insensitive(self, tag: str) -> None:
        user = UserFactory.create_user(
            tag,
            {
                **BASE_FIELDS,
                "user_id": "D002",
                "specialization": "Pediatrics",
                "license_number": "LIC654321",
                "department": "Pediatrics Dept",
            },
        )
        assert isinstance(user, Doctor)

    def test_unknown_tag_raises_unknown_variant(self) -> None:
        with pytest.raises(UnknownVariant) as exc_info:
            UserFactory.create_user("unknown-tag", {})

        assert exc_info.value.tag == "unknown-tag"
        assert "unknown-tag" in str(exc_info.value)
        assert isinstance(exc_info.value, HealthDataError)

    @pytest.mark.parametrize("tag", ["  doctor  ", "patient\n", " fitness"])
    def test_padded_tag_is_rejected(self, tag: str) -> None:
        with pytest.raises(UnknownVariant):
            UserFactory.create_user(tag, {})

    @given(
        tag=st.text(max_size=12).filter(
            lambda t: t.lower() not in {"doctor", "patient", "fitness"}
        )
    )
    def test_any_other_tag_is_rejected(self, tag: str) -> None:
        with pytest.raises(UnknownVariant):
            UserFactory.create_user(tag, {})

    def test_missing_fields_fail_in_variant_constructor(self) -> None:
        with pytest.raises(ValidationError):
            UserFactory.create_user("patient", {"user_id": "P404"})

    def test_supported_types(self) -> None:
        assert set(UserFactory.supported_types()) == {"doctor", "patient", "fitness"}


class TestVariantCapabilities:
    """Each variant exposes the shared contract plus exactly its own operations."""

    @pytest.mark.parametrize(
        "tag,extra,own,foreign",
        [
            (
                "doctor",
                {"specialization": "Surgery", "license_number": "LIC000", "department": "Surgery"},
                DOCTOR_ONLY,
                PATIENT_ONLY | FITNESS_ONLY,
            ),
            ("patient", {}, PATIENT_ONLY, DOCTOR_ONLY | FITNESS_ONLY),
            ("fitness", {}, FITNESS_ONLY, DOCTOR_ONLY | PATIENT_ONLY),
        ],
    )
    def test_capabilities(
        self, tag: str, extra: dict[str, Any], own: set[str], foreign: set[str]
    ) -> None:
        user = UserFactory.create_user(tag, {**BASE_FIELDS, "user_id": f"{tag}-1", **extra})

        assert isinstance(user, User)
        for name in SHARED | own:
            assert callable(getattr(user, name)), name
        for name in foreign:
            assert not hasattr(user, name), name
