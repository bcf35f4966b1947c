"""
Role-based construction of users.

The factory maps a case-insensitive type tag to a role variant and hands the
field bag to that variant unchanged. Field validation is the variant's job.
"""

from collections.abc import Mapping
from typing import Any

import structlog

from healthdata.domain.users import Doctor, FitnessEnthusiast, Patient, User, UserRole
from healthdata.exceptions import UnknownVariant

logger = structlog.get_logger(__name__)


class UserFactory:
    """Creates Doctor, Patient or FitnessEnthusiast instances from a type tag."""

    _variants: dict[str, type[User]] = {
        UserRole.FITNESS.value: FitnessEnthusiast,
        UserRole.PATIENT.value: Patient,
        UserRole.DOCTOR.value: Doctor,
    }

    @classmethod
    def supported_types(cls) -> tuple[str, ...]:
        return tuple(cls._variants)

    @classmethod
    def create_user(cls, user_type: str, fields: Mapping[str, Any]) -> User:
        """
        Create a user of the given type.

        Args:
            user_type: "doctor", "patient" or "fitness", any case.
            fields: Constructor fields for the variant, passed through as-is.

        Returns:
            The constructed role variant.

        Raises:
            UnknownVariant: If ``user_type`` is not a known tag.
        """
        variant = cls._variants.get(user_type.lower())
        if variant is None:
            raise UnknownVariant(user_type, cls.supported_types())

        user = variant(**fields)
        logger.info("user_created", user_id=user.user_id, role=user.role.value)
        return user
