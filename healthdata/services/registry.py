"""
In-memory registry of every entity in a session.

One map per entity kind, keyed by the entity's id. The registry stores
references, never copies: ``get_*`` hands back exactly the object that was
added. Adding an id that already exists replaces the previous entry.

The registry is a plain object so it can be constructed and passed to
whatever needs it. ``get_registry()`` provides one shared instance for code
that wants a process-wide store.

Single-threaded by contract: there is no locking around the maps.
"""

from functools import lru_cache
from typing import TypeVar

import structlog

from healthdata.config import RegistryConfig, get_config
from healthdata.domain.models import Advice, HealthObservation, Reminder, Report
from healthdata.domain.users import User

logger = structlog.get_logger(__name__)

EntityT = TypeVar("EntityT")


class Registry:
    """Authoritative store for users, observations, reports, reminders and advice."""

    def __init__(self, config: RegistryConfig | None = None) -> None:
        self.config = config or get_config().registry
        self.logger = logger.bind(component="registry")
        self._users: dict[str, User] = {}
        self._observations: dict[str, HealthObservation] = {}
        self._reports: dict[str, Report] = {}
        self._reminders: dict[str, Reminder] = {}
        self._advice: dict[str, Advice] = {}

    @classmethod
    def get_instance(cls) -> "Registry":
        """Return the shared session registry (same object as ``get_registry()``)."""
        return get_registry()

    def __len__(self) -> int:
        return (
            len(self._users)
            + len(self._observations)
            + len(self._reports)
            + len(self._reminders)
            + len(self._advice)
        )

    def _put(self, store: dict[str, EntityT], kind: str, entity_id: str, entity: EntityT) -> None:
        previous = store.get(entity_id)
        store[entity_id] = entity
        if previous is not None and previous is not entity:
            log = self.logger.info if self.config.log_overwrites else self.logger.debug
            log("entity_replaced", kind=kind, entity_id=entity_id)
        else:
            self.logger.debug("entity_added", kind=kind, entity_id=entity_id)

    # Users

    def add_user(self, user: User) -> None:
        self._put(self._users, "user", user.user_id, user)

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def list_users(self) -> list[User]:
        return list(self._users.values())

    # Health observations

    def add_observation(self, observation: HealthObservation) -> None:
        self._put(self._observations, "observation", observation.data_id, observation)

    def get_observation(self, data_id: str) -> HealthObservation | None:
        return self._observations.get(data_id)

    def list_observations(self) -> list[HealthObservation]:
        return list(self._observations.values())

    # Reports

    def add_report(self, report: Report) -> None:
        self._put(self._reports, "report", report.report_id, report)

    def get_report(self, report_id: str) -> Report | None:
        return self._reports.get(report_id)

    def list_reports(self) -> list[Report]:
        return list(self._reports.values())

    # Reminders

    def add_reminder(self, reminder: Reminder) -> None:
        self._put(self._reminders, "reminder", reminder.reminder_id, reminder)

    def get_reminder(self, reminder_id: str) -> Reminder | None:
        return self._reminders.get(reminder_id)

    def list_reminders(self) -> list[Reminder]:
        return list(self._reminders.values())

    # Advice

    def add_advice(self, advice: Advice) -> None:
        self._put(self._advice, "advice", advice.advice_id, advice)

    def get_advice(self, advice_id: str) -> Advice | None:
        return self._advice.get(advice_id)

    def list_advice(self) -> list[Advice]:
        return list(self._advice.values())


@lru_cache
def get_registry() -> Registry:
    """Get the process-wide registry, creating it on first use."""
    return Registry()


def reset_registry() -> None:
    """Drop the process-wide registry; the next get_registry() starts empty."""
    get_registry.cache_clear()
