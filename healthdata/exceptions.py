"""Exceptions raised by the health data registry."""


class HealthDataError(Exception):
    """Base exception for all registry errors."""


class InvariantViolation(HealthDataError):
    """A structural rule of the model was broken (e.g. instantiating the abstract User)."""


class UnknownVariant(HealthDataError):
    """The user factory was asked for a role it does not know."""

    def __init__(self, tag: str, supported: tuple[str, ...] = ()) -> None:
        self.tag = tag
        self.supported = supported
        message = f"Unknown user type: {tag!r}"
        if supported:
            message += f" (expected one of: {', '.join(supported)})"
        super().__init__(message)
