"""Custom exception hierarchy for TripBoard."""

from __future__ import annotations


class TripBoardError(Exception):
    """Base class for all custom errors raised by TripBoard."""


# --- layered hierarchy ---

class DomainError(TripBoardError):
    """Base class for domain-level errors."""


class InfrastructureError(TripBoardError):
    """Base class for infrastructure-level errors."""


class ApplicationError(TripBoardError):
    """Base class for application-level errors."""


# --- Domain errors ---

class PointNotFoundError(DomainError):
    """Raised when a mutation targets a point the model does not hold."""


# --- Infrastructure errors ---

class ApiError(InfrastructureError):
    """Raised when the trip API rejects or fails a request."""


class SeedDataError(InfrastructureError):
    """Raised when a seed fixture cannot be read or fails validation."""


# --- Application errors ---

class MutationError(ApplicationError):
    """Base class for failed create, update or delete requests."""


class PointUpdateError(MutationError):
    """Raised when a point could not be updated."""


class PointAddError(MutationError):
    """Raised when a point could not be added."""


class PointDeleteError(MutationError):
    """Raised when a point could not be deleted."""


# --- Contract violations ---

class ContractViolationError(TripBoardError):
    """Raised when collaborators break an invariant the board relies on.

    These signal desynchronisation bugs and are never recovered from.
    """


class PresenterNotFoundError(ContractViolationError):
    """Raised when a notification targets a point with no live presenter."""


# --- Settings ---

class SettingsError(TripBoardError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""


__all__ = [
    "ApiError",
    "ApplicationError",
    "ContractViolationError",
    "DomainError",
    "InfrastructureError",
    "MutationError",
    "PointAddError",
    "PointDeleteError",
    "PointNotFoundError",
    "PointUpdateError",
    "PresenterNotFoundError",
    "SeedDataError",
    "SettingsError",
    "SettingsLoadError",
    "SettingsValidationError",
    "TripBoardError",
]
