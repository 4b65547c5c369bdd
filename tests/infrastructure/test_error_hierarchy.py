"""Tests for the custom error hierarchy."""

import pytest
from tripboard.errors import (
    ApiError,
    ApplicationError,
    ContractViolationError,
    DomainError,
    InfrastructureError,
    MutationError,
    PointAddError,
    PointDeleteError,
    PointNotFoundError,
    PointUpdateError,
    PresenterNotFoundError,
    SeedDataError,
    SettingsError,
    SettingsValidationError,
    TripBoardError,
)


@pytest.mark.parametrize(
    "error_type", [DomainError, InfrastructureError, ApplicationError, ContractViolationError, SettingsError]
)
def test_layers_derive_from_base(error_type):
    assert issubclass(error_type, TripBoardError)


@pytest.mark.parametrize("error_type", [PointUpdateError, PointAddError, PointDeleteError])
def test_rejected_mutations_are_mutation_errors(error_type):
    assert issubclass(error_type, MutationError)
    assert isinstance(error_type("rejected"), ApplicationError)


def test_api_and_seed_errors_are_infrastructure_errors():
    assert issubclass(ApiError, InfrastructureError)
    assert issubclass(SeedDataError, InfrastructureError)


def test_missing_point_is_domain_error():
    assert isinstance(PointNotFoundError("gone"), DomainError)


def test_missing_presenter_is_contract_violation_not_mutation_error():
    assert issubclass(PresenterNotFoundError, ContractViolationError)
    assert not issubclass(PresenterNotFoundError, MutationError)


def test_settings_validation_error():
    assert issubclass(SettingsValidationError, SettingsError)


def test_error_message():
    err = PointNotFoundError("pt-42 not found")
    assert str(err) == "pt-42 not found"
