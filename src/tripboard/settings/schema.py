"""Schema helpers for the application settings file."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import (
    API_FAILURE_RATE,
    API_LATENCY_MS,
    BUSY_GATE_LOWER_LIMIT_MS,
    BUSY_GATE_UPPER_LIMIT_MS,
    SHAKE_DURATION_MS,
)

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "tripboard/settings.schema.json",
    "type": "object",
    "required": ["schema", "busy_gate", "ui", "api"],
    "properties": {
        "schema": {"const": "tripboard/settings@1"},
        "seed_path": {"type": ["string", "null"]},
        "busy_gate": {
            "type": "object",
            "required": ["lower_limit_ms", "upper_limit_ms"],
            "properties": {
                "lower_limit_ms": {"type": "integer", "minimum": 0},
                "upper_limit_ms": {"type": "integer", "minimum": 0},
            },
            "additionalProperties": False,
        },
        "ui": {
            "type": "object",
            "properties": {
                "shake_duration_ms": {"type": "integer", "minimum": 0},
            },
            "additionalProperties": True,
        },
        "api": {
            "type": "object",
            "properties": {
                "latency_ms": {"type": "integer", "minimum": 0},
                "failure_rate": {"type": "number", "minimum": 0, "maximum": 1},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "tripboard/settings@1",
    "seed_path": None,
    "busy_gate": {
        "lower_limit_ms": BUSY_GATE_LOWER_LIMIT_MS,
        "upper_limit_ms": BUSY_GATE_UPPER_LIMIT_MS,
    },
    "ui": {
        "shake_duration_ms": SHAKE_DURATION_MS,
    },
    "api": {
        "latency_ms": API_LATENCY_MS,
        "failure_rate": API_FAILURE_RATE,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)
_SECTIONS = ("busy_gate", "ui", "api")


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in _SECTIONS and isinstance(value, dict):
                target = merged.setdefault(key, {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            merged[key] = value
    validate_settings(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema.

    The schema cannot compare sibling values, so the busy gate ordering is
    checked here.
    """

    _validator.validate(data)
    gate = data["busy_gate"]
    if gate["upper_limit_ms"] < gate["lower_limit_ms"]:
        raise ValueError("busy_gate.upper_limit_ms must not be below lower_limit_ms")


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
