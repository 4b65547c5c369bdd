"""Load trip fixtures from JSON seed files.

A seed bundles the three collections the board needs::

    {
      "destinations": [{"id": "...", "name": "...", "description": "...",
                        "pictures": [{"src": "...", "description": "..."}]}],
      "offers": [{"type": "taxi", "offers": [{"id": "...", "title": "...", "price": 20}]}],
      "points": [{"id": "...", "type": "taxi", "base_price": 100,
                  "date_from": "2026-07-10T22:55:56Z", "date_to": "...",
                  "destination": "...", "offers": ["..."], "is_favorite": false}]
    }

Dates without an offset are interpreted as UTC.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from dateutil.parser import isoparse
from jsonschema import Draft202012Validator
from jsonschema.exceptions import ValidationError

from ..domain.models import (
    Destination,
    Offer,
    OfferGroup,
    Picture,
    Point,
    PointType,
    ReferenceData,
)
from ..errors import SeedDataError
from ..utils.jsonio import read_json

_POINT_TYPES = [member.value for member in PointType]

SEED_SCHEMA: dict[str, Any] = {
    "$id": "tripboard/seed.schema.json",
    "type": "object",
    "properties": {
        "destinations": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "name"],
                "properties": {
                    "id": {"type": "string"},
                    "name": {"type": "string"},
                    "description": {"type": "string"},
                    "pictures": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "src": {"type": "string"},
                                "description": {"type": "string"},
                            },
                        },
                    },
                },
            },
        },
        "offers": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["type", "offers"],
                "properties": {
                    "type": {"enum": _POINT_TYPES},
                    "offers": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["id", "title", "price"],
                            "properties": {
                                "id": {"type": "string"},
                                "title": {"type": "string"},
                                "price": {"type": "integer", "minimum": 0},
                            },
                        },
                    },
                },
            },
        },
        "points": {
            "type": "array",
            "items": {
                "type": "object",
                "required": ["id", "type", "base_price", "date_from", "date_to"],
                "properties": {
                    "id": {"type": "string"},
                    "type": {"enum": _POINT_TYPES},
                    "base_price": {"type": "integer", "minimum": 0},
                    "date_from": {"type": "string"},
                    "date_to": {"type": "string"},
                    "destination": {"type": ["string", "null"]},
                    "offers": {"type": "array", "items": {"type": "string"}},
                    "is_favorite": {"type": "boolean"},
                },
            },
        },
    },
    "additionalProperties": True,
}

_validator = Draft202012Validator(SEED_SCHEMA)


@dataclass(frozen=True)
class TripSeed:
    reference: ReferenceData = field(default_factory=ReferenceData)
    points: tuple[Point, ...] = ()


def parse_datetime(value: str) -> datetime:
    try:
        parsed = isoparse(value)
    except ValueError as exc:
        raise SeedDataError(f"Invalid date {value!r}: {exc}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _destination(entry: dict[str, Any]) -> Destination:
    pictures = tuple(
        Picture(src=pic.get("src", ""), description=pic.get("description", ""))
        for pic in entry.get("pictures", [])
    )
    return Destination(
        id=entry["id"],
        name=entry["name"],
        description=entry.get("description", ""),
        pictures=pictures,
    )


def _offer_group(entry: dict[str, Any]) -> OfferGroup:
    return OfferGroup(
        type=PointType(entry["type"]),
        offers=tuple(
            Offer(id=offer["id"], title=offer["title"], price=offer["price"])
            for offer in entry["offers"]
        ),
    )


def _point(entry: dict[str, Any]) -> Point:
    date_from = parse_datetime(entry["date_from"])
    date_to = parse_datetime(entry["date_to"])
    if date_to < date_from:
        raise SeedDataError(f"Point {entry['id']!r} ends before it starts")
    return Point(
        id=entry["id"],
        type=PointType(entry["type"]),
        base_price=entry["base_price"],
        date_from=date_from,
        date_to=date_to,
        destination=entry.get("destination"),
        offers=tuple(entry.get("offers", [])),
        is_favorite=entry.get("is_favorite", False),
    )


def parse_seed(payload: Any) -> TripSeed:
    """Validate *payload* and convert it into domain objects."""

    try:
        _validator.validate(payload)
    except ValidationError as exc:
        raise SeedDataError(f"Seed failed validation: {exc.message}") from exc

    reference = ReferenceData(
        destinations=tuple(_destination(entry) for entry in payload.get("destinations", [])),
        offers=tuple(_offer_group(entry) for entry in payload.get("offers", [])),
    )
    points = tuple(_point(entry) for entry in payload.get("points", []))
    return TripSeed(reference=reference, points=points)


def load_seed(path: Path) -> TripSeed:
    try:
        payload = read_json(path)
    except (OSError, ValueError) as exc:
        raise SeedDataError(f"Cannot read seed {path}: {exc}") from exc
    return parse_seed(payload)


__all__ = ["SEED_SCHEMA", "TripSeed", "load_seed", "parse_datetime", "parse_seed"]
