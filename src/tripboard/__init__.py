"""TripBoard: a filterable, sortable trip-point board with optimistic edits."""

__version__ = "0.1.0"
