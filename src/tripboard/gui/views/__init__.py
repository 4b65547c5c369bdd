"""View contracts and their Qt implementations.

Only the contracts are imported eagerly so the presenters stay importable
without a Qt installation.
"""

from .interfaces import (
    BoardSurface,
    FilterSurface,
    PointCardView,
    PointFormView,
    PointListContainer,
    PointViewFactory,
)

__all__ = [
    "BoardSurface",
    "FilterSurface",
    "PointCardView",
    "PointFormView",
    "PointListContainer",
    "PointViewFactory",
]
