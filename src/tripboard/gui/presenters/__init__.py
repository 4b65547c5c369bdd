from .new_point_presenter import NewPointPresenter
from .point_presenter import PointPresenter

__all__ = ["NewPointPresenter", "PointPresenter"]
