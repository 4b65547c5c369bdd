from .filter_model import FilterModel
from .observable import Observable, Observer
from .points_model import PointsModel
from .reference_model import ReferenceModel

__all__ = [
    "FilterModel",
    "Observable",
    "Observer",
    "PointsModel",
    "ReferenceModel",
]
