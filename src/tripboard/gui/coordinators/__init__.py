from .board_coordinator import BoardCoordinator
from .filter_coordinator import FilterCoordinator

__all__ = ["BoardCoordinator", "FilterCoordinator"]
