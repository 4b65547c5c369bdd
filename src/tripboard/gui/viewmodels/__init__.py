"""Qt-free building blocks shared by models, presenters and views."""

from .signal import ObservableProperty, Signal

__all__ = ["ObservableProperty", "Signal"]
