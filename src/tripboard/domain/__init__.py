from .models import (
    DEFAULT_FILTER_TYPE,
    DEFAULT_SORT_TYPE,
    Destination,
    FilterType,
    Mode,
    Offer,
    OfferGroup,
    Picture,
    Point,
    PointType,
    ReferenceData,
    SortType,
    UpdateType,
    UserAction,
    blank_point,
)

__all__ = [
    "DEFAULT_FILTER_TYPE",
    "DEFAULT_SORT_TYPE",
    "Destination",
    "FilterType",
    "Mode",
    "Offer",
    "OfferGroup",
    "Picture",
    "Point",
    "PointType",
    "ReferenceData",
    "SortType",
    "UpdateType",
    "UserAction",
    "blank_point",
]
