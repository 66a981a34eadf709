from .errors import InvalidRange
from .interval import EMPTY, Interval, intersection
from .kind import Kind
from .serialization import IntervalModel, from_dict, from_json, to_dict, to_json

__all__ = [
    "Interval",
    "Kind",
    "EMPTY",
    "InvalidRange",
    "intersection",
    "IntervalModel",
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
]
