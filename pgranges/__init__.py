from .convert import to_float, to_int
from .errors import InvalidRange, MalformedRangeText
from .numeric import IntegerRange, NumericRange
from .range import Range

__all__ = [
    "Range",
    "IntegerRange",
    "NumericRange",
    "InvalidRange",
    "MalformedRangeText",
    "to_int",
    "to_float",
]
