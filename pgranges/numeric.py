from pgranges.convert import to_float, to_int
from pgranges.range import Range


class IntegerRange(Range[int], converter=to_int):
    """Range of integers, matching PostgreSQL's ``int4range``/``int8range``.

    Bounds are truncated toward zero; no discrete canonicalization is applied,
    so ``[1,5]`` stays ``[1,5]``.
    """


class NumericRange(Range[float], converter=to_float):
    """Range of floats, matching PostgreSQL's ``numrange``."""
