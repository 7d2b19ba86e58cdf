"""Format constants for pgranges.

These spell out PostgreSQL's range text format and are shared by the parser
and the serializer.
"""

# Bound delimiters
LOWER_INCLUSIVE = "["
LOWER_EXCLUSIVE = "("
UPPER_INCLUSIVE = "]"
UPPER_EXCLUSIVE = ")"

LOWER_DELIMITERS = frozenset({LOWER_INCLUSIVE, LOWER_EXCLUSIVE})
UPPER_DELIMITERS = frozenset({UPPER_INCLUSIVE, UPPER_EXCLUSIVE})

SEPARATOR = ","

# Unbounded on both sides, with no bound text at all
EMPTY_SPELLINGS = frozenset({"(,)", "[,)", "(,]", "[,]"})

# Signed 64-bit limits of int8range bounds
INT8_MIN = -(2**63)
INT8_MAX = 2**63 - 1
