"""Errors raised while building or parsing ranges."""

from typing import Any


class MalformedRangeText(ValueError):
    """Range text without a recognizable opening or closing delimiter."""

    def __init__(self, text: str):
        self.text: str = text
        super().__init__(
            f"Expected range text like '[1,10)', got: {text!r}\n"
            f"A range must open with '[' or '(' and close with ']' or ')'.\n"
            f"Examples:\n"
            f"  '[1,10)'   # 1 inclusive, 10 exclusive\n"
            f"  '(,5.5]'   # unbounded below, 5.5 inclusive\n"
            f"  '(,)'      # unbounded on both sides"
        )


class InvalidRange(ValueError):
    """Both bounds present with the lower one above the upper one."""

    def __init__(self, lower: Any, upper: Any):
        self.lower: Any = lower
        self.upper: Any = upper
        super().__init__(
            f"Range lower bound ({lower}) must be <= upper bound ({upper}).\n"
            f"Hint: swap the bounds, or leave one side unbounded with None."
        )
