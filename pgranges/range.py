import logging
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

from typing_extensions import Self, override

from pgranges.errors import InvalidRange, MalformedRangeText
from pgranges.util import (
    EMPTY_SPELLINGS,
    LOWER_DELIMITERS,
    LOWER_EXCLUSIVE,
    LOWER_INCLUSIVE,
    SEPARATOR,
    UPPER_DELIMITERS,
    UPPER_EXCLUSIVE,
    UPPER_INCLUSIVE,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class _State(Enum):
    START = "start"
    LOWER = "lower"
    UPPER = "upper"
    DONE = "done"


def _check_order(lower: Any, upper: Any) -> None:
    if lower is not None and upper is not None and lower > upper:
        raise InvalidRange(lower, upper)


class Range(Generic[T]):
    """An interval over an ordered scalar domain, with optional bounds.

    ``Range`` owns bound storage, the inclusivity flags, the ordering
    invariant and the PostgreSQL text/tuple codecs. It is abstract: concrete
    ranges bind a bound converter when they are declared.

    Example:
        >>> from pgranges.convert import to_int
        >>> class IntegerRange(Range[int], converter=to_int):
        ...     pass
        >>> r = IntegerRange.from_string("[1,10)")
        >>> r.lower, r.upper, r.lower_inc, r.upper_inc
        (1, 10, True, False)
        >>> r.to_string()
        '[1,10)'
    """

    _converter: ClassVar[Callable[[Any], Any] | None] = None

    def __init_subclass__(
        cls, converter: Callable[[Any], Any] | None = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        if converter is not None:
            cls._converter = staticmethod(converter)

    def __init__(
        self,
        lower: Any,
        upper: Any,
        lower_inc: bool = True,
        upper_inc: bool = True,
    ) -> None:
        lower_bound = self.convert_bound(lower)
        upper_bound = self.convert_bound(upper)
        _check_order(lower_bound, upper_bound)

        self._lower: T | None = lower_bound
        self._upper: T | None = upper_bound
        self._lower_inc: bool = lower_inc
        self._upper_inc: bool = upper_inc

    @classmethod
    def convert_bound(cls, raw: Any) -> T | None:
        """Coerce a raw bound into this range's scalar domain.

        Empty text and None mean "no bound" and come back as None.
        """
        converter = cls._converter
        if converter is None:
            raise TypeError(
                f"{cls.__name__} has no bound converter and cannot hold values.\n"
                f"Hint: use IntegerRange or NumericRange, or declare a variant:\n"
                f"  class MyRange(Range[int], converter=to_int): ..."
            )
        return converter(raw)

    @property
    def lower(self) -> T | None:
        return self._lower

    @property
    def upper(self) -> T | None:
        return self._upper

    @property
    def lower_inc(self) -> bool:
        return self._lower_inc

    @property
    def upper_inc(self) -> bool:
        return self._upper_inc

    @property
    def lower_inf(self) -> bool:
        """True if the range is unbounded below."""
        return self._lower is None

    @property
    def upper_inf(self) -> bool:
        """True if the range is unbounded above."""
        return self._upper is None

    def check_invariant(self) -> None:
        """Raise InvalidRange if both bounds are set and lower > upper."""
        _check_order(self._lower, self._upper)

    def set_lower(self, raw: Any, inclusive: bool | None = None) -> None:
        """Replace the lower bound, and its inclusivity if given.

        The range is left untouched if the new bound would exceed the upper one.
        """
        bound = self.convert_bound(raw)
        try:
            _check_order(bound, self._upper)
        except InvalidRange:
            logger.debug("rejected lower bound %r for %r", bound, self)
            raise
        self._lower = bound
        if inclusive is not None:
            self._lower_inc = inclusive

    def set_upper(self, raw: Any, inclusive: bool | None = None) -> None:
        """Replace the upper bound, and its inclusivity if given.

        The range is left untouched if the new bound would fall below the lower one.
        """
        bound = self.convert_bound(raw)
        try:
            _check_order(self._lower, bound)
        except InvalidRange:
            logger.debug("rejected upper bound %r for %r", bound, self)
            raise
        self._upper = bound
        if inclusive is not None:
            self._upper_inc = inclusive

    def contains(self, value: Any) -> bool:
        """True if ``value`` lies inside the range, honouring inclusivity."""
        if self._lower is not None and (
            value < self._lower or (value == self._lower and not self._lower_inc)
        ):
            return False
        return not (
            self._upper is not None
            and (value > self._upper or (value == self._upper and not self._upper_inc))
        )

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    @classmethod
    def from_string(cls, text: str | None, none_if_empty: bool = True) -> Self | None:
        """Parse PostgreSQL range text such as ``[0.5,1.0)`` or ``(,10]``.

        ``[``/``]`` mark an inclusive bound and ``(``/``)`` an exclusive one.
        Missing bound text means that side is unbounded.

        ``None`` and the bound-less spellings ``(,)``, ``[,)``, ``(,]`` and
        ``[,]`` give None when ``none_if_empty`` is set, otherwise a range
        unbounded on both sides.

        The first comma always separates the bounds, so bound text cannot
        itself contain a comma. Anything after the closing delimiter is
        ignored.

        Raises:
            MalformedRangeText: If the opening or closing delimiter is missing
            InvalidRange: If the parsed lower bound exceeds the upper bound
        """
        if text is None or text in EMPTY_SPELLINGS:
            logger.debug("range text %r has no bounds", text)
            return None if none_if_empty else cls(None, None)

        state = _State.START
        lower_delimiter: str | None = None
        upper_delimiter: str | None = None
        lower_text: list[str] = []
        upper_text: list[str] = []

        for char in text:
            if state is _State.START:
                if char not in LOWER_DELIMITERS:
                    break
                lower_delimiter = char
                state = _State.LOWER
            elif state is _State.LOWER:
                if char == SEPARATOR:
                    state = _State.UPPER
                else:
                    lower_text.append(char)
            elif state is _State.UPPER:
                if char in UPPER_DELIMITERS:
                    upper_delimiter = char
                    state = _State.DONE
                else:
                    upper_text.append(char)
            else:
                break

        if lower_delimiter is None or upper_delimiter is None:
            logger.debug("malformed range text %r (stopped in %s)", text, state.value)
            raise MalformedRangeText(text)

        return cls(
            "".join(lower_text),
            "".join(upper_text),
            lower_delimiter == LOWER_INCLUSIVE,
            upper_delimiter == UPPER_INCLUSIVE,
        )

    @classmethod
    def from_tuple(cls, values: Sequence[Any] | None) -> Self:
        """Build a range from ``(lower, upper, lower_inc, upper_inc)``.

        The bounds are taken as scalars, not parsed as range text. None gives
        a range unbounded on both sides.
        """
        if values is None:
            return cls(None, None)
        if len(values) != 4:
            raise ValueError(
                f"Range tuple must have 4 elements, got {len(values)}: {values!r}\n"
                f"Expected: (lower, upper, lower_inc, upper_inc)\n"
                f"Example: {cls.__name__}.from_tuple((1, 10, True, False))"
            )
        lower, upper, lower_inc, upper_inc = values
        return cls(lower, upper, lower_inc, upper_inc)

    def to_string(self) -> str | None:
        """Render the range as PostgreSQL range text.

        Returns None if the range has no bounds at all.
        """
        if self._lower is None and self._upper is None:
            return None
        return self._render()

    def to_tuple(self) -> tuple[T | None, T | None, bool, bool] | None:
        """Return ``(lower, upper, lower_inc, upper_inc)``.

        Returns None if the range has no bounds at all.
        """
        if self._lower is None and self._upper is None:
            return None
        return (self._lower, self._upper, self._lower_inc, self._upper_inc)

    def _render(self) -> str:
        lower = "" if self._lower is None else str(self._lower)
        upper = "" if self._upper is None else str(self._upper)
        return (
            (LOWER_INCLUSIVE if self._lower_inc else LOWER_EXCLUSIVE)
            + lower
            + SEPARATOR
            + upper
            + (UPPER_INCLUSIVE if self._upper_inc else UPPER_EXCLUSIVE)
        )

    @override
    def __str__(self) -> str:
        return self._render()

    @override
    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._lower!r}, {self._upper!r}, "
            f"lower_inc={self._lower_inc!r}, upper_inc={self._upper_inc!r})"
        )

    @override
    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (
            self._lower == other._lower
            and self._upper == other._upper
            and self._lower_inc == other._lower_inc
            and self._upper_inc == other._upper_inc
        )
