from dataclasses import dataclass
from functools import reduce
from typing import Any, Generic, TypeVar

from typing_extensions import override

from interva.errors import InvalidRange
from interva.kind import Kind

T = TypeVar("T")

# Bounds are compared as (value, rank) pairs. A larger lower bound and a
# smaller upper bound are tighter; at equal values an open side is tighter
# than a closed one.
_CLOSED_RANK = 0
_OPEN_LOWER_RANK = 1
_OPEN_UPPER_RANK = -1


@dataclass(frozen=True)
class Interval(Generic[T]):
    """An interval over a totally ordered domain.

    Operators:
        ``x in i`` / ``i / x``   membership
        ``a <= b`` / ``a < b``   subset / proper subset (``>=``, ``>`` mirrored)
        ``a * b`` / ``a & b``    intersection

    Example:
        >>> Interval.closed(1, 2) > Interval.open(1, 2)
        True
        >>> Interval.closed(1, 3) * Interval.open(2, 4) == Interval.lorc(2, 3)
        True
        >>> 1.7 in Interval.open(1.5, 1.7)
        False
    """

    kind: Kind
    lower: T | None = None
    upper: T | None = None

    def __post_init__(self) -> None:
        kind = Kind(self.kind)
        object.__setattr__(self, "kind", kind)

        if kind is Kind.EMPTY:
            self._collapse()
            return

        if self.lower is None or self.upper is None:
            raise TypeError(
                f"Interval of kind {kind.value!r} requires both endpoints.\n"
                f"Got lower={self.lower!r}, upper={self.upper!r}\n"
                f"Hint: Use Interval.empty() for the empty interval, or a "
                f"constructor such as Interval.closed(lower, upper)"
            )
        if not self.lower <= self.upper:
            raise InvalidRange(self.lower, self.upper, kind.value)
        if self.lower == self.upper and kind is not Kind.CLOSED:
            # Only [x, x] holds a point; (x, x), (x, x] and [x, x) hold nothing.
            self._collapse()

    def _collapse(self) -> None:
        object.__setattr__(self, "kind", Kind.EMPTY)
        object.__setattr__(self, "lower", None)
        object.__setattr__(self, "upper", None)

    @classmethod
    def closed(cls, lower: T, upper: T) -> "Interval[T]":
        """Closed interval [lower, upper]."""
        return cls(Kind.CLOSED, lower, upper)

    @classmethod
    def open(cls, lower: T, upper: T) -> "Interval[T]":
        """Open interval (lower, upper)."""
        return cls(Kind.OPEN, lower, upper)

    @classmethod
    def lorc(cls, lower: T, upper: T) -> "Interval[T]":
        """Left-open-right-closed interval (lower, upper]."""
        return cls(Kind.LORC, lower, upper)

    @classmethod
    def lcro(cls, lower: T, upper: T) -> "Interval[T]":
        """Left-closed-right-open interval [lower, upper)."""
        return cls(Kind.LCRO, lower, upper)

    @classmethod
    def only(cls, value: T) -> "Interval[T]":
        """Interval holding the single point ``value``, i.e. [value, value]."""
        return cls(Kind.CLOSED, value, value)

    @classmethod
    def empty(cls) -> "Interval[T]":
        return cls(Kind.EMPTY)

    @classmethod
    def from_closures(
        cls, lower: T, upper: T, *, lower_closed: bool, upper_closed: bool
    ) -> "Interval[T]":
        return cls(Kind.from_closures(lower_closed, upper_closed), lower, upper)

    @property
    def is_empty(self) -> bool:
        return self.kind is Kind.EMPTY

    def _lower_bound(self) -> tuple[Any, int]:
        rank = _CLOSED_RANK if self.kind.lower_closed else _OPEN_LOWER_RANK
        return (self.lower, rank)

    def _upper_bound(self) -> tuple[Any, int]:
        rank = _CLOSED_RANK if self.kind.upper_closed else _OPEN_UPPER_RANK
        return (self.upper, rank)

    def contains(self, value: T) -> bool:
        """True if ``value`` lies inside this interval."""
        if self.kind is Kind.EMPTY:
            return False
        if self.kind.lower_closed:
            above = self.lower <= value
        else:
            above = self.lower < value
        if self.kind.upper_closed:
            below = value <= self.upper
        else:
            below = value < self.upper
        return above and below

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __truediv__(self, value: T) -> bool:
        return self.contains(value)

    def is_subset_of(self, other: "Interval[T]") -> bool:
        """True if every point of this interval is also a point of ``other``."""
        if self.kind is Kind.EMPTY:
            return True
        if other.kind is Kind.EMPTY:
            return False
        return (
            self._lower_bound() >= other._lower_bound()
            and self._upper_bound() <= other._upper_bound()
        )

    def is_proper_subset_of(self, other: "Interval[T]") -> bool:
        return self != other and self.is_subset_of(other)

    def is_superset_of(self, other: "Interval[T]") -> bool:
        return other.is_subset_of(self)

    def is_proper_superset_of(self, other: "Interval[T]") -> bool:
        return other.is_proper_subset_of(self)

    def is_disjoint_from(self, other: "Interval[T]") -> bool:
        return self.intersect(other).is_empty

    @override
    def __le__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.is_subset_of(other)

    @override
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.is_proper_subset_of(other)

    @override
    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.is_superset_of(other)

    @override
    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.is_proper_superset_of(other)

    def intersect(self, other: "Interval[T]") -> "Interval[T]":
        """Return the interval of points lying in both intervals.

        Each resulting bound comes from the operand that is tighter on that
        side; when both operands share the bound value it is closed only if
        both are closed there.
        """
        if self.kind is Kind.EMPTY or other.kind is Kind.EMPTY:
            return Interval(Kind.EMPTY)

        lower, lower_rank = max(self._lower_bound(), other._lower_bound())
        upper, upper_rank = min(self._upper_bound(), other._upper_bound())

        if upper < lower:
            return Interval(Kind.EMPTY)
        # Equal endpoints collapse to EMPTY unless both sides are closed.
        return Interval.from_closures(
            lower,
            upper,
            lower_closed=lower_rank == _CLOSED_RANK,
            upper_closed=upper_rank == _CLOSED_RANK,
        )

    def __mul__(self, other: object) -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersect(other)

    def __and__(self, other: object) -> "Interval[T]":
        if not isinstance(other, Interval):
            return NotImplemented
        return self.intersect(other)

    @override
    def __str__(self) -> str:
        """Mathematical notation, e.g. ``[1, 2)``; ``∅`` when empty."""
        if self.kind is Kind.EMPTY:
            return "∅"
        left = "[" if self.kind.lower_closed else "("
        right = "]" if self.kind.upper_closed else ")"
        return f"{left}{self.lower}, {self.upper}{right}"


EMPTY: Interval[Any] = Interval(Kind.EMPTY)


def intersection(*intervals: Interval[T]) -> Interval[T]:
    """Intersect one or more intervals (equivalent to chaining `*`)."""

    if not intervals:
        raise ValueError(
            f"intersection() requires at least one interval argument.\n"
            f"Example: intersection(Interval.closed(1, 3), Interval.open(2, 4))"
        )

    def reducer(acc: Interval[T], nxt: Interval[T]) -> Interval[T]:
        return acc * nxt

    return reduce(reducer, intervals)
