from enum import StrEnum


class Kind(StrEnum):
    """Boundary kind of an interval.

    The value doubles as the serialized tag.
    """

    EMPTY = "empty"
    CLOSED = "closed"
    OPEN = "open"
    LORC = "lorc"
    LCRO = "lcro"

    @property
    def lower_closed(self) -> bool:
        return self in (Kind.CLOSED, Kind.LCRO)

    @property
    def upper_closed(self) -> bool:
        return self in (Kind.CLOSED, Kind.LORC)

    @classmethod
    def from_closures(cls, lower_closed: bool, upper_closed: bool) -> "Kind":
        """Map a pair of closure flags to the non-empty kind they describe."""
        if lower_closed:
            return cls.CLOSED if upper_closed else cls.LCRO
        return cls.LORC if upper_closed else cls.OPEN
