from typing import Any


class InvalidRange(ValueError):
    """Raised when an interval is built from endpoints that are out of order."""

    def __init__(self, lower: Any, upper: Any, kind: str):
        self.lower: Any = lower
        self.upper: Any = upper
        self.kind: str = kind
        super().__init__(
            f"Interval lower bound ({lower!r}) must be <= upper bound ({upper!r}).\n"
            f"Got kind={kind!r} with lower={lower!r}, upper={upper!r}.\n"
            f"Hint: Swap the endpoints, or use Interval.empty() "
            f"if you meant an empty range."
        )
