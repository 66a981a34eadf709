"""Serialization of intervals.

An interval is carried as its ``kind`` tag plus its two endpoints, which are
``None`` for the empty interval::

    {"kind": "lorc", "lower": 2, "upper": 3}
    {"kind": "empty", "lower": null, "upper": null}

Decoding always goes back through :class:`~interva.interval.Interval`, so a
payload with reversed endpoints raises :class:`~interva.errors.InvalidRange`
and a degenerate open range comes back as the empty interval.

Endpoint types that JSON cannot carry natively can be restored by naming
them::

    >>> from datetime import date
    >>> text = to_json(Interval.closed(date(2025, 1, 1), date(2025, 1, 31)))
    >>> from_json(text, endpoint_type=date).lower
    datetime.date(2025, 1, 1)
"""

import logging
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ValidationError, model_validator

from interva.errors import InvalidRange
from interva.interval import Interval
from interva.kind import Kind

logger = logging.getLogger(__name__)

T = TypeVar("T")


class IntervalModel(BaseModel, Generic[T]):
    kind: Kind
    lower: T | None = None
    upper: T | None = None

    @model_validator(mode="after")
    def check_endpoints(self) -> Self:
        if self.kind is not Kind.EMPTY and (self.lower is None or self.upper is None):
            raise ValueError(
                f"Interval of kind {self.kind.value!r} requires both "
                f"'lower' and 'upper' endpoints"
            )
        return self

    @classmethod
    def from_interval(cls, interval: Interval[Any]) -> Self:
        return cls(kind=interval.kind, lower=interval.lower, upper=interval.upper)

    def to_interval(self) -> Interval[T]:
        return Interval(self.kind, self.lower, self.upper)


def to_dict(interval: Interval[Any]) -> dict[str, Any]:
    return IntervalModel.from_interval(interval).model_dump(mode="python")


def to_json(interval: Interval[Any]) -> str:
    return IntervalModel.from_interval(interval).model_dump_json()


def from_dict(data: Any, endpoint_type: Any = Any) -> Interval[Any]:
    """Rebuild an interval from the mapping produced by :func:`to_dict`.

    Raises:
        ValidationError: If the payload is malformed
        InvalidRange: If the endpoints are out of order
    """
    model_cls = IntervalModel[endpoint_type]
    try:
        model = model_cls.model_validate(data)
    except ValidationError as e:
        logger.debug("Rejected interval payload %r: %s", data, e)
        raise
    return _build(model)


def from_json(text: str | bytes, endpoint_type: Any = Any) -> Interval[Any]:
    """Rebuild an interval from the text produced by :func:`to_json`."""
    model_cls = IntervalModel[endpoint_type]
    try:
        model = model_cls.model_validate_json(text)
    except ValidationError as e:
        logger.debug("Rejected interval JSON %r: %s", text, e)
        raise
    return _build(model)


def _build(model: IntervalModel[Any]) -> Interval[Any]:
    try:
        return model.to_interval()
    except InvalidRange as e:
        logger.debug("Rejected interval payload with reversed endpoints: %s", e)
        raise
