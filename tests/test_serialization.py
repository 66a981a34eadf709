"""Tests for interval serialization."""

import json
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError

from interva import (
    EMPTY,
    Interval,
    IntervalModel,
    InvalidRange,
    Kind,
    from_dict,
    from_json,
    to_dict,
    to_json,
)


class TestToDict:
    def test_non_empty(self):
        assert to_dict(Interval.lorc(2, 3)) == {"kind": "lorc", "lower": 2, "upper": 3}

    def test_empty_has_no_endpoints(self):
        assert to_dict(EMPTY) == {"kind": "empty", "lower": None, "upper": None}

    def test_json_text(self):
        assert json.loads(to_json(Interval.lcro(1.5, 2.5))) == {
            "kind": "lcro",
            "lower": 1.5,
            "upper": 2.5,
        }


class TestFromDict:
    def test_round_trip(self):
        for interval in (
            Interval.closed(1, 2),
            Interval.open(1, 2),
            Interval.lorc(-3, 0),
            Interval.lcro("a", "b"),
            Interval.only(4),
            EMPTY,
        ):
            assert from_dict(to_dict(interval)) == interval
            assert from_json(to_json(interval)) == interval

    def test_degenerate_payload_normalizes_to_empty(self):
        assert from_dict({"kind": "open", "lower": 1, "upper": 1}) == EMPTY

    def test_empty_payload_without_endpoints(self):
        assert from_dict({"kind": "empty"}) == EMPTY

    def test_reversed_endpoints_raise_invalid_range(self):
        with pytest.raises(InvalidRange):
            from_dict({"kind": "closed", "lower": 5, "upper": 1})

        with pytest.raises(InvalidRange):
            from_json('{"kind": "lcro", "lower": 5, "upper": 1}')

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValidationError):
            from_dict({"kind": "sideways", "lower": 1, "upper": 2})

    def test_missing_endpoint_rejected(self):
        with pytest.raises(ValidationError, match="requires both"):
            from_dict({"kind": "closed", "lower": 1})

    def test_malformed_json_rejected(self):
        with pytest.raises(ValidationError):
            from_json("{not json")


class TestEndpointType:
    def test_dates_restored_from_json(self):
        interval = Interval.closed(date(2025, 1, 1), date(2025, 1, 31))

        restored = from_json(to_json(interval), endpoint_type=date)

        assert restored == interval
        assert isinstance(restored.lower, date)

    def test_datetimes_restored_from_json(self):
        start = datetime(2025, 1, 6, 9, tzinfo=timezone.utc)
        end = datetime(2025, 1, 6, 17, tzinfo=timezone.utc)
        interval = Interval.lcro(start, end)

        assert from_json(to_json(interval), endpoint_type=datetime) == interval

    def test_decimal_strings_coerced(self):
        restored = from_dict(
            {"kind": "open", "lower": "0.1", "upper": "0.3"}, endpoint_type=Decimal
        )
        assert restored == Interval.open(Decimal("0.1"), Decimal("0.3"))


class TestModel:
    def test_from_interval(self):
        model = IntervalModel.from_interval(Interval.lorc(2, 3))

        assert model.kind is Kind.LORC
        assert model.lower == 2
        assert model.upper == 3
        assert model.to_interval() == Interval.lorc(2, 3)

    def test_parametrized_model_validates_endpoints(self):
        with pytest.raises(ValidationError):
            IntervalModel[int].model_validate(
                {"kind": "closed", "lower": "one", "upper": 2}
            )


@st.composite
def float_intervals(draw):
    kind = draw(st.sampled_from(list(Kind)))
    values = st.floats(allow_nan=False, allow_infinity=False)
    a = draw(values)
    b = draw(values)
    return Interval(kind, min(a, b), max(a, b))


@given(float_intervals())
def test_json_round_trip(interval):
    assert from_json(to_json(interval), endpoint_type=float) == interval


@given(float_intervals())
def test_dict_round_trip(interval):
    assert from_dict(to_dict(interval)) == interval
