"""LocalDateTime の書式変換のテスト。"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import BaseModel

from jscalendar.core.errors import FormatError
from jscalendar.shared.schemas.local_datetime import LocalDateTime


class _Holder(BaseModel):
    at: LocalDateTime
    overrides: dict[LocalDateTime, str] = {}


def test_from_datetime_and_back() -> None:
    dt = datetime(2024, 12, 1, 14, 30, 45)

    ldt = LocalDateTime.from_datetime(dt)

    assert ldt.value == dt
    assert ldt.to_datetime() == dt


def test_encode_is_fixed_width() -> None:
    assert LocalDateTime(datetime(2024, 12, 1, 14, 30, 45)).encode() == "2024-12-01T14:30:45"
    assert str(LocalDateTime(datetime(987, 1, 2, 3, 4, 5))) == "0987-01-02T03:04:05"


def test_zone_and_fraction_are_dropped() -> None:
    ldt = LocalDateTime(datetime(2024, 12, 1, 14, 30, 45, 123456, tzinfo=timezone(timedelta(hours=9))))

    assert ldt.value.tzinfo is None
    assert ldt.encode() == "2024-12-01T14:30:45"


def test_parse_canonical_form() -> None:
    ldt = LocalDateTime.parse("2024-12-01T14:30:00")

    assert ldt.value == datetime(2024, 12, 1, 14, 30, 0)
    assert ldt.encode() == "2024-12-01T14:30:00"


@pytest.mark.parametrize(
    "text",
    ["2024-12-01 14:30", "2024-12-01T14:30:00.250", "December 1, 2024 2:30 PM"],
)
def test_parse_is_permissive_but_encode_is_canonical(text: str) -> None:
    """正規形以外の入力も受け付けるが、出力は常に正規形。"""

    assert LocalDateTime.parse(text).encode() == "2024-12-01T14:30:00"


@pytest.mark.parametrize("text", ["", "not-a-date", None, 20241201])
def test_parse_rejects_invalid_input(text: object) -> None:
    with pytest.raises(FormatError) as exc_info:
        LocalDateTime.parse(text)

    assert exc_info.value.reason == "invalid-local-datetime"


def test_equality_and_hash_follow_components() -> None:
    first = LocalDateTime.parse("2024-12-01T14:30:00")
    second = LocalDateTime(datetime(2024, 12, 1, 14, 30))

    assert first == second
    assert hash(first) == hash(second)
    assert {first: "a"}[second] == "a"
    assert first < LocalDateTime.parse("2024-12-01T14:30:01")


def test_pydantic_value_and_key_positions() -> None:
    """値としてもキーとしても、引用符などの余計な装飾なしで往復する。"""

    holder = _Holder.model_validate(
        {"at": "2024-12-01T14:30:00", "overrides": {"2024-12-08T14:30:00": "moved"}}
    )

    key = LocalDateTime.parse("2024-12-08T14:30:00")
    assert holder.at == LocalDateTime(datetime(2024, 12, 1, 14, 30))
    assert holder.overrides == {key: "moved"}
    assert holder.model_dump(mode="json") == {
        "at": "2024-12-01T14:30:00",
        "overrides": {"2024-12-08T14:30:00": "moved"},
    }


def test_pydantic_rejects_bad_key() -> None:
    with pytest.raises(ValueError):
        _Holder.model_validate({"at": "2024-12-01T14:30:00", "overrides": {"tomorrow-ish": "x"}})
