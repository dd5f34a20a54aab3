"""列挙値コーデックのテスト。"""

from __future__ import annotations

from enum import Enum, auto

import pytest
from pydantic import BaseModel

from jscalendar.core.errors import UnknownValueError
from jscalendar.shared.schemas.enums import (
    ALL_ENUMS,
    AlertAction,
    DayOfWeek,
    EventStatus,
    ParticipantRole,
    ParticipationStatus,
    ProgressStatus,
)
from jscalendar.shared.schemas.wire_enum import EnumCodec, WireEnum, codec_for


class _Color(WireEnum):
    DEEP_RED = "deep-red"
    BLUE = auto()


class _Plain(Enum):
    FIRST = 1
    SECOND = 2


class _Holder(BaseModel):
    status: ParticipationStatus
    roles: dict[ParticipantRole, bool] = {}


@pytest.mark.parametrize("enum_type", ALL_ENUMS)
def test_every_member_round_trips(enum_type: type[WireEnum]) -> None:
    codec = codec_for(enum_type)

    for member in enum_type:
        assert codec.decode(codec.encode(member)) is member
        assert codec.decode_key(codec.encode_key(member)) is member


def test_declared_tags_are_used() -> None:
    assert codec_for(ParticipationStatus).encode(ParticipationStatus.NEEDS_ACTION) == "needs-action"
    assert codec_for(ProgressStatus).encode(ProgressStatus.IN_PROCESS) == "in-process"
    assert codec_for(DayOfWeek).decode("mo") is DayOfWeek.MONDAY


def test_auto_falls_back_to_lowercase_name() -> None:
    assert _Color.BLUE.value == "blue"
    assert codec_for(_Color).encode(_Color.BLUE) == "blue"
    assert codec_for(_Color).decode("deep-red") is _Color.DEEP_RED
    assert AlertAction.DISPLAY.value == "display"


def test_non_string_enum_uses_lowercase_name() -> None:
    codec = EnumCodec(_Plain)

    assert codec.encode(_Plain.SECOND) == "second"
    assert codec.decode("first") is _Plain.FIRST


@pytest.mark.parametrize("value", ["", None, "not-a-tag", "NEEDS-ACTION", 1])
def test_decode_rejects_unknown_values(value: object) -> None:
    with pytest.raises(UnknownValueError) as exc_info:
        codec_for(ParticipationStatus).decode(value)

    assert exc_info.value.enum_type is ParticipationStatus
    assert exc_info.value.value == value
    assert "ParticipationStatus" in str(exc_info.value)


def test_codec_is_built_once_per_enum() -> None:
    assert codec_for(ParticipationStatus) is codec_for(ParticipationStatus)
    assert codec_for(ParticipationStatus) is not codec_for(ProgressStatus)


def test_tags_are_listed_in_declaration_order() -> None:
    assert codec_for(DayOfWeek).tags == ("mo", "tu", "we", "th", "fr", "sa", "su")


def test_pydantic_value_and_key_positions() -> None:
    holder = _Holder.model_validate(
        {"status": "tentative", "roles": {"attendee": True, "chair": False}}
    )

    assert holder.status is ParticipationStatus.TENTATIVE
    assert holder.roles == {ParticipantRole.ATTENDEE: True, ParticipantRole.CHAIR: False}
    assert holder.model_dump(mode="json") == {
        "status": "tentative",
        "roles": {"attendee": True, "chair": False},
    }


def test_pydantic_rejects_unknown_key() -> None:
    with pytest.raises(ValueError):
        _Holder.model_validate({"status": "accepted", "roles": {"boss": True}})


def test_別の列挙型のメンバーは受け付けない() -> None:
    with pytest.raises(UnknownValueError) as exc_info:
        codec_for(EventStatus).decode(ParticipationStatus.TENTATIVE)

    assert exc_info.value.enum_type is EventStatus
    assert exc_info.value.value is ParticipationStatus.TENTATIVE
    assert codec_for(EventStatus).decode("tentative") is EventStatus.TENTATIVE
