"""JSCalendar オブジェクト (Event / Task / Group) のスキーマ。

コアのコーデックを通るプロパティだけを型付けし、それ以外のプロパティは
`extra="allow"` でそのまま保持して往復させる。
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, field_validator

from jscalendar.core.errors import FormatError
from jscalendar.shared.schemas.duration import Duration
from jscalendar.shared.schemas.enums import (
    EventStatus,
    FreeBusyStatus,
    ParticipantKind,
    ParticipantRole,
    ParticipationStatus,
    Privacy,
    ProgressStatus,
    ScheduleAgent,
)
from jscalendar.shared.schemas.local_datetime import LocalDateTime
from jscalendar.shared.schemas.patch_object import PatchObject

DISCRIMINATOR = "@type"

M = TypeVar("M", bound="CalendarObjectModel")


class Participant(BaseModel):
    """参加者。roles は列挙値をキーに持つ。"""

    type: Literal["Participant"] | None = Field(default=None, alias=DISCRIMINATOR)
    name: str | None = None
    kind: ParticipantKind | None = None
    roles: dict[ParticipantRole, bool] | None = None
    participationStatus: ParticipationStatus | None = None
    scheduleAgent: ScheduleAgent | None = None
    expectReply: bool | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class CalendarObjectModel(BaseModel):
    """Event と Task に共通するプロパティ。"""

    type: str = Field(alias=DISCRIMINATOR)
    uid: str
    updated: str
    created: str | None = None
    title: str | None = None
    recurrenceId: LocalDateTime | None = None
    recurrenceOverrides: dict[LocalDateTime, PatchObject | None] | None = None
    localizations: dict[str, PatchObject | None] | None = None
    privacy: Privacy | None = None
    freeBusyStatus: FreeBusyStatus | None = None
    participants: dict[str, Participant] | None = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


VARIANTS: dict[str, type[CalendarObjectModel]] = {}


def register_variant(name: str) -> Callable[[type[M]], type[M]]:
    """判別子の値とモデルクラスを対応付ける。"""

    def decorator(model: type[M]) -> type[M]:
        if name in VARIANTS:
            raise ValueError(f"判別子 '{name}' は登録済みです。")
        VARIANTS[name] = model
        return model

    return decorator


def resolve_variant(document: Any) -> type[CalendarObjectModel]:
    """ドキュメントの `@type` だけを読み、対応するモデルクラスを返す。"""

    if not isinstance(document, Mapping):
        raise FormatError(
            f"JSCalendar オブジェクトは JSON オブジェクトである必要があります: {type(document).__name__}",
            value=document,
            reason="not-an-object",
        )
    if DISCRIMINATOR not in document:
        raise FormatError(
            "@type がありません (missing discriminator)。",
            reason="missing-discriminator",
        )
    discriminator = document[DISCRIMINATOR]
    model = VARIANTS.get(discriminator) if isinstance(discriminator, str) else None
    if model is None:
        raise FormatError(
            f"未知の JSCalendar オブジェクト種別です (unknown variant): {discriminator!r}",
            value=discriminator,
            reason="unknown-variant",
        )
    return model


def variant_name(obj: Any) -> str:
    """オブジェクトの実行時クラスから判別子の値を引く。"""

    for name, model in VARIANTS.items():
        if type(obj) is model:
            return name
    raise FormatError(
        f"登録されていない JSCalendar オブジェクト型です (unknown variant): {type(obj).__name__}",
        value=type(obj).__name__,
        reason="unknown-variant",
    )


@register_variant("Event")
class Event(CalendarObjectModel):
    """RFC 8984 5.1 Event。"""

    type: Literal["Event"] = Field(default="Event", alias=DISCRIMINATOR)
    start: LocalDateTime
    duration: Duration | None = None
    status: EventStatus | None = None


@register_variant("Task")
class Task(CalendarObjectModel):
    """RFC 8984 5.2 Task。"""

    type: Literal["Task"] = Field(default="Task", alias=DISCRIMINATOR)
    due: LocalDateTime | None = None
    start: LocalDateTime | None = None
    estimatedDuration: Duration | None = None
    percentComplete: int | None = None
    progress: ProgressStatus | None = None
    progressUpdated: str | None = None


CalendarObject = Event | Task


class Group(BaseModel):
    """RFC 8984 5.3 Group。entries は判別子で Event / Task に振り分ける。"""

    type: Literal["Group"] = Field(default="Group", alias=DISCRIMINATOR)
    uid: str
    updated: str
    title: str | None = None
    source: str | None = None
    entries: list[SerializeAsAny[CalendarObjectModel]]

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @field_validator("entries", mode="before")
    @classmethod
    def _dispatch_entries(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        entries: list[Any] = []
        for entry in value:
            if isinstance(entry, CalendarObjectModel):
                entries.append(entry)
                continue
            entries.append(resolve_variant(entry).model_validate(entry))
        return entries
