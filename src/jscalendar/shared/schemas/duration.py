"""JSCalendar の Duration 型 (RFC 8984 1.4.6)。

文字列表現は `PnYnMnDTnHnMnS` または `PnW`。
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from datetime import timedelta
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from jscalendar.core.errors import FormatError

DURATION_PATTERN = re.compile(
    r"^P(?:(\d+)Y)?(?:(\d+)M)?(?:(\d+)W)?(?:(\d+)D)?(?:T(?:(\d+)H)?(?:(\d+)M)?(?:(\d+)S)?)?$",
    re.ASCII,
)


@dataclass(frozen=True, slots=True)
class Duration:
    """各成分を任意で持つ期間。未指定 (None) と 0 は区別する。"""

    years: int | None = None
    months: int | None = None
    weeks: int | None = None
    days: int | None = None
    hours: int | None = None
    minutes: int | None = None
    seconds: int | None = None

    def __post_init__(self) -> None:
        for item in fields(self):
            value = getattr(self, item.name)
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise FormatError(
                    f"Duration.{item.name} は 0 以上の整数で指定してください: {value!r}",
                    value=value,
                    reason="invalid-duration",
                )

    @classmethod
    def parse(cls, text: Any) -> "Duration":
        """`P...` 形式の文字列を Duration に変換する。"""

        if not isinstance(text, str) or not text:
            raise FormatError(
                "Duration は空でない文字列で指定してください。",
                value=text,
                reason="invalid-duration",
            )
        match = DURATION_PATTERN.fullmatch(text)
        if match is None:
            raise FormatError(
                f"Duration の書式が不正です: {text!r}",
                value=text,
                reason="invalid-duration",
            )
        years, months, weeks, days, hours, minutes, seconds = (
            int(group) if group is not None else None for group in match.groups()
        )
        return cls(
            years=years,
            months=months,
            weeks=weeks,
            days=days,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
        )

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """timedelta を日・時・分・秒に分解する。1 秒未満は切り捨てる。"""

        if delta < timedelta(0):
            raise FormatError(
                f"負の期間は Duration にできません: {delta!r}",
                value=delta,
                reason="invalid-duration",
            )
        hours, remainder = divmod(delta.seconds, 3600)
        minutes, seconds = divmod(remainder, 60)
        return cls(days=delta.days, hours=hours, minutes=minutes, seconds=seconds)

    def to_timedelta(self) -> timedelta:
        """年・月を含まない Duration を timedelta に変換する。"""

        if self.years is not None or self.months is not None:
            raise FormatError(
                f"年・月を含む Duration は timedelta にできません: {self.encode()}",
                value=self.encode(),
                reason="nominal-duration",
            )
        return timedelta(
            weeks=self.weeks or 0,
            days=self.days or 0,
            hours=self.hours or 0,
            minutes=self.minutes or 0,
            seconds=self.seconds or 0,
        )

    def encode(self) -> str:
        # weeks があれば他の成分は出力しない
        if self.weeks is not None:
            return f"P{self.weeks}W"

        result = "P"
        if self.years is not None:
            result += f"{self.years}Y"
        if self.months is not None:
            result += f"{self.months}M"
        if self.days is not None:
            result += f"{self.days}D"

        if self.hours is not None or self.minutes is not None or self.seconds is not None:
            result += "T"
            if self.hours is not None:
                result += f"{self.hours}H"
            if self.minutes is not None:
                result += f"{self.minutes}M"
            if self.seconds is not None:
                result += f"{self.seconds}S"
        return result

    def __str__(self) -> str:
        return self.encode()

    @classmethod
    def _validate(cls, value: Any) -> "Duration":
        if isinstance(value, cls):
            return value
        return cls.parse(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(cls.encode),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": DURATION_PATTERN.pattern}
