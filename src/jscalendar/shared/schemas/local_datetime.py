"""タイムゾーンを持たない日時 (RFC 8984 1.4.4 LocalDateTime)。"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from dateutil import parser as dateutil_parser
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from jscalendar.core.errors import FormatError


@dataclass(frozen=True, slots=True, order=True)
class LocalDateTime:
    """秒精度・タイムゾーンなしの日時。

    出力は常に `YYYY-MM-DDTHH:MM:SS` 固定。辞書キーとしても使える。
    """

    value: datetime

    def __post_init__(self) -> None:
        if not isinstance(self.value, datetime):
            raise FormatError(
                f"LocalDateTime には datetime を指定してください: {self.value!r}",
                value=self.value,
                reason="invalid-local-datetime",
            )
        if self.value.tzinfo is not None or self.value.microsecond:
            object.__setattr__(
                self, "value", self.value.replace(tzinfo=None, microsecond=0)
            )

    @classmethod
    def from_datetime(cls, value: datetime) -> "LocalDateTime":
        return cls(value)

    def to_datetime(self) -> datetime:
        return self.value

    @classmethod
    def parse(cls, text: Any) -> "LocalDateTime":
        """日時文字列を解釈する。正規形以外の表記も受け付ける。"""

        if not isinstance(text, str) or not text:
            raise FormatError(
                "LocalDateTime は空でない文字列で指定してください。",
                value=text,
                reason="invalid-local-datetime",
            )
        try:
            parsed = dateutil_parser.isoparse(text)
        except ValueError:
            try:
                parsed = dateutil_parser.parse(text)
            except (ValueError, OverflowError) as exc:
                raise FormatError(
                    f"LocalDateTime として解釈できません: {text!r}",
                    value=text,
                    reason="invalid-local-datetime",
                ) from exc
        return cls(parsed)

    def encode(self) -> str:
        v = self.value
        return (
            f"{v.year:04d}-{v.month:02d}-{v.day:02d}"
            f"T{v.hour:02d}:{v.minute:02d}:{v.second:02d}"
        )

    def __str__(self) -> str:
        return self.encode()

    @classmethod
    def _validate(cls, value: Any) -> "LocalDateTime":
        if isinstance(value, cls):
            return value
        if isinstance(value, datetime):
            return cls(value)
        return cls.parse(value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # 辞書キーの位置でも同じ検証/シリアライズが使われる
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(cls.encode),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}$"}
