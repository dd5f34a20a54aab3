"""JSCalendar コーデックが送出する例外。"""

from __future__ import annotations

from typing import Any


class JSCalendarError(ValueError):
    """JSCalendar の入出力で発生する例外の基底クラス。

    pydantic のバリデータ内から送出できるよう ValueError を継承する。
    """


class FormatError(JSCalendarError):
    """文字列表現やポインタ、判別子など書式の不正。"""

    def __init__(self, message: str, *, value: Any = None, reason: str | None = None) -> None:
        super().__init__(message)
        self.value = value
        self.reason = reason


class UnknownValueError(JSCalendarError):
    """列挙型に定義されていないタグ。"""

    def __init__(self, enum_type: type, value: Any) -> None:
        super().__init__(f"列挙型 {enum_type.__name__} に未定義の値です: {value!r}")
        self.enum_type = enum_type
        self.value = value


class MissingRequiredFieldError(JSCalendarError):
    """スキーマ上の必須プロパティが欠けている。"""

    def __init__(self, field: str) -> None:
        super().__init__(f"必須プロパティ {field} がありません。")
        self.field = field


__all__ = [
    "FormatError",
    "JSCalendarError",
    "MissingRequiredFieldError",
    "UnknownValueError",
]
