"""PatchObject (RFC 8984 1.4.9)。

JSCalendar オブジェクトへの部分更新の集合。recurrenceOverrides と
localizations の値として使われる。

- キーは先頭の `/` を省略した JSON Pointer
- 値が null のパッチはプロパティの削除、それ以外は置換または追加
- 配列要素を指すポインタは禁止
- 一方が他方の祖先になる 2 つのポインタは共存できない

不正な PatchObject はデコード/エンコードのどちらでも丸ごと拒否する。
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from enum import Enum
from typing import Any

from pydantic import GetCoreSchemaHandler, JsonValue, TypeAdapter, ValidationError
from pydantic_core import core_schema, to_jsonable_python

from jscalendar.core import jsonio
from jscalendar.core.errors import FormatError
from jscalendar.core.logging import log_codec_error
from jscalendar.shared.schemas.duration import Duration
from jscalendar.shared.schemas.local_datetime import LocalDateTime
from jscalendar.shared.schemas.pointer import is_prefix_conflict, is_valid_pointer

# RFC 8984 4.3.5: recurrenceOverrides で上書きしてはならないプロパティ
FORBIDDEN_PREFIXES_FOR_RECURRENCE: tuple[str, ...] = (
    "@type",
    "excludedRecurrenceRules",
    "method",
    "privacy",
    "prodId",
    "recurrenceId",
    "recurrenceIdTimeZone",
    "recurrenceOverrides",
    "recurrenceRules",
    "relatedTo",
    "replyTo",
    "sentBy",
    "timeZones",
    "uid",
)

_JSON_VALUE_ADAPTER: TypeAdapter[JsonValue] = TypeAdapter(JsonValue)


def is_forbidden_for_recurrence(pointer: str) -> bool:
    """recurrenceOverrides で無視すべきポインタかを判定する。"""

    return any(
        pointer == prefix or pointer.startswith(prefix + "/")
        for prefix in FORBIDDEN_PREFIXES_FOR_RECURRENCE
    )


class PatchObject(MutableMapping[str, Any]):
    """ポインタ → パッチ値の順序を問わない集合。

    メモリ上では通常の辞書と同様に組み立てられ、一時的に不正な状態も取りうる。
    ワイヤとの入出力時に `validate()` で検査する。出力順は挿入順。
    """

    def __init__(self, patches: Mapping[str, Any] | None = None) -> None:
        self._patches: dict[str, Any] = dict(patches) if patches else {}

    def __getitem__(self, pointer: str) -> Any:
        return self._patches[pointer]

    def __setitem__(self, pointer: str, value: Any) -> None:
        self._patches[pointer] = value

    def __delitem__(self, pointer: str) -> None:
        del self._patches[pointer]

    def __iter__(self) -> Iterator[str]:
        return iter(self._patches)

    def __len__(self) -> int:
        return len(self._patches)

    def __repr__(self) -> str:
        return f"PatchObject({self._patches!r})"

    def find_conflicts(self) -> list[tuple[str, str]]:
        """ポインタ同士の前方一致による衝突を列挙する。"""

        pointers = list(self._patches)
        conflicts: list[tuple[str, str]] = []
        for i, first in enumerate(pointers):
            for second in pointers[i + 1 :]:
                if is_prefix_conflict(first, second):
                    conflicts.append((first, second))
        return conflicts

    def validate(self) -> bool:
        """全ポインタが有効で、衝突が無ければ True。状態は変更しない。"""

        if not all(is_valid_pointer(pointer) for pointer in self._patches):
            return False
        return not self.find_conflicts()

    @classmethod
    def from_wire(cls, data: Any) -> "PatchObject | None":
        """JSON オブジェクト (dict) から PatchObject を構築する。null は None。"""

        if data is None:
            return None
        if not isinstance(data, Mapping):
            raise FormatError(
                f"PatchObject は JSON オブジェクトである必要があります: {type(data).__name__}",
                value=data,
                reason="invalid-patch-object",
            )

        patches: dict[str, Any] = {}
        for pointer, value in data.items():
            if not is_valid_pointer(pointer):
                raise FormatError(
                    f"パッチのポインタが不正です: {pointer!r}。配列要素は指定できません。",
                    value=pointer,
                    reason="invalid-pointer",
                )
            try:
                patches[pointer] = _JSON_VALUE_ADAPTER.validate_python(value)
            except ValidationError as exc:
                raise FormatError(
                    f"パッチ {pointer!r} の値が JSON 値ではありません。",
                    value=pointer,
                    reason="invalid-patch-value",
                ) from exc

        patch = cls(patches)
        conflicts = patch.find_conflicts()
        if conflicts:
            raise FormatError(
                f"パッチのポインタが衝突しています (prefix conflict): {conflicts[0]!r}",
                value=conflicts[0],
                reason="prefix-conflict",
            )
        return patch

    def ensure_valid(self) -> None:
        """不正なポインタまたは衝突があれば、それを示す FormatError を送出する。"""

        invalid = [pointer for pointer in self._patches if not is_valid_pointer(pointer)]
        if invalid:
            raise FormatError(
                f"不正な PatchObject です (invalid pointer): {invalid!r}",
                value=invalid,
                reason="invalid-patch-object",
            )
        conflicts = self.find_conflicts()
        if conflicts:
            raise FormatError(
                f"不正な PatchObject です (prefix conflict): {conflicts!r}",
                value=conflicts,
                reason="invalid-patch-object",
            )

    def to_wire(self) -> dict[str, Any]:
        """検証した上で JSON 互換の dict に変換する。"""

        self.ensure_valid()
        return {pointer: _encode_value(value) for pointer, value in self._patches.items()}

    @classmethod
    def _validate(cls, value: Any) -> "PatchObject":
        if isinstance(value, cls):
            value.ensure_valid()
            return value
        if value is None:
            raise FormatError(
                "PatchObject に null は指定できません。",
                value=value,
                reason="invalid-patch-object",
            )
        return cls.from_wire(value)  # type: ignore[return-value]

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(cls.to_wire),
        )


def _encode_value(value: Any) -> Any:
    if value is None or isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, str):
        return value
    if isinstance(value, (Duration, LocalDateTime)):
        return value.encode()
    if isinstance(value, Mapping):
        return {_encode_key(key): _encode_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    return to_jsonable_python(value)


def _encode_key(key: Any) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    if isinstance(key, str):
        return key
    if isinstance(key, LocalDateTime):
        return key.encode()
    raise FormatError(
        f"JSON オブジェクトのキーは文字列である必要があります: {key!r}",
        value=key,
        reason="invalid-patch-value",
    )


def decode_patch_object(document: str | bytes | bytearray) -> PatchObject | None:
    """JSON テキストから PatchObject を復元する。`null` は None を返す。"""

    try:
        return PatchObject.from_wire(jsonio.loads(document))
    except FormatError as exc:
        log_codec_error(operation="decode", target="PatchObject", error=exc)
        raise


def encode_patch_object(patch: PatchObject | None) -> str:
    """PatchObject を JSON テキストにする。None は `null`。"""

    if patch is None:
        return jsonio.dumps(None)
    try:
        return jsonio.dumps(patch.to_wire())
    except FormatError as exc:
        log_codec_error(operation="encode", target="PatchObject", error=exc)
        raise
