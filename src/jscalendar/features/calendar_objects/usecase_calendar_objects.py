"""判別子 `@type` によるJSCalendar オブジェクトのデコード/エンコード。"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from jscalendar.core import jsonio
from jscalendar.core.errors import FormatError, JSCalendarError, MissingRequiredFieldError
from jscalendar.core.logging import log_codec, log_codec_error
from jscalendar.features.calendar_objects.schemas_calendar_objects import (
    DISCRIMINATOR,
    CalendarObjectModel,
    Group,
    resolve_variant,
    variant_name,
)
from jscalendar.shared.schemas.patch_object import PatchObject

Document = str | bytes | bytearray | Mapping[str, Any]


def decode_calendar_object(document: Document) -> CalendarObjectModel:
    """JSON テキスト (またはパース済みの dict) を Event / Task に変換する。

    判別子だけを先に読み、登録済みのモデルでドキュメント全体を検証する。

    Raises:
        FormatError: JSON 不正、判別子の欠落・未知の値、各フィールドの書式不正
        UnknownValueError: 列挙値の不正
        MissingRequiredFieldError: 必須プロパティの欠落
    """

    target = "CalendarObject"
    try:
        data = _load(document)
        model = resolve_variant(data)
        target = model.__name__
        obj = model.model_validate(data)
    except ValidationError as exc:
        error = _to_core_error(exc)
        log_codec_error(operation="decode", target=target, error=error)
        raise error from exc
    except JSCalendarError as exc:
        log_codec_error(operation="decode", target=target, error=exc)
        raise

    log_codec(operation="decode", target=target, uid=obj.uid)
    return obj


def dump_calendar_object(obj: CalendarObjectModel) -> dict[str, Any]:
    """実行時の型で振り分けて JSON 互換の dict にする。"""

    name = variant_name(obj)
    _ensure_patch_objects(obj)
    data = _dump(obj)
    if data.get(DISCRIMINATOR) != name:
        raise FormatError(
            f"@type が型と一致しません: {data.get(DISCRIMINATOR)!r} != {name!r}",
            value=data.get(DISCRIMINATOR),
            reason="discriminator-mismatch",
        )
    return data


def encode_calendar_object(obj: CalendarObjectModel) -> str:
    """Event / Task を JSON テキストにする。"""

    target = type(obj).__name__
    try:
        text = jsonio.dumps(dump_calendar_object(obj))
    except JSCalendarError as exc:
        log_codec_error(operation="encode", target=target, error=exc)
        raise

    log_codec(operation="encode", target=target, uid=obj.uid)
    return text


def decode_group(document: Document) -> Group:
    """Group を変換する。entries の各要素は判別子で振り分ける。"""

    try:
        data = _load(document)
        if not isinstance(data, Mapping):
            raise FormatError(
                "Group は JSON オブジェクトである必要があります。",
                value=data,
                reason="not-an-object",
            )
        if DISCRIMINATOR not in data:
            raise FormatError(
                "@type がありません (missing discriminator)。",
                reason="missing-discriminator",
            )
        if data[DISCRIMINATOR] != "Group":
            raise FormatError(
                f"Group ではありません (unknown variant): {data[DISCRIMINATOR]!r}",
                value=data[DISCRIMINATOR],
                reason="unknown-variant",
            )
        group = Group.model_validate(data)
    except ValidationError as exc:
        error = _to_core_error(exc)
        log_codec_error(operation="decode", target="Group", error=error)
        raise error from exc
    except JSCalendarError as exc:
        log_codec_error(operation="decode", target="Group", error=exc)
        raise

    log_codec(operation="decode", target="Group", uid=group.uid, entries=len(group.entries))
    return group


def encode_group(group: Group) -> str:
    try:
        for entry in group.entries:
            variant_name(entry)
            _ensure_patch_objects(entry)
        text = jsonio.dumps(_dump(group))
    except JSCalendarError as exc:
        log_codec_error(operation="encode", target="Group", error=exc)
        raise

    log_codec(operation="encode", target="Group", uid=group.uid, entries=len(group.entries))
    return text


def _load(document: Document) -> Any:
    if isinstance(document, (str, bytes, bytearray)):
        return jsonio.loads(document)
    return document


def _dump(model: Any) -> dict[str, Any]:
    try:
        return model.model_dump(mode="json", by_alias=True, exclude=_none_fields(model) or None)
    except PydanticSerializationError as exc:
        raise FormatError(
            f"シリアライズに失敗しました: {exc}",
            value=type(model).__name__,
            reason="serialization-failed",
        ) from exc


def _ensure_patch_objects(obj: CalendarObjectModel) -> None:
    # 不正なポインタを示す FormatError をそのまま送出する
    for patches in (obj.recurrenceOverrides, obj.localizations):
        for patch in (patches or {}).values():
            if isinstance(patch, PatchObject):
                patch.ensure_valid()


def _none_fields(model: BaseModel) -> dict[Any, Any]:
    """値が None の宣言済みフィールドを除外指定にする。

    追加プロパティの null や PatchObject 内の null はそのまま出力する。
    """

    spec: dict[Any, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if value is None:
            spec[name] = True
        elif isinstance(value, BaseModel):
            nested = _none_fields(value)
            if nested:
                spec[name] = nested
        elif isinstance(value, (dict, list)):
            items = value.items() if isinstance(value, dict) else enumerate(value)
            nested_items = {
                key: nested
                for key, item in items
                if isinstance(item, BaseModel) and (nested := _none_fields(item))
            }
            if nested_items:
                spec[name] = nested_items
    return spec


def _to_core_error(exc: ValidationError) -> JSCalendarError:
    """pydantic の ValidationError を原因となったコアの例外に戻す。"""

    errors = exc.errors()
    if not errors:  # pragma: no cover - pydantic は必ず 1 件以上返す
        return FormatError(str(exc), reason="schema-violation")

    first = errors[0]
    cause = (first.get("ctx") or {}).get("error")
    if isinstance(cause, JSCalendarError):
        return cause
    if isinstance(cause, ValidationError):
        return _to_core_error(cause)

    location = ".".join(str(part) for part in first["loc"])
    if first["type"] == "missing":
        return MissingRequiredFieldError(location)
    return FormatError(
        f"{location}: {first['msg']}",
        value=first.get("input"),
        reason="schema-violation",
    )
