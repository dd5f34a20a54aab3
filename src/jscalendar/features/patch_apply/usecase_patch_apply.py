"""PatchObject の適用ユースケース。

recurrenceOverrides (RFC 8984 4.3.5) と localizations (RFC 8984 4.6.1) の
展開に使う。繰り返し規則の展開 (発生日時の計算) は行わない。
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, TypeVar, overload

from jscalendar.core.errors import FormatError
from jscalendar.core.logging import log_codec, log_skipped_pointer
from jscalendar.core.settings import load_settings
from jscalendar.features.calendar_objects.schemas_calendar_objects import CalendarObjectModel
from jscalendar.features.calendar_objects.usecase_calendar_objects import (
    decode_calendar_object,
    dump_calendar_object,
)
from jscalendar.shared.schemas.local_datetime import LocalDateTime
from jscalendar.shared.schemas.patch_object import PatchObject, is_forbidden_for_recurrence
from jscalendar.shared.schemas.pointer import split_pointer

# 個々の発生インスタンスには持ち込まないプロパティ
_MASTER_ONLY_PROPERTIES = ("recurrenceOverrides", "recurrenceRules", "excludedRecurrenceRules")

T = TypeVar("T", bound=CalendarObjectModel)


def apply_patch(document: Mapping[str, Any], patch: Mapping[str, Any]) -> dict[str, Any]:
    """パッチを適用した新しいドキュメントを返す。入力は変更しない。

    パッチが不正、または最後以外のセグメントが存在しない場合は何も適用せず
    FormatError を送出する。
    """

    patch_object = _as_valid_patch(patch)
    result = copy.deepcopy(dict(document))

    for pointer, value in patch_object.to_wire().items():
        segments = split_pointer(pointer)
        parent: Any = result
        for segment in segments[:-1]:
            child = parent.get(segment) if isinstance(parent, dict) else None
            if not isinstance(child, dict):
                raise FormatError(
                    f"パッチの適用先が存在しません: {pointer!r} ({segment!r} がありません)",
                    value=pointer,
                    reason="missing-parent",
                )
            parent = child

        last = segments[-1]
        if value is None:
            parent.pop(last, None)
        else:
            parent[last] = value

    log_codec(operation="apply", target="PatchObject", patches=len(patch_object))
    return result


def apply_recurrence_override(
    master: Mapping[str, Any], patch: Mapping[str, Any]
) -> dict[str, Any]:
    """recurrenceOverrides のパッチを適用する。

    上書き禁止のポインタは読み飛ばす。設定 strict_recurrence_overrides が
    有効な場合は FormatError にする。
    """

    settings = load_settings()
    patch_object = _as_valid_patch(patch)

    allowed = PatchObject()
    for pointer, value in patch_object.items():
        if not is_forbidden_for_recurrence(pointer):
            allowed[pointer] = value
            continue
        if settings.strict_recurrence_overrides:
            raise FormatError(
                f"recurrenceOverrides で上書きできないプロパティです: {pointer!r}",
                value=pointer,
                reason="forbidden-pointer",
            )
        log_skipped_pointer(operation="override", pointer=pointer, reason="forbidden-for-recurrence")

    return apply_patch(master, allowed)


@overload
def expand_override(master: T, recurrence_id: LocalDateTime | str) -> T: ...


@overload
def expand_override(
    master: Mapping[str, Any], recurrence_id: LocalDateTime | str
) -> dict[str, Any]: ...


def expand_override(master: Any, recurrence_id: LocalDateTime | str) -> Any:
    """recurrenceOverrides の 1 エントリから発生インスタンスを組み立てる。

    Raises:
        KeyError: recurrence_id に対応する上書きが無い場合
    """

    if isinstance(master, CalendarObjectModel):
        instance = expand_override(dump_calendar_object(master), recurrence_id)
        return decode_calendar_object(instance)

    if isinstance(recurrence_id, str):
        recurrence_id = LocalDateTime.parse(recurrence_id)
    key = recurrence_id.encode()

    overrides = master.get("recurrenceOverrides") or {}
    matched = [
        candidate
        for raw_key, candidate in overrides.items()
        if LocalDateTime.parse(str(raw_key)).encode() == key
    ]
    if not matched:
        raise KeyError(key)
    # null の上書きはパッチ無しとして扱う
    patch = matched[0] if matched[0] is not None else {}

    base = {name: value for name, value in master.items() if name not in _MASTER_ONLY_PROPERTIES}
    base["recurrenceId"] = key
    return apply_recurrence_override(base, patch)


@overload
def localize(document: T, language: str) -> T: ...


@overload
def localize(document: Mapping[str, Any], language: str) -> dict[str, Any]: ...


def localize(document: Any, language: str) -> Any:
    """localizations[language] を適用した表示用ドキュメントを返す。"""

    if isinstance(document, CalendarObjectModel):
        localized = localize(dump_calendar_object(document), language)
        return decode_calendar_object(localized)

    localizations = document.get("localizations") or {}
    base = {name: value for name, value in document.items() if name != "localizations"}
    patch = localizations.get(language)
    if patch is None:
        return copy.deepcopy(base)
    return apply_patch(base, patch)


def _as_valid_patch(patch: Mapping[str, Any]) -> PatchObject:
    if isinstance(patch, PatchObject):
        patch.ensure_valid()
        return patch
    patch_object = PatchObject.from_wire(patch)
    if patch_object is None:
        raise FormatError("パッチに null は指定できません。", reason="invalid-patch-object")
    return patch_object
