"""JSON テキストと Python 値の相互変換。"""

from __future__ import annotations

import json
from typing import Any

from jscalendar.core.errors import FormatError
from jscalendar.core.settings import load_settings


def _reject_duplicate_keys(pairs: list[tuple[str, Any]]) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for key, value in pairs:
        if key in result:
            raise FormatError(
                f"JSON オブジェクトのキーが重複しています: {key!r}",
                value=key,
                reason="duplicate-key",
            )
        result[key] = value
    return result


def loads(document: str | bytes | bytearray) -> Any:
    """JSON テキストをパースする。重複キーは黙って上書きせず拒否する。"""

    try:
        return json.loads(document, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as exc:
        raise FormatError(
            f"JSON として解釈できません: {exc.msg}",
            value=exc.doc[:80] if isinstance(exc.doc, str) else None,
            reason="invalid-json",
        ) from exc


def dumps(value: Any) -> str:
    """設定に従って JSON テキストを生成する。"""

    settings = load_settings()
    if settings.json_indent is None:
        return json.dumps(value, ensure_ascii=settings.ensure_ascii, separators=(",", ":"))
    return json.dumps(value, ensure_ascii=settings.ensure_ascii, indent=settings.json_indent)
