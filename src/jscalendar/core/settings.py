"""ライブラリ全体で共有する設定読み込みロジック。"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass(slots=True)
class Settings:
    """エンコード/パッチ適用の挙動を切り替える設定値の集合。"""

    json_indent: int | None
    ensure_ascii: bool
    strict_recurrence_overrides: bool


def _get_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"環境変数 {name} は真偽値で指定してください: {raw!r}")


def _get_optional_int_env(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"環境変数 {name} は整数で指定してください: {raw!r}") from exc
    if value < 0:
        raise ValueError(f"環境変数 {name} は 0 以上で指定してください: {raw!r}")
    return value


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """`.env` と環境変数から設定を構築する。"""

    load_dotenv()

    return Settings(
        json_indent=_get_optional_int_env("JSCALENDAR_JSON_INDENT"),
        ensure_ascii=_get_bool_env("JSCALENDAR_ENSURE_ASCII", False),
        strict_recurrence_overrides=_get_bool_env(
            "JSCALENDAR_STRICT_RECURRENCE_OVERRIDES", False
        ),
    )
