from __future__ import annotations

import pytest

from jscalendar.core import jsonio
from jscalendar.core.errors import FormatError
from jscalendar.core.settings import load_settings


def test_loads_preserves_key_order() -> None:
    assert list(jsonio.loads('{"b": 1, "a": {"d": null, "c": [1, 2.5]}}')) == ["b", "a"]


def test_loads_bytes() -> None:
    assert jsonio.loads('{"title": "会議"}'.encode("utf-8")) == {"title": "会議"}


def test_loads_rejects_duplicate_keys_at_any_depth() -> None:
    with pytest.raises(FormatError) as exc_info:
        jsonio.loads('{"outer": {"k": 1, "k": 2}}')

    assert exc_info.value.reason == "duplicate-key"
    assert exc_info.value.value == "k"


def test_loads_rejects_broken_json() -> None:
    with pytest.raises(FormatError) as exc_info:
        jsonio.loads("{")

    assert exc_info.value.reason == "invalid-json"
    assert exc_info.value.value == "{"


def test_dumps_is_compact_by_default() -> None:
    assert jsonio.dumps({"title": "会議", "alerts": None}) == '{"title":"会議","alerts":null}'


def test_dumps_follows_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSCALENDAR_JSON_INDENT", "2")
    monkeypatch.setenv("JSCALENDAR_ENSURE_ASCII", "true")
    load_settings.cache_clear()

    assert jsonio.dumps({"title": "会議"}) == '{\n  "title": "\\u4f1a\\u8b70"\n}'
