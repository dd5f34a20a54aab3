from __future__ import annotations

from collections.abc import Iterator

import pytest

from jscalendar.core import settings as core_settings

_SETTINGS_ENV = (
    "JSCALENDAR_JSON_INDENT",
    "JSCALENDAR_ENSURE_ASCII",
    "JSCALENDAR_STRICT_RECURRENCE_OVERRIDES",
)


@pytest.fixture(autouse=True)
def basic_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """設定用の環境変数をテストごとに既定値へ戻す。"""

    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    # 手元の .env を読み込まない
    monkeypatch.setattr(core_settings, "load_dotenv", lambda *args, **kwargs: False)
    core_settings.load_settings.cache_clear()
    yield
    core_settings.load_settings.cache_clear()
