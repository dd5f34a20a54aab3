"""ポインタ文字列の検査のテスト。"""

from __future__ import annotations

import pytest

from jscalendar.shared.schemas.pointer import is_prefix_conflict, is_valid_pointer, split_pointer


@pytest.mark.parametrize(
    "pointer",
    ["title", "locations/loc1/name", "alerts/a1/trigger/offset", "participants/p-0", "v2"],
)
def test_valid_pointers(pointer: str) -> None:
    assert is_valid_pointer(pointer) is True


@pytest.mark.parametrize(
    "pointer",
    ["", "items/0/name", "0", "entries/+1", "entries/-3", "entries/ 7 ", None, 12],
)
def test_invalid_pointers(pointer: object) -> None:
    assert is_valid_pointer(pointer) is False


def test_non_ascii_digits_are_not_integer_segments() -> None:
    """全角数字は配列添字として扱わない。"""

    assert is_valid_pointer("items/１") is True


def test_prefix_conflict() -> None:
    assert is_prefix_conflict("locations/loc1", "locations/loc1/name") is True
    assert is_prefix_conflict("locations/loc1/name", "locations/loc1") is True
    assert is_prefix_conflict("title", "title") is True


def test_prefix_conflict_requires_segment_boundary() -> None:
    assert is_prefix_conflict("locations/loc1", "locations/loc2") is False
    assert is_prefix_conflict("locations/loc1", "locations/loc10") is False
    assert is_prefix_conflict("title", "titles") is False


def test_split_pointer_unescapes_segments() -> None:
    assert split_pointer("locations/a~1b/name~0x") == ["locations", "a/b", "name~x"]
