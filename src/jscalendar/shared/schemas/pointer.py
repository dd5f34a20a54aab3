"""PatchObject のキーとなるポインタ (先頭の `/` を省略した JSON Pointer) の検査。"""

from __future__ import annotations

import re
from typing import Any

_INTEGER_SEGMENT = re.compile(r"^\s*[+-]?\d+\s*$", re.ASCII)


def is_valid_pointer(pointer: Any) -> bool:
    """ポインタが空でなく、配列要素を指していないかを判定する。"""

    if not isinstance(pointer, str) or not pointer:
        return False
    return not any(_INTEGER_SEGMENT.match(segment) for segment in pointer.split("/"))


def is_prefix_conflict(pointer1: str, pointer2: str) -> bool:
    """一方が他方と等しいか、`/` 区切りで祖先にあたる場合 True。"""

    if pointer1 == pointer2:
        return True
    return pointer1.startswith(pointer2 + "/") or pointer2.startswith(pointer1 + "/")


def split_pointer(pointer: str) -> list[str]:
    """ポインタをセグメントに分割し、`~1` と `~0` をアンエスケープする。"""

    return [segment.replace("~1", "/").replace("~0", "~") for segment in pointer.split("/")]
