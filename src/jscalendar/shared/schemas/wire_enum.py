"""列挙値とワイヤ上の文字列タグを相互変換する汎用コーデック。"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from jscalendar.core.errors import UnknownValueError

E = TypeVar("E", bound=Enum)


class WireEnum(str, Enum):
    """値をワイヤタグとして持つ列挙型の基底クラス。

    `auto()` で宣言したメンバーは名前を小文字化したものがタグになる。
    """

    @staticmethod
    def _generate_next_value_(name: str, start: int, count: int, last_values: list[Any]) -> str:
        return name.lower()

    def __str__(self) -> str:
        return self.value

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        codec = codec_for(cls)
        return core_schema.no_info_plain_validator_function(
            codec.decode,
            serialization=core_schema.plain_serializer_function_ser_schema(codec.encode),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "enum": list(codec_for(cls).tags)}


class EnumCodec(Generic[E]):
    """列挙型ごとに一度だけ構築するタグ表。構築後は読み取り専用。"""

    def __init__(self, enum_type: type[E]) -> None:
        self.enum_type = enum_type
        to_tag: dict[E, str] = {}
        from_tag: dict[str, E] = {}
        for member in enum_type:
            tag = member.value if isinstance(member.value, str) else member.name.lower()
            to_tag[member] = tag
            from_tag[tag] = member
        self._to_tag = to_tag
        self._from_tag = from_tag

    @property
    def tags(self) -> tuple[str, ...]:
        return tuple(self._from_tag)

    def decode(self, value: Any) -> E:
        if isinstance(value, self.enum_type):
            return value
        # 別の列挙型のメンバーは値が同じでも受け付けない
        if isinstance(value, Enum) or not isinstance(value, str) or not value:
            raise UnknownValueError(self.enum_type, value)
        try:
            return self._from_tag[value]
        except KeyError:
            raise UnknownValueError(self.enum_type, value) from None

    def encode(self, member: E) -> str:
        return self._to_tag[member]

    # 辞書キーの位置でも表現は同じ
    decode_key = decode
    encode_key = encode


@lru_cache(maxsize=None)
def codec_for(enum_type: type[E]) -> EnumCodec[E]:
    """列挙型に対応するコーデックを返す。"""

    return EnumCodec(enum_type)
