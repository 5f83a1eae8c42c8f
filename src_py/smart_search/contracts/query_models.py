"""
목적:
- 질의 해석 결과와 텍스트 임베딩 캐시 키 모델을 정의한다.

설명:
- `StructuredQuery`는 원문 질의를 검색어와 참조 자산 ID 목록으로 분해한 결과다.
- `TextEmbeddingKey`는 모델/검색어/언어 조합이 같을 때만 같은 키가 된다.

디자인 패턴:
- DTO(Data Transfer Object) + 값 객체(Value Object).

참조:
- src_py/smart_search/query/parser.py
- src_py/smart_search/embedding/cache.py
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

EmbeddingVector = list[float]


class StructuredQuery(BaseModel):
    """검색어와 참조 자산 ID로 분해된 질의 모델."""

    model_config = ConfigDict(frozen=True)

    search_text: str = Field(default="")
    reference_ids: list[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """검색어와 참조 자산이 모두 없는지 반환한다."""
        return not self.search_text and not self.reference_ids


@dataclass(frozen=True, slots=True)
class TextEmbeddingKey:
    """텍스트 임베딩 캐시 키."""

    model_name: str
    text: str
    language: str | None = None
