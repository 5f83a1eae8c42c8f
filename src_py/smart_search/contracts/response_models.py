"""
목적:
- 검색 응답 봉투(envelope) 모델을 정의한다.

설명:
- 스마트 검색은 자산 유사도 질의만 처리하므로 앨범 facet은 항상 빈 값이다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/smart_search/search/service.py
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SearchFacet(BaseModel):
    """검색 facet 모델."""

    field_name: str = Field(min_length=1)
    counts: list[dict[str, Any]] = Field(default_factory=list)


class SearchAlbumResponse(BaseModel):
    """앨범 검색 결과 모델."""

    total: int = Field(default=0, ge=0)
    count: int = Field(default=0, ge=0)
    items: list[Any] = Field(default_factory=list)
    facets: list[SearchFacet] = Field(default_factory=list)


class SearchAssetResponse(BaseModel):
    """자산 검색 결과 모델."""

    total: int = Field(ge=0)
    count: int = Field(ge=0)
    items: list[Any] = Field(default_factory=list)
    facets: list[SearchFacet] = Field(default_factory=list)
    next_page: str | None = Field(default=None)


class SearchResponse(BaseModel):
    """검색 응답 모델."""

    albums: SearchAlbumResponse = Field(default_factory=SearchAlbumResponse)
    assets: SearchAssetResponse
