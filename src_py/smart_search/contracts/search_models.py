"""
목적:
- 스마트 검색 요청/인증/페이지/벡터 검색 인터페이스 모델을 정의한다.

설명:
- 요청 DTO의 필터 값은 벡터 인덱스 질의로 그대로 전달된다.
- 페이지/크기는 생략 가능하며, 기본값은 서비스 계층이 채운다.

디자인 패턴:
- DTO(Data Transfer Object).

참조:
- src_py/smart_search/search/service.py
- src_py/smart_search/index/memory.py
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field

AssetVisibility = Literal["archive", "timeline", "hidden", "locked"]

LOCKED_VISIBILITY: AssetVisibility = "locked"


class AuthContext(BaseModel):
    """요청 사용자 인증 컨텍스트 모델."""

    user_id: str = Field(min_length=1)
    has_elevated_permission: bool = Field(default=False)


class SmartSearchRequest(BaseModel):
    """스마트 검색 요청 모델."""

    query: str = Field(default="")
    language: str | None = Field(default=None)
    visibility: AssetVisibility | None = Field(default=None)
    page: int | None = Field(default=None, ge=1)
    size: int | None = Field(default=None, ge=1)
    is_favorite: bool | None = Field(default=None)
    taken_after: datetime | None = Field(default=None)
    taken_before: datetime | None = Field(default=None)
    country: str | None = Field(default=None)
    city: str | None = Field(default=None)


class PageRequest(BaseModel):
    """페이지 번호/크기 모델."""

    page: int = Field(default=1, ge=1)
    size: int = Field(default=100, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


class VectorSearchQuery(BaseModel):
    """벡터 인덱스 최근접 이웃 질의 모델."""

    user_ids: list[str] = Field(min_length=1)
    embedding: list[float] = Field(min_length=1)
    visibility: AssetVisibility | None = Field(default=None)
    is_favorite: bool | None = Field(default=None)
    taken_after: datetime | None = Field(default=None)
    taken_before: datetime | None = Field(default=None)
    country: str | None = Field(default=None)
    city: str | None = Field(default=None)


class VectorSearchPage(BaseModel):
    """벡터 인덱스 페이지 결과 모델."""

    items: list[Any] = Field(default_factory=list)
    has_next_page: bool = Field(default=False)


class SearchSuggestionType(str, Enum):
    """검색 제안 종류."""

    COUNTRY = "country"
    STATE = "state"
    CITY = "city"
    CAMERA_MAKE = "camera-make"
    CAMERA_MODEL = "camera-model"


class SearchSuggestionRequest(BaseModel):
    """검색 제안 요청 모델."""

    type: SearchSuggestionType
    country: str | None = Field(default=None)
    state: str | None = Field(default=None)
    make: str | None = Field(default=None)
    model: str | None = Field(default=None)
    include_null: bool = Field(default=False)
