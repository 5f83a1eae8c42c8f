"""
목적:
- Smart Search 라이브러리의 설정 인터페이스를 정의한다.

설명:
- 머신러닝(CLIP) 설정은 요청마다 설정 협력자에서 읽어오는 시스템 설정이다.
- 페이지 기본값/단일 비행(single-flight) 여부는 서비스 생성 시 주입하는 라이브러리 설정이다.
- 라이브러리는 `.env`를 직접 읽지 않고, 외부에서 생성된 설정 객체를 주입받는다.

디자인 패턴:
- 값 객체(Value Object).

참조:
- scripts/run-smart-search.py
- src_py/smart_search/search/service.py
- src_py/smart_search/ml/client.py
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ClipConfig(BaseModel):
    """CLIP 텍스트 인코더 설정 모델."""

    enabled: bool = Field(default=True)
    model_name: str = Field(default="ViT-B-32__openai", min_length=1)


class MachineLearningConfig(BaseModel):
    """머신러닝 서비스 연결 설정 모델."""

    enabled: bool = Field(default=True)
    urls: list[str] = Field(default_factory=lambda: ["http://localhost:3003"])
    clip: ClipConfig = Field(default_factory=ClipConfig)

    @field_validator("urls")
    @classmethod
    def validate_urls(cls, value: list[str]) -> list[str]:
        urls = [url.strip().rstrip("/") for url in value]
        if any(not url for url in urls):
            raise ValueError("urls에 빈 문자열을 포함할 수 없습니다")
        return urls

    @property
    def smart_search_enabled(self) -> bool:
        """스마트 검색 사용 가능 여부를 반환한다."""
        return self.enabled and self.clip.enabled and bool(self.urls)


class SystemConfig(BaseModel):
    """설정 협력자가 반환하는 시스템 설정 모델."""

    machine_learning: MachineLearningConfig = Field(default_factory=MachineLearningConfig)


class SmartSearchConfig(BaseModel):
    """스마트 검색 서비스 설정 모델."""

    default_page_size: int = Field(default=100, ge=1)
    coalesce_text_encodes: bool = Field(default=True)


class MachineLearningClientConfig(BaseModel):
    """머신러닝 HTTP 클라이언트 설정 모델."""

    timeout_ms: int = Field(default=20_000, ge=1)
    auth_token: str | None = Field(default=None)
