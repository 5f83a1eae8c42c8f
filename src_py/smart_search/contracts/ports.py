"""
목적:
- 스마트 검색 서비스가 의존하는 외부 협력자 계약을 정의한다.

설명:
- 접근 제어/설정/파트너 디렉터리/인코더/임베딩 저장소/벡터 인덱스/응답 매핑은
  모두 이 패키지 바깥의 책임이며, 서비스는 아래 프로토콜에만 의존한다.
- 상승 권한 검사를 제외한 모든 호출은 비동기다.

디자인 패턴:
- 포트(Port) 인터페이스.

참조:
- src_py/smart_search/search/service.py
- src_py/smart_search/ml/client.py
- src_py/smart_search/index/memory.py
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from smart_search.config.models import SystemConfig
from smart_search.contracts.search_models import (
    AuthContext,
    PageRequest,
    SearchSuggestionRequest,
    VectorSearchPage,
    VectorSearchQuery,
)


class AccessControl(Protocol):
    def require_elevated_permission(self, auth: AuthContext) -> None: ...


class ConfigProvider(Protocol):
    async def get_config(self) -> SystemConfig: ...


class PartnerDirectory(Protocol):
    async def get_partner_ids(self, user_id: str) -> list[str]:
        """타임라인 공유를 켠 파트너의 사용자 ID 목록을 반환한다."""
        ...


class TextEncoder(Protocol):
    async def encode_text(
        self,
        urls: Sequence[str],
        text: str,
        *,
        model_name: str,
        language: str | None,
    ) -> list[float]: ...


class EmbeddingStore(Protocol):
    async def fetch_embeddings(self, asset_ids: Sequence[str]) -> list[list[float]]:
        """저장된 자산 임베딩을 한 번의 배치 호출로 조회한다."""
        ...


class VectorIndex(Protocol):
    async def search_by_vector(
        self,
        page: PageRequest,
        query: VectorSearchQuery,
    ) -> VectorSearchPage: ...


class SuggestionRepository(Protocol):
    async def get_countries(self, user_ids: Sequence[str]) -> list[str]: ...

    async def get_states(self, user_ids: Sequence[str], request: SearchSuggestionRequest) -> list[str]: ...

    async def get_cities(self, user_ids: Sequence[str], request: SearchSuggestionRequest) -> list[str]: ...

    async def get_camera_makes(self, user_ids: Sequence[str], request: SearchSuggestionRequest) -> list[str]: ...

    async def get_camera_models(self, user_ids: Sequence[str], request: SearchSuggestionRequest) -> list[str]: ...


class AssetMapper(Protocol):
    def map_asset(self, asset: Any, auth: AuthContext) -> Any: ...
