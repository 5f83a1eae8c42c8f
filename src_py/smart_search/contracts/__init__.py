"""
목적:
- Python 계약 모델 계층의 공개 심볼을 제공한다.

설명:
- 질의/요청/응답 모델과 협력자 프로토콜을 하나의 네임스페이스에서 재노출한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/smart_search/contracts/query_models.py
- src_py/smart_search/contracts/search_models.py
- src_py/smart_search/contracts/response_models.py
- src_py/smart_search/contracts/ports.py
"""

from .ports import (
    AccessControl,
    AssetMapper,
    ConfigProvider,
    EmbeddingStore,
    PartnerDirectory,
    SuggestionRepository,
    TextEncoder,
    VectorIndex,
)
from .query_models import EmbeddingVector, StructuredQuery, TextEmbeddingKey
from .response_models import (
    SearchAlbumResponse,
    SearchAssetResponse,
    SearchFacet,
    SearchResponse,
)
from .search_models import (
    LOCKED_VISIBILITY,
    AssetVisibility,
    AuthContext,
    PageRequest,
    SearchSuggestionRequest,
    SearchSuggestionType,
    SmartSearchRequest,
    VectorSearchPage,
    VectorSearchQuery,
)

__all__ = [
    "EmbeddingVector",
    "StructuredQuery",
    "TextEmbeddingKey",
    "AssetVisibility",
    "LOCKED_VISIBILITY",
    "AuthContext",
    "SmartSearchRequest",
    "PageRequest",
    "VectorSearchQuery",
    "VectorSearchPage",
    "SearchSuggestionType",
    "SearchSuggestionRequest",
    "SearchFacet",
    "SearchAlbumResponse",
    "SearchAssetResponse",
    "SearchResponse",
    "AccessControl",
    "ConfigProvider",
    "PartnerDirectory",
    "TextEncoder",
    "EmbeddingStore",
    "VectorIndex",
    "SuggestionRepository",
    "AssetMapper",
]
