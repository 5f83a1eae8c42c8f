"""
목적:
- Smart Search Python 패키지의 공개 진입점을 제공한다.

설명:
- 라이브러리 핵심 클래스는 `SmartSearchService`다.
- 질의 분해/임베딩 캐시/리졸버/결합기, 설정/인터페이스/예외, 머신러닝 어댑터를 함께 노출한다.

디자인 패턴:
- 퍼사드(Facade).

참조:
- src_py/smart_search/search/service.py
- src_py/smart_search/embedding/resolver.py
"""

from .access import SessionAccessControl
from .config.models import (
    ClipConfig,
    MachineLearningClientConfig,
    MachineLearningConfig,
    SmartSearchConfig,
    SystemConfig,
)
from .config.provider import StaticConfigProvider
from .contracts.query_models import StructuredQuery, TextEmbeddingKey
from .contracts.response_models import SearchAlbumResponse, SearchAssetResponse, SearchResponse
from .contracts.search_models import (
    AuthContext,
    PageRequest,
    SearchSuggestionRequest,
    SearchSuggestionType,
    SmartSearchRequest,
    VectorSearchPage,
    VectorSearchQuery,
)
from .embedding.cache import EmbeddingCache, get_text_embedding_cache
from .embedding.combiner import combine_embeddings
from .embedding.resolver import EmbeddingResolver, ModelContext
from .exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    EmbeddingContractError,
    EncoderUnavailableError,
    FeatureDisabledError,
    InsufficientPermissionError,
    QueryNotUnderstoodError,
    SmartSearchError,
)
from .index.memory import IndexedAsset, InMemoryAssetIndex
from .ml.client import MachineLearningClient
from .query.parser import parse_query
from .search.service import SmartSearchService
from .version import __version__

__all__ = [
    "__version__",
    "SmartSearchService",
    "parse_query",
    "EmbeddingCache",
    "get_text_embedding_cache",
    "EmbeddingResolver",
    "ModelContext",
    "combine_embeddings",
    "MachineLearningClient",
    "InMemoryAssetIndex",
    "IndexedAsset",
    "SessionAccessControl",
    "StaticConfigProvider",
    "ClipConfig",
    "MachineLearningConfig",
    "MachineLearningClientConfig",
    "SmartSearchConfig",
    "SystemConfig",
    "StructuredQuery",
    "TextEmbeddingKey",
    "AuthContext",
    "SmartSearchRequest",
    "PageRequest",
    "VectorSearchQuery",
    "VectorSearchPage",
    "SearchSuggestionType",
    "SearchSuggestionRequest",
    "SearchResponse",
    "SearchAssetResponse",
    "SearchAlbumResponse",
    "SmartSearchError",
    "ConfigurationError",
    "InsufficientPermissionError",
    "FeatureDisabledError",
    "QueryNotUnderstoodError",
    "EmbeddingContractError",
    "DimensionMismatchError",
    "EncoderUnavailableError",
]
