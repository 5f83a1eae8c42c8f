"""
목적:
- 임베딩 캐시/리졸버/결합기 계층의 공개 심볼을 정의한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/smart_search/embedding/cache.py
- src_py/smart_search/embedding/resolver.py
- src_py/smart_search/embedding/combiner.py
"""

from .cache import TEXT_EMBEDDING_CACHE_CAPACITY, EmbeddingCache, get_text_embedding_cache
from .combiner import combine_embeddings
from .resolver import EmbeddingResolver, ModelContext

__all__ = [
    "TEXT_EMBEDDING_CACHE_CAPACITY",
    "EmbeddingCache",
    "get_text_embedding_cache",
    "combine_embeddings",
    "EmbeddingResolver",
    "ModelContext",
]
