"""
목적:
- 텍스트 임베딩 결과를 보관하는 크기 제한 LRU 캐시를 제공한다.

설명:
- 프로세스 전체에서 공유되며, 동시 요청의 get/put이 내부 상태를 깨뜨리지 않도록 락으로 보호한다.
- `get`도 사용으로 간주해 최근 사용 순서를 갱신한다.
- 값은 불변 튜플로 저장하고, 조회 시 새 리스트로 반환한다.
- 모델/언어가 바뀌면 키가 달라지므로 이전 항목은 무효화 없이 도달 불가능해질 뿐이다.
- 참조 자산 임베딩은 이미 저장소에 영속화되어 있으므로 이 캐시에 넣지 않는다.

디자인 패턴:
- 캐시(Cache) + 싱글턴 접근자(Singleton Accessor).

참조:
- src_py/smart_search/embedding/resolver.py
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from collections.abc import Sequence
from functools import lru_cache

from smart_search.contracts.query_models import TextEmbeddingKey
from smart_search.exceptions import ConfigurationError

TEXT_EMBEDDING_CACHE_CAPACITY = 100

logger = logging.getLogger(__name__)


class EmbeddingCache:
    """스레드 안전한 LRU 임베딩 캐시."""

    def __init__(self, capacity: int = TEXT_EMBEDDING_CACHE_CAPACITY) -> None:
        if capacity < 1:
            raise ConfigurationError(f"capacity는 1 이상이어야 합니다: {capacity}")

        self._capacity = capacity
        self._entries: OrderedDict[TextEmbeddingKey, tuple[float, ...]] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._capacity

    def get(self, key: TextEmbeddingKey) -> list[float] | None:
        """캐시된 임베딩을 반환한다. 없으면 None."""
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                return None
            self._entries.move_to_end(key)
            return list(value)

    def put(self, key: TextEmbeddingKey, value: Sequence[float]) -> None:
        """임베딩을 저장하고, 용량을 넘으면 가장 오래 사용되지 않은 항목을 제거한다."""
        entry = tuple(float(item) for item in value)
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            elif len(self._entries) >= self._capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("임베딩 캐시 항목 제거: model=%s, language=%s", evicted.model_name, evicted.language)
            self._entries[key] = entry

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


@lru_cache(maxsize=1)
def get_text_embedding_cache() -> EmbeddingCache:
    """프로세스 전역 텍스트 임베딩 캐시를 반환한다."""
    return EmbeddingCache(TEXT_EMBEDDING_CACHE_CAPACITY)
