import threading

import pytest

from smart_search.contracts.query_models import TextEmbeddingKey
from smart_search.embedding.cache import (
    TEXT_EMBEDDING_CACHE_CAPACITY,
    EmbeddingCache,
    get_text_embedding_cache,
)
from smart_search.exceptions import ConfigurationError


def _key(text: str, model_name: str = "clip", language: str | None = "en") -> TextEmbeddingKey:
    return TextEmbeddingKey(model_name=model_name, text=text, language=language)


def test_cache_returns_stored_vector_by_value() -> None:
    cache = EmbeddingCache(capacity=2)
    cache.put(_key("beach"), [0.1, 0.2])

    first = cache.get(_key("beach"))
    first.append(9.9)

    assert cache.get(_key("beach")) == [0.1, 0.2]


def test_cache_miss_returns_none() -> None:
    assert EmbeddingCache(capacity=1).get(_key("beach")) is None


def test_cache_keys_differ_by_model_and_language() -> None:
    cache = EmbeddingCache()
    cache.put(_key("beach", language="en"), [1.0])

    assert cache.get(_key("beach", language="de")) is None
    assert cache.get(_key("beach", model_name="other")) is None
    assert cache.get(_key("beach", language=None)) is None


def test_cache_evicts_least_recently_used_after_capacity() -> None:
    cache = EmbeddingCache()
    for index in range(TEXT_EMBEDDING_CACHE_CAPACITY + 1):
        cache.put(_key(f"text-{index}"), [float(index)])

    assert len(cache) == TEXT_EMBEDDING_CACHE_CAPACITY
    assert cache.get(_key("text-0")) is None
    assert cache.get(_key(f"text-{TEXT_EMBEDDING_CACHE_CAPACITY}")) == [float(TEXT_EMBEDDING_CACHE_CAPACITY)]


def test_cache_get_refreshes_recency() -> None:
    cache = EmbeddingCache(capacity=2)
    cache.put(_key("a"), [1.0])
    cache.put(_key("b"), [2.0])

    assert cache.get(_key("a")) == [1.0]
    cache.put(_key("c"), [3.0])

    assert cache.get(_key("a")) == [1.0]
    assert cache.get(_key("b")) is None


def test_cache_put_existing_key_replaces_without_eviction() -> None:
    cache = EmbeddingCache(capacity=2)
    cache.put(_key("a"), [1.0])
    cache.put(_key("b"), [2.0])
    cache.put(_key("a"), [3.0])

    assert len(cache) == 2
    assert cache.get(_key("a")) == [3.0]
    assert cache.get(_key("b")) == [2.0]


def test_cache_rejects_non_positive_capacity() -> None:
    with pytest.raises(ConfigurationError, match="capacity"):
        EmbeddingCache(capacity=0)


def test_cache_survives_concurrent_threads() -> None:
    cache = EmbeddingCache(capacity=50)

    def worker(offset: int) -> None:
        for index in range(200):
            key = _key(f"text-{(offset + index) % 120}")
            cache.put(key, [float(index)])
            cache.get(key)

    threads = [threading.Thread(target=worker, args=(offset,)) for offset in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(cache) == 50


def test_shared_text_cache_is_process_wide() -> None:
    assert get_text_embedding_cache() is get_text_embedding_cache()
    assert get_text_embedding_cache().capacity == TEXT_EMBEDDING_CACHE_CAPACITY
