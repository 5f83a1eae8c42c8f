"""
목적:
- 분해된 질의를 결합 대상 임베딩 목록으로 변환한다.

설명:
- 참조 자산 ID는 임베딩 저장소에 한 번의 배치 호출로 조회한다(캐시 미사용).
- 검색어는 (모델, 검색어, 언어) 키로 캐시를 먼저 보고, 없으면 인코더를 호출한 뒤 저장한다.
- 두 경로는 서로 독립이므로 동시에 실행하며, 결과는 참조 임베딩이 텍스트 임베딩보다 앞선다.
- `coalesce=True`이면 같은 키의 동시 캐시 미스가 인코더 호출 하나를 공유한다.
  공유 호출은 마지막 대기자가 취소될 때만 함께 취소된다.

디자인 패턴:
- 서비스 레이어(Service Layer) + 단일 비행(Single-flight).

참조:
- src_py/smart_search/embedding/cache.py
- src_py/smart_search/embedding/combiner.py
- src_py/smart_search/search/service.py
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass

from smart_search.contracts.query_models import EmbeddingVector, StructuredQuery, TextEmbeddingKey
from smart_search.embedding.cache import EmbeddingCache
from smart_search.exceptions import QueryNotUnderstoodError
from smart_search.shared.concurrency import gather_or_cancel

logger = logging.getLogger(__name__)

EncodeTextFn = Callable[[str], Awaitable[EmbeddingVector]]
FetchEmbeddingsFn = Callable[[Sequence[str]], Awaitable[list[EmbeddingVector]]]


@dataclass(slots=True)
class ModelContext:
    """요청 단위 모델 정보와 인코더/저장소 호출 함수."""

    model_name: str
    language: str | None
    encode_text: EncodeTextFn
    fetch_embeddings: FetchEmbeddingsFn


@dataclass(slots=True)
class _InflightEncode:
    task: asyncio.Task[EmbeddingVector]
    waiters: int = 0


class EmbeddingResolver:
    """질의 구성요소별 임베딩을 조회/계산하는 리졸버."""

    def __init__(self, cache: EmbeddingCache, *, coalesce: bool = True) -> None:
        self._cache = cache
        self._coalesce = coalesce
        self._inflight: dict[TextEmbeddingKey, _InflightEncode] = {}

    @property
    def cache(self) -> EmbeddingCache:
        return self._cache

    async def resolve(self, query: StructuredQuery, context: ModelContext) -> list[EmbeddingVector]:
        """참조 임베딩(반환 순서 유지) 뒤에 텍스트 임베딩을 붙인 목록을 반환한다."""
        if query.is_empty:
            raise QueryNotUnderstoodError("검색어를 해석할 수 없습니다")

        pending: list[Awaitable[list[EmbeddingVector]]] = []
        if query.reference_ids:
            pending.append(self._fetch_references(query.reference_ids, context))
        if query.search_text:
            pending.append(self._resolve_text_as_list(query.search_text, context))

        embeddings: list[EmbeddingVector] = []
        for resolved in await gather_or_cancel(*pending):
            embeddings.extend(resolved)

        if not embeddings:
            raise QueryNotUnderstoodError(
                f"참조 자산의 임베딩을 찾을 수 없습니다: reference_ids={query.reference_ids}"
            )
        return embeddings

    async def resolve_text(self, text: str, context: ModelContext) -> EmbeddingVector:
        """검색어 임베딩을 캐시 또는 인코더에서 가져온다."""
        key = TextEmbeddingKey(model_name=context.model_name, text=text, language=context.language)
        cached = self._cache.get(key)
        if cached is not None:
            logger.debug("텍스트 임베딩 캐시 적중: model=%s, language=%s", key.model_name, key.language)
            return cached

        logger.debug("텍스트 임베딩 캐시 미스: model=%s, language=%s", key.model_name, key.language)
        if not self._coalesce:
            return await self._encode_and_store(key, context)
        return await self._join_inflight(key, context)

    async def _fetch_references(
        self,
        reference_ids: Sequence[str],
        context: ModelContext,
    ) -> list[EmbeddingVector]:
        embeddings = await context.fetch_embeddings(list(reference_ids))
        if len(embeddings) != len(reference_ids):
            logger.warning(
                "일부 참조 자산 임베딩을 찾지 못했습니다: requested=%d, found=%d",
                len(reference_ids),
                len(embeddings),
            )
        return [list(embedding) for embedding in embeddings]

    async def _resolve_text_as_list(self, text: str, context: ModelContext) -> list[EmbeddingVector]:
        return [await self.resolve_text(text, context)]

    async def _encode_and_store(self, key: TextEmbeddingKey, context: ModelContext) -> EmbeddingVector:
        embedding = list(await context.encode_text(key.text))
        self._cache.put(key, embedding)
        return embedding

    async def _join_inflight(self, key: TextEmbeddingKey, context: ModelContext) -> EmbeddingVector:
        loop = asyncio.get_running_loop()
        flight = self._inflight.get(key)
        if flight is None or flight.task.get_loop() is not loop or flight.task.cancelling():
            task = loop.create_task(self._encode_and_store(key, context))
            flight = _InflightEncode(task=task)
            self._inflight[key] = flight
            task.add_done_callback(lambda done: self._forget(key, done))

        flight.waiters += 1
        try:
            embedding = await asyncio.shield(flight.task)
        finally:
            flight.waiters -= 1
            if flight.waiters == 0 and not flight.task.done():
                # 취소가 예약된 작업에 새 요청이 합류하지 않도록 먼저 분리한다.
                if self._inflight.get(key) is flight:
                    del self._inflight[key]
                flight.task.cancel()
        return list(embedding)

    def _forget(self, key: TextEmbeddingKey, task: asyncio.Task[EmbeddingVector]) -> None:
        flight = self._inflight.get(key)
        if flight is not None and flight.task is task:
            del self._inflight[key]
        if not task.cancelled():
            # 대기자가 모두 떠난 뒤 끝난 작업의 예외를 회수한다.
            task.exception()
