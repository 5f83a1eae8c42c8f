"""
목적:
- 혼합 질의(검색어 + `similarTo:<id>`) 기반 스마트 검색 서비스를 제공한다.

설명:
- 처리 순서: 잠금 가시성 권한 검사 -> 기능 활성 확인 -> 검색 범위 계산(동시 실행)
  -> 질의 분해 -> 임베딩 조회 -> 임베딩 결합 -> 페이지 단위 최근접 이웃 검색 -> 응답 매핑.
- 검색 범위는 요청 사용자와 타임라인 공유를 켠 파트너이며, 요청마다 새로 계산한다.
- 어느 단계든 실패하면 진행 중인 하위 작업을 취소하고 부분 결과 없이 예외를 전파한다.
- 외부 협력자 오류는 변환하거나 재시도하지 않는다.

디자인 패턴:
- 서비스 레이어(Service Layer) + 조정자(Coordinator).

참조:
- src_py/smart_search/query/parser.py
- src_py/smart_search/embedding/resolver.py
- src_py/smart_search/embedding/combiner.py
- src_py/smart_search/search/suggestions.py
- src_py/smart_search/contracts/ports.py
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

from smart_search.access import SessionAccessControl
from smart_search.config.models import MachineLearningConfig, SmartSearchConfig
from smart_search.contracts.ports import (
    AccessControl,
    AssetMapper,
    ConfigProvider,
    EmbeddingStore,
    PartnerDirectory,
    SuggestionRepository,
    TextEncoder,
    VectorIndex,
)
from smart_search.contracts.response_models import SearchAssetResponse, SearchResponse
from smart_search.contracts.search_models import (
    LOCKED_VISIBILITY,
    AuthContext,
    PageRequest,
    SearchSuggestionRequest,
    SmartSearchRequest,
    VectorSearchQuery,
)
from smart_search.embedding.cache import EmbeddingCache, get_text_embedding_cache
from smart_search.embedding.combiner import combine_embeddings
from smart_search.embedding.resolver import EmbeddingResolver, ModelContext
from smart_search.exceptions import ConfigurationError, FeatureDisabledError, QueryNotUnderstoodError
from smart_search.query.parser import parse_query
from smart_search.search.suggestions import lookup_suggestions
from smart_search.shared.concurrency import cancel_pending

logger = logging.getLogger(__name__)


class SmartSearchService:
    """임베딩 기반 스마트 검색 서비스."""

    def __init__(
        self,
        *,
        config_provider: ConfigProvider,
        partner_directory: PartnerDirectory,
        encoder: TextEncoder,
        embedding_store: EmbeddingStore,
        vector_index: VectorIndex,
        asset_mapper: AssetMapper,
        suggestion_repository: SuggestionRepository | None = None,
        access_control: AccessControl | None = None,
        embedding_cache: EmbeddingCache | None = None,
        config: SmartSearchConfig | None = None,
    ) -> None:
        self._config = config if config is not None else SmartSearchConfig()
        self._config_provider = config_provider
        self._partner_directory = partner_directory
        self._encoder = encoder
        self._embedding_store = embedding_store
        self._vector_index = vector_index
        self._asset_mapper = asset_mapper
        self._suggestion_repository = suggestion_repository
        self._access_control = access_control if access_control is not None else SessionAccessControl()
        self._resolver = EmbeddingResolver(
            embedding_cache if embedding_cache is not None else get_text_embedding_cache(),
            coalesce=self._config.coalesce_text_encodes,
        )

    async def search_smart(self, auth: AuthContext, request: SmartSearchRequest) -> SearchResponse:
        """혼합 질의를 하나의 벡터로 바꿔 페이지 단위 유사도 검색을 수행한다."""
        if request.visibility == LOCKED_VISIBILITY:
            self._access_control.require_elevated_permission(auth)

        system_config = await self._config_provider.get_config()
        machine_learning = system_config.machine_learning
        if not machine_learning.smart_search_enabled:
            raise FeatureDisabledError("스마트 검색이 활성화되어 있지 않습니다")

        page = self._page_request(request)
        scope_task = asyncio.ensure_future(self._get_user_ids_to_search(auth))
        try:
            breakdown = parse_query(request.query)
            if breakdown.is_empty:
                raise QueryNotUnderstoodError("검색어를 해석할 수 없습니다")

            context = self._model_context(machine_learning, request.language)
            embeddings = await self._resolver.resolve(breakdown, context)
            logger.debug(
                "스마트 검색 질의 분해: search_text=%r, reference_ids=%s, embeddings=%d",
                breakdown.search_text,
                breakdown.reference_ids,
                len(embeddings),
            )
            embedding = combine_embeddings(embeddings)
            user_ids = await scope_task
        except BaseException:
            await cancel_pending(scope_task)
            raise

        result = await self._vector_index.search_by_vector(
            page,
            VectorSearchQuery(
                user_ids=user_ids,
                embedding=embedding,
                visibility=request.visibility,
                is_favorite=request.is_favorite,
                taken_after=request.taken_after,
                taken_before=request.taken_before,
                country=request.country,
                city=request.city,
            ),
        )
        logger.info(
            "스마트 검색 완료: user_id=%s, page=%d, size=%d, items=%d, has_next_page=%s",
            auth.user_id,
            page.page,
            page.size,
            len(result.items),
            result.has_next_page,
        )

        next_page = str(page.page + 1) if result.has_next_page else None
        return self._map_response(result.items, next_page, auth)

    async def get_search_suggestions(
        self,
        auth: AuthContext,
        request: SearchSuggestionRequest,
    ) -> list[str | None]:
        """검색 범위 안의 제안 값을 조회한다."""
        if self._suggestion_repository is None:
            raise ConfigurationError("suggestion_repository가 주입되지 않았습니다")

        user_ids = await self._get_user_ids_to_search(auth)
        suggestions = await lookup_suggestions(self._suggestion_repository, user_ids, request)
        if request.include_null:
            suggestions.append(None)
        return suggestions

    async def _get_user_ids_to_search(self, auth: AuthContext) -> list[str]:
        partner_ids = await self._partner_directory.get_partner_ids(auth.user_id)
        return list(dict.fromkeys([auth.user_id, *partner_ids]))

    def _page_request(self, request: SmartSearchRequest) -> PageRequest:
        return PageRequest(page=request.page or 1, size=request.size or self._config.default_page_size)

    def _model_context(self, machine_learning: MachineLearningConfig, language: str | None) -> ModelContext:
        model_name = machine_learning.clip.model_name

        async def encode_text(text: str) -> list[float]:
            return await self._encoder.encode_text(
                machine_learning.urls,
                text,
                model_name=model_name,
                language=language,
            )

        return ModelContext(
            model_name=model_name,
            language=language,
            encode_text=encode_text,
            fetch_embeddings=self._embedding_store.fetch_embeddings,
        )

    def _map_response(self, assets: Sequence[Any], next_page: str | None, auth: AuthContext) -> SearchResponse:
        items = [self._asset_mapper.map_asset(asset, auth) for asset in assets]
        return SearchResponse(
            assets=SearchAssetResponse(
                total=len(items),
                count=len(items),
                items=items,
                facets=[],
                next_page=next_page,
            ),
        )
