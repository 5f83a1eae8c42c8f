"""
목적:
- 벡터 인덱스/임베딩 저장소/검색 제안 저장소 계약의 인메모리 구현을 제공한다.

설명:
- 코사인 거리 오름차순(동률은 자산 ID 순)으로 최근접 이웃을 정렬한다.
- 소유자 범위(user_ids)와 가시성으로 먼저 거르며, 가시성을 지정하지 않으면 archive/timeline만 본다.
- 페이지는 `size + 1`개를 미리 읽어 다음 페이지 존재 여부를 판단한다.
- 드라이버 스크립트와 테스트용이며, 실제 서비스에서는 pgvector 등 외부 인덱스가 이 역할을 맡는다.

디자인 패턴:
- 저장소 패턴(Repository Pattern).

참조:
- src_py/smart_search/contracts/ports.py
- scripts/run-smart-search.py
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from smart_search.contracts.search_models import (
    AssetVisibility,
    PageRequest,
    SearchSuggestionRequest,
    VectorSearchPage,
    VectorSearchQuery,
)
from smart_search.exceptions import DimensionMismatchError

DEFAULT_VISIBILITIES: frozenset[str] = frozenset({"archive", "timeline"})


@dataclass(slots=True)
class IndexedAsset:
    """인덱스에 저장된 단일 자산 모델."""

    id: str
    owner_id: str
    embedding: list[float]
    visibility: AssetVisibility = "timeline"
    is_favorite: bool = False
    taken_at: datetime | None = None
    country: str | None = None
    state: str | None = None
    city: str | None = None
    make: str | None = None
    model: str | None = None


class InMemoryAssetIndex:
    """자산 임베딩 인메모리 인덱스."""

    def __init__(self, assets: Iterable[IndexedAsset] = ()) -> None:
        self._assets: dict[str, IndexedAsset] = {}
        for asset in assets:
            self.add(asset)

    def add(self, asset: IndexedAsset) -> None:
        """자산을 추가하거나 같은 ID의 자산을 교체한다."""
        self._assets[asset.id] = asset

    def __len__(self) -> int:
        return len(self._assets)

    async def fetch_embeddings(self, asset_ids: Sequence[str]) -> list[list[float]]:
        """요청 순서대로 저장된 임베딩을 반환한다. 없는 ID는 건너뛴다."""
        return [list(self._assets[asset_id].embedding) for asset_id in asset_ids if asset_id in self._assets]

    async def search_by_vector(self, page: PageRequest, query: VectorSearchQuery) -> VectorSearchPage:
        """코사인 거리 기준 최근접 자산 한 페이지를 반환한다."""
        candidates = [asset for asset in self._assets.values() if _matches(asset, query)]
        if not candidates:
            return VectorSearchPage(items=[], has_next_page=False)

        distances = _cosine_distances(query.embedding, [asset.embedding for asset in candidates])
        ranked = sorted(zip(distances.tolist(), candidates), key=lambda pair: (pair[0], pair[1].id))

        window = ranked[page.offset : page.offset + page.size + 1]
        has_next_page = len(window) > page.size
        return VectorSearchPage(
            items=[asset for _, asset in window[: page.size]],
            has_next_page=has_next_page,
        )

    async def get_countries(self, user_ids: Sequence[str]) -> list[str]:
        return self._distinct(user_ids, lambda asset: asset.country)

    async def get_states(self, user_ids: Sequence[str], request: SearchSuggestionRequest) -> list[str]:
        return self._distinct(
            user_ids,
            lambda asset: asset.state,
            lambda asset: request.country is None or asset.country == request.country,
        )

    async def get_cities(self, user_ids: Sequence[str], request: SearchSuggestionRequest) -> list[str]:
        return self._distinct(
            user_ids,
            lambda asset: asset.city,
            lambda asset: (request.country is None or asset.country == request.country)
            and (request.state is None or asset.state == request.state),
        )

    async def get_camera_makes(self, user_ids: Sequence[str], request: SearchSuggestionRequest) -> list[str]:
        return self._distinct(
            user_ids,
            lambda asset: asset.make,
            lambda asset: request.model is None or asset.model == request.model,
        )

    async def get_camera_models(self, user_ids: Sequence[str], request: SearchSuggestionRequest) -> list[str]:
        return self._distinct(
            user_ids,
            lambda asset: asset.model,
            lambda asset: request.make is None or asset.make == request.make,
        )

    def _distinct(
        self,
        user_ids: Sequence[str],
        field: Callable[[IndexedAsset], str | None],
        predicate: Callable[[IndexedAsset], bool] | None = None,
    ) -> list[str]:
        owners = set(user_ids)
        values = {
            value
            for asset in self._assets.values()
            if asset.owner_id in owners
            and (predicate is None or predicate(asset))
            and (value := field(asset))
        }
        return sorted(values)


def _matches(asset: IndexedAsset, query: VectorSearchQuery) -> bool:
    if asset.owner_id not in query.user_ids:
        return False

    if query.visibility is None:
        if asset.visibility not in DEFAULT_VISIBILITIES:
            return False
    elif asset.visibility != query.visibility:
        return False

    if query.is_favorite is not None and asset.is_favorite != query.is_favorite:
        return False
    if query.taken_after is not None and (asset.taken_at is None or asset.taken_at < query.taken_after):
        return False
    if query.taken_before is not None and (asset.taken_at is None or asset.taken_at > query.taken_before):
        return False
    if query.country is not None and asset.country != query.country:
        return False
    if query.city is not None and asset.city != query.city:
        return False
    return True


def _cosine_distances(query: Sequence[float], embeddings: Sequence[Sequence[float]]) -> np.ndarray:
    dimensions = {len(embedding) for embedding in embeddings}
    if dimensions != {len(query)}:
        raise DimensionMismatchError(
            f"질의 벡터와 인덱스 임베딩 차원이 다릅니다: query={len(query)}, index={sorted(dimensions)}"
        )

    matrix = np.asarray(embeddings, dtype=np.float64)
    vector = np.asarray(query, dtype=np.float64)
    norms = np.linalg.norm(matrix, axis=1) * np.linalg.norm(vector)
    dots = matrix @ vector
    similarities = np.divide(dots, norms, out=np.zeros_like(dots), where=norms > 0)
    return 1.0 - similarities
