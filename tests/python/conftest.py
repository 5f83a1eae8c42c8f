from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import Any

import pytest

from smart_search import (
    AuthContext,
    EmbeddingCache,
    IndexedAsset,
    InMemoryAssetIndex,
    SmartSearchConfig,
    SmartSearchService,
    StaticConfigProvider,
)


class FakeEncoder:
    def __init__(self, vectors: dict[str, list[float]] | None = None, gate: asyncio.Event | None = None) -> None:
        self.vectors = vectors or {}
        self.gate = gate
        self.calls: list[dict[str, Any]] = []

    async def encode_text(
        self,
        urls: Sequence[str],
        text: str,
        *,
        model_name: str,
        language: str | None,
    ) -> list[float]:
        self.calls.append({"urls": list(urls), "text": text, "model_name": model_name, "language": language})
        if self.gate is not None:
            await self.gate.wait()
        return list(self.vectors.get(text, [1.0, 0.0]))


class FakePartnerDirectory:
    def __init__(self, partners: dict[str, list[str]] | None = None) -> None:
        self.partners = partners or {}
        self.calls: list[str] = []

    async def get_partner_ids(self, user_id: str) -> list[str]:
        self.calls.append(user_id)
        return list(self.partners.get(user_id, []))


class RecordingIndex(InMemoryAssetIndex):
    def __init__(self, assets) -> None:
        super().__init__(assets)
        self.fetch_calls: list[list[str]] = []
        self.search_calls: list[tuple[Any, Any]] = []

    async def fetch_embeddings(self, asset_ids):
        self.fetch_calls.append(list(asset_ids))
        return await super().fetch_embeddings(asset_ids)

    async def search_by_vector(self, page, query):
        self.search_calls.append((page, query))
        return await super().search_by_vector(page, query)


class IdAssetMapper:
    def map_asset(self, asset: IndexedAsset, auth: AuthContext) -> dict[str, str]:
        return {"id": asset.id, "owner_id": asset.owner_id}


@pytest.fixture
def assets() -> list[IndexedAsset]:
    return [
        IndexedAsset(id="a1", owner_id="alice", embedding=[1.0, 0.0], city="Dublin", country="Ireland"),
        IndexedAsset(id="a2", owner_id="alice", embedding=[0.0, 1.0], city="Cork", country="Ireland"),
        IndexedAsset(id="a3", owner_id="alice", embedding=[0.7, 0.7], visibility="archive"),
        IndexedAsset(id="a4", owner_id="alice", embedding=[0.9, 0.1], visibility="locked"),
        IndexedAsset(id="b1", owner_id="bob", embedding=[0.8, 0.2], city="Seoul", country="Korea"),
        IndexedAsset(id="c1", owner_id="carol", embedding=[1.0, 0.0], city="Paris", country="France"),
    ]


@pytest.fixture
def index(assets: list[IndexedAsset]) -> RecordingIndex:
    return RecordingIndex(assets)


@pytest.fixture
def encoder() -> FakeEncoder:
    return FakeEncoder({"sunset beach": [1.0, 0.0], "forest": [0.0, 1.0]})


@pytest.fixture
def partner_directory() -> FakePartnerDirectory:
    return FakePartnerDirectory({"alice": ["bob"]})


@pytest.fixture
def config_provider() -> StaticConfigProvider:
    return StaticConfigProvider()


@pytest.fixture
def embedding_cache() -> EmbeddingCache:
    return EmbeddingCache(capacity=100)


@pytest.fixture
def service(
    config_provider: StaticConfigProvider,
    partner_directory: FakePartnerDirectory,
    encoder: FakeEncoder,
    index: RecordingIndex,
    embedding_cache: EmbeddingCache,
) -> SmartSearchService:
    return SmartSearchService(
        config_provider=config_provider,
        partner_directory=partner_directory,
        encoder=encoder,
        embedding_store=index,
        vector_index=index,
        asset_mapper=IdAssetMapper(),
        suggestion_repository=index,
        embedding_cache=embedding_cache,
        config=SmartSearchConfig(),
    )


@pytest.fixture
def alice() -> AuthContext:
    return AuthContext(user_id="alice")
