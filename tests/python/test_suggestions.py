import pytest

from smart_search.contracts.search_models import SearchSuggestionRequest, SearchSuggestionType
from smart_search.exceptions import ConfigurationError
from smart_search.search.suggestions import SUGGESTION_HANDLERS


def test_every_suggestion_type_has_a_handler() -> None:
    assert set(SUGGESTION_HANDLERS) == set(SearchSuggestionType)


@pytest.mark.asyncio
async def test_country_suggestions_cover_user_and_partners(service, alice) -> None:
    suggestions = await service.get_search_suggestions(
        alice, SearchSuggestionRequest(type=SearchSuggestionType.COUNTRY)
    )

    assert suggestions == ["Ireland", "Korea"]


@pytest.mark.asyncio
async def test_city_suggestions_filter_by_country(service, alice) -> None:
    suggestions = await service.get_search_suggestions(
        alice, SearchSuggestionRequest(type=SearchSuggestionType.CITY, country="Ireland")
    )

    assert suggestions == ["Cork", "Dublin"]


@pytest.mark.asyncio
async def test_include_null_appends_none(service, alice) -> None:
    suggestions = await service.get_search_suggestions(
        alice, SearchSuggestionRequest(type=SearchSuggestionType.CAMERA_MAKE, include_null=True)
    )

    assert suggestions == [None]


@pytest.mark.asyncio
async def test_suggestions_require_repository(config_provider, partner_directory, encoder, index, alice) -> None:
    from conftest import IdAssetMapper
    from smart_search import EmbeddingCache, SmartSearchService

    service = SmartSearchService(
        config_provider=config_provider,
        partner_directory=partner_directory,
        encoder=encoder,
        embedding_store=index,
        vector_index=index,
        asset_mapper=IdAssetMapper(),
        embedding_cache=EmbeddingCache(),
    )

    with pytest.raises(ConfigurationError, match="suggestion_repository"):
        await service.get_search_suggestions(alice, SearchSuggestionRequest(type=SearchSuggestionType.STATE))
