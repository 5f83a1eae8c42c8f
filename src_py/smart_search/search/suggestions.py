"""
목적:
- 검색 제안 종류별 조회 전략을 태그 디스패치로 연결한다.

설명:
- 제안 종류(enum)마다 저장소 조회 함수를 하나씩 핸들러 테이블에 등록한다.
- 모듈 로드 시 모든 제안 종류에 핸들러가 있는지 검사하므로, 새 종류를 추가하면
  핸들러 등록 없이는 import 단계에서 실패한다.

디자인 패턴:
- 핸들러 테이블(Handler Table) 디스패치.

참조:
- src_py/smart_search/contracts/search_models.py
- src_py/smart_search/search/service.py
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence

from smart_search.contracts.ports import SuggestionRepository
from smart_search.contracts.search_models import SearchSuggestionRequest, SearchSuggestionType
from smart_search.exceptions import ConfigurationError

SuggestionHandler = Callable[
    [SuggestionRepository, Sequence[str], SearchSuggestionRequest],
    Awaitable[list[str]],
]

SUGGESTION_HANDLERS: dict[SearchSuggestionType, SuggestionHandler] = {
    SearchSuggestionType.COUNTRY: lambda repository, user_ids, _: repository.get_countries(user_ids),
    SearchSuggestionType.STATE: lambda repository, user_ids, request: repository.get_states(user_ids, request),
    SearchSuggestionType.CITY: lambda repository, user_ids, request: repository.get_cities(user_ids, request),
    SearchSuggestionType.CAMERA_MAKE: lambda repository, user_ids, request: repository.get_camera_makes(
        user_ids, request
    ),
    SearchSuggestionType.CAMERA_MODEL: lambda repository, user_ids, request: repository.get_camera_models(
        user_ids, request
    ),
}

_missing = set(SearchSuggestionType) - SUGGESTION_HANDLERS.keys()
if _missing:
    raise ConfigurationError(f"핸들러가 없는 제안 종류가 있습니다: {sorted(item.value for item in _missing)}")


async def lookup_suggestions(
    repository: SuggestionRepository,
    user_ids: Sequence[str],
    request: SearchSuggestionRequest,
) -> list[str | None]:
    """제안 종류에 맞는 핸들러로 제안 목록을 조회한다."""
    handler = SUGGESTION_HANDLERS[request.type]
    return list(await handler(repository, user_ids, request))
