"""
목적:
- 사용자 원문 질의를 검색어와 참조 자산 ID로 분해한다.

설명:
- `similarTo:<id>` 토큰(대소문자 무시)을 왼쪽부터 순서대로 수집하고 원문에서 제거한다.
- 남은 텍스트는 끝의 쉼표 하나를 제거하고, 연속 공백을 한 칸으로 줄인 뒤 양끝을 다듬는다.
- 어떤 입력에도 실패하지 않는 순수 함수다.

예시:
- `green st patricks day, green clothing similarTo:<id1> similarTo:<id2>`
  -> search_text=`green st patricks day, green clothing`, reference_ids=[<id1>, <id2>]

디자인 패턴:
- 순수 함수(Pure Function).

참조:
- src_py/smart_search/contracts/query_models.py
- src_py/smart_search/search/service.py
"""

from __future__ import annotations

import re

from smart_search.contracts.query_models import StructuredQuery

_SIMILAR_TO_PATTERN = re.compile(r"similarTo:(\S+)", re.IGNORECASE)
_TRAILING_COMMA_PATTERNS = (
    re.compile(r",\s*\Z"),
    re.compile(r"\s*,\Z"),
)
_WHITESPACE_RUN_PATTERN = re.compile(r"\s{2,}")


def parse_query(raw_query: str) -> StructuredQuery:
    """원문 질의를 `StructuredQuery`로 분해한다."""
    reference_ids: list[str] = []
    search_text = raw_query

    for match in _SIMILAR_TO_PATTERN.finditer(raw_query):
        reference_ids.append(match.group(1))
        search_text = search_text.replace(match.group(0), "", 1)

    for pattern in _TRAILING_COMMA_PATTERNS:
        search_text = pattern.sub("", search_text, count=1)
    search_text = _WHITESPACE_RUN_PATTERN.sub(" ", search_text).strip()

    return StructuredQuery(search_text=search_text, reference_ids=reference_ids)
