"""
목적:
- 검색 서비스 계층의 공개 진입점을 제공한다.

설명:
- 외부에는 `SmartSearchService`를 기본 진입점으로 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/smart_search/search/service.py
- src_py/smart_search/search/suggestions.py
"""

from .service import SmartSearchService
from .suggestions import SUGGESTION_HANDLERS, lookup_suggestions

__all__ = ["SmartSearchService", "SUGGESTION_HANDLERS", "lookup_suggestions"]
