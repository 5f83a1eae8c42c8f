"""
목적:
- 질의 해석 계층의 공개 심볼을 정의한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/smart_search/query/parser.py
"""

from .parser import parse_query

__all__ = ["parse_query"]
