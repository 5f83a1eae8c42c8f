"""
목적:
- 공통 유틸 공개 심볼을 정의한다.

설명:
- 동시 실행 헬퍼와 로거 설정 함수를 중앙에서 재사용하기 위한 진입점이다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/smart_search/shared/concurrency.py
- src_py/smart_search/shared/logging.py
"""

from .concurrency import cancel_pending, gather_or_cancel
from .logging import JsonLogFormatter, configure_logging

__all__ = ["cancel_pending", "gather_or_cancel", "JsonLogFormatter", "configure_logging"]
