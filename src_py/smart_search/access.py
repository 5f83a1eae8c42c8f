"""
목적:
- 잠금 영역 검색용 상승 권한 검사를 제공한다.

설명:
- 인증 자체는 소비자 애플리케이션의 책임이며, 여기서는 인증 컨텍스트의 권한 플래그만 본다.

디자인 패턴:
- 가드(Guard).

참조:
- src_py/smart_search/search/service.py
"""

from __future__ import annotations

from smart_search.contracts.search_models import AuthContext
from smart_search.exceptions import InsufficientPermissionError


class SessionAccessControl:
    """세션 권한 플래그 기반 접근 제어 협력자."""

    def require_elevated_permission(self, auth: AuthContext) -> None:
        """상승 권한이 없으면 `InsufficientPermissionError`를 발생시킨다."""
        if not auth.has_elevated_permission:
            raise InsufficientPermissionError(f"상승 권한이 필요합니다: user_id={auth.user_id}")
