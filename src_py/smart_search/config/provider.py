"""
목적:
- 고정 시스템 설정을 반환하는 설정 협력자 구현을 제공한다.

설명:
- 실제 서비스에서는 DB/파일 기반 설정 저장소가 이 역할을 맡는다.
- 드라이버 스크립트와 테스트에서 주입용으로 사용한다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/smart_search/contracts/ports.py
"""

from __future__ import annotations

from smart_search.config.models import SystemConfig


class StaticConfigProvider:
    """생성 시 받은 시스템 설정을 그대로 반환하는 설정 협력자."""

    def __init__(self, config: SystemConfig | None = None) -> None:
        self._config = config or SystemConfig()

    async def get_config(self) -> SystemConfig:
        return self._config

    def update(self, config: SystemConfig) -> None:
        """반환할 시스템 설정을 교체한다."""
        self._config = config
