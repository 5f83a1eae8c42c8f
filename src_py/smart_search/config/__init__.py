"""
목적:
- 설정 모델 계층의 공개 진입점을 제공한다.

설명:
- 라이브러리는 `.env`를 직접 읽지 않고, 외부에서 생성된 설정 객체를 주입받는다.

디자인 패턴:
- 설정 객체(Configuration Object).

참조:
- src_py/smart_search/config/models.py
- src_py/smart_search/config/provider.py
"""

from .models import (
    ClipConfig,
    MachineLearningClientConfig,
    MachineLearningConfig,
    SmartSearchConfig,
    SystemConfig,
)
from .provider import StaticConfigProvider

__all__ = [
    "ClipConfig",
    "MachineLearningConfig",
    "MachineLearningClientConfig",
    "SmartSearchConfig",
    "SystemConfig",
    "StaticConfigProvider",
]
