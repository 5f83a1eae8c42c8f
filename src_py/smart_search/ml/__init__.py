"""
목적:
- 머신러닝 서비스 어댑터 계층의 공개 진입점을 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/smart_search/ml/client.py
"""

from .client import MachineLearningClient, parse_embedding

__all__ = ["MachineLearningClient", "parse_embedding"]
