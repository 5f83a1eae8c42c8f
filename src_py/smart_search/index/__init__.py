"""
목적:
- 인메모리 자산 인덱스 계층의 공개 진입점을 제공한다.

디자인 패턴:
- 모듈 퍼사드(Module Facade).

참조:
- src_py/smart_search/index/memory.py
"""

from .memory import DEFAULT_VISIBILITIES, IndexedAsset, InMemoryAssetIndex

__all__ = ["DEFAULT_VISIBILITIES", "IndexedAsset", "InMemoryAssetIndex"]
