"""
목적:
- 여러 임베딩을 하나의 검색 벡터로 결합한다.

설명:
- 임베딩이 하나면 그대로 반환하고, 둘 이상이면 원소별 산술 평균을 계산한다.
- 차원이 다른 입력은 리졸버 계약 위반이므로 자르거나 채우지 않고 즉시 실패한다.

디자인 패턴:
- 순수 함수(Pure Function).

참조:
- src_py/smart_search/embedding/resolver.py
- src_py/smart_search/search/service.py
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from smart_search.exceptions import DimensionMismatchError, EmbeddingContractError


def combine_embeddings(embeddings: Sequence[Sequence[float]]) -> list[float]:
    """임베딩 목록을 단일 검색 벡터로 결합한다."""
    if not embeddings:
        raise EmbeddingContractError("결합할 임베딩이 비어 있습니다")

    if len(embeddings) == 1:
        return list(embeddings[0])

    dimensions = {len(embedding) for embedding in embeddings}
    if len(dimensions) != 1:
        raise DimensionMismatchError(
            f"임베딩 차원이 일치하지 않습니다: dimensions={sorted(dimensions)}"
        )

    matrix = np.asarray(embeddings, dtype=np.float64)
    return matrix.mean(axis=0).tolist()
