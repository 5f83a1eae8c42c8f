"""
목적:
- Smart Search Python 계층의 예외 타입을 표준화한다.

설명:
- 권한/기능 비활성/질의 해석 실패/임베딩 계약 위반을 명시적으로 구분해
  라이브러리 소비자가 HTTP 응답 등 처리 전략을 선택할 수 있게 한다.
- `http_status`는 소비자 애플리케이션이 참고할 수 있는 상태 코드 힌트다.

디자인 패턴:
- 계층형 예외(Hierarchical Exception).

참조:
- src_py/smart_search/search/service.py
- src_py/smart_search/embedding/resolver.py
- src_py/smart_search/embedding/combiner.py
"""


class SmartSearchError(Exception):
    """Smart Search 공통 베이스 예외."""

    http_status = 500


class ConfigurationError(SmartSearchError):
    """설정값이 유효하지 않을 때 발생한다."""


class InsufficientPermissionError(SmartSearchError):
    """잠금 영역 검색에 상승 권한이 없을 때 발생한다."""

    http_status = 403


class FeatureDisabledError(SmartSearchError):
    """스마트 검색 기능이 비활성화되어 있을 때 발생한다."""

    http_status = 400


class QueryNotUnderstoodError(SmartSearchError):
    """질의에서 검색어와 참조 자산을 모두 찾지 못했을 때 발생한다."""

    http_status = 400


class EmbeddingContractError(SmartSearchError):
    """리졸버와 결합기 사이의 임베딩 계약이 깨졌을 때 발생한다."""


class DimensionMismatchError(EmbeddingContractError):
    """결합 대상 임베딩의 차원이 서로 다를 때 발생한다."""


class EncoderUnavailableError(SmartSearchError):
    """모든 머신러닝 엔드포인트 호출이 실패했을 때 발생한다."""

    http_status = 502
