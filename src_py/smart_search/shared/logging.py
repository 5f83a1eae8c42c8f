"""
목적:
- Smart Search 패키지 로거 설정 유틸을 제공한다.

설명:
- 라이브러리 모듈은 `logging.getLogger(__name__)`만 사용하고 핸들러를 설치하지 않는다.
- 드라이버 스크립트 같은 최상위 실행 지점에서 `configure_logging`을 한 번 호출한다.
- `structured=True`이면 한 줄 JSON, 아니면 사람이 읽기 쉬운 형식으로 출력한다.

디자인 패턴:
- 설정 함수(Configuration Function).

참조:
- scripts/run-smart-search.py
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime

PACKAGE_LOGGER_NAME = "smart_search"


class JsonLogFormatter(logging.Formatter):
    """로그 레코드를 한 줄 JSON으로 변환하는 포매터."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def configure_logging(level: int = logging.INFO, structured: bool = False) -> logging.Logger:
    """패키지 로거에 스트림 핸들러를 설치한다. 이미 설치되어 있으면 레벨만 갱신한다."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        if structured:
            handler.setFormatter(JsonLogFormatter())
        else:
            handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        package_logger.addHandler(handler)

    return package_logger
