"""
목적:
- 머신러닝 서비스의 CLIP 텍스트 인코딩을 호출하는 HTTP 클라이언트를 제공한다.

설명:
- `<url>/predict`에 multipart 폼(`entries`, `text`)을 전송한다.
- 설정된 URL을 순서대로 시도하고, 첫 번째 성공 응답의 `clip` 임베딩을 반환한다.
- 응답 임베딩은 JSON 배열 또는 벡터 리터럴 문자열(`"[0.1,0.2]"`) 형식을 모두 허용한다.
- 모든 URL이 실패하면 `EncoderUnavailableError`를 발생시킨다. 재시도/백오프는 하지 않는다.

디자인 패턴:
- 어댑터(Adapter).

참조:
- src_py/smart_search/config/models.py
- src_py/smart_search/contracts/ports.py
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from smart_search.config.models import MachineLearningClientConfig
from smart_search.exceptions import EncoderUnavailableError

logger = logging.getLogger(__name__)


class MachineLearningClient:
    """머신러닝 서비스 HTTP 클라이언트."""

    def __init__(
        self,
        config: MachineLearningClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or MachineLearningClientConfig()
        self._client = client or httpx.AsyncClient(timeout=self._config.timeout_ms / 1000.0)

    async def encode_text(
        self,
        urls: Sequence[str],
        text: str,
        *,
        model_name: str,
        language: str | None,
    ) -> list[float]:
        """검색어를 CLIP 텍스트 임베딩으로 변환한다."""
        options: dict[str, Any] = {}
        if language:
            options["language"] = language
        entries = {"clip": {"textual": {"modelName": model_name, "options": options}}}

        payload = await self._predict(urls, entries, text=text)
        if "clip" not in payload:
            raise EncoderUnavailableError("머신러닝 응답에 clip 임베딩이 없습니다")
        return parse_embedding(payload["clip"])

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _predict(self, urls: Sequence[str], entries: dict[str, Any], *, text: str) -> dict[str, Any]:
        if not urls:
            raise EncoderUnavailableError("머신러닝 URL이 설정되지 않았습니다")

        headers: dict[str, str] = {}
        if self._config.auth_token:
            headers["Authorization"] = f"Bearer {self._config.auth_token}"

        form = {
            "entries": (None, json.dumps(entries, ensure_ascii=False)),
            "text": (None, text),
        }
        for url in urls:
            endpoint = f"{url.rstrip('/')}/predict"
            try:
                response = await self._client.post(endpoint, files=form, headers=headers)
            except httpx.HTTPError as exc:
                logger.warning("머신러닝 요청 실패: url=%s, error=%s", url, exc)
                continue

            if response.is_success:
                return response.json()
            logger.warning(
                "머신러닝 요청 실패: url=%s, status=%d, reason=%s",
                url,
                response.status_code,
                response.reason_phrase,
            )

        raise EncoderUnavailableError(
            f"모든 머신러닝 URL 요청이 실패했습니다: entries={json.dumps(entries, ensure_ascii=False)}"
        )


def parse_embedding(raw: object) -> list[float]:
    """JSON 배열 또는 벡터 리터럴 문자열을 float 리스트로 변환한다."""
    value = raw
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as exc:
            raise EncoderUnavailableError(f"임베딩 문자열 파싱 실패: {exc}") from exc

    if not isinstance(value, list) or not value:
        raise EncoderUnavailableError("임베딩은 비어 있지 않은 숫자 배열이어야 합니다")

    try:
        return [float(item) for item in value]
    except (TypeError, ValueError) as exc:
        raise EncoderUnavailableError(f"임베딩 원소가 숫자가 아닙니다: {exc}") from exc
