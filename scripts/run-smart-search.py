"""
목적:
- 루트 `.env`를 읽어 SmartSearchService를 실행하는 드라이버 스크립트를 제공한다.

설명:
- 라이브러리 본체는 환경 파일을 직접 읽지 않는다.
- 자산 픽스처(JSON)를 인메모리 인덱스에 적재하고, 머신러닝 서비스로 검색어를 인코딩해
  스마트 검색 1회를 실행한 뒤 응답을 JSON으로 출력한다.
- 픽스처 항목 형식: {"id", "owner_id", "embedding", "visibility"?, "city"?, ...}

디자인 패턴:
- 드라이버(Driver Script).

참조:
- src_py/smart_search/config/models.py
- src_py/smart_search/search/service.py
- src_py/smart_search/index/memory.py
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any

from smart_search import (
    AuthContext,
    ClipConfig,
    IndexedAsset,
    InMemoryAssetIndex,
    MachineLearningClient,
    MachineLearningClientConfig,
    MachineLearningConfig,
    SmartSearchRequest,
    SmartSearchService,
    StaticConfigProvider,
    SystemConfig,
)
from smart_search.shared.logging import configure_logging

REQUIRED_ENV_KEYS = [
    "ML_URLS",
    "CLIP_MODEL_NAME",
    "SMART_SEARCH_ASSET_FIXTURE",
]


class StaticPartnerDirectory:
    """환경 변수로 받은 파트너 ID를 그대로 반환하는 디렉터리."""

    def __init__(self, partner_ids: list[str]) -> None:
        self._partner_ids = partner_ids

    async def get_partner_ids(self, user_id: str) -> list[str]:
        return [partner_id for partner_id in self._partner_ids if partner_id != user_id]


class JsonAssetMapper:
    """인덱스 자산을 임베딩을 뺀 JSON 사전으로 바꾸는 매퍼."""

    def map_asset(self, asset: IndexedAsset, auth: AuthContext) -> dict[str, Any]:
        payload = asdict(asset)
        payload.pop("embedding")
        return payload


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Smart Search 드라이버")
    parser.add_argument("--query", required=True, help="검색 질의 (예: 'beach similarTo:<asset-id>')")
    parser.add_argument("--user-id", required=True, help="요청 사용자 ID")
    parser.add_argument("--language", default=None, help="검색어 언어 태그 (예: en)")
    parser.add_argument("--page", type=int, default=None, help="페이지 번호 (기본: 1)")
    parser.add_argument("--size", type=int, default=None, help="페이지 크기 (기본: 100)")
    parser.add_argument(
        "--env-file",
        default=".env",
        help="루트 기준 환경 파일 경로 (기본: .env)",
    )
    parser.add_argument("--verbose", action="store_true", help="DEBUG 로그 출력")
    return parser.parse_args()


def load_env_file(path: Path) -> None:
    if not path.exists():
        raise RuntimeError(f"환경 파일이 존재하지 않습니다: {path}")

    for raw_line in path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        os.environ[key] = value


def ensure_required_env() -> None:
    missing = [key for key in REQUIRED_ENV_KEYS if not os.environ.get(key)]
    if missing:
        raise RuntimeError(f"필수 환경 변수가 누락되었습니다: {', '.join(missing)}")


def split_csv_env(key: str) -> list[str]:
    return [token.strip() for token in os.environ.get(key, "").split(",") if token.strip()]


def build_system_config() -> SystemConfig:
    return SystemConfig(
        machine_learning=MachineLearningConfig(
            enabled=parse_bool_env("ML_ENABLED", "true"),
            urls=split_csv_env("ML_URLS"),
            clip=ClipConfig(
                enabled=parse_bool_env("CLIP_ENABLED", "true"),
                model_name=os.environ["CLIP_MODEL_NAME"],
            ),
        )
    )


def parse_bool_env(key: str, default: str) -> bool:
    raw = os.environ.get(key, default).strip().lower()
    if raw in {"1", "true", "yes", "y"}:
        return True
    if raw in {"0", "false", "no", "n"}:
        return False
    raise RuntimeError(f"불리언 환경 변수 형식이 잘못되었습니다: {key}={raw}")


def load_assets(path: Path) -> list[IndexedAsset]:
    if not path.exists():
        raise RuntimeError(f"자산 픽스처가 존재하지 않습니다: {path}")

    raw_assets = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw_assets, list):
        raise RuntimeError("자산 픽스처는 JSON 배열이어야 합니다")

    assets: list[IndexedAsset] = []
    for item in raw_assets:
        taken_at = item.get("taken_at")
        assets.append(
            IndexedAsset(
                **{
                    **item,
                    "embedding": [float(value) for value in item["embedding"]],
                    "taken_at": datetime.fromisoformat(taken_at) if taken_at else None,
                }
            )
        )
    return assets


async def main() -> int:
    args = parse_args()
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)

    repo_root = Path(__file__).resolve().parents[1]
    load_env_file(repo_root / args.env_file)
    ensure_required_env()

    index = InMemoryAssetIndex(load_assets(repo_root / os.environ["SMART_SEARCH_ASSET_FIXTURE"]))
    ml_client = MachineLearningClient(
        MachineLearningClientConfig(
            timeout_ms=int(os.environ.get("ML_TIMEOUT_MS", "20000")),
            auth_token=os.environ.get("ML_AUTH_TOKEN") or None,
        )
    )
    service = SmartSearchService(
        config_provider=StaticConfigProvider(build_system_config()),
        partner_directory=StaticPartnerDirectory(split_csv_env("SMART_SEARCH_PARTNER_IDS")),
        encoder=ml_client,
        embedding_store=index,
        vector_index=index,
        asset_mapper=JsonAssetMapper(),
        suggestion_repository=index,
    )

    try:
        response = await service.search_smart(
            AuthContext(user_id=args.user_id),
            SmartSearchRequest(query=args.query, language=args.language, page=args.page, size=args.size),
        )
    finally:
        await ml_client.aclose()

    print("[result]", json.dumps(response.model_dump(mode="json"), ensure_ascii=False))
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(asyncio.run(main()))
    except Exception as exc:  # noqa: BLE001
        print(f"[error] {exc}", file=sys.stderr)
        raise SystemExit(1)
