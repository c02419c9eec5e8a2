"""
설정 로드: default.yaml + .env

- default.yaml: 프로젝트 루트 (없으면 빈 설정 → 코드 기본값)
- .env: OPENAI_API_KEY 등 비밀값 (예약, 현재 미사용)
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "default.yaml"

# 서버 기본값 (default.yaml에 없을 때)
DEFAULT_BACKEND_HOST = "127.0.0.1"
DEFAULT_BACKEND_PORT = 8000
DEFAULT_FRONTEND_HOST = "127.0.0.1"
DEFAULT_FRONTEND_PORT = 8001
DEFAULT_REQUEST_TIMEOUT = 30.0


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    load_dotenv(PROJECT_ROOT / ".env")

    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] | None = yaml.safe_load(f)
        return data or {}


def get_section(config: dict, name: str) -> dict[str, Any]:
    """설정 섹션 조회 (없거나 null이면 빈 dict)."""
    section = config.get(name)
    return section if isinstance(section, dict) else {}


def backend_url(config: dict) -> str:
    """
    frontend가 호출할 backend 주소.

    우선순위: SITELOG_BACKEND_URL 환경변수 > frontend.backend_url > backend host/port
    """
    env_url = os.environ.get("SITELOG_BACKEND_URL")
    if env_url:
        return env_url.rstrip("/")

    configured = get_section(config, "frontend").get("backend_url")
    if configured:
        return str(configured).rstrip("/")

    backend = get_section(config, "backend")
    host = backend.get("host", DEFAULT_BACKEND_HOST)
    port = backend.get("port", DEFAULT_BACKEND_PORT)
    return f"http://{host}:{port}"
