"""
Pytest fixtures for the daily log tests.

테스트 구성:
- 정상 케이스 (라벨 3종 모두 매칭), 빈 입력 케이스 등 분리
- backend 호출은 httpx MockTransport / ASGITransport로 대체 (네트워크 없음)
"""

from datetime import date
from pathlib import Path

import httpx
import pytest
import yaml

from src.app.providers.keyword import KeywordSummarizer
from src.domain.schemas import LogDraft

FIXED_DATE = date(2024, 1, 15)

# =============================================================================
# Path / Config Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


@pytest.fixture
def default_config_path(project_root: Path) -> Path:
    """default.yaml 경로."""
    return project_root / "default.yaml"


@pytest.fixture
def default_config(default_config_path: Path) -> dict:
    """기본 설정 로드."""
    with open(default_config_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


@pytest.fixture
def test_config() -> dict:
    """테스트용 설정."""
    return {
        "frontend": {
            "backend_url": "http://backend.test",
            "request_timeout": 5.0,
        },
        "summarize": {
            "provider": "keyword",
            "max_chars": 200,
        },
    }


# =============================================================================
# Domain Fixtures
# =============================================================================


@pytest.fixture
def fixed_today():
    """고정 날짜 공급 함수 (2024-01-15)."""
    return lambda: FIXED_DATE


@pytest.fixture
def summarizer(fixed_today) -> KeywordSummarizer:
    """날짜 고정 KeywordSummarizer."""
    return KeywordSummarizer(today=fixed_today)


@pytest.fixture
def sample_notes() -> str:
    """라벨 3종 모두 매칭되는 메모."""
    return "Crew reported a safety incident and a delivery delay today"


@pytest.fixture
def sample_draft(sample_notes: str) -> LogDraft:
    """정상 케이스 draft."""
    return LogDraft(site="NB Refinery", crew_size=6, notes=sample_notes)


@pytest.fixture
def sample_response_body() -> dict:
    """정상 summarize 응답 본문."""
    return {
        "summary": (
            "Date: 2024-01-15\nSite: NB Refinery\nCrew: 6\n"
            "Summary: Crew reported a safety incident and a delivery delay today..."
        ),
        "labels": ["Delay", "Safety", "Delivery"],
        "status": "ok",
    }


# =============================================================================
# Transport Fixtures
# =============================================================================


@pytest.fixture
def failing_transport() -> httpx.MockTransport:
    """항상 연결 실패하는 transport."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    return httpx.MockTransport(handler)
