"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from chat_gateway.core.config import Settings, get_settings
from chat_gateway.main import app
from tests.helpers import OPENAI_BASE_URL, SUPABASE_URL, VALID_TOKEN


@pytest.fixture
def settings() -> Settings:
    """환경 변수와 .env를 무시하고 모든 값이 채워진 테스트용 설정"""
    return Settings(
        _env_file=None,
        openai_api_key="sk-test",
        openai_model="gpt-4o-mini",
        openai_base_url=OPENAI_BASE_URL,
        supabase_url=SUPABASE_URL,
        supabase_service_role_key="service-role-key",
        allowed_origin="*",
        upstream_timeout=None,
    )


@pytest.fixture
def override_settings(settings):
    """get_settings 의존성을 교체한다. 다른 설정이 필요하면 반환된 함수를 다시 호출."""

    def _override(value: Settings = settings) -> Settings:
        app.dependency_overrides[get_settings] = lambda: value
        return value

    _override()
    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_settings):
    """테스트용 FastAPI 클라이언트

    사용 예시:
        def test_endpoint(client):
            response = client.options("/")
            assert response.status_code == 200
    """
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {VALID_TOKEN}"}
