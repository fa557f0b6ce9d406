"""Supabase 토큰 검증 테스트."""

import httpx
import pytest
from respx import MockRouter

from chat_gateway.core.exceptions import AuthenticationError, ConfigurationError
from chat_gateway.domain.identity import MISSING_CONFIG_MESSAGE, verify_bearer
from tests.helpers import SUPABASE_USER_URL, VALID_TOKEN, VALID_USER


@pytest.mark.asyncio
async def test_verify_bearer_success(settings, respx_mock: MockRouter) -> None:
    route = respx_mock.get(SUPABASE_USER_URL).mock(return_value=httpx.Response(200, json=VALID_USER))

    identity = await verify_bearer(settings, f"Bearer {VALID_TOKEN}")

    assert identity.user_id == "user-123"
    request = route.calls.last.request
    assert request.headers["Authorization"] == f"Bearer {VALID_TOKEN}"
    assert request.headers["apikey"] == "service-role-key"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides",
    [{"supabase_url": None}, {"supabase_service_role_key": None}, {"supabase_url": ""}],
)
async def test_missing_supabase_config_is_configuration_error(
    settings, respx_mock: MockRouter, overrides
) -> None:
    """헤더를 보기 전에 설정 누락을 먼저 보고해야 한다."""
    with pytest.raises(ConfigurationError) as exc_info:
        await verify_bearer(settings.model_copy(update=overrides), None)

    assert exc_info.value.status_code == 500
    assert exc_info.value.message == MISSING_CONFIG_MESSAGE
    assert len(respx_mock.calls) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "header",
    [None, "", VALID_TOKEN, f"bearer {VALID_TOKEN}", f"Bearer{VALID_TOKEN}", f"Basic {VALID_TOKEN}"],
)
async def test_malformed_header_is_rejected_without_lookup(
    settings, respx_mock: MockRouter, header
) -> None:
    with pytest.raises(AuthenticationError) as exc_info:
        await verify_bearer(settings, header)

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Unauthorized"
    assert len(respx_mock.calls) == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(401, json={"code": 401, "msg": "invalid JWT"}),
        httpx.Response(403, json={"msg": "bad_jwt"}),
        httpx.Response(200, json={}),
        httpx.Response(200, json={"id": None}),
        httpx.Response(200, json=["not", "a", "user"]),
        httpx.Response(200, text="<html>oops</html>"),
    ],
)
async def test_rejected_token_is_authentication_error(
    settings, respx_mock: MockRouter, response
) -> None:
    respx_mock.get(SUPABASE_USER_URL).mock(return_value=response)

    with pytest.raises(AuthenticationError):
        await verify_bearer(settings, "Bearer expired-token")


@pytest.mark.asyncio
async def test_transport_failure_is_authentication_error(settings, respx_mock: MockRouter) -> None:
    respx_mock.get(SUPABASE_USER_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(AuthenticationError):
        await verify_bearer(settings, f"Bearer {VALID_TOKEN}")


@pytest.mark.asyncio
async def test_one_lookup_per_call(settings, respx_mock: MockRouter) -> None:
    """토큰을 캐시하지 않으므로 호출마다 Supabase를 한 번씩 조회한다."""
    route = respx_mock.get(SUPABASE_USER_URL).mock(return_value=httpx.Response(200, json=VALID_USER))

    await verify_bearer(settings, f"Bearer {VALID_TOKEN}")
    await verify_bearer(settings, f"Bearer {VALID_TOKEN}")

    assert route.call_count == 2
