import logging

import httpx

from chat_gateway.core.config import Settings
from chat_gateway.core.exceptions import AuthenticationError, ConfigurationError
from chat_gateway.schemas.chat import Identity

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
MISSING_CONFIG_MESSAGE = "Missing SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY secret"


async def get_supabase_user(settings: Settings, access_token: str) -> dict | None:
    """Supabase Auth에 토큰을 넘겨 사용자 정보를 조회한다. 실패하면 None."""
    url = f"{settings.supabase_url.rstrip('/')}/auth/v1/user"
    headers = {
        "apikey": settings.supabase_service_role_key,
        "Authorization": f"Bearer {access_token}",
    }

    try:
        async with httpx.AsyncClient(timeout=settings.upstream_timeout) as client:
            res = await client.get(url, headers=headers)
    except httpx.HTTPError as e:
        logger.warning("[AUTH] Supabase 요청 실패: %s", e)
        return None

    if res.status_code != 200:
        logger.warning("[AUTH] 토큰 거부 (status=%d)", res.status_code)
        return None

    try:
        return res.json()
    except ValueError:
        logger.warning("[AUTH] Supabase 응답이 JSON이 아님")
        return None


async def verify_bearer(settings: Settings, authorization: str | None) -> Identity:
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise ConfigurationError(MISSING_CONFIG_MESSAGE)

    if authorization is None or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError()

    token = authorization[len(BEARER_PREFIX):]
    user = await get_supabase_user(settings, token)

    user_id = user.get("id") if isinstance(user, dict) else None
    if not user_id:
        raise AuthenticationError()

    logger.debug("[AUTH] 사용자 확인 완료 (user_id=%s)", user_id)
    return Identity(user_id=str(user_id))
