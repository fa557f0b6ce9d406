"""AI chat gateway request pipeline.

Each request walks the same fixed sequence of gates:
method -> OpenAI key -> authentication -> body -> completion.
The first gate that fails decides the response; nothing after it runs.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable

from pydantic import ValidationError as PydanticValidationError

from chat_gateway.core.config import Settings
from chat_gateway.core.exceptions import (
    AppError,
    ConfigurationError,
    InternalError,
    MethodNotAllowedError,
    ValidationError,
)
from chat_gateway.domain.completion import PROVIDER_NAME, complete
from chat_gateway.domain.identity import verify_bearer
from chat_gateway.schemas.chat import ChatRequest, ChatResponse, ErrorResponse

logger = logging.getLogger(__name__)

PREFLIGHT_METHOD = "OPTIONS"
SUBMIT_METHOD = "POST"
PREFLIGHT_BODY = "ok"

MESSAGES_REQUIRED_MESSAGE = "messages array is required"
MISSING_API_KEY_MESSAGE = (
    f"{PROVIDER_NAME} API key not configured. Set OPENAI_API_KEY in the gateway environment."
)

BodyReader = Callable[[], Awaitable[bytes]]


@dataclass(frozen=True)
class GatewayResult:
    """Outcome of one gateway request.

    ``content`` is the JSON payload, or the plain acknowledgement text for
    a preflight request.
    """

    status_code: int
    content: dict[str, Any] | str

    @property
    def is_preflight(self) -> bool:
        return isinstance(self.content, str)

    @classmethod
    def preflight(cls) -> "GatewayResult":
        return cls(status_code=200, content=PREFLIGHT_BODY)

    @classmethod
    def success(cls, text: str) -> "GatewayResult":
        return cls(status_code=200, content=ChatResponse(response=text).model_dump())

    @classmethod
    def failure(cls, error: AppError) -> "GatewayResult":
        return cls(status_code=error.status_code, content=ErrorResponse(error=error.message).model_dump())


def parse_chat_request(raw: bytes) -> ChatRequest:
    """요청 본문을 ChatRequest로 변환한다. messages 배열이 없으면 ValidationError."""
    try:
        return ChatRequest.model_validate(json.loads(raw))
    except (ValueError, PydanticValidationError) as e:
        logger.debug("[GATEWAY] 잘못된 요청 본문: %s", e)
        raise ValidationError(MESSAGES_REQUIRED_MESSAGE) from e


async def _process(settings: Settings, authorization: str | None, read_body: BodyReader) -> GatewayResult:
    if not settings.openai_api_key:
        raise ConfigurationError(MISSING_API_KEY_MESSAGE)

    identity = await verify_bearer(settings, authorization)
    logger.info("[GATEWAY] 인증 완료 (user_id=%s)", identity.user_id)

    request = parse_chat_request(await read_body())

    result = await complete(settings, request.messages)
    return GatewayResult.success(result.text)


async def handle_chat(
    settings: Settings,
    method: str,
    authorization: str | None,
    read_body: BodyReader,
) -> GatewayResult:
    """Run one request through the gateway and return its result.

    Never raises: application errors map to their own status, anything else
    is logged and reported as a generic internal error.
    """
    method = method.upper()
    if method == PREFLIGHT_METHOD:
        return GatewayResult.preflight()
    if method != SUBMIT_METHOD:
        return GatewayResult.failure(MethodNotAllowedError())

    try:
        return await _process(settings, authorization, read_body)
    except AppError as e:
        if e.status_code >= 500:
            logger.warning("[GATEWAY] %s (status=%d)", e.message, e.status_code)
        return GatewayResult.failure(e)
    except Exception as e:
        logger.exception("[GATEWAY] 처리되지 않은 오류: %s", e)
        return GatewayResult.failure(InternalError())
