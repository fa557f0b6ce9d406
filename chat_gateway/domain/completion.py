"""OpenAI Chat Completions client."""

from __future__ import annotations

import logging
from typing import Any, Sequence

import httpx

from chat_gateway.core.config import Settings
from chat_gateway.core.exceptions import UpstreamError
from chat_gateway.schemas.chat import ChatMessage, CompletionResult

logger = logging.getLogger(__name__)

PROVIDER_NAME = "OpenAI"

# 생성 파라미터는 설정으로 바꿀 수 없는 고정값
MAX_TOKENS = 500
TEMPERATURE = 0.7

FALLBACK_RESPONSE = "No response generated."


def extract_first_choice(data: Any) -> str:
    """Return choices[0].message.content, or the fallback text if any level is missing."""
    if not isinstance(data, dict):
        return FALLBACK_RESPONSE

    choices = data.get("choices")
    if not isinstance(choices, list) or not choices:
        return FALLBACK_RESPONSE

    first = choices[0]
    message = first.get("message") if isinstance(first, dict) else None
    content = message.get("content") if isinstance(message, dict) else None

    # 응답은 {response: string} 이므로 문자열이 아닌 content도 fallback
    if not isinstance(content, str):
        return FALLBACK_RESPONSE
    return content


async def complete(settings: Settings, messages: Sequence[ChatMessage]) -> CompletionResult:
    """Send the conversation to OpenAI once and return the first choice text.

    Raises:
        UpstreamError: OpenAI가 2xx 이외의 상태 코드로 응답한 경우.
            응답 본문은 로그에만 남기고 호출자에게는 상태 코드만 전달한다.
    """
    url = f"{settings.openai_base_url.rstrip('/')}/chat/completions"
    payload: dict[str, Any] = {
        "model": settings.openai_model,
        "messages": list(messages),
        "max_tokens": MAX_TOKENS,
        "temperature": TEMPERATURE,
    }

    logger.info("[COMPLETION] 요청 (model=%s, messages=%d)", settings.openai_model, len(payload["messages"]))

    async with httpx.AsyncClient(timeout=settings.upstream_timeout) as client:
        res = await client.post(
            url,
            json=payload,
            headers={"Authorization": f"Bearer {settings.openai_api_key}"},
        )

    if not res.is_success:
        logger.error("[COMPLETION] %s API error (status=%d): %s", PROVIDER_NAME, res.status_code, res.text)
        raise UpstreamError(PROVIDER_NAME, res.status_code)

    text = extract_first_choice(res.json())
    logger.info("[COMPLETION] 응답 수신 (길이=%d)", len(text))
    return CompletionResult(text=text)
