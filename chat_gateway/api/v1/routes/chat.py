from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from chat_gateway.core.config import Settings, get_settings
from chat_gateway.core.cors import cors_headers
from chat_gateway.domain.gateway import GatewayResult, handle_chat
from chat_gateway.schemas.chat import ChatRequest, ChatResponse, ErrorResponse

router = APIRouter(tags=["chat"])

# POST 이외의 메소드도 같은 핸들러가 preflight/405 응답을 직접 만든다 (문서에는 POST만 노출)
# 여기 없는 메소드(TRACE 등)는 http_exception_handler가 같은 405 응답으로 처리
OTHER_METHODS = ["GET", "HEAD", "PUT", "PATCH", "DELETE", "OPTIONS"]


def render(result: GatewayResult, settings: Settings) -> Response:
    headers = cors_headers(settings.allowed_origin)
    if result.is_preflight:
        return PlainTextResponse(result.content, status_code=result.status_code, headers=headers)
    return JSONResponse(result.content, status_code=result.status_code, headers=headers)


# AI 채팅 프록시 (Supabase 인증 -> OpenAI)
@router.api_route("/", methods=OTHER_METHODS, include_in_schema=False)
@router.post(
    "/",
    summary="AI 채팅",
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ChatRequest.model_json_schema()}},
        }
    },
    responses={
        200: {"model": ChatResponse},
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def ai_chat(request: Request, settings: Settings = Depends(get_settings)) -> Response:
    result = await handle_chat(
        settings,
        method=request.method,
        authorization=request.headers.get("authorization"),
        read_body=request.body,
    )
    return render(result, settings)
