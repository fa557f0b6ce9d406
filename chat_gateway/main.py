"""FastAPI application entry point."""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from chat_gateway import __version__
from chat_gateway.api.v1.routes import router as v1_router
from chat_gateway.core.config import get_settings
from chat_gateway.core.exceptions import (
    AppError,
    app_exception_handler,
    general_exception_handler,
    http_exception_handler,
)
from chat_gateway.core.logging import setup_logging

settings = get_settings()

# 로깅 설정
setup_logging(settings)

# FastAPI 앱 생성
app = FastAPI(
    title="AI Chat Gateway",
    description="Supabase 인증 기반 OpenAI 채팅 게이트웨이",
    version=__version__,
)

# 예외 핸들러 등록
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(AppError, app_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)


@app.get("/health", tags=["health"])
async def health_check():
    """헬스 체크 엔드포인트"""
    return {
        "status": "healthy",
        "version": __version__,
        "debug": settings.debug,
    }


# API 라우터 등록
app.include_router(v1_router, prefix=settings.api_prefix)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "chat_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
