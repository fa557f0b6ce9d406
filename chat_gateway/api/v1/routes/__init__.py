"""API v1 route modules."""

from fastapi import APIRouter

from chat_gateway.api.v1.routes import chat

router = APIRouter()

# 라우터 등록
router.include_router(chat.router)
