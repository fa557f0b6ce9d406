"""Chat-related Pydantic schemas."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

# {"role": ..., "content": ...} 형태지만 게이트웨이는 내용을 검증하지 않고 그대로 전달
ChatMessage = Dict[str, Any]


class ChatRequest(BaseModel):
    messages: List[Any] = Field(..., description="대화 메시지 목록")


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str


class Identity(BaseModel):
    user_id: str


class CompletionResult(BaseModel):
    text: str
