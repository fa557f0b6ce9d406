"""테스트 공용 상수와 가짜 응답."""

SUPABASE_URL = "https://project.supabase.co"
SUPABASE_USER_URL = f"{SUPABASE_URL}/auth/v1/user"
OPENAI_BASE_URL = "https://api.openai.test/v1"
OPENAI_COMPLETIONS_URL = f"{OPENAI_BASE_URL}/chat/completions"

VALID_TOKEN = "valid-token"
VALID_USER = {"id": "user-123", "email": "owner@example.com", "aud": "authenticated"}

MESSAGES = [{"role": "user", "content": "hi"}]


def completion_body(content: str) -> dict:
    """OpenAI chat.completion 응답 형태"""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "gpt-4o-mini",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }
