"""CORS configuration."""

ALLOWED_HEADERS = "authorization, x-client-info, apikey, content-type"


def cors_headers(allowed_origin: str) -> dict[str, str]:
    """Build the cross-origin headers attached to every gateway response.

    CORS(Cross-Origin Resource Sharing) 설정:
    - allowed_origin: ALLOWED_ORIGIN 환경 변수, 기본값은 모든 출처("*")
    - allowed_headers: 프론트엔드 Supabase 클라이언트가 보내는 요청 헤더

    Preflight requests are answered by the gateway route itself instead of
    CORSMiddleware, so these headers are set explicitly on each response.
    """
    return {
        "Access-Control-Allow-Origin": allowed_origin,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }
