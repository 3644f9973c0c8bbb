"""
Domain Constants: 변환 클라이언트 전역 상수.

HTTP 계약, 사용자 표시 문자열 등 시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# HTTP Contract (변환 서비스 계약)
# =============================================================================
# POST /convert
#   요청: {"text": "<input>"}
#   응답: {"converted_text": "<result>"}

CONVERT_PATH = "/convert"
JSON_CONTENT_TYPE = "application/json"

REQUEST_TEXT_KEY = "text"
RESPONSE_TEXT_KEY = "converted_text"

# =============================================================================
# User-facing Messages (출력 필드 문자열)
# =============================================================================
# 두 문자열은 반드시 서로 달라야 함 (fallback vs error 구분)

# 성공 응답이지만 converted_text가 없을 때
FALLBACK_MESSAGE = "변환 실패"

# 전송 실패, non-2xx, JSON 파싱 실패 등 모든 에러
GENERIC_ERROR_MESSAGE = "오류 발생: 변환에 실패했습니다."

# =============================================================================
# Run Modes (실행 모드)
# =============================================================================

MODE_DEV = "dev"
MODE_PROD = "prod"
VALID_MODES = (MODE_DEV, MODE_PROD)

DEFAULT_BASE_URLS = {
    MODE_DEV: "https://127.0.0.1:443",
    MODE_PROD: "https://badang.xyz",
}

# =============================================================================
# Environment Variables (환경변수 override)
# =============================================================================

ENV_MODE = "HANGUL_MODE"
ENV_SERVICE_URL = "HANGUL_SERVICE_URL"
ENV_TIMEOUT = "HANGUL_TIMEOUT"
ENV_LOG_LEVEL = "HANGUL_LOG_LEVEL"
