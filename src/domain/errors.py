"""
Error definitions for the conversion client.

에러 분류:
- TransportError: 네트워크 실패, non-2xx 상태
- DecodeError: 응답 본문이 JSON이 아님
- (semantic-empty는 예외가 아님 → fallback 문자열 경로)

convert()는 TransportError/DecodeError를 내부에서 잡아 일반 에러 문자열로
합친다. 호출자에게 전파되는 것은 ConfigError(시작 시 설정 오류)뿐.
"""

from typing import Any


class ConversionError(Exception):
    """
    변환 요청/응답 처리 중 발생하는 에러.

    Usage:
        raise TransportError("HTTP_STATUS_ERROR", "서버 요청에 실패했습니다.", status_code=500)
    """

    def __init__(self, code: str, message: str, **context: Any) -> None:
        self.code = code
        self.message = message
        self.context = context
        super().__init__(f"[{code}] {message}")

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            "message": self.message,
            **self.context,
        }


class TransportError(ConversionError):
    """네트워크 또는 HTTP 상태 에러."""
    pass


class DecodeError(ConversionError):
    """응답 본문 디코딩 에러."""
    pass


class ConfigError(Exception):
    """설정 에러 (알 수 없는 모드, 잘못된 timeout/로그 레벨 등)."""

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in context.items())
        super().__init__(f"[{code}] {ctx_str}" if ctx_str else f"[{code}]")


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Transport ===
    TRANSPORT_FAILED = "TRANSPORT_FAILED"
    HTTP_STATUS_ERROR = "HTTP_STATUS_ERROR"

    # === Decode ===
    DECODE_FAILED = "DECODE_FAILED"

    # === Config ===
    UNKNOWN_MODE = "UNKNOWN_MODE"
    INVALID_LOG_LEVEL = "INVALID_LOG_LEVEL"
    INVALID_TIMEOUT = "INVALID_TIMEOUT"
