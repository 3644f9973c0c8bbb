"""
Conversion Client: 변환 서비스 호출 + 결과 표시.

한 번의 request → response → render 흐름:
1. 입력 → ConversionRequest
2. POST /convert (JSON)
3. non-2xx → 일반 에러 문자열
4. 본문 JSON 파싱 → ConversionResponse
5. converted_text 있으면 결과, 없으면 fallback 문자열

에러 정책:
- 전송/상태/디코딩 에러는 모두 내부에서 잡아 일반 에러 문자열로 합침
- 호출자에게 예외 전파 없음
- 재시도 없음, 자체 타임아웃 없음 (transport 설정을 따름)
"""

import logging
from typing import Any

import httpx

from src.app.services.binding import UIBinding
from src.core.config import ClientSettings
from src.domain.constants import (
    CONVERT_PATH,
    FALLBACK_MESSAGE,
    GENERIC_ERROR_MESSAGE,
    JSON_CONTENT_TYPE,
)
from src.domain.errors import ConversionError, DecodeError, ErrorCodes, TransportError
from src.domain.schemas import (
    ConversionOutcome,
    ConversionRequest,
    ConversionResponse,
    OutcomeStatus,
)

logger = logging.getLogger(__name__)


class ConversionClient:
    """
    변환 서비스 HTTP 클라이언트.

    Usage:
        async with ConversionClient("https://127.0.0.1:443") as client:
            outcome = await client.convert("annyeonghaseyo")

    호출마다 독립적이다. 같은 바인딩에 동시 호출 시 마지막 쓰기가 남는다
    (취소/순서 보장 없음).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float | None = None,
        verify_tls: bool = True,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Args:
            base_url: 변환 서비스 URL (예: https://badang.xyz)
            timeout: 요청 타임아웃(초). None이면 httpx 기본값
            verify_tls: TLS 인증서 검증 여부
            http_client: 주입할 AsyncClient (테스트용). 주입 시 닫지 않음
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_tls = verify_tls
        self._client = http_client
        self._owns_client = http_client is None

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> "ConversionClient":
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout,
            verify_tls=settings.verify_tls,
            http_client=http_client,
        )

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{CONVERT_PATH}"

    def _get_client(self) -> httpx.AsyncClient:
        """httpx 클라이언트 (lazy init)."""
        if self._client is None:
            kwargs: dict[str, Any] = {"verify": self.verify_tls}
            if self.timeout is not None:
                kwargs["timeout"] = self.timeout
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def aclose(self) -> None:
        """소유한 클라이언트만 닫는다."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ConversionClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # =========================================================================
    # Request / Response
    # =========================================================================

    async def _post(self, request: ConversionRequest) -> httpx.Response:
        """
        POST /convert.

        Raises:
            TransportError: 네트워크 실패, 타임아웃, non-2xx 상태
        """
        try:
            response = await self._get_client().post(
                self.endpoint,
                json=request.to_dict(),
                headers={"Content-Type": JSON_CONTENT_TYPE},
            )
        except httpx.HTTPError as e:
            raise TransportError(
                ErrorCodes.TRANSPORT_FAILED,
                "서버에 연결할 수 없습니다.",
                url=self.endpoint,
                error_type=type(e).__name__,
            ) from e

        # 본문 내용은 확인하지 않는다
        if not response.is_success:
            raise TransportError(
                ErrorCodes.HTTP_STATUS_ERROR,
                "서버 요청에 실패했습니다.",
                url=self.endpoint,
                status_code=response.status_code,
            )

        return response

    def _decode(self, response: httpx.Response) -> ConversionResponse:
        """
        응답 본문 → ConversionResponse.

        객체가 아닌 JSON(배열, 문자열, 숫자)은 converted_text 없음으로 처리.

        Raises:
            DecodeError: JSON이 아니거나 본문이 null
        """
        try:
            data = response.json()
        except ValueError as e:
            raise DecodeError(
                ErrorCodes.DECODE_FAILED,
                "응답이 JSON 형식이 아닙니다.",
                status_code=response.status_code,
            ) from e

        if data is None:
            raise DecodeError(
                ErrorCodes.DECODE_FAILED,
                "응답 본문이 null입니다.",
                status_code=response.status_code,
            )

        if not isinstance(data, dict):
            return ConversionResponse(converted_text=None)

        return ConversionResponse.from_dict(data)

    # =========================================================================
    # Public API
    # =========================================================================

    async def convert(self, text: str) -> ConversionOutcome:
        """
        입력 문자열 변환.

        Args:
            text: 입력값 (빈 문자열 허용, 검증 없음)

        Returns:
            ConversionOutcome (converted / fallback / error 중 하나)
        """
        request = ConversionRequest(text=text)

        try:
            response = await self._post(request)
            payload = self._decode(response)
        except ConversionError as e:
            logger.error(f"Conversion failed: {e}", extra={"error": e.to_dict()})
            return ConversionOutcome(OutcomeStatus.ERROR, GENERIC_ERROR_MESSAGE)
        except Exception as e:
            logger.error(f"Conversion failed unexpectedly: {e}", exc_info=True)
            return ConversionOutcome(OutcomeStatus.ERROR, GENERIC_ERROR_MESSAGE)

        if payload.converted_text is None:
            logger.warning("Response has no converted_text, using fallback")
            return ConversionOutcome(OutcomeStatus.FALLBACK, FALLBACK_MESSAGE)

        return ConversionOutcome(OutcomeStatus.CONVERTED, payload.converted_text)

    async def convert_field(self, binding: UIBinding) -> ConversionOutcome:
        """
        바인딩의 입력 필드를 읽어 변환하고 출력 필드에 한 번 쓴다.

        에러 로그는 출력 필드 갱신 전에 남는다.
        """
        outcome = await self.convert(binding.read_input())
        binding.write_output(outcome.text)
        return outcome
