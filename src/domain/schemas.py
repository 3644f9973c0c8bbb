"""
Data schemas for the conversion client.

요청/응답은 한 번의 request/response 사이클 동안만 존재한다.
영속 상태 없음.
"""

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.domain.constants import REQUEST_TEXT_KEY, RESPONSE_TEXT_KEY


class OutcomeStatus(str, Enum):
    """
    convert() 종료 상태.

    converted: 변환 결과 표시
    fallback: 성공 응답이지만 converted_text 없음
    error: 전송/상태/디코딩 실패
    """
    CONVERTED = "converted"
    FALLBACK = "fallback"
    ERROR = "error"


@dataclass
class ConversionRequest:
    """변환 요청. 입력 검증 없음 (빈 문자열 허용)."""
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {REQUEST_TEXT_KEY: self.text}


@dataclass
class ConversionResponse:
    """
    변환 응답.

    converted_text가 없거나 falsy(None, "", 0, false)면 None으로 정규화.
    문자열이 아닌 값은 JSON 표기 그대로 표시 (123 → "123", true → "true").
    """
    converted_text: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ConversionResponse":
        value = data.get(RESPONSE_TEXT_KEY)
        if not value:
            return cls(converted_text=None)
        if isinstance(value, str):
            return cls(converted_text=value)
        return cls(converted_text=json.dumps(value, ensure_ascii=False))


@dataclass
class ConversionOutcome:
    """convert() 결과: 출력 필드에 쓰인 문자열 + 종료 상태."""
    status: OutcomeStatus
    text: str

    @property
    def ok(self) -> bool:
        return self.status is OutcomeStatus.CONVERTED

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status.value,
            "text": self.text,
        }
